import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_DATA_FILE = "views2.json"


class Settings(BaseModel):
    api_key: str
    video_id: str
    data_file: str = DEFAULT_DATA_FILE


def load_env(path: str = ".env") -> bool:
    # variables already set in the process win over the file
    return load_dotenv(path, override=False)


def load_settings(video_id: Optional[str] = None, data_file: Optional[str] = None) -> Settings:
    api_key = os.getenv("YT_API_KEY")
    video_id = video_id or os.getenv("VIDEO_ID")

    if not api_key:
        raise RuntimeError("Missing env YT_API_KEY.")
    if not video_id:
        raise RuntimeError("Missing env VIDEO_ID.")

    return Settings(
        api_key=api_key,
        video_id=video_id,
        data_file=data_file or os.getenv("DATA_FILE") or DEFAULT_DATA_FILE,
    )
