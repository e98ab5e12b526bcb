import argparse
import sys
from datetime import datetime
from typing import Optional

from .env import load_env, load_settings
from .record import build_record
from .storage import append_if_changed, load_log
from .youtube import get_video


def run(video_id: Optional[str] = None, data_file: Optional[str] = None,
        now: Optional[datetime] = None) -> bool:
    settings = load_settings(video_id=video_id, data_file=data_file)

    item = get_video(settings.api_key, settings.video_id)
    record = build_record(item, now=now)

    log = load_log(settings.data_file)
    appended = append_if_changed(settings.data_file, log, record)

    if appended:
        print(f"Appended metrics @ {record.timestamp}")
    else:
        print("No metric change detected; skipping append.")
    return appended


def main(argv=None):
    ap = argparse.ArgumentParser(description="Append the latest YouTube video metrics to a JSON log")
    ap.add_argument("--env-file", default=".env")
    ap.add_argument("--video-id", default=None, help="overrides VIDEO_ID")
    ap.add_argument("--data-file", default=None, help="overrides DATA_FILE")
    args = ap.parse_args(argv)

    load_env(args.env_file)

    try:
        run(video_id=args.video_id, data_file=args.data_file)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
