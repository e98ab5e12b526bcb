from googleapiclient.discovery import build
from googleapiclient.errors import HttpError


def get_video(api_key: str, video_id: str) -> dict:
    """Fetch snippet + statistics for one video. Returns the first item."""
    youtube = build("youtube", "v3", developerKey=api_key, cache_discovery=False)

    try:
        response = youtube.videos().list(
            part="snippet,statistics",
            id=video_id
        ).execute()
    except HttpError as e:
        body = e.content.decode("utf-8", errors="replace") if isinstance(e.content, bytes) else str(e.content)
        raise RuntimeError(
            f"YouTube API error: {e.resp.status} {e.resp.reason}\n{body}"
        ) from e

    items = response.get("items") or []
    if not items:
        raise RuntimeError("No video found for the provided VIDEO_ID.")

    return items[0]
