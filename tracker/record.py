from datetime import datetime, timezone
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel

TIMEZONE = ZoneInfo("America/Santiago")
# literal suffix, not computed from the zone (DST is ignored)
UTC_OFFSET = "-03:00"

COUNTERS = ("viewCount", "likeCount", "commentCount")


class MetricRecord(BaseModel):
    timestamp: str
    id: str
    title: str = ""
    viewCount: int = 0
    likeCount: int = 0
    commentCount: int = 0


def to_count(value: Any) -> int:
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def format_timestamp(now: Optional[datetime] = None) -> str:
    """Santiago wall-clock time of `now`. A naive `now` is taken as UTC."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(TIMEZONE)
    return local.strftime("%Y-%m-%dT%H:%M:%S") + UTC_OFFSET


def build_record(item: Dict[str, Any], now: Optional[datetime] = None) -> MetricRecord:
    snippet = item.get("snippet", {}) or {}
    stats = item.get("statistics", {}) or {}

    return MetricRecord(
        timestamp=format_timestamp(now),
        id=item.get("id", ""),
        title=snippet.get("title") or "",
        viewCount=to_count(stats.get("viewCount")),
        likeCount=to_count(stats.get("likeCount")),
        commentCount=to_count(stats.get("commentCount")),
    )
