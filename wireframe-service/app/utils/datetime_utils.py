"""
Timezone-aware timestamps for document metadata, error descriptors and
health responses.
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso_string(dt: Optional[datetime] = None) -> str:
    """
    ISO 8601 with millisecond precision and a 'Z' suffix.

    Example:
        >>> to_iso_string(datetime(2026, 1, 15, 10, 30, 45, 123000))
        '2026-01-15T10:30:45.123Z'
    """
    if dt is None:
        dt = utc_now()
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
