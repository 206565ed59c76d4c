from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

__all__ = ["utc_now", "now_iso", "file_timestamp"]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def now_iso(when: Optional[datetime] = None) -> str:
    """Return UTC time in ISO-8601 with millisecond precision and a 'Z' suffix."""
    dt = (when or utc_now()).astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def file_timestamp(when: Optional[datetime] = None) -> str:
    """Filesystem-safe timestamp truncated to the minute, e.g. 2026-02-18T14-30."""
    return now_iso(when).replace(":", "-").replace(".", "-")[:16]
