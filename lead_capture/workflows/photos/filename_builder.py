from __future__ import annotations
import re
from datetime import datetime
from typing import Optional

from lead_capture.utils.dates import file_timestamp

__all__ = ["build_photo_filename", "safe_name_segment"]

_UNSAFE = re.compile(r"[^a-zA-Z0-9_-]")


def safe_name_segment(last_name: Optional[str], first_name: Optional[str]) -> str:
    raw = f"{last_name or 'Unknown'}_{first_name or 'Lead'}"
    return _UNSAFE.sub("", raw)


def build_photo_filename(
    last_name: Optional[str],
    first_name: Optional[str],
    category: str,
    extension: str = "jpg",
    when: Optional[datetime] = None,
) -> str:
    """LastName_FirstName_card_2026-02-18T14-30.jpg"""
    return f"{safe_name_segment(last_name, first_name)}_{category}_{file_timestamp(when)}.{extension}"
