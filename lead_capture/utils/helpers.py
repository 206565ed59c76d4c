from __future__ import annotations
import json
from typing import Any

__all__ = [
    "ensure_str",
    "to_cell",
]


def ensure_str(value: Any) -> str:
    """Return a safe string representation ("" for None)."""
    if value is None:
        return ""
    return str(value)


def to_cell(value: Any) -> str:
    """Render an inbound JSON scalar as a sheet cell.

    null and false render as "", true as "TRUE", lists (multi-selects) as
    ", "-joined cells, objects as JSON, everything else via str().
    """
    if isinstance(value, (list, tuple)):
        return ", ".join(c for c in (to_cell(v) for v in value) if c)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False)
    if value is None or value is False:
        return ""
    if value is True:
        return "TRUE"
    return str(value)
