from __future__ import annotations
from typing import Sequence

from lead_capture.integrations.sheets_client import LeadTable
from lead_capture.utils.logger import get_logger

logger = get_logger("lead_capture.leads")

__all__ = ["append_lead"]


def append_lead(table: LeadTable, row: Sequence[str]) -> int:
    """Append one lead row and return its 1-indexed sheet row number."""
    row_number = table.append_row(row)
    logger.info("➕ Appended lead at row %s (%d columns)", row_number, len(row))
    return row_number
