from __future__ import annotations
from typing import List, Protocol, Sequence

import gspread
from gspread.utils import a1_to_rowcol

from lead_capture.config import Settings
from lead_capture.utils.helpers import ensure_str
from lead_capture.utils.logger import get_logger

logger = get_logger("lead_capture.sheets")

__all__ = ["LeadTable", "SheetTable", "open_lead_table"]


class LeadTable(Protocol):
    """Positional access to the lead tracking table. Rows and columns are 1-indexed."""

    def append_row(self, values: Sequence[str]) -> int:
        ...

    def read_cell(self, row: int, col: int) -> str:
        ...

    def write_cell(self, row: int, col: int, value: str) -> None:
        ...

    def read_all(self) -> List[List[str]]:
        ...


def _row_from_updated_range(updated_range: str) -> int:
    # e.g. "Leads!A12:AE12" -> 12
    first_cell = updated_range.split("!")[-1].split(":")[0]
    row, _ = a1_to_rowcol(first_cell)
    return row


class SheetTable:
    """LeadTable backed by a gspread worksheet."""

    def __init__(self, worksheet: gspread.Worksheet):
        self.ws = worksheet

    def append_row(self, values: Sequence[str]) -> int:
        # RAW keeps phone numbers and "+"/"=" prefixed text from being parsed as numbers or formulas
        resp = self.ws.append_row(
            list(values),
            value_input_option="RAW",
            insert_data_option="INSERT_ROWS",
            table_range="A1",
        )
        updated_range = (resp or {}).get("updates", {}).get("updatedRange")
        if updated_range:
            return _row_from_updated_range(updated_range)
        # Fallback: count populated rows in column A
        return len(self.ws.col_values(1))

    def read_cell(self, row: int, col: int) -> str:
        return ensure_str(self.ws.cell(row, col).value)

    def write_cell(self, row: int, col: int, value: str) -> None:
        self.ws.update_cell(row, col, value)

    def read_all(self) -> List[List[str]]:
        return self.ws.get_all_values()


def open_lead_table(client: gspread.Client, settings: Settings) -> SheetTable:
    """Open the configured tab, falling back to the first worksheet when it is missing."""
    if not settings.sheet_id:
        raise RuntimeError("LEAD_SHEET_ID is not set; cannot open the lead tracking sheet.")
    spreadsheet = client.open_by_key(settings.sheet_id)
    try:
        worksheet = spreadsheet.worksheet(settings.sheet_tab)
    except gspread.exceptions.WorksheetNotFound:
        logger.warning("⚠️ Tab '%s' not found; using first worksheet", settings.sheet_tab)
        worksheet = spreadsheet.sheet1
    logger.info("📄 Opened lead sheet %s / %s", settings.sheet_id, worksheet.title)
    return SheetTable(worksheet)
