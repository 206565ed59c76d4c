from __future__ import annotations
from typing import Dict

from lead_capture.integrations.sheets_client import LeadTable
from lead_capture.utils.dates import now_iso
from lead_capture.utils.logger import get_logger
from lead_capture.workflows.leads.columns import SheetSchema
from lead_capture.workflows.leads.models import MeetingUpdate
from lead_capture.workflows.result import Result

logger = get_logger("lead_capture.meetings")

__all__ = ["update_meeting_status", "status_label", "PRE_BOOKED_SCENARIO"]

PRE_BOOKED_SCENARIO = "Pre-Booked Meeting"
HEADER_ROW = 1

_STATUS_LABELS: Dict[str, str] = {
    "completed": "SHOWED",
    "no_show": "NO-SHOW",
}


def status_label(meeting_status: str) -> str:
    return _STATUS_LABELS.get(meeting_status, "RESCHEDULED")


def _append(existing: str, addition: str, sep: str) -> str:
    return f"{existing}{sep}{addition}" if existing else addition


def update_meeting_status(table: LeadTable, update: MeetingUpdate, schema: SheetSchema) -> Result:
    """Record a pre-booked meeting outcome on an existing row.

    Summary and next-steps text is appended to, never replaced. Quality is
    overwritten only when a deal potential is given.
    """
    row = update.row_number
    if not row or row <= HEADER_ROW:
        return Result.failure("Invalid row number")

    label = status_label(update.meeting_status)
    stamp = update.update_timestamp or now_iso()

    try:
        summary_col = schema.col("conversation_summary")
        note = f"[Meeting {label} — {stamp}]"
        if update.meeting_notes:
            note += f" {update.meeting_notes}"
        existing_summary = table.read_cell(row, summary_col)
        table.write_cell(row, summary_col, _append(existing_summary, note, "\n"))

        if update.deal_potential:
            table.write_cell(row, schema.col("meeting_quality"), update.deal_potential)

        steps_col = schema.col("next_steps")
        status_note = f"Meeting status: {label} (updated by {update.updated_by or 'unknown'})"
        existing_steps = table.read_cell(row, steps_col)
        table.write_cell(row, steps_col, _append(existing_steps, status_note, "; "))

        table.write_cell(row, schema.col("scenario"), PRE_BOOKED_SCENARIO)
    except Exception as e:
        logger.exception("❌ Meeting update failed for row %s", row)
        return Result.failure(e)

    logger.info("📅 Row %s meeting %s (by %s)", row, label, update.updated_by or "unknown")
    return Result.success({"row": row, "meeting_status": update.meeting_status})
