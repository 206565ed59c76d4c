from __future__ import annotations
from typing import Any, Dict, Optional

from lead_capture.integrations.drive_client import DriveClient
from lead_capture.integrations.sheets_client import LeadTable
from lead_capture.utils.logger import get_logger
from lead_capture.workflows.leads.columns import SheetSchema
from lead_capture.workflows.leads.meeting_status import update_meeting_status
from lead_capture.workflows.leads.models import LeadSubmission, MeetingUpdate
from lead_capture.workflows.leads.row_mapper import map_row
from lead_capture.workflows.leads.search import MAX_RESULTS, search_leads
from lead_capture.workflows.leads.sheet_writer import append_lead
from lead_capture.workflows.photos.photo_store import looks_like_photo, save_photo
from lead_capture.workflows.result import Result

logger = get_logger("lead_capture.leads")

__all__ = ["LeadService"]


class LeadService:
    """The three lead operations over one sheet, one Drive and one column layout."""

    def __init__(self, table: LeadTable, drive: Optional[DriveClient], schema: SheetSchema, folder_name: str):
        self.table = table
        self.drive = drive
        self.schema = schema
        self.folder_name = folder_name

    def _photo(self, data_uri: str, lead: LeadSubmission, category: str) -> str:
        if not looks_like_photo(data_uri):
            return ""
        if self.drive is None:
            return "PHOTO_ERROR: Drive client is not configured"
        return save_photo(self.drive, data_uri, lead.first_name, lead.last_name, category, self.folder_name)

    def submit(self, payload: Dict[str, Any]) -> Result:
        try:
            lead = LeadSubmission.model_validate(payload)
            logger.info("📥 Lead received: %s %s (%s)", lead.first_name, lead.last_name, lead.company)
            card_url = self._photo(lead.business_card_photo, lead, "card")
            badge_url = self._photo(lead.badge_photo, lead, "badge")
            row = map_row(lead, self.schema, card_url, badge_url)
            row_number = append_lead(self.table, row)
        except Exception as e:
            logger.exception("❌ Lead submission failed")
            return Result.failure(e)
        return Result.success({"row": row_number})

    def search(self, query: str) -> Result:
        try:
            results = search_leads(self.table, query, self.schema, MAX_RESULTS)
        except Exception as e:
            logger.exception("❌ Search failed for '%s'", query)
            return Result.failure(e)
        return Result.success([r.model_dump() for r in results])

    def update_meeting(self, payload: Dict[str, Any]) -> Result:
        try:
            update = MeetingUpdate.model_validate(payload)
        except Exception as e:
            logger.error("❌ Bad meeting update payload: %s", e)
            return Result.failure(e)
        return update_meeting_status(self.table, update, self.schema)
