from __future__ import annotations
from typing import List, Optional

from lead_capture.utils.dates import now_iso
from lead_capture.workflows.leads.columns import BADGE_PHOTO, CARD_PHOTO, SheetSchema
from lead_capture.workflows.leads.models import LeadSubmission

__all__ = ["map_row"]


def map_row(
    lead: LeadSubmission,
    schema: SheetSchema,
    card_photo_url: str = "",
    badge_photo_url: str = "",
    timestamp: Optional[str] = None,
) -> List[str]:
    """Lay the lead out in the schema's column order; absent fields become ""."""
    photos = {CARD_PHOTO: card_photo_url or "", BADGE_PHOTO: badge_photo_url or ""}
    row: List[str] = []
    for column in schema.columns:
        if column.field in photos:
            row.append(photos[column.field])
        elif column.field == "timestamp":
            row.append(lead.timestamp or timestamp or now_iso())
        else:
            row.append(getattr(lead, column.field, "") or "")
    return row
