from __future__ import annotations
import re
from typing import Any, ClassVar, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from lead_capture.utils.helpers import to_cell

__all__ = ["LeadSubmission", "MeetingUpdate", "SearchResult", "UPDATE_MEETING"]

UPDATE_MEETING = "update_meeting"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Fields parsed by their own validator instead of being rendered as cell text
    _non_text: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def _as_cell(cls, v: Any, info: ValidationInfo) -> Any:
        if info.field_name in cls._non_text:
            return v
        return to_cell(v)


class LeadSubmission(_Payload):
    """A new lead as posted by the capture page. Every field is optional."""

    action: str = ""
    timestamp: str = ""
    ae_owner: str = ""
    first_name: str = ""
    last_name: str = ""
    title: str = ""
    company: str = ""
    website: str = ""
    email: str = ""
    phone: str = ""
    products_discussed: str = ""
    demo_given: str = ""
    meeting_quality: str = ""
    conversation_summary: str = ""
    pain_points: str = ""
    next_steps: str = ""
    capture_method: str = ""
    intent_level: str = ""
    scenario: str = ""
    lifecycle_stage: str = ""
    previous_interactions: str = ""
    org_description: str = ""
    nrb_role: str = ""
    revenue_range: str = ""
    nrb_booth: str = ""
    distribution_channels: str = ""
    competitor_signals: str = ""
    donation_tools: str = ""
    podcast_link: str = ""
    nrb_sessions: str = ""
    business_card_photo: str = ""
    badge_photo: str = ""


class MeetingUpdate(_Payload):
    """Outcome of a pre-booked meeting for an existing row."""

    _non_text: ClassVar[FrozenSet[str]] = frozenset({"row_number"})

    action: str = UPDATE_MEETING
    row_number: Optional[int] = None
    meeting_status: str = ""
    meeting_notes: str = ""
    deal_potential: str = ""
    updated_by: str = ""
    update_timestamp: str = ""

    @field_validator("row_number", mode="before")
    @classmethod
    def _leading_int(cls, v: Any) -> Optional[int]:
        # "12", 12, 12.0 and "12th" all mean row 12; anything else is no row at all
        if v is None or isinstance(v, bool):
            return None
        m = _LEADING_INT.match(str(v))
        return int(m.group(1)) if m else None


class SearchResult(BaseModel):
    row_number: int
    first_name: str = ""
    last_name: str = ""
    title: str = ""
    company: str = ""
    email: str = ""
    products: str = ""
    intent_level: str = ""
    distribution_channels: str = ""
