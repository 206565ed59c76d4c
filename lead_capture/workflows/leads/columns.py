"""Column layouts of the lead tracking sheet.

The mapper writes positionally, so a deployed sheet's header row must match
one of these layouts exactly and never be reordered.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

__all__ = [
    "Column",
    "SheetSchema",
    "CORE_COLUMNS",
    "QUALIFICATION_COLUMNS",
    "PHOTO_COLUMNS",
    "SCHEMAS",
    "get_schema",
    "CARD_PHOTO",
    "BADGE_PHOTO",
]

CARD_PHOTO = "card_photo_link"
BADGE_PHOTO = "badge_photo_link"


@dataclass(frozen=True)
class Column:
    header: str
    field: str


CORE_COLUMNS: Tuple[Column, ...] = (
    Column("Timestamp", "timestamp"),                              # A
    Column("AE Owner", "ae_owner"),                                # B
    Column("First Name", "first_name"),                            # C
    Column("Last Name", "last_name"),                              # D
    Column("Title", "title"),                                      # E
    Column("Company", "company"),                                  # F
    Column("Website", "website"),                                  # G
    Column("Email", "email"),                                      # H
    Column("Phone", "phone"),                                      # I
    Column("Products Discussed", "products_discussed"),            # J
    Column("Demo Given", "demo_given"),                            # K
    Column("Meeting Quality (1-5)", "meeting_quality"),            # L
    Column("Conversation Summary", "conversation_summary"),        # M
    Column("Pain Points", "pain_points"),                          # N
    Column("Next Steps", "next_steps"),                            # O
    Column("Capture Method", "capture_method"),                    # P
    Column("Intent Level", "intent_level"),                        # Q
    Column("Scenario", "scenario"),                                # R
    Column("Lifecycle Stage", "lifecycle_stage"),                  # S
)

QUALIFICATION_COLUMNS: Tuple[Column, ...] = (
    Column("Previous PRAY.COM Interactions", "previous_interactions"),  # T
    Column("Organization Description", "org_description"),         # U
    Column("NRB Role", "nrb_role"),                                # V
    Column("Estimated Revenue Range", "revenue_range"),            # W
    Column("NRB Exhibitor Booth", "nrb_booth"),                    # X
    Column("Distribution Channels", "distribution_channels"),      # Y
    Column("Competitor Signals", "competitor_signals"),            # Z
    Column("Donation Tools in Use", "donation_tools"),             # AA
    Column("Podcast Link", "podcast_link"),                        # AB
    Column("NRB Speaking Sessions", "nrb_sessions"),               # AC
)

PHOTO_COLUMNS: Tuple[Column, ...] = (
    Column("Card Photo Link", CARD_PHOTO),
    Column("Badge Photo Link", BADGE_PHOTO),
)


@dataclass(frozen=True)
class SheetSchema:
    name: str
    columns: Tuple[Column, ...]

    def __len__(self) -> int:
        return len(self.columns)

    @property
    def headers(self) -> List[str]:
        return [c.header for c in self.columns]

    @property
    def fields(self) -> List[str]:
        return [c.field for c in self.columns]

    def index_of(self, field: str) -> int:
        """0-based position of `field`, or -1 when this layout has no such column."""
        for i, c in enumerate(self.columns):
            if c.field == field:
                return i
        return -1

    def col(self, field: str) -> int:
        """1-based sheet column number of `field`."""
        idx = self.index_of(field)
        if idx < 0:
            raise KeyError(f"Column '{field}' is not part of the '{self.name}' layout")
        return idx + 1


SCHEMAS: Dict[str, SheetSchema] = {
    "extended": SheetSchema("extended", CORE_COLUMNS + QUALIFICATION_COLUMNS + PHOTO_COLUMNS),
    "core": SheetSchema("core", CORE_COLUMNS + PHOTO_COLUMNS),
}


def get_schema(name: str) -> SheetSchema:
    try:
        return SCHEMAS[(name or "").strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown sheet schema '{name}'. Expected one of: {', '.join(SCHEMAS)}")
