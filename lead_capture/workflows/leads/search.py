from __future__ import annotations
from typing import List, Sequence

from lead_capture.integrations.sheets_client import LeadTable
from lead_capture.utils.helpers import ensure_str
from lead_capture.utils.logger import get_logger
from lead_capture.workflows.leads.columns import SheetSchema
from lead_capture.workflows.leads.models import SearchResult

logger = get_logger("lead_capture.search")

__all__ = ["search_leads", "MAX_RESULTS"]

MAX_RESULTS = 10


def _cell(row: Sequence, idx: int) -> str:
    if idx < 0 or idx >= len(row):
        return ""
    return ensure_str(row[idx])


def search_leads(table: LeadTable, query: str, schema: SheetSchema, limit: int = MAX_RESULTS) -> List[SearchResult]:
    """Case-insensitive substring search over name, email and company.

    Rows are scanned in sheet order and the scan stops at `limit` matches,
    so later matches are never returned.
    """
    q = (query or "").lower()
    values = table.read_all()
    idx = {f: schema.index_of(f) for f in (
        "first_name", "last_name", "title", "company", "email",
        "products_discussed", "intent_level", "distribution_channels",
    )}

    results: List[SearchResult] = []
    for i, row in enumerate(values[1:], start=2):
        first = _cell(row, idx["first_name"])
        last = _cell(row, idx["last_name"])
        email = _cell(row, idx["email"])
        company = _cell(row, idx["company"])
        haystacks = (f"{first} {last}", first, last, email, company)
        if any(q in h.lower() for h in haystacks):
            results.append(SearchResult(
                row_number=i,
                first_name=first,
                last_name=last,
                title=_cell(row, idx["title"]),
                company=company,
                email=email,
                products=_cell(row, idx["products_discussed"]),
                intent_level=_cell(row, idx["intent_level"]),
                distribution_channels=_cell(row, idx["distribution_channels"]),
            ))
        if len(results) >= limit:
            break

    logger.info("🔎 Search '%s' -> %d result(s)", query, len(results))
    return results
