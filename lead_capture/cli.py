"""Command line entry point.

    lead-capture serve [--host H] [--port P] [--reload]
    lead-capture authorize      # one-time OAuth consent for Sheets + Drive
    lead-capture check-drive    # create/share/trash a test file in the photo folder
    lead-capture init-sheet     # write the header row to an empty lead sheet
"""
from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from lead_capture.api.dependencies import get_drive_client, get_lead_table, get_settings
from lead_capture.integrations.google_auth import authorize
from lead_capture.integrations.sheets_client import LeadTable
from lead_capture.utils.logger import get_logger
from lead_capture.workflows.leads.columns import SheetSchema, get_schema
from lead_capture.workflows.photos.photo_store import check_drive_access

logger = get_logger("lead_capture.cli")


def init_sheet(table: LeadTable, schema: SheetSchema) -> bool:
    """Write the schema's header row if the sheet is empty. False if an incompatible header exists."""
    values = table.read_all()
    if not values or not any(values[0]):
        table.append_row(schema.headers)
        logger.info("✅ Wrote %d-column '%s' header row", len(schema), schema.name)
        return True
    existing = [h.strip() for h in values[0]]
    if existing[: len(schema)] != schema.headers:
        logger.error("❌ Existing header row does not match the '%s' layout; leaving it untouched", schema.name)
        for i, (want, have) in enumerate(zip(schema.headers, existing + [""] * len(schema)), start=1):
            if want != have:
                logger.error("   column %d: expected %r, found %r", i, want, have)
        return False
    logger.info("ℹ️ Header row already matches the '%s' layout", schema.name)
    return True


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lead-capture", description="Trade-show lead capture backend")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP endpoint")
    serve.add_argument("--host", help="Server host")
    serve.add_argument("--port", type=int, help="Server port")
    serve.add_argument("--reload", action="store_true", help="Enable auto-reload")

    sub.add_parser("authorize", help="Run the Google OAuth consent flow and save the token")
    sub.add_parser("check-drive", help="Verify Drive access with a throwaway file")
    sub.add_parser("init-sheet", help="Write the header row to an empty lead sheet")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = get_settings()

    if args.command == "serve":
        import uvicorn

        logger.info("Starting lead capture server")
        uvicorn.run(
            "lead_capture.api.main:app",
            host=args.host or settings.host,
            port=args.port or settings.port,
            reload=args.reload,
        )
        return 0

    if args.command == "authorize":
        authorize(settings)
        return 0

    if args.command == "check-drive":
        try:
            check_drive_access(get_drive_client(), settings.folder_name)
        except Exception:
            logger.exception("❌ Drive check failed")
            return 1
        return 0

    if args.command == "init-sheet":
        return 0 if init_sheet(get_lead_table(), get_schema(settings.schema)) else 1

    return 2


if __name__ == "__main__":
    sys.exit(main())
