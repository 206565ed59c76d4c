from __future__ import annotations
from functools import lru_cache
from typing import Callable

import gspread

from lead_capture.config import Settings
from lead_capture.integrations.drive_client import DriveClient
from lead_capture.integrations.google_auth import load_credentials
from lead_capture.integrations.sheets_client import SheetTable, open_lead_table
from lead_capture.workflows.leads.columns import get_schema
from lead_capture.workflows.leads.service import LeadService

ServiceProvider = Callable[[], LeadService]


# Singletons (Infrastructure), built on first use and shared by every request

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def _credentials():
    return load_credentials(get_settings())


@lru_cache(maxsize=1)
def get_lead_table() -> SheetTable:
    client = gspread.authorize(_credentials())
    return open_lead_table(client, get_settings())


@lru_cache(maxsize=1)
def get_drive_client() -> DriveClient:
    return DriveClient.from_credentials(_credentials())


def get_lead_service() -> LeadService:
    settings = get_settings()
    return LeadService(
        table=get_lead_table(),
        drive=get_drive_client(),
        schema=get_schema(settings.schema),
        folder_name=settings.folder_name,
    )


def get_service_provider() -> ServiceProvider:
    # Handlers build the service inside their own error handling, so a missing
    # credential becomes a {"status": "error"} body rather than a 500
    return get_lead_service
