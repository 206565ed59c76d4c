from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from lead_capture.utils.logger import get_logger

load_dotenv()

logger = get_logger("lead_capture.config")

# ===== Google API scopes =====
SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive",
]

# ===== Defaults (can be overridden by env vars) =====
DEFAULT_EVENT_NAME = "NRB 2026"
DEFAULT_SHEET_TAB = "Leads"
DEFAULT_SCHEMA = "extended"
SERVICE_ACCOUNT_FILE_DEFAULT = "Creds/service_account.json"
OAUTH_CLIENT_JSON_DEFAULT = "Creds/credentials.json"
TOKEN_FILE_DEFAULT = "Creds/token.json"
DEFAULT_PORT = 8000


def _port(raw: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning("⚠️ LEAD_CAPTURE_PORT=%r is not a number; using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT


@dataclass(frozen=True)
class Settings:
    sheet_id: str = ""
    sheet_tab: str = DEFAULT_SHEET_TAB
    schema: str = DEFAULT_SCHEMA
    event_name: str = DEFAULT_EVENT_NAME
    photo_folder: str = ""
    service_account_file: str = SERVICE_ACCOUNT_FILE_DEFAULT
    oauth_client_json: str = OAUTH_CLIENT_JSON_DEFAULT
    token_file: str = TOKEN_FILE_DEFAULT
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    scopes: List[str] = field(default_factory=lambda: list(SCOPES))

    @property
    def folder_name(self) -> str:
        return self.photo_folder or f"{self.event_name} Photos"

    @classmethod
    def from_env(cls) -> "Settings":
        event_name = os.environ.get("LEAD_EVENT_NAME", DEFAULT_EVENT_NAME)
        return cls(
            sheet_id=os.environ.get("LEAD_SHEET_ID", ""),
            sheet_tab=os.environ.get("LEAD_SHEET_TAB", DEFAULT_SHEET_TAB),
            schema=os.environ.get("LEAD_SHEET_SCHEMA", DEFAULT_SCHEMA).strip().lower(),
            event_name=event_name,
            photo_folder=os.environ.get("LEAD_PHOTO_FOLDER", ""),
            service_account_file=os.environ.get("GOOGLE_SERVICE_ACCOUNT_FILE", SERVICE_ACCOUNT_FILE_DEFAULT),
            oauth_client_json=os.environ.get("GOOGLE_OAUTH_CLIENT_JSON", OAUTH_CLIENT_JSON_DEFAULT),
            token_file=os.environ.get("GOOGLE_TOKEN_FILE", TOKEN_FILE_DEFAULT),
            host=os.environ.get("LEAD_CAPTURE_HOST", "0.0.0.0"),
            port=_port(os.environ.get("LEAD_CAPTURE_PORT", str(DEFAULT_PORT))),
        )
