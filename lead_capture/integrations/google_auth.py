"""Google credentials for the Sheets and Drive clients.

Two modes are supported:
  - Authorized-user token (Creds/token.json), produced once by `lead-capture authorize`.
    Files and folders are then owned by that user, like a script deployed "as me".
  - Service account key (Creds/service_account.json) for headless deployments.
    The spreadsheet must be shared with the service account's email.

The token is preferred when it exists.
"""
from __future__ import annotations
import os
from typing import List, Optional

from google.auth.transport.requests import Request
from google.oauth2 import service_account
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from lead_capture.config import Settings
from lead_capture.utils.logger import get_logger

logger = get_logger("lead_capture.auth")


def _ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _save_token(creds: Credentials, token_path: str) -> None:
    _ensure_parent_dir(token_path)
    with open(token_path, "w", encoding="utf-8") as token_file:
        token_file.write(creds.to_json())


def _load_user_creds(token_path: str, scopes: List[str]) -> Optional[Credentials]:
    if not os.path.exists(token_path):
        return None
    creds = Credentials.from_authorized_user_file(token_path, scopes)
    if creds.valid:
        return creds
    if creds.expired and creds.refresh_token:
        logger.info("Refreshing Google token from %s", token_path)
        creds.refresh(Request())
        _save_token(creds, token_path)
        return creds
    logger.warning("Token at %s is invalid and cannot be refreshed; run `lead-capture authorize`", token_path)
    return None


def load_credentials(settings: Settings):
    """Return credentials for Sheets + Drive, or raise FileNotFoundError if none are configured."""
    creds = _load_user_creds(settings.token_file, settings.scopes)
    if creds is not None:
        logger.info("Using authorized-user token at %s", settings.token_file)
        return creds

    if os.path.exists(settings.service_account_file):
        logger.info("Using service account key at %s", settings.service_account_file)
        return service_account.Credentials.from_service_account_file(
            settings.service_account_file, scopes=settings.scopes
        )

    raise FileNotFoundError(
        f"No Google credentials found. Place a token at {settings.token_file} "
        f"(run `lead-capture authorize`) or a service account key at {settings.service_account_file}."
    )


def authorize(settings: Settings) -> Credentials:
    """Run the OAuth consent flow for every scope the service needs and cache the token."""
    if not os.path.exists(settings.oauth_client_json):
        raise FileNotFoundError(
            f"OAuth client credentials not found at {settings.oauth_client_json}. "
            f"Set GOOGLE_OAUTH_CLIENT_JSON or place credentials there."
        )
    flow = InstalledAppFlow.from_client_secrets_file(settings.oauth_client_json, settings.scopes)
    creds = flow.run_local_server(port=0)
    _save_token(creds, settings.token_file)
    logger.info("✅ Google authorized for Sheets + Drive; token saved to %s", settings.token_file)
    return creds
