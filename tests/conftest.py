"""
pytest configuration and fixtures for lead capture tests.

Google Sheets and Drive are replaced by in-memory fakes; nothing here
touches the network.
"""
import base64
from typing import Dict, List, Sequence

import pytest
from fastapi.testclient import TestClient

from lead_capture.api.dependencies import get_service_provider
from lead_capture.api.main import app
from lead_capture.workflows.leads.columns import get_schema
from lead_capture.workflows.leads.service import LeadService


class InMemoryLeadTable:
    """LeadTable fake: a list of rows, row 1 is the header."""

    def __init__(self, header: Sequence[str]):
        self.rows: List[List[str]] = [list(header)]

    def append_row(self, values: Sequence[str]) -> int:
        self.rows.append([str(v) for v in values])
        return len(self.rows)

    def read_cell(self, row: int, col: int) -> str:
        r = self.rows[row - 1]
        return r[col - 1] if col <= len(r) else ""

    def write_cell(self, row: int, col: int, value: str) -> None:
        r = self.rows[row - 1]
        while len(r) < col:
            r.append("")
        r[col - 1] = value

    def read_all(self) -> List[List[str]]:
        return [list(r) for r in self.rows]


class FakeDrive:
    """DriveClient fake recording folders, uploads and shares."""

    def __init__(self):
        self.folders: Dict[str, str] = {}
        self.files: Dict[str, dict] = {}
        self.shared: List[str] = []
        self.trashed: List[str] = []
        self.fail_upload: Exception = None
        self.fail_share: Exception = None

    def ensure_folder(self, name: str) -> str:
        if name not in self.folders:
            self.folders[name] = f"folder-{len(self.folders) + 1}"
        return self.folders[name]

    def upload(self, data: bytes, mime_type: str, file_name: str, folder_id: str) -> str:
        if self.fail_upload is not None:
            raise self.fail_upload
        file_id = f"file-{len(self.files) + 1}"
        self.files[file_id] = {"data": data, "mime_type": mime_type, "name": file_name, "folder": folder_id}
        return file_id

    def share_read_only(self, file_id: str) -> None:
        if self.fail_share is not None:
            raise self.fail_share
        self.shared.append(file_id)

    def trash(self, file_id: str) -> None:
        self.trashed.append(file_id)

    @staticmethod
    def view_url(file_id: str) -> str:
        return f"https://drive.google.com/file/d/{file_id}/view"


def make_data_uri(mime: str = "image/jpeg", size: int = 200) -> str:
    payload = base64.b64encode(b"\xff\xd8\xff" + b"\x00" * size).decode("ascii")
    return f"data:{mime};base64,{payload}"


@pytest.fixture
def schema():
    return get_schema("extended")


@pytest.fixture
def table(schema):
    return InMemoryLeadTable(schema.headers)


@pytest.fixture
def drive():
    return FakeDrive()


@pytest.fixture
def service(table, drive, schema):
    return LeadService(table=table, drive=drive, schema=schema, folder_name="Test Photos")


@pytest.fixture
def client(service):
    app.dependency_overrides[get_service_provider] = lambda: (lambda: service)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_lead():
    """Sample lead payload as posted by the capture page."""
    return {
        "timestamp": "2026-02-18T14:30:00.000Z",
        "ae_owner": "Dana",
        "first_name": "Anne",
        "last_name": "O'Brien",
        "title": "Director of Media",
        "company": "Acme Corp",
        "email": "anne@acme.example",
        "phone": "+1 615 555 0100",
        "products_discussed": "Audio Bible",
        "demo_given": "Yes",
        "meeting_quality": 4,
        "conversation_summary": "Talked podcasts.",
        "intent_level": "High",
        "distribution_channels": "Radio, Podcast",
    }
