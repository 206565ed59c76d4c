from __future__ import annotations
import io
from typing import Optional

from googleapiclient.discovery import build
from googleapiclient.http import MediaIoBaseUpload

from lead_capture.utils.logger import get_logger

logger = get_logger("lead_capture.drive")

FOLDER_MIME = "application/vnd.google-apps.folder"
VIEW_URL = "https://drive.google.com/file/d/{file_id}/view"


def _quote(value: str) -> str:
    # Drive query string literals escape backslash and single quote
    return value.replace("\\", "\\\\").replace("'", "\\'")


class DriveClient:
    """Light wrapper around an authenticated Drive v3 service."""

    def __init__(self, service):
        self.svc = service

    @classmethod
    def from_credentials(cls, creds) -> "DriveClient":
        return cls(build("drive", "v3", credentials=creds, cache_discovery=False))

    def find_folder(self, name: str) -> Optional[str]:
        q = f"name='{_quote(name)}' and mimeType='{FOLDER_MIME}' and trashed=false"
        res = self.svc.files().list(q=q, spaces="drive", fields="files(id, name)", pageSize=1).execute()
        files = res.get("files", [])
        return files[0]["id"] if files else None

    def ensure_folder(self, name: str) -> str:
        """Return the id of the folder called `name`, creating it if none exists.

        Two first-time callers racing here may each create a folder.
        """
        folder_id = self.find_folder(name)
        if folder_id:
            return folder_id
        created = self.svc.files().create(
            body={"name": name, "mimeType": FOLDER_MIME},
            fields="id",
        ).execute()
        logger.info("📁 Created Drive folder '%s' (%s)", name, created["id"])
        return created["id"]

    def upload(self, data: bytes, mime_type: str, file_name: str, folder_id: str) -> str:
        media = MediaIoBaseUpload(io.BytesIO(data), mimetype=mime_type, resumable=False)
        created = self.svc.files().create(
            body={"name": file_name, "parents": [folder_id]},
            media_body=media,
            fields="id",
        ).execute()
        return created["id"]

    def share_read_only(self, file_id: str) -> None:
        self.svc.permissions().create(
            fileId=file_id,
            body={"role": "reader", "type": "anyone"},
        ).execute()

    def trash(self, file_id: str) -> None:
        self.svc.files().update(fileId=file_id, body={"trashed": True}).execute()

    @staticmethod
    def view_url(file_id: str) -> str:
        return VIEW_URL.format(file_id=file_id)
