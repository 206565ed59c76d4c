from __future__ import annotations
from datetime import datetime
from typing import Optional

from googleapiclient.errors import HttpError

from lead_capture.integrations.drive_client import DriveClient
from lead_capture.utils.logger import get_logger
from lead_capture.workflows.photos.blob_decoder import decode_data_uri
from lead_capture.workflows.photos.filename_builder import build_photo_filename

logger = get_logger("lead_capture.photos")

__all__ = ["save_photo", "check_drive_access", "MIN_PHOTO_LENGTH", "looks_like_photo"]

# Encoded strings this short cannot be an image; the capture page sends "" or a stub
MIN_PHOTO_LENGTH = 100


def looks_like_photo(value: Optional[str]) -> bool:
    return bool(value) and len(value) > MIN_PHOTO_LENGTH


def save_photo(
    drive: DriveClient,
    data_uri: str,
    first_name: Optional[str],
    last_name: Optional[str],
    category: str,
    folder_name: str,
    when: Optional[datetime] = None,
) -> str:
    """Upload one photo and return its viewable link.

    Never raises: a failure is returned as an "UPLOAD_ERROR: ..." or
    "PHOTO_ERROR: ..." string that goes into the link column instead.
    """
    try:
        blob = decode_data_uri(data_uri)
        file_name = build_photo_filename(last_name, first_name, category, blob.extension, when)
        folder_id = drive.ensure_folder(folder_name)

        try:
            file_id = drive.upload(blob.data, blob.mime_type, file_name, folder_id)
        except HttpError as e:
            logger.error("❌ Upload failed for %s: %s", file_name, e)
            return f"UPLOAD_ERROR: {e}"

        try:
            drive.share_read_only(file_id)
        except HttpError as e:
            # The file exists; only anonymous viewing is missing
            logger.warning("⚠️ Could not share %s (%s): %s", file_name, file_id, e)

        url = drive.view_url(file_id)
        logger.info("🖼️ Saved %s photo %s -> %s", category, file_name, url)
        return url
    except Exception as e:
        logger.exception("❌ Photo save error (%s)", category)
        return f"PHOTO_ERROR: {e}"


def check_drive_access(drive: DriveClient, folder_name: str) -> str:
    """Create, share and trash a tiny file in the photo folder. Returns the test file's link."""
    folder_id = drive.ensure_folder(folder_name)
    logger.info("Drive folder '%s' OK (%s)", folder_name, folder_id)
    file_id = drive.upload(b"test", "text/plain", "drive-test.txt", folder_id)
    drive.share_read_only(file_id)
    url = drive.view_url(file_id)
    logger.info("Test file created: %s", url)
    drive.trash(file_id)
    logger.info("✅ Test file trashed. Drive access is working.")
    return url
