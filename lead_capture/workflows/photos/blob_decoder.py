from __future__ import annotations
import base64
import re
from dataclasses import dataclass

__all__ = ["DecodedBlob", "decode_data_uri", "DEFAULT_MIME"]

DEFAULT_MIME = "image/jpeg"
_MIME_RE = re.compile(r"data:(.*?);")


@dataclass(frozen=True)
class DecodedBlob:
    data: bytes
    mime_type: str
    extension: str


def _extension_for(mime_type: str) -> str:
    parts = mime_type.split("/", 1)
    ext = parts[1] if len(parts) > 1 and parts[1] else "jpg"
    return "jpg" if ext == "jpeg" else ext


def decode_data_uri(data_uri: str) -> DecodedBlob:
    """Decode `data:<mime>;base64,<payload>` into bytes, MIME type and extension.

    The payload is not validated here. ValueError (a missing payload, or
    binascii.Error from bad padding) is left for the caller, which records
    it against the photo.
    """
    header, sep, payload = data_uri.partition(",")
    if not sep or not payload.strip():
        raise ValueError("data URI has no payload")
    m = _MIME_RE.match(header)
    mime_type = m.group(1) if m and m.group(1) else DEFAULT_MIME
    return DecodedBlob(
        data=base64.b64decode(payload),
        mime_type=mime_type,
        extension=_extension_for(mime_type),
    )
