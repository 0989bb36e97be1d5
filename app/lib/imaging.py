# app/lib/imaging.py
from __future__ import annotations
import base64
import binascii
import io
import re
from typing import Optional

from PIL import Image

_DATAURL_RE = re.compile(r"^data:(image/[\w+.-]+);base64,(.*)$", re.IGNORECASE | re.DOTALL)

def _sniff_content_type(data: bytes) -> str:
    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if data.startswith(b"\xff\xd8"):
        return "image/jpeg"
    if data.startswith(b"GIF87a") or data.startswith(b"GIF89a"):
        return "image/gif"
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return ""  # unknown

def _b64decode(payload: str) -> bytes:
    payload = "".join(payload.split())
    missing_padding = (-len(payload)) % 4
    if missing_padding:
        payload += "=" * missing_padding
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"invalid base64: {e}") from e

def decode_image_b64(image_b64: str) -> tuple[bytes, str]:
    """
    Returns (bytes, content_type). Supports 'data:image/png;base64,...' or raw base64.
    Only PNG and JPEG are accepted.
    """
    if not image_b64 or not image_b64.strip():
        raise ValueError("empty base64")
    m = _DATAURL_RE.match(image_b64.strip())
    data = _b64decode(m.group(2) if m else image_b64.strip())
    content_type = _sniff_content_type(data)
    if content_type not in {"image/png", "image/jpeg"}:
        raise ValueError("Unsupported image format; only PNG or JPEG")
    return data, content_type

def to_data_uri(b64_payload: str, content_type: str = "image/png") -> str:
    return f"data:{content_type};base64,{b64_payload}"

def open_data_uri(image_url: Optional[str]) -> Image.Image:
    """Decode a stored panel image into a Pillow image. Raises ValueError."""
    if not image_url:
        raise ValueError("panel has no image")
    m = _DATAURL_RE.match(image_url.strip())
    if not m:
        raise ValueError("panel image is not a base64 data URI")
    try:
        img = Image.open(io.BytesIO(_b64decode(m.group(2))))
        img.load()
    except OSError as e:
        raise ValueError(f"undecodable panel image: {e}") from e
    return img
