"""Profile photo upload.

Photos are stored on the Resume as ``data:`` URLs so a snapshot carries
them without side files.
"""

import asyncio
import base64
import binascii
import io
from pathlib import Path
from typing import Collection

from PIL import Image, UnidentifiedImageError

from vitae.shared import UnsupportedImageError


SUPPORTED_FORMATS = {
    ".jpg",
    ".jpeg",
    ".png",
    ".webp",
    ".bmp",
    ".gif",
}


def is_supported_image(path: str) -> bool:
    return Path(path).suffix.lower() in SUPPORTED_FORMATS


def encode_photo(data: bytes, source: str = "<bytes>") -> str:
    """Return ``data`` as a base64 data URL, checking it is a readable image."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            mime = Image.MIME.get(img.format or "", "application/octet-stream")
    except UnidentifiedImageError as exc:
        raise UnsupportedImageError(source) from exc
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def decode_photo(data_url: str, formats: Collection[str] | None = None) -> bytes:
    """Inverse of :func:`encode_photo`; bare base64 is accepted too.

    When ``formats`` is given, images in any other format are re-encoded as PNG.
    """
    _, _, payload = data_url.rpartition(",")
    try:
        data = base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise UnsupportedImageError("stored photo") from exc

    try:
        with Image.open(io.BytesIO(data)) as img:
            if formats is None or img.format in formats:
                return data
            buffer = io.BytesIO()
            img.save(buffer, format="PNG")
            return buffer.getvalue()
    except UnidentifiedImageError as exc:
        raise UnsupportedImageError("stored photo") from exc


async def read_photo(path: str | Path) -> str:
    """Read and encode an image file without blocking the event loop."""
    loop = asyncio.get_event_loop()
    path = Path(path)

    def load() -> str:
        if not path.is_file() or not is_supported_image(str(path)):
            raise UnsupportedImageError(str(path))
        return encode_photo(path.read_bytes(), str(path))

    return await loop.run_in_executor(None, load)
