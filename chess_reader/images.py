# -*- coding: utf-8 -*-
"""Normalize user-supplied images into a base64 payload."""

from __future__ import annotations

import asyncio
import base64
import binascii
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from chess_pgn.errors import InvalidImageError

DEFAULT_MEDIA_TYPE = "image/jpeg"

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?;base64,", re.IGNORECASE)

_SIGNATURES = [
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
]


@dataclass(frozen=True)
class ImagePayload:
    """Base64 image data without any `data:` prefix."""

    data: str
    media_type: str = DEFAULT_MEDIA_TYPE

    @property
    def data_url(self) -> str:
        return f"data:{self.media_type};base64,{self.data}"


ImageInput = Union[ImagePayload, bytes, bytearray, str, Path]


def sniff_media_type(raw: bytes) -> str:
    for signature, media_type in _SIGNATURES:
        if raw.startswith(signature):
            return media_type
    if raw[:4] == b"RIFF" and raw[8:12] == b"WEBP":
        return "image/webp"
    return DEFAULT_MEDIA_TYPE


def payload_from_bytes(raw: bytes) -> ImagePayload:
    if not raw:
        raise InvalidImageError("Image is empty.")
    return ImagePayload(
        data=base64.b64encode(bytes(raw)).decode("ascii"),
        media_type=sniff_media_type(bytes(raw)),
    )


def payload_from_base64(text: str) -> ImagePayload:
    """Accept plain base64 or a `data:image/...;base64,` URL."""
    text = (text or "").strip()
    media_type = None
    m = _DATA_URL_RE.match(text)
    if m:
        media_type = m.group("mime")
        text = text[m.end():]
    elif "base64," in text:
        text = text.split("base64,", 1)[1]

    data = "".join(text.split())
    if not data:
        raise InvalidImageError("Image is empty.")
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError(f"Image is not valid base64: {e}") from e

    return ImagePayload(data=data, media_type=media_type or sniff_media_type(raw))


def load_image(image: ImageInput) -> ImagePayload:
    if isinstance(image, ImagePayload):
        return image
    if isinstance(image, (bytes, bytearray)):
        return payload_from_bytes(image)
    if isinstance(image, str) and (image.startswith("data:") or not os.path.isfile(image)):
        return payload_from_base64(image)

    path = Path(image)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise InvalidImageError(f"Cannot read image {path}: {e}") from e
    return payload_from_bytes(raw)


async def encode_image(image: ImageInput) -> ImagePayload:
    """Load and base64-encode off the event loop."""
    return await asyncio.to_thread(load_image, image)
