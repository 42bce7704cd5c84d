"""Validation and key naming for media uploads."""

import re
import uuid
from dataclasses import dataclass

from fastapi import UploadFile

ROOM_IMAGE_TYPES = frozenset({"image/jpeg", "image/png", "image/webp", "image/jpg", "image/gif"})
SLIDER_IMAGE_TYPES = frozenset({"image/jpeg", "image/png", "image/webp", "image/jpg"})
SLIDER_VIDEO_TYPES = frozenset({"video/mp4", "video/webm", "video/ogg"})

DEFAULT_EXTENSION = "jpg"
MEGABYTE = 1024 * 1024

_SEGMENT_PATTERN = re.compile(r"[^A-Za-z0-9._-]+")
_WHITESPACE = re.compile(r"\s+")


class UploadRejectedError(ValueError):
    """Raised when an uploaded file fails type or size checks."""


@dataclass(frozen=True)
class UploadPolicy:
    allowed_types: frozenset[str]
    max_bytes: int
    kind: str = "image"

    def check_type(self, content_type: str | None) -> None:
        if content_type not in self.allowed_types:
            raise UploadRejectedError(f"Invalid file format. Only {self.kind} files can be uploaded.")

    def check_size(self, size: int) -> None:
        if size > self.max_bytes:
            raise UploadRejectedError(
                f"File is too large. {self.kind.capitalize()}s may be at most {self.max_bytes // MEGABYTE}MB."
            )

    def check(self, content_type: str | None, size: int) -> None:
        self.check_type(content_type)
        self.check_size(size)


async def read_checked(file: UploadFile, policy: UploadPolicy) -> bytes:
    """Read an upload, rejecting it on its declared size before any bytes are read."""
    policy.check_type(file.content_type)
    if file.size is not None:
        policy.check_size(file.size)
    data = await file.read()
    policy.check_size(len(data))
    return data


def safe_segment(value: str, default: str) -> str:
    """Reduce a user supplied key segment to a single safe path component."""
    cleaned = _SEGMENT_PATTERN.sub("-", value.strip()).strip(".-")
    return cleaned or default


def file_extension(filename: str | None) -> str:
    if not filename or "." not in filename:
        return DEFAULT_EXTENSION
    extension = filename.rsplit(".", 1)[1].lower()
    return safe_segment(extension, DEFAULT_EXTENSION)


def normalise_filename(filename: str | None) -> str:
    name = _WHITESPACE.sub("-", (filename or "upload").strip()).lower()
    return safe_segment(name, "upload")


def room_image_key(room_id: str | None, filename: str | None) -> str:
    folder = safe_segment(room_id or "", "default")
    return f"rooms/{folder}/{uuid.uuid4()}.{file_extension(filename)}"


def slider_media_key(folder: str | None, filename: str | None) -> str:
    folder_name = safe_segment(folder or "", "slider")
    return f"slider/{folder_name}/{uuid.uuid4()}-{normalise_filename(filename)}"


def media_kind(content_type: str) -> str:
    return "video" if content_type.startswith("video/") else "image"
