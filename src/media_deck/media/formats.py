"""
Module: media.formats

Purpose:
    Supported file formats and MIME types.
    Replaces shared format lists with an immutable value passed to
    each caller.

Key Classes:
    - MediaFormats: Supported image/video extensions

Key Functions:
    - normalize_extension(): Lower-case, dotted extension
    - mime_type_for(): MIME type for an extension

Dependencies:
    - dataclasses (std)

Used By:
    - media.source: File classification
    - media.dimensions: Header-sized format check
    - output.pptx_writer: Movie MIME types
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .models import MediaKind


DEFAULT_IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")
DEFAULT_VIDEO_EXTENSIONS = (".mp4", ".avi", ".mov", ".wmv", ".flv", ".webm")

FALLBACK_MIME_TYPE = "application/octet-stream"

_MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
    ".mp4": "video/mp4",
    ".avi": "video/avi",
    ".mov": "video/mov",
    ".wmv": "video/wmv",
    ".flv": "video/flv",
    ".webm": "video/webm",
}


def normalize_extension(value: str) -> str:
    """
    Normalize an extension or format name.

    Accepts ".PNG", "png" or "image/png" and returns ".png".
    """
    value = (value or "").strip().lower()
    if "/" in value:
        value = value.rsplit("/", 1)[1]
    if value and not value.startswith("."):
        value = "." + value
    return value


def mime_type_for(extension: str) -> str:
    """Return the MIME type for an extension, or application/octet-stream."""
    return _MIME_TYPES.get(normalize_extension(extension), FALLBACK_MIME_TYPE)


@dataclass(frozen=True)
class MediaFormats:
    """
    Supported formats (immutable).

    Attributes:
        image_extensions: Extensions treated as images
        video_extensions: Extensions treated as videos
        header_sized_extension: The one format whose header is parsed
            for its true pixel size
    """

    image_extensions: Tuple[str, ...] = DEFAULT_IMAGE_EXTENSIONS
    video_extensions: Tuple[str, ...] = DEFAULT_VIDEO_EXTENSIONS
    header_sized_extension: str = ".png"

    def __post_init__(self) -> None:
        """Normalize extensions so lookups are case-insensitive."""
        object.__setattr__(
            self, "image_extensions",
            tuple(normalize_extension(e) for e in self.image_extensions),
        )
        object.__setattr__(
            self, "video_extensions",
            tuple(normalize_extension(e) for e in self.video_extensions),
        )
        object.__setattr__(
            self, "header_sized_extension",
            normalize_extension(self.header_sized_extension),
        )
        overlap = set(self.image_extensions) & set(self.video_extensions)
        if overlap:
            raise ValueError(f"Extensions listed as both image and video: {sorted(overlap)}")

    def classify(self, extension: str) -> Optional[MediaKind]:
        """
        Classify an extension.

        Returns:
            MediaKind, or None if the extension is not supported
        """
        ext = normalize_extension(extension)
        if ext in self.image_extensions:
            return MediaKind.IMAGE
        if ext in self.video_extensions:
            return MediaKind.VIDEO
        return None

    def is_header_sized(self, declared_format: str) -> bool:
        """True if the declared format gets header-based sizing."""
        return normalize_extension(declared_format) == self.header_sized_extension
