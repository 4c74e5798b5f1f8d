"""
Module: media.dimensions

Purpose:
    Derive intrinsic pixel size for media items.
    Only PNG headers are parsed; every other format uses the default
    size. Extraction never raises: malformed input degrades to the
    default with a logged warning.

Key Functions:
    - extract_dimensions(): Size from raw bytes and declared format
    - resolve_dimensions(): Size for a MediaItem

Algorithm:
    A PNG file starts with an 8-byte signature followed by the IHDR
    chunk header (length + type, 8 bytes). The IHDR payload therefore
    begins at byte 16 with width and height as big-endian uint32.

Dependencies:
    - struct (std)
    - media.formats: Header-sized format check
    - media.reader: Byte access

Used By:
    - layout.paginator: Aspect ratio resolution
"""

from __future__ import annotations

import logging
import struct
from typing import Optional, Tuple

from .formats import MediaFormats
from .models import MediaItem
from .reader import ByteReader

logger = logging.getLogger(__name__)

DEFAULT_DIMENSIONS = (1920, 1080)

# Byte offset of the IHDR width field; height follows at +4
PNG_SIZE_OFFSET = 16
PNG_MIN_LENGTH = PNG_SIZE_OFFSET + 8

_SIZE_STRUCT = struct.Struct(">II")


def extract_dimensions(
    data: Optional[bytes],
    declared_format: str,
    *,
    formats: Optional[MediaFormats] = None,
    default: Tuple[int, int] = DEFAULT_DIMENSIONS,
) -> Tuple[int, int]:
    """
    Extract (width, height) from file bytes.

    Args:
        data: File contents, or None if unavailable
        declared_format: Extension or MIME type of the file
        formats: Supported formats (defaults to MediaFormats())
        default: Size returned when the header cannot be used

    Returns:
        (width, height) in pixels. Never raises.

    Example:
        >>> extract_dimensions(png_bytes, ".png")
        (800, 600)
        >>> extract_dimensions(jpeg_bytes, ".jpg")
        (1920, 1080)
    """
    formats = formats or MediaFormats()
    if not formats.is_header_sized(declared_format):
        return default

    if data is None:
        logger.warning("No bytes available for header sizing, using default dimensions")
        return default

    if len(data) < PNG_MIN_LENGTH:
        logger.warning(
            f"Header too short ({len(data)} bytes, need {PNG_MIN_LENGTH}), "
            f"using default dimensions"
        )
        return default

    try:
        width, height = _SIZE_STRUCT.unpack_from(data, PNG_SIZE_OFFSET)
    except (struct.error, TypeError) as e:
        logger.warning(f"Could not extract dimensions, using defaults: {e}")
        return default

    if width == 0 or height == 0:
        logger.warning(f"Header reports empty size {width}x{height}, using default dimensions")
        return default

    return (width, height)


def resolve_dimensions(
    item: MediaItem,
    reader: Optional[ByteReader],
    *,
    formats: Optional[MediaFormats] = None,
    default: Tuple[int, int] = DEFAULT_DIMENSIONS,
) -> Tuple[int, int]:
    """
    Resolve the intrinsic size of a media item.

    Uses the size supplied by the source when present. Otherwise bytes
    are read only for the header-sized format; all other formats go
    straight to the default without touching the file.

    Args:
        item: Media item to size
        reader: Byte source (None means no bytes can be read)
        formats: Supported formats
        default: Fallback size

    Returns:
        (width, height) in pixels
    """
    if item.has_intrinsic_size:
        return (item.intrinsic_width, item.intrinsic_height)

    formats = formats or MediaFormats()
    if not formats.is_header_sized(item.extension):
        return default

    data = reader.read(item.path) if reader is not None else None
    if data is None:
        logger.warning(f"No bytes for {item.name}, using default dimensions")
        return default

    return extract_dimensions(data, item.extension, formats=formats, default=default)
