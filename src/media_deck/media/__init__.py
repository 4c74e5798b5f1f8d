"""
Module: media

Purpose:
    Media items and the collaborators that feed the layout engine:
    sources that list items, readers that load bytes, and the
    dimension extractor that derives intrinsic size.

Key Functions:
    - extract_dimensions(): Size from raw bytes
    - resolve_dimensions(): Size for a MediaItem
    - collect_items(): Concatenate media sources

Key Classes:
    - MediaItem, MediaKind: Item model
    - MediaFormats: Supported formats
    - ByteReader, FileByteReader: Byte access
    - MediaSource, DirectoryMediaSource, StaticMediaSource: Item sources

Dependencies:
    - struct (std): Header parsing

Used By:
    - layout.paginator: Page composition
    - controller: Build pipeline
"""

from .models import MediaItem, MediaKind
from .formats import MediaFormats, mime_type_for, normalize_extension
from .reader import ByteReader, FileByteReader
from .source import (
    MediaSource,
    DirectoryMediaSource,
    StaticMediaSource,
    MediaSourceError,
    collect_items,
    item_for_path,
)
from .dimensions import DEFAULT_DIMENSIONS, extract_dimensions, resolve_dimensions

__all__ = [
    # Models
    "MediaItem",
    "MediaKind",
    # Formats
    "MediaFormats",
    "mime_type_for",
    "normalize_extension",
    # Readers
    "ByteReader",
    "FileByteReader",
    # Sources
    "MediaSource",
    "DirectoryMediaSource",
    "StaticMediaSource",
    "MediaSourceError",
    "collect_items",
    "item_for_path",
    # Dimensions
    "DEFAULT_DIMENSIONS",
    "extract_dimensions",
    "resolve_dimensions",
]
