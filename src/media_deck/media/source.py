"""
Module: media.source

Purpose:
    Media sources produce the ordered list of MediaItems handed to the
    layout engine. Order is preserved end-to-end.

Key Classes:
    - MediaSource: Abstract item source
    - DirectoryMediaSource: Scans one local directory
    - StaticMediaSource: Wraps an existing item sequence
    - MediaSourceError: Exception for unusable sources

Key Functions:
    - item_for_path(): Build a MediaItem from a file path
    - collect_items(): Concatenate several sources in order

Dependencies:
    - media.formats: Extension classification
    - media.models: MediaItem

Used By:
    - controller: Build pipeline
    - __main__: Command line
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .formats import MediaFormats, normalize_extension
from .models import MediaItem

logger = logging.getLogger(__name__)


class MediaSourceError(Exception):
    """Media source cannot be read."""
    pass


def item_for_path(path: Path, formats: MediaFormats) -> Optional[MediaItem]:
    """
    Build a MediaItem for a file, or None if its format is unsupported.

    Example:
        >>> item_for_path(Path("clip.MP4"), MediaFormats()).kind
        <MediaKind.VIDEO: 'video'>
    """
    extension = normalize_extension(path.suffix)
    kind = formats.classify(extension)
    if kind is None:
        return None
    return MediaItem(path=path, kind=kind, extension=extension)


class MediaSource(ABC):
    """Abstract interface for producing media items."""

    @abstractmethod
    def items(self) -> List[MediaItem]:
        """
        Get the media items of this source.

        Returns:
            Items in presentation order

        Raises:
            MediaSourceError: If the source cannot be read
        """


class DirectoryMediaSource(MediaSource):
    """
    Source that lists supported files in one directory.

    Only the directory itself is scanned (no recursion). Files are
    returned sorted by name so repeated builds are identical.

    Example:
        >>> source = DirectoryMediaSource(Path("media_files"))
        >>> items = source.items()
    """

    def __init__(self, directory: Path, formats: Optional[MediaFormats] = None) -> None:
        self._directory = Path(directory)
        self._formats = formats or MediaFormats()

    @property
    def directory(self) -> Path:
        return self._directory

    def items(self) -> List[MediaItem]:
        if not self._directory.is_dir():
            raise MediaSourceError(f"Media directory not found: {self._directory}")

        try:
            entries = sorted(self._directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise MediaSourceError(f"Cannot list {self._directory}: {e}") from e

        result: List[MediaItem] = []
        skipped = 0
        for path in entries:
            if not path.is_file():
                continue
            item = item_for_path(path, self._formats)
            if item is None:
                skipped += 1
                logger.debug(f"Skipping unsupported file: {path.name}")
                continue
            result.append(item)

        logger.info(f"Found {len(result)} media files in {self._directory}")
        if skipped:
            logger.debug(f"Skipped {skipped} unsupported files")
        return result


class StaticMediaSource(MediaSource):
    """Source backed by a fixed, already-ordered item sequence."""

    def __init__(self, items: Sequence[MediaItem]) -> None:
        self._items = tuple(items)

    def items(self) -> List[MediaItem]:
        return list(self._items)


def collect_items(sources: Iterable[MediaSource]) -> List[MediaItem]:
    """Concatenate the items of several sources, preserving order."""
    collected: List[MediaItem] = []
    for source in sources:
        collected.extend(source.items())
    return collected
