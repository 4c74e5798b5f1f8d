"""
Module: config

Purpose:
    Configuration dataclass for one deck build. Immutable
    configuration with validation on construction.

Key Classes:
    - DeckConfig: Main configuration for building a deck

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - controller: Main build controller
    - __main__: Command line
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

from media_deck.layout.config import CanvasSpec
from media_deck.media.formats import MediaFormats
from media_deck.media.models import MediaItem

SUPPORTED_OUTPUT_SUFFIXES = (".pdf", ".pptx")


@dataclass(frozen=True)
class DeckConfig:
    """
    Configuration for building a media deck (immutable).

    Items are collected in order: explicit items first, then each
    media directory in the order given.

    Attributes:
        output_path: Document to write (.pdf or .pptx)
        media_dirs: Directories scanned for media files
        items: Pre-built media items
        canvas: Canvas configuration
        formats: Supported media formats
        max_workers: Threads used to resolve dimensions
        write_metadata: Whether to write a JSON sidecar next to the output

    Example:
        >>> config = DeckConfig(
        ...     output_path=Path("my_media_presentation.pdf"),
        ...     media_dirs=(Path("media_files"),),
        ... )
    """

    # Required
    output_path: Path

    # Inputs
    media_dirs: Tuple[Path, ...] = ()
    items: Tuple[MediaItem, ...] = ()

    # Layout
    canvas: CanvasSpec = field(default_factory=CanvasSpec)
    formats: MediaFormats = field(default_factory=MediaFormats)

    # Behavior
    max_workers: int = 4
    write_metadata: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        object.__setattr__(self, "output_path", Path(self.output_path))
        object.__setattr__(self, "media_dirs", tuple(Path(d) for d in self.media_dirs))
        object.__setattr__(self, "items", tuple(self.items))

        if self.output_path.suffix.lower() not in SUPPORTED_OUTPUT_SUFFIXES:
            raise ValueError(
                f"output_path must end in one of {SUPPORTED_OUTPUT_SUFFIXES}: {self.output_path}"
            )
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1: {self.max_workers}")

    @property
    def metadata_path(self) -> Path:
        """Sidecar JSON path (full output name plus .json, e.g. deck.pdf.json)."""
        return self.output_path.with_name(self.output_path.name + ".json")
