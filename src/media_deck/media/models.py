"""
Module: media.models

Purpose:
    Data model for media items flowing into the layout engine.
    Items are created by a media source and never mutated afterwards.

Key Classes:
    - MediaKind: Image or video
    - MediaItem: One media file with optional intrinsic size

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - media.source: Item creation
    - layout.paginator: Page composition
    - output: Document encoders
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class MediaKind(str, Enum):
    """Broad category of a media file."""

    IMAGE = "image"
    VIDEO = "video"


@dataclass(frozen=True)
class MediaItem:
    """
    A single media file (immutable).

    Attributes:
        path: Location of the file
        kind: Image or video
        extension: Lower-case extension including the dot (".png")
        intrinsic_width: Native pixel width, if already known upstream
        intrinsic_height: Native pixel height, if already known upstream

    Example:
        >>> item = MediaItem(Path("media/cat.png"), MediaKind.IMAGE, ".png")
        >>> item.name
        'cat.png'
    """

    path: Path
    kind: MediaKind
    extension: str
    intrinsic_width: Optional[int] = None
    intrinsic_height: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate intrinsic size when one is supplied."""
        if (self.intrinsic_width is None) != (self.intrinsic_height is None):
            raise ValueError(
                f"intrinsic_width and intrinsic_height must be given together: {self.path}"
            )
        if self.intrinsic_width is not None and (
            self.intrinsic_width <= 0 or self.intrinsic_height <= 0
        ):
            raise ValueError(
                f"intrinsic size must be positive: "
                f"{self.intrinsic_width}x{self.intrinsic_height}"
            )

    @property
    def name(self) -> str:
        """File name without directories."""
        return Path(self.path).name

    @property
    def has_intrinsic_size(self) -> bool:
        """True if the source supplied the native size."""
        return self.intrinsic_width is not None

    @property
    def is_video(self) -> bool:
        return self.kind is MediaKind.VIDEO
