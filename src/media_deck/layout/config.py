"""
Module: layout.config

Purpose:
    Canvas settings for the media grid layout engine.
    Defines page size, title band, margins, spacing and the per-page cap.
    All measurements are in inches.

Key Classes:
    - CanvasSpec: Immutable canvas configuration

Dependencies:
    - dataclasses (std)

Used By:
    - layout.positions: Box calculation
    - layout.paginator: Page composition
    - output: Document encoders
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


DEFAULT_CANVAS_WIDTH_IN = 10.0
DEFAULT_CANVAS_HEIGHT_IN = 7.5

# Largest item count covered by the grid table
MAX_GRID_ITEMS = 6


@dataclass(frozen=True)
class CanvasSpec:
    """
    Configuration for one output page (immutable).

    Attributes:
        width: Canvas width in inches
        height: Canvas height in inches
        title_height: Height of the title band at the top of the page
        margin: Outer margin applied on every side of the content area
        spacing: Gap between neighbouring grid cells
        max_items_per_page: Number of media items placed on one page
        default_width: Intrinsic width assumed when none can be read
        default_height: Intrinsic height assumed when none can be read

    Example:
        >>> canvas = CanvasSpec()
        >>> canvas.available_width
        9.4
    """

    # Page
    width: float = DEFAULT_CANVAS_WIDTH_IN
    height: float = DEFAULT_CANVAS_HEIGHT_IN
    title_height: float = 1.0

    # Spacing
    margin: float = 0.3
    spacing: float = 0.2

    # Pagination
    max_items_per_page: int = MAX_GRID_ITEMS

    # Fallback intrinsic size (16:9)
    default_width: int = 1920
    default_height: int = 1080

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.width <= 0:
            raise ValueError(f"width must be positive: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be positive: {self.height}")
        if self.title_height < 0:
            raise ValueError(f"title_height must be non-negative: {self.title_height}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if self.spacing < 0:
            raise ValueError(f"spacing must be non-negative: {self.spacing}")
        if self.available_width <= 0:
            raise ValueError("Margins exceed canvas width")
        if self.available_height <= 0:
            raise ValueError("Title band and margins exceed canvas height")
        if not 1 <= self.max_items_per_page <= MAX_GRID_ITEMS:
            raise ValueError(
                f"max_items_per_page must be between 1 and {MAX_GRID_ITEMS}: "
                f"{self.max_items_per_page}"
            )
        if self.default_width <= 0 or self.default_height <= 0:
            raise ValueError(
                f"default dimensions must be positive: "
                f"{self.default_width}x{self.default_height}"
            )

    @property
    def available_width(self) -> float:
        """Width available for the grid (excluding margins)."""
        return self.width - 2 * self.margin

    @property
    def available_height(self) -> float:
        """Height available for the grid (excluding title band and margins)."""
        return self.height - self.title_height - 2 * self.margin

    @property
    def default_dimensions(self) -> Tuple[int, int]:
        """Fallback (width, height) in pixels."""
        return (self.default_width, self.default_height)

    @property
    def default_aspect_ratio(self) -> float:
        """Aspect ratio of the fallback dimensions."""
        return self.default_width / self.default_height
