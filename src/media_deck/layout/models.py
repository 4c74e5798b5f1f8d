"""
Module: layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing grid shapes, boxes and pages.

Key Classes:
    - GridShape: Columns and rows for one page
    - LayoutBox: Item bounding box in canvas inches
    - PageEntry: Media item paired with its box
    - Page: Complete page layout
    - DeckLayout: Final layout output

Dependencies:
    - dataclasses (std)
    - media.models: MediaItem

Used By:
    - layout.grid: Creates GridShapes
    - layout.positions: Creates LayoutBoxes
    - layout.paginator: Creates Pages
    - output: Document encoders
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from media_deck.media.models import MediaItem


@dataclass(frozen=True)
class GridShape:
    """
    Grid used to lay out one page.

    Example:
        >>> GridShape(columns=3, rows=2).capacity
        6
    """

    columns: int
    rows: int

    @property
    def capacity(self) -> int:
        """Number of cells in the grid."""
        return self.columns * self.rows


@dataclass(frozen=True)
class LayoutBox:
    """
    Bounding box for one item, in canvas units (inches).

    Coordinates are top-down: (x, y) is the top-left corner.

    Attributes:
        x: Left edge
        y: Top edge
        width: Box width
        height: Box height
        aspect_ratio: Intrinsic width / height of the item

    Example:
        >>> box = LayoutBox(x=0.3, y=1.3, width=3.0, height=1.5, aspect_ratio=2.0)
        >>> box.bottom
        2.8
    """

    x: float
    y: float
    width: float
    height: float
    aspect_ratio: float

    @property
    def right(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge (y + height)."""
        return self.y + self.height

    def overlaps(self, other: "LayoutBox") -> bool:
        """Check for interior overlap. Shared edges do not count."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def within(
        self,
        left: float,
        top: float,
        width: float,
        height: float,
        tolerance: float = 1e-9,
    ) -> bool:
        """Check if this box lies inside the given rectangle."""
        return (
            self.x >= left - tolerance
            and self.y >= top - tolerance
            and self.right <= left + width + tolerance
            and self.bottom <= top + height + tolerance
        )


@dataclass(frozen=True)
class PageEntry:
    """
    A media item placed on a page.

    Attributes:
        item: The media item
        box: Where the item is drawn
        intrinsic_width: Resolved native width in pixels
        intrinsic_height: Resolved native height in pixels
    """

    item: MediaItem
    box: LayoutBox
    intrinsic_width: int
    intrinsic_height: int


@dataclass(frozen=True)
class Page:
    """
    Complete layout for a single page.

    A page with no entries and a message is the placeholder emitted
    for an empty collection.

    Attributes:
        index: Page number (0-indexed)
        title: Title shown in the title band (None for placeholders)
        entries: Tuple of PageEntries in item order
        message: Informational text for placeholder pages

    Example:
        >>> page = Page(index=0, title="Media Collection - Page 1", entries=(e1, e2))
        >>> page.entry_count
        2
    """

    index: int
    title: Optional[str]
    entries: tuple[PageEntry, ...] = ()
    message: Optional[str] = None

    @property
    def entry_count(self) -> int:
        """Number of items on this page."""
        return len(self.entries)

    @property
    def is_placeholder(self) -> bool:
        """True for the message-only page of an empty collection."""
        return not self.entries and self.message is not None


@dataclass(frozen=True)
class DeckLayout:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of Pages in index order
        warnings: Items whose size was assumed rather than read from the file

    Example:
        >>> layout = DeckLayout(pages=(page1, page2))
        >>> layout.page_count
        2
    """

    pages: tuple[Page, ...]
    warnings: tuple[str, ...] = ()

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_entries(self) -> int:
        """Total number of placed items across all pages."""
        return sum(p.entry_count for p in self.pages)
