"""
Module: layout.paginator

Purpose:
    Split the media list into pages and lay out each page.
    Drives the dimension extractor, grid planner and position
    calculator, and assembles the pages handed to a document encoder.

Key Functions:
    - chunk_items(): Consecutive fixed-size chunks
    - paginate(): Main pagination function

Algorithm:
    1. Resolve intrinsic sizes for all items (concurrently, order kept)
    2. Chunk items into groups of at most max_items_per_page
    3. For each chunk: plan grid -> calculate boxes -> build Page
    4. An empty collection yields one placeholder page

Dependencies:
    - concurrent.futures (std): Parallel dimension resolution
    - layout.grid, layout.positions: Per-page layout
    - media.dimensions: Intrinsic size

Used By:
    - controller: Build pipeline
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple, TypeVar

from media_deck.media.dimensions import resolve_dimensions
from media_deck.media.formats import MediaFormats
from media_deck.media.models import MediaItem
from media_deck.media.reader import ByteReader, FileByteReader

from .config import CanvasSpec
from .grid import plan_grid
from .models import DeckLayout, Page, PageEntry
from .positions import calculate_positions

logger = logging.getLogger(__name__)

T = TypeVar("T")

PAGE_TITLE_TEMPLATE = "Media Collection - Page {number}"
EMPTY_COLLECTION_MESSAGE = "No Media Files Found"


def chunk_items(items: Sequence[T], size: int) -> List[List[T]]:
    """
    Split items into consecutive chunks of at most size, keeping order.

    Example:
        >>> chunk_items([1, 2, 3, 4, 5, 6, 7], 6)
        [[1, 2, 3, 4, 5, 6], [7]]
    """
    if size <= 0:
        raise ValueError(f"size must be positive: {size}")
    return [list(items[start:start + size]) for start in range(0, len(items), size)]


def paginate(
    items: Sequence[MediaItem],
    canvas: CanvasSpec,
    *,
    reader: Optional[ByteReader] = None,
    formats: Optional[MediaFormats] = None,
    max_workers: int = 4,
) -> DeckLayout:
    """
    Arrange media items onto pages.

    Page k holds items [k*cap, min(k*cap + cap, N)) where cap is
    canvas.max_items_per_page. Each page gets a grid from the fixed
    table and contain-fit boxes for its items.

    Args:
        items: Media items in presentation order
        canvas: Canvas configuration
        reader: Byte source for header sizing (defaults to FileByteReader)
        formats: Supported formats
        max_workers: Threads used to resolve dimensions

    Returns:
        DeckLayout with pages in index order
    """
    if not items:
        logger.info("No media files found, creating placeholder page")
        placeholder = Page(index=0, title=None, entries=(), message=EMPTY_COLLECTION_MESSAGE)
        return DeckLayout(pages=(placeholder,))

    reader = reader if reader is not None else FileByteReader()
    formats = formats or MediaFormats()

    sizes = _resolve_all(items, reader, formats, canvas, max_workers)

    # Header failures are logged by the extractor; this records the
    # formats that are never header-sized
    warnings = tuple(
        f"{item.name}: size not read from {item.extension} file, assuming "
        f"{canvas.default_width}x{canvas.default_height}"
        for item in items
        if not item.has_intrinsic_size and not formats.is_header_sized(item.extension)
    )

    pages: List[Page] = []
    start = 0
    for page_index, chunk in enumerate(chunk_items(items, canvas.max_items_per_page)):
        chunk_sizes = sizes[start:start + len(chunk)]
        start += len(chunk)

        shape = plan_grid(len(chunk))
        ratios = [width / height for width, height in chunk_sizes]
        boxes = calculate_positions(ratios, shape, canvas)

        entries = tuple(
            PageEntry(item=item, box=box, intrinsic_width=w, intrinsic_height=h)
            for item, box, (w, h) in zip(chunk, boxes, chunk_sizes)
        )
        pages.append(Page(
            index=page_index,
            title=PAGE_TITLE_TEMPLATE.format(number=page_index + 1),
            entries=entries,
        ))
        logger.info(
            f"Created page {page_index + 1} with {len(chunk)} media items "
            f"({shape.columns}x{shape.rows} grid)"
        )

    logger.info(f"Paginated {len(items)} media items onto {len(pages)} pages")

    return DeckLayout(pages=tuple(pages), warnings=warnings)


def _resolve_all(
    items: Sequence[MediaItem],
    reader: ByteReader,
    formats: MediaFormats,
    canvas: CanvasSpec,
    max_workers: int,
) -> List[Tuple[int, int]]:
    """Resolve intrinsic sizes for all items, in item order."""

    def _resolve(item: MediaItem) -> Tuple[int, int]:
        return resolve_dimensions(
            item, reader, formats=formats, default=canvas.default_dimensions
        )

    if max_workers <= 1 or len(items) == 1:
        # Single item or serial mode - no thread overhead
        return [_resolve(item) for item in items]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as pool:
        return list(pool.map(_resolve, items))
