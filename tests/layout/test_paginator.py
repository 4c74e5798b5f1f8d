"""
Unit tests for the paginator (page compositor).

Test Coverage:
- chunk_items(): Consecutive, order-preserving chunks
- paginate(): Page count, item order, titles, grid per page
- Placeholder page for empty input
- Dimension resolution through the byte reader
"""

import math
import threading
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from media_deck.layout import CanvasSpec, DeckLayout, cell_size, chunk_items, paginate, plan_grid
from media_deck.media import ByteReader, FileByteReader, MediaItem, MediaKind


@pytest.fixture
def canvas():
    return CanvasSpec()


class RecordingReader(ByteReader):
    """Reader returning fixed bytes and recording requested paths."""

    def __init__(self, data_by_name=None):
        self.data_by_name = data_by_name or {}
        self.requested = []
        self._lock = threading.Lock()

    def read(self, path):
        with self._lock:
            self.requested.append(Path(path).name)
        return self.data_by_name.get(Path(path).name)


class TestChunkItems:
    """Tests for chunk_items()."""

    def test_chunk_items_when_seven_items_then_six_and_one(self):
        assert chunk_items(list(range(7)), 6) == [[0, 1, 2, 3, 4, 5], [6]]

    def test_chunk_items_when_exact_multiple_then_no_empty_tail(self):
        assert chunk_items(list(range(12)), 6) == [list(range(6)), list(range(6, 12))]

    def test_chunk_items_when_empty_then_no_chunks(self):
        assert chunk_items([], 6) == []

    def test_chunk_items_when_size_not_positive_then_raises(self):
        with pytest.raises(ValueError):
            chunk_items([1], 0)


class TestPaginate:
    """Tests for paginate()."""

    def test_paginate_when_no_items_then_single_placeholder_page(self, canvas):
        """Empty input yields exactly one message-only page."""
        # Act
        layout = paginate([], canvas)

        # Assert
        assert layout.page_count == 1
        page = layout.pages[0]
        assert page.is_placeholder
        assert page.entries == ()
        assert page.message == "No Media Files Found"
        assert page.title is None

    @pytest.mark.parametrize("count", [1, 5, 6, 7, 12, 13, 20])
    def test_paginate_when_n_items_then_ceil_n_over_six_pages(self, canvas, sized_item_factory, count):
        """Page count is ceil(N / 6) and page k holds items [6k, min(6k+6, N))."""
        # Arrange
        items = [sized_item_factory(name=f"item_{i:02d}.png") for i in range(count)]

        # Act
        layout = paginate(items, canvas, reader=RecordingReader())

        # Assert
        assert layout.page_count == math.ceil(count / 6)
        for k, page in enumerate(layout.pages):
            assert page.index == k
            assert [e.item for e in page.entries] == items[6 * k:min(6 * k + 6, count)]
        assert layout.total_entries == count

    def test_paginate_when_seven_items_then_3x2_page_and_full_area_page(self, canvas, sized_item_factory):
        """Items 1-6 share a 3x2 grid; item 7 spans the whole available area."""
        # Arrange: ratio equal to the available area so the single box fills it
        ratio_w = round(canvas.available_width * 1000)
        ratio_h = round(canvas.available_height * 1000)
        items = [sized_item_factory(name=f"{i}.png") for i in range(6)]
        items.append(sized_item_factory(ratio_w, ratio_h, name="6.png"))

        # Act
        layout = paginate(items, canvas, reader=RecordingReader())

        # Assert
        first, second = layout.pages
        assert first.entry_count == 6
        cell_w, cell_h = cell_size(plan_grid(6), canvas)
        for entry in first.entries:
            assert entry.box.width <= cell_w + 1e-9
            assert entry.box.height <= cell_h + 1e-9

        (last,) = second.entries
        assert last.box.x == pytest.approx(canvas.margin)
        assert last.box.y == pytest.approx(canvas.title_height + canvas.margin)
        assert last.box.width == pytest.approx(canvas.available_width)
        assert last.box.height == pytest.approx(canvas.available_height)

    def test_paginate_when_pages_built_then_titles_numbered_from_one(self, canvas, sized_item_factory):
        items = [sized_item_factory(name=f"{i}.png") for i in range(8)]

        layout = paginate(items, canvas, reader=RecordingReader())

        assert [p.title for p in layout.pages] == [
            "Media Collection - Page 1",
            "Media Collection - Page 2",
        ]

    def test_paginate_when_png_on_disk_then_reads_header_size(self, canvas, png_factory):
        """A real PNG is sized from its header through the file reader."""
        # Arrange
        path = png_factory(400, 100, name="wide.png")
        item = MediaItem(path=path, kind=MediaKind.IMAGE, extension=".png")

        # Act
        layout = paginate([item], canvas, reader=FileByteReader())

        # Assert
        (entry,) = layout.pages[0].entries
        assert (entry.intrinsic_width, entry.intrinsic_height) == (400, 100)
        assert entry.box.aspect_ratio == pytest.approx(4.0)

    def test_paginate_when_video_then_default_size_without_reading(self, canvas):
        """Videos never touch the reader and use 1920x1080."""
        # Arrange
        reader = MagicMock(spec=ByteReader)
        item = MediaItem(path=Path("clip.mp4"), kind=MediaKind.VIDEO, extension=".mp4")

        # Act
        layout = paginate([item], canvas, reader=reader)

        # Assert
        reader.read.assert_not_called()
        (entry,) = layout.pages[0].entries
        assert (entry.intrinsic_width, entry.intrinsic_height) == (1920, 1080)
        assert entry.box.aspect_ratio == pytest.approx(16 / 9)
        assert isinstance(layout.warnings, tuple)
        assert any("clip.mp4" in w for w in layout.warnings)

    def test_paginate_when_reader_has_no_bytes_then_default_size(self, canvas):
        """Unreadable PNG falls back to default dimensions without failing the page."""
        item = MediaItem(path=Path("missing.png"), kind=MediaKind.IMAGE, extension=".png")

        layout = paginate([item], canvas, reader=RecordingReader())

        (entry,) = layout.pages[0].entries
        assert (entry.intrinsic_width, entry.intrinsic_height) == (1920, 1080)

    def test_paginate_when_many_workers_then_order_matches_serial(self, canvas, png_factory):
        """Concurrent resolution keeps item order and sizes."""
        # Arrange
        items = [
            MediaItem(
                path=png_factory(100 + i * 10, 100, name=f"p{i}.png"),
                kind=MediaKind.IMAGE,
                extension=".png",
            )
            for i in range(9)
        ]

        # Act
        serial = paginate(items, canvas, reader=FileByteReader(), max_workers=1)
        parallel = paginate(items, canvas, reader=FileByteReader(), max_workers=8)

        # Assert
        assert serial == parallel
        sizes = [e.intrinsic_width for p in parallel.pages for e in p.entries]
        assert sizes == [100 + i * 10 for i in range(9)]

    def test_paginate_when_smaller_page_cap_then_chunks_by_cap(self, sized_item_factory):
        """Page cap comes from the canvas value, not a global."""
        canvas = CanvasSpec(max_items_per_page=4)
        items = [sized_item_factory(name=f"{i}.png") for i in range(9)]

        layout = paginate(items, canvas, reader=RecordingReader())

        assert [p.entry_count for p in layout.pages] == [4, 4, 1]

    def test_paginate_returns_deck_layout(self, canvas, sized_item_factory):
        layout = paginate([sized_item_factory()], canvas, reader=RecordingReader())

        assert isinstance(layout, DeckLayout)
        assert layout.warnings == ()
