"""
Tests for the ReportLab PDF encoder.

Uses pypdf to inspect generated PDFs.
"""

import pytest
from pypdf import PdfReader

from media_deck.layout import CanvasSpec, LayoutBox, paginate
from media_deck.media import FileByteReader, MediaItem, MediaKind
from media_deck.output import PdfEncoder
from media_deck.output.pdf_writer import _box_to_pt

TOLERANCE_PT = 1.0


@pytest.fixture
def canvas():
    return CanvasSpec()


def _encode(layout, canvas, path):
    PdfEncoder().encode(layout, canvas, path, FileByteReader())
    return PdfReader(str(path))


class TestPdfEncoder:
    """Tests for PdfEncoder."""

    def test_encode_when_empty_layout_then_one_page_with_message(self, canvas, tmp_path):
        # Arrange
        layout = paginate([], canvas)

        # Act
        pdf = _encode(layout, canvas, tmp_path / "empty.pdf")

        # Assert
        assert len(pdf.pages) == 1
        assert "No Media Files Found" in pdf.pages[0].extract_text()

    def test_encode_when_items_then_page_size_is_canvas(self, canvas, tmp_path, png_factory):
        item = MediaItem(png_factory(50, 50), MediaKind.IMAGE, ".png")
        layout = paginate([item], canvas, reader=FileByteReader())

        pdf = _encode(layout, canvas, tmp_path / "deck.pdf")

        box = pdf.pages[0].mediabox
        assert float(box.width) == pytest.approx(720.0, abs=TOLERANCE_PT)  # 10in
        assert float(box.height) == pytest.approx(540.0, abs=TOLERANCE_PT)  # 7.5in

    def test_encode_when_seven_items_then_two_titled_pages(self, canvas, tmp_path, png_factory, jpeg_factory):
        # Arrange: mix of PNG, JPEG and video entries
        items = [
            MediaItem(png_factory(80 + i, 40, name=f"p{i}.png"), MediaKind.IMAGE, ".png")
            for i in range(4)
        ]
        items.append(MediaItem(jpeg_factory(40, 80), MediaKind.IMAGE, ".jpg"))
        video = tmp_path / "clip.mp4"
        video.write_bytes(b"\x00" * 64)
        items.append(MediaItem(video, MediaKind.VIDEO, ".mp4"))
        items.append(MediaItem(png_factory(10, 10, name="last.png"), MediaKind.IMAGE, ".png"))
        layout = paginate(items, canvas, reader=FileByteReader())

        # Act
        pdf = _encode(layout, canvas, tmp_path / "deck.pdf")

        # Assert
        assert len(pdf.pages) == 2
        assert "Media Collection - Page 1" in pdf.pages[0].extract_text()
        assert "Media Collection - Page 2" in pdf.pages[1].extract_text()
        assert len(pdf.pages[0].images) == 6
        assert len(pdf.pages[1].images) == 1

    def test_encode_when_image_unreadable_then_placeholder_drawn(self, canvas, tmp_path):
        """A missing file does not abort the page."""
        item = MediaItem(tmp_path / "gone.png", MediaKind.IMAGE, ".png")
        layout = paginate([item], canvas, reader=FileByteReader())

        pdf = _encode(layout, canvas, tmp_path / "deck.pdf")

        assert len(pdf.pages) == 1
        assert len(pdf.pages[0].images) == 1

    def test_encode_when_output_dir_missing_then_raises(self, canvas, tmp_path):
        """Write failures propagate."""
        layout = paginate([], canvas)

        with pytest.raises(OSError):
            PdfEncoder().encode(layout, canvas, tmp_path / "no" / "such" / "deck.pdf", FileByteReader())


class TestBoxToPoints:
    def test_box_to_pt_when_top_left_box_then_flipped_y(self):
        """Top-down inches become bottom-up points."""
        box = LayoutBox(x=0.3, y=1.3, width=3.0, height=1.5, aspect_ratio=2.0)

        x, y, w, h = _box_to_pt(box, page_height_pt=540.0)

        assert x == pytest.approx(21.6)
        assert w == pytest.approx(216.0)
        assert h == pytest.approx(108.0)
        assert y == pytest.approx(540.0 - 93.6 - 108.0)
