"""
Module: output.pdf_writer

Purpose:
    Render a DeckLayout to PDF using ReportLab.
    Each Page becomes one PDF page: the title in the title band and
    every entry drawn at its LayoutBox.

Key Classes:
    - PdfEncoder: DocumentEncoder for .pdf files

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
    - output.encoder: Shared helpers

Used By:
    - output.encoder.encoder_for_path
    - controller: Build pipeline
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image
from reportlab.lib.units import inch
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from media_deck.layout.config import CanvasSpec
from media_deck.layout.models import DeckLayout, LayoutBox, Page, PageEntry
from media_deck.media.reader import ByteReader

from .encoder import (
    DocumentEncoder,
    MESSAGE_FONT_SIZE,
    MESSAGE_HEIGHT_IN,
    TITLE_FONT_SIZE,
    TITLE_HEIGHT_IN,
    TITLE_TOP_IN,
    load_picture,
    make_poster_frame,
)

logger = logging.getLogger(__name__)


class PdfEncoder(DocumentEncoder):
    """Writes one PDF page per layout page."""

    suffix = ".pdf"

    def encode(
        self,
        layout: DeckLayout,
        canvas_spec: CanvasSpec,
        output_path: Path,
        reader: ByteReader,
    ) -> None:
        page_width_pt = canvas_spec.width * inch
        page_height_pt = canvas_spec.height * inch

        c = canvas.Canvas(str(output_path), pagesize=(page_width_pt, page_height_pt))
        c.setTitle("Media Collection")

        for page in layout.pages:
            _render_page(c, page, reader, page_width_pt, page_height_pt)
            c.showPage()

        c.save()

        logger.info(f"Rendered {layout.page_count} pages to {output_path}")


def _render_page(
    c: canvas.Canvas,
    page: Page,
    reader: ByteReader,
    page_width_pt: float,
    page_height_pt: float,
) -> None:
    """Render a single page to the canvas."""
    if page.is_placeholder:
        _draw_centered_text(
            c,
            page.message,
            font_name="Helvetica",
            font_size=MESSAGE_FONT_SIZE,
            top_in=(page_height_pt / inch - MESSAGE_HEIGHT_IN) / 2,
            height_in=MESSAGE_HEIGHT_IN,
            page_width_pt=page_width_pt,
            page_height_pt=page_height_pt,
        )
        return

    if page.title:
        _draw_centered_text(
            c,
            page.title,
            font_name="Helvetica-Bold",
            font_size=TITLE_FONT_SIZE,
            top_in=TITLE_TOP_IN,
            height_in=TITLE_HEIGHT_IN,
            page_width_pt=page_width_pt,
            page_height_pt=page_height_pt,
        )

    for entry in page.entries:
        _draw_entry(c, entry, reader, page_height_pt)


def _draw_centered_text(
    c: canvas.Canvas,
    text: str,
    *,
    font_name: str,
    font_size: int,
    top_in: float,
    height_in: float,
    page_width_pt: float,
    page_height_pt: float,
) -> None:
    """Draw one line of text centered horizontally and within a band."""
    c.saveState()
    c.setFont(font_name, font_size)
    c.setFillColorRGB(0, 0, 0)

    # Baseline roughly centers cap height within the band
    band_bottom_pt = page_height_pt - (top_in + height_in) * inch
    baseline_pt = band_bottom_pt + (height_in * inch - font_size * 0.7) / 2
    c.drawCentredString(page_width_pt / 2, baseline_pt, text)
    c.restoreState()


def _draw_entry(
    c: canvas.Canvas,
    entry: PageEntry,
    reader: ByteReader,
    page_height_pt: float,
) -> None:
    """Draw one entry at its box, falling back to a placeholder tile."""
    box = entry.box

    if entry.item.is_video:
        image = make_poster_frame(box, entry.item.name)
    else:
        image = load_picture(entry, reader)
        if image is None:
            image = make_poster_frame(box, f"Unavailable: {entry.item.name}")

    x_pt, y_pt, width_pt, height_pt = _box_to_pt(box, page_height_pt)
    c.drawImage(
        _pil_to_reader(image),
        x_pt,
        y_pt,
        width=width_pt,
        height=height_pt,
        mask="auto",
    )

    logger.debug(
        f"Added {entry.item.kind.value} to page: "
        f"position ({box.x:.2f}, {box.y:.2f}), "
        f"size {box.width:.2f} x {box.height:.2f} inches, "
        f"original aspect ratio {box.aspect_ratio:.2f}:1"
    )


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Palette and other modes ReportLab cannot embed directly are
    converted to RGB/RGBA first.
    """
    if img.mode not in ("RGB", "RGBA", "L", "CMYK"):
        img = img.convert("RGBA" if "transparency" in img.info or img.mode in ("LA", "PA") else "RGB")
    return ImageReader(img)


def _box_to_pt(box: LayoutBox, page_height_pt: float) -> tuple[float, float, float, float]:
    """
    Convert a top-down inch box to bottom-up PDF points.

    Returns:
        (x, y, width, height) in points, y measured from page bottom
    """
    width_pt = box.width * inch
    height_pt = box.height * inch
    x_pt = box.x * inch
    y_pt = page_height_pt - box.y * inch - height_pt
    return x_pt, y_pt, width_pt, height_pt
