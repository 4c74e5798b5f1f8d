"""
Module: output.pptx_writer

Purpose:
    Write a DeckLayout as a PowerPoint deck using python-pptx.
    One slide per page; images become pictures and videos become
    embedded movies with a placeholder poster frame.

Key Classes:
    - PptxEncoder: DocumentEncoder for .pptx files

Dependencies:
    - python-pptx: Presentation generation
    - PIL: Image handling
    - output.encoder: Shared helpers

Used By:
    - output.encoder.encoder_for_path
    - controller: Build pipeline
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

from PIL import Image
from pptx import Presentation
from pptx.enum.text import PP_ALIGN
from pptx.util import Inches, Pt

from media_deck.layout.config import CanvasSpec
from media_deck.layout.models import DeckLayout, Page, PageEntry
from media_deck.media.formats import mime_type_for
from media_deck.media.reader import ByteReader

from .encoder import (
    DocumentEncoder,
    MESSAGE_FONT_SIZE,
    MESSAGE_HEIGHT_IN,
    MESSAGE_LEFT_IN,
    TITLE_FONT_SIZE,
    TITLE_HEIGHT_IN,
    TITLE_LEFT_IN,
    TITLE_TOP_IN,
    load_picture,
    make_poster_frame,
)

logger = logging.getLogger(__name__)

# Formats python-pptx can embed without re-encoding
_NATIVE_PICTURE_FORMATS = {"PNG", "JPEG", "GIF", "BMP"}


class PptxEncoder(DocumentEncoder):
    """Writes one slide per layout page."""

    suffix = ".pptx"

    def encode(
        self,
        layout: DeckLayout,
        canvas_spec: CanvasSpec,
        output_path: Path,
        reader: ByteReader,
    ) -> None:
        prs = Presentation()
        prs.slide_width = Inches(canvas_spec.width)
        prs.slide_height = Inches(canvas_spec.height)
        blank_layout = prs.slide_layouts[_find_blank_layout(prs)]

        for page in layout.pages:
            slide = prs.slides.add_slide(blank_layout)
            _render_slide(slide, page, reader, canvas_spec)

        prs.save(str(output_path))

        logger.info(f"Wrote {layout.page_count} slides to {output_path}")


def _find_blank_layout(prs: Presentation) -> int:
    """Index of the layout named "Blank", else the last layout."""
    for idx, slide_layout in enumerate(prs.slide_layouts):
        if slide_layout.name.lower() == "blank":
            return idx
    return len(prs.slide_layouts) - 1


def _render_slide(slide, page: Page, reader: ByteReader, canvas_spec: CanvasSpec) -> None:
    if page.is_placeholder:
        _add_text(
            slide,
            page.message,
            left_in=MESSAGE_LEFT_IN,
            top_in=(canvas_spec.height - MESSAGE_HEIGHT_IN) / 2,
            width_in=canvas_spec.width - 2 * MESSAGE_LEFT_IN,
            height_in=MESSAGE_HEIGHT_IN,
            font_size=MESSAGE_FONT_SIZE,
            bold=False,
        )
        return

    if page.title:
        _add_text(
            slide,
            page.title,
            left_in=TITLE_LEFT_IN,
            top_in=TITLE_TOP_IN,
            width_in=canvas_spec.width - 2 * TITLE_LEFT_IN,
            height_in=TITLE_HEIGHT_IN,
            font_size=TITLE_FONT_SIZE,
            bold=True,
        )

    for entry in page.entries:
        if entry.item.is_video:
            _add_movie(slide, entry, reader)
        else:
            _add_picture(slide, entry, reader)


def _add_text(
    slide,
    text: str,
    *,
    left_in: float,
    top_in: float,
    width_in: float,
    height_in: float,
    font_size: int,
    bold: bool,
) -> None:
    """Add a centered single-paragraph text box."""
    shape = slide.shapes.add_textbox(
        Inches(left_in), Inches(top_in), Inches(width_in), Inches(height_in)
    )
    frame = shape.text_frame
    frame.clear()
    p = frame.paragraphs[0]
    p.alignment = PP_ALIGN.CENTER
    run = p.add_run()
    run.text = text
    run.font.size = Pt(font_size)
    run.font.bold = bold


def _add_picture(slide, entry: PageEntry, reader: ByteReader) -> None:
    box = entry.box
    image = load_picture(entry, reader)
    if image is None:
        image = make_poster_frame(box, f"Unavailable: {entry.item.name}")

    slide.shapes.add_picture(
        _picture_stream(image),
        Inches(box.x),
        Inches(box.y),
        width=Inches(box.width),
        height=Inches(box.height),
    )
    logger.debug(
        f"Added image {entry.item.name} at ({box.x:.2f}, {box.y:.2f}), "
        f"{box.width:.2f} x {box.height:.2f} inches"
    )


def _add_movie(slide, entry: PageEntry, reader: ByteReader) -> None:
    box = entry.box
    data = reader.read(entry.item.path)
    if data is None:
        logger.error(f"Error adding {entry.item.path}: no bytes available")
        poster = make_poster_frame(box, f"Unavailable: {entry.item.name}")
        slide.shapes.add_picture(
            _picture_stream(poster),
            Inches(box.x),
            Inches(box.y),
            width=Inches(box.width),
            height=Inches(box.height),
        )
        return

    poster = make_poster_frame(box, entry.item.name)
    slide.shapes.add_movie(
        BytesIO(data),
        Inches(box.x),
        Inches(box.y),
        Inches(box.width),
        Inches(box.height),
        poster_frame_image=_picture_stream(poster),
        mime_type=mime_type_for(entry.item.extension),
    )
    logger.debug(
        f"Added video {entry.item.name} at ({box.x:.2f}, {box.y:.2f}), "
        f"{box.width:.2f} x {box.height:.2f} inches"
    )


def _picture_stream(img: Image.Image) -> BytesIO:
    """
    Serialize a PIL image for python-pptx.

    Images already in a format PowerPoint embeds natively keep it;
    anything else is re-encoded as PNG.
    """
    buf = BytesIO()
    fmt = img.format if img.format in _NATIVE_PICTURE_FORMATS else "PNG"
    if fmt == "JPEG" and img.mode not in ("RGB", "L", "CMYK"):
        fmt = "PNG"
    img.save(buf, format=fmt)
    buf.seek(0)
    return buf
