"""
Module: output.encoder

Purpose:
    Shared document encoder interface and helpers.
    Encoders turn a DeckLayout into an output document; helpers load
    entry images and draw placeholder tiles for entries that cannot
    be embedded as pictures.

Key Classes:
    - DocumentEncoder: Abstract encoder

Key Functions:
    - encoder_for_path(): Pick an encoder by file suffix
    - write_atomic(): Encode to a temp file, then publish
    - load_picture(): Decode an entry's image bytes
    - make_poster_frame(): Placeholder tile for videos/failures

Dependencies:
    - PIL: Image decoding and placeholder drawing
    - tempfile (std): Atomic output

Used By:
    - output.pdf_writer, output.pptx_writer: Concrete encoders
    - controller: Build pipeline
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from media_deck.layout.config import CanvasSpec
from media_deck.layout.models import DeckLayout, LayoutBox, PageEntry
from media_deck.media.reader import ByteReader

logger = logging.getLogger(__name__)

# Title band text box (inches from the top-left corner)
TITLE_LEFT_IN = 0.5
TITLE_TOP_IN = 0.2
TITLE_HEIGHT_IN = 0.5
TITLE_FONT_SIZE = 24

# Placeholder page message box
MESSAGE_LEFT_IN = 1.0
MESSAGE_HEIGHT_IN = 1.5
MESSAGE_FONT_SIZE = 32

# Resolution of generated placeholder tiles
POSTER_DPI = 96
POSTER_BACKGROUND = (64, 64, 64)
POSTER_FOREGROUND = (230, 230, 230)


class DocumentEncoder(ABC):
    """
    Abstract interface for writing a DeckLayout to a document.

    Implementations must emit pages in index order. Errors while
    writing the document propagate to the caller.
    """

    #: File suffix produced by this encoder (".pdf")
    suffix: str = ""

    @abstractmethod
    def encode(
        self,
        layout: DeckLayout,
        canvas_spec: CanvasSpec,
        output_path: Path,
        reader: ByteReader,
    ) -> None:
        """
        Write the layout to output_path.

        Args:
            layout: Pages to write
            canvas_spec: Canvas the layout was computed for
            output_path: Destination file
            reader: Byte source for entry media
        """


def encoder_for_path(output_path: Path) -> DocumentEncoder:
    """
    Get the encoder for an output file suffix.

    Raises:
        ValueError: If the suffix is not .pdf or .pptx
    """
    # Local imports: concrete writers import this module
    from .pdf_writer import PdfEncoder
    from .pptx_writer import PptxEncoder

    suffix = Path(output_path).suffix.lower()
    for encoder_cls in (PdfEncoder, PptxEncoder):
        if encoder_cls.suffix == suffix:
            return encoder_cls()
    raise ValueError(f"Unsupported output format {suffix!r} (expected .pdf or .pptx)")


def write_atomic(
    encoder: DocumentEncoder,
    layout: DeckLayout,
    canvas_spec: CanvasSpec,
    output_path: Path,
    reader: ByteReader,
) -> Path:
    """
    Encode to a temp file beside output_path and replace on success.

    Nothing is published if encoding fails; the temp file is removed
    and the error is re-raised.

    Returns:
        output_path
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="wb",
        suffix=output_path.suffix,
        dir=output_path.parent,
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    try:
        encoder.encode(layout, canvas_spec, temp_path, reader)
        publish_file(temp_path, output_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise

    return output_path


def publish_file(temp_path: Path, output_path: Path) -> None:
    """
    Move a finished temp file onto output_path.

    Temp files are created owner-only (0600). The published file takes
    the mode of the file it replaces, or the umask default (0666 & ~umask)
    for a new file.
    """
    try:
        mode = stat.S_IMODE(output_path.stat().st_mode)
    except FileNotFoundError:
        mode = 0o666 & ~_current_umask()
    os.chmod(temp_path, mode)
    # Use replace() instead of rename() for Windows compatibility
    temp_path.replace(output_path)


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def load_picture(entry: PageEntry, reader: ByteReader) -> Optional[Image.Image]:
    """
    Decode an image entry.

    Returns:
        Loaded PIL Image, or None if bytes are missing or undecodable
    """
    data = reader.read(entry.item.path)
    if data is None:
        logger.error(f"Error adding {entry.item.path}: no bytes available")
        return None

    try:
        img = Image.open(BytesIO(data))
        img.load()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        logger.error(f"Error adding {entry.item.path}: {e}")
        return None
    return img


def make_poster_frame(box: LayoutBox, label: str) -> Image.Image:
    """
    Draw a placeholder tile matching a box's proportions.

    A dark tile with a centered play triangle and a caption. This is
    a fixed stand-in, not a frame taken from the video.

    Args:
        box: Box the tile will fill
        label: Caption drawn under the triangle

    Returns:
        RGB PIL Image
    """
    width = max(1, round(box.width * POSTER_DPI))
    height = max(1, round(box.height * POSTER_DPI))
    img = Image.new("RGB", (width, height), POSTER_BACKGROUND)
    draw = ImageDraw.Draw(img)

    # Play triangle, a third of the short side
    side = min(width, height) / 3
    cx, cy = width / 2, height / 2
    draw.polygon(
        [
            (cx - side / 2, cy - side / 2),
            (cx - side / 2, cy + side / 2),
            (cx + side / 2, cy),
        ],
        fill=POSTER_FOREGROUND,
    )

    if label:
        font = ImageFont.load_default()
        text_width = draw.textlength(label, font=font)
        draw.text(
            ((width - text_width) / 2, min(height - 14, cy + side / 2 + 6)),
            label,
            fill=POSTER_FOREGROUND,
            font=font,
        )
    return img
