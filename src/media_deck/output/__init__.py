"""
Module: output

Purpose:
    Document encoders for media decks.
    Converts a DeckLayout to PDF (ReportLab) or PPTX (python-pptx).

Key Functions:
    - encoder_for_path(): Choose encoder by output suffix
    - write_atomic(): Encode then publish in one step

Key Classes:
    - DocumentEncoder: Abstract encoder
    - PdfEncoder: PDF output
    - PptxEncoder: PowerPoint output

Dependencies:
    - reportlab: PDF generation
    - python-pptx: Presentation generation
    - PIL: Image handling

Used By:
    - controller: Pipeline orchestration
"""

from .encoder import (
    DocumentEncoder,
    encoder_for_path,
    make_poster_frame,
    publish_file,
    write_atomic,
)
from .pdf_writer import PdfEncoder
from .pptx_writer import PptxEncoder

__all__ = [
    "DocumentEncoder",
    "encoder_for_path",
    "write_atomic",
    "publish_file",
    "make_poster_frame",
    "PdfEncoder",
    "PptxEncoder",
]
