"""
Module: layout

Purpose:
    Media grid layout engine.
    Converts an ordered media list into paginated, aspect-preserving
    page layouts on a fixed canvas.

Key Functions:
    - paginate(): Main entry point for layout
    - plan_grid(): Grid shape for an item count
    - calculate_positions(): Boxes for one page

Key Classes:
    - CanvasSpec: Configuration for the canvas
    - LayoutBox: Positioned item box
    - Page: Single page layout
    - DeckLayout: Layout of all pages

Dependencies:
    - media: Items and dimension extraction

Used By:
    - controller: Main build controller
    - output: Document encoders
"""

from .config import CanvasSpec
from .models import GridShape, LayoutBox, PageEntry, Page, DeckLayout
from .grid import plan_grid, LayoutContractError
from .positions import calculate_positions, cell_size, fit_contain
from .paginator import paginate, chunk_items

__all__ = [
    # Config
    "CanvasSpec",
    # Models
    "GridShape",
    "LayoutBox",
    "PageEntry",
    "Page",
    "DeckLayout",
    # Functions
    "plan_grid",
    "LayoutContractError",
    "calculate_positions",
    "cell_size",
    "fit_contain",
    "paginate",
    "chunk_items",
]
