"""
Module: layout.grid

Purpose:
    Map the number of items on a page to a fixed grid shape.
    The table is a fixed lookup, not a packing solver: five items
    deliberately leave one empty cell in a 3x2 grid.

Key Functions:
    - plan_grid(): Grid shape for an item count

Key Classes:
    - LayoutContractError: Layout called outside its domain

Dependencies:
    - layout.models: GridShape

Used By:
    - layout.paginator: Page composition
"""

from __future__ import annotations

from .models import GridShape


class LayoutContractError(ValueError):
    """Layout function called with arguments outside its contract."""
    pass


GRID_SHAPES: dict[int, GridShape] = {
    1: GridShape(columns=1, rows=1),
    2: GridShape(columns=2, rows=1),
    3: GridShape(columns=3, rows=1),
    4: GridShape(columns=2, rows=2),
    5: GridShape(columns=3, rows=2),
    6: GridShape(columns=3, rows=2),
}


def plan_grid(item_count: int) -> GridShape:
    """
    Get the grid shape for a page holding item_count items.

    Args:
        item_count: Number of items on the page (1..6)

    Returns:
        GridShape from the fixed table

    Raises:
        LayoutContractError: If item_count is outside 1..6

    Example:
        >>> plan_grid(4)
        GridShape(columns=2, rows=2)
    """
    shape = GRID_SHAPES.get(item_count)
    if shape is None:
        raise LayoutContractError(
            f"item_count must be between 1 and {max(GRID_SHAPES)}: {item_count}"
        )
    return shape
