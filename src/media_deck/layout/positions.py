"""
Module: layout.positions

Purpose:
    Compute a centered, contain-fit bounding box for every item on a page.

Key Functions:
    - cell_size(): Width and height of one grid cell
    - fit_contain(): Scale an aspect ratio into a cell
    - calculate_positions(): Boxes for all items on a page

Algorithm:
    1. Split the available area (canvas minus margins and title band)
       into equal cells separated by the spacing.
    2. Item i goes into row i // columns, column i % columns.
    3. Fit by width first; if the height overflows, fit by height.
    4. Center the box inside its cell.

Dependencies:
    - layout.config: CanvasSpec
    - layout.models: GridShape, LayoutBox

Used By:
    - layout.paginator: Page composition
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

from .config import CanvasSpec
from .grid import LayoutContractError
from .models import GridShape, LayoutBox

logger = logging.getLogger(__name__)


def cell_size(shape: GridShape, canvas: CanvasSpec) -> Tuple[float, float]:
    """
    Get (cell_width, cell_height) for a grid on the canvas.

    Example:
        >>> cell_size(GridShape(3, 2), CanvasSpec())
        (3.0, 2.85)
    """
    cell_width = (canvas.available_width - canvas.spacing * (shape.columns - 1)) / shape.columns
    cell_height = (canvas.available_height - canvas.spacing * (shape.rows - 1)) / shape.rows
    return cell_width, cell_height


def fit_contain(
    aspect_ratio: float,
    cell_width: float,
    cell_height: float,
) -> Tuple[float, float]:
    """
    Scale a box of the given aspect ratio to fit inside a cell.

    The result touches the binding dimension of the cell and never
    exceeds either dimension.

    Args:
        aspect_ratio: Width / height of the item
        cell_width: Cell width
        cell_height: Cell height

    Returns:
        (width, height) of the fitted box

    Example:
        >>> fit_contain(2.0, 3.0, 2.5)
        (3.0, 1.5)
    """
    width = cell_width
    height = cell_width / aspect_ratio

    # Too tall for the cell: fit by height instead
    if height > cell_height:
        height = cell_height
        width = cell_height * aspect_ratio

    return width, height


def calculate_positions(
    aspect_ratios: Sequence[float],
    shape: GridShape,
    canvas: CanvasSpec,
) -> List[LayoutBox]:
    """
    Calculate one LayoutBox per item, in item order.

    Args:
        aspect_ratios: Width / height of each item on the page
        shape: Grid for the page
        canvas: Canvas configuration

    Returns:
        List of LayoutBoxes (same length and order as aspect_ratios)

    Raises:
        LayoutContractError: If the item count is outside
            1..canvas.max_items_per_page, exceeds the grid capacity,
            or an aspect ratio is not a positive finite number
    """
    count = len(aspect_ratios)
    if not 0 < count <= canvas.max_items_per_page:
        raise LayoutContractError(
            f"Item count must be between 1 and {canvas.max_items_per_page}: {count}"
        )
    if count > shape.capacity:
        raise LayoutContractError(
            f"{count} items do not fit a {shape.columns}x{shape.rows} grid"
        )
    for ratio in aspect_ratios:
        if not (math.isfinite(ratio) and ratio > 0):
            raise LayoutContractError(f"Aspect ratio must be positive and finite: {ratio}")

    cell_width, cell_height = cell_size(shape, canvas)
    boxes: List[LayoutBox] = []

    for i, ratio in enumerate(aspect_ratios):
        row = i // shape.columns
        col = i % shape.columns

        width, height = fit_contain(ratio, cell_width, cell_height)

        cell_x = canvas.margin + col * (cell_width + canvas.spacing)
        cell_y = canvas.title_height + canvas.margin + row * (cell_height + canvas.spacing)

        box = LayoutBox(
            x=cell_x + (cell_width - width) / 2,
            y=cell_y + (cell_height - height) / 2,
            width=width,
            height=height,
            aspect_ratio=ratio,
        )
        logger.debug(
            f"Item {i}: cell ({row}, {col}) at ({box.x:.2f}, {box.y:.2f}), "
            f"size {box.width:.2f} x {box.height:.2f} in, ratio {ratio:.2f}:1"
        )
        boxes.append(box)

    return boxes
