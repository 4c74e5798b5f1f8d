"""
Unit tests for the grid planner.

Test Coverage:
- plan_grid(): Fixed count -> shape table
- Contract violations for counts outside 1..6
"""

import pytest

from media_deck.layout import GridShape, LayoutContractError, plan_grid


class TestPlanGrid:
    """Tests for plan_grid()."""

    @pytest.mark.parametrize(
        "count, columns, rows",
        [
            (1, 1, 1),
            (2, 2, 1),
            (3, 3, 1),
            (4, 2, 2),
            (5, 3, 2),
            (6, 3, 2),
        ],
    )
    def test_plan_grid_when_count_in_range_then_matches_table(self, count, columns, rows):
        """Every supported count maps to its fixed shape."""
        # Act
        shape = plan_grid(count)

        # Assert
        assert shape == GridShape(columns=columns, rows=rows)

    def test_plan_grid_when_five_items_then_leaves_one_empty_cell(self):
        """Five items use the 3x2 grid rather than an asymmetric arrangement."""
        shape = plan_grid(5)

        assert shape.capacity == 6

    @pytest.mark.parametrize("count", [0, -1, 7, 12])
    def test_plan_grid_when_count_out_of_range_then_raises(self, count):
        """Counts outside 1..6 are a contract violation, not a 3x2 fallback."""
        with pytest.raises(LayoutContractError, match="item_count"):
            plan_grid(count)

    def test_contract_error_is_value_error(self):
        """Callers catching ValueError also see contract errors."""
        assert issubclass(LayoutContractError, ValueError)
