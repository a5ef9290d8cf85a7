"""Tests for result rendering and solution checks."""

import numpy as np

from sudoku.csp.grid import Grid
from sudoku.eval.verify import verify_solution
from sudoku.grid.parser import load_rows
from sudoku.postprocess.render_result import (
    build_result,
    format_constraints,
    format_grid,
    grid_to_array,
    grid_to_dataframe,
    grid_to_rows,
)

from .conftest import SMALL_SOLUTION


class TestRender:
    def test_rows_round_trip_text(self):
        """Test that blocked and empty cells render back to '/' and '.'."""
        grid = load_rows(Grid(3, 2, max_value=3, line_rules=False), ["1/.", ".23"])
        assert grid_to_rows(grid) == ["1/.", ".23"]
        assert format_grid(grid) == "1/.\n.23"

    def test_array_and_dataframe(self):
        """Test the numeric views of a grid."""
        grid = load_rows(Grid(2, 2, max_value=2, line_rules=False), ["1/", ".2"])
        np.testing.assert_array_equal(grid_to_array(grid), [[1, -1], [0, 2]])
        df = grid_to_dataframe(grid)
        assert df.shape == (2, 2)
        assert df.iat[1, 1] == 2

    def test_format_constraints(self):
        """Test one line per rule with member coordinates."""
        grid = Grid(2, 2)
        lines = format_constraints(grid).splitlines()
        assert lines[0] == "(0, 0),(0, 1) - Col 0"
        assert lines[-1] == "(0, 1),(1, 1) - Row 1"

    def test_build_result(self, small_board):
        """Test the result dict for a solved and an unsolvable board."""
        initial = small_board(["....", "....", "....", "...."])
        solved = small_board(SMALL_SOLUTION)

        result = build_result(initial, [solved], truncated=True)
        assert result["status"] == "ok"
        assert result["shape"] == (4, 4)
        assert result["board"] == ["....", "....", "....", "...."]
        assert result["solution_count"] == 1
        assert result["truncated"] is True
        assert result["solutions"] == [SMALL_SOLUTION]

        empty = build_result(initial, [])
        assert empty["status"] == "unsolvable"
        assert empty["solutions"] == []
        assert empty["truncated"] is False


class TestVerify:
    def test_valid_solution(self, small_board):
        initial = small_board(["2...", "....", "....", "...."])
        assert verify_solution(small_board(SMALL_SOLUTION), initial) == []

    def test_incomplete(self, small_board):
        """Test that empty cells and incomplete rules are reported."""
        problems = verify_solution(small_board(["2413", "3124", "1342", "423."]))
        assert "Cell (3, 3) has no value" in problems
        assert "Rule Row 3 is not complete" in problems

    def test_changed_given(self, small_board):
        """Test that an answer overwriting a given is reported."""
        initial = small_board(["1...", "....", "....", "...."])
        problems = verify_solution(small_board(SMALL_SOLUTION), initial)
        assert problems == ["Given 1 at (0, 0) changed to 2"]

    def test_shape_mismatch(self, small_board):
        problems = verify_solution(small_board(SMALL_SOLUTION), Grid(2, 2))
        assert problems == ["Solution shape differs from the initial grid"]

    def test_blocked_cells_ignored(self):
        """Test that holes are not reported as empty cells."""
        grid = load_rows(Grid(2, 1, max_value=1, line_rules=False), ["1/"])
        assert verify_solution(grid) == []
