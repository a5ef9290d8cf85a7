"""Shared test fixtures and helpers for the sudoku solver tests."""

import pytest

from sudoku.grid.parser import load_rows
from sudoku.grid.topology import classic, size_and_boxes

SMALL_SOLUTION = ["2413", "3124", "1342", "4231"]


@pytest.fixture
def small_board():
    """Factory: 4x4 grid with 2x2 boxes, loaded from text rows."""

    def build(rows):
        return load_rows(size_and_boxes(4, 4, 2, 2), rows)

    return build


@pytest.fixture
def classic_board():
    """Factory: standard 9x9 grid with 3x3 boxes, loaded from text rows."""

    def build(rows):
        return load_rows(classic(), rows)

    return build


@pytest.fixture
def empty_small_rows():
    return ["....", "....", "....", "...."]
