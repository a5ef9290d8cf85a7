"""Tests for the grid shape builders."""

import pytest

from sudoku.grid.topology import (
    build_grid,
    classic,
    classic_with_hyper_regions,
    jigsaw,
    samurai,
    size_and_boxes,
)
from sudoku.samples import JIGSAW_AREAS


class TestBoxes:
    def test_classic(self):
        """Test that the classic grid has 9 columns, 9 rows and 9 boxes."""
        grid = classic()
        assert (grid.width, grid.height, grid.max_value) == (9, 9, 9)
        assert len(grid.constraints) == 27
        assert all(len(rule) == 9 for rule in grid.constraints)

    def test_six_by_six(self):
        """Test a 6x6 grid split into 2x3 boxes of 3x2 cells."""
        grid = size_and_boxes(6, 6, 2, 3)
        boxes = [rule for rule in grid.constraints if rule.label.startswith("Box")]
        assert len(boxes) == 6
        assert {cell.position for cell in boxes[0]} == {
            (0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1),
        }

    def test_hyper(self):
        """Test that hyper adds four inner 3x3 regions."""
        grid = classic_with_hyper_regions()
        extra = {rule.label: rule for rule in grid.constraints[27:]}
        assert list(extra) == ["HyperA", "HyperB", "HyperC", "HyperD"]
        assert {cell.position for cell in extra["HyperD"]} == {
            (x, y) for x in range(5, 8) for y in range(5, 8)
        }


class TestJigsaw:
    def test_areas(self):
        """Test that each area character becomes one rule."""
        grid = jigsaw(JIGSAW_AREAS)
        assert len(grid.constraints) == 27
        areas = [rule for rule in grid.constraints if rule.label.startswith("Area")]
        assert [rule.label for rule in areas] == [f"Area {i}" for i in range(1, 10)]
        assert all(len(rule) == 9 for rule in areas)
        assert (8, 0) in {cell.position for cell in areas[2]}

    def test_small_map(self):
        """Test a 4x4 map with rectangular areas."""
        grid = jigsaw(["aabb", "aabb", "ccdd", "ccdd"])
        area_c = next(rule for rule in grid.constraints if rule.label == "Area c")
        assert {cell.position for cell in area_c} == {(0, 2), (1, 2), (0, 3), (1, 3)}

    def test_empty_map(self):
        with pytest.raises(ValueError):
            jigsaw([])

    def test_ragged_map(self):
        with pytest.raises(ValueError):
            jigsaw(["112", "12"])


class TestSamurai:
    def test_shape(self):
        """Test the 21x21 board, its holes and rule count."""
        grid = samurai()
        assert (grid.width, grid.height, grid.max_value) == (21, 21, 9)
        assert sum(cell.is_blocked for cell in grid.cells()) == 72
        assert len(grid.constraints) == 131

    def test_rules_have_nine_open_cells(self):
        """Test that no rule touches a hole."""
        grid = samurai()
        for rule in grid.constraints:
            assert len(rule) == 9
            assert not any(cell.is_blocked for cell in rule)

    def test_holes(self):
        """Test a few cells inside and outside the holes."""
        grid = samurai()
        assert grid.cell(9, 0).is_blocked
        assert grid.cell(11, 5).is_blocked
        assert grid.cell(0, 9).is_blocked
        assert grid.cell(20, 11).is_blocked
        assert not grid.cell(9, 6).is_blocked
        assert not grid.cell(10, 10).is_blocked

    def test_overlap_cell_belongs_to_two_boards(self):
        """Test that a shared corner cell is in both boards' rows."""
        grid = samurai()
        labels = {
            rule.label for rule in grid.constraints
            if any(cell.position == (7, 7) for cell in rule)
        }
        assert {"Row Upper Left 7", "Row Middle 1"} <= labels
        assert {"Column Upper Left 7", "Column Middle 1"} <= labels


class TestBuildGrid:
    def test_named(self):
        assert len(build_grid("classic").constraints) == 27
        assert len(build_grid("hyper").constraints) == 31

    def test_boxes_options(self):
        grid = build_grid("boxes", width=4, height=4, box_count_x=2, box_count_y=2)
        assert len(grid.constraints) == 12

    def test_jigsaw_options(self):
        assert len(build_grid("jigsaw", areas=JIGSAW_AREAS).constraints) == 27

    def test_unknown_topology(self):
        with pytest.raises(ValueError, match="Unknown topology"):
            build_grid("toroidal")

    def test_missing_options(self):
        with pytest.raises(ValueError):
            build_grid("boxes", width=4, height=4)
        with pytest.raises(ValueError):
            build_grid("jigsaw")
