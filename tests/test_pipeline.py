"""Tests for the top-level solve() pipeline."""

import logging

import pytest

import sudoku
from sudoku.csp.trace import RecordingTracer
from sudoku.samples import SAMPLES, SMALL_BOXES, WIKIPEDIA_ROWS, WIKIPEDIA_SOLUTION

from .conftest import SMALL_SOLUTION


def test_small_sample():
    """Test a unique 4x4 answer through the pipeline."""
    sample = SAMPLES["small"]
    result = sudoku.solve(sample.rows, topology="boxes", **sample.options)
    assert result["status"] == "ok"
    assert result["solution_count"] == 1
    assert result["solutions"] == [SMALL_SOLUTION]
    assert result["truncated"] is False


def test_boxes_size_from_rows():
    """Test that width and height default to the row text."""
    result = sudoku.solve(SAMPLES["small"].rows, topology="boxes", box_count_x=2, box_count_y=2)
    assert result["shape"] == (4, 4)
    assert result["solution_count"] == 1


def test_unsolvable():
    sample = SAMPLES["fail"]
    result = sudoku.solve(sample.rows, topology="boxes", **sample.options)
    assert result["status"] == "unsolvable"
    assert result["solution_count"] == 0


def test_classic_default():
    result = sudoku.solve(WIKIPEDIA_ROWS)
    assert result["solutions"] == [WIKIPEDIA_SOLUTION]


def test_truncated():
    """Test that the cap stops enumeration and is reported."""
    result = sudoku.solve(["...."] * 4, topology="boxes", max_solutions=3, **SMALL_BOXES)
    assert result["solution_count"] == 3
    assert result["truncated"] is True
    assert len(set(map(tuple, result["solutions"]))) == 3


@pytest.mark.parametrize("max_solutions", [0, -1])
def test_bad_cap(max_solutions):
    with pytest.raises(ValueError):
        sudoku.solve(WIKIPEDIA_ROWS, max_solutions=max_solutions)


def test_tracer_passed_through():
    tracer = RecordingTracer()
    sudoku.solve(SAMPLES["small"].rows, topology="boxes", tracer=tracer, **SMALL_BOXES)
    assert tracer.of_kind("fix")
    assert len(tracer.of_kind("solution")) == 1


def test_logs_start_and_end(caplog):
    """Test that the pipeline logs its boundaries and result count."""
    caplog.set_level(logging.INFO, logger="sudoku")
    sudoku.solve(SAMPLES["small"].rows, topology="boxes", **SMALL_BOXES)
    messages = [r.getMessage() for r in caplog.records if r.name == "sudoku"]
    assert "=== solve() START ===" in messages
    assert "Found 1 solution(s)." in messages
    assert "=== solve() END ===" in messages


def test_build_board_unknown_topology():
    with pytest.raises(ValueError):
        sudoku.build_board(WIKIPEDIA_ROWS, topology="unknown")
