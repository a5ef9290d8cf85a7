# demo.py
# -*- coding: utf-8 -*-
"""
サンプル問題をまとめて解くスクリプトです。

    python demo.py              # すべてのサンプル
    python demo.py small hyper  # 名前を指定
"""

import sys

from sudoku import build_board
from sudoku.csp.trace import LoggingTracer
from sudoku.logging_utils import get_logger
from sudoku.postprocess.render_result import format_constraints, format_grid
from sudoku.samples import SAMPLES

logger = get_logger()

DEFAULT_ORDER = [
    "fail",
    "classic",
    "small",
    "hyper",
    "jigsaw",
    "samurai",
    "incomplete_classic",
]


def complete_solve(name: str) -> int:
    sample = SAMPLES[name]
    board = build_board(sample.rows, topology=sample.topology, areas=sample.areas, **sample.options)

    logger.info("==== %s ====", name)
    logger.info("Rules:\n%s", format_constraints(board))
    logger.info("Board:\n%s", format_grid(board))

    solutions = list(board.solve(LoggingTracer()))

    logger.info("All %d solutions:", len(solutions))
    for i, solution in enumerate(solutions, start=1):
        logger.info("Solution %d / %d:\n%s", i, len(solutions), format_grid(solution))
    return len(solutions)


def main(argv):
    names = argv or DEFAULT_ORDER
    for name in names:
        if name not in SAMPLES:
            logger.error("Unknown sample %r. Choose from %s", name, sorted(SAMPLES))
            return 1
        complete_solve(name)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
