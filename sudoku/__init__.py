# sudoku/__init__.py
# -*- coding: utf-8 -*-
"""
sudoku パッケージの入口となるモジュールです。

api_proto/local_api.py や demo.py などから:

    from sudoku import solve

と呼び出されることを想定しています。

ここでは、テキスト形式の盤面を受け取り、
1. トポロジー（盤面の形と制約）の組み立て
2. 初期値の読み込み
3. 制約伝播 + 分岐探索による全解の列挙（上限つき）
4. 解の検査
5. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

from itertools import islice
from typing import Any, Dict, Optional, Sequence

from .config import MAX_SOLUTIONS
from .csp.grid import Grid
from .csp.trace import SolveTracer
from .eval.verify import verify_solution
from .grid.parser import load_rows
from .grid.topology import build_grid
from .logging_utils import get_logger
from .postprocess.render_result import build_result, format_constraints, format_grid

logger = get_logger()


def build_board(
    rows: Sequence[str],
    topology: str = "classic",
    areas: Optional[Sequence[str]] = None,
    **options: int,
) -> Grid:
    """
    トポロジーを組み立て、初期値を読み込んだ盤面を返します。

    topology="boxes" で width / height が省略された場合は、rows から求めます。
    """
    if topology == "boxes" and rows:
        options.setdefault("width", len(rows[0]))
        options.setdefault("height", len(rows))

    grid = build_grid(topology, areas=areas, **options)
    return load_rows(grid, rows)


def solve(
    rows: Sequence[str],
    topology: str = "classic",
    areas: Optional[Sequence[str]] = None,
    max_solutions: int = MAX_SOLUTIONS,
    tracer: Optional[SolveTracer] = None,
    **options: int,
) -> Dict[str, Any]:
    """
    ナンプレを解くメイン関数。

    Parameters
    ----------
    rows : list of str
        テキスト形式の初期盤面。
    topology : str
        盤面の形（"classic", "hyper", "samurai", "jigsaw", "boxes"）。
    areas : list of str, optional
        jigsaw の領域マップ。
    max_solutions : int
        列挙する解の上限。
    tracer : SolveTracer, optional
        確定・分岐イベントの通知先。
    **options
        boxes のときの width / height / box_count_x / box_count_y。

    Returns
    -------
    dict
        :func:`sudoku.postprocess.render_result.build_result` の結果。
    """
    if max_solutions < 1:
        raise ValueError(f"max_solutions must be at least 1. Was {max_solutions}")

    logger.info("=== solve() START ===")

    # 1) 盤面の組み立てと初期値の読み込み
    initial = build_board(rows, topology=topology, areas=areas, **options)
    logger.info(
        "Grid: %dx%d, max_value=%d, %d rules (topology=%s)",
        initial.width,
        initial.height,
        initial.max_value,
        len(initial.constraints),
        topology,
    )
    logger.debug("Rules:\n%s", format_constraints(initial))
    logger.info("Board:\n%s", format_grid(initial))

    # 2) 全解の列挙（上限 + 1 件まで取って打ち切りを判定する）
    found = list(islice(initial.solve(tracer), max_solutions + 1))
    truncated = len(found) > max_solutions
    solutions = found[:max_solutions]

    if truncated:
        logger.info("Stopped after %d solutions.", max_solutions)
    logger.info("Found %d solution(s).", len(solutions))

    # 3) 解の検査（通常は問題なし）
    for i, solution in enumerate(solutions, start=1):
        for problem in verify_solution(solution, initial):
            logger.warning("[WARNING] Solution %d: %s", i, problem)
        logger.info("Solution %d / %d:\n%s", i, len(solutions), format_grid(solution))

    # 4) 表示用の結果を構築
    result = build_result(initial, solutions, truncated=truncated)

    logger.info("=== solve() END ===")
    return result


__all__ = ["build_board", "solve", "Grid"]
