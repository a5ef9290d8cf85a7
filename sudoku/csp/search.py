# -*- coding: utf-8 -*-
"""
全解を列挙する探索を行うモジュールです。

ざっくり流れ
------------
1. 全マスの候補を初期化する（確定済みマスは {値}、未確定マスは全ドメイン）
2. 制約伝播を不動点まで回す。矛盾（FAILED）ならこの枝は解なしで終了
3. 候補が 2 つ以上残っているマスのうち、候補数が最小のものを分岐マスに選ぶ
   （同数なら行優先で最初のマス）。該当マスがなければ盤面は完成 → 解として返す
4. 分岐マスの候補を小さい順に 1 つずつ試す。
   盤面を丸ごとコピーし、コピー側のマスをその値に確定して 1 から再帰する

各枝は自分専用のコピーだけを触るので、「元に戻す」処理は不要です。
結果はジェネレータで返すので、呼び出し側が 1 つ目の解だけ取り出して
止めることもできます。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from ..config import REASON_SINGLE, REASON_TRIAL
from ..logging_utils import get_logger
from ..types import Progress
from .cell import Cell
from .grid import Grid
from .trace import SolveTracer

logger = get_logger()


@dataclass
class SearchContext:
    """
    1 回の探索全体で共有する情報をまとめたクラスです。

    探索を呼ぶたびに新しく作るので、別々の探索同士で状態は共有されません。
    """

    tracer: SolveTracer
    nodes_visited: int = 0
    solutions_found: int = 0


def choose_branch_cell(grid: Grid) -> Cell | None:
    """
    次に分岐するマスを選びます。

    MRV（Minimum Remaining Values）：
    - 候補が 2 つ以上残っているマスのうち、候補数が最も少ないもの
    - 同じなら行優先（y が小さい → x が小さい）で先のマス
    """
    candidates = [cell for cell in grid.cells() if cell.possible_count > 1]
    if not candidates:
        return None

    return min(candidates, key=lambda cell: (cell.possible_count, cell.y, cell.x))


def _settle_singletons(grid: Grid, tracer: SolveTracer) -> None:
    # どの制約にも属さないマスは伝播で確定しないので、候補 1 つなら確定させる
    for cell in grid.cells():
        if not cell.is_blocked and not cell.has_value and cell.possible_count == 1:
            (only,) = cell.candidates
            cell.fix(only, REASON_SINGLE, tracer)


def _search(grid: Grid, ctx: SearchContext, depth: int) -> Iterator[Grid]:
    ctx.nodes_visited += 1
    if ctx.nodes_visited % 1000 == 0:
        logger.info(
            "[search] nodes_visited = %d, solutions_found = %d, depth = %d",
            ctx.nodes_visited,
            ctx.solutions_found,
            depth,
        )

    ctx.tracer.on_search(grid, depth)

    grid.reset_candidates()
    if grid.propagate_to_fixpoint(ctx.tracer) is Progress.FAILED:
        return

    chosen = choose_branch_cell(grid)
    if chosen is None:
        # 盤面が完成した
        _settle_singletons(grid, ctx.tracer)
        ctx.solutions_found += 1
        ctx.tracer.on_solution(grid, depth)
        yield grid
        return

    ctx.tracer.on_branch(chosen, depth)

    for value in range(1, grid.max_value + 1):
        if not chosen.is_possible(value):
            continue
        copy = grid.clone()
        copy.cell(chosen.x, chosen.y).fix(value, REASON_TRIAL, ctx.tracer)
        yield from _search(copy, ctx, depth + 1)


def solve(grid: Grid, tracer: Optional[SolveTracer] = None) -> Iterator[Grid]:
    """
    盤面の全解を遅延列挙するエントリポイントです。

    渡された盤面そのものは変更せず、コピーから探索を始めます。
    同じ盤面に対して何度呼んでも、同じ解が同じ順番で得られます。

    Parameters
    ----------
    grid : Grid
        初期値を読み込み済みの盤面。
    tracer : SolveTracer, optional
        確定・分岐イベントの通知先。省略時は何も出力しません。

    Yields
    ------
    Grid
        完成した盤面（すべての制約が満たされている）。
    """
    ctx = SearchContext(tracer=tracer or SolveTracer())
    yield from _search(grid.clone(), ctx, 0)
    logger.debug(
        "[search] done: nodes_visited = %d, solutions_found = %d",
        ctx.nodes_visited,
        ctx.solutions_found,
    )
