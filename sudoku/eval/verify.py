# sudoku/eval/verify.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List, Optional

from ..csp.grid import Grid


def verify_solution(solution: Grid, initial: Optional[Grid] = None) -> List[str]:
    """
    解として返された盤面を検査し、問題点の一覧を返します。

    - 完成していない / 重複がある制約
    - 値の入っていないマス（使用不可マスを除く）
    - 初期盤面の確定値と食い違うマス（initial を渡したときのみ）

    Returns
    -------
    list of str
        問題点の説明。空リストなら正しい解です。
    """
    problems: List[str] = []

    for constraint in solution.constraints:
        if not constraint.is_complete():
            problems.append(f"Rule {constraint.label} is not complete")

    for cell in solution.cells():
        if not cell.is_blocked and not cell.has_value:
            problems.append(f"Cell ({cell.x}, {cell.y}) has no value")

    if initial is not None:
        if (initial.width, initial.height) != (solution.width, solution.height):
            problems.append("Solution shape differs from the initial grid")
            return problems
        for given in initial.cells():
            if not given.has_value:
                continue
            got = solution.cell(given.x, given.y).value
            if got != given.value:
                problems.append(
                    f"Given {given.value} at ({given.x}, {given.y}) changed to {got}"
                )

    return problems
