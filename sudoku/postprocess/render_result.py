# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

import numpy as np
import pandas as pd

from ..config import BLOCKED_CHAR, EMPTY_CHAR
from ..csp.grid import Grid
from ..grid.parser import BLOCKED


def grid_to_array(grid: Grid) -> np.ndarray:
    """
    盤面を 2 次元 numpy 配列に変換します。

    Returns
    -------
    numpy.ndarray
        shape = (height, width) の int 配列。未確定は 0、使用不可マスは -1。
    """
    out = np.zeros((grid.height, grid.width), dtype=int)
    for cell in grid.cells():
        out[cell.y, cell.x] = BLOCKED if cell.is_blocked else cell.value
    return out


def grid_to_dataframe(grid: Grid) -> pd.DataFrame:
    """行 = y、列 = x の DataFrame にします。"""
    return pd.DataFrame(grid_to_array(grid))


def grid_to_rows(grid: Grid) -> List[str]:
    """
    盤面をテキスト形式の行リストに戻します。

    使用不可マスは '/'、未確定マスは '.' になります。
    """
    rows: List[str] = []
    for y in range(grid.height):
        chars = []
        for cell in grid.row(y):
            if cell.is_blocked:
                chars.append(BLOCKED_CHAR)
            elif cell.has_value:
                chars.append(cell.to_string_simple())
            else:
                chars.append(EMPTY_CHAR)
        rows.append("".join(chars))
    return rows


def format_grid(grid: Grid) -> str:
    return "\n".join(grid_to_rows(grid))


def format_constraints(grid: Grid) -> str:
    """各制約を「(x, y),(x, y),... - ラベル」の形で 1 行ずつ並べます。"""
    lines = []
    for constraint in grid.constraints:
        cells = ",".join(f"({cell.x}, {cell.y})" for cell in constraint)
        lines.append(f"{cells} - {constraint.label}")
    return "\n".join(lines)


def build_result(
    initial: Grid,
    solutions: Sequence[Grid],
    truncated: bool = False,
) -> Dict[str, Any]:
    """
    API / ログ向けの結果 dict を組み立てます。

    Parameters
    ----------
    initial : Grid
        初期値だけを読み込んだ盤面。
    solutions : list of Grid
        列挙された解。
    truncated : bool
        解の上限に達して列挙を打ち切ったかどうか。
    """
    status = "ok" if solutions else "unsolvable"

    return {
        "status": status,
        "shape": (initial.height, initial.width),
        "board": grid_to_rows(initial),
        "solution_count": len(solutions),
        "truncated": truncated,
        "solutions": [grid_to_rows(s) for s in solutions],
    }
