# -*- coding: utf-8 -*-
"""
テキスト形式の盤面を内部表現に変換し、Grid に読み込むモジュールです。

テキスト形式
------------
1 行の文字列が盤面の 1 行に対応します。
- '0'〜'9' : その数字を確定値として入れる（'0' は未確定）
- '.'      : 未確定
- '/'      : 使用不可マス

主な役割:
- 文字列の行リストを numpy 配列（int）に変換
- pandas.DataFrame（API から来る 2 次元配列）を行文字列に変換
- 変換結果を Grid のマスへ反映
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..config import BLOCKED_CHAR, EMPTY_CHAR
from ..csp.grid import Grid

# 使用不可マスを表す内部コード
BLOCKED = -1


def normalize_cell(ch: str) -> int:
    """
    1 文字を内部コードに変換します。

    変換ルール
    ----------
    - '/'       → BLOCKED (-1)
    - '.'       → 0
    - '0'〜'9'  → その数字
    - それ以外  → ValueError
    """
    if ch == BLOCKED_CHAR:
        return BLOCKED
    if ch == EMPTY_CHAR:
        return 0
    if len(ch) == 1 and ch.isdigit():
        return int(ch)
    raise ValueError(f"Unexpected character {ch!r} in puzzle row")


def parse_rows(
    rows: Sequence[str],
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> np.ndarray:
    """
    行文字列のリストを 2 次元 numpy 配列に変換します。

    Parameters
    ----------
    rows : list of str
        盤面の各行。
    width, height : int, optional
        期待する盤面サイズ。指定した場合、行の長さ・行数が一致しなければ
        ValueError を送出します。省略時は最初の行に揃っているかだけを確認します。

    Returns
    -------
    numpy.ndarray
        shape = (height, width) の int 配列。
    """
    if height is not None and len(rows) != height:
        raise ValueError(f"Expected {height} rows, got {len(rows)}")
    if not rows:
        raise ValueError("Puzzle has no rows")

    expected = width if width is not None else len(rows[0])
    board = np.zeros((len(rows), expected), dtype=int)

    for y, row in enumerate(rows):
        if len(row) != expected:
            raise ValueError(f"Row {y} has length {len(row)}, expected {expected}: {row!r}")
        for x, ch in enumerate(row):
            board[y, x] = normalize_cell(ch)

    return board


def _cell_to_char(x: Any) -> str:
    # API からは "" / None / 数値 などが来るので 1 文字に揃える
    if x is None or pd.isna(x):
        return EMPTY_CHAR
    s = str(x).strip()
    return s if s else EMPTY_CHAR


def rows_from_dataframe(df: pd.DataFrame) -> List[str]:
    """
    DataFrame（1 セル 1 文字）の盤面を行文字列のリストに変換します。

    空セル・None は '.' として扱います。
    """
    rows: List[str] = []
    n_rows, n_cols = df.shape
    for i in range(n_rows):
        rows.append("".join(_cell_to_char(df.iat[i, j]) for j in range(n_cols)))
    return rows


def load_rows(grid: Grid, rows: Sequence[str]) -> Grid:
    """
    行文字列を Grid のマスに読み込みます。

    数字が grid.max_value を超える場合は OutOfRangeError になります。
    """
    board = parse_rows(rows, width=grid.width, height=grid.height)

    for (y, x), code in np.ndenumerate(board):
        if code == BLOCKED:
            grid.block(x, y)
        else:
            grid.cell(x, y).assign(int(code))

    return grid
