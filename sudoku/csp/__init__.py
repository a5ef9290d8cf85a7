# -*- coding: utf-8 -*-
"""
sudoku.csp パッケージ

制約充足（制約伝播 + 全解探索）のコアをまとめています。

主に以下の役割を持つモジュールから構成されています。
- cell.py       : 1 マス（確定値と候補集合）
- constraint.py : 「領域内の値はすべて異なる」制約と、その伝播ルール
- grid.py       : マスと制約を所有する盤面、不動点までの制約伝播、クローン
- search.py     : 分岐とバックトラックによる全解の遅延列挙
- trace.py      : 確定・分岐イベントを受け取るトレーサー
"""

from .cell import Cell
from .constraint import Constraint
from .grid import Grid, box_positions
from .search import choose_branch_cell, solve
from .trace import LoggingTracer, RecordingTracer, SolveTracer

__all__ = [
    "Cell",
    "Constraint",
    "Grid",
    "box_positions",
    "choose_branch_cell",
    "solve",
    "LoggingTracer",
    "RecordingTracer",
    "SolveTracer",
]
