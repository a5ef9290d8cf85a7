# -*- coding: utf-8 -*-
"""
盤面（Grid）を表すモジュールです。

Grid は
- マス（Cell）の 2 次元配列（numpy の object 配列, shape = (height, width)）
- 制約（Constraint）のリスト
を排他的に所有し、制約伝播を不動点まで回す処理と、
バックトラック用の「丸ごとコピー」を提供します。

座標は (x, y) で、x が列、y が行です。配列は [y, x] で引きます。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

import numpy as np

from ..types import CellCoord, Progress, combine_progress
from .cell import Cell
from .constraint import Constraint

if TYPE_CHECKING:
    from .trace import SolveTracer


def box_positions(size_x: int, size_y: int) -> Iterator[CellCoord]:
    """
    size_x * size_y の矩形内の相対座標 (x, y) を列挙します。

    x が外側のループです（x=0 の列を上から下へ、次に x=1 ...）。
    """
    for x in range(size_x):
        for y in range(size_y):
            yield (x, y)


class Grid:
    """
    マスと制約を持つ盤面です。

    Parameters
    ----------
    width, height : int
        盤面の列数・行数。
    max_value : int, optional
        値ドメインの大きさ。省略時は max(width, height)。
    line_rules : bool, optional
        行・列の制約を自動で登録するかどうか。
        省略時は「幅または高さが max_value と等しい」場合に、
        行と列の両方の制約を登録します。
    """

    def __init__(
        self,
        width: int,
        height: int,
        max_value: Optional[int] = None,
        line_rules: Optional[bool] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive. Was {width}x{height}")

        self._max_value = max_value if max_value is not None else max(width, height)
        self._cells = np.empty((height, width), dtype=object)
        for y in range(height):
            for x in range(width):
                self._cells[y, x] = Cell(x, y, self._max_value)

        self._constraints: List[Constraint] = []

        if line_rules is None or line_rules:
            self._setup_line_rules(force=bool(line_rules))

    # ---- 基本属性 ---------------------------------------------------------

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def max_value(self) -> int:
        return self._max_value

    @property
    def constraints(self) -> List[Constraint]:
        return list(self._constraints)

    def cell(self, x: int, y: int) -> Cell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self.width}x{self.height} grid")
        return self._cells[y, x]

    def cells(self) -> Iterator[Cell]:
        """全マスを行優先（y → x の順）で列挙します。"""
        return iter(self._cells.flat)

    def row(self, y: int) -> List[Cell]:
        return list(self._cells[y, :])

    def column(self, x: int) -> List[Cell]:
        return list(self._cells[:, x])

    def tile_box(self, start_x: int, start_y: int, size_x: int, size_y: int) -> List[Cell]:
        return [
            self.cell(start_x + dx, start_y + dy)
            for dx, dy in box_positions(size_x, size_y)
        ]

    # ---- 構築（トポロジー側から使う公開 API） -----------------------------

    def block(self, x: int, y: int) -> None:
        self.cell(x, y).block()

    def register_constraint(self, label: str, cells: Iterable[Cell]) -> Constraint:
        """
        この盤面のマスからなる制約を登録します。

        別の盤面（クローン元など）のマスを渡すと ValueError になります。
        """
        members = list(cells)
        for member in members:
            inside = 0 <= member.x < self.width and 0 <= member.y < self.height
            if not inside or self.cell(member.x, member.y) is not member:
                raise ValueError(
                    f"Cell {member.position} of rule {label!r} does not belong to this grid"
                )
        constraint = Constraint(members, label)
        self._constraints.append(constraint)
        return constraint

    def _setup_line_rules(self, force: bool = False) -> None:
        if not force and self._max_value not in (self.width, self.height):
            return
        for x in range(self.width):
            self.register_constraint(f"Col {x}", self.column(x))
        for y in range(self.height):
            self.register_constraint(f"Row {y}", self.row(y))

    def add_box_rules(self, box_count_x: int, box_count_y: int) -> None:
        """盤面を box_count_x * box_count_y 個の矩形ボックスに分け、それぞれを制約にします。"""
        if self.width % box_count_x or self.height % box_count_y:
            raise ValueError(
                f"A {self.width}x{self.height} grid cannot be split into "
                f"{box_count_x}x{box_count_y} boxes"
            )
        size_x = self.width // box_count_x
        size_y = self.height // box_count_y

        for bx, by in box_positions(box_count_x, box_count_y):
            self.register_constraint(
                f"Box at ({bx}, {by})",
                self.tile_box(bx * size_x, by * size_y, size_x, size_y),
            )

    # ---- クローン ---------------------------------------------------------

    def clone(self) -> "Grid":
        """
        盤面を丸ごとコピーします。

        マスは新しく作り直し、制約は「同じ座標の新しいマス」を参照するように
        組み直します（元の盤面とは可変状態を一切共有しません）。
        """
        copy = Grid(self.width, self.height, self._max_value, line_rules=False)
        for cell in self.cells():
            copy.cell(cell.x, cell.y).copy_state_from(cell)

        for constraint in self._constraints:
            copy.register_constraint(
                constraint.label,
                (copy.cell(member.x, member.y) for member in constraint),
            )
        return copy

    # ---- 判定 -------------------------------------------------------------

    def is_valid(self) -> bool:
        return all(constraint.is_valid() for constraint in self._constraints)

    def is_complete(self) -> bool:
        return all(constraint.is_complete() for constraint in self._constraints)

    # ---- 制約伝播 ---------------------------------------------------------

    def reset_candidates(self) -> None:
        for cell in self.cells():
            cell.reset_candidates()

    def simplify(self, tracer: Optional["SolveTracer"] = None) -> Progress:
        """
        制約伝播を 1 パスだけ行います。

        先に全制約の妥当性を確認し、重複があればその時点で FAILED です。
        """
        if not self.is_valid():
            return Progress.FAILED

        result = Progress.NO_PROGRESS
        for constraint in self._constraints:
            result = combine_progress(result, constraint.propagate(tracer))
        return result

    def propagate_to_fixpoint(self, tracer: Optional["SolveTracer"] = None) -> Progress:
        """
        simplify() を、PROGRESS が返らなくなるまで繰り返します。

        Returns
        -------
        Progress
            NO_PROGRESS（不動点に到達）または FAILED（矛盾を検出）。
        """
        result = Progress.PROGRESS
        while result is Progress.PROGRESS:
            result = self.simplify(tracer)
        return result

    # ---- 探索 -------------------------------------------------------------

    def solve(self, tracer: Optional["SolveTracer"] = None) -> Iterator["Grid"]:
        """全解を遅延列挙します。詳細は :func:`sudoku.csp.search.solve` を参照。"""
        from .search import solve

        return solve(self, tracer)

    def __repr__(self) -> str:
        return (
            f"Grid({self.width}x{self.height}, max_value={self._max_value}, "
            f"{len(self._constraints)} rules)"
        )
