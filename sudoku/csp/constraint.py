# -*- coding: utf-8 -*-
"""
「領域内の確定値はすべて異なる」という制約（Constraint）を表すモジュールです。

行・列・ボックス・ジグソーの不規則領域・サムライの重なり部分など、
形に関係なく「マスの集合 + ラベル」として扱います。

制約は 2 種類の伝播ルールを持ちます。
- eliminate    : 領域内で確定済みの値を、未確定マスの候補から取り除く
- forced_value : ある値を置けるマスが領域内に 1 つしかなければ、そこに確定する
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Set, Tuple

from ..config import REASON_ONLY_HOLDER
from ..types import Progress, combine_progress
from .cell import Cell

if TYPE_CHECKING:
    from .trace import SolveTracer


class Constraint:
    def __init__(self, cells: Iterable[Cell], label: str) -> None:
        # 同じマスの重複登録を除きつつ、登録順は保持する
        self._cells: Tuple[Cell, ...] = tuple(dict.fromkeys(cells))
        self._label = label

    @property
    def label(self) -> str:
        return self._label

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return self._cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Constraint({self._label!r}, {len(self._cells)} cells)"

    def _open_cells(self) -> List[Cell]:
        # 使用不可マスは値を持てないので、制約の対象から外す
        return [cell for cell in self._cells if not cell.is_blocked]

    def existing_values(self) -> Set[int]:
        """この領域ですでに確定している値の集合を返します。"""
        return {cell.value for cell in self._cells if cell.has_value}

    # ---- 判定 -------------------------------------------------------------

    def is_valid(self) -> bool:
        counts = Counter(cell.value for cell in self._cells if cell.has_value)
        return all(n == 1 for n in counts.values())

    def is_complete(self) -> bool:
        return all(cell.has_value for cell in self._open_cells()) and self.is_valid()

    # ---- 伝播 -------------------------------------------------------------

    def eliminate(self, tracer: Optional["SolveTracer"] = None) -> Progress:
        existing = self.existing_values()

        result = Progress.NO_PROGRESS
        for cell in self._cells:
            if cell.has_value:
                continue
            result = combine_progress(result, cell.remove_candidates(existing, tracer))
        return result

    def forced_value(self, tracer: Optional["SolveTracer"] = None) -> Progress:
        """
        「隠れたシングル」を探して確定します。

        領域内でまだ確定していない値 v のそれぞれについて、
        v を候補に持つ未確定マスを数えます。

        - 0 個 → この領域は満たせないので、即座に FAILED
        - 1 個 → そのマスを v に確定して PROGRESS
        - 2 個以上 → 何もしない
        """
        existing = self.existing_values()
        result = Progress.NO_PROGRESS

        for value in range(1, len(self._open_cells()) + 1):
            if value in existing:
                continue

            holders = [
                cell for cell in self._cells
                if not cell.has_value and cell.is_possible(value)
            ]
            if not holders:
                return Progress.FAILED
            if len(holders) == 1:
                holders[0].fix(value, REASON_ONLY_HOLDER.format(rule=self._label), tracer)
                result = Progress.PROGRESS

        return result

    def propagate(self, tracer: Optional["SolveTracer"] = None) -> Progress:
        eliminated = self.eliminate(tracer)
        forced = self.forced_value(tracer)
        return combine_progress(eliminated, forced)
