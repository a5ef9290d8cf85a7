# -*- coding: utf-8 -*-
"""
盤面の 1 マス（Cell）を表すモジュールです。

マスは
- 確定値 value（0 は未確定）
- まだ矛盾しない候補値の集合 candidates
- 使用不可フラグ blocked
を持ちます。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Set

from ..config import REASON_SINGLE
from ..types import CellCoord, OutOfRangeError, Progress

if TYPE_CHECKING:
    from .trace import SolveTracer

# 未確定を表す値
CLEARED = 0


class Cell:
    def __init__(self, x: int, y: int, max_value: int) -> None:
        self._x = x
        self._y = y
        self._max_value = max_value
        self._value = CLEARED
        self._blocked = False
        # 伝播の開始時に reset_candidates() で埋められる
        self._candidates: Set[int] = set()

    # ---- 基本属性 ---------------------------------------------------------

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def position(self) -> CellCoord:
        return (self._x, self._y)

    @property
    def max_value(self) -> int:
        return self._max_value

    @property
    def value(self) -> int:
        return self._value

    @property
    def has_value(self) -> bool:
        return self._value != CLEARED

    @property
    def is_blocked(self) -> bool:
        # 使用不可マスは盤面に「穴」を空けるために使う
        return self._blocked

    @property
    def candidates(self) -> Set[int]:
        """現在の候補集合のコピーを返します。"""
        return set(self._candidates)

    @property
    def possible_count(self) -> int:
        """
        候補の数を返します。

        使用不可マスは分岐対象にならないよう、常に 1 を返します。
        """
        return 1 if self._blocked else len(self._candidates)

    # ---- 変更操作 ---------------------------------------------------------

    def assign(self, value: int) -> None:
        """
        確定値を設定します。候補集合は変更しません。

        Raises
        ------
        OutOfRangeError
            value が [0, max_value] の範囲外のとき。
        """
        if value > self._max_value:
            raise OutOfRangeError(
                f"Cell value cannot be greater than {self._max_value}. Was {value}"
            )
        if value < CLEARED:
            raise OutOfRangeError(f"Cell value cannot be negative. Was {value}")
        self._value = value

    def block(self) -> None:
        self._blocked = True

    def fix(self, value: int, reason: str, tracer: Optional["SolveTracer"] = None) -> None:
        """
        値を確定し、候補集合を {value} に縮めます。

        Parameters
        ----------
        value : int
            確定する値。
        reason : str
            確定理由（診断用。ロジックには使いません）。
        tracer : SolveTracer, optional
            確定イベントの通知先。
        """
        self.assign(value)
        self._candidates = {value}
        if tracer is not None:
            tracer.on_fix(self, value, reason)

    def reset_candidates(self) -> None:
        if self._blocked or self.has_value:
            self._candidates = {self._value}
        else:
            self._candidates = set(range(1, self._max_value + 1))

    def remove_candidates(
        self,
        excluded: Iterable[int],
        tracer: Optional["SolveTracer"] = None,
    ) -> Progress:
        """
        excluded に含まれる値を候補から取り除きます。

        Returns
        -------
        Progress
            - 候補が 1 つに絞れた → そのマスを確定して PROGRESS
            - 候補が空になった   → FAILED
            - それ以外           → NO_PROGRESS
        """
        if self._blocked:
            return Progress.NO_PROGRESS

        self._candidates = self._candidates - set(excluded)

        if len(self._candidates) == 1:
            (only,) = self._candidates
            self.fix(only, REASON_SINGLE, tracer)
            return Progress.PROGRESS
        if not self._candidates:
            return Progress.FAILED
        return Progress.NO_PROGRESS

    def is_possible(self, value: int) -> bool:
        return value in self._candidates

    # ---- クローン用 -------------------------------------------------------

    def copy_state_from(self, other: "Cell") -> None:
        """別の盤面の同じ座標のマスから、値・候補・使用不可フラグを写します。"""
        self._value = other._value
        self._blocked = other._blocked
        self._candidates = set(other._candidates)

    def to_string_simple(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Value {self._value} at pos {self._x}, {self._y}."
