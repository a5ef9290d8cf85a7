# -*- coding: utf-8 -*-
"""
探索の診断トレースを受け取る「トレーサー」をまとめたモジュールです。

探索コアは標準出力などに直接書き込まず、
ここで定義したトレーサーを引数で受け取ってイベントを通知します。

- SolveTracer     : 何もしない基底クラス（必要なフックだけ上書きする）
- LoggingTracer   : logging.Logger に書き出す
- RecordingTracer : TraceEvent のリストとしてメモリに溜める（テスト向け）
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from ..logging_utils import get_trace_logger
from ..types import TraceEvent

if TYPE_CHECKING:
    from .cell import Cell
    from .grid import Grid


class SolveTracer:
    """探索イベントのフック一覧です。既定ではすべて何もしません。"""

    def on_fix(self, cell: "Cell", value: int, reason: str) -> None:
        pass

    def on_search(self, grid: "Grid", depth: int) -> None:
        pass

    def on_branch(self, cell: "Cell", depth: int) -> None:
        pass

    def on_solution(self, grid: "Grid", depth: int) -> None:
        pass


class LoggingTracer(SolveTracer):
    def __init__(self, logger: Optional[logging.Logger] = None, show_rules: bool = False) -> None:
        self.logger = logger or get_trace_logger()
        # 探索 1 段ごとに全制約ラベルを出すと量が多いので既定では出さない
        self.show_rules = show_rules

    def on_fix(self, cell: "Cell", value: int, reason: str) -> None:
        self.logger.debug("Fixing %d on pos %d, %d: %s", value, cell.x, cell.y, reason)

    def on_search(self, grid: "Grid", depth: int) -> None:
        if self.show_rules:
            labels = ", ".join(c.label for c in grid.constraints)
            self.logger.debug("[depth=%d] Rules: %s", depth, labels)

    def on_branch(self, cell: "Cell", depth: int) -> None:
        self.logger.debug(
            "[depth=%d] Branching on pos %d, %d (%d candidates)",
            depth, cell.x, cell.y, cell.possible_count,
        )

    def on_solution(self, grid: "Grid", depth: int) -> None:
        self.logger.debug("[depth=%d] Solution found", depth)


class RecordingTracer(SolveTracer):
    """
    イベントを :class:`TraceEvent` として順番に記録します。

    Attributes
    ----------
    events : list of TraceEvent
        発生順のイベント列。
    """

    def __init__(self) -> None:
        self.events: List[TraceEvent] = []

    def on_fix(self, cell: "Cell", value: int, reason: str) -> None:
        self.events.append(TraceEvent(kind="fix", position=cell.position, value=value, reason=reason))

    def on_search(self, grid: "Grid", depth: int) -> None:
        self.events.append(
            TraceEvent(
                kind="search",
                depth=depth,
                labels=tuple(c.label for c in grid.constraints),
            )
        )

    def on_branch(self, cell: "Cell", depth: int) -> None:
        self.events.append(
            TraceEvent(kind="branch", position=cell.position, value=cell.possible_count, depth=depth)
        )

    def on_solution(self, grid: "Grid", depth: int) -> None:
        self.events.append(TraceEvent(kind="solution", depth=depth))

    def of_kind(self, kind: str) -> List[TraceEvent]:
        return [e for e in self.events if e.kind == kind]
