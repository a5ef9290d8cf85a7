# -*- coding: utf-8 -*-
"""
ナンプレ solver で使う主なデータ構造（型）をまとめたモジュールです。

- Progress : 制約伝播 1 回分の結果（失敗 / 変化なし / 進展あり）
- TraceEvent : 確定・分岐などの診断イベント

dataclass / Enum を使うことで、
「この値はどんな状態を取り得るのか」を分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

# グリッド上の座標を表す型 (x, y)。x が列、y が行です。
CellCoord = Tuple[int, int]


class OutOfRangeError(ValueError):
    """マスに値ドメイン [0, max_value] の外の値を入れようとしたときの例外。"""


class Progress(Enum):
    """
    制約伝播の結果を表す 3 値です。

    - FAILED      : 矛盾が見つかった（この盤面には解がない）
    - NO_PROGRESS : 何も変化しなかった
    - PROGRESS    : 候補の削除やマスの確定が起きた
    """

    FAILED = "failed"
    NO_PROGRESS = "no_progress"
    PROGRESS = "progress"

    def combine(self, other: "Progress") -> "Progress":
        """:func:`combine_progress` のメソッド版です。"""
        return combine_progress(self, other)


def combine_progress(a: Progress, b: Progress) -> Progress:
    """
    2 つの Progress を合成します。

    FAILED は吸収元（どちらかが FAILED なら FAILED）、
    それ以外はどちらかが PROGRESS なら PROGRESS、
    両方 NO_PROGRESS なら NO_PROGRESS です。
    """
    if a is Progress.FAILED or b is Progress.FAILED:
        return Progress.FAILED
    if a is Progress.PROGRESS or b is Progress.PROGRESS:
        return Progress.PROGRESS
    return Progress.NO_PROGRESS


@dataclass
class TraceEvent:
    """
    探索中に発生した診断イベントを表すクラスです。

    Attributes
    ----------
    kind : str
        "fix"（マスの確定）、"search"（探索 1 段の開始）、
        "branch"（分岐マスの選択）、"solution"（解の発見）のいずれか。
    position : (x, y) or None
        対象マスの座標。"search" / "solution" では None。
    value : int
        確定した値（"fix"）や候補数（"branch"）。それ以外は 0。
    reason : str
        確定理由などの自由記述。
    depth : int
        探索木の深さ。
    labels : tuple of str
        "search" のときに有効な制約ラベルの一覧。
    """

    kind: str
    position: Optional[CellCoord] = None
    value: int = 0
    reason: str = ""
    depth: int = 0
    labels: Tuple[str, ...] = field(default_factory=tuple)
