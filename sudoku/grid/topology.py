# -*- coding: utf-8 -*-
"""
代表的な盤面の「形」（トポロジー）を組み立てるモジュールです。

ここにある関数はすべて
1. Grid を作る
2. 必要なら使用不可マスを block する
3. register_constraint() で制約を登録する
だけを行い、探索や伝播のロジックは持ちません。

- size_and_boxes             : 行・列 + 矩形ボックス（4x4, 6x6, 9x9 など）
- classic                    : 9x9 / 3x3 ボックスの標準ナンプレ
- classic_with_hyper_regions : 標準 + 4 つの追加 3x3 領域（ハイパー）
- jigsaw                     : 文字で領域を塗り分けた不規則ブロック
- samurai                    : 9x9 を 5 枚重ねたサムライナンプレ
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..config import BOX_SIZE, DEFAULT_SIZE, HYPER_MARGIN, SAMURAI_AREAS
from ..csp.grid import Grid, box_positions

# サムライを構成する 5 枚の 9x9 盤面の左上座標
SAMURAI_ORIGINS: Dict[str, Tuple[int, int]] = {
    "Upper Left": (0, 0),
    "Upper Right": (DEFAULT_SIZE + BOX_SIZE, 0),
    "Middle": (BOX_SIZE * 2, BOX_SIZE * 2),
    "Lower Left": (0, DEFAULT_SIZE + BOX_SIZE),
    "Lower Right": (DEFAULT_SIZE + BOX_SIZE, DEFAULT_SIZE + BOX_SIZE),
}


def size_and_boxes(width: int, height: int, box_count_x: int, box_count_y: int) -> Grid:
    """行・列の制約に加えて、box_count_x * box_count_y 個のボックスを持つ盤面を作ります。"""
    grid = Grid(width, height)
    grid.add_box_rules(box_count_x, box_count_y)
    return grid


def classic() -> Grid:
    return size_and_boxes(
        DEFAULT_SIZE, DEFAULT_SIZE, DEFAULT_SIZE // BOX_SIZE, DEFAULT_SIZE // BOX_SIZE
    )


def classic_with_hyper_regions() -> Grid:
    grid = classic()
    second = HYPER_MARGIN + BOX_SIZE + HYPER_MARGIN
    corners = {
        "HyperA": (HYPER_MARGIN, HYPER_MARGIN),
        "HyperB": (second, HYPER_MARGIN),
        "HyperC": (HYPER_MARGIN, second),
        "HyperD": (second, second),
    }
    for label, (x, y) in corners.items():
        grid.register_constraint(label, grid.tile_box(x, y, BOX_SIZE, BOX_SIZE))
    return grid


def jigsaw(areas: Sequence[str]) -> Grid:
    """
    領域マップから不規則ブロックの盤面を作ります。

    Parameters
    ----------
    areas : list of str
        盤面と同じ形の文字列リスト。同じ文字のマスが 1 つの領域になります。
        例: ["1122", "1122", "3344", "3344"]

    Returns
    -------
    Grid
        行・列 + 文字ごとの領域制約を持つ盤面。
    """
    if not areas:
        raise ValueError("Area map has no rows")
    size_x = len(areas[0])
    size_y = len(areas)
    if any(len(row) != size_x for row in areas):
        raise ValueError("All rows of the area map must have the same length")

    area_map = np.array([list(row) for row in areas])
    grid = Grid(size_x, size_y)

    # 出現順に領域を登録する
    for ch in pd.unique(area_map.ravel()):
        ys, xs = np.nonzero(area_map == ch)
        grid.register_constraint(
            f"Area {ch}",
            [grid.cell(int(x), int(y)) for y, x in zip(ys, xs)],
        )
    return grid


def samurai() -> Grid:
    """
    21x21 のサムライナンプレ盤面を作ります。

    5 枚の 9x9 盤面が四隅の 3x3 ボックスで重なり、
    どの盤面にも属さない部分は使用不可マスになります。
    """
    size = SAMURAI_AREAS * BOX_SIZE
    grid = Grid(size, size, DEFAULT_SIZE)

    # 盤面の無い部分に穴を空ける
    gaps: List[Tuple[int, int, int, int]] = [
        (DEFAULT_SIZE, 0, BOX_SIZE, BOX_SIZE * 2),
        (DEFAULT_SIZE, DEFAULT_SIZE * 2 - BOX_SIZE, BOX_SIZE, BOX_SIZE * 2),
        (0, DEFAULT_SIZE, BOX_SIZE * 2, BOX_SIZE),
        (DEFAULT_SIZE * 2 - BOX_SIZE, DEFAULT_SIZE, BOX_SIZE * 2, BOX_SIZE),
    ]
    for start_x, start_y, size_x, size_y in gaps:
        for cell in grid.tile_box(start_x, start_y, size_x, size_y):
            cell.block()

    # 3x3 エリアごとにボックス制約（穴のエリアは飛ばす）
    for ax, ay in box_positions(SAMURAI_AREAS, SAMURAI_AREAS):
        area = grid.tile_box(ax * BOX_SIZE, ay * BOX_SIZE, BOX_SIZE, BOX_SIZE)
        if area[0].is_blocked:
            continue
        grid.register_constraint(f"Area {ax}, {ay}", area)

    # 5 枚それぞれの行・列
    for name, (ox, oy) in SAMURAI_ORIGINS.items():
        for i in range(DEFAULT_SIZE):
            grid.register_constraint(
                f"Row {name} {i}", grid.tile_box(ox, oy + i, DEFAULT_SIZE, 1)
            )
            grid.register_constraint(
                f"Column {name} {i}", grid.tile_box(ox + i, oy, 1, DEFAULT_SIZE)
            )
    return grid


def _boxes_from_options(
    width: Optional[int] = None,
    height: Optional[int] = None,
    box_count_x: Optional[int] = None,
    box_count_y: Optional[int] = None,
    **_: object,
) -> Grid:
    if None in (width, height, box_count_x, box_count_y):
        raise ValueError("Topology 'boxes' needs width, height, box_count_x and box_count_y")
    return size_and_boxes(width, height, box_count_x, box_count_y)  # type: ignore[arg-type]


def _jigsaw_from_options(areas: Optional[Sequence[str]] = None, **_: object) -> Grid:
    if not areas:
        raise ValueError("Topology 'jigsaw' needs an area map")
    return jigsaw(areas)


TOPOLOGY_BUILDERS: Dict[str, Callable[..., Grid]] = {
    "classic": lambda **_: classic(),
    "hyper": lambda **_: classic_with_hyper_regions(),
    "samurai": lambda **_: samurai(),
    "jigsaw": _jigsaw_from_options,
    "boxes": _boxes_from_options,
}


def build_grid(topology: str, **options: object) -> Grid:
    """
    トポロジー名から盤面を作ります。

    Parameters
    ----------
    topology : str
        "classic", "hyper", "samurai", "jigsaw", "boxes" のいずれか。
    **options
        "jigsaw" なら areas、"boxes" なら width / height / box_count_x / box_count_y。
    """
    builder = TOPOLOGY_BUILDERS.get(topology)
    if builder is None:
        raise ValueError(
            f"Unknown topology {topology!r}. Expected one of {sorted(TOPOLOGY_BUILDERS)}"
        )
    return builder(**options)
