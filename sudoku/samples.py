# -*- coding: utf-8 -*-
"""
動作確認用のサンプル問題をまとめたモジュールです。

demo.py や API の /api/samples、テストから使います。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class SamplePuzzle:
    """
    サンプル問題 1 つ分。

    Attributes
    ----------
    name : str
        問題名。
    topology : str
        :func:`sudoku.grid.topology.build_grid` に渡すトポロジー名。
    rows : list of str
        テキスト形式の初期盤面。
    areas : list of str, optional
        jigsaw のときの領域マップ。
    options : dict
        boxes のときの width / height / box_count_x / box_count_y など。
    note : str
        補足（出典や期待される結果）。
    """

    name: str
    topology: str
    rows: List[str]
    areas: Optional[List[str]] = None
    options: Dict[str, int] = field(default_factory=dict)
    note: str = ""


SMALL_BOXES = {"width": 4, "height": 4, "box_count_x": 2, "box_count_y": 2}

# http://en.wikipedia.org/wiki/File:A_nonomino_sudoku.svg
JIGSAW_AREAS: List[str] = [
    "111233333",
    "111222333",
    "144442223",
    "114555522",
    "444456666",
    "775555688",
    "977766668",
    "999777888",
    "999997888",
]

# http://en.wikipedia.org/wiki/Sudoku の例題とその答え
WIKIPEDIA_ROWS: List[str] = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]
WIKIPEDIA_SOLUTION: List[str] = [
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
]

SAMPLES: Dict[str, SamplePuzzle] = {
    "fail": SamplePuzzle(
        name="fail",
        topology="boxes",
        options=SMALL_BOXES,
        rows=["0003", "0204", "1000", "4000"],
        note="the 2 must be a 1 on the second row to be solvable",
    ),
    "small": SamplePuzzle(
        name="small",
        topology="boxes",
        options=SMALL_BOXES,
        rows=["0003", "0004", "1000", "4000"],
    ),
    "classic": SamplePuzzle(
        name="classic",
        topology="classic",
        rows=[
            "...84...9",
            "..1.....5",
            "8...2146.",
            "7.8....9.",
            ".........",
            ".5....3.1",
            ".2491...7",
            "9.....5..",
            "3...84...",
        ],
    ),
    "incomplete_classic": SamplePuzzle(
        name="incomplete_classic",
        topology="classic",
        rows=[
            "...84...9",
            "..1.....5",
            "8...2.46.",
            "7.8....9.",
            ".........",
            ".5....3.1",
            ".2491...7",
            "9.....5..",
            "3...84...",
        ],
        note="a 1 removed from the third row, several solutions",
    ),
    "wikipedia": SamplePuzzle(
        name="wikipedia",
        topology="classic",
        rows=WIKIPEDIA_ROWS,
    ),
    "hyper": SamplePuzzle(
        name="hyper",
        topology="hyper",
        # http://en.wikipedia.org/wiki/File:Oceans_Hypersudoku18_Puzzle.svg
        rows=[
            ".......1.",
            "..2....34",
            "....51...",
            ".....65..",
            ".7.3...8.",
            "..3......",
            "....8....",
            "58....9..",
            "69.......",
        ],
    ),
    "jigsaw": SamplePuzzle(
        name="jigsaw",
        topology="jigsaw",
        areas=JIGSAW_AREAS,
        rows=[
            "3.......4",
            "..2.6.1..",
            ".1.9.8.2.",
            "..5...6..",
            ".2.....1.",
            "..9...8..",
            ".8.3.4.6.",
            "..4.1.9..",
            "5.......7",
        ],
    ),
    "samurai": SamplePuzzle(
        name="samurai",
        topology="samurai",
        # http://www.freesamuraisudoku.com/1001HardSamuraiSudokus.aspx?puzzle=42
        rows=[
            "6..8..9..///.....38..",
            "...79....///89..2.3..",
            "..2..64.5///...1...7.",
            ".57.1.2..///..5....3.",
            ".....731.///.1.3..2..",
            "...3...9.///.7..429.5",
            "4..5..1...5....5.....",
            "8.1...7...8.2..768...",
            ".......8.23...4...6..",
            "//////.12.4..9.//////",
            "//////......82.//////",
            "//////.6.....1.//////",
            ".4...1....76...36..9.",
            "2.....9..8..5.34...81",
            ".5.873......9.8..23..",
            "...2....9///.25.4....",
            "..3.64...///31.8.....",
            "..75.8.12///...6.14..",
            ".......2.///.31...9..",
            "..17.....///..7......",
            ".7.6...84///8...7..5.",
        ],
    ),
}
