# -*- coding: utf-8 -*-
"""
sudoku.grid パッケージ

盤面（グリッド）の組み立てと読み込みをまとめたサブパッケージです。
- parser.py   : テキスト形式 / DataFrame から盤面への読み込み
- topology.py : 標準・ハイパー・ジグソー・サムライなどの盤面の形の組み立て
"""
