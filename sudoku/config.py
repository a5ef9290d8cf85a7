# -*- coding: utf-8 -*-
"""
sudoku パッケージ全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集する（または環境変数を設定する）ことで
- 盤面トポロジーの基本サイズ
- テキスト形式の記号
- 探索で列挙する解の上限
- ログ出力レベル / トレースの出力先
などを簡単に変更できます。
"""

from __future__ import annotations

import os

# ==== 盤面トポロジー関連 ===================================================

# 標準的なナンプレの一辺のマス数（= 値ドメインの大きさ）
DEFAULT_SIZE: int = 9

# 標準的なボックスの一辺
BOX_SIZE: int = 3

# サムライナンプレ全体を 3x3 エリアで区切ったときの一辺のエリア数
SAMURAI_AREAS: int = 7

# ハイパーナンプレの追加領域が外枠からどれだけ離れているか
HYPER_MARGIN: int = 1

# ==== テキスト形式 =========================================================

# 使用不可マス（どの制約にも属さない穴）を表す文字
BLOCKED_CHAR: str = "/"

# 未確定マスを表す文字（'0' も未確定として扱われます）
EMPTY_CHAR: str = "."

# ==== 探索関連 =============================================================

# solve() パイプライン / API で列挙する解の最大数。
# 探索そのものは遅延評価なので、上限に達した時点で打ち切られます。
MAX_SOLUTIONS: int = int(os.getenv("SUDOKU_MAX_SOLUTIONS", "100"))

# ==== 確定理由（トレース用の文言） =========================================

REASON_SINGLE: str = "Only one possibility"
REASON_TRIAL: str = "Trial and error"
# {rule} には制約のラベルが入ります
REASON_ONLY_HOLDER: str = "Only possible in rule {rule}"

# ==== ログ関連 =============================================================

# sudoku ロガーの出力レベル
LOG_LEVEL: str = os.getenv("SUDOKU_LOG_LEVEL", "INFO")

# トレースログの出力先ファイル。空文字なら標準エラー出力に出します。
TRACE_LOG_FILE: str = os.getenv("SUDOKU_TRACE_LOG", "")
