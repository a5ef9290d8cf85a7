# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- 探索中の「どのマスを何で確定したか」は量が多いので、
  通常のログとは別の「トレース用ロガー」に出力します。
"""

from __future__ import annotations

import logging
import os

from .config import LOG_LEVEL, TRACE_LOG_FILE

# sudoku パッケージ共通で使うロガー名
LOGGER_NAME = "sudoku"

# 確定・分岐のトレースを出すロガー名
TRACE_LOGGER_NAME = "sudoku.trace"


def get_logger() -> logging.Logger:
    """
    sudoku 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に LOG_LEVEL のログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL)

    return logger


def get_trace_logger(log_file: str = TRACE_LOG_FILE) -> logging.Logger:
    logger = logging.getLogger(TRACE_LOGGER_NAME)

    if logger.handlers:
        return logger  # すでに初期化済み

    logger.setLevel(logging.DEBUG)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    # 親ロガー（sudoku）への伝播禁止（通常ログに混ぜない）
    logger.propagate = False

    return logger
