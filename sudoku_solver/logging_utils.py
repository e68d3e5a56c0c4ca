# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- 開発中やデバッグ時に「どこまで処理が進んだか」「何が起きたか」を
  確認するのに役立ちます。
"""

from __future__ import annotations

import logging
import os

from .config import SEARCH_DEBUG_LOG_DIR

# solver パッケージ共通で使うロガー名
LOGGER_NAME = "sudoku_solver"

SEARCH_DEBUG_LOGGER_NAME = "sudoku_solver.search_debug"


def get_logger() -> logging.Logger:
    """
    solver 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に INFO レベルのログを表示するように設定します。
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
        logger.setLevel(logging.INFO)

    return logger


def get_search_debug_logger(log_dir: str = SEARCH_DEBUG_LOG_DIR) -> logging.Logger:
    """
    探索木の 1 ノードごとのトレースを書き出すファイル logger を返します。

    ノード数が多いとログも膨大になるので、標準出力には流さず
    ``<log_dir>/search_debug.log`` にだけ書き込みます。
    """
    logger = logging.getLogger(SEARCH_DEBUG_LOGGER_NAME)

    if logger.handlers:
        return logger  # すでに初期化済み

    logger.setLevel(logging.DEBUG)

    # ログファイル保存場所
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "search_debug.log")

    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    fh.setFormatter(formatter)

    logger.addHandler(fh)

    # 他ロガーへの伝播禁止（stdout に出さない）
    logger.propagate = False

    return logger
