# -*- coding: utf-8 -*-
"""
solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 入出力ファイルの場所
- 空きマスとして扱う文字
- 探索の上限（ノード数・秒数）
- 解の検証を行うかどうか
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import FrozenSet, Optional, Tuple

# ==== 盤面の形 =============================================================

# 盤面の一辺のマス数
GRID_SIZE: int = 9

# 3x3 ブロックの一辺のマス数
BOX_SIZE: int = 3

# マスに入る数字（0 は空きマス）
DIGITS: FrozenSet[int] = frozenset(range(1, GRID_SIZE + 1))

# 空きマスを表す値
EMPTY: int = 0

# ==== テキスト形式 =========================================================

# 入力テキストで「空きマス」として扱う文字
EMPTY_CHARS: Tuple[str, ...] = ("0", "-")

# DataFrame（API 入力など）で「空きマス」として扱う文字列
EMPTY_CELL_STRINGS: Tuple[str, ...] = ("", "0", "-", ".")

# ==== 入出力ファイル関連 ===================================================

# 問題ファイルと解答ファイルの既定のパス
DEFAULT_INPUT_PATH: str = "aufgabe.txt"
DEFAULT_OUTPUT_PATH: str = "loesung.txt"

# ==== 探索関連 =============================================================

# 探索ノード数の上限。None なら無制限。
MAX_SEARCH_NODES: Optional[int] = None

# 1 問あたりの探索時間の上限（秒）。None なら無制限。
SEARCH_TIME_LIMIT_SEC: Optional[float] = None

# 何ノードごとに進捗ログ（DEBUG）を出すか
PROGRESS_LOG_INTERVAL: int = 10000

# 解けた盤面を verify_grid で検証するかどうか
VERIFY_SOLUTIONS: bool = True

# ==== ログ関連 =============================================================

# 探索トレース（--trace）の出力先ディレクトリ
SEARCH_DEBUG_LOG_DIR: str = "logs"
