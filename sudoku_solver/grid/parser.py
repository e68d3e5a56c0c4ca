# -*- coding: utf-8 -*-
"""
問題テキストや DataFrame を内部表現（numpy 配列）に正規化するモジュールです。

テキスト形式
------------
1 問につき 9 文字 x 9 行::

    53--7----
    6--195---
    -98----6-
    ...

- "1"〜"9" はヒント数字
- "0" または "-" は空きマス
- 複数の問題は空行で区切ります
"""

from __future__ import annotations

import math
from typing import Any, List, Sequence

import numpy as np
import pandas as pd

from ..config import EMPTY, EMPTY_CELL_STRINGS, EMPTY_CHARS, GRID_SIZE
from ..logging_utils import get_logger

logger = get_logger()

# ヒント数字として使える文字
DIGIT_CHARS = "123456789"


class PuzzleFormatError(ValueError):
    """問題テキストや盤面データの形式が不正なときに送出される例外です。"""

    def __init__(self, message: str, line_no: int | None = None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


def parse_row(line: str, line_no: int | None = None) -> List[int]:
    """
    1 行ぶんのテキストを 9 個の数字に変換します。

    10 文字目以降は読みません（固定幅の形式なので）。
    """
    if len(line) < GRID_SIZE:
        raise PuzzleFormatError(
            f"expected {GRID_SIZE} cells, got {len(line)}: {line!r}", line_no
        )

    row: List[int] = []
    for ch in line[:GRID_SIZE]:
        if ch in EMPTY_CHARS:
            row.append(EMPTY)
        elif ch in DIGIT_CHARS:
            row.append(int(ch))
        else:
            raise PuzzleFormatError(f"invalid cell character {ch!r}", line_no)
    return row


def parse_puzzles(text: str) -> List[np.ndarray]:
    """
    テキスト全体から問題をすべて読み取ります。

    Parameters
    ----------
    text : str
        1 問 9 行、問題同士は空行区切りのテキスト。

    Returns
    -------
    list of numpy.ndarray
        shape = (9, 9) の int 配列のリスト（ファイル内の順番どおり）。
    """
    puzzles: List[np.ndarray] = []
    rows: List[List[int]] = []
    start_line = 0

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.rstrip()
        if not line:
            if rows:
                # 9 行そろう前に空行が来た
                raise PuzzleFormatError(
                    f"puzzle starting at line {start_line} has only {len(rows)} rows",
                    line_no,
                )
            continue

        if not rows:
            start_line = line_no
        rows.append(parse_row(line, line_no))

        if len(rows) == GRID_SIZE:
            puzzles.append(np.array(rows, dtype=np.int8))
            rows = []

    if rows:
        raise PuzzleFormatError(
            f"puzzle starting at line {start_line} has only {len(rows)} rows"
        )

    return puzzles


def read_puzzles(path: str) -> List[np.ndarray]:
    """
    問題ファイルを読み込みます。

    ファイルが存在しない場合は FileNotFoundError がそのまま送出されます。
    """
    logger.info("Opened file %r for reading.", path)
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    puzzles = parse_puzzles(text)
    logger.info("Parsed %d sudokus from %r.", len(puzzles), path)
    return puzzles


def normalize_cell(x: Any) -> int:
    """
    個々のセルの値を、内部表現（0〜9 の int）に変換します。

    変換ルール
    ----------
    - None / NaN / "" / "0" / "-" / "." : 空きマス（0）
    - 0〜9 の int、または "1"〜"9" の文字列 : そのままの数字
    - それ以外 : PuzzleFormatError
    """
    if x is None:
        return EMPTY
    if isinstance(x, float):
        if math.isnan(x):
            return EMPTY
        # 欠損値を含む列は float になるので、5.0 のような値は整数に戻す
        if x.is_integer():
            x = int(x)

    # numpy の整数型もここで拾う
    if isinstance(x, (int, np.integer)) and not isinstance(x, bool):
        v = int(x)
        if EMPTY <= v <= GRID_SIZE:
            return v
        raise PuzzleFormatError(f"cell value out of range: {v}")

    s = str(x).strip()
    if s in EMPTY_CELL_STRINGS:
        return EMPTY
    if len(s) == 1 and s in DIGIT_CHARS:
        return int(s)

    raise PuzzleFormatError(f"invalid cell value: {x!r}")


def check_board_shape(board: Sequence[Sequence[Any]]) -> None:
    """
    2 次元リストの盤面が 9 行 x 9 列になっているかを確認します。

    pandas.DataFrame に変換すると短い行は None / NaN で埋められ、
    空きマスと区別できなくなるので、変換前に調べます。
    """
    if len(board) != GRID_SIZE:
        raise PuzzleFormatError(f"board must have {GRID_SIZE} rows, got {len(board)}")
    for i, row in enumerate(board):
        if len(row) != GRID_SIZE:
            raise PuzzleFormatError(
                f"row {i + 1} must have {GRID_SIZE} cells, got {len(row)}"
            )


def normalize_grid(df: pd.DataFrame) -> np.ndarray:
    """
    DataFrame から 2次元 numpy 配列に変換し、
    各セルを :func:`normalize_cell` によって正規化します。

    Parameters
    ----------
    df : pandas.DataFrame
        入力の盤面データ（9x9）。

    Returns
    -------
    numpy.ndarray
        shape = (9, 9) の int8 配列。
    """
    rows, cols = df.shape
    if (rows, cols) != (GRID_SIZE, GRID_SIZE):
        raise PuzzleFormatError(
            f"board must be {GRID_SIZE}x{GRID_SIZE}, got {rows}x{cols}"
        )

    grid = np.zeros((rows, cols), dtype=np.int8)
    for i in range(rows):
        for j in range(cols):
            grid[i, j] = normalize_cell(df.iat[i, j])

    return grid
