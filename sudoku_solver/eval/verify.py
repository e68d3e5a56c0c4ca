# sudoku_solver/eval/verify.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Iterator, List, Tuple

import numpy as np

from ..config import BOX_SIZE, DIGITS, EMPTY, GRID_SIZE


def iter_units(grid: np.ndarray) -> Iterator[Tuple[str, np.ndarray]]:
    """
    行・列・3x3 ブロックを (名前, 9 個の値) の形で順に返す。
    名前は "row 1" のような 1 始まりの表記。
    """
    for i in range(GRID_SIZE):
        yield f"row {i + 1}", grid[i, :]
    for j in range(GRID_SIZE):
        yield f"column {j + 1}", grid[:, j]
    for br in range(0, GRID_SIZE, BOX_SIZE):
        for bc in range(0, GRID_SIZE, BOX_SIZE):
            name = f"block ({br // BOX_SIZE + 1},{bc // BOX_SIZE + 1})"
            yield name, grid[br:br + BOX_SIZE, bc:bc + BOX_SIZE].ravel()


def verify_grid(grid) -> bool:
    """
    完成盤面の検証。探索には使わず、デバッグとテスト用。

    すべての行・列・ブロックに 1〜9 がちょうど 1 回ずつ現れ、
    0 が 1 つもなければ True。
    """
    arr = np.asarray(grid)
    if arr.shape != (GRID_SIZE, GRID_SIZE):
        return False
    for _, values in iter_units(arr):
        if set(values.tolist()) != DIGITS:
            return False
    return True


def find_given_conflicts(grid) -> List[str]:
    """
    ヒント数字どうしの矛盾（同じ行・列・ブロックに同じ数字が 2 回以上）を列挙する。

    Returns
    -------
    list of str
        "row 3 has duplicate digit 5" のようなメッセージのリスト。矛盾がなければ空。
    """
    arr = np.asarray(grid)
    conflicts: List[str] = []
    for name, values in iter_units(arr):
        filled = values[values != EMPTY]
        digits, counts = np.unique(filled, return_counts=True)
        for d, n in zip(digits.tolist(), counts.tolist()):
            if n > 1:
                conflicts.append(f"{name} has duplicate digit {d}")
    return conflicts
