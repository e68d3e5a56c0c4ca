# -*- coding: utf-8 -*-
"""
9x9 の盤面を保持するモジュールです。

盤面そのものは numpy 配列（int8）で持ちますが、
探索中に書き換えてよいのは :meth:`Grid.commit` と :meth:`Grid.clear` だけ、
というルールにしています。
ドメイン（候補数字）の計算は :mod:`..csp.domains` の SlotPool の担当で、
このクラスは「今どのマスに何が入っているか」だけを知っています。
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

import numpy as np

from ..config import BOX_SIZE, DIGITS, EMPTY, GRID_SIZE
from ..types import CellCoord


def box_origin(row: int, col: int) -> CellCoord:
    """(row, col) を含む 3x3 ブロックの左上の座標を返します。"""
    return (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE


def box_index(row: int, col: int) -> int:
    """(row, col) を含む 3x3 ブロックの番号（0〜8、行優先）を返します。"""
    return (row // BOX_SIZE) * BOX_SIZE + col // BOX_SIZE


class Grid:
    """
    数独の盤面です。

    Parameters
    ----------
    cells : array-like
        9x9 の整数（0〜9）。0 は空きマス。
        渡された配列はコピーされるので、呼び出し側の配列は書き換わりません。

    Raises
    ------
    ValueError
        形が 9x9 でない、または 0〜9 以外の値が含まれている場合。
    """

    def __init__(self, cells: Iterable[Sequence[int]] | np.ndarray):
        arr = np.array(cells, dtype=np.int64)
        if arr.shape != (GRID_SIZE, GRID_SIZE):
            raise ValueError(
                f"Grid must be {GRID_SIZE}x{GRID_SIZE}, got shape {arr.shape}"
            )
        if arr.min() < EMPTY or arr.max() > GRID_SIZE:
            raise ValueError(f"Grid values must be in [0, {GRID_SIZE}]")

        self._cells = arr.astype(np.int8)

    # ---- 読み取り -----------------------------------------------------------

    def value(self, row: int, col: int) -> int:
        return int(self._cells[row, col])

    def rows(self) -> List[List[int]]:
        """盤面を Python の 2 次元リストで返します（探索中の高速読み取り用）。"""
        return self._cells.tolist()

    def to_numpy(self) -> np.ndarray:
        """盤面のコピーを返します。"""
        return self._cells.copy()

    def empty_cells(self) -> List[CellCoord]:
        """空きマスの座標を行優先の順で返します。"""
        return [(int(r), int(c)) for r, c in np.argwhere(self._cells == EMPTY)]

    @property
    def filled_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    # ---- 書き換え -----------------------------------------------------------

    def commit(self, row: int, col: int, digit: int) -> None:
        """(row, col) に数字を書き込みます。"""
        if digit not in DIGITS:
            raise ValueError(f"Digit must be in 1..{GRID_SIZE}, got {digit}")
        self._cells[row, col] = digit

    def clear(self, row: int, col: int) -> None:
        """(row, col) を空きマスに戻します。"""
        self._cells[row, col] = EMPTY

    # ---- その他 -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Grid(filled={self.filled_count}/{GRID_SIZE * GRID_SIZE})"
