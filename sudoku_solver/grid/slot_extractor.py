# -*- coding: utf-8 -*-
"""
初期盤面の空きマスから「スロット」を抽出するモジュールです。

- 空きマス（0）1 つにつき Slot を 1 つ作ります
- 順番は行優先（左上から右へ、上の行から下の行へ）です
"""

from __future__ import annotations

from typing import List

from ..types import Slot
from .board import Grid


def extract_slots(grid: Grid) -> List[Slot]:
    """
    盤面の空きマスをすべてスロットとして列挙します。

    Parameters
    ----------
    grid : Grid
        探索を始める前の盤面。

    Returns
    -------
    list of Slot
        見つかった全スロットのリスト。index は行優先の連番です。
    """
    slots: List[Slot] = []
    for sid, (row, col) in enumerate(grid.empty_cells()):
        slots.append(Slot(index=sid, row=row, col=col))
    return slots
