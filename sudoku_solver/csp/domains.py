# -*- coding: utf-8 -*-
"""
スロット（空きマス）ごとのドメイン（候補数字集合）を管理するモジュールです。

SlotPool は次の 3 つを持っています。

- slots        : 初期化時に作ったスロットの配列（以後、増えも減りもしない）
- order        : slots への添字の並び
- active_count : order の先頭から何個が「まだ探索対象のスロット」か

order の並びは探索中に入れ替わります::

    [ active ... | chosen | exhausted ... | （祖先の呼び出しが退避したもの）... ]
      0 .. active_count-1

- recompute_domains() は、候補が 0 個で制約がすでに満たされているスロット
  （EXHAUSTED）を境界の外に退避し、最も候補の少ないスロットを境界の直前に置きます。
- take() でそのスロットを境界の外に出し、give_back() / restore() で戻します。

呼び出しはスタックのように入れ子になるので、
「先に出したものほど後に戻す」順番を守っている限り、
個数だけのやりとりで元の状態に戻せます。
"""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from ..config import DIGITS, EMPTY, GRID_SIZE
from ..grid.board import Grid, box_index
from ..grid.slot_extractor import extract_slots
from ..types import DomainState, Slot


def compute_candidates(used: Set[int]) -> Tuple[Set[int], DomainState]:
    """
    行・列・ブロックに現れている値の集合から、候補数字とドメイン状態を求めます。

    Parameters
    ----------
    used : set of int
        行・列・ブロックに現れている値。空きマスの 0 も含めたまま渡します。

    Returns
    -------
    candidates : set of int
        まだ置ける数字（1〜9）。
    state : DomainState
        候補が 1 個以上なら HAS_CANDIDATES。
        候補が 0 個のとき、空きマス（0）が残っていれば BLOCKED、
        残っていなければ EXHAUSTED。
    """
    candidates = set(DIGITS) - used
    if candidates:
        return candidates, DomainState.HAS_CANDIDATES
    if EMPTY in used:
        return candidates, DomainState.BLOCKED
    return candidates, DomainState.EXHAUSTED


def _selection_rank(slot: Slot) -> Tuple[int, int]:
    # BLOCKED は最優先で選ぶ（選ばれた時点でその枝は失敗する）
    size = 0 if slot.state is DomainState.BLOCKED else slot.size
    return (size, slot.index)


class SlotPool:
    """
    探索 1 回ぶんのスロット集合です。

    Parameters
    ----------
    grid : Grid
        探索対象の盤面。SlotPool は盤面を読むだけで、書き換えは探索側が行います。
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.slots: List[Slot] = extract_slots(grid)
        self.order: List[int] = list(range(len(self.slots)))
        self.active_count: int = len(self.slots)
        self.selected: Optional[Slot] = None

        # 境界の外にいるスロットの内訳
        self._pending = 0  # EXHAUSTED として退避中
        self._taken = 0  # 分岐のために取り出し中

    @classmethod
    def from_grid(cls, grid: Grid) -> "SlotPool":
        return cls(grid)

    # ---- 状態の参照 ---------------------------------------------------------

    @property
    def size(self) -> int:
        """初期化時の空きマス数。"""
        return len(self.slots)

    @property
    def pending_count(self) -> int:
        return self._pending

    @property
    def taken_count(self) -> int:
        return self._taken

    def active_slots(self) -> List[Slot]:
        return [self.slots[i] for i in self.order[: self.active_count]]

    def is_balanced(self) -> bool:
        """active + 退避中 + 取り出し中 が初期スロット数と一致するかどうか。"""
        return self.active_count + self._pending + self._taken == self.size

    # ---- ドメインの再計算 ---------------------------------------------------

    def recompute_domains(self) -> Tuple[int, Optional[Slot]]:
        """
        アクティブな全スロットのドメインを、現在の盤面から計算し直します。

        処理の流れ
        ----------
        1. 各スロットのドメインを {1..9} から始め、
           同じ行・列・ブロックにある数字を取り除く
        2. 候補 0 個で EXHAUSTED のスロットは境界の外に退避する
        3. 残りのうち最も候補の少ないスロット（MRV）を境界の直前に移し、
           self.selected として公開する。
           BLOCKED はどの候補数よりも優先し、同点なら行優先で先のものを選ぶ。

        Returns
        -------
        exhausted_count : int
            今回退避したスロット数。呼び出し側は戻るときに restore() に渡します。
        selected : Slot or None
            次に分岐するスロット。アクティブなスロットが残っていなければ None。
        """
        cells = self.grid.rows()

        # 行・列・ブロックごとの値集合を 1 回だけ作る（0 も含めたまま）
        row_sets = [set(row) for row in cells]
        col_sets = [set(col) for col in zip(*cells)]
        box_sets: List[Set[int]] = [set() for _ in range(GRID_SIZE)]
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                box_sets[box_index(r, c)].add(cells[r][c])

        order = self.order
        exhausted = 0
        best: Optional[Slot] = None
        best_pos = 0

        s = 0
        while s < self.active_count:
            slot = self.slots[order[s]]
            used = row_sets[slot.row] | col_sets[slot.col] | box_sets[box_index(slot.row, slot.col)]
            slot.candidates, slot.state = compute_candidates(used)

            if slot.state is DomainState.EXHAUSTED:
                # 境界の直前のスロットと入れ替えて、境界を 1 つ縮める。
                # 入れ替えで来たスロットは同じ s で調べ直す。
                self.active_count -= 1
                last = self.active_count
                order[s], order[last] = order[last], order[s]
                exhausted += 1
                continue

            if best is None or _selection_rank(slot) < _selection_rank(best):
                best = slot
                best_pos = s
            s += 1

        # 最小スロットをアクティブ領域の末尾へ
        if best is not None:
            last = self.active_count - 1
            order[best_pos], order[last] = order[last], order[best_pos]

        self._pending += exhausted
        self.selected = best
        return exhausted, best

    # ---- 境界の出し入れ -----------------------------------------------------

    def take(self, slot: Slot) -> None:
        """
        recompute_domains() で選ばれたスロットを、アクティブ領域から取り出します。
        """
        assert self.active_count > 0 and self.order[self.active_count - 1] == slot.index
        self.active_count -= 1
        self._taken += 1

    def give_back(self, slot: Slot) -> None:
        """take() で取り出したスロットをアクティブ領域に戻します。"""
        assert self._taken > 0 and self.order[self.active_count] == slot.index
        self.active_count += 1
        self._taken -= 1

    def restore(self, count: int) -> None:
        """
        退避していた EXHAUSTED スロットを count 個、アクティブ領域に戻します。

        ドメインは計算し直しません。
        次に recompute_domains() が呼ばれたときに、戻された盤面から計算されます。
        """
        if count < 0 or count > self._pending:
            raise ValueError(
                f"cannot restore {count} slots, only {self._pending} are pending"
            )
        self.active_count += count
        self._pending -= count

    def __repr__(self) -> str:
        return (
            f"SlotPool(size={self.size}, active={self.active_count}, "
            f"pending={self._pending}, taken={self._taken})"
        )
