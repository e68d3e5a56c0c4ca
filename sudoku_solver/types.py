# -*- coding: utf-8 -*-
"""
数独 solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass / Enum を使うことで、
「この構造体はどんなフィールドを持っているのか」
「この状態はどんな値を取り得るのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set, Tuple

import numpy as np

# グリッド上の座標を表す型 (row, col)、どちらも 0 始まり
CellCoord = Tuple[int, int]


class DomainState(Enum):
    """
    スロットのドメイン（候補数字集合）の状態です。

    - HAS_CANDIDATES : 置ける数字が 1 個以上ある
    - EXHAUSTED      : 置ける数字はないが、行・列・ブロックに空きマスもない
                       （制約はすでに満たされているので、一旦わきに置く）
    - BLOCKED        : 置ける数字がないのに空きマスが残っている
                       （行き止まり。この枝の探索は即座に打ち切る）
    """

    HAS_CANDIDATES = "has_candidates"
    EXHAUSTED = "exhausted"
    BLOCKED = "blocked"


class SolveStatus(Enum):
    """1 問ぶんの求解結果の種類です。"""

    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    INVALID = "invalid"  # ヒント数字の時点で矛盾している
    ABORTED = "aborted"  # ノード数 / 時間の上限に達した


@dataclass
class Slot:
    """
    初期盤面で空きマスだった 1 マスを表すクラスです。

    Attributes
    ----------
    index : int
        スロットの識別番号。行優先（row-major）で 0,1,2,... の連番。
    row : int
        行番号（0〜8）。
    col : int
        列番号（0〜8）。
    candidates : set of int
        現在の盤面で、このマスにまだ置ける数字（1〜9）の集合。
    state : DomainState
        ドメインの状態。:meth:`SlotPool.recompute_domains` のたびに更新されます。
    """

    index: int
    row: int
    col: int
    candidates: Set[int] = field(default_factory=set)
    state: DomainState = DomainState.HAS_CANDIDATES

    @property
    def coord(self) -> CellCoord:
        return (self.row, self.col)

    @property
    def size(self) -> int:
        """ドメインサイズ（候補数字の個数）を返します。"""
        return len(self.candidates)


@dataclass
class SolveResult:
    """
    1 問ぶんの求解結果です。

    Attributes
    ----------
    index : int
        バッチ内での問題番号（0 始まり）。
    status : SolveStatus
        求解結果の種類。
    grid : numpy.ndarray
        最終盤面（9x9）。失敗時は探索前と同じ盤面に戻っています。
    nodes : int
        探索木で訪れたノード数。
    elapsed : float
        求解にかかった秒数。
    verified : bool or None
        検証結果。検証しなかった場合は None。
    message : str
        ログや API レスポンス向けの補足メッセージ。
    """

    index: int
    status: SolveStatus
    grid: np.ndarray
    nodes: int = 0
    elapsed: float = 0.0
    verified: Optional[bool] = None
    message: str = ""

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED
