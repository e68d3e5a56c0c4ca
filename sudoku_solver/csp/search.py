# -*- coding: utf-8 -*-
"""
数独の CSP をバックトラック探索で解くモジュールです。

ざっくり流れ
------------
1. SlotPool.recompute_domains() で全スロットのドメインを現在の盤面から計算し直し、
   MRV（Minimum Remaining Values）で次に分岐するスロットを選ぶ
2. 選ばれたスロットが無ければ、盤面は埋まっている → 成功
3. 選ばれたスロットに候補数字を小さい順に書き込み、再帰する
4. 子が成功すればそのまま成功を返す。
   全部だめなら、マスを空に戻し、退避したスロットも戻して失敗を返す

ドメインはコピーもスナップショットもせず、ノードごとに盤面から計算し直します。
巻き戻す必要があるのは「盤面に書いた数字」と「SlotPool の境界」だけです。
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import MAX_SEARCH_NODES, PROGRESS_LOG_INTERVAL, SEARCH_TIME_LIMIT_SEC
from ..logging_utils import get_logger, get_search_debug_logger
from ..types import DomainState
from .domains import SlotPool

logger = get_logger()


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    pool: SlotPool
    max_nodes: Optional[int] = None
    deadline: Optional[float] = None  # time.monotonic() 基準
    trace_logger: Optional[logging.Logger] = None

    nodes_visited: int = 0
    max_depth: int = 0
    aborted: bool = False

    def limit_reached(self) -> bool:
        if self.max_nodes is not None and self.nodes_visited >= self.max_nodes:
            return True
        if self.deadline is not None and time.monotonic() >= self.deadline:
            return True
        return False


def backtrack(ctx: SearchContext, depth: int = 0) -> bool:
    """
    探索木の 1 ノードぶんの処理です（再帰）。

    成功したときは盤面に解が入ったまま True を返します。
    失敗したときは、この呼び出しで書き込んだマスと SlotPool の境界を
    呼び出し前の状態に戻してから False を返します。
    """
    # 上限チェック。ここではまだ何も書き換えていないので、そのまま戻ればよい
    if ctx.limit_reached():
        ctx.aborted = True
        return False

    ctx.nodes_visited += 1
    if depth > ctx.max_depth:
        ctx.max_depth = depth
    if ctx.nodes_visited % PROGRESS_LOG_INTERVAL == 0:
        logger.debug(
            "[search] nodes_visited = %d, depth=%d, max_depth=%d",
            ctx.nodes_visited, depth, ctx.max_depth,
        )

    pool = ctx.pool
    grid = pool.grid

    exhausted, chosen = pool.recompute_domains()

    if chosen is None:
        # もう埋めるマスがない
        pool.restore(exhausted)
        return True

    if ctx.trace_logger is not None:
        ctx.trace_logger.debug(
            "depth=%d slot=(%d,%d) state=%s candidates=%s exhausted=%d active=%d",
            depth, chosen.row, chosen.col, chosen.state.value,
            sorted(chosen.candidates), exhausted, pool.active_count,
        )

    # 他のスロットと競合しないよう取り出す
    pool.take(chosen)

    if chosen.state is not DomainState.BLOCKED:
        # 候補は小さい順に試す
        for digit in sorted(chosen.candidates):
            grid.commit(chosen.row, chosen.col, digit)
            if backtrack(ctx, depth + 1):
                pool.give_back(chosen)
                pool.restore(exhausted)
                return True
            if ctx.aborted:
                break

    # どの数字もだめだった
    grid.clear(chosen.row, chosen.col)
    pool.give_back(chosen)
    pool.restore(exhausted)
    return False


def backtracking_search(
    pool: SlotPool,
    max_nodes: Optional[int] = MAX_SEARCH_NODES,
    time_limit: Optional[float] = SEARCH_TIME_LIMIT_SEC,
    trace: bool = False,
) -> Tuple[bool, SearchContext]:
    """
    バックトラック探索のエントリポイント。

    Parameters
    ----------
    pool : SlotPool
        探索対象の盤面から作った SlotPool。盤面はその場で書き換えられます。
    max_nodes : int or None
        探索ノード数の上限。None なら無制限。
    time_limit : float or None
        探索時間の上限（秒）。None なら無制限。
    trace : bool
        True なら 1 ノードごとのトレースを search_debug.log に書き出す。

    Returns
    -------
    solved : bool
        解が見つかったかどうか。
    ctx : SearchContext
        ノード数や、上限で打ち切ったかどうかなどの探索情報。
    """
    ctx = SearchContext(
        pool=pool,
        max_nodes=max_nodes,
        deadline=time.monotonic() + time_limit if time_limit is not None else None,
        trace_logger=get_search_debug_logger() if trace else None,
    )

    solved = backtrack(ctx)

    logger.debug(
        "Search finished: solved=%s nodes=%d max_depth=%d aborted=%s",
        solved, ctx.nodes_visited, ctx.max_depth, ctx.aborted,
    )
    return solved, ctx
