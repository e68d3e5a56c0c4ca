# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

api_proto/local_api.py や __main__.py などから:

    from sudoku_solver import solve_puzzle, solve_batch

と呼び出されることを想定しています。

ここでは、盤面（9x9 の数字）を受け取り、
1. 盤面のコピーと形式チェック
2. ヒント数字どうしの矛盾チェック
3. 空きマスからのスロット抽出
4. MRV + バックトラックによる探索
5. 完成盤面の検証（任意）
を順番に呼び出します。
"""

from __future__ import annotations

import time
from typing import Iterable, List, Optional

import numpy as np

from .config import MAX_SEARCH_NODES, SEARCH_TIME_LIMIT_SEC, VERIFY_SOLUTIONS
from .csp.domains import SlotPool
from .csp.search import backtracking_search
from .eval.verify import find_given_conflicts, verify_grid
from .grid.board import Grid
from .logging_utils import get_logger
from .types import SolveResult, SolveStatus

__version__ = "1.0.0"

logger = get_logger()


def solve_puzzle(
    cells,
    index: int = 0,
    max_nodes: Optional[int] = MAX_SEARCH_NODES,
    time_limit: Optional[float] = SEARCH_TIME_LIMIT_SEC,
    verify: bool = VERIFY_SOLUTIONS,
    trace: bool = False,
) -> SolveResult:
    """
    数独を 1 問解くメイン関数。

    Parameters
    ----------
    cells : array-like
        9x9 の整数（0〜9）。0 は空きマス。呼び出し側の配列は書き換えません。
    index : int
        バッチ内での問題番号（ログと結果の識別用）。
    max_nodes, time_limit : int / float or None
        探索の上限。None なら無制限。
    verify : bool
        解けた盤面を verify_grid で検証するかどうか。
    trace : bool
        探索トレースを search_debug.log に書き出すかどうか。

    Returns
    -------
    SolveResult

    Raises
    ------
    ValueError
        盤面が 9x9 でない、または 0〜9 以外の値を含む場合。
    """
    grid = Grid(cells)

    conflicts = find_given_conflicts(grid.to_numpy())
    if conflicts:
        logger.warning(
            "Sudoku %d: givens are inconsistent: %s", index + 1, "; ".join(conflicts)
        )
        return SolveResult(
            index=index,
            status=SolveStatus.INVALID,
            grid=grid.to_numpy(),
            message="; ".join(conflicts),
        )

    pool = SlotPool.from_grid(grid)
    logger.debug("Sudoku %d: %d empty cells.", index + 1, pool.size)

    start = time.perf_counter()
    solved, ctx = backtracking_search(
        pool, max_nodes=max_nodes, time_limit=time_limit, trace=trace
    )
    elapsed = time.perf_counter() - start

    result = SolveResult(
        index=index,
        status=SolveStatus.SOLVED,
        grid=grid.to_numpy(),
        nodes=ctx.nodes_visited,
        elapsed=elapsed,
    )

    if solved:
        result.message = f"Solved in {ctx.nodes_visited} nodes"
        if verify:
            result.verified = verify_grid(result.grid)
            if not result.verified:
                logger.error("Sudoku %d: solution failed verification!", index + 1)
    elif ctx.aborted:
        result.status = SolveStatus.ABORTED
        result.message = f"Stopped after {ctx.nodes_visited} nodes"
        logger.warning("Sudoku %d: search limit reached (%s).", index + 1, result.message)
    else:
        result.status = SolveStatus.UNSOLVABLE
        result.message = "No solution found"

    return result


def solve_batch(puzzles: Iterable, **kwargs) -> List[SolveResult]:
    """
    複数の問題を順番に解きます。問題どうしで状態は共有しません。

    kwargs はそのまま :func:`solve_puzzle` に渡します。
    """
    logger.info("=== solve_batch() START ===")

    results: List[SolveResult] = []
    for i, cells in enumerate(puzzles):
        result = solve_puzzle(np.asarray(cells), index=i, **kwargs)
        logger.info(
            "Sudoku %d solving result: %s (nodes=%d, %.4fs)",
            i + 1, result.status.value, result.nodes, result.elapsed,
        )
        if result.status is SolveStatus.UNSOLVABLE:
            logger.info("Sudoku %d: there is most probably no solution for this sudoku.", i + 1)
        results.append(result)

    solved = sum(1 for r in results if r.solved)
    logger.info("Solved %d/%d sudokus.", solved, len(results))
    logger.info("=== solve_batch() END ===")
    return results


__all__ = [
    "Grid",
    "SlotPool",
    "SolveResult",
    "SolveStatus",
    "backtracking_search",
    "solve_batch",
    "solve_puzzle",
    "verify_grid",
]
