# -*- coding: utf-8 -*-
"""
探索結果をもとに出力用の情報を構築するモジュールです。

- 盤面をテキスト（9 文字 x 9 行）に整形する
- 解答ファイルを書き出す
- API レスポンス用の dict を作る
- バッチ全体の集計表（pandas.DataFrame）を作る
"""

from __future__ import annotations

import os
from typing import Any, Dict, Iterable, List

import numpy as np
import pandas as pd

from ..logging_utils import get_logger
from ..types import SolveResult

logger = get_logger()

SUMMARY_COLUMNS = ["puzzle", "status", "nodes", "elapsed_sec", "verified", "filled", "message"]


def format_grid(grid: np.ndarray) -> str:
    """
    盤面を 9 行のテキストにします。空きマスは "0" のまま出力します。

    Returns
    -------
    str
        各行の末尾に改行が付いた 9 行の文字列。
    """
    arr = np.asarray(grid)
    return "".join("".join(str(int(v)) for v in row) + "\n" for row in arr)


def write_solutions(path: str, grids: Iterable[np.ndarray]) -> None:
    """
    盤面を順に書き出します。1 問ごとに空行を 1 行入れます。

    解けなかった問題も、最後の盤面（元のヒントのまま）をそのまま書き出します。
    """
    logger.info("Opened file %r for writing.", path)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for grid in grids:
            f.write(format_grid(grid))
            f.write("\n")
    logger.info("Closed file %r.", path)


def build_result(result: SolveResult) -> Dict[str, Any]:
    """
    1 問ぶんの結果を、JSON にそのまま変換できる dict にします。
    """
    return {
        "index": result.index,
        "status": result.status.value,
        "solved": result.solved,
        "board": np.asarray(result.grid).astype(int).tolist(),
        "nodes": result.nodes,
        "elapsed": float(result.elapsed),
        "verified": result.verified,
        "message": result.message,
    }


def build_summary(results: List[SolveResult]) -> pd.DataFrame:
    """
    バッチ全体の結果を 1 問 1 行の表にまとめます。

    puzzle 列は 1 始まりの問題番号です。
    """
    rows = []
    for r in results:
        rows.append({
            "puzzle": r.index + 1,
            "status": r.status.value,
            "nodes": r.nodes,
            "elapsed_sec": round(float(r.elapsed), 6),
            "verified": r.verified,
            "filled": int(np.count_nonzero(r.grid)),
            "message": r.message,
        })
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def write_summary_csv(results: List[SolveResult], path: str) -> pd.DataFrame:
    """集計表を CSV に書き出し、その DataFrame を返します。"""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    summary = build_summary(results)
    summary.to_csv(path, index=False, encoding="utf-8")
    logger.info("Summary written to %r (%d rows).", path, len(summary))
    return summary
