# -*- coding: utf-8 -*-
"""
コマンドラインから数独ファイルをまとめて解くためのエントリポイントです。

Usage:
    python -m sudoku_solver                       # aufgabe.txt -> loesung.txt
    python -m sudoku_solver puzzles.txt out.txt --summary-csv outputs/summary.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

from . import solve_batch
from .config import (
    DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH, MAX_SEARCH_NODES, SEARCH_TIME_LIMIT_SEC,
)
from .grid.parser import PuzzleFormatError, read_puzzles
from .logging_utils import get_logger
from .postprocess.render_result import write_solutions, write_summary_csv

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-solver",
        description="Solve a batch of 9x9 sudokus with MRV backtracking.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format:
  9 lines of 9 characters per puzzle, '0' or '-' for empty cells,
  puzzles separated by blank lines.
        """,
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT_PATH,
                        help=f"Puzzle file (default: {DEFAULT_INPUT_PATH})")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT_PATH,
                        help=f"Solution file (default: {DEFAULT_OUTPUT_PATH})")
    parser.add_argument("--max-nodes", type=int, default=MAX_SEARCH_NODES,
                        help="Give up a puzzle after this many search nodes")
    parser.add_argument("--time-limit", type=float, default=SEARCH_TIME_LIMIT_SEC,
                        help="Give up a puzzle after this many seconds")
    parser.add_argument("--summary-csv", default=None,
                        help="Also write a per-puzzle summary table to this CSV file")
    parser.add_argument("--trace", action="store_true",
                        help="Write every search node to logs/search_debug.log")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    start = time.perf_counter()

    try:
        puzzles = read_puzzles(args.input)
    except (OSError, PuzzleFormatError) as e:
        logger.error("Could not read puzzles from %r: %s", args.input, e)
        logger.error("Exiting with error")
        return 1

    results = solve_batch(
        puzzles,
        max_nodes=args.max_nodes,
        time_limit=args.time_limit,
        trace=args.trace,
    )

    try:
        write_solutions(args.output, [r.grid for r in results])
        if args.summary_csv:
            write_summary_csv(results, args.summary_csv)
    except OSError as e:
        logger.error("Could not write results: %s", e)
        logger.error("Exiting with error")
        return 1

    logger.info("Exiting successfully")
    logger.info("Execution Time: ~ %.6fsec", time.perf_counter() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
