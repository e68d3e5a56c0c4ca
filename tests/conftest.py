# tests/conftest.py
import numpy as np
import pytest

from .puzzles import PUZZLE_TEXT, SOLUTION_TEXT


def to_grid(text: str) -> np.ndarray:
    return np.array([[int(ch) for ch in line] for line in text.split()], dtype=np.int8)


@pytest.fixture
def puzzle() -> np.ndarray:
    return to_grid(PUZZLE_TEXT)


@pytest.fixture
def solution() -> np.ndarray:
    return to_grid(SOLUTION_TEXT)


@pytest.fixture
def one_missing(solution) -> np.ndarray:
    # (0, 7) の 1 だけを空ける。行・列・ブロックには 2〜9 が揃っている
    grid = solution.copy()
    assert grid[0, 7] == 1
    grid[0, 7] = 0
    return grid


@pytest.fixture
def forced_clash() -> np.ndarray:
    # 行 0 の空きマス 2 つが、どちらも 3 しか置けない（5 は列 0 と列 1 で使用済み）
    grid = np.zeros((9, 9), dtype=np.int8)
    grid[0, 2:] = [1, 2, 4, 6, 7, 8, 9]
    grid[3, 0] = 5
    grid[6, 1] = 5
    return grid


@pytest.fixture
def blocked_cell() -> np.ndarray:
    # (0, 0) には置ける数字がない
    grid = np.zeros((9, 9), dtype=np.int8)
    grid[0, 1:] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[4, 0] = 9
    return grid
