# tests/test_parser.py
import numpy as np
import pandas as pd
import pytest

from sudoku_solver.grid.parser import (
    PuzzleFormatError, check_board_shape, normalize_cell, normalize_grid, parse_puzzles, parse_row, read_puzzles,
)

from .puzzles import PUZZLE_TEXT, SOLUTION_TEXT


def test_parse_row_accepts_zero_and_dash():
    assert parse_row("53--7---0") == [5, 3, 0, 0, 7, 0, 0, 0, 0]


def test_parse_row_ignores_characters_after_ninth():
    assert parse_row("123456789xyz") == list(range(1, 10))


@pytest.mark.parametrize("line", ["1234", "12345678x", "1234.6789"])
def test_parse_row_rejects_bad_lines(line):
    with pytest.raises(PuzzleFormatError):
        parse_row(line)


def test_parse_puzzles_splits_on_blank_lines(puzzle, solution):
    text = "\n" + PUZZLE_TEXT + "\n\n" + SOLUTION_TEXT.replace("\n", "\r\n")
    puzzles = parse_puzzles(text)
    assert len(puzzles) == 2
    assert np.array_equal(puzzles[0], puzzle)
    assert np.array_equal(puzzles[1], solution)


def test_parse_puzzles_dash_placeholder(puzzle):
    puzzles = parse_puzzles(PUZZLE_TEXT.replace("0", "-"))
    assert np.array_equal(puzzles[0], puzzle)


def test_parse_puzzles_reports_truncated_puzzle():
    text = "\n".join(PUZZLE_TEXT.split()[:5]) + "\n\n" + PUZZLE_TEXT
    with pytest.raises(PuzzleFormatError) as excinfo:
        parse_puzzles(text)
    assert excinfo.value.line_no == 6

    with pytest.raises(PuzzleFormatError):
        parse_puzzles(PUZZLE_TEXT + "\n" + "123456789\n")


def test_bad_character_reports_line_number():
    text = PUZZLE_TEXT.replace("600195000", "60019500?")
    with pytest.raises(PuzzleFormatError, match="line 2"):
        parse_puzzles(text)


def test_read_puzzles(tmp_path, puzzle):
    path = tmp_path / "aufgabe.txt"
    path.write_text(PUZZLE_TEXT + "\n" + PUZZLE_TEXT, encoding="utf-8")
    puzzles = read_puzzles(str(path))
    assert len(puzzles) == 2
    assert all(np.array_equal(p, puzzle) for p in puzzles)


def test_read_puzzles_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_puzzles(str(tmp_path / "missing.txt"))


@pytest.mark.parametrize("value, expected", [
    (None, 0), (float("nan"), 0), ("", 0), ("-", 0), (".", 0), ("0", 0),
    (5, 5), (np.int64(7), 7), (3.0, 3), (" 8 ", 8), ("9", 9),
])
def test_normalize_cell(value, expected):
    assert normalize_cell(value) == expected


@pytest.mark.parametrize("value", [10, -1, "12", "x", 2.5, True])
def test_normalize_cell_rejects(value):
    with pytest.raises(PuzzleFormatError):
        normalize_cell(value)


def test_normalize_grid_from_mixed_dataframe(puzzle):
    board = [[("" if v == 0 else str(v)) for v in row] for row in puzzle.tolist()]
    board[0][0] = 5
    board[0][2] = None
    df = pd.DataFrame(board)
    assert np.array_equal(normalize_grid(df), puzzle)


def test_normalize_grid_rejects_wrong_shape():
    with pytest.raises(PuzzleFormatError):
        normalize_grid(pd.DataFrame([[0] * 9] * 8))


def test_check_board_shape_accepts_nine_by_nine(puzzle):
    check_board_shape(puzzle.tolist())


@pytest.mark.parametrize("board, message", [
    ([[0] * 9] * 8, "9 rows"),
    ([[0] * 9] * 3 + [[0] * 8] + [[0] * 9] * 5, "row 4"),
    ([[0] * 9] * 8 + [[0] * 10], "row 9"),
])
def test_check_board_shape_rejects_ragged_rows(board, message):
    with pytest.raises(PuzzleFormatError, match=message):
        check_board_shape(board)
