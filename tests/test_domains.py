# tests/test_domains.py
import pytest

from sudoku_solver.csp.domains import SlotPool, compute_candidates
from sudoku_solver.grid.board import Grid
from sudoku_solver.types import DomainState

from .puzzles import unit_digits


def expected_candidates(grid: Grid, row: int, col: int) -> set:
    return set(range(1, 10)) - unit_digits(grid.to_numpy(), row, col)


def test_compute_candidates_states():
    assert compute_candidates({0, 1, 2}) == ({3, 4, 5, 6, 7, 8, 9}, DomainState.HAS_CANDIDATES)
    assert compute_candidates({0, *range(1, 10)}) == (set(), DomainState.BLOCKED)
    assert compute_candidates(set(range(1, 10))) == (set(), DomainState.EXHAUSTED)


def test_pool_starts_with_every_empty_cell_active(puzzle):
    pool = SlotPool.from_grid(Grid(puzzle))
    assert pool.size == 51
    assert pool.active_count == 51
    assert pool.pending_count == 0
    assert pool.taken_count == 0
    assert pool.is_balanced()


def test_recompute_domains_reads_row_col_and_block(puzzle):
    grid = Grid(puzzle)
    pool = SlotPool.from_grid(grid)
    pool.recompute_domains()

    for slot in pool.slots:
        assert slot.candidates == expected_candidates(grid, slot.row, slot.col)
        assert slot.state is DomainState.HAS_CANDIDATES

    first = pool.slots[0]
    assert first.coord == (0, 2)
    assert first.candidates == {1, 2, 4}


def test_mrv_selects_smallest_domain_first_in_row_major_order(puzzle):
    pool = SlotPool.from_grid(Grid(puzzle))
    exhausted, selected = pool.recompute_domains()

    assert exhausted == 0
    best = min(pool.slots, key=lambda s: (s.size, s.index))
    assert selected is best
    assert pool.selected is best
    # 選ばれたスロットはアクティブ領域の末尾にいる
    assert pool.order[pool.active_count - 1] == best.index


def test_recompute_sees_committed_digits(puzzle):
    grid = Grid(puzzle)
    pool = SlotPool.from_grid(grid)
    pool.recompute_domains()
    assert 4 in pool.slots[0].candidates  # (0, 2)

    grid.commit(0, 3, 4)
    pool.recompute_domains()
    assert 4 not in pool.slots[0].candidates


def test_blocked_slot_is_selected_before_any_other(blocked_cell):
    pool = SlotPool.from_grid(Grid(blocked_cell))
    exhausted, selected = pool.recompute_domains()

    assert exhausted == 0
    assert selected.coord == (0, 0)
    assert selected.state is DomainState.BLOCKED
    assert selected.size == 0


def test_exhausted_slot_is_set_aside_and_restored(one_missing):
    grid = Grid(one_missing)
    pool = SlotPool.from_grid(grid)

    # スロットを取り出さずに盤面だけ埋めると、制約を満たしたスロットになる
    grid.commit(0, 7, 1)
    exhausted, selected = pool.recompute_domains()

    assert exhausted == 1
    assert selected is None
    assert pool.slots[0].state is DomainState.EXHAUSTED
    assert pool.active_count == 0
    assert pool.pending_count == 1
    assert pool.is_balanced()

    pool.restore(exhausted)
    assert pool.active_count == 1
    assert pool.pending_count == 0


def test_restore_rejects_more_than_pending(puzzle):
    pool = SlotPool.from_grid(Grid(puzzle))
    with pytest.raises(ValueError):
        pool.restore(1)


def test_take_and_give_back_move_the_boundary(puzzle):
    pool = SlotPool.from_grid(Grid(puzzle))
    _, selected = pool.recompute_domains()

    pool.take(selected)
    assert pool.active_count == 50
    assert pool.taken_count == 1
    assert selected not in pool.active_slots()
    assert pool.is_balanced()

    pool.give_back(selected)
    assert pool.active_count == 51
    assert pool.taken_count == 0
    assert selected in pool.active_slots()
