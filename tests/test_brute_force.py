# tests/test_brute_force.py
import logging

import pytest

from sudoku_trainer.brute_force import BruteForceSolver
from sudoku_trainer.errors import SudokuError
from sudoku_trainer.sudoku_io import grid_to_string, load_grid

from conftest import EASY, EASY_SOLUTION, HARD, SEARCH


def givens_kept(puzzle, result):
    solved = grid_to_string(result)
    return all(p in "0" or p == s for p, s in zip(puzzle, solved))


def test_easy_puzzle(easy_grid):
    solver = BruteForceSolver()
    result = solver.solve(easy_grid)
    assert grid_to_string(result) == EASY_SOLUTION
    assert solver.stats.solved
    assert solver.stats.direct_propagations > 0
    assert grid_to_string(easy_grid) == EASY


def test_hard_puzzle_forward_and_backward(hard_grid):
    forward = BruteForceSolver()
    first = forward.solve(hard_grid)
    backward = BruteForceSolver()
    second = backward.solve(hard_grid, forward=False)

    for result in (first, second):
        assert result.is_solved and result.is_valid
        assert givens_kept(HARD, result)
    # unique solution, whatever the candidate order
    assert grid_to_string(first) == grid_to_string(second)
    assert forward.stats.guesses == 0
    assert not hard_grid.is_solved


def test_puzzle_without_singles_needs_guesses():
    grid = load_grid(SEARCH)
    forward = BruteForceSolver()
    first = forward.solve(grid)
    backward = BruteForceSolver()
    second = backward.solve(grid, forward=False)

    for solver, result in ((forward, first), (backward, second)):
        assert result.is_solved and result.is_valid
        assert givens_kept(SEARCH, result)
        assert solver.stats.guesses > 0
    assert grid_to_string(first) == grid_to_string(second)


def test_unsolvable_puzzle_is_exhausted():
    # r1c9 has no candidate left: 1..8 in row 1, 9 in its block
    grid = load_grid("12345678" + "0" * 8 + "9" + "0" * 64)
    solver = BruteForceSolver()
    result = solver.solve(grid)
    assert not result.is_solved
    assert not solver.stats.solved
    assert solver.stats.backtracks > 0


def test_stats_reset_between_runs(easy_grid):
    solver = BruteForceSolver()
    solver.solve(load_grid(SEARCH))
    solver.solve(easy_grid)
    stats = solver.stats.to_dict()
    assert stats["guesses"] == 0
    assert stats["solved"] is True
    assert set(stats) == {"guesses", "backtracks", "direct_propagations", "solved", "duration_ms"}


def test_outcome_is_logged(easy_grid, caplog):
    with caplog.at_level(logging.INFO, logger="sudoku_trainer.brute_force"):
        BruteForceSolver().solve(easy_grid)
    assert any(record.getMessage().startswith("brute force solved") for record in caplog.records)


def test_selecting_from_no_unassigned_cell_is_an_error():
    with pytest.raises(SudokuError, match="no unassigned cell"):
        BruteForceSolver._select_next_cell({})
