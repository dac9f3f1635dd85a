# tests/test_hint_solver.py
import logging

from sudoku_trainer.brute_force import BruteForceSolver
from sudoku_trainer.hint_solver import HintSolver, SolverState
from sudoku_trainer.hints import DirectHint, SolvingTechnique
from sudoku_trainer.sudoku_io import grid_to_string, load_grid
from sudoku_trainer.techniques import HiddenSingleFinder, HintFinder, NakedSingleFinder
from sudoku_trainer.techniques.registry import default_registry

from conftest import EASY, EASY_SOLUTION


class BrokenFinder(HintFinder):
    technique = SolvingTechnique.X_CHAIN

    def find_hints(self, grid, aggregator):
        raise RuntimeError("finder exploded")


def test_solves_easy_puzzle_on_a_copy(easy_grid):
    solver = HintSolver()
    result = solver.solve(easy_grid)
    assert grid_to_string(result) == EASY_SOLUTION
    assert result.is_solved and result.is_valid
    assert solver.state is SolverState.SOLVED
    assert solver.rounds == 51
    assert grid_to_string(easy_grid) == EASY


def test_empty_grid_stalls(empty_grid):
    solver = HintSolver()
    result = solver.solve(empty_grid)
    assert solver.state is SolverState.STALLED
    assert solver.rounds == 0
    assert not result.is_solved


def test_find_all_hints_places_every_blank_once(easy_grid):
    hints = HintSolver().find_all_hints(easy_grid)
    placements = [hint for hint in hints if isinstance(hint, DirectHint)]
    assert len(placements) == 51
    assert len({hint.cell_index for hint in placements}) == 51
    assert grid_to_string(easy_grid) == EASY


def test_find_next_hint_follows_finder_order():
    grid = load_grid("12345678" + "0" * 73)
    hint = HintSolver().find_next_hint(grid)
    assert hint.technique is SolvingTechnique.FULL_HOUSE
    assert (hint.cell_index, hint.value) == (8, 9)
    assert not grid.get_cell(8).is_assigned


def test_find_next_hint_none_when_stalled(empty_grid):
    assert HintSolver().find_next_hint(empty_grid) is None


def test_single_step_collects_from_every_finder(easy_grid):
    hints = HintSolver([NakedSingleFinder(), HiddenSingleFinder()]).find_all_hints_single_step(easy_grid)
    techniques = {hint.technique for hint in hints}
    assert techniques == {SolvingTechnique.NAKED_SINGLE, SolvingTechnique.HIDDEN_SINGLE}
    assert grid_to_string(easy_grid) == EASY


def test_failing_finder_is_logged_and_skipped(easy_grid, caplog):
    solver = HintSolver([BrokenFinder(), NakedSingleFinder(), HiddenSingleFinder()])
    with caplog.at_level(logging.WARNING, logger="sudoku_trainer.hint_solver"):
        result = solver.solve(easy_grid)
    assert result.is_solved
    assert any("failed" in record.getMessage() for record in caplog.records)
    assert all(record.exc_info for record in caplog.records if record.levelno == logging.WARNING)


def test_solver_with_subset_of_techniques(easy_grid):
    finders = default_registry().finders(["naked_single"])
    solver = HintSolver(finders)
    solver.solve(easy_grid)
    assert solver.state in (SolverState.SOLVED, SolverState.STALLED)
    assert solver.rounds > 0


def test_hint_log_lines(easy_grid, caplog):
    with caplog.at_level(logging.DEBUG, logger="sudoku_trainer.hint_solver"):
        HintSolver().solve(easy_grid)
    messages = [record.getMessage() for record in caplog.records]
    assert messages[0].startswith("round 1: ")
    assert messages[-1] == "solved after 51 rounds"


def test_hints_never_contradict_the_solution(hard_grid):
    solution = BruteForceSolver().solve(hard_grid)
    assert solution.is_solved
    hints = HintSolver().find_all_hints_single_step(hard_grid)
    assert hints
    for hint in hints:
        if isinstance(hint, DirectHint):
            assert solution.get_cell(hint.cell_index).value == hint.value, str(hint)
        else:
            for cell_index, values in hint.eliminations():
                assert solution.get_cell(cell_index).value not in values, str(hint)
