"""Backtracking solver with single-propagation and minimum-remaining-values ordering."""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass

from .errors import SudokuError
from .grid import Cell, Grid
from .hint_solver import HintSolver
from .hints import DirectHint
from .techniques.singles import HiddenSingleFinder, NakedSingleFinder

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    guesses: int = 0
    backtracks: int = 0
    direct_propagations: int = 0
    solved: bool = False
    duration_ms: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


class BruteForceSolver:
    """Depth-first search over a working copy of the grid.

    Before every guess a naked / hidden single is applied directly if one
    exists. Guess cells are picked by fewest candidates; candidates are tried
    ascending (forward) or descending (backward).
    """

    def __init__(self) -> None:
        self._hint_solver = HintSolver([NakedSingleFinder(), HiddenSingleFinder()])
        self.stats = SearchStats()

    def solve(self, grid: Grid, forward: bool = True) -> Grid:
        """Return the working copy: solved, or left unsolved when the search is exhausted."""
        self.stats = SearchStats()
        search_grid = grid.copy()
        # insertion-ordered set
        unassigned: dict[Cell, None] = dict.fromkeys(search_grid.unassigned_cells())
        logger.debug("brute force: %d unassigned cells, forward=%s", len(unassigned), forward)

        start = time.perf_counter()
        self.stats.solved = self._solve_recursive(search_grid, unassigned, forward)
        self.stats.duration_ms = (time.perf_counter() - start) * 1000.0

        logger.info(
            "brute force %s: guesses=%d backtracks=%d propagations=%d (%.1f ms)",
            "solved" if self.stats.solved else "exhausted",
            self.stats.guesses,
            self.stats.backtracks,
            self.stats.direct_propagations,
            self.stats.duration_ms,
        )
        return search_grid

    def _solve_recursive(self, grid: Grid, unassigned: dict[Cell, None], forward: bool) -> bool:
        if not unassigned:
            return True

        hint = self._hint_solver.find_direct_hint(grid).first()
        if isinstance(hint, DirectHint):
            hint.apply(grid)
            self.stats.direct_propagations += 1
            cell = grid.get_cell(hint.cell_index)
            unassigned.pop(cell, None)
            if self._solve_recursive(grid, unassigned, forward):
                return True
            cell.reset()
            unassigned[cell] = None
            self.stats.backtracks += 1
            return False

        cell = self._select_next_cell(unassigned)
        candidates = cell.possible_values.copy()
        while candidates:
            if candidates.cardinality() > 1:
                self.stats.guesses += 1
            value = candidates.first_set_bit() if forward else candidates.last_set_bit()
            candidates.clear(value)
            cell.set_value(value)
            if self._solve_recursive(grid, unassigned, forward):
                return True

        cell.reset()
        unassigned[cell] = None
        self.stats.backtracks += 1
        return False

    @staticmethod
    def _select_next_cell(unassigned: dict[Cell, None]) -> Cell:
        """Minimum remaining values; a cell without candidates is returned at once (dead end).

        The chosen cell is removed from `unassigned` unless it is a dead end.
        """
        best: Cell | None = None
        best_count = 0
        for cell in unassigned:
            count = cell.possible_values.cardinality()
            if count == 0:
                return cell
            if best is None or count < best_count:
                best, best_count = cell, count
        if best is None:
            raise SudokuError("no unassigned cell to select")
        del unassigned[best]
        return best
