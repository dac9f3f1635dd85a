"""Hint-driven solver: repeatedly apply the cheapest available deduction."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from .grid import Grid
from .hints import Hint, HintAggregator, HintAggregatorExhausted, SingleHintAggregator
from .techniques.base import HintFinder
from .techniques.registry import default_registry

logger = logging.getLogger(__name__)


class SolverState(Enum):
    SEARCHING = "searching"
    APPLYING = "applying"
    STALLED = "stalled"
    SOLVED = "solved"


class HintSolver:
    """Runs a fixed, ordered list of finders against a grid.

    Each round keeps only the first hint found (by finder order), applies it
    and recomputes; the loop ends when the grid is solved or a round finds
    nothing. A finder that raises is logged and treated as having found
    nothing for that round.
    """

    def __init__(self, finders: Iterable[HintFinder] | None = None):
        self.finders: list[HintFinder] = list(finders) if finders is not None else default_registry().finders()
        self.state = SolverState.SEARCHING
        self.rounds = 0

    # ---- finder rounds ----

    def _run_finders(self, grid: Grid, aggregator: HintAggregator) -> HintAggregator:
        for finder in self.finders:
            try:
                finder.find_hints(grid, aggregator)
            except HintAggregatorExhausted:
                break
            except Exception:
                logger.warning("finder %r failed, skipping it for this round", finder, exc_info=True)
        return aggregator

    def _solve_loop(self, grid: Grid, collected: HintAggregator | None = None) -> Grid:
        self.rounds = 0
        while not grid.is_solved:
            self.state = SolverState.SEARCHING
            aggregator = self._run_finders(grid, SingleHintAggregator())
            if not aggregator:
                self.state = SolverState.STALLED
                logger.debug("stalled after %d rounds", self.rounds)
                return grid
            self.state = SolverState.APPLYING
            self.rounds += 1
            for hint in aggregator:
                logger.debug("round %d: %s", self.rounds, hint)
            aggregator.apply_hints(grid)
            if collected is not None:
                collected.extend(aggregator)
        self.state = SolverState.SOLVED
        logger.debug("solved after %d rounds", self.rounds)
        return grid

    # ---- public API ----

    def solve(self, grid: Grid) -> Grid:
        """Solve a copy of `grid` as far as the finders allow; the input is untouched."""
        return self._solve_loop(grid.copy())

    def find_all_hints(self, grid: Grid) -> HintAggregator:
        """Every hint applied across all rounds of a solve, in application order."""
        collected = HintAggregator()
        self._solve_loop(grid.copy(), collected)
        return collected

    def find_all_hints_single_step(self, grid: Grid) -> HintAggregator:
        """Every hint of every finder for the current state; nothing is applied."""
        return self._run_finders(grid, HintAggregator())

    def find_next_hint(self, grid: Grid) -> Hint | None:
        return self._run_finders(grid, SingleHintAggregator()).first()

    def find_direct_hint(self, grid: Grid) -> HintAggregator:
        """Single-hint round on `grid` itself, without copying it."""
        return self._run_finders(grid, SingleHintAggregator())
