"""Tool-friendly dict API over the solver: sanity check, candidates, next moves (chained), apply move, solve. Used by the FastAPI wrapper and the demo CLI."""

# sudoku_tools.py
from __future__ import annotations

from typing import Dict, List

from types_sudoku import Candidates, Grid, Move

from .brute_force import BruteForceSolver
from .conflicts import find_conflicts
from .grid import Grid as SudokuGrid
from .hint_solver import HintSolver
from .sudoku_io import candidates_dict, grid_from_rows, grid_to_rows
from .techniques.registry import default_registry


def key_to_rc(key: str) -> tuple[int, int]:
    """'r4c7' -> (4, 7)"""
    try:
        r, c = key[1:].split("c")
        return int(r), int(c)
    except ValueError:
        raise ValueError(f"invalid cell key '{key}', expected 'r<row>c<col>'") from None


def _load(current: Grid, candidates: Candidates | None = None) -> SudokuGrid:
    """Grid from rows; a candidates map (if any) restricts the listed cells to those digits."""
    grid = grid_from_rows(current)
    if candidates:
        with grid.mutation(grid.update_state):
            for key, digits in candidates.items():
                cell = grid.cell_at(*key_to_rc(key))
                if cell.is_assigned:
                    continue
                excluded = [v for v in range(1, grid.grid_size + 1) if v not in digits]
                cell.exclude_possible_values(excluded, False)
    return grid


def _hint_solver(techniques: List[str] | None) -> HintSolver:
    return HintSolver(default_registry().finders(techniques))


def sanity_check(original: Grid, current: Grid) -> Dict:
    issues = []
    size = len(current)
    for r in range(1, size + 1):
        for c in range(1, size + 1):
            if original[r-1][c-1] != 0 and current[r-1][c-1] not in (0, original[r-1][c-1]):
                issues.append({"type": "given_overwritten", "cell": f"r{r}c{c}",
                               "given": original[r-1][c-1], "found": current[r-1][c-1]})
    grid = grid_from_rows(current)
    conflicts = find_conflicts(grid)
    # one issue per house holding a duplicate, same shape for rows / cols / boxes
    for house in grid.houses():
        seen, dups = set(), set()
        for cell in house.assigned_cells():
            if cell.value in seen:
                dups.add(cell.value)
            seen.add(cell.value)
        if dups:
            cells = [cell.name for cell in house.assigned_cells() if cell.value in dups]
            issues.append({"type": "duplicate", "unit": house.name, "digits": sorted(dups), "cells": cells})
    return {"ok": len(issues) == 0, "issues": issues, "conflicts": [str(c) for c in conflicts]}


def compute_candidates_tool(current: Grid) -> Dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'candidates': {'r1c2':[1,2,5], ...}}."""
    return {"candidates": candidates_dict(grid_from_rows(current))}


def next_moves(
    current: Grid,
    candidates: Candidates | None = None,
    max_moves: int = 5,
    techniques: List[str] | None = None,
    chain: bool = True,
) -> Dict:
    """Up to `max_moves` moves, cheapest technique first.

    With chain=True every move is applied before the next one is searched
    (follow-up singles show up); with chain=False all moves are found on the
    current state. Returns the moves plus the resulting current/candidates
    snapshot.
    """
    grid = _load(current, candidates)
    solver = _hint_solver(techniques)
    moves: list[Move] = []

    if chain:
        while len(moves) < max_moves and not grid.is_solved:
            hint = solver.find_next_hint(grid)
            if hint is None:
                break
            move = hint.as_move()
            move["index"] = len(moves) + 1
            moves.append(move)
            hint.apply(grid)
    else:
        for hint in list(solver.find_all_hints_single_step(grid))[:max_moves]:
            move = hint.as_move()
            move["index"] = len(moves) + 1
            moves.append(move)

    return {"moves": moves, "snapshot": {"current": grid_to_rows(grid), "candidates": candidates_dict(grid)}}


def apply_action(current: Grid, candidates: Candidates | None, move: Dict) -> Dict:
    grid = _load(current, candidates)
    if move.get("type", "placement") == "placement":
        cell = grid.cell_at(*key_to_rc(move["cell"]))
        cell.set_value(int(move["digit"]))
    else:
        eliminations = move.get("eliminations") or {key: [move["digit"]] for key in move.get("eliminate", [])}
        for key, digits in eliminations.items():
            cell = grid.cell_at(*key_to_rc(key))
            if not cell.is_assigned:
                cell.exclude_possible_values(digits)
    return {"current": grid_to_rows(grid), "candidates": candidates_dict(grid)}


# Backward-compat
def apply_move(current: Grid, move: Dict) -> Dict:
    return apply_action(current, None, move)


def solve_tool(current: Grid, method: str = "hints", forward: bool = True, techniques: List[str] | None = None) -> Dict:
    """Solve with the hint solver ('hints') or the backtracking solver ('brute_force')."""
    grid = grid_from_rows(current)
    if method == "hints":
        solver = _hint_solver(techniques)
        result = solver.solve(grid)
        info = {"state": solver.state.value, "rounds": solver.rounds}
    elif method == "brute_force":
        bf = BruteForceSolver()
        result = bf.solve(grid, forward=forward)
        info = {"stats": bf.stats.to_dict()}
    else:
        raise ValueError(f"unknown method '{method}', expected 'hints' or 'brute_force'")
    return {
        "method": method,
        "solved": result.is_solved,
        "valid": result.is_valid,
        "current": grid_to_rows(result),
        **info,
    }
