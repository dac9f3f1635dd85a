"""Puzzle loading and printing: strings, list-of-rows grids and numpy arrays."""

# sudoku_io.py
# String format (one character per cell, row-major):
# - '1'..'9'      given value
# - '+d'          placed (non-given) value d
# - '0' '.' '-'   blank
# - anything else is skipped (separators, newlines, box drawing)

from __future__ import annotations

import sys
from typing import Iterable, TextIO

import numpy as np

from types_sudoku import Candidates
from types_sudoku import Grid as RowsGrid

from .grid import Grid
from .predefined import PredefinedType, block_shape

_BLANKS = "0.-"


def load_grid(text: str, grid: Grid | None = None, predefined: PredefinedType = PredefinedType.CLASSIC_9X9) -> Grid:
    """Read a puzzle string into `grid` (a fresh one if None) and recompute once."""
    if grid is None:
        grid = Grid.of(predefined)
    chars = iter(text)

    def next_char() -> str:
        try:
            return next(chars)
        except StopIteration:
            raise ValueError(f"puzzle input exhausted before all {grid.cell_count} cells were read") from None

    with grid.mutation(grid.update_state):
        for cell in grid.cells():
            cell.clear(False)
            while True:
                ch = next_char()
                given = True
                if ch == "+":
                    ch = next_char()
                    given = False
                if "1" <= ch <= "9":
                    cell.set_value(int(ch), False)
                    cell.is_given = given
                    break
                if ch in _BLANKS:
                    break
    return grid


def apply_deleted_candidates(grid: Grid, tokens: Iterable[str] | str) -> Grid:
    """Apply 'vrc' elimination tokens (value, row, column; e.g. '512' removes 5 from r1c2)."""
    if isinstance(tokens, str):
        tokens = tokens.split()
    with grid.mutation(grid.update_state):
        for token in tokens:
            if len(token) != 3 or not token.isdigit():
                raise ValueError(f"invalid candidate token '{token}', expected 'vrc'")
            value, row, column = (int(ch) for ch in token)
            grid.cell_at(row, column).exclude_possible_values([value], False)
    return grid


def grid_to_string(grid: Grid) -> str:
    """One-line form, '0' for blanks; placed non-given values carry no marker."""
    return "".join(str(cell.value) for cell in grid.cells())


def grid_to_rows(grid: Grid) -> RowsGrid:
    size = grid.grid_size
    values = [cell.value for cell in grid.cells()]
    return [values[r * size:(r + 1) * size] for r in range(size)]


def grid_from_rows(rows: RowsGrid, givens: bool = True) -> Grid:
    """Build a grid from an N x N list of rows (0 = empty); classic block layout."""
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError(f"grid must be square, got {size} rows of lengths {[len(r) for r in rows]}")
    grid = Grid.of_size(size)
    with grid.mutation(grid.update_state):
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if value:
                    cell = grid.get_cell(r * size + c)
                    cell.set_value(int(value), False)
                    cell.is_given = givens
    return grid


def grid_from_array(array: np.ndarray, givens: bool = True) -> Grid:
    array = np.asarray(array)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"expected a square 2-D array, got shape {array.shape}")
    return grid_from_rows(array.astype(int).tolist(), givens)


def grid_to_array(grid: Grid) -> np.ndarray:
    return np.array(grid_to_rows(grid), dtype=np.int8)


def candidates_dict(grid: Grid) -> Candidates:
    """{'r1c2': [1, 2, 5], ...} for every unassigned cell."""
    return {cell.name: cell.possible_values.to_list() for cell in grid.unassigned_cells()}


def format_grid(grid: Grid, style: str = "rows") -> str:
    """'line': one line; 'rows': one row per line; 'pretty': rows with block separators."""
    if style == "line":
        return grid_to_string(grid)
    rows = grid_to_rows(grid)
    if style == "rows":
        return "\n".join("".join(str(v) for v in row) for row in rows)
    if style != "pretty":
        raise ValueError(f"unknown grid style '{style}'")

    height, width = block_shape(grid.grid_size)

    def fmt_row(row: list[int]) -> str:
        chunks = [" ".join(str(v) if v else "." for v in row[i:i + width]) for i in range(0, len(row), width)]
        return " | ".join(chunks)

    lines = []
    separator = "-+-".join("-" * (2 * width - 1) for _ in range(grid.grid_size // width))
    for r, row in enumerate(rows):
        if r and r % height == 0:
            lines.append(separator)
        lines.append(fmt_row(row))
    return "\n".join(lines)


def print_grid(grid: Grid, style: str = "pretty", stream: TextIO | None = None) -> None:
    print(format_grid(grid, style), file=stream or sys.stdout)
