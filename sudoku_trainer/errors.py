"""Exception types raised by the grid model and the solvers."""

from __future__ import annotations


class SudokuError(Exception):
    """Base class for all errors raised by sudoku_trainer."""


class OutOfRangeError(SudokuError, ValueError):
    """A value, cell index or bit outside the declared bounds of a grid."""


class GivenCellImmutableError(SudokuError, RuntimeError):
    """Attempt to change the value of a given cell."""

    def __init__(self, cell_name: str):
        super().__init__(f"cell {cell_name} holds a given value and can not be changed")
        self.cell_name = cell_name


class StaleCacheError(SudokuError, RuntimeError):
    """Cache-derived state was read while the grid cache is invalidated."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "cache data is invalidated, call update_state() before accessing cached data"
        )
