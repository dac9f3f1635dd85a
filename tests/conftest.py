# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "sudoku_trainer" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_trainer.grid import Grid  # noqa: E402
from sudoku_trainer.sudoku_io import load_grid  # noqa: E402

# classic easy puzzle, solvable with singles
EASY = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)
EASY_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)
# 17 clues, solved by single propagation
HARD = "000000010400000000020000000000050407008000300001090000300400200050100000000806000"
# no singles at all, needs search
SEARCH = "800000000003600000070090200050007000000045700000100030001000068008500010090000400"


@pytest.fixture
def empty_grid():
    return Grid.of()


@pytest.fixture
def easy_grid():
    return load_grid(EASY)


@pytest.fixture
def hard_grid():
    return load_grid(HARD)


def keep_only(grid, row, col, values):
    """Exclude every candidate of r{row}c{col} except `values` (1-based row / col)."""
    cell = grid.cell_at(row, col)
    cell.exclude_possible_values([v for v in range(1, grid.grid_size + 1) if v not in values])


def remove(grid, row, col, *values):
    grid.cell_at(row, col).exclude_possible_values(values)
