"""Sudoku trainer: grid model with candidate cache, human-style solving techniques, hint-driven and backtracking solvers."""

from .bitsets import CellSet, HouseSet, ValueSet
from .brute_force import BruteForceSolver, SearchStats
from .conflicts import Conflict, find_conflicts
from .errors import GivenCellImmutableError, OutOfRangeError, StaleCacheError, SudokuError
from .grid import Cell, Grid
from .hint_solver import HintSolver, SolverState
from .hints import (
    ChainHint,
    DirectHint,
    Hint,
    HintAggregator,
    HintAggregatorExhausted,
    IndirectHint,
    SingleHintAggregator,
    SolvingTechnique,
)
from .houses import Block, Column, House, HouseType, Row
from .predefined import GridType, PredefinedType, regular_block_function
from .sudoku_io import load_grid
from .techniques import FinderRegistry, HintFinder, default_registry

__version__ = "0.3.0"
