"""Locked candidates: pointing (type 1) and claiming (type 2)."""

from __future__ import annotations

from ..hints import HintAggregator, SolvingTechnique
from .base import HintFinder


class LockedCandidatesType1Finder(HintFinder):
    """Pointing: a block's positions for a value lie on one line; clear the rest of that line."""

    technique = SolvingTechnique.LOCKED_CANDIDATES_TYPE_1

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        for block in grid.blocks():
            for value in block.unassigned_values():
                positions = block.potential_positions(value)
                if positions.cardinality() <= 1:
                    continue
                row = positions.single_row(grid)
                if row is not None:
                    self.eliminate_value_from_cells(grid, aggregator, row, block, value, positions)
                column = positions.single_column(grid)
                if column is not None:
                    self.eliminate_value_from_cells(grid, aggregator, column, block, value, positions)


class LockedCandidatesType2Finder(HintFinder):
    """Claiming: a line's positions for a value lie in one block; clear the rest of that block."""

    technique = SolvingTechnique.LOCKED_CANDIDATES_TYPE_2

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        for line in [*grid.rows(), *grid.columns()]:
            for value in line.unassigned_values():
                positions = line.potential_positions(value)
                if positions.cardinality() <= 1:
                    continue
                block = positions.single_block(grid)
                if block is not None:
                    self.eliminate_value_from_cells(grid, aggregator, block, line, value, positions)
