"""Naked pairs, triples and quadruples, and the locked pair / triple variants."""

from __future__ import annotations

from ..bitsets import CellSet, ValueSet
from ..hints import HintAggregator, SolvingTechnique
from .base import HintFinder


class NakedSubsetFinder(HintFinder):
    """k cells of a house whose candidates together are exactly k values.

    Those values are removed from the other cells of the house. The locked
    variant only looks in blocks and requires the k cells to share a row or a
    column as well; the elimination then extends to that line.
    """

    def __init__(self, subset_size: int, locked: bool = False):
        self.subset_size = subset_size
        self.locked = locked

    def _houses(self, grid):
        if self.locked:
            return grid.blocks()
        # blocks first: fewer, larger hints
        return [*grid.blocks(), *grid.rows(), *grid.columns()]

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        for house in self._houses(grid):
            if house.is_solved:
                continue
            for cell in house.unassigned_cells():
                self._find_subset(grid, aggregator, house, CellSet.empty(grid), cell, ValueSet.empty(grid), 1)

    def _find_subset(self, grid, aggregator, house, visited_cells, current_cell, visited_values, level) -> bool:
        values = visited_values | current_cell.possible_values
        if values.cardinality() > self.subset_size:
            return False
        cells = visited_cells.copy()
        cells.set(current_cell.cell_index)

        if level == self.subset_size:
            if values.cardinality() != self.subset_size:
                return False
            return self._eliminate(grid, aggregator, house, cells, values)

        found = False
        for next_cell in house.unassigned_cells(current_cell.cell_index + 1):
            found |= self._find_subset(grid, aggregator, house, cells, next_cell, values, level + 1)
        return found

    def _eliminate(self, grid, aggregator, house, cells: CellSet, values: ValueSet) -> bool:
        houses = [house]
        affected = house.cell_set.copy()
        if self.locked:
            line = cells.single_row(grid) or cells.single_column(grid)
            if line is None:
                return False
            houses.append(line)
            affected.or_(line.cell_set)
        affected.and_not(cells)
        return self.eliminate_values_from_cells(
            grid, aggregator, affected, values, matching_cells=cells, matching_values=values, houses=houses
        )


class NakedPairFinder(NakedSubsetFinder):
    technique = SolvingTechnique.NAKED_PAIR

    def __init__(self):
        super().__init__(2)


class NakedTripleFinder(NakedSubsetFinder):
    technique = SolvingTechnique.NAKED_TRIPLE

    def __init__(self):
        super().__init__(3)


class NakedQuadrupleFinder(NakedSubsetFinder):
    technique = SolvingTechnique.NAKED_QUADRUPLE

    def __init__(self):
        super().__init__(4)


class LockedPairFinder(NakedSubsetFinder):
    technique = SolvingTechnique.LOCKED_PAIR

    def __init__(self):
        super().__init__(2, locked=True)


class LockedTripleFinder(NakedSubsetFinder):
    technique = SolvingTechnique.LOCKED_TRIPLE

    def __init__(self):
        super().__init__(3, locked=True)
