"""Hidden pairs, triples and quadruples."""

from __future__ import annotations

from ..bitsets import CellSet, ValueSet
from ..hints import HintAggregator, SolvingTechnique
from .base import HintFinder


class HiddenPairFinder(HintFinder):
    """Two values confined to the same two cells of a house."""

    technique = SolvingTechnique.HIDDEN_PAIR

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        for house in grid.houses():
            for value in house.unassigned_values():
                positions = house.potential_positions(value)
                if positions.cardinality() != 2:
                    continue
                for other_value in house.unassigned_values(value + 1):
                    if house.potential_positions(other_value) == positions:
                        allowed = ValueSet.of(grid, value, other_value)
                        self.eliminate_not_allowed_values_from_cells(grid, aggregator, positions, allowed, (house,))


class HiddenSubsetFinder(HintFinder):
    """k values of a house whose positions together cover exactly k cells.

    The search walks combinations of unassigned values in ascending order and
    prunes as soon as the union of positions exceeds k cells.
    """

    def __init__(self, subset_size: int):
        self.subset_size = subset_size

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        for house in grid.houses():
            if house.is_solved:
                continue
            for value in house.unassigned_values():
                self._find_subset(grid, aggregator, house, ValueSet.empty(grid), value, CellSet.empty(grid), 1)

    def _find_subset(self, grid, aggregator, house, visited_values, current_value, visited_positions, level) -> bool:
        positions = visited_positions | house.potential_positions(current_value)
        if positions.cardinality() > self.subset_size:
            return False
        values = visited_values.copy()
        values.set(current_value)

        if level == self.subset_size:
            if positions.cardinality() != self.subset_size:
                return False
            return self.eliminate_not_allowed_values_from_cells(grid, aggregator, positions, values, (house,))

        found = False
        for next_value in house.unassigned_values(current_value + 1):
            found |= self._find_subset(grid, aggregator, house, values, next_value, positions, level + 1)
        return found


class HiddenTripleFinder(HiddenSubsetFinder):
    technique = SolvingTechnique.HIDDEN_TRIPLE

    def __init__(self):
        super().__init__(3)


class HiddenQuadrupleFinder(HiddenSubsetFinder):
    technique = SolvingTechnique.HIDDEN_QUADRUPLE

    def __init__(self):
        super().__init__(4)
