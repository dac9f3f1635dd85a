"""Singles: Full House, Naked Single, Hidden Single."""

from __future__ import annotations

from ..hints import HintAggregator, SolvingTechnique
from .base import HintFinder


class FullHouseFinder(HintFinder):
    """A house missing exactly one value: place it in every unassigned cell of that house."""

    technique = SolvingTechnique.FULL_HOUSE

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        expected = grid.grid_size - 1
        for house in grid.houses():
            assigned = house.assigned_value_set
            if assigned.cardinality() != expected:
                continue
            value = assigned.first_unset_bit()
            for cell in house.unassigned_cells():
                self.place_value_in_cell(grid, aggregator, cell.cell_index, value, (house,))


class NakedSingleFinder(HintFinder):
    technique = SolvingTechnique.NAKED_SINGLE

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        for cell in grid.unassigned_cells():
            possible = cell.possible_values
            if possible.cardinality() == 1:
                self.place_value_in_cell(grid, aggregator, cell.cell_index, possible.first_set_bit())


class HiddenSingleFinder(HintFinder):
    technique = SolvingTechnique.HIDDEN_SINGLE

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        for house in grid.houses():
            for value in house.unassigned_values():
                positions = house.potential_positions(value)
                if positions.cardinality() == 1:
                    self.place_value_in_cell(grid, aggregator, positions.first_set_bit(), value, (house,))
