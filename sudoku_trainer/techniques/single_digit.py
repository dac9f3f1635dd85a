"""Single-digit patterns: Skyscraper and 2-String Kite."""

from __future__ import annotations

from abc import abstractmethod

from ..bitsets import CellSet, ValueSet
from ..hints import HintAggregator, SolvingTechnique
from ..houses import HouseType
from .base import HintFinder


class SingleDigitPatternFinder(HintFinder):
    """Two houses holding exactly two disjoint positions for a value, one end of
    each joined by a third house. Cells seeing both free ends lose the value."""

    @abstractmethod
    def base_houses(self, grid):
        ...

    @abstractmethod
    def other_houses(self, grid, house):
        ...

    @abstractmethod
    def connecting_house(self, grid, house, cells: CellSet):
        ...

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        for house in self.base_houses(grid):
            if house.is_solved:
                continue
            for value in house.unassigned_values():
                positions = house.potential_positions(value)
                if positions.cardinality() == 2:
                    self._find_matching_house(grid, aggregator, house, positions, value)

    def _find_matching_house(self, grid, aggregator, house, positions: CellSet, value: int) -> None:
        for other in self.other_houses(grid, house):
            if other.is_solved or value in other.assigned_value_set:
                continue
            other_positions = other.potential_positions(value)
            if other_positions.cardinality() != 2 or other_positions & positions:
                continue
            self._check_matching_house(grid, aggregator, house, positions, other, other_positions, value)

    def _check_matching_house(self, grid, aggregator, house, positions, other, other_positions, value) -> None:
        for first in positions:
            for second in other_positions:
                link = self.connecting_house(grid, house, CellSet.of(grid, first, second))
                if link is None:
                    continue
                first_end = next(index for index in positions if index != first)
                second_end = next(index for index in other_positions if index != second)
                affected = grid.get_cell(first_end).peer_set & grid.get_cell(second_end).peer_set
                self.eliminate_values_from_cells(
                    grid,
                    aggregator,
                    affected,
                    ValueSet.of(grid, value),
                    matching_cells=positions | other_positions,
                    houses=[house, other, link],
                )


class SkyscraperFinder(SingleDigitPatternFinder):
    technique = SolvingTechnique.SKYSCRAPER

    def base_houses(self, grid):
        return [*grid.rows(), *grid.columns()]

    def other_houses(self, grid, house):
        return grid.regions_after(house)

    def connecting_house(self, grid, house, cells):
        if house.type is HouseType.ROW:
            return cells.single_column(grid)
        return cells.single_row(grid)


class TwoStringKiteFinder(SingleDigitPatternFinder):
    technique = SolvingTechnique.TWO_STRING_KITE

    def base_houses(self, grid):
        return grid.rows()

    def other_houses(self, grid, house):
        return grid.columns()

    def connecting_house(self, grid, house, cells):
        return cells.single_block(grid)
