"""Basic fish: X-Wing, Swordfish, Jellyfish."""

from __future__ import annotations

from ..bitsets import CellSet, HouseSet, ValueSet
from ..hints import HintAggregator, SolvingTechnique
from ..houses import HouseType
from .base import HintFinder


class BasicFishFinder(HintFinder):
    """k rows (or columns) whose positions for a value fall into exactly k columns (or rows).

    The value is removed from the cover lines outside the base lines.
    """

    def __init__(self, size: int):
        self.size = size

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        for house in [*grid.rows(), *grid.columns()]:
            if house.is_solved:
                continue
            for value in house.unassigned_values():
                self._find_base_set(grid, aggregator, (), house, value, HouseSet.empty(grid), 1)

    def _find_base_set(self, grid, aggregator, base_houses: tuple, house, value: int, cover_set: HouseSet, level: int) -> bool:
        positions = house.potential_positions(value)
        if positions.cardinality() > self.size:
            return False
        merged = cover_set | self._cover_set(grid, house, positions)
        if merged.cardinality() > self.size:
            return False
        bases = base_houses + (house,)

        if level == self.size:
            if merged.cardinality() != self.size:
                return False
            cover_houses = self._cover_houses(grid, house.type, merged)
            affected = CellSet.empty(grid)
            matching = CellSet.empty(grid)
            for cover in cover_houses:
                affected.or_(cover.cell_set)
            for base in bases:
                affected.and_not(base.cell_set)
                matching.or_(base.potential_positions(value))
            return self.eliminate_values_from_cells(
                grid,
                aggregator,
                affected,
                ValueSet.of(grid, value),
                matching_cells=matching,
                houses=[*bases, *cover_houses],
            )

        found = False
        for next_house in grid.regions_after(house):
            if next_house.is_solved or value in next_house.assigned_value_set:
                continue
            found |= self._find_base_set(grid, aggregator, bases, next_house, value, merged, level + 1)
        return found

    @staticmethod
    def _cover_set(grid, house, positions: CellSet) -> HouseSet:
        if house.type is HouseType.ROW:
            return positions.to_column_set(grid)
        if house.type is HouseType.COLUMN:
            return positions.to_row_set(grid)
        raise ValueError(f"unsupported region type {house.type}")

    @staticmethod
    def _cover_houses(grid, base_type: HouseType, cover_set: HouseSet) -> list:
        if base_type is HouseType.ROW:
            return [grid.get_column(i) for i in cover_set]
        return [grid.get_row(i) for i in cover_set]


class XWingFinder(BasicFishFinder):
    technique = SolvingTechnique.X_WING

    def __init__(self):
        super().__init__(2)


class SwordfishFinder(BasicFishFinder):
    technique = SolvingTechnique.SWORDFISH

    def __init__(self):
        super().__init__(3)


class JellyfishFinder(BasicFishFinder):
    technique = SolvingTechnique.JELLYFISH

    def __init__(self):
        super().__init__(4)
