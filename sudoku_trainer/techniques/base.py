"""HintFinder base class and the elimination helpers shared by the techniques."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable

from ..bitsets import CellSet, ValueSet
from ..hints import ChainHint, DirectHint, HintAggregator, HintContext, IndirectHint, SolvingTechnique

if TYPE_CHECKING:
    from ..chains import Chain
    from ..grid import Grid
    from ..houses import House


class HintFinder(ABC):
    """One solving technique; finds hints without mutating the grid."""

    technique: SolvingTechnique

    @abstractmethod
    def find_hints(self, grid: Grid, aggregator: HintAggregator) -> None:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.technique.key})"

    # ---------------- hint helpers ----------------

    def place_value_in_cell(
        self,
        grid: Grid,
        aggregator: HintAggregator,
        cell_index: int,
        value: int,
        houses: Iterable[House] = (),
    ) -> None:
        context = HintContext(houses=tuple(house.name for house in houses))
        aggregator.add_hint(DirectHint(grid.grid_type, self.technique, cell_index, value, context))

    def eliminate_value_from_cells(
        self,
        grid: Grid,
        aggregator: HintAggregator,
        affected_house: House,
        excluded_house: House,
        value: int,
        matching_cells: CellSet | None = None,
    ) -> bool:
        """Remove `value` from cells of `affected_house` that are not in `excluded_house`."""
        cells_to_modify = [
            cell.cell_index
            for cell in affected_house.cells_excluding(excluded_house)
            if not cell.is_assigned and value in cell.possible_values
        ]
        if not cells_to_modify:
            return False
        context = HintContext(
            matching_cells=tuple(matching_cells) if matching_cells is not None else (),
            matching_values=(value,),
            related_cells=tuple(affected_house.cell_set | excluded_house.cell_set),
            houses=(excluded_house.name, affected_house.name),
        )
        aggregator.add_hint(
            IndirectHint(
                grid.grid_type,
                self.technique,
                tuple(cells_to_modify),
                tuple((value,) for _ in cells_to_modify),
                context,
            )
        )
        return True

    def eliminate_values_from_cells(
        self,
        grid: Grid,
        aggregator: HintAggregator,
        affected_cells: CellSet,
        excluded_values: ValueSet,
        matching_cells: CellSet | None = None,
        matching_values: ValueSet | None = None,
        houses: Iterable[House] = (),
        chain: Chain | None = None,
    ) -> bool:
        """Remove `excluded_values` from every unassigned affected cell still carrying any of them.

        Emits one combined hint and returns whether anything was found.
        """
        cells_to_modify: list[int] = []
        values_to_exclude: list[tuple[int, ...]] = []
        for cell in affected_cells.all_cells(grid):
            if cell.is_assigned:
                continue
            overlap = cell.possible_values & excluded_values
            if overlap:
                cells_to_modify.append(cell.cell_index)
                values_to_exclude.append(tuple(overlap))
        if not cells_to_modify:
            return False

        house_list = list(houses)
        related = CellSet.empty(grid)
        for house in house_list:
            related.or_(house.cell_set)
        context = HintContext(
            matching_cells=tuple(matching_cells) if matching_cells is not None else (),
            matching_values=tuple(matching_values if matching_values is not None else excluded_values),
            related_cells=tuple(related),
            houses=tuple(house.name for house in house_list),
        )
        if chain is not None:
            hint = ChainHint(
                grid.grid_type, self.technique, tuple(cells_to_modify), tuple(values_to_exclude), context, chain
            )
        else:
            hint = IndirectHint(
                grid.grid_type, self.technique, tuple(cells_to_modify), tuple(values_to_exclude), context
            )
        aggregator.add_hint(hint)
        return True

    def eliminate_not_allowed_values_from_cells(
        self,
        grid: Grid,
        aggregator: HintAggregator,
        affected_cells: CellSet,
        allowed_values: ValueSet,
        houses: Iterable[House] = (),
    ) -> bool:
        """Restrict every unassigned affected cell to `allowed_values`."""
        cells_to_modify: list[int] = []
        values_to_exclude: list[tuple[int, ...]] = []
        for cell in affected_cells.all_cells(grid):
            if cell.is_assigned:
                continue
            extra = cell.possible_values - allowed_values
            if extra:
                cells_to_modify.append(cell.cell_index)
                values_to_exclude.append(tuple(extra))
        if not cells_to_modify:
            return False
        context = HintContext(
            matching_cells=tuple(affected_cells),
            matching_values=tuple(allowed_values),
            houses=tuple(house.name for house in houses),
        )
        aggregator.add_hint(
            IndirectHint(grid.grid_type, self.technique, tuple(cells_to_modify), tuple(values_to_exclude), context)
        )
        return True
