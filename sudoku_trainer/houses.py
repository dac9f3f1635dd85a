"""Houses (rows, columns, blocks): regions that must contain every value exactly once."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterator

from .bitsets import CellSet, ValueSet

if TYPE_CHECKING:
    from .grid import Cell, Grid


class HouseType(Enum):
    ROW = "row"
    COLUMN = "column"
    BLOCK = "block"


class House:
    """A region of a grid; membership is fixed, assigned values are cached."""

    type: HouseType
    prefix: str

    def __init__(self, owner: Grid, region_index: int):
        self.owner = owner
        self.region_index = region_index
        self.cell_set = CellSet.empty(owner)
        self._assigned_values = ValueSet.empty(owner)

    def _add_cell(self, cell: Cell) -> None:
        self.cell_set.set(cell.cell_index)

    @property
    def number(self) -> int:
        return self.region_index + 1

    @property
    def name(self) -> str:
        return f"{self.prefix}{self.number}"

    @property
    def size(self) -> int:
        return self.cell_set.cardinality()

    @property
    def assigned_value_set(self) -> ValueSet:
        """Values already placed in this house (cache-derived)."""
        self.owner.check_state()
        return self._assigned_values

    # ---------------- membership ----------------

    def contains_cell(self, cell: Cell | int) -> bool:
        cell_index = cell if isinstance(cell, int) else cell.cell_index
        return cell_index in self.cell_set

    def contains_all_cells(self, cells: CellSet) -> bool:
        """True if every member of `cells` is in this house; an empty set is always contained."""
        return cells.bits & ~self.cell_set.bits == 0

    # ---------------- iteration ----------------

    def cells(self, start: int = 0) -> Iterator[Cell]:
        return self.cell_set.all_cells(self.owner, start)

    def assigned_cells(self, start: int = 0) -> Iterator[Cell]:
        return self.cell_set.filtered_cells(self.owner, lambda cell: cell.is_assigned, start)

    def unassigned_cells(self, start: int = 0) -> Iterator[Cell]:
        return self.cell_set.filtered_cells(self.owner, lambda cell: not cell.is_assigned, start)

    def cells_excluding(self, *excluded: House | Cell | CellSet) -> Iterator[Cell]:
        """Cells of this house that are not part of any of the given houses, cells or cell sets."""
        remaining = self.cell_set.copy()
        for item in excluded:
            if isinstance(item, House):
                remaining.and_not(item.cell_set)
            elif isinstance(item, CellSet):
                remaining.and_not(item)
            else:
                remaining.clear(item.cell_index)
        return remaining.all_cells(self.owner)

    def assigned_values(self) -> Iterator[int]:
        return self.assigned_value_set.all_set_bits()

    def unassigned_values(self, start: int | None = None) -> Iterator[int]:
        return self.assigned_value_set.all_unset_bits(start)

    def potential_positions(self, value: int) -> CellSet:
        """Cells of this house where `value` is still a candidate."""
        return self.owner.potential_positions(value) & self.cell_set

    def potential_cells(self, value: int) -> Iterator[Cell]:
        return self.potential_positions(value).all_cells(self.owner)

    # ---------------- state ----------------

    @property
    def is_valid(self) -> bool:
        """No value is assigned twice; reads cell values only."""
        seen = 0
        for cell in self.assigned_cells():
            bit = 1 << cell.value
            if seen & bit:
                return False
            seen |= bit
        return True

    @property
    def is_solved(self) -> bool:
        return self.assigned_value_set.cardinality() == self.owner.grid_size

    def _update_assigned_values(self) -> None:
        self._assigned_values.clear_all()
        for cell in self.assigned_cells():
            self._assigned_values.set(cell.value)

    def _update_possible_values_in_cells(self) -> None:
        for cell in self.unassigned_cells():
            cell._update_possible_values(self._assigned_values)

    def __repr__(self) -> str:
        return f"{self.name} = {self._assigned_values!r}"


class Row(House):
    type = HouseType.ROW
    prefix = "r"


class Column(House):
    type = HouseType.COLUMN
    prefix = "c"


class Block(House):
    type = HouseType.BLOCK
    prefix = "b"
