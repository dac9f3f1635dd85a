"""Grid model: cells, houses and the candidate cache that keeps them consistent."""

# grid.py
# Cache protocol:
# - every mutation runs inside Grid.mutation(): the cache is marked invalid,
#   the change is made, then a repair callback restores validity
#   (incremental fast path) unless the caller asked for no update
# - an incremental repair never revalidates a cache that was already stale
# - update_state() is the slow path: full recompute, O(cells x N)
# - reading possible values / assigned values / potential positions while
#   the cache is invalid raises StaleCacheError

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterable, Iterator

from .bitsets import CellSet, ValueSet
from .conflicts import Conflict, find_conflicts
from .errors import GivenCellImmutableError, OutOfRangeError, StaleCacheError
from .houses import Block, Column, House, HouseType, Row
from .predefined import NO_BLOCK, BlockFunction, GridType, PredefinedType


class Cell:
    """A single cell; identity is its 0-based index in the owning grid."""

    def __init__(self, owner: Grid, cell_index: int):
        grid_type = owner.grid_type
        self.owner = owner
        self.cell_index = cell_index
        self.row_index = grid_type.row_index(cell_index)
        self.column_index = grid_type.column_index(cell_index)
        self.block_index = grid_type.block_index(cell_index)
        self.is_given = False
        self._value = 0
        self._possible_values = ValueSet.fully_set(owner)
        self._excluded_values = ValueSet.empty(owner)
        self.peer_set = CellSet.empty(owner)

    # ---------------- identity ----------------

    @property
    def name(self) -> str:
        return f"r{self.row_index + 1}c{self.column_index + 1}"

    @property
    def row(self) -> Row:
        return self.owner.get_row(self.row_index)

    @property
    def column(self) -> Column:
        return self.owner.get_column(self.column_index)

    @property
    def block(self) -> Block | None:
        if self.block_index == NO_BLOCK:
            return None
        return self.owner.get_block(self.block_index)

    def houses(self) -> list[House]:
        """The row, column and (if any) block containing this cell."""
        houses: list[House] = [self.row, self.column]
        if self.block_index != NO_BLOCK:
            houses.append(self.owner.get_block(self.block_index))
        return houses

    def peers(self) -> Iterator[Cell]:
        """Cells sharing a row, column or block with this cell."""
        return self.peer_set.all_cells(self.owner)

    def sees(self, other: Cell) -> bool:
        return other.cell_index in self.peer_set

    # ---------------- value ----------------

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self.set_value(value)

    @property
    def is_assigned(self) -> bool:
        return self._value > 0

    def _check_value(self, value: int) -> None:
        if value < 0 or value > self.owner.grid_size:
            raise OutOfRangeError(
                f"invalid value {value} for cell {self.name}: outside allowed range [0, {self.owner.grid_size}]"
            )

    def set_value(self, value: int, update_grid: bool = True) -> None:
        """Assign `value` (0 clears the cell).

        Raises OutOfRangeError for a value outside [0, N] and
        GivenCellImmutableError for a given cell; the state is unchanged in
        both cases. With update_grid=False the cache is left invalid and the
        caller must call Grid.update_state().
        """
        self._check_value(value)
        if self.is_given:
            raise GivenCellImmutableError(self.name)
        old_value = self._value
        repair = (lambda: self.owner._on_value_changed(self, old_value, value)) if update_grid else None
        with self.owner.mutation(repair):
            self._value = value

    # ---------------- candidates ----------------

    @property
    def possible_values(self) -> ValueSet:
        self.owner.check_state()
        return self._possible_values

    @property
    def excluded_values(self) -> ValueSet:
        return self._excluded_values

    def _exclusions_repair(self, update_grid: bool) -> Callable[[], None] | None:
        if not update_grid:
            return None
        return lambda: self.owner._on_exclusions_changed(self)

    def exclude_possible_values(self, values: ValueSet | Iterable[int], update_grid: bool = True) -> None:
        """Forbid `values` in this cell, independent of what its houses force."""
        values = self._as_value_set(values)
        with self.owner.mutation(self._exclusions_repair(update_grid)):
            self._excluded_values.or_(values)
            self._possible_values.and_not(self._excluded_values)

    def remove_excluded_possible_values(self, values: ValueSet | Iterable[int], update_grid: bool = True) -> None:
        """Allow previously excluded `values` again."""
        values = self._as_value_set(values)
        with self.owner.mutation(self._exclusions_repair(update_grid)):
            self._excluded_values.and_not(values)

    def clear_excluded_values(self, update_grid: bool = True) -> None:
        with self.owner.mutation(self._exclusions_repair(update_grid)):
            self._excluded_values.clear_all()

    def _as_value_set(self, values: ValueSet | Iterable[int]) -> ValueSet:
        if isinstance(values, ValueSet):
            return values
        return ValueSet.of(self.owner, *values)

    def _reset_possible_values(self) -> None:
        if self.is_assigned:
            self._possible_values.clear_all()
        else:
            self._possible_values.set_all()
            self._possible_values.and_not(self._excluded_values)

    def _update_possible_values(self, assigned_values: ValueSet) -> None:
        self._possible_values.and_not(assigned_values)

    def _recompute_possible_values(self) -> None:
        self._reset_possible_values()
        if self.is_assigned:
            return
        for house in self.houses():
            self._update_possible_values(house._assigned_values)

    # ---------------- reset ----------------

    def reset(self, update_grid: bool = True) -> None:
        """Drop exclusions and placed values; given values are kept."""
        old_value = self._value
        new_value = old_value if self.is_given else 0

        def repair() -> None:
            if old_value != new_value:
                self.owner._on_value_changed(self, old_value, new_value)
            else:
                self.owner._on_exclusions_changed(self)

        with self.owner.mutation(repair if update_grid else None):
            self._excluded_values.clear_all()
            self._value = new_value

    def clear(self, update_grid: bool = True) -> None:
        """Fully clear this cell, including its value and given status."""
        old_value = self._value

        def repair() -> None:
            if old_value != 0:
                self.owner._on_value_changed(self, old_value, 0)
            else:
                self.owner._on_exclusions_changed(self)

        with self.owner.mutation(repair if update_grid else None):
            self.is_given = False
            self._excluded_values.clear_all()
            self._value = 0

    def __repr__(self) -> str:
        state = "given" if self.is_given else repr(self._possible_values)
        return f"{self.name} = {self._value} ({state})"


class Grid:
    """An N x N grid with rows, columns, blocks and a potential-positions cache."""

    def __init__(self, grid_type: GridType):
        self.grid_type = grid_type
        self._state_valid = False

        self._rows = [Row(self, i) for i in range(grid_type.grid_size)]
        self._columns = [Column(self, i) for i in range(grid_type.grid_size)]
        self._blocks = [Block(self, i) for i in range(grid_type.block_count)]

        self._cells: list[Cell] = []
        for cell_index in range(grid_type.cell_count):
            cell = Cell(self, cell_index)
            self._cells.append(cell)
            for house in cell.houses():
                house._add_cell(cell)

        for house in self.houses():
            for cell in house.cells():
                cell.peer_set.or_(house.cell_set)
        for cell in self._cells:
            cell.peer_set.clear(cell.cell_index)

        self._potential_positions = [CellSet.empty(self) for _ in range(grid_type.grid_size)]
        self.update_state()

    # ---------------- construction ----------------

    @classmethod
    def of(cls, predefined: PredefinedType = PredefinedType.CLASSIC_9X9) -> Grid:
        return cls(predefined.grid_type)

    @classmethod
    def of_size(cls, grid_size: int, block_function: BlockFunction | None = None) -> Grid:
        return cls(GridType.of(grid_size, block_function))

    def copy(self) -> Grid:
        """Independent deep copy: values, given flags and exclusions."""
        other = Grid(self.grid_type)
        for cell in self._cells:
            target = other._cells[cell.cell_index]
            target.set_value(cell.value, False)
            target.is_given = cell.is_given
            target.exclude_possible_values(cell.excluded_values, False)
        other.update_state()
        return other

    # ---------------- dimensions ----------------

    @property
    def grid_size(self) -> int:
        return self.grid_type.grid_size

    @property
    def cell_count(self) -> int:
        return self.grid_type.cell_count

    # ---------------- iteration ----------------

    def cells(self) -> list[Cell]:
        return self._cells

    def assigned_cells(self) -> Iterator[Cell]:
        return (cell for cell in self._cells if cell.is_assigned)

    def unassigned_cells(self) -> Iterator[Cell]:
        return (cell for cell in self._cells if not cell.is_assigned)

    def rows(self) -> list[Row]:
        return self._rows

    def columns(self) -> list[Column]:
        return self._columns

    def blocks(self) -> list[Block]:
        return self._blocks

    def houses(self) -> list[House]:
        return [*self._rows, *self._columns, *self._blocks]

    def regions_after(self, house: House) -> list[House]:
        """Houses of the same kind with a higher index than `house`."""
        if house.type is HouseType.ROW:
            regions = self._rows
        elif house.type is HouseType.COLUMN:
            regions = self._columns
        else:
            regions = self._blocks
        return regions[house.region_index + 1:]

    def get_cell(self, cell_index: int) -> Cell:
        return self._cells[cell_index]

    def cell_at(self, row: int, column: int) -> Cell:
        """Cell at 1-based row / column numbers."""
        return self._cells[self.grid_type.cell_index(row, column)]

    def get_row(self, row_index: int) -> Row:
        return self._rows[row_index]

    def get_column(self, column_index: int) -> Column:
        return self._columns[column_index]

    def get_block(self, block_index: int) -> Block:
        return self._blocks[block_index]

    # ---------------- status ----------------

    @property
    def is_solved(self) -> bool:
        return all(house.is_solved for house in self.houses())

    @property
    def is_valid(self) -> bool:
        return all(house.is_valid for house in self.houses())

    @property
    def conflicts(self) -> list[Conflict]:
        return find_conflicts(self)

    # ---------------- cache ----------------

    @property
    def state_valid(self) -> bool:
        return self._state_valid

    def check_state(self) -> None:
        if not self._state_valid:
            raise StaleCacheError()

    @contextmanager
    def mutation(self, repair: Callable[[], None] | None = None):
        """Scope of one mutation: invalidate, mutate, then repair.

        Without a repair callback, or if the body raises, the cache stays
        invalid until update_state() is called. An incremental repair only
        runs when the cache was valid before the mutation started.
        """
        was_valid = self._state_valid
        self._state_valid = False
        yield self
        if repair is None:
            return
        if was_valid or repair == self.update_state:
            repair()

    def potential_positions(self, value: int) -> CellSet:
        """Every cell where `value` is still a candidate (a copy)."""
        self.check_state()
        if value < 1 or value > self.grid_size:
            raise OutOfRangeError(f"invalid value {value} for a {self.grid_type} grid")
        return self._potential_positions[value - 1].copy()

    def _index_cell(self, cell: Cell) -> None:
        for positions in self._potential_positions:
            positions.clear(cell.cell_index)
        for value in cell._possible_values.all_set_bits():
            self._potential_positions[value - 1].set(cell.cell_index)

    def _on_value_changed(self, cell: Cell, old_value: int, new_value: int) -> None:
        self._state_valid = True
        if old_value == new_value:
            return
        houses = cell.houses()
        for house in houses:
            house._update_assigned_values()

        affected = [cell, *cell.peers()]
        for affected_cell in affected:
            affected_cell._recompute_possible_values()

        for positions in self._potential_positions:
            positions.clear(cell.cell_index)
            positions.and_not(cell.peer_set)
        for affected_cell in affected:
            for value in affected_cell._possible_values.all_set_bits():
                self._potential_positions[value - 1].set(affected_cell.cell_index)

    def _on_exclusions_changed(self, cell: Cell) -> None:
        self._state_valid = True
        cell._recompute_possible_values()
        self._index_cell(cell)

    def update_state(self) -> None:
        """Full recompute of every derived value from cell values and exclusions."""
        self._state_valid = True
        for cell in self._cells:
            cell._reset_possible_values()
        houses = self.houses()
        for house in houses:
            house._update_assigned_values()
        for house in houses:
            house._update_possible_values_in_cells()

        for positions in self._potential_positions:
            positions.clear_all()
        for cell in self._cells:
            for value in cell._possible_values.all_set_bits():
                self._potential_positions[value - 1].set(cell.cell_index)

    def clear(self) -> None:
        """Remove every value, given flag and exclusion."""
        with self.mutation(self.update_state):
            for cell in self._cells:
                cell.clear(False)

    def reset(self) -> None:
        """Back to the givens: placed values and exclusions are dropped."""
        with self.mutation(self.update_state):
            for cell in self._cells:
                cell.reset(False)

    def __repr__(self) -> str:
        lines = [f"Grid [{self.grid_type}]:"]
        lines.extend(f"  {cell!r}" for cell in self._cells)
        return "\n".join(lines)


__all__ = ["Cell", "Grid", "GridType"]
