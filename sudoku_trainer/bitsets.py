"""Fixed-size bit vectors for cell indices, candidate values and house indices."""

# bitsets.py
# An int is used as the bit vector (bit i <=> member i), the same trick as
# 9-bit candidate masks, generalised to any grid size:
# - CellSet:  bit i  <=> cell i is a member (0-based)
# - ValueSet: bit v  <=> value v is a member (1-based, bit 0 unused)
# - HouseSet: bit h  <=> row / column / block h is a member (0-based)

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, Iterator

from .errors import OutOfRangeError

if TYPE_CHECKING:
    from .grid import Cell, Grid
    from .houses import Block, Column, Row


class BitSet:
    """Bit vector with a fixed logical size and an optional lowest legal bit."""

    offset = 0

    __slots__ = ("size", "bits")

    def __init__(self, size: int, bits: int = 0):
        self.size = size
        self.bits = bits

    # ---------------- checks ----------------

    def _check(self, bit: int) -> None:
        if bit < self.offset or bit >= self.size:
            raise OutOfRangeError(f"illegal bit {bit} for {type(self).__name__} of size {self.size}")

    def _same_kind(self, other: BitSet) -> None:
        if self.size != other.size:
            raise OutOfRangeError(f"bitset sizes differ: {self.size} != {other.size}")

    @property
    def _full_mask(self) -> int:
        return ((1 << self.size) - 1) & ~((1 << self.offset) - 1)

    # ---------------- queries ----------------

    def cardinality(self) -> int:
        return self.bits.bit_count()

    def get(self, bit: int) -> bool:
        self._check(bit)
        return bool(self.bits >> bit & 1)

    def __getitem__(self, bit: int) -> bool:
        return self.get(bit)

    def __contains__(self, bit: int) -> bool:
        return self.offset <= bit < self.size and bool(self.bits >> bit & 1)

    def __len__(self) -> int:
        return self.cardinality()

    def __bool__(self) -> bool:
        return self.bits != 0

    def next_set_bit(self, start: int) -> int:
        """Index of the first set bit >= start, or -1."""
        start = max(start, self.offset)
        if start >= self.size:
            return -1
        rest = self.bits >> start
        if rest == 0:
            return -1
        return start + ((rest & -rest).bit_length() - 1)

    def next_unset_bit(self, start: int) -> int:
        """Index of the first unset bit >= start, or -1 if every remaining bit is set."""
        bit = max(start, self.offset)
        while bit < self.size:
            if not self.bits >> bit & 1:
                return bit
            bit += 1
        return -1

    def first_set_bit(self) -> int:
        return self.next_set_bit(self.offset)

    def first_unset_bit(self) -> int:
        return self.next_unset_bit(self.offset)

    def previous_set_bit(self, start: int) -> int:
        """Index of the last set bit <= start, or -1."""
        if start < self.offset:
            return -1
        start = min(start, self.size - 1)
        masked = self.bits & ((1 << (start + 1)) - 1)
        if masked == 0:
            return -1
        return masked.bit_length() - 1

    def last_set_bit(self) -> int:
        return self.previous_set_bit(self.size - 1)

    def all_set_bits(self, start: int | None = None) -> Iterator[int]:
        first = self.offset if start is None else max(start, self.offset)
        bits = self.bits & ~((1 << first) - 1)
        while bits:
            lowest = bits & -bits
            yield lowest.bit_length() - 1
            bits ^= lowest

    def all_unset_bits(self, start: int | None = None) -> Iterator[int]:
        bit = self.offset if start is None else max(start, self.offset)
        while bit < self.size:
            if not self.bits >> bit & 1:
                yield bit
            bit += 1

    def __iter__(self) -> Iterator[int]:
        return self.all_set_bits()

    def to_list(self) -> list[int]:
        return list(self.all_set_bits())

    # ---------------- mutation ----------------

    def set(self, bit: int) -> None:
        self._check(bit)
        self.bits |= 1 << bit

    def clear(self, bit: int) -> None:
        self._check(bit)
        self.bits &= ~(1 << bit)

    def set_all(self) -> None:
        self.bits = self._full_mask

    def clear_all(self) -> None:
        self.bits = 0

    def and_(self, other: BitSet) -> None:
        self._same_kind(other)
        self.bits &= other.bits

    def or_(self, other: BitSet) -> None:
        self._same_kind(other)
        self.bits |= other.bits

    def and_not(self, other: BitSet) -> None:
        self._same_kind(other)
        self.bits &= ~other.bits

    def copy(self):
        return type(self)(self.size, self.bits)

    # Non-mutating operators, always return a fresh set of the same type.

    def __and__(self, other: BitSet):
        result = self.copy()
        result.and_(other)
        return result

    def __or__(self, other: BitSet):
        result = self.copy()
        result.or_(other)
        return result

    def __sub__(self, other: BitSet):
        result = self.copy()
        result.and_not(other)
        return result

    # ---------------- dunder ----------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.size == other.size and self.bits == other.bits

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.size, self.bits))

    def __repr__(self) -> str:
        return "{" + ", ".join(str(bit) for bit in self.all_set_bits()) + "}"


class ValueSet(BitSet):
    """Set of candidate values 1..N of a grid."""

    offset = 1

    __slots__ = ()

    @classmethod
    def empty(cls, grid: Grid) -> ValueSet:
        return cls(grid.grid_size + 1)

    @classmethod
    def of(cls, grid: Grid, *values: int) -> ValueSet:
        value_set = cls.empty(grid)
        for value in values:
            value_set.set(value)
        return value_set

    @classmethod
    def fully_set(cls, grid: Grid) -> ValueSet:
        value_set = cls.empty(grid)
        value_set.set_all()
        return value_set


class HouseSet(BitSet):
    """Set of row, column or block indices (0-based)."""

    __slots__ = ()

    @classmethod
    def empty(cls, grid: Grid) -> HouseSet:
        return cls(grid.grid_size)


class CellSet(BitSet):
    """Set of cell indices (0-based) of a grid."""

    __slots__ = ()

    @classmethod
    def empty(cls, grid: Grid) -> CellSet:
        return cls(grid.cell_count)

    @classmethod
    def of(cls, grid: Grid, *cell_indices: int) -> CellSet:
        cell_set = cls.empty(grid)
        for cell_index in cell_indices:
            cell_set.set(cell_index)
        return cell_set

    @classmethod
    def of_cells(cls, grid: Grid, cells: Iterable[Cell]) -> CellSet:
        cell_set = cls.empty(grid)
        for cell in cells:
            cell_set.set(cell.cell_index)
        return cell_set

    def all_cells(self, grid: Grid, start: int = 0) -> Iterator[Cell]:
        return (grid.get_cell(index) for index in self.all_set_bits(start))

    def filtered_cells(self, grid: Grid, predicate: Callable[[Cell], bool], start: int = 0) -> Iterator[Cell]:
        return (cell for cell in self.all_cells(grid, start) if predicate(cell))

    def to_cell_list(self, grid: Grid) -> list[Cell]:
        return list(self.all_cells(grid))

    def to_row_set(self, grid: Grid) -> HouseSet:
        rows = HouseSet.empty(grid)
        for cell in self.all_cells(grid):
            rows.set(cell.row_index)
        return rows

    def to_column_set(self, grid: Grid) -> HouseSet:
        columns = HouseSet.empty(grid)
        for cell in self.all_cells(grid):
            columns.set(cell.column_index)
        return columns

    def to_block_set(self, grid: Grid) -> HouseSet:
        blocks = HouseSet.empty(grid)
        for cell in self.all_cells(grid):
            if cell.block_index >= 0:
                blocks.set(cell.block_index)
        return blocks

    def single_row(self, grid: Grid) -> Row | None:
        """The row containing every member, or None if they span several rows."""
        rows = self.to_row_set(grid)
        return grid.get_row(rows.first_set_bit()) if rows.cardinality() == 1 else None

    def single_column(self, grid: Grid) -> Column | None:
        """The column containing every member, or None if they span several columns."""
        columns = self.to_column_set(grid)
        return grid.get_column(columns.first_set_bit()) if columns.cardinality() == 1 else None

    def single_block(self, grid: Grid) -> Block | None:
        """The block containing every member, or None.

        Cells without a block (irregular layouts) never share one.
        """
        if any(cell.block_index < 0 for cell in self.all_cells(grid)):
            return None
        blocks = self.to_block_set(grid)
        return grid.get_block(blocks.first_set_bit()) if blocks.cardinality() == 1 else None
