"""Grid types and the predefined block layouts (classic and jigsaw)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .errors import OutOfRangeError

# A block index of -1 marks a cell that belongs to no block.
NO_BLOCK = -1

BlockFunction = Callable[[int], int]


@dataclass(frozen=True)
class GridType:
    """Size and block layout of a grid, fixed at construction."""

    grid_size: int
    block_mapping: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise OutOfRangeError(f"invalid grid size {self.grid_size}")
        if len(self.block_mapping) != self.grid_size * self.grid_size:
            raise OutOfRangeError(
                f"block mapping has {len(self.block_mapping)} entries, expected {self.grid_size * self.grid_size}"
            )
        for block_index in self.block_mapping:
            if block_index < NO_BLOCK or block_index >= self.grid_size:
                raise OutOfRangeError(f"illegal block index {block_index} for grid size {self.grid_size}")

    @classmethod
    def of(cls, grid_size: int, block_function: BlockFunction | None = None) -> GridType:
        if block_function is None:
            return cls(grid_size, regular_block_mapping(grid_size))
        mapping = tuple(block_function(i) for i in range(grid_size * grid_size))
        return cls(grid_size, mapping)

    @property
    def cell_count(self) -> int:
        return self.grid_size * self.grid_size

    @property
    def block_count(self) -> int:
        return max(self.block_mapping, default=NO_BLOCK) + 1

    def row_index(self, cell_index: int) -> int:
        return cell_index // self.grid_size

    def column_index(self, cell_index: int) -> int:
        return cell_index % self.grid_size

    def block_index(self, cell_index: int) -> int:
        return self.block_mapping[cell_index]

    def cell_index(self, row: int, column: int) -> int:
        """Cell index for 1-based row / column numbers."""
        if not (1 <= row <= self.grid_size and 1 <= column <= self.grid_size):
            raise OutOfRangeError(f"cell r{row}c{column} outside a {self} grid")
        return (row - 1) * self.grid_size + (column - 1)

    def cell_name(self, cell_index: int) -> str:
        return f"r{self.row_index(cell_index) + 1}c{self.column_index(cell_index) + 1}"

    def __str__(self) -> str:
        return f"{self.grid_size}x{self.grid_size}"


def block_shape(grid_size: int) -> tuple[int, int]:
    """(height, width) of the regular blocks for a grid size, height <= width."""
    height = 1
    for h in range(1, int(grid_size ** 0.5) + 1):
        if grid_size % h == 0:
            height = h
    return height, grid_size // height


def regular_block_mapping(grid_size: int) -> tuple[int, ...]:
    height, width = block_shape(grid_size)
    blocks_per_row = grid_size // width
    mapping = []
    for cell_index in range(grid_size * grid_size):
        r, c = divmod(cell_index, grid_size)
        mapping.append((r // height) * blocks_per_row + c // width)
    return tuple(mapping)


def regular_block_function(grid_size: int) -> BlockFunction:
    mapping = regular_block_mapping(grid_size)
    return lambda cell_index: mapping[cell_index]


class PredefinedType(Enum):
    CLASSIC_9X9 = (9, regular_block_mapping(9))
    CLASSIC_6X6 = (6, regular_block_mapping(6))
    CLASSIC_4X4 = (4, regular_block_mapping(4))
    JIGSAW_1 = (9, (
        0, 0, 0, 1, 2, 2, 2, 2, 2,
        0, 0, 0, 1, 1, 1, 2, 2, 2,
        0, 3, 3, 3, 3, 1, 1, 1, 2,
        0, 0, 3, 4, 4, 4, 4, 1, 1,
        3, 3, 3, 3, 4, 5, 5, 5, 5,
        6, 6, 4, 4, 4, 4, 5, 7, 7,
        8, 6, 6, 6, 5, 5, 5, 5, 7,
        8, 8, 8, 6, 6, 6, 7, 7, 7,
        8, 8, 8, 8, 8, 6, 7, 7, 7,
    ))

    def __init__(self, grid_size: int, block_mapping: tuple[int, ...]):
        self.grid_size = grid_size
        self.block_mapping = block_mapping

    @property
    def grid_type(self) -> GridType:
        return GridType(self.grid_size, self.block_mapping)

    def block_function(self) -> BlockFunction:
        mapping = self.block_mapping
        return lambda cell_index: mapping[cell_index]
