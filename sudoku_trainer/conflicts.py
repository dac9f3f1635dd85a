"""Conflict detection: groups of assigned cells that see each other and share a value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .bitsets import CellSet

if TYPE_CHECKING:
    from .grid import Cell, Grid


@dataclass(frozen=True)
class Conflict:
    grid: Grid
    cells: CellSet

    def __post_init__(self) -> None:
        if self.cells.cardinality() < 2:
            raise ValueError("a conflict needs at least 2 cells")

    @property
    def value(self) -> int:
        return self.grid.get_cell(self.cells.first_set_bit()).value

    def cell_list(self) -> list[Cell]:
        return self.cells.to_cell_list(self.grid)

    def cell_names(self) -> list[str]:
        return [cell.name for cell in self.cell_list()]

    def __contains__(self, cell: Cell) -> bool:
        return cell.cell_index in self.cells

    def __str__(self) -> str:
        return " = ".join([*self.cell_names(), str(self.value)])


def find_conflicts(grid: Grid) -> list[Conflict]:
    """Every distinct group of mutually visible cells holding the same value.

    Reads cell values only, so it works while the cache is invalid.
    """
    found: set[CellSet] = set()
    conflicts: list[Conflict] = []
    for cell in grid.assigned_cells():
        value = cell.value
        clashing = CellSet.of_cells(
            grid, cell.peer_set.filtered_cells(grid, lambda peer: peer.value == value)
        )
        if not clashing:
            continue
        clashing.set(cell.cell_index)
        if clashing in found:
            continue
        found.add(clashing)
        conflicts.append(Conflict(grid, clashing))
    return conflicts
