"""Alternating strong / weak link chains used by the chain techniques."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .bitsets import CellSet

if TYPE_CHECKING:
    from .grid import Grid
    from .predefined import GridType


class LinkType(Enum):
    WEAK = "->"
    STRONG = "=>"

    @property
    def symbol(self) -> str:
        return self.value

    def opposite(self) -> LinkType:
        return LinkType.STRONG if self is LinkType.WEAK else LinkType.WEAK


@dataclass(frozen=True)
class ChainNode:
    cell_index: int
    candidate: int


@dataclass(frozen=True)
class Chain:
    """Immutable chain; add_link returns an extended copy.

    links[i] connects nodes[i] and nodes[i + 1].
    """

    nodes: tuple[ChainNode, ...]
    links: tuple[LinkType, ...] = ()

    @classmethod
    def start(cls, cell_index: int, candidate: int) -> Chain:
        return cls((ChainNode(cell_index, candidate),))

    def add_link(self, link_type: LinkType, cell_index: int, candidate: int) -> Chain:
        return Chain(self.nodes + (ChainNode(cell_index, candidate),), self.links + (link_type,))

    @property
    def root(self) -> ChainNode:
        return self.nodes[0]

    @property
    def last(self) -> ChainNode:
        return self.nodes[-1]

    @property
    def last_link_type(self) -> LinkType | None:
        return self.links[-1] if self.links else None

    @property
    def length(self) -> int:
        return len(self.nodes)

    def cell_indices(self) -> frozenset[int]:
        return frozenset(node.cell_index for node in self.nodes)

    def contains(self, cell_index: int) -> bool:
        return any(node.cell_index == cell_index for node in self.nodes)

    def cell_set(self, grid: Grid) -> CellSet:
        return CellSet.of(grid, *self.cell_indices())

    def to_string(self, grid_type: GridType) -> str:
        parts = [f"{grid_type.cell_name(self.root.cell_index)}={self.root.candidate}"]
        for link, node in zip(self.links, self.nodes[1:]):
            parts.append(f"{link.symbol} {grid_type.cell_name(node.cell_index)}={node.candidate}")
        return " ".join(parts)
