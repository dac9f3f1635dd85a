"""Chain techniques: Remote Pair and X-Chain."""

from __future__ import annotations

from ..bitsets import CellSet, ValueSet
from ..chains import Chain, LinkType
from ..hints import HintAggregator, SolvingTechnique
from .base import HintFinder


class ChainFinder(HintFinder):
    def _add_chain_elimination(self, grid, aggregator, end_cell, chain: Chain, excluded: ValueSet) -> CellSet | None:
        """Eliminate `excluded` from cells seeing both chain ends.

        Returns the chain's cell set when a hint was added.
        """
        chain_cells = chain.cell_set(grid)
        start_cell = grid.get_cell(chain.root.cell_index)
        affected = end_cell.peer_set & start_cell.peer_set
        affected.and_not(chain_cells)
        found = self.eliminate_values_from_cells(
            grid,
            aggregator,
            affected,
            excluded,
            matching_cells=chain_cells,
            matching_values=excluded,
            chain=chain,
        )
        return chain_cells if found else None


class RemotePairFinder(ChainFinder):
    """Chain of bi-value cells with the same pair; an even number of cells puts
    both values on the two ends, so common peers of the ends lose both."""

    technique = SolvingTechnique.REMOTE_PAIR

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        visited: set[CellSet] = set()
        for cell in grid.unassigned_cells():
            possible = cell.possible_values
            if possible.cardinality() != 2:
                continue
            first = possible.first_set_bit()
            second = possible.next_set_bit(first + 1)
            chain = Chain.start(cell.cell_index, first).add_link(LinkType.STRONG, cell.cell_index, second)
            self._find_chain(grid, aggregator, cell, chain, visited, 1)

    def _find_chain(self, grid, aggregator, current_cell, chain: Chain, visited: set, cell_count: int) -> None:
        # chains are found from both ends, report each cell set once
        if chain.cell_set(grid) in visited:
            return

        possible = current_cell.possible_values
        if cell_count >= 4 and cell_count % 2 == 0:
            found = self._add_chain_elimination(grid, aggregator, current_cell, chain, possible.copy())
            if found is not None:
                visited.add(found)

        for next_cell in current_cell.peers():
            if chain.contains(next_cell.cell_index):
                continue
            if next_cell.is_assigned or next_cell.possible_values != possible:
                continue
            linked = chain.last.candidate
            other = next(value for value in possible if value != linked)
            extended = chain.add_link(LinkType.WEAK, next_cell.cell_index, linked).add_link(
                LinkType.STRONG, next_cell.cell_index, other
            )
            self._find_chain(grid, aggregator, next_cell, extended, visited, cell_count + 1)


class XChainFinder(ChainFinder):
    """Single-value chain of alternating strong and weak links that starts and
    ends with a strong link; cells seeing both ends lose the value."""

    technique = SolvingTechnique.X_CHAIN

    def __init__(self, max_length: int = 12):
        self.max_length = max_length

    def find_hints(self, grid, aggregator: HintAggregator) -> None:
        visited: set[CellSet] = set()
        for cell in grid.unassigned_cells():
            for value in cell.possible_values:
                self._find_chain(grid, aggregator, cell, Chain.start(cell.cell_index, value), visited, 1)

    def _find_chain(self, grid, aggregator, current_cell, chain: Chain, visited: set, cell_count: int) -> None:
        if chain.cell_set(grid) in visited:
            return

        value = chain.last.candidate
        if cell_count >= 4 and chain.last_link_type is LinkType.STRONG:
            found = self._add_chain_elimination(grid, aggregator, current_cell, chain, ValueSet.of(grid, value))
            if found is not None:
                visited.add(found)

        if cell_count >= self.max_length:
            return

        last_link = chain.last_link_type
        next_link = last_link.opposite() if last_link is not None else LinkType.STRONG

        for house in current_cell.houses():
            positions = house.potential_positions(value)
            if positions.cardinality() <= 1:
                continue
            # a house with two positions is a strong link, which can also serve as a weak one
            if next_link is LinkType.STRONG and positions.cardinality() != 2:
                continue
            for next_cell in positions.all_cells(grid):
                if chain.contains(next_cell.cell_index):
                    continue
                extended = chain.add_link(next_link, next_cell.cell_index, value)
                self._find_chain(grid, aggregator, next_cell, extended, visited, cell_count + 1)
