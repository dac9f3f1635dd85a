"""Hints (placements and eliminations) and the aggregators that collect them."""

# hints.py
# A hint is an immutable record of one deduction:
# - DirectHint:   place `value` in one cell
# - IndirectHint: exclude a set of values from each of several cells
# - ChainHint:    an IndirectHint justified by a chain
# Equality covers grid type, technique and payload; `context` only feeds
# explanations.

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator

from types_sudoku import Move

from .chains import Chain
from .predefined import GridType

if TYPE_CHECKING:
    from .grid import Grid


class SolvingTechnique(Enum):
    # singles
    FULL_HOUSE = ("full_house", "Full House")
    NAKED_SINGLE = ("naked_single", "Naked Single")
    HIDDEN_SINGLE = ("hidden_single", "Hidden Single")
    # locked subsets
    LOCKED_PAIR = ("locked_pair", "Locked Pair")
    LOCKED_TRIPLE = ("locked_triple", "Locked Triple")
    # intersections
    LOCKED_CANDIDATES_TYPE_1 = ("locked_candidates_pointing", "Locked Candidates Type 1 (Pointing)")
    LOCKED_CANDIDATES_TYPE_2 = ("locked_candidates_claiming", "Locked Candidates Type 2 (Claiming)")
    # hidden subsets
    HIDDEN_PAIR = ("hidden_pair", "Hidden Pair")
    HIDDEN_TRIPLE = ("hidden_triple", "Hidden Triple")
    HIDDEN_QUADRUPLE = ("hidden_quadruple", "Hidden Quadruple")
    # naked subsets
    NAKED_PAIR = ("naked_pair", "Naked Pair")
    NAKED_TRIPLE = ("naked_triple", "Naked Triple")
    NAKED_QUADRUPLE = ("naked_quadruple", "Naked Quadruple")
    # basic fish
    X_WING = ("x_wing", "X-Wing")
    SWORDFISH = ("swordfish", "Swordfish")
    JELLYFISH = ("jellyfish", "Jellyfish")
    # single digit patterns
    SKYSCRAPER = ("skyscraper", "Skyscraper")
    TWO_STRING_KITE = ("two_string_kite", "2-String Kite")
    # chains
    REMOTE_PAIR = ("remote_pair", "Remote Pair")
    X_CHAIN = ("x_chain", "X-Chain")

    def __init__(self, key: str, display_name: str):
        self.key = key
        self.display_name = display_name

    @classmethod
    def from_key(cls, key: str) -> SolvingTechnique:
        for technique in cls:
            if technique.key == key:
                return technique
        raise ValueError(f"unknown solving technique '{key}'")


@dataclass(frozen=True)
class HintContext:
    """Pattern that justified a hint: the matching cells / values and the houses involved."""

    matching_cells: tuple[int, ...] = ()
    matching_values: tuple[int, ...] = ()
    related_cells: tuple[int, ...] = ()
    houses: tuple[str, ...] = ()


class HintAggregatorExhausted(Exception):
    """Raised by SingleHintAggregator once it holds a hint; ends the finder round."""


@dataclass(frozen=True)
class Hint(ABC):
    grid_type: GridType
    technique: SolvingTechnique

    @property
    @abstractmethod
    def description(self) -> str:
        ...

    @abstractmethod
    def apply(self, grid: Grid, update_grid: bool = True) -> None:
        ...

    @abstractmethod
    def revert(self, grid: Grid, update_grid: bool = True) -> None:
        ...

    @abstractmethod
    def as_move(self) -> Move:
        ...

    def _cell_name(self, cell_index: int) -> str:
        return self.grid_type.cell_name(cell_index)

    def __str__(self) -> str:
        return f"{self.technique.display_name}: {self.description}"


@dataclass(frozen=True)
class DirectHint(Hint):
    cell_index: int
    value: int
    context: HintContext | None = field(default=None, compare=False, repr=False)

    @property
    def cell_name(self) -> str:
        return self._cell_name(self.cell_index)

    @property
    def description(self) -> str:
        return f"{self.cell_name}={self.value}"

    def apply(self, grid: Grid, update_grid: bool = True) -> None:
        grid.get_cell(self.cell_index).set_value(self.value, update_grid)

    def revert(self, grid: Grid, update_grid: bool = True) -> None:
        grid.get_cell(self.cell_index).set_value(0, update_grid)

    def as_move(self) -> Move:
        houses = list(self.context.houses) if self.context else []
        where = f" in {houses[0]}" if houses else ""
        return {
            "technique": self.technique.key,
            "type": "placement",
            "cell": self.cell_name,
            "digit": self.value,
            "explanation": {
                "why": f"{self.technique.display_name}{where}: {self.value} goes to {self.cell_name}.",
                "units": houses,
            },
            "highlights": {"cells": [self.cell_name], "houses": houses},
        }


@dataclass(frozen=True)
class IndirectHint(Hint):
    cell_indices: tuple[int, ...]
    excluded_values: tuple[tuple[int, ...], ...]
    context: HintContext | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.cell_indices) != len(self.excluded_values):
            raise ValueError("one set of excluded values is needed per cell")

    def eliminations(self) -> Iterator[tuple[int, tuple[int, ...]]]:
        return zip(self.cell_indices, self.excluded_values)

    def eliminations_by_name(self) -> dict[str, list[int]]:
        return {self._cell_name(index): list(values) for index, values in self.eliminations()}

    def _elimination_text(self) -> str:
        return ", ".join(
            f"{self._cell_name(index)}<>{list(values)}" for index, values in self.eliminations()
        )

    @property
    def description(self) -> str:
        text = self._elimination_text()
        if self.context and self.context.matching_cells:
            values = "/".join(str(v) for v in self.context.matching_values)
            cells = ", ".join(self._cell_name(i) for i in self.context.matching_cells)
            return f"{values} in {cells} => {text}"
        return f"=> {text}"

    def apply(self, grid: Grid, update_grid: bool = True) -> None:
        for cell_index, values in self.eliminations():
            grid.get_cell(cell_index).exclude_possible_values(values, update_grid)

    def revert(self, grid: Grid, update_grid: bool = True) -> None:
        for cell_index, values in self.eliminations():
            grid.get_cell(cell_index).remove_excluded_possible_values(values, update_grid)

    def as_move(self) -> Move:
        eliminations = self.eliminations_by_name()
        digits = sorted({value for values in self.excluded_values for value in values})
        context = self.context or HintContext()
        move: Move = {
            "technique": self.technique.key,
            "type": "elimination",
            "eliminate": list(eliminations),
            "eliminations": eliminations,
            "explanation": {
                "why": f"{self.technique.display_name}: {self.description}",
                "units": list(context.houses),
            },
            "highlights": {
                "cells": [self._cell_name(i) for i in context.matching_cells],
                "houses": list(context.houses),
            },
        }
        if len(digits) == 1:
            move["digit"] = digits[0]
        return move


@dataclass(frozen=True)
class ChainHint(IndirectHint):
    chain: Chain | None = None

    @property
    def description(self) -> str:
        if self.chain is None:
            return super().description
        return f"{self.chain.to_string(self.grid_type)} => {self._elimination_text()}"

    def as_move(self) -> Move:
        move = super().as_move()
        if self.chain is not None:
            move["highlights"]["chain"] = [
                {"cell": self._cell_name(node.cell_index), "digit": node.candidate} for node in self.chain.nodes
            ]
        return move


class HintAggregator:
    """Insertion-ordered, deduplicating collection of hints."""

    def __init__(self) -> None:
        self._hints: dict[Hint, None] = {}

    @property
    def hints(self) -> list[Hint]:
        return list(self._hints)

    def add_hint(self, hint: Hint) -> None:
        self._hints.setdefault(hint, None)

    def extend(self, hints: Any) -> None:
        for hint in hints:
            self.add_hint(hint)

    def apply_hints(self, grid: Grid) -> None:
        """Apply every hint without incremental updates, then recompute once."""
        with grid.mutation(grid.update_state):
            for hint in self._hints:
                hint.apply(grid, False)

    def first(self) -> Hint | None:
        return next(iter(self._hints), None)

    def __iter__(self) -> Iterator[Hint]:
        return iter(self._hints)

    def __len__(self) -> int:
        return len(self._hints)

    def __bool__(self) -> bool:
        return bool(self._hints)

    def __contains__(self, hint: object) -> bool:
        return hint in self._hints

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[str(hint) for hint in self._hints]})"


class SingleHintAggregator(HintAggregator):
    """Keeps the first hint only, then signals that the round is over."""

    def add_hint(self, hint: Hint) -> None:
        if not self._hints:
            self._hints[hint] = None
        raise HintAggregatorExhausted()
