"""Registry of hint finders keyed by technique, in evaluation order."""

from __future__ import annotations

from typing import Callable, Iterable

from ..hints import SolvingTechnique
from .base import HintFinder
from .chains import RemotePairFinder, XChainFinder
from .fish import JellyfishFinder, SwordfishFinder, XWingFinder
from .hidden_subsets import HiddenPairFinder, HiddenQuadrupleFinder, HiddenTripleFinder
from .intersections import LockedCandidatesType1Finder, LockedCandidatesType2Finder
from .naked_subsets import (
    LockedPairFinder,
    LockedTripleFinder,
    NakedPairFinder,
    NakedQuadrupleFinder,
    NakedTripleFinder,
)
from .single_digit import SkyscraperFinder, TwoStringKiteFinder
from .singles import FullHouseFinder, HiddenSingleFinder, NakedSingleFinder

FinderFactory = Callable[[], HintFinder]

# cheapest / most certain first
DEFAULT_FINDERS: list[tuple[SolvingTechnique, FinderFactory]] = [
    (SolvingTechnique.FULL_HOUSE, FullHouseFinder),
    (SolvingTechnique.NAKED_SINGLE, NakedSingleFinder),
    (SolvingTechnique.HIDDEN_SINGLE, HiddenSingleFinder),
    (SolvingTechnique.LOCKED_PAIR, LockedPairFinder),
    (SolvingTechnique.LOCKED_TRIPLE, LockedTripleFinder),
    (SolvingTechnique.LOCKED_CANDIDATES_TYPE_1, LockedCandidatesType1Finder),
    (SolvingTechnique.LOCKED_CANDIDATES_TYPE_2, LockedCandidatesType2Finder),
    (SolvingTechnique.HIDDEN_PAIR, HiddenPairFinder),
    (SolvingTechnique.HIDDEN_TRIPLE, HiddenTripleFinder),
    (SolvingTechnique.HIDDEN_QUADRUPLE, HiddenQuadrupleFinder),
    (SolvingTechnique.NAKED_PAIR, NakedPairFinder),
    (SolvingTechnique.NAKED_TRIPLE, NakedTripleFinder),
    (SolvingTechnique.NAKED_QUADRUPLE, NakedQuadrupleFinder),
    (SolvingTechnique.X_WING, XWingFinder),
    (SolvingTechnique.SWORDFISH, SwordfishFinder),
    (SolvingTechnique.JELLYFISH, JellyfishFinder),
    (SolvingTechnique.SKYSCRAPER, SkyscraperFinder),
    (SolvingTechnique.TWO_STRING_KITE, TwoStringKiteFinder),
    (SolvingTechnique.REMOTE_PAIR, RemotePairFinder),
    (SolvingTechnique.X_CHAIN, XChainFinder),
]


class FinderRegistry:
    """Technique -> finder factory; insertion order is the evaluation order."""

    def __init__(self) -> None:
        self._factories: dict[SolvingTechnique, FinderFactory] = {}

    def register(self, technique: SolvingTechnique, factory: FinderFactory) -> None:
        self._factories[technique] = factory

    def techniques(self) -> list[SolvingTechnique]:
        return list(self._factories)

    def keys(self) -> list[str]:
        return [technique.key for technique in self._factories]

    def create(self, technique: SolvingTechnique | str) -> HintFinder:
        if isinstance(technique, str):
            technique = SolvingTechnique.from_key(technique)
        try:
            factory = self._factories[technique]
        except KeyError:
            raise ValueError(f"no finder registered for '{technique.key}'") from None
        return factory()

    def finders(self, techniques: Iterable[SolvingTechnique | str] | None = None) -> list[HintFinder]:
        """Fresh finder instances, in registry order or in the order given."""
        if techniques is None:
            return [factory() for factory in self._factories.values()]
        return [self.create(technique) for technique in techniques]

    def __contains__(self, technique: object) -> bool:
        return technique in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def default_registry() -> FinderRegistry:
    registry = FinderRegistry()
    for technique, factory in DEFAULT_FINDERS:
        registry.register(technique, factory)
    return registry
