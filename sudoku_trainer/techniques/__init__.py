"""Hint finders, one class per solving technique."""

from .base import HintFinder
from .chains import RemotePairFinder, XChainFinder
from .fish import BasicFishFinder, JellyfishFinder, SwordfishFinder, XWingFinder
from .hidden_subsets import HiddenPairFinder, HiddenQuadrupleFinder, HiddenSubsetFinder, HiddenTripleFinder
from .intersections import LockedCandidatesType1Finder, LockedCandidatesType2Finder
from .naked_subsets import (
    LockedPairFinder,
    LockedTripleFinder,
    NakedPairFinder,
    NakedQuadrupleFinder,
    NakedSubsetFinder,
    NakedTripleFinder,
)
from .registry import DEFAULT_FINDERS, FinderRegistry, default_registry
from .single_digit import SkyscraperFinder, TwoStringKiteFinder
from .singles import FullHouseFinder, HiddenSingleFinder, NakedSingleFinder

__all__ = [
    "HintFinder",
    "FullHouseFinder",
    "NakedSingleFinder",
    "HiddenSingleFinder",
    "LockedPairFinder",
    "LockedTripleFinder",
    "LockedCandidatesType1Finder",
    "LockedCandidatesType2Finder",
    "HiddenPairFinder",
    "HiddenSubsetFinder",
    "HiddenTripleFinder",
    "HiddenQuadrupleFinder",
    "NakedSubsetFinder",
    "NakedPairFinder",
    "NakedTripleFinder",
    "NakedQuadrupleFinder",
    "BasicFishFinder",
    "XWingFinder",
    "SwordfishFinder",
    "JellyfishFinder",
    "SkyscraperFinder",
    "TwoStringKiteFinder",
    "RemotePairFinder",
    "XChainFinder",
    "DEFAULT_FINDERS",
    "FinderRegistry",
    "default_registry",
]
