# types_sudoku.py
from __future__ import annotations

from typing import Any, TypedDict

Grid = list[list[int]]
"""An N x N Sudoku grid as rows of integers (0 = empty)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..N)."""


class Explanation(TypedDict, total=False):
    why: str  # human-readable justification of the move
    units: list[str]  # houses involved, e.g. ['r1', 'b2']


class Move(TypedDict, total=False):
    """A single human-style solving action used by the tool API, CLI & UI layers."""

    index: int  # 1-based order in the sequence
    technique: str  # e.g., 'naked_single', 'hidden_single', 'locked_candidates_pointing'
    type: str  # 'placement' or 'elimination'
    digit: int  # the digit being placed, or the single digit eliminated
    cell: str  # for placements, target cell (e.g., 'r4c7')
    eliminate: list[str]  # for eliminations, list of cells losing candidates
    eliminations: dict[str, list[int]]  # for eliminations, digits removed per cell
    explanation: Explanation
    highlights: dict[str, Any]  # UI hints (cells/houses/chain) for overlay rendering
