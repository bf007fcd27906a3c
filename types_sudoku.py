# types_sudoku.py
from __future__ import annotations

from typing import Literal, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

CandidateGrid = list[list[set[int]]]
"""Per-cell candidate sets; filled cells hold an empty set."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""

Technique = Literal[
    "Naked Single",
    "Hidden Single (Row)",
    "Hidden Single (Column)",
    "Hidden Single (Box)",
    "Process of Elimination",
]


class Hint(TypedDict):
    """One suggested placement with a human-readable justification."""

    row: int  # 0-based
    col: int  # 0-based
    number: int
    technique: Technique
    explanation: str


class GameState(TypedDict, total=False):
    """Snapshot handed to the hint engine by the game controller."""

    puzzle: Grid
    userEntries: Grid  # 0 where the player has not written anything
    official: list[list[bool]]  # True for given clues
    solution: Grid


class PuzzleResult(TypedDict):
    puzzle: Grid
    solution: Grid
