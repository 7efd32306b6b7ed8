"""Data models supporting the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Direction

Coord = Tuple[int, int]


@dataclass(frozen=True)
class NormalizedEntry:
    """A cleaned input entry ready for placement."""

    word: str
    label: str
    clue: str = ""


@dataclass
class Cell:
    """An occupied grid position."""

    letter: str
    number: Optional[int] = None


@dataclass
class Candidate:
    """A validated, not yet committed placement of a word."""

    row: int
    col: int
    direction: Direction
    intersections: List[int] = field(default_factory=list)

    @property
    def origin(self) -> Coord:
        return self.row, self.col


@dataclass
class PlacedWord:
    """A word committed to the grid of one attempt."""

    word: str
    label: str
    clue: str
    row: int
    col: int
    direction: Direction
    number: int = 0

    @property
    def origin(self) -> Coord:
        return self.row, self.col

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Coord]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(len(self.word))]


@dataclass(frozen=True)
class Bounds:
    """Bounding rectangle of the occupied region, inclusive on both ends."""

    min_row: int = 0
    min_col: int = 0
    max_row: int = 0
    max_col: int = 0
    width: int = 0
    height: int = 0

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, row: int, col: int) -> bool:
        if self.is_empty:
            return False
        return self.min_row <= row <= self.max_row and self.min_col <= col <= self.max_col
