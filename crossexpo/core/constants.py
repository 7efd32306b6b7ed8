"""Shared constants and enumerations for the crossword generator."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        """Row/column delta of one letter along the word."""
        return STEPS[self]

    @property
    def perpendicular(self) -> Tuple[int, int]:
        """Row/column delta pointing to a side neighbour of a letter."""
        dr, dc = STEPS[self]
        return dc, dr


STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.ACROSS: (0, 1),
    Direction.DOWN: (1, 0),
}

DEFAULT_MAX_ATTEMPTS = 50
TOP_CANDIDATES = 3
MIN_WORD_LENGTH = 2

INTERSECTION_WEIGHT = 100.0
DISTANCE_PENALTY = 0.1
