"""Reading-order clue numbering."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Sequence

from ..core.models import Coord, PlacedWord
from .grid import CrosswordGrid


def assign_numbers(words: Sequence[PlacedWord], grid: CrosswordGrid) -> int:
    """Number word origins top-to-bottom, then left-to-right.

    Words starting on the same cell (one across, one down) share a number,
    which is also stamped on that cell. Returns the highest number used.
    """

    starts: Dict[Coord, List[PlacedWord]] = defaultdict(list)
    for word in words:
        starts[word.origin].append(word)

    number = 0
    for origin in sorted(starts):
        number += 1
        for word in starts[origin]:
            word.number = number
        cell = grid.cell(*origin)
        if cell is not None:
            cell.number = number
    return number
