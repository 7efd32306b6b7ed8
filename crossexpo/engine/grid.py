"""Sparse grid representation and placement helpers."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from ..core.constants import Direction
from ..core.models import Bounds, Cell, Coord
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class CrosswordGrid:
    """Unbounded coordinate -> cell mapping owned by one search attempt.

    Coordinates are ``(row, col)`` pairs and may be negative. A letter, once
    written, is never overwritten; later words may only cross it.
    """

    def __init__(self) -> None:
        self.cells: Dict[Coord, Cell] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self.cells

    def __iter__(self) -> Iterator[Tuple[Coord, Cell]]:
        return iter(self.cells.items())

    @property
    def is_empty(self) -> bool:
        return not self.cells

    def cell(self, row: int, col: int) -> Optional[Cell]:
        return self.cells.get((row, col))

    def is_occupied(self, row: int, col: int) -> bool:
        return (row, col) in self.cells

    def letter(self, row: int, col: int) -> Optional[str]:
        cell = self.cells.get((row, col))
        return cell.letter if cell else None

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def check_placement(
        self, word: str, row: int, col: int, direction: Direction
    ) -> Optional[List[int]]:
        """Return the indices of ``word`` that cross existing letters.

        ``None`` means the word cannot go there: it would touch a word at
        either end, clash with a different letter, run along an existing
        parallel word, or sit flush against a parallel letter at a position
        that is not a crossing. An empty list means the span is legal but
        crosses nothing.
        """

        dr, dc = direction.step
        pr, pc = direction.perpendicular
        length = len(word)

        if self.is_occupied(row - dr, col - dc):
            return None
        if self.is_occupied(row + dr * length, col + dc * length):
            return None

        intersections: List[int] = []
        for index, letter in enumerate(word):
            r, c = row + dr * index, col + dc * index
            existing = self.cells.get((r, c))
            if existing is not None:
                if existing.letter != letter:
                    return None
                if intersections and intersections[-1] == index - 1:
                    # two letters in a row belong to a parallel word
                    return None
                intersections.append(index)
            elif self.is_occupied(r + pr, c + pc) or self.is_occupied(r - pr, c - pc):
                return None
        return intersections

    def place_word(self, word: str, row: int, col: int, direction: Direction) -> int:
        """Write ``word`` into the grid and return the number of new cells.

        Existing cells are left untouched; callers validate the span with
        :meth:`check_placement` first.
        """

        dr, dc = direction.step
        created = 0
        for index, letter in enumerate(word):
            coord = (row + dr * index, col + dc * index)
            if coord not in self.cells:
                self.cells[coord] = Cell(letter=letter)
                created += 1
        LOGGER.debug(
            "Placed %s at (%s,%s) %s, %s new cells", word, row, col, direction.value, created
        )
        return created

    # ------------------------------------------------------------------
    # Bounds & projection
    # ------------------------------------------------------------------
    def bounds(self) -> Bounds:
        """Bounding box of every occupied coordinate; all zeros when empty."""

        if not self.cells:
            return Bounds()
        rows = [row for row, _ in self.cells]
        cols = [col for _, col in self.cells]
        min_row, max_row = min(rows), max(rows)
        min_col, max_col = min(cols), max(cols)
        return Bounds(
            min_row=min_row,
            min_col=min_col,
            max_row=max_row,
            max_col=max_col,
            width=max_col - min_col + 1,
            height=max_row - min_row + 1,
        )

    def to_dense(self, bounds: Optional[Bounds] = None) -> List[List[Optional[Cell]]]:
        """Row-major view of ``bounds``; positions without a cell are ``None``."""

        if bounds is None:
            bounds = self.bounds()
        return [
            [
                self.cells.get((bounds.min_row + r, bounds.min_col + c))
                for c in range(bounds.width)
            ]
            for r in range(bounds.height)
        ]

    def to_jsonable(self) -> List[dict]:
        return [
            {"row": row, "col": col, "letter": cell.letter, "number": cell.number}
            for (row, col), cell in sorted(self.cells.items())
        ]
