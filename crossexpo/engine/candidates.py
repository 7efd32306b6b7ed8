"""Candidate discovery and ranking for words joining a non-empty grid."""

from __future__ import annotations

from typing import List, Set, Tuple

from ..core.constants import DISTANCE_PENALTY, INTERSECTION_WEIGHT, Direction
from ..core.models import Candidate
from .grid import CrosswordGrid


def find_candidates(grid: CrosswordGrid, word: str) -> List[Candidate]:
    """Enumerate every legal placement of ``word`` crossing the grid.

    Each occupied cell is tried as the landing spot of every matching letter
    of ``word``, in both directions. Duplicate origins are reported once, in
    first-found order.
    """

    candidates: List[Candidate] = []
    tried: Set[Tuple[int, int, Direction]] = set()
    for (row, col), cell in list(grid):
        for index, letter in enumerate(word):
            if letter != cell.letter:
                continue
            for direction in (Direction.ACROSS, Direction.DOWN):
                dr, dc = direction.step
                start_row, start_col = row - dr * index, col - dc * index
                key = (start_row, start_col, direction)
                if key in tried:
                    continue
                tried.add(key)
                intersections = grid.check_placement(word, start_row, start_col, direction)
                if not intersections:
                    continue
                candidates.append(
                    Candidate(
                        row=start_row,
                        col=start_col,
                        direction=direction,
                        intersections=intersections,
                    )
                )
    return candidates


def score_candidate(candidate: Candidate) -> float:
    """Crossings dominate; distance from the origin breaks near-ties."""

    score = INTERSECTION_WEIGHT * len(candidate.intersections)
    score -= DISTANCE_PENALTY * (abs(candidate.row) + abs(candidate.col))
    return score


def rank_candidates(candidates: List[Candidate]) -> List[Candidate]:
    """Return candidates best-first; equal scores keep discovery order."""

    return sorted(candidates, key=score_candidate, reverse=True)


__all__ = ["find_candidates", "rank_candidates", "score_candidate"]
