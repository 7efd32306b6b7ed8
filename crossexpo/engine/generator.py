"""Main crossword generator orchestration.

Greedy placement with randomized restarts:
  1. Attempt 0 places words longest-first, always taking the best candidate.
  2. Later attempts shuffle the order and pick among the top candidates.
The attempt placing the most words wins and is numbered.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ..core.constants import DEFAULT_MAX_ATTEMPTS, TOP_CANDIDATES, Direction
from ..core.models import Bounds, Cell, NormalizedEntry, PlacedWord
from ..data.normalization import RawEntry, normalize_entries, trimmed_words
from ..utils.logger import get_logger
from .candidates import find_candidates, rank_candidates
from .grid import CrosswordGrid
from .numbering import assign_numbers
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None
    top_candidates: int = TOP_CANDIDATES
    validate: bool = True

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")
        if self.top_candidates < 1:
            raise ValueError(f"top_candidates must be positive, got {self.top_candidates}")


@dataclass
class AttemptResult:
    """Outcome of one placement pass over a fresh grid."""

    placed: List[PlacedWord]
    unplaced: List[str]
    grid: CrosswordGrid

    @property
    def placed_count(self) -> int:
        return len(self.placed)


@dataclass
class CrosswordResult:
    words: List[PlacedWord] = field(default_factory=list)
    grid: CrosswordGrid = field(default_factory=CrosswordGrid)
    bounds: Bounds = field(default_factory=Bounds)
    unplaced_words: List[str] = field(default_factory=list)
    attempts: int = 0
    seed: Optional[int] = None

    def to_dense(self) -> List[List[Optional[Cell]]]:
        return to_dense(self)

    def words_in(self, direction: Direction) -> List[PlacedWord]:
        """Words running in ``direction``, ordered by clue number."""
        return sorted(
            (word for word in self.words if word.direction == direction),
            key=lambda word: word.number,
        )

    def to_jsonable(self) -> dict:
        return {
            "words": [
                {
                    "word": word.word,
                    "label": word.label,
                    "clue": word.clue,
                    "row": word.row,
                    "col": word.col,
                    "direction": word.direction.value,
                    "number": word.number,
                }
                for word in self.words
            ],
            "cells": self.grid.to_jsonable(),
            "bounds": {
                "min_row": self.bounds.min_row,
                "min_col": self.bounds.min_col,
                "max_row": self.bounds.max_row,
                "max_col": self.bounds.max_col,
                "width": self.bounds.width,
                "height": self.bounds.height,
            },
            "unplaced_words": list(self.unplaced_words),
            "attempts": self.attempts,
            "seed": self.seed,
        }


class CrosswordGenerator:
    """Arrange as many entries as possible into one connected crossword."""

    def __init__(self, config: Optional[GeneratorConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.validator = GridValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, entries: Iterable[RawEntry]) -> CrosswordResult:
        raw_entries = list(entries)
        normalized = normalize_entries(raw_entries)
        if not normalized:
            LOGGER.info("No usable entries among %s inputs", len(raw_entries))
            return CrosswordResult(unplaced_words=trimmed_words(raw_entries), seed=self.config.seed)

        ordered = sorted(normalized, key=lambda entry: len(entry.word), reverse=True)
        best = self._logged_attempt(ordered, 0)
        attempts_used = 1
        for attempt in range(1, self.config.max_attempts):
            if not best.unplaced:
                break
            attempts_used = attempt + 1
            outcome = self._logged_attempt(self._shuffled(ordered), attempt)
            if outcome.placed_count > best.placed_count:
                best = outcome

        assign_numbers(best.placed, best.grid)
        result = CrosswordResult(
            words=best.placed,
            grid=best.grid,
            bounds=best.grid.bounds(),
            unplaced_words=best.unplaced,
            attempts=attempts_used,
            seed=self.config.seed,
        )
        LOGGER.info(
            "Placed %s/%s words after %s attempt(s)",
            len(result.words),
            len(normalized),
            attempts_used,
        )
        if self.config.validate:
            validation = self.validator.validate(result)
            for message in validation.messages:
                LOGGER.error("Layout check failed: %s", message)
        return result

    # ------------------------------------------------------------------
    # Single attempt
    # ------------------------------------------------------------------
    def run_attempt(self, ordering: Sequence[NormalizedEntry], attempt: int = 0) -> AttemptResult:
        """Place ``ordering`` greedily into a fresh grid.

        The first word goes to the origin in a random direction. Each later
        word takes the best-scoring candidate on attempt 0 and a random one of
        the top candidates afterwards; words without any candidate are skipped.
        """

        grid = CrosswordGrid()
        placed: List[PlacedWord] = []
        unplaced: List[str] = []

        for entry in ordering:
            if grid.is_empty:
                direction = Direction.ACROSS if self.rng.random() < 0.5 else Direction.DOWN
                grid.place_word(entry.word, 0, 0, direction)
                placed.append(self._placed(entry, 0, 0, direction))
                continue

            candidates = find_candidates(grid, entry.word)
            if not candidates:
                unplaced.append(entry.label)
                continue

            ranked = rank_candidates(candidates)
            pick = ranked[0]
            if attempt > 0 and len(ranked) > 1:
                pick = self.rng.choice(ranked[: self.config.top_candidates])

            grid.place_word(entry.word, pick.row, pick.col, pick.direction)
            placed.append(self._placed(entry, pick.row, pick.col, pick.direction))

        return AttemptResult(placed=placed, unplaced=unplaced, grid=grid)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _logged_attempt(self, ordering: Sequence[NormalizedEntry], attempt: int) -> AttemptResult:
        outcome = self.run_attempt(ordering, attempt)
        LOGGER.debug(
            "Attempt %s/%s placed %s/%s words",
            attempt + 1,
            self.config.max_attempts,
            outcome.placed_count,
            len(ordering),
        )
        return outcome

    def _shuffled(self, entries: Sequence[NormalizedEntry]) -> List[NormalizedEntry]:
        shuffled = list(entries)
        self.rng.shuffle(shuffled)
        return shuffled

    @staticmethod
    def _placed(entry: NormalizedEntry, row: int, col: int, direction: Direction) -> PlacedWord:
        return PlacedWord(
            word=entry.word,
            label=entry.label,
            clue=entry.clue,
            row=row,
            col=col,
            direction=direction,
        )


def generate_crossword(
    entries: Iterable[RawEntry],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> CrosswordResult:
    """Functional wrapper around :class:`CrosswordGenerator`."""

    config = GeneratorConfig(max_attempts=max_attempts, seed=seed)
    return CrosswordGenerator(config, rng=rng).generate(entries)


def to_dense(result: CrosswordResult) -> List[List[Optional[Cell]]]:
    """Row-major projection of the result's bounds; ``None`` marks empty squares."""

    return result.grid.to_dense(result.bounds)
