"""Deterministic rule validation for generated crosswords."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List

from ..core.exceptions import ValidationError
from ..core.models import Coord, PlacedWord
from ..utils.logger import get_logger
from .grid import CrosswordGrid

if TYPE_CHECKING:
    from .generator import CrosswordResult


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)


class GridValidator:
    """Checks the layout rules every finished crossword must satisfy."""

    def validate(self, result: "CrosswordResult") -> ValidationResult:
        messages: List[str] = []
        messages.extend(self._check_letters(result.grid, result.words))
        messages.extend(self._check_word_ends(result.grid, result.words))
        messages.extend(self._check_side_contacts(result.grid, result.words))
        messages.extend(self._check_numbering(result.words))
        messages.extend(self._check_bounds(result))
        return ValidationResult(ok=not messages, messages=messages)

    def ensure_valid(self, result: "CrosswordResult") -> None:
        validation = self.validate(result)
        if not validation.ok:
            LOGGER.error("Validation failed: %s", validation.messages)
            raise ValidationError(f"Grid validation failed: {validation.messages}")

    @staticmethod
    def _check_letters(grid: CrosswordGrid, words: List[PlacedWord]) -> List[str]:
        messages = []
        for word in words:
            for (row, col), letter in zip(word.cells, word.word):
                found = grid.letter(row, col)
                if found != letter:
                    messages.append(
                        f"{word.word} expects '{letter}' at ({row},{col}), grid has {found!r}"
                    )
        return messages

    @staticmethod
    def _check_word_ends(grid: CrosswordGrid, words: List[PlacedWord]) -> List[str]:
        messages = []
        for word in words:
            dr, dc = word.direction.step
            if grid.is_occupied(word.row - dr, word.col - dc):
                messages.append(f"{word.word} at {word.origin} touches a letter before its start")
            end_row = word.row + dr * word.length
            end_col = word.col + dc * word.length
            if grid.is_occupied(end_row, end_col):
                messages.append(f"{word.word} at {word.origin} touches a letter after its end")
        return messages

    @staticmethod
    def _check_side_contacts(grid: CrosswordGrid, words: List[PlacedWord]) -> List[str]:
        usage: Counter = Counter(coord for word in words for coord in word.cells)
        messages = []
        for word in words:
            pr, pc = word.direction.perpendicular
            for row, col in word.cells:
                if usage[(row, col)] > 1:
                    continue
                if grid.is_occupied(row + pr, col + pc) or grid.is_occupied(row - pr, col - pc):
                    messages.append(
                        f"{word.word} has an unchecked side neighbour at ({row},{col})"
                    )
        return messages

    @staticmethod
    def _check_numbering(words: List[PlacedWord]) -> List[str]:
        numbers: Dict[Coord, int] = {}
        messages = []
        for word in words:
            known = numbers.setdefault(word.origin, word.number)
            if known != word.number:
                messages.append(f"Words starting at {word.origin} carry numbers {known} and {word.number}")
        expected = 1
        for origin in sorted(numbers):
            if numbers[origin] != expected:
                messages.append(
                    f"Origin {origin} numbered {numbers[origin]}, expected {expected}"
                )
            expected += 1
        return messages

    @staticmethod
    def _check_bounds(result: "CrosswordResult") -> List[str]:
        messages = []
        bounds = result.bounds
        dense = result.to_dense()
        if len(dense) != bounds.height or any(len(row) != bounds.width for row in dense):
            messages.append(
                f"Projection shape does not match bounds {bounds.width}x{bounds.height}"
            )
        outside = [coord for coord, _ in result.grid if not bounds.contains(*coord)]
        if outside:
            messages.append(f"{len(outside)} occupied cell(s) fall outside the bounds")
        return messages
