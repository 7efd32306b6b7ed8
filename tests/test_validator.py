import unittest

from crossexpo.core.constants import Direction
from crossexpo.core.exceptions import ValidationError
from crossexpo.core.models import PlacedWord
from crossexpo.engine.generator import CrosswordResult, generate_crossword
from crossexpo.engine.grid import CrosswordGrid
from crossexpo.engine.numbering import assign_numbers
from crossexpo.engine.validator import GridValidator


def _result(*words: PlacedWord) -> CrosswordResult:
    grid = CrosswordGrid()
    for word in words:
        grid.place_word(word.word, word.row, word.col, word.direction)
    assign_numbers(words, grid)
    return CrosswordResult(words=list(words), grid=grid, bounds=grid.bounds())


def _word(word: str, row: int, col: int, direction: Direction) -> PlacedWord:
    return PlacedWord(word=word, label=word, clue="", row=row, col=col, direction=direction)


class GridValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = GridValidator()

    def test_generated_crossword_is_valid(self) -> None:
        result = generate_crossword([("RAT", ""), ("CAR", ""), ("TAR", "")], 10, seed=5)
        self.assertTrue(self.validator.validate(result).ok)

    def test_empty_result_is_valid(self) -> None:
        self.assertTrue(self.validator.validate(CrosswordResult()).ok)

    def test_letter_conflict_is_reported(self) -> None:
        result = _result(_word("CAT", 0, 0, Direction.ACROSS), _word("ODE", 0, 1, Direction.DOWN))
        validation = self.validator.validate(result)
        self.assertFalse(validation.ok)
        self.assertTrue(any("expects 'O'" in message for message in validation.messages))

    def test_words_touching_end_to_end_are_reported(self) -> None:
        result = _result(_word("CAT", 0, 0, Direction.ACROSS), _word("SO", 0, 3, Direction.ACROSS))
        messages = self.validator.validate(result).messages
        self.assertTrue(any("after its end" in message for message in messages))
        self.assertTrue(any("before its start" in message for message in messages))

    def test_side_by_side_words_are_reported(self) -> None:
        result = _result(_word("CAT", 0, 0, Direction.ACROSS), _word("DOG", 1, 0, Direction.ACROSS))
        messages = self.validator.validate(result).messages
        self.assertTrue(any("side neighbour" in message for message in messages))

    def test_bad_numbering_is_reported(self) -> None:
        result = _result(_word("CAT", 0, 0, Direction.ACROSS), _word("ACE", 0, 1, Direction.DOWN))
        result.words[1].number = 5
        messages = self.validator.validate(result).messages
        self.assertTrue(any("expected 2" in message for message in messages))

    def test_ensure_valid_raises(self) -> None:
        result = _result(_word("CAT", 0, 0, Direction.ACROSS), _word("DOG", 1, 0, Direction.ACROSS))
        with self.assertRaises(ValidationError):
            self.validator.ensure_valid(result)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
