import unittest

from crossexpo.data.normalization import clean_word, normalize_entries, trimmed_words
from crossexpo.io.wordlist import WordEntry


class CleanWordTests(unittest.TestCase):
    def test_uppercases_and_strips_punctuation(self) -> None:
        self.assertEqual(clean_word("rock'n roll"), "ROCKNROLL")

    def test_keeps_digits_and_other_alphabets(self) -> None:
        self.assertEqual(clean_word("r2-d2"), "R2D2")
        self.assertEqual(clean_word("Солнце!"), "СОЛНЦЕ")

    def test_empty_input(self) -> None:
        self.assertEqual(clean_word(""), "")

    def test_composes_combining_marks(self) -> None:
        self.assertEqual(clean_word("И\u0306"), "Й")
        self.assertEqual(clean_word("cafe\u0301"), "CAFÉ")


class NormalizeEntriesTests(unittest.TestCase):
    def test_trims_label_and_clue(self) -> None:
        entries = normalize_entries([("  Ocean ", "  big water ")])
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].word, "OCEAN")
        self.assertEqual(entries[0].label, "Ocean")
        self.assertEqual(entries[0].clue, "big water")

    def test_rejects_short_words(self) -> None:
        entries = normalize_entries([("A", ""), (" b ", ""), ("a!", ""), ("--", ""), ("OK", "")])
        self.assertEqual([entry.word for entry in entries], ["OK"])

    def test_first_duplicate_wins(self) -> None:
        entries = normalize_entries([("Sea", "first"), ("SEA", "second"), ("s-e-a", "third")])
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].clue, "first")

    def test_decomposed_duplicate_is_dropped(self) -> None:
        entries = normalize_entries([("Йод", "first"), ("И\u0306од", "second")])
        self.assertEqual([entry.word for entry in entries], ["ЙОД"])
        self.assertEqual(entries[0].clue, "first")

    def test_preserves_input_order(self) -> None:
        entries = normalize_entries([("dog", ""), ("elephant", ""), ("cat", "")])
        self.assertEqual([entry.word for entry in entries], ["DOG", "ELEPHANT", "CAT"])

    def test_accepts_word_entry_objects(self) -> None:
        entries = normalize_entries([WordEntry(word="river", clue="flows")])
        self.assertEqual(entries[0].word, "RIVER")
        self.assertEqual(entries[0].clue, "flows")

    def test_trimmed_words_keeps_every_non_blank_word(self) -> None:
        self.assertEqual(trimmed_words([(" a ", ""), ("", ""), ("  ", "x"), ("b", "")]), ["a", "b"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
