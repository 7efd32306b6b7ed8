import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from docx import Document

from main import build_parser, collect_entries, main


class CliTests(unittest.TestCase):
    def test_writes_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "result.json"
            code = main(
                ["--words", "rat - Rodent", "car", "--seed", "3", "--output", str(output),
                 "--log-level", "WARNING"]
            )
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(code, 0)
        self.assertEqual(len(payload["words"]), 2)
        self.assertEqual(payload["unplaced_words"], [])
        clues = {w["word"]: w["clue"] for w in payload["words"]}
        self.assertEqual(clues, {"RAT": "Rodent", "CAR": ""})

    def test_pretty_output(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = main(["--words", "rat", "car", "--seed", "1", "--pretty", "--log-level", "ERROR"])
        self.assertEqual(code, 0)
        self.assertIn("Across", stdout.getvalue())
        self.assertIn("--- Grid ---", stdout.getvalue())

    def test_reads_words_file_and_table(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words_file = Path(tmpdir) / "words.txt"
            words_file.write_text("ocean - Big water\n#hashtag - Tagged\nriver\n", encoding="utf-8")
            table = Path(tmpdir) / "extra.tsv"
            table.write_text("word\tclue\ncloud\tFloats\n", encoding="utf-8")
            args = build_parser().parse_args(
                ["--words-file", str(words_file), "--table", str(table)]
            )
            entries = collect_entries(args)
        self.assertEqual([e.word for e in entries], ["ocean", "#hashtag", "river", "cloud"])

    def test_writes_blank_docx(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "puzzle.docx"
            output = Path(tmpdir) / "result.json"
            code = main(
                ["--words", "rat - Rodent", "car", "--seed", "3", "--docx", str(target),
                 "--hide-answers", "--output", str(output), "--log-level", "WARNING"]
            )
            document = Document(str(target))
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(code, 0)
        self.assertEqual(document.paragraphs[0].text, "Crossword")
        table = document.tables[0]
        self.assertEqual(len(table.rows), payload["bounds"]["height"])
        self.assertEqual(len(table.columns), payload["bounds"]["width"])
        self.assertFalse(any(char.isalpha() for row in table.rows for cell in row.cells for char in cell.text))

    def test_too_few_words_exits(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--words", "ocean", "--log-level", "ERROR"])
        self.assertEqual(ctx.exception.code, 1)

    def test_missing_word_source_is_an_error(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main([])
        self.assertEqual(ctx.exception.code, 2)

    def test_missing_words_file_exits(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--words-file", "does/not/exist.txt", "--log-level", "ERROR"])
        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
