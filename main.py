"""CLI entrypoint for the crossword layout generator."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List

from crossexpo.core.exceptions import CrosswordError
from crossexpo.engine.crossword_store import DEFAULT_STORE_DIR, CrosswordStore
from crossexpo.engine.generator import CrosswordGenerator, GeneratorConfig
from crossexpo.io.export_docx import export_docx
from crossexpo.io.wordlist import WordEntry, count_valid, load_entries, parse_table, parse_text
from crossexpo.utils.logger import configure_logging
from crossexpo.utils.pretty import pretty_print_crossword, print_crossword_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Arrange a list of words and clues into a crossword",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="ENTRY",
        help="Entries as 'WORD' or 'WORD - clue' (quote entries containing spaces)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="Word list: one 'WORD - clue' per line, or a .csv/.tsv table",
    )
    parser.add_argument(
        "--table",
        type=Path,
        metavar="FILE",
        help="Two-column table (word, clue); the delimiter is detected",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=80,
        help="Number of randomized placement attempts (default 80)",
    )
    parser.add_argument(
        "--min-words",
        type=int,
        default=2,
        help="Refuse to generate with fewer usable words (default 2)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--pretty", action="store_true", help="Print the grid, clues and stats")
    parser.add_argument(
        "--hide-answers",
        action="store_true",
        help="Blank out letters and answers in --pretty and --docx output",
    )
    parser.add_argument(
        "--docx",
        type=Path,
        metavar="FILE",
        help="Write a printable Word document (honours --hide-answers)",
    )
    parser.add_argument("--store", action="store_true", help="Save the result as a JSON document")
    parser.add_argument(
        "--store-dir",
        type=Path,
        default=DEFAULT_STORE_DIR,
        help="Directory for --store documents",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_entries(args: argparse.Namespace) -> List[WordEntry]:
    entries: List[WordEntry] = []
    if args.words:
        entries.extend(parse_text("\n".join(args.words)))
    if args.words_file:
        entries.extend(load_entries(args.words_file))
    if args.table:
        entries.extend(parse_table(args.table))
    return entries


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(logging, args.log_level.upper(), logging.INFO))

    if not (args.words or args.words_file or args.table):
        parser.error("provide at least one of --words, --words-file or --table")
    if args.max_attempts < 1:
        parser.error("--max-attempts must be positive")

    try:
        entries = collect_entries(args)
    except CrosswordError as exc:
        parser.exit(1, f"error: {exc}\n")

    valid = count_valid(entries)
    if valid < args.min_words:
        parser.exit(1, f"error: need at least {args.min_words} words, got {valid}\n")

    config = GeneratorConfig(max_attempts=args.max_attempts, seed=args.seed)
    result = CrosswordGenerator(config).generate((entry.word, entry.clue) for entry in entries)

    try:
        if args.store:
            CrosswordStore(args.store_dir).save(result, config)
        if args.docx:
            export_docx(result, args.docx, filled=not args.hide_answers)
    except CrosswordError as exc:
        parser.exit(1, f"error: {exc}\n")

    if args.pretty:
        pretty_print_crossword(result, filled=not args.hide_answers)
        print()
        print_crossword_stats(result)

    output_text = json.dumps(result.to_jsonable(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    elif not args.pretty:
        print(output_text)
    return 0 if result.words else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
