"""Reading and writing word lists.

Two input shapes are supported:

- plain text, one entry per line as ``word - clue`` (the clue is optional);
- CSV/TSV tables with the word in the first column and the clue in the second.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from ..core.exceptions import WordListParseError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

SEPARATOR = " - "
TABLE_SUFFIXES = {".csv", ".tsv"}


@dataclass
class WordEntry:
    """A raw word/clue pair as typed by the user."""

    word: str
    clue: str = ""


def parse_text(text: str) -> List[WordEntry]:
    """Parse ``word - clue`` lines; blank lines are skipped."""

    entries: List[WordEntry] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        word, sep, clue = line.partition(SEPARATOR)
        if sep:
            entries.append(WordEntry(word=word.strip(), clue=clue.strip()))
        else:
            entries.append(WordEntry(word=line))
    return entries


def format_text(entries: Iterable[WordEntry]) -> str:
    """Inverse of :func:`parse_text`."""

    lines = []
    for entry in entries:
        word = entry.word.strip()
        clue = entry.clue.strip()
        if not word and not clue:
            continue
        lines.append(f"{word}{SEPARATOR}{clue}" if clue else word)
    return "\n".join(lines)


def parse_table(path: Path | str) -> List[WordEntry]:
    """Read a two-column CSV/TSV table of words and clues."""

    source = Path(path)
    text = _read(source)
    if not text.strip():
        return []
    delimiter = "\t" if source.suffix.lower() == ".tsv" else _sniff_delimiter(text)

    entries: List[WordEntry] = []
    reader = csv.reader(text.splitlines(), delimiter=delimiter)
    for index, row in enumerate(reader):
        if not row or not any(value.strip() for value in row):
            continue
        if index == 0 and row[0].strip().lower() == "word":
            continue
        word = row[0].strip()
        clue = row[1].strip() if len(row) > 1 else ""
        entries.append(WordEntry(word=word, clue=clue))
    LOGGER.debug("Read %s table rows from %s", len(entries), source)
    return entries


def load_entries(path: Path | str) -> List[WordEntry]:
    """Load a word list, choosing the table reader for ``.csv``/``.tsv`` files."""

    source = Path(path)
    if source.suffix.lower() in TABLE_SUFFIXES:
        return parse_table(source)
    return parse_text(_read(source))


def count_valid(entries: Iterable[WordEntry]) -> int:
    """Number of entries that carry a non-blank word."""

    return sum(1 for entry in entries if entry.word.strip())


def _sniff_delimiter(text: str) -> str:
    try:
        return csv.Sniffer().sniff(text[:4096], delimiters=",;\t").delimiter
    except csv.Error:
        return "\t"


def _read(source: Path) -> str:
    if not source.exists():
        raise WordListParseError(f"Missing word list: {source}")
    try:
        return source.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListParseError(f"Cannot read word list {source}: {exc}") from exc


__all__ = [
    "WordEntry",
    "count_valid",
    "format_text",
    "load_entries",
    "parse_table",
    "parse_text",
]
