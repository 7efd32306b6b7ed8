"""Input cleanup: turn raw (word, clue) pairs into canonical entries."""

from __future__ import annotations

import unicodedata
from typing import Iterable, List, Sequence, Set, Tuple, Union

from ..core.constants import MIN_WORD_LENGTH
from ..core.models import NormalizedEntry
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

RawEntry = Union[Tuple[str, str], Sequence[str]]


def clean_word(text: str) -> str:
    """Return the uppercase search key of ``text``.

    The text is NFC-composed first so decomposed accents compare equal to
    precomposed ones. Every character that is not a letter or a digit is
    then dropped, whatever the alphabet, so ``"rock'n roll"`` and
    ``"Рок-н-ролл"`` both survive.
    """

    if not text:
        return ""
    return "".join(char for char in unicodedata.normalize("NFC", text).upper() if char.isalnum())


def normalize_entries(entries: Iterable[RawEntry]) -> List[NormalizedEntry]:
    """Clean, filter and deduplicate raw entries, keeping input order.

    Entries whose trimmed word or canonical form is shorter than two
    characters are skipped, as are later entries whose canonical form was
    already seen.
    """

    seen: Set[str] = set()
    normalized: List[NormalizedEntry] = []
    for raw_word, raw_clue in (_unpack(entry) for entry in entries):
        label = raw_word.strip()
        if len(label) < MIN_WORD_LENGTH:
            LOGGER.debug("Skipping too short entry %r", raw_word)
            continue
        word = clean_word(label)
        if len(word) < MIN_WORD_LENGTH:
            LOGGER.debug("Skipping entry %r: canonical form %r too short", label, word)
            continue
        if word in seen:
            LOGGER.debug("Skipping duplicate entry %r (%s)", label, word)
            continue
        seen.add(word)
        normalized.append(NormalizedEntry(word=word, label=label, clue=raw_clue.strip()))
    return normalized


def trimmed_words(entries: Iterable[RawEntry]) -> List[str]:
    """Return every non-empty trimmed raw word, duplicates included."""

    words = (_unpack(entry)[0].strip() for entry in entries)
    return [word for word in words if word]


def _unpack(entry: RawEntry) -> Tuple[str, str]:
    word = getattr(entry, "word", None)
    if word is not None:
        return word or "", getattr(entry, "clue", "") or ""
    word, clue = entry
    return word or "", clue or ""


__all__ = ["clean_word", "normalize_entries", "trimmed_words"]
