"""Custom exception hierarchy for the layers around the placement search.

The search itself represents every expected failure as data; these are
raised by the word-list, export, validation and storage collaborators.
"""


class CrosswordError(Exception):
    """Base exception for crossword tooling failures."""


class WordListParseError(CrosswordError):
    """Raised when a word list or table cannot be read."""


class ExportError(CrosswordError):
    """Raised when a crossword document cannot be written."""


class ValidationError(CrosswordError):
    """Raised when a generated crossword breaks a layout rule."""


class StoreError(CrosswordError):
    """Raised when a result document cannot be persisted."""
