"""Crossword layout generator for user-supplied word lists.

This package exposes the public API surface via:

- ``crossexpo.engine.generator.CrosswordGenerator``: runs the placement search.
- ``crossexpo.engine.generator.generate_crossword``: functional entry point.
- ``crossexpo.io.wordlist`` helpers: read ``word - clue`` lists and tables.
"""

from .core.constants import Direction
from .engine.generator import (
    CrosswordGenerator,
    CrosswordResult,
    GeneratorConfig,
    generate_crossword,
    to_dense,
)

__all__ = [
    "CrosswordGenerator",
    "CrosswordResult",
    "Direction",
    "GeneratorConfig",
    "generate_crossword",
    "to_dense",
]

__version__ = "0.1.0"
