"""Pretty-print helpers for generated crosswords."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..engine.generator import CrosswordResult


EMPTY_SYMBOL = "."
HIDDEN_SYMBOL = "_"
HEADINGS = {
    Direction.ACROSS: "Across",
    Direction.DOWN: "Down",
}


def format_grid(result: CrosswordResult, *, filled: bool = True) -> str:
    width = result.bounds.width
    if width == 0:
        return "(empty grid)"
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(result.to_dense()):
        symbols = []
        for cell in row:
            if cell is None:
                symbols.append(EMPTY_SYMBOL)
            else:
                symbols.append(cell.letter if filled else HIDDEN_SYMBOL)
        lines.append(f"{r:>2} | " + " ".join(f"{symbol:>2}" for symbol in symbols))
    return "\n".join(lines)


def format_clues(result: CrosswordResult, *, filled: bool = True) -> str:
    """Clue lists grouped by direction and sorted by number."""

    lines: List[str] = []
    for direction in (Direction.ACROSS, Direction.DOWN):
        words = result.words_in(direction)
        if not words:
            continue
        if lines:
            lines.append("")
        lines.append(HEADINGS[direction])
        for word in words:
            clue = word.clue or HIDDEN_SYMBOL * word.length
            line = f"  {word.number}. {clue} ({word.length})"
            if filled:
                line += f" {word.label}"
            lines.append(line)
    return "\n".join(lines)


def pretty_print_crossword(result: CrosswordResult, *, filled: bool = True, stream=None) -> None:
    """Print the grid followed by its clues."""

    stream = stream or sys.stdout
    print(format_grid(result, filled=filled), file=stream)
    clues = format_clues(result, filled=filled)
    if clues:
        print(file=stream)
        print(clues, file=stream)


def compute_stats(result: CrosswordResult) -> dict:
    """Grid and word statistics for a finished crossword."""

    usage = Counter(coord for word in result.words for coord in word.cells)
    letter_cells = len(result.grid)
    total_cells = result.bounds.width * result.bounds.height
    lengths = [word.length for word in result.words]
    return {
        "grid": {
            "rows": result.bounds.height,
            "cols": result.bounds.width,
            "total_cells": total_cells,
            "letter_cells": letter_cells,
            "density": round(letter_cells / total_cells, 3) if total_cells else 0.0,
            "intersections": sum(1 for count in usage.values() if count > 1),
        },
        "words": {
            "placed": len(result.words),
            "unplaced": len(result.unplaced_words),
            "across": len(result.words_in(Direction.ACROSS)),
            "down": len(result.words_in(Direction.DOWN)),
            "length_min": min(lengths) if lengths else 0,
            "length_max": max(lengths) if lengths else 0,
        },
        "attempts": result.attempts,
    }


def print_crossword_stats(result: CrosswordResult, *, stream=None) -> None:
    """Print grid + summary stats for a completed crossword."""

    stream = stream or sys.stdout
    stats = compute_stats(result)
    grid = stats["grid"]
    words = stats["words"]

    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid['rows']} x {grid['cols']} ({grid['total_cells']} cells)", file=stream)
    print(f"  Letters:       {grid['letter_cells']} ({grid['density'] * 100:.0f}%)", file=stream)
    print(f"  Crossings:     {grid['intersections']}", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {words['placed']} ({words['across']} across, {words['down']} down)", file=stream)
    if words["placed"]:
        print(f"  Length range:  {words['length_min']}-{words['length_max']}", file=stream)
    if result.unplaced_words:
        print(f"  Unplaced:      {', '.join(result.unplaced_words)}", file=stream)

    print(file=stream)
    print(f"Attempts: {stats['attempts']}", file=stream)
    if result.seed is not None:
        print(f"Seed: {result.seed}", file=stream)
