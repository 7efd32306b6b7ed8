"""Printable Word export of a finished crossword.

The document holds a title, the grid as a fixed-size table and the clue
lists. With ``filled=False`` the letters and answers are left out so the
page can be handed out as a blank puzzle.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from docx import Document
from docx.enum.section import WD_ORIENT
from docx.enum.table import WD_CELL_VERTICAL_ALIGNMENT, WD_ROW_HEIGHT_RULE
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor, Twips

from ..core.constants import Direction
from ..core.exceptions import ExportError
from ..core.models import Cell, PlacedWord
from ..utils.logger import get_logger
from ..utils.pretty import HIDDEN_SYMBOL

if TYPE_CHECKING:
    from docx.document import Document as DocumentObject
    from docx.table import _Cell

    from ..engine.generator import CrosswordResult


LOGGER = get_logger(__name__)

FONT = "Arial"
CELL_SIZE = Twips(400)
A4_SHORT = Twips(11906)
A4_LONG = Twips(16838)
MARGIN = Twips(567)
LANDSCAPE_RATIO = 1.3
NUMBER_COLOR = RGBColor(0x55, 0x55, 0x55)
COUNT_COLOR = RGBColor(0x88, 0x88, 0x88)
ANSWER_COLOR = RGBColor(0x4F, 0x46, 0xE5)
HEADINGS = {
    Direction.ACROSS: "Across (→)",
    Direction.DOWN: "Down (↓)",
}


def build_document(result: CrosswordResult, *, filled: bool = True) -> DocumentObject:
    """Lay out ``result`` as an A4 document without writing it anywhere."""

    document = Document()
    _setup_page(document, result)

    title = document.add_heading(level=1)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER
    title.paragraph_format.space_after = Pt(10)
    run = title.add_run("Crossword (answers)" if filled else "Crossword")
    run.font.name = FONT
    run.font.size = Pt(16)
    run.bold = True

    if not result.bounds.is_empty:
        _add_grid(document, result, filled)
    for direction in (Direction.ACROSS, Direction.DOWN):
        _add_clues(document, direction, result.words_in(direction), filled)
    return document


def export_docx(result: CrosswordResult, path: Path | str, *, filled: bool = True) -> Path:
    """Write ``result`` as a ``.docx`` file and return its path."""

    target = Path(path)
    document = build_document(result, filled=filled)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        document.save(str(target))
    except OSError as exc:
        raise ExportError(f"Cannot write {target}: {exc}") from exc
    LOGGER.info(
        "Exported %s words (%sx%s grid) to %s",
        len(result.words),
        result.bounds.height,
        result.bounds.width,
        target,
    )
    return target


# ----------------------------------------------------------------------
# Layout helpers
# ----------------------------------------------------------------------
def _setup_page(document: DocumentObject, result: CrosswordResult) -> None:
    section = document.sections[0]
    landscape = result.bounds.width > result.bounds.height * LANDSCAPE_RATIO
    if landscape:
        section.orientation = WD_ORIENT.LANDSCAPE
        section.page_width, section.page_height = A4_LONG, A4_SHORT
    else:
        section.orientation = WD_ORIENT.PORTRAIT
        section.page_width, section.page_height = A4_SHORT, A4_LONG
    section.top_margin = section.bottom_margin = MARGIN
    section.left_margin = section.right_margin = MARGIN


def _add_grid(document: DocumentObject, result: CrosswordResult, filled: bool) -> None:
    dense = result.to_dense()
    table = document.add_table(rows=result.bounds.height, cols=result.bounds.width)
    table.autofit = False
    for row, cells in zip(table.rows, dense):
        row.height = CELL_SIZE
        row.height_rule = WD_ROW_HEIGHT_RULE.EXACTLY
        for table_cell, cell in zip(row.cells, cells):
            _fill_cell(table_cell, cell, filled)


def _fill_cell(table_cell: _Cell, cell: Optional[Cell], filled: bool) -> None:
    table_cell.width = CELL_SIZE
    _set_borders(table_cell, "single" if cell is not None else "nil")
    table_cell.vertical_alignment = WD_CELL_VERTICAL_ALIGNMENT.CENTER

    paragraph = table_cell.paragraphs[0]
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.space_after = Pt(0)
    if cell is None:
        return

    if cell.number is not None:
        number = paragraph.add_run(str(cell.number))
        number.font.name = FONT
        number.font.size = Pt(6)
        number.font.superscript = True
        number.font.color.rgb = NUMBER_COLOR
    if filled:
        letter = paragraph.add_run(cell.letter)
        letter.font.name = FONT
        letter.font.size = Pt(10)
        letter.bold = True


def _set_borders(table_cell: _Cell, style: str) -> None:
    tc_pr = table_cell._tc.get_or_add_tcPr()
    borders = OxmlElement("w:tcBorders")
    for edge in ("top", "left", "bottom", "right"):
        element = OxmlElement(f"w:{edge}")
        element.set(qn("w:val"), style)
        if style != "nil":
            element.set(qn("w:sz"), "4")
            element.set(qn("w:color"), "000000")
        borders.append(element)
    tc_pr.append(borders)


def _add_clues(
    document: DocumentObject, direction: Direction, words: List[PlacedWord], filled: bool
) -> None:
    heading = document.add_paragraph()
    heading.paragraph_format.space_before = Pt(10)
    heading.paragraph_format.space_after = Pt(5)
    run = heading.add_run(HEADINGS[direction])
    run.font.name = FONT
    run.font.size = Pt(11)
    run.bold = True

    for word in words:
        paragraph = document.add_paragraph()
        paragraph.paragraph_format.space_before = Pt(1)
        paragraph.paragraph_format.space_after = Pt(1)
        _add_run(paragraph, f"{word.number}. ", size=10, bold=True)
        _add_run(paragraph, word.clue or HIDDEN_SYMBOL * word.length, size=10)
        _add_run(paragraph, f" ({_letters(word.length)})", size=9, color=COUNT_COLOR)
        if filled:
            _add_run(paragraph, f"  [{word.word}]", size=9, bold=True, color=ANSWER_COLOR)


def _add_run(paragraph, text: str, *, size: float, bold: bool = False, color: Optional[RGBColor] = None) -> None:
    run = paragraph.add_run(text)
    run.font.name = FONT
    run.font.size = Pt(size)
    run.bold = bold
    if color is not None:
        run.font.color.rgb = color


def _letters(count: int) -> str:
    return f"{count} letter" if count == 1 else f"{count} letters"


__all__ = ["build_document", "export_docx"]
