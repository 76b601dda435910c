"""Tolerant TSV parsing.

Only the tab character separates cells. Quotes carry no meaning, so a
literal tab inside a field cannot be represented.
"""

import re

from sheetfinder.tsv.exceptions import EmptyDocumentError, MissingHeadersError
from sheetfinder.tsv.models import ParsedTable

_LINE_BREAK_RE = re.compile(r"\r\n?")


def index_to_letters(index: int) -> str:
    """Spreadsheet column letters for a 0-based index: 0 -> A, 25 -> Z, 26 -> AA."""
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")
    n = index + 1
    letters = ""
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def header_label(raw: str | None, index: int) -> str:
    """Trimmed header text, or the positional fallback "Col <letters>" when blank."""
    label = (raw or "").strip()
    return label or f"Col {index_to_letters(index)}"


def split_lines(text: str) -> list[str]:
    """Normalize CRLF/CR to LF and drop blank lines."""
    normalized = _LINE_BREAK_RE.sub("\n", text)
    return [line for line in normalized.split("\n") if line.strip()]


def parse_tsv(text: str) -> ParsedTable:
    """Parse raw TSV text into a header list and a rectangular row matrix.

    Raises:
        EmptyDocumentError: if the text is empty or whitespace-only.
        MissingHeadersError: if no header row survives line filtering.
    """
    if not text or not text.strip():
        raise EmptyDocumentError("TSV document is empty")

    lines = split_lines(text)
    if not lines:
        raise MissingHeadersError("TSV document has no header row")

    headers = [cell.strip() for cell in lines[0].split("\t")]
    width = len(headers)
    rows: list[list[str]] = []
    for line in lines[1:]:
        cells = line.split("\t")[:width]
        cells.extend([""] * (width - len(cells)))
        rows.append(cells)

    return ParsedTable(headers=headers, rows=rows)
