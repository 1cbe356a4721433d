"""Markdown pipe-table detection."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

MIN_COLUMNS = 2

_SEPARATOR_ROW_RE = re.compile(r"^\|(?:\s*:?-+:?\s*\|)+\s*$")


@dataclass(frozen=True)
class ParsedTable:
    """Rectangular grid: every row has exactly ``len(headers)`` cells."""

    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class TableMatch:
    before_table: str
    table: ParsedTable
    after_table: str


def is_separator_row(line: str) -> bool:
    return _SEPARATOR_ROW_RE.match(line.strip()) is not None


def is_table_row(line: str) -> bool:
    trimmed = line.strip()
    return trimmed.startswith("|") and trimmed.endswith("|")


def parse_cells(row: str) -> List[str]:
    """Split a ``| a | b |`` row into trimmed cell strings."""
    trimmed = row.strip()
    return [cell.strip() for cell in trimmed[1:-1].split("|")]


def _fit_row(cells: Sequence[str], width: int) -> Tuple[str, ...]:
    return tuple([*cells, *[""] * (width - len(cells))][:width])


def _data_rows_end(lines: Sequence[str], start: int) -> int:
    end = start
    while end < len(lines) and is_table_row(lines[end]):
        end += 1
    return end


def _table_at(lines: Sequence[str], i: int) -> Optional[TableMatch]:
    header_line, separator = lines[i], lines[i + 1]
    if not (is_table_row(header_line) and is_separator_row(separator)):
        return None
    headers = parse_cells(header_line)
    if len(headers) < MIN_COLUMNS:
        return None
    end = _data_rows_end(lines, i + 2)
    if end == i + 2:
        return None
    rows = tuple(_fit_row(parse_cells(line), len(headers)) for line in lines[i + 2 : end])
    return TableMatch(
        before_table="\n".join(lines[:i]).strip(),
        table=ParsedTable(headers=tuple(headers), rows=rows),
        after_table="\n".join(lines[end:]).strip(),
    )


def find_markdown_table(text: str) -> Optional[TableMatch]:
    """Return the first header/separator/data-rows table found in ``text``.

    A header row needs at least two cells and one data row; shorter data
    rows are padded with empty cells and longer ones truncated.
    """
    lines = text.split("\n")
    return next(
        (m for m in (_table_at(lines, i) for i in range(len(lines) - 1)) if m),
        None,
    )


__all__ = [
    "MIN_COLUMNS",
    "ParsedTable",
    "TableMatch",
    "find_markdown_table",
    "is_separator_row",
    "is_table_row",
    "parse_cells",
]
