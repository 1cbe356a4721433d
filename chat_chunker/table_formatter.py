"""Rendering of parsed tables for chat delivery.

Narrow tables become one fenced monospace block; wide tables become one
``*Header:* value`` chunk per data row using chat emphasis conventions.
"""

from __future__ import annotations

import re
from typing import List, Sequence

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.table_parser import ParsedTable

FENCE = "```"

_BOLD_RE = re.compile(r"\*\*(?P<content>[^*]+)\*\*")
_ITALIC_RE = re.compile(r"\*(?P<content>[^*]+)\*")
_CODE_RE = re.compile(r"`(?P<content>[^`]+)`")
_LINK_RE = re.compile(r"\[(?P<link_text>[^\]]+)\]\([^)]*\)")
_BOLD_OR_ITALIC_RE = re.compile(r"\*\*[^*]+\*\*|\*[^*]+\*")


def strip_markdown_formatting(text: str) -> str:
    """Drop bold, italic, inline code and link markup, keeping the text."""
    text = _BOLD_RE.sub(r"\g<content>", text)
    text = _ITALIC_RE.sub(r"\g<content>", text)
    text = _CODE_RE.sub(r"\g<content>", text)
    return _LINK_RE.sub(r"\g<link_text>", text)


def _chat_emphasis(match: re.Match[str]) -> str:
    marked = match.group(0)
    if marked.startswith("**"):
        return f"*{marked[2:-2]}*"
    return f"_{marked[1:-1]}_"


def transform_to_whatsapp(text: str) -> str:
    """Convert ``**bold**`` to ``*bold*`` and ``*italic*`` to ``_italic_``."""
    text = _BOLD_OR_ITALIC_RE.sub(_chat_emphasis, text)
    text = _CODE_RE.sub(r"\g<content>", text)
    return _LINK_RE.sub(r"\g<link_text>", text)


def _display_width(cell: str) -> int:
    return len(strip_markdown_formatting(cell))


def calculate_column_widths(table: ParsedTable) -> List[int]:
    return [
        max(
            [_display_width(header)]
            + [_display_width(row[i]) if i < len(row) else 0 for row in table.rows]
        )
        for i, header in enumerate(table.headers)
    ]


def calculate_table_real_width(
    column_widths: Sequence[int], config: SplitterConfig = DEFAULT_CONFIG
) -> int:
    """Content width plus the separators between columns."""
    separators = (len(column_widths) - 1) * config.column_separator_width
    return sum(column_widths) + separators


def should_use_monospace(
    column_widths: Sequence[int], config: SplitterConfig = DEFAULT_CONFIG
) -> bool:
    real_width = calculate_table_real_width(column_widths, config)
    return real_width <= config.table_monospace_width_threshold


def _monospace_row(cells: Sequence[str], column_widths: Sequence[int]) -> str:
    last = len(cells) - 1
    return " ".join(
        stripped if i == last else stripped.ljust(column_widths[i])
        for i, stripped in enumerate(strip_markdown_formatting(c) for c in cells)
    )


def format_as_monospace(table: ParsedTable, column_widths: Sequence[int]) -> str:
    """Render ``table`` as a fenced block with space-aligned columns."""
    body = "\n".join(
        _monospace_row(row, column_widths) for row in (table.headers, *table.rows)
    )
    return f"{FENCE}\n{body}\n{FENCE}"


def format_row_chunk(headers: Sequence[str], row: Sequence[str]) -> str:
    return "\n".join(
        f"*{strip_markdown_formatting(header)}:* "
        f"{transform_to_whatsapp(row[i] if i < len(row) else '')}"
        for i, header in enumerate(headers)
    )


def format_as_row_chunks(table: ParsedTable) -> List[str]:
    return [format_row_chunk(table.headers, row) for row in table.rows]


__all__ = [
    "FENCE",
    "calculate_column_widths",
    "calculate_table_real_width",
    "format_as_monospace",
    "format_as_row_chunks",
    "format_row_chunk",
    "should_use_monospace",
    "strip_markdown_formatting",
    "transform_to_whatsapp",
]
