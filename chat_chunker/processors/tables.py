"""Markdown table stage: render a pipe table as monospace or per-row chunks."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.processors.base import SplitResult
from chat_chunker.table_formatter import (
    calculate_column_widths,
    format_as_monospace,
    format_as_row_chunks,
    should_use_monospace,
)
from chat_chunker.table_parser import find_markdown_table

logger = logging.getLogger(__name__)


def process_markdown_table(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    """Render the first pipe table in ``text``; text before it becomes a chunk."""
    found = find_markdown_table(text)
    if found is None:
        return None
    widths = calculate_column_widths(found.table)
    monospace = should_use_monospace(widths, config)
    if monospace:
        rendered = [format_as_monospace(found.table, widths)]
    else:
        rendered = format_as_row_chunks(found.table)
    logger.debug(
        "table with %d column(s) rendered as %s",
        len(widths),
        "monospace" if monospace else "rows",
    )
    intro = [found.before_table] if found.before_table else []
    return SplitResult(chunks=tuple([*intro, *rendered]), remaining=found.after_table)


__all__ = ["process_markdown_table"]
