"""Sentence-period splitting, the last resort before the verbatim fallback."""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.patterns import (
    ProtectedRange,
    find_protected_ranges,
    is_position_protected,
)
from chat_chunker.position_helpers import is_position_inside_parentheses
from chat_chunker.processors.base import SplitResult, split
from chat_chunker.text_helpers import smart_trim

logger = logging.getLogger(__name__)


def find_valid_period_indices(
    text: str, ranges: Sequence[ProtectedRange] | None = None
) -> Iterator[int]:
    """Yield offsets of periods outside protected spans and parentheses."""
    protected = find_protected_ranges(text) if ranges is None else ranges
    return (
        i
        for i, char in enumerate(text)
        if char == "."
        and not is_position_protected(i, protected)
        and not is_position_inside_parentheses(text, i)
    )


def _is_short_question_tail(after: str, config: SplitterConfig) -> bool:
    return "?" in after and len(after) < config.short_question_fragment_threshold


def _would_fragment(
    chunks: Sequence[str], text: str, after: str, config: SplitterConfig
) -> bool:
    """Short previous chunk with short text on both sides of the period."""
    return (
        bool(chunks)
        and len(chunks[-1].strip()) < config.short_chunk_threshold
        and len(text) < config.current_text_short_threshold
        and len(after) < config.current_text_short_threshold
    )


def _split_at(
    text: str, index: int, chunks: Sequence[str], config: SplitterConfig
) -> Optional[SplitResult]:
    if index >= len(text) - 1:
        return None
    after = smart_trim(text[index + 1 :])
    if not after or _is_short_question_tail(after, config):
        return None
    if _would_fragment(chunks, text, after, config):
        return None
    return split(after, text[: index + 1])


def process_period_splits(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    """Split at the first period that ends a sentence.

    URLs, domains, emails, formatted numbers, list markers, abbreviations,
    initials and bullet-item periods are never split points, nor is any
    period inside an open parenthesis.
    """
    for index in find_valid_period_indices(text):
        result = _split_at(text, index, chunks, config)
        if result is not None:
            logger.debug("period split at offset %d", index)
            return result
    return None


__all__ = ["find_valid_period_indices", "process_period_splits"]
