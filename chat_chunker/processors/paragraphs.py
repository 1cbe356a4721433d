"""Long-paragraph and markdown-section split stages."""

from __future__ import annotations

from typing import Optional, Sequence

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.processors.base import SplitResult, split
from chat_chunker.processors.intro import has_question_with_options_pattern
from chat_chunker.sections import find_markdown_section


def has_long_paragraphs(text: str, config: SplitterConfig = DEFAULT_CONFIG) -> bool:
    """Two or more non-blank lines, at least one longer than the paragraph limit."""
    paragraphs = [p for p in text.split("\n") if p.strip()]
    return len(paragraphs) >= config.min_list_items_for_options and any(
        len(p) > config.long_paragraph_threshold for p in paragraphs
    )


def process_long_paragraphs_after_intro(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    """Split a colon intro line from the long paragraphs below it."""
    newline = text.find("\n")
    if newline == -1 or newline >= config.first_newline_search_limit:
        return None
    first_line = text[:newline]
    if not first_line.strip().endswith(":"):
        return None
    after_intro = text[newline + 1 :]
    if has_long_paragraphs(after_intro, config):
        return split(after_intro, first_line.strip())
    return None


def process_long_paragraph_sequence(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    """Emit a long first line as its own paragraph chunk.

    Declines when the rest is a question followed by response options, so
    the offer stays with its options.
    """
    lines = text.split("\n")
    if len(lines) < config.min_list_items_for_options:
        return None
    first_paragraph = lines[0].strip()
    if len(first_paragraph) <= config.long_paragraph_threshold:
        return None
    rest = "\n".join(lines[1:]).strip()
    if has_question_with_options_pattern(rest):
        return None
    return split(rest, first_paragraph)


def process_markdown_section(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    section = find_markdown_section(text)
    if section is None:
        return None
    return split(text[len(section.full_section) :].strip(), section.full_section.strip())


__all__ = [
    "has_long_paragraphs",
    "process_long_paragraph_sequence",
    "process_long_paragraphs_after_intro",
    "process_markdown_section",
]
