"""Section breaks at the first blank line.

The split is skipped by three guards that keep a question or response
prompt together with its bullet options.
"""

from __future__ import annotations

from typing import Optional, Sequence

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.patterns import RESPONSE_PROMPTS
from chat_chunker.processors.base import SplitResult, split
from chat_chunker.processors.intro import has_question_with_options_pattern
from chat_chunker.processors.paragraphs import has_long_paragraphs
from chat_chunker.sections import starts_with_markdown_header
from chat_chunker.strategies.markers import starts_with_bullet
from chat_chunker.text_helpers import smart_trim


def is_question_with_short_intro_bullets(
    before: str, after: str, config: SplitterConfig = DEFAULT_CONFIG
) -> bool:
    """``question?`` + blank line + short ``intro:`` + ``- options``."""
    first_line = after.split("\n", 1)[0].strip()
    return (
        before.strip().endswith("?")
        and len(first_line) < config.short_intro_threshold
        and first_line.endswith(":")
        and "\n-" in after
    )


def is_response_prompt_with_bullets(before: str, after: str) -> bool:
    """``... Puedes responder con:`` + blank line + bullet options."""
    return before.strip().endswith(RESPONSE_PROMPTS) and starts_with_bullet(after)


def _keeps_options_together(before: str, after: str, config: SplitterConfig) -> bool:
    return (
        is_question_with_short_intro_bullets(before, after, config)
        or is_response_prompt_with_bullets(before, after)
        or has_question_with_options_pattern(after)
    )


def process_section_breaks(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    index = text.find("\n\n")
    if index == -1 or index <= config.min_content_before_break:
        return None
    before, after = text[:index], text[index + 2 :]
    if starts_with_markdown_header(after):
        return split(after, before.strip())
    if not smart_trim(after) or has_long_paragraphs(before, config):
        return None
    if _keeps_options_together(before, after, config):
        return None
    return split(after, before)


__all__ = [
    "is_question_with_short_intro_bullets",
    "is_response_prompt_with_bullets",
    "process_section_breaks",
]
