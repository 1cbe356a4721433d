"""Question-mark splitting.

Valid ``?`` positions are collected first (not on a bullet line, not inside
parentheses, not right before a short ``options:`` block). A tight run of
questions is treated as one group and split after its last mark; otherwise
the first mark decides. What follows the mark then vetoes or shapes the
split: lowercase continuations and emoji-only tails stay attached, and a
leading emoji run travels with the question.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.position_helpers import (
    is_position_in_bullet_line,
    is_position_inside_parentheses,
)
from chat_chunker.processors.base import SplitResult, split
from chat_chunker.text_helpers import (
    PARENTHETICAL_RE,
    find_position_after_emoji,
    has_text_content,
    is_parenthetical_clarification,
    smart_trim,
    starts_with_emoji,
    starts_with_lowercase,
)


def _emoji_split(question_part: str, after_question: str) -> Optional[SplitResult]:
    """Keep a leading emoji run with the question when real text follows it."""
    emoji_end = find_position_after_emoji(after_question)
    rest = after_question[emoji_end:].strip()
    if not rest:
        return None
    return split(rest, f"{question_part} {after_question[:emoji_end]}")


def handle_long_question(
    question_part: str, after_question: str
) -> Optional[SplitResult]:
    """Split after a question longer than the long-question threshold."""
    if starts_with_lowercase(after_question):
        return None
    if starts_with_emoji(after_question):
        return _emoji_split(question_part, after_question)
    return split(after_question, question_part)


def handle_short_question(
    question_part: str,
    after_question: str,
    config: SplitterConfig = DEFAULT_CONFIG,
) -> Optional[SplitResult]:
    """Like :func:`handle_long_question`, but keeps a short Q&A together.

    When the question plus the following text up to its first period fits
    within ``config.combined_length_threshold``, nothing is split.
    """
    period = after_question.find(".")
    if period != -1 and period < len(after_question) - 1:
        combined = len(question_part) + 1 + period + 1
        if combined <= config.combined_length_threshold:
            return None
    return handle_long_question(question_part, after_question)


def _split_after_parenthetical(
    text: str, index: int, raw_after: str, after_question: str
) -> Optional[SplitResult]:
    match = PARENTHETICAL_RE.match(after_question)
    if match is None:
        return None
    clarification = match.group(0)
    rest = smart_trim(after_question[len(clarification) :])
    if not has_text_content(rest):
        return None
    end = index + 1 + raw_after.find(clarification) + len(clarification)
    return split(rest, text[:end])


def _process_single_question(
    text: str, index: int, config: SplitterConfig
) -> Optional[SplitResult]:
    if index >= len(text) - 1:
        return None
    raw_after = text[index + 1 :]
    after_question = smart_trim(raw_after)
    if is_parenthetical_clarification(after_question):
        return _split_after_parenthetical(text, index, raw_after, after_question)
    if not has_text_content(after_question):
        return None
    question_part = text[: index + 1]
    if len(question_part) > config.long_question_threshold:
        return handle_long_question(question_part, after_question)
    return handle_short_question(question_part, after_question, config)


def process_contiguous_questions(
    text: str, last_index: int, config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    """Split after the last mark of a question group.

    The single space that followed the mark, if any, stays on the chunk.
    """
    if last_index >= len(text) - 1:
        return None
    after_question = smart_trim(text[last_index + 1 :])
    if not has_text_content(after_question):
        return None
    before = text[: last_index + 1]
    spacing = " " if text[last_index + 1] == " " else ""
    if not starts_with_emoji(after_question):
        return split(after_question, before + spacing)
    emoji_end = find_position_after_emoji(after_question)
    rest = after_question[emoji_end:].strip()
    if not rest:
        return None
    return split(rest, before + spacing + after_question[:emoji_end])


def _options_block_follows(after_mark: str, config: SplitterConfig) -> bool:
    """A blank line right after the mark, then a short ``intro:`` and ``- `` options."""
    gap = after_mark.find("\n\n")
    if gap == -1 or gap >= config.double_newline_distance_threshold:
        return False
    following = after_mark[gap + 2 :]
    first_line = following.split("\n", 1)[0].strip()
    return (
        len(first_line) < config.short_intro_threshold
        and first_line.endswith(":")
        and "\n-" in following
    )


def find_valid_question_indices(
    text: str, config: SplitterConfig = DEFAULT_CONFIG
) -> List[int]:
    return [
        i
        for i, char in enumerate(text)
        if char == "?"
        and not is_position_in_bullet_line(text, i)
        and not is_position_inside_parentheses(text, i)
        and not _options_block_follows(text[i + 1 :], config)
    ]


def _are_contiguous(text: str, indices: Sequence[int], config: SplitterConfig) -> bool:
    if len(indices) < 2:
        return False
    between = text[indices[0] + 1 : indices[-1]]
    return (
        "." not in between
        and len(smart_trim(between)) < config.contiguous_questions_text_threshold
    )


def process_question_marks(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    indices = find_valid_question_indices(text, config)
    if not indices:
        return None
    if _are_contiguous(text, indices, config):
        return process_contiguous_questions(text, indices[-1], config)
    return _process_single_question(text, indices[0], config)


__all__ = [
    "find_valid_question_indices",
    "handle_long_question",
    "handle_short_question",
    "process_contiguous_questions",
    "process_question_marks",
]
