"""Intro/list combiners.

These run first in every iteration: a colon intro, or a question followed
by its numbered options, decides whether the list that follows stays
attached or becomes its own chunk.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.patterns import RESPONSE_PROMPTS
from chat_chunker.processors.base import SplitResult, split
from chat_chunker.strategies.markers import default_marker_strategy

_QUESTION_WITH_OPTIONS_RE = re.compile(
    r"^[^?]+\?\s*\n+[\s\S]*?(?:Puedes responder con|puedes responder con):[\s\S]*?\n+-"
)
_INTRO_WITH_LIST_RE = re.compile(
    r"^(?P<intro>.+?:)(?P<after_colon>[^\n]*?)\n+(?P<list_start>\d{1,2}\.\s+|[\-•]\s+)"
)
_QUESTION_WITH_LIST_RE = re.compile(
    r"^(?P<question>[\s\S]*?\?[^\n]*?)\n(?P<list>\d{1,2}\.\s+[\s\S]*)"
)
_DANGLING_MARKER_RE = re.compile(r"(?:\d{1,2}\.|[\-•])\s*\Z")


def has_question_with_options_pattern(text: str) -> bool:
    """Return ``True`` for ``question?`` + ``Puedes responder con:`` + bullets."""
    return _QUESTION_WITH_OPTIONS_RE.search(text) is not None


def _trim_to_response_prompt(intro: str) -> str:
    """Cut the intro after its last colon line when it holds a response prompt."""
    if not any(prompt in intro for prompt in RESPONSE_PROMPTS):
        return intro
    lines = intro.split("\n")
    last_colon = next(
        (i for i in range(len(lines) - 1, -1, -1) if lines[i].strip().endswith(":")),
        None,
    )
    return intro if last_colon is None else "\n".join(lines[: last_colon + 1])


def process_intro_with_list(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    """Emit a short ``...:`` intro line that directly precedes a list."""
    match = _INTRO_WITH_LIST_RE.match(text)
    if match is None:
        return None
    intro = _trim_to_response_prompt(match.group("intro") + match.group("after_colon"))
    if len(intro) >= config.max_intro_length:
        return None
    return split(text[len(intro) :].strip(), intro)


def process_question_with_list(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    """Keep a short question and its numbered answer options as one chunk."""
    match = _QUESTION_WITH_LIST_RE.match(text)
    if match is None:
        return None
    strategy = default_marker_strategy()
    lines = match.group("list").split("\n")
    items = sum(strategy.starts_with_number(line) for line in lines)
    only_items = all(not line.strip() or strategy.starts_with_number(line) for line in lines)
    if (
        only_items
        and len(text) < config.max_question_with_options_length
        and items >= config.min_list_items_for_options
    ):
        return split("", text)
    return None


def process_intro_with_long_paragraphs(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    """Emit a colon intro alone when the paragraph after it is long."""
    newline = text.find("\n")
    if newline == -1 or newline >= config.first_newline_search_limit:
        return None
    intro = text[:newline].strip()
    if not intro.endswith(":") or _DANGLING_MARKER_RE.search(intro):
        return None
    after_intro = text[newline + 1 :]
    first_paragraph = after_intro.split("\n", 1)[0].strip()
    if len(first_paragraph) > config.long_paragraph_threshold:
        return split(after_intro, intro)
    return None


__all__ = [
    "has_question_with_options_pattern",
    "process_intro_with_list",
    "process_intro_with_long_paragraphs",
    "process_question_with_list",
]
