"""Product card lists.

Two card shapes are recognized: numbered items led by the shopping-bag
emoji (``**1. 🛍️ Title**``) and numbered items whose markdown title is
followed by a metadata line opening with a price/color/size emoji. Each
card becomes one chunk without its list number.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.passes.list_normalize import SHOPPING_BAG
from chat_chunker.processors.base import SplitResult

logger = logging.getLogger(__name__)

_EMOJI_CARD = rf"(?:\*{{1,2}})?\d+\.\s*{SHOPPING_BAG}"
_MARKDOWN_CARD = r"\d+\.\s+\*{1,2}[^*\s]"

EMOJI_CARD_RE = re.compile(_EMOJI_CARD)
MARKDOWN_CARD_RE = re.compile(r"\d+\.\s+\*{1,2}[^*\n]+\*{1,2}\s*\n[💵🌈👟✅📏]")

_INLINE_QUESTION_RE = re.compile(
    r"^(?P<before>.*?)\s+(?P<question>¿[^\n?]+\?(?:\s*[^\s\n]+)?)$"
)


@dataclass(frozen=True)
class _CardPatterns:
    """Intro splitter, card extractor and number cleaner for one card shape."""

    first: re.Pattern[str]
    card: re.Pattern[str]
    number: re.Pattern[str]
    keep: str


_EMOJI_PATTERNS = _CardPatterns(
    first=re.compile(rf"^(?P<intro>[\s\S]*?)(?P<card>{_EMOJI_CARD})"),
    card=re.compile(
        rf"(?P<card>{_EMOJI_CARD}[\s\S]*?)(?=\n\s*\n|\n\s*{_EMOJI_CARD}|\Z)"
    ),
    number=re.compile(r"^(?P<asterisks>\*{1,2})?(?:\d+\.\s*)"),
    keep=r"\g<asterisks>",
)
_MARKDOWN_PATTERNS = _CardPatterns(
    first=re.compile(rf"^(?P<intro>[\s\S]*?)(?P<card>{_MARKDOWN_CARD})"),
    card=re.compile(
        rf"(?P<card>\d+\.\s+\*{{1,2}}[^*\n]*[\s\S]*?)(?=\n\s*\n|\n\s*{_MARKDOWN_CARD}|\Z)"
    ),
    number=re.compile(r"^\d+\.\s+"),
    keep="",
)


# ---------------------------------------------------------------------------
# Trailing question of the last card
# ---------------------------------------------------------------------------


def _question_line(lines: Sequence[str]) -> Optional[int]:
    return next((i for i, line in enumerate(lines) if line.strip().startswith("¿")), None)


def _inline_question(lines: Sequence[str]) -> Optional[Tuple[int, re.Match[str]]]:
    return next(
        (
            (i, match)
            for i, match in enumerate(_INLINE_QUESTION_RE.match(line) for line in lines)
            if match is not None
        ),
        None,
    )


def extract_trailing_question(card: str) -> Optional[Tuple[str, ...]]:
    """Split ``card`` into ``(card body, question)`` chunks.

    A line opening with ``¿`` wins; otherwise a ``¿...?`` at the end of any
    line (optionally followed by one token such as an emoji) is peeled off.
    Returns ``None`` when the card holds no such question.
    """
    lines = card.split("\n")
    index = _question_line(lines)
    if index is not None:
        body = "\n".join(lines[:index]).strip()
        question = " ".join(lines[index:]).strip()
    else:
        found = _inline_question(lines)
        if found is None:
            return None
        index, match = found
        body = "\n".join([*lines[:index], match.group("before")]).strip()
        question = " ".join([match.group("question"), *lines[index + 1 :]]).strip()
    return tuple(part for part in (body, question) if part)


# ---------------------------------------------------------------------------
# Card list
# ---------------------------------------------------------------------------


def _card_chunks(card: str, is_last: bool, patterns: _CardPatterns) -> List[str]:
    if not card.strip():
        return []
    cleaned = patterns.number.sub(patterns.keep, card, count=1)
    if is_last:
        peeled = extract_trailing_question(cleaned)
        if peeled is not None:
            return list(peeled)
    return [cleaned]


def _card_run(rest: str, patterns: _CardPatterns) -> List[re.Match[str]]:
    """Cards separated only by whitespace; other text ends the run."""
    run: List[re.Match[str]] = []
    for match in patterns.card.finditer(rest):
        previous_end = run[-1].end() if run else 0
        if rest[previous_end : match.start()].strip():
            break
        run.append(match)
    return run


def process_product_card_lists(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    """Emit the intro, then one chunk per product card."""
    if EMOJI_CARD_RE.search(text):
        patterns = _EMOJI_PATTERNS
    elif MARKDOWN_CARD_RE.search(text):
        patterns = _MARKDOWN_PATTERNS
    else:
        return None
    first = patterns.first.match(text)
    if first is None:
        return None
    raw_intro = first.group("intro")
    rest = text[len(raw_intro) :].strip()
    matches = _card_run(rest, patterns)
    cards = [m.group("card").strip() for m in matches]
    emitted = [raw_intro.strip()] if raw_intro.strip() else []
    for i, card in enumerate(cards):
        emitted.extend(_card_chunks(card, i == len(cards) - 1, patterns))
    last_end = matches[-1].end() if matches else 0
    logger.debug("extracted %d product card(s)", len(cards))
    return SplitResult(chunks=tuple(emitted), remaining=rest[last_end:].lstrip())


__all__ = [
    "EMOJI_CARD_RE",
    "MARKDOWN_CARD_RE",
    "extract_trailing_question",
    "process_product_card_lists",
]
