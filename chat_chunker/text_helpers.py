"""Character-level helpers shared by the split processors.

Emoji detection relies on the ``regex`` module because the standard
library ``re`` has no Unicode property escapes.
"""

from __future__ import annotations

import re

import regex

_TRIM_CLASS = r"[\s\u00a0\u1680\u2000-\u200b\u202f\u205f\u3000]"
_LEADING_SPACE_RE = re.compile(rf"^{_TRIM_CLASS}+")
_TRAILING_SPACE_RE = re.compile(rf"{_TRIM_CLASS}+\Z")

_TEXT_CONTENT_RE = re.compile(r"[a-zA-Z0-9\u00c0-\u024f\u1e00-\u1eff]")
PARENTHETICAL_RE = re.compile(r"^\([^)]+\)\?")

SPANISH_LETTERS = (
    "a-zA-ZáéíóúüñÁÉÍÓÚÜÑàèìòùÀÈÌÒÙâêîôûÂÊÎÔÛäëïöüÄËÏÖÜ"
)
LETTER_RE = re.compile(f"[{SPANISH_LETTERS}]")

EMOJI_RE = regex.compile(r"\p{Emoji}")
_LEADING_EMOJI_RUN_RE = regex.compile(r"^\p{Emoji}+\s*")


def smart_trim(text: str) -> str:
    """Trim whitespace including NBSP and zero-width spaces at both ends."""
    return _TRAILING_SPACE_RE.sub("", _LEADING_SPACE_RE.sub("", text))


def has_text_content(text: str) -> bool:
    """Return ``True`` when ``text`` holds at least one letter or digit."""
    return _TEXT_CONTENT_RE.search(smart_trim(text)) is not None


def is_parenthetical_clarification(text: str) -> bool:
    """Return ``True`` for text opening with ``(...)?``."""
    return PARENTHETICAL_RE.match(smart_trim(text)) is not None


def starts_with_emoji(text: str) -> bool:
    return EMOJI_RE.match(text) is not None


def starts_with_lowercase(text: str) -> bool:
    """Return ``True`` when the first letter of ``text`` is lowercase.

    Leading digits, punctuation and emoji are skipped; text without any
    letter is not considered lowercase.
    """
    match = LETTER_RE.search(text)
    if match is None:
        return False
    letter = match.group(0)
    return letter == letter.lower() and letter != letter.upper()


def find_position_after_emoji(text: str) -> int:
    """Return the offset just past a leading emoji run and its spacing."""
    match = _LEADING_EMOJI_RUN_RE.match(text)
    return match.end() if match else 0


__all__ = [
    "EMOJI_RE",
    "LETTER_RE",
    "PARENTHETICAL_RE",
    "SPANISH_LETTERS",
    "find_position_after_emoji",
    "has_text_content",
    "is_parenthetical_clarification",
    "smart_trim",
    "starts_with_emoji",
    "starts_with_lowercase",
]
