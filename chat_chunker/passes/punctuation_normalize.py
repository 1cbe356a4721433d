"""Spanish inverted-punctuation case normalization.

An inverted ``¿`` or ``¡`` in the middle of a sentence does not start a new
capitalized clause: ``Hola ¿Cómo estás?`` becomes ``Hola ¿cómo estás?``.
Marks at the start of a chunk, after ``.``/``!``/``?`` or after a line
break keep the original case.
"""

from __future__ import annotations

from typing import List, Tuple

from chat_chunker.framework import Artifact, register
from chat_chunker.text_helpers import LETTER_RE

INVERTED_MARKS = ("¿", "¡")
_SENTENCE_END = ".!?"


def _next_non_space(text: str, start: int) -> int:
    while start < len(text) and text[start] == " ":
        start += 1
    return start


def _previous_visible(text: str, start: int) -> Tuple[int, bool]:
    """Walk left over whitespace; report the index reached and any newline crossed."""
    crossed_newline = False
    while start >= 0 and text[start].isspace():
        crossed_newline = crossed_newline or text[start] == "\n"
        start -= 1
    return start, crossed_newline


def _is_letter(char: str) -> bool:
    return LETTER_RE.fullmatch(char) is not None


def _opens_new_sentence(text: str, mark_index: int) -> bool:
    prev, crossed_newline = _previous_visible(text, mark_index - 1)
    return (
        prev < 0
        or text[prev] in _SENTENCE_END
        or crossed_newline
        or LETTER_RE.search(text, 0, mark_index) is None
    )


def _lowered_after(text: str, mark_index: int) -> str | None:
    """Return ``text`` with the letter after the mark lowercased, if due."""
    nxt = _next_non_space(text, mark_index + 1)
    if nxt >= len(text) or not _is_letter(text[nxt]):
        return None
    if _opens_new_sentence(text, mark_index):
        return None
    char = text[nxt]
    if char == char.upper() and char != char.lower():
        return text[:nxt] + char.lower() + text[nxt + 1 :]
    return None


def _normalize_with_count(text: str) -> Tuple[str, int]:
    lowered = 0
    for mark in INVERTED_MARKS:
        i = 0
        while i < len(text):
            if text[i] == mark:
                updated = _lowered_after(text, i)
                if updated is not None:
                    text, lowered = updated, lowered + 1
            i += 1
    return text, lowered


def normalize_spanish_punctuation(text: str) -> str:
    """Lowercase the clause after a mid-sentence ``¿``/``¡``."""
    return _normalize_with_count(text)[0]


class _PunctuationNormalizePass:
    name = "punctuation_normalize"
    input_type = list
    output_type = list

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, list):
            return a
        results = [_normalize_with_count(chunk) for chunk in a.payload]
        chunks: List[str] = [text for text, _ in results]
        lowered = sum(count for _, count in results)
        return a.with_metrics(chunks, self.name, {"lowercased": lowered})


punctuation_normalize = register(_PunctuationNormalizePass())


__all__ = ["INVERTED_MARKS", "normalize_spanish_punctuation", "punctuation_normalize"]
