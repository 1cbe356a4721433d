"""Inline list normalization passes.

Chat replies often run a numbered list or a product-card list on a single
line (``Datos: 1. Nombre 2. Email``). These passes put each item on its own
line before splitting so the list processors can see line-based structure.
"""

from __future__ import annotations

import re
from typing import Tuple

import regex

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.framework import Artifact, register

# Shopping bag emoji; the variation selector is optional in the wild.
SHOPPING_BAG = "\U0001F6CD\uFE0F?"

# ---------------------------------------------------------------------------
# Inline numbered lists
# ---------------------------------------------------------------------------

_ALREADY_FORMATTED_RE = re.compile(r"\d{1,2}\.\s+[^\n]+\n\s*\d{1,2}\.\s+")
_INLINE_AFTER_COLON_RE = re.compile(r":[^\n]*\d{1,2}\.\s+[^\n]+[ ]+\d{1,2}\.\s+")
_INLINE_AFTER_PUNCT_RE = re.compile(r"[?!][^\n]*\s+1\.\s+[^\n]+[ ]+2\.\s+")
_INLINE_ITEM_RE = re.compile(r"(?P<before>[:\s?!])(?P<num>\d{1,2})\.\s+(?P<after>[^\n])")


def _has_inline_numbered_list(text: str) -> bool:
    if _ALREADY_FORMATTED_RE.search(text):
        return False
    return bool(_INLINE_AFTER_COLON_RE.search(text) or _INLINE_AFTER_PUNCT_RE.search(text))


def _break_item(match: re.Match[str], max_number: int) -> str:
    before, num, after = match.group("before", "num", "after")
    start = match.start()
    if int(num) > max_number:
        return match.group(0)
    if start > 0 and match.string[start - 1].isdigit():
        return match.group(0)
    if num == "1" and before == ":":
        return f":\n1. {after}"
    if not before.strip() or before == ":":
        return f"\n{num}. {after}"
    return match.group(0)


def _normalize_numbered(text: str, config: SplitterConfig) -> Tuple[str, int]:
    if not _has_inline_numbered_list(text):
        return text, 0
    broken = 0

    def replace(match: re.Match[str]) -> str:
        nonlocal broken
        out = _break_item(match, config.max_list_number)
        broken += out != match.group(0)
        return out

    return _INLINE_ITEM_RE.sub(replace, text), broken


def normalize_inline_numbered_list(
    text: str, config: SplitterConfig = DEFAULT_CONFIG
) -> str:
    """Move each ``N. item`` of an inline numbered list onto its own line.

    Text whose items already start lines is returned unchanged, as are
    numbers above ``config.max_list_number`` and numbers glued to a
    preceding digit.
    """
    return _normalize_numbered(text, config)[0]


# ---------------------------------------------------------------------------
# Inline product cards
# ---------------------------------------------------------------------------

_CARD_MARKER = rf"(?:\*{{1,2}})?\d+\.\s*{SHOPPING_BAG}"
_INLINE_CARD_RES = (
    regex.compile(rf"{_CARD_MARKER}[^\n]*\s+{_CARD_MARKER}"),
    regex.compile(
        r"\d+\.\s+\*{1,2}[^*\n]+\*{1,2}\s+\p{Extended_Pictographic}[^\n]+\s+"
        r"(?:\*{1,2})?\d+\.\s+"
    ),
    regex.compile(
        rf"{_CARD_MARKER}[^\n]+\p{{Extended_Pictographic}}[^\n]+"
        r"\p{Extended_Pictographic}"
    ),
)
_NEXT_CARD_RE = regex.compile(
    rf"(?P<punct>[.!✅])\s+(?P<card>\*{{0,2}}\d+\.\s+(?:{SHOPPING_BAG}|\*{{1,2}}))"
)
_SHOPPING_BAG_RE = regex.compile(SHOPPING_BAG)
_METADATA_EMOJI_RE = regex.compile(
    r"(?P<before>[^\n])\s+(?P<emoji>\p{Extended_Pictographic})"
)
_NUMBER_MARKER_TAIL_RE = re.compile(r"\d\.\Z")
_TRAILING_QUESTION_RE = regex.compile(
    r"(?P<punct>[.!])\s+(?P<question>¿[^\n?]*\?(?:\s*[^\s\n]+)?)$",
    regex.MULTILINE,
)


def _has_inline_product_cards(text: str) -> bool:
    return any(pattern.search(text) for pattern in _INLINE_CARD_RES)


def _break_metadata_lines(products: str) -> Tuple[str, int]:
    broken = 0

    def replace(match: regex.Match) -> str:
        nonlocal broken
        if _SHOPPING_BAG_RE.match(match.group("emoji")) and _NUMBER_MARKER_TAIL_RE.search(
            products, 0, match.end("before")
        ):
            return match.group(0)
        broken += 1
        return f"{match.group('before')}\n{match.group('emoji')}"

    return _METADATA_EMOJI_RE.sub(replace, products), broken


def _normalize_cards(text: str) -> Tuple[str, int]:
    if not _has_inline_product_cards(text):
        return text, 0
    result, cards = _NEXT_CARD_RE.subn(r"\g<punct>\n\g<card>", text)
    first_bag = _SHOPPING_BAG_RE.search(result)
    lines = 0
    if first_bag is not None:
        head, products = result[: first_bag.start()], result[first_bag.start() :]
        products, lines = _break_metadata_lines(products)
        result = head + products
    result = _TRAILING_QUESTION_RE.sub(
        lambda m: f"{m.group('punct')}\n{m.group('question').strip()}", result, count=1
    )
    return result, cards + lines


def normalize_inline_product_card_list(text: str) -> str:
    """Give every product card and metadata line of an inline list its own line.

    Subsequent ``N. 🛍️`` markers, emoji-led metadata (price, color, size)
    and the first trailing ``¿...?`` question each start a new line.
    """
    return _normalize_cards(text)[0]


class _InlineListNormalizePass:
    name = "inline_list_normalize"
    input_type = str
    output_type = str

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, str):
            return a
        text, broken = _normalize_numbered(a.payload, a.config)
        return a.with_metrics(text, self.name, {"numbered_items_broken": broken})


class _InlineProductCardNormalizePass:
    name = "inline_product_card_normalize"
    input_type = str
    output_type = str

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, str):
            return a
        text, broken = _normalize_cards(a.payload)
        return a.with_metrics(text, self.name, {"cards_broken": broken})


inline_list_normalize = register(_InlineListNormalizePass())
inline_product_card_normalize = register(_InlineProductCardNormalizePass())


__all__ = [
    "SHOPPING_BAG",
    "inline_list_normalize",
    "inline_product_card_normalize",
    "normalize_inline_numbered_list",
    "normalize_inline_product_card_list",
]
