"""Centralized pattern tables for period protection decisions.

Every span that may contain a period which is *not* a sentence boundary is
described here as data: URLs, plain domains, emails, formatted numbers,
list markers, abbreviations, initialisms and bullet items. The period
processor recomputes ranges from these tables on every call; nothing here
holds mutable state.

Design philosophy:
- Declarative over imperative: patterns are data, not nested conditionals
- Scope is explicit: a pattern protects either its whole match or only the
  trailing period of the match
- Testable in isolation: each pattern can be unit-tested independently

Usage:
    ranges = find_protected_ranges(text)
    if not is_position_protected(index, ranges):
        ...  # the period at ``index`` may end a sentence
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence, Tuple


class ProtectionScope(Enum):
    """Which part of a match is shielded from sentence splitting."""

    FULL_MATCH = "full_match"  # every offset of the match
    TRAILING_PERIOD = "trailing_period"  # only the final character


@dataclass(frozen=True)
class ProtectedRange:
    """Half-open ``[start, end)`` span over the current remaining text."""

    start: int
    end: int

    def __contains__(self, position: object) -> bool:
        return isinstance(position, int) and self.start <= position < self.end


@dataclass(frozen=True)
class ProtectedPattern:
    """A regex whose matches must not be cut at an internal period.

    Attributes:
        name: Unique identifier used in logging and tests
        match: Compiled regex, scanned with ``finditer``
        scope: Whether the whole match or just its final period is protected
        description: Human-readable explanation
    """

    name: str
    match: re.Pattern[str]
    scope: ProtectionScope
    description: str

    def ranges(self, text: str) -> Iterator[ProtectedRange]:
        """Yield the protected span of every match in ``text``."""
        for found in self.match.finditer(text):
            if self.scope is ProtectionScope.TRAILING_PERIOD:
                yield ProtectedRange(found.end() - 1, found.end())
            else:
                yield ProtectedRange(found.start(), found.end())


# ---------------------------------------------------------------------------
# Static lookup tables
# ---------------------------------------------------------------------------

ABBREVIATIONS: Tuple[str, ...] = (
    "etc",
    "e.g",
    "i.e",
    "dr",
    "mr",
    "mrs",
    "ms",
    "prof",
    "sr",
    "jr",
    "inc",
    "ltd",
    "co",
    "corp",
)

DOMAIN_SUFFIXES: Tuple[str, ...] = (
    "com",
    "co",
    "net",
    "org",
    "edu",
    "gov",
    "io",
    "ai",
    "app",
    "dev",
    "ly",
    "me",
    "tv",
    "info",
    "biz",
    "tech",
    "store",
    "shop",
    "online",
    "site",
    "web",
    "blog",
    "news",
    "uk",
    "ca",
    "au",
    "de",
    "fr",
    "es",
    "it",
    "nl",
    "mx",
    "ar",
    "br",
    "cl",
    "pe",
    "ve",
    "uy",
    "py",
    "bo",
    "gt",
    "hn",
    "sv",
    "cr",
    "pa",
    "ni",
    "do",
    "cu",
    "pr",
)

RESPONSE_PROMPTS: Tuple[str, ...] = ("Puedes responder con:", "puedes responder con:")

# ASCII word boundaries; accented letters count as separators here.
_WORD_START = r"(?<![A-Za-z0-9_])"
_WORD_END = r"(?![A-Za-z0-9_])"


def _alternation(words: Iterable[str]) -> str:
    return "|".join(re.escape(w) for w in words)


# ---------------------------------------------------------------------------
# Default patterns
# ---------------------------------------------------------------------------

DEFAULT_PROTECTED_PATTERNS: Tuple[ProtectedPattern, ...] = (
    ProtectedPattern(
        name="url",
        match=re.compile(r"https?://[^\s]*[^\s.!?,;:]|www\.[^\s]*[^\s.!?,;:]"),
        scope=ProtectionScope.FULL_MATCH,
        description="http(s) and www URLs, minus trailing punctuation",
    ),
    ProtectedPattern(
        name="plain_domain",
        match=re.compile(
            rf"{_WORD_START}[a-zA-Z0-9][a-zA-Z0-9\-]*(?:\.[a-zA-Z0-9][a-zA-Z0-9\-]*)*"
            rf"\.(?:{_alternation(DOMAIN_SUFFIXES)})(?:\.[a-z]{{2,3}})?{_WORD_END}",
            re.IGNORECASE,
        ),
        scope=ProtectionScope.FULL_MATCH,
        description="Bare domains such as nike.com.co",
    ),
    ProtectedPattern(
        name="email",
        match=re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}"),
        scope=ProtectionScope.FULL_MATCH,
        description="Email addresses",
    ),
    ProtectedPattern(
        name="formatted_number",
        match=re.compile(r"\$?\d{1,3}(?:\.\d{3})+(?:\.\d+)?|\d+(?:\.\d+)+"),
        scope=ProtectionScope.FULL_MATCH,
        description="Thousands-separated amounts and decimals ($1.000.000, 15.5)",
    ),
    ProtectedPattern(
        name="numbered_list_marker",
        match=re.compile(r"(?:^|\n)\s*\d+\."),
        scope=ProtectionScope.TRAILING_PERIOD,
        description="Period of a leading list number (1., 2.)",
    ),
    ProtectedPattern(
        name="abbreviation",
        match=re.compile(
            rf"{_WORD_START}(?:{_alternation(ABBREVIATIONS)})\.", re.IGNORECASE
        ),
        scope=ProtectionScope.TRAILING_PERIOD,
        description="Known abbreviations (etc., Dr., Inc.)",
    ),
    ProtectedPattern(
        name="initialism",
        match=re.compile(rf"{_WORD_START}[A-Z]\.(?:[A-Z]\.)+"),
        scope=ProtectionScope.FULL_MATCH,
        description="Dotted initials (D.C., S.A., E.U.A.)",
    ),
    ProtectedPattern(
        name="bullet_item_period",
        match=re.compile(r"(?:^|\n)\s*[\-•]\s+[^\n]+\.", re.MULTILINE),
        scope=ProtectionScope.TRAILING_PERIOD,
        description="Closing period of a bullet item",
    ),
)


def find_protected_ranges(
    text: str, patterns: Sequence[ProtectedPattern] = DEFAULT_PROTECTED_PATTERNS
) -> list[ProtectedRange]:
    """Collect the protected ranges of every pattern over ``text``."""
    return [r for pattern in patterns for r in pattern.ranges(text)]


def is_position_protected(position: int, ranges: Iterable[ProtectedRange]) -> bool:
    return any(position in r for r in ranges)


__all__ = [
    "ABBREVIATIONS",
    "DEFAULT_PROTECTED_PATTERNS",
    "DOMAIN_SUFFIXES",
    "RESPONSE_PROMPTS",
    "ProtectedPattern",
    "ProtectedRange",
    "ProtectionScope",
    "find_protected_ranges",
    "is_position_protected",
]
