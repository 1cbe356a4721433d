"""List marker heuristics packaged as a pure strategy."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Pattern


@dataclass(frozen=True)
class ListMarkerStrategy:
    """Encapsulate numbered and bullet list marker checks as pure callables."""

    bullet_chars: str = "-•"
    numbered_marker: str = r"\d{1,2}\.\s+"
    bullet_chars_esc: str = field(init=False)
    numbered_start_re: Pattern[str] = field(init=False)
    bullet_start_re: Pattern[str] = field(init=False)
    list_start_re: Pattern[str] = field(init=False)
    numbered_line_re: Pattern[str] = field(init=False)
    bullet_line_re: Pattern[str] = field(init=False)
    numbered_split_re: Pattern[str] = field(init=False)
    bullet_split_re: Pattern[str] = field(init=False)

    def __post_init__(self) -> None:
        bullet_chars_esc = re.escape(self.bullet_chars)
        bullet_marker = rf"[{bullet_chars_esc}]\s+"
        compiled = {
            "bullet_chars_esc": bullet_chars_esc,
            "numbered_start_re": re.compile(rf"^{self.numbered_marker}"),
            "bullet_start_re": re.compile(rf"^{bullet_marker}"),
            "list_start_re": re.compile(
                rf"^(?:{self.numbered_marker}|{bullet_marker})"
            ),
            "numbered_line_re": re.compile(rf"^\s*{self.numbered_marker}"),
            "bullet_line_re": re.compile(rf"^\s*{bullet_marker}"),
            "numbered_split_re": re.compile(rf"\n(?={self.numbered_marker})"),
            "bullet_split_re": re.compile(rf"\n(?={bullet_marker})"),
        }
        for name, value in compiled.items():
            object.__setattr__(self, name, value)

    # ------------------------------------------------------------------
    # Leading marker checks (text is stripped first)
    # ------------------------------------------------------------------
    def starts_with_number(self, text: str) -> bool:
        """Return ``True`` when stripped ``text`` opens with ``N. ``."""

        return self.numbered_start_re.match(text.strip()) is not None

    def starts_with_bullet(self, text: str) -> bool:
        """Return ``True`` when stripped ``text`` opens with ``- `` or ``• ``."""

        return self.bullet_start_re.match(text.strip()) is not None

    def starts_with_list_marker(self, text: str) -> bool:
        return self.list_start_re.match(text.strip()) is not None

    # ------------------------------------------------------------------
    # Raw line checks (leading indentation allowed)
    # ------------------------------------------------------------------
    def is_numbered_line(self, line: str) -> bool:
        return self.numbered_line_re.match(line) is not None

    def is_bullet_line(self, line: str) -> bool:
        return self.bullet_line_re.match(line) is not None

    # ------------------------------------------------------------------
    # Item splitting
    # ------------------------------------------------------------------
    def split_numbered_items(self, text: str) -> List[str]:
        """Split ``text`` before every line that opens a numbered item."""

        return [item for item in self.numbered_split_re.split(text) if item.strip()]

    def split_bullet_items(self, text: str) -> List[str]:
        """Split ``text`` before every line that opens a bullet item."""

        return [item for item in self.bullet_split_re.split(text) if item.strip()]


def _resolve(strategy: ListMarkerStrategy | None) -> ListMarkerStrategy:
    return strategy or DEFAULT_STRATEGY


def starts_with_number(text: str, strategy: ListMarkerStrategy | None = None) -> bool:
    return _resolve(strategy).starts_with_number(text)


def starts_with_bullet(text: str, strategy: ListMarkerStrategy | None = None) -> bool:
    return _resolve(strategy).starts_with_bullet(text)


def starts_with_list_marker(
    text: str, strategy: ListMarkerStrategy | None = None
) -> bool:
    return _resolve(strategy).starts_with_list_marker(text)


DEFAULT_STRATEGY = ListMarkerStrategy()

BULLET_CHARS = DEFAULT_STRATEGY.bullet_chars
BULLET_CHARS_ESC = DEFAULT_STRATEGY.bullet_chars_esc


def default_marker_strategy() -> ListMarkerStrategy:
    """Return the immutable default list marker strategy."""

    return DEFAULT_STRATEGY


__all__ = [
    "ListMarkerStrategy",
    "BULLET_CHARS",
    "BULLET_CHARS_ESC",
    "DEFAULT_STRATEGY",
    "default_marker_strategy",
    "starts_with_number",
    "starts_with_bullet",
    "starts_with_list_marker",
]
