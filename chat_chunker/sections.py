"""Boundary finders for markdown sections and list runs.

Both finders only look at the *top* of the remaining text: a section or
list is reported only when it starts there.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence

from chat_chunker.strategies.markers import (
    ListMarkerStrategy,
    default_marker_strategy,
)

MARKDOWN_HEADER_RE = re.compile(r"^(?P<header>\*[^*\n]+\*|_[^_\n]+_)\s*\n")

ListKind = Literal["numbered", "bullet"]


@dataclass(frozen=True)
class MarkdownSection:
    header: str
    content: str
    full_section: str


@dataclass(frozen=True)
class ListSection:
    """Contiguous run of list lines, as offsets into the scanned text."""

    start: int
    end: int
    kind: ListKind


def starts_with_markdown_header(text: str) -> bool:
    return MARKDOWN_HEADER_RE.match(text) is not None


def _section_end(after_header: str, strategy: ListMarkerStrategy) -> int:
    break_at = after_header.find("\n\n")
    if break_at == -1:
        return len(after_header)
    following = after_header[break_at + 2 :]
    if starts_with_markdown_header(following):
        return break_at
    if strategy.starts_with_bullet(following):
        return len(after_header)
    return break_at


def find_markdown_section(
    text: str, strategy: ListMarkerStrategy | None = None
) -> Optional[MarkdownSection]:
    """Return the ``*header*`` / ``_header_`` section opening ``text``.

    The body runs to the first blank line, unless what follows the blank
    line is a bullet list, in which case the rest of the text belongs to
    the section.
    """
    match = MARKDOWN_HEADER_RE.match(text)
    if match is None:
        return None
    after_header = text[match.end() :]
    end = _section_end(after_header, strategy or default_marker_strategy())
    content = after_header[:end]
    return MarkdownSection(
        header=match.group("header"),
        content=content,
        full_section=match.group(0) + content,
    )


# ---------------------------------------------------------------------------
# List runs
# ---------------------------------------------------------------------------


def _next_non_empty(lines: Sequence[str], start: int) -> Optional[str]:
    return next((line for line in lines[start:] if line.strip()), None)


def _joined_length(lines: Sequence[str], last: int) -> int:
    return len("\n".join(lines[: last + 1]))


def _numbered_run_end(lines: List[str], strategy: ListMarkerStrategy) -> int:
    end_line, in_list = -1, False
    for i, line in enumerate(lines):
        if strategy.is_numbered_line(line):
            end_line, in_list = i, True
        elif not in_list:
            continue
        elif strategy.is_bullet_line(line):
            end_line = i
        elif not line.strip():
            upcoming = _next_non_empty(lines, i + 1)
            if upcoming is None or not (
                strategy.is_numbered_line(upcoming) or strategy.is_bullet_line(upcoming)
            ):
                break
        else:
            break
    return _joined_length(lines, end_line) if end_line >= 0 else 0


def _bullet_run_end(lines: List[str], strategy: ListMarkerStrategy) -> int:
    end, in_list = 0, False
    for i, line in enumerate(lines):
        if strategy.starts_with_bullet(line):
            end, in_list = _joined_length(lines, i), True
        elif not in_list:
            continue
        elif not line.strip():
            upcoming = lines[i + 1] if i + 1 < len(lines) else None
            if upcoming is None or not strategy.starts_with_bullet(upcoming):
                break
        else:
            break
    return end


def find_list_section(
    text: str, strategy: ListMarkerStrategy | None = None
) -> Optional[ListSection]:
    """Locate the numbered or bullet list that opens ``text``.

    Numbered runs absorb bullet sub-items and survive blank lines when the
    next non-blank line is another list line. Bullet runs only survive a
    blank line directly followed by another bullet.
    """
    strategy = strategy or default_marker_strategy()
    if strategy.starts_with_number(text):
        return ListSection(0, _numbered_run_end(text.split("\n"), strategy), "numbered")
    if strategy.starts_with_bullet(text):
        return ListSection(0, _bullet_run_end(text.split("\n"), strategy), "bullet")
    return None


__all__ = [
    "MARKDOWN_HEADER_RE",
    "ListSection",
    "MarkdownSection",
    "find_list_section",
    "find_markdown_section",
    "starts_with_markdown_header",
]
