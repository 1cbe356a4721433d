"""Offset queries over the remaining text.

Both helpers are total: offsets outside ``[0, len(text))`` answer ``False``.
"""

from __future__ import annotations

from functools import reduce

from chat_chunker.strategies.markers import default_marker_strategy


def _in_bounds(text: str, position: int) -> bool:
    return 0 <= position < len(text)


def _line_at(text: str, position: int) -> str:
    start = text.rfind("\n", 0, position) + 1
    end = text.find("\n", position)
    return text[start:] if end == -1 else text[start:end]


def is_position_in_bullet_line(text: str, position: int) -> bool:
    """Return ``True`` when ``position`` sits on a ``-``/``•`` bullet line."""
    if not _in_bounds(text, position):
        return False
    line = _line_at(text, position)
    return default_marker_strategy().starts_with_bullet(line)


def _depth_step(depth: int, char: str) -> int:
    if char == "(":
        return depth + 1
    if char == ")":
        return max(depth - 1, 0)
    return depth


def is_position_inside_parentheses(text: str, position: int) -> bool:
    """Return ``True`` when an unclosed ``(`` precedes ``position``.

    Stray closing parentheses never drive the depth below zero.
    """
    if not _in_bounds(text, position):
        return False
    return reduce(_depth_step, text[:position], 0) > 0


__all__ = ["is_position_in_bullet_line", "is_position_inside_parentheses"]
