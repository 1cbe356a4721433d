"""Predicate coverage for :mod:`chat_chunker.strategies.markers`.

Expected marker inventory:
* ``bullet_chars`` => "-•"
* ``numbered_marker`` => ``\\d{1,2}\\.\\s+``
"""

from __future__ import annotations

import pytest

from chat_chunker.strategies.markers import (
    ListMarkerStrategy,
    default_marker_strategy,
    starts_with_bullet,
    starts_with_list_marker,
    starts_with_number,
)


_STRATEGY = default_marker_strategy()


@pytest.mark.parametrize(
    ("text", "expected"),
    (
        pytest.param("1. Uno", True, id="single-digit"),
        pytest.param("  12. Doce", True, id="indented-two-digits"),
        pytest.param("123. Muchos", False, id="three-digits"),
        pytest.param("1.5 kilos", False, id="decimal"),
        pytest.param("- Rojo", False, id="bullet"),
    ),
)
def test_starts_with_number(text: str, expected: bool) -> None:
    assert _STRATEGY.starts_with_number(text) is expected
    assert starts_with_number(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    (
        pytest.param("- Rojo", True, id="hyphen"),
        pytest.param("  • Azul", True, id="indented-dot"),
        pytest.param("-Rojo", False, id="no-space"),
        pytest.param("* Verde", False, id="asterisk"),
    ),
)
def test_starts_with_bullet(text: str, expected: bool) -> None:
    assert starts_with_bullet(text) is expected


def test_starts_with_list_marker() -> None:
    assert starts_with_list_marker("3. Tres")
    assert starts_with_list_marker("• Tres")
    assert not starts_with_list_marker("Tres")


def test_raw_line_checks_allow_indentation() -> None:
    assert _STRATEGY.is_numbered_line("  3. Tres")
    assert _STRATEGY.is_bullet_line("\t- Tres")
    assert not _STRATEGY.is_bullet_line("Tres - cuatro")


def test_split_numbered_items_keeps_continuations() -> None:
    assert _STRATEGY.split_numbered_items("1. a\n2. b\nsigue") == ["1. a", "2. b\nsigue"]


def test_split_bullet_items_ignores_nested_lines() -> None:
    assert _STRATEGY.split_bullet_items("- a\n  - b\n• c") == ["- a\n  - b", "• c"]


def test_custom_bullet_inventory() -> None:
    strategy = ListMarkerStrategy(bullet_chars="*")
    assert strategy.starts_with_bullet("* Verde")
    assert not strategy.starts_with_bullet("- Rojo")
    assert starts_with_bullet("* Verde", strategy)


def test_default_strategy_is_shared() -> None:
    assert default_marker_strategy() is default_marker_strategy()
