from __future__ import annotations

import pytest

from chat_chunker.sections import (
    ListSection,
    find_list_section,
    find_markdown_section,
    starts_with_markdown_header,
)
from chat_chunker.strategies.markers import ListMarkerStrategy


def test_numbered_list_after_leading_newline() -> None:
    text = "\n1. Primera opción\n2. Segunda opción"
    assert find_list_section(text) == ListSection(0, len(text), "numbered")


def test_bullet_list_after_leading_newline() -> None:
    text = "\n- Primera opción\n- Segunda opción"
    assert find_list_section(text) == ListSection(0, len(text), "bullet")


@pytest.mark.parametrize(
    "text, expected_end",
    [
        pytest.param(
            "1. Uno\n- detalle\n\n2. Dos\nFin",
            len("1. Uno\n- detalle\n\n2. Dos"),
            id="numbered-absorbs-bullets-and-blank",
        ),
        pytest.param(
            "1. Uno\n2. Dos\n\nTexto final",
            len("1. Uno\n2. Dos"),
            id="numbered-ends-at-text",
        ),
        pytest.param(
            "1. Uno\n2. Dos\n\n",
            len("1. Uno\n2. Dos"),
            id="numbered-trailing-blank",
        ),
    ],
)
def test_numbered_run_end(text: str, expected_end: int) -> None:
    section = find_list_section(text)
    assert section is not None
    assert section.kind == "numbered"
    assert section.end == expected_end


@pytest.mark.parametrize(
    "text, expected_end",
    [
        pytest.param("- a\n- b\n\nTexto", len("- a\n- b"), id="blank-then-text"),
        pytest.param("- a\n\n- b", len("- a\n\n- b"), id="blank-then-bullet"),
        pytest.param("• a\n• b\nTexto", len("• a\n• b"), id="dot-bullets"),
    ],
)
def test_bullet_run_end(text: str, expected_end: int) -> None:
    section = find_list_section(text)
    assert section is not None
    assert section.kind == "bullet"
    assert section.end == expected_end


def test_no_list_at_top() -> None:
    assert find_list_section("Hola\n- a\n- b") is None


def test_custom_strategy_bullets() -> None:
    strategy = ListMarkerStrategy(bullet_chars="*")
    text = "* a\n* b\nFin"
    assert find_list_section(text, strategy) == ListSection(0, len("* a\n* b"), "bullet")
    assert find_list_section("- a\n- b", strategy) is None


def test_markdown_section_ends_at_blank_line() -> None:
    section = find_markdown_section("*Título*\nLínea uno\n\nOtra cosa")
    assert section is not None
    assert section.header == "*Título*"
    assert section.content == "Línea uno"
    assert section.full_section == "*Título*\nLínea uno"


def test_markdown_section_keeps_following_bullets() -> None:
    text = "*Título*\nLínea\n\n- a\n- b"
    section = find_markdown_section(text)
    assert section is not None
    assert section.content == "Línea\n\n- a\n- b"
    assert section.full_section == text


def test_markdown_section_stops_before_next_header() -> None:
    section = find_markdown_section("_Uno_\nA\n\n*Dos*\nB")
    assert section is not None
    assert section.header == "_Uno_"
    assert section.content == "A"


@pytest.mark.parametrize(
    "text",
    ["Hola\nmundo", "*Título*", "**Negrita**\ntexto", "Texto *con* énfasis\n"],
)
def test_not_a_markdown_section(text: str) -> None:
    assert find_markdown_section(text) is None
    assert not starts_with_markdown_header(text)
