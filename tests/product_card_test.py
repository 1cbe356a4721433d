import pytest

from chat_chunker.processors.base import SplitResult
from chat_chunker.processors.product_cards import (
    extract_trailing_question,
    process_product_card_lists,
)


@pytest.mark.parametrize(
    "card, expected",
    [
        pytest.param(
            "🛍️ Gorra\n💵 $50.000\n¿Te gusta?",
            ("🛍️ Gorra\n💵 $50.000", "¿Te gusta?"),
            id="question-line",
        ),
        pytest.param(
            "✅ Ligera y cómoda. ¿Te gusta así? 😎",
            ("✅ Ligera y cómoda.", "¿Te gusta así? 😎"),
            id="inline-question",
        ),
        pytest.param("¿Te gusta?", ("¿Te gusta?",), id="question-only"),
    ],
)
def test_extract_trailing_question(card, expected):
    assert extract_trailing_question(card) == expected


def test_card_without_question():
    assert extract_trailing_question("🛍️ Gorra\n💵 $50.000") is None


def test_emoji_cards_become_chunks():
    text = "Mira:\n\n1. 🛍️ Gorra\n💵 $50.000\n\n2. 🛍️ Bolso\n💵 $90.000\n¿Cuál te gusta?"
    result = process_product_card_lists(text, [])
    assert result == SplitResult(
        ("Mira:", "🛍️ Gorra\n💵 $50.000", "🛍️ Bolso\n💵 $90.000", "¿Cuál te gusta?"),
        "",
    )


def test_bold_card_keeps_its_asterisks():
    text = "Mira:\n\n**1. 🛍️ Gorra:** 💵 $50.000\n\n**2. 🛍️ Bolso:** 💵 $90.000"
    result = process_product_card_lists(text, [])
    assert result == SplitResult(
        ("Mira:", "**🛍️ Gorra:** 💵 $50.000", "**🛍️ Bolso:** 💵 $90.000"),
        "",
    )


def test_markdown_title_cards_become_chunks():
    text = "Opciones:\n\n1. *Gorra*\n💵 Precio: $50.000\n\n2. *Bolso*\n💵 Precio: $90.000"
    result = process_product_card_lists(text, [])
    assert result == SplitResult(
        ("Opciones:", "*Gorra*\n💵 Precio: $50.000", "*Bolso*\n💵 Precio: $90.000"),
        "",
    )


def test_text_after_blank_line_is_left_over():
    text = "Mira:\n\n1. 🛍️ Gorra\n💵 $50.000\n\nEscríbeme si quieres otra."
    result = process_product_card_lists(text, [])
    assert result is not None
    assert result.chunks == ("Mira:", "🛍️ Gorra\n💵 $50.000")
    assert result.remaining == "Escríbeme si quieres otra."


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("1. Rojo\n2. Azul", id="plain-list"),
        pytest.param("1. *Gorra*\nSin precio", id="title-without-metadata"),
    ],
)
def test_not_a_card_list(text):
    assert process_product_card_lists(text, []) is None


def test_paragraph_between_cards_ends_the_run():
    text = "Mira:\n\n1. 🛍️ Gorra\n💵 $50.000\n\nNota aparte.\n\n2. 🛍️ Bolso\n💵 $90.000"
    result = process_product_card_lists(text, [])
    assert result == SplitResult(
        ("Mira:", "🛍️ Gorra\n💵 $50.000"),
        "Nota aparte.\n\n2. 🛍️ Bolso\n💵 $90.000",
    )
