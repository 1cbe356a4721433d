from chat_chunker.config import SplitterConfig
from chat_chunker.framework import Artifact
from chat_chunker.passes.list_normalize import (
    inline_list_normalize,
    inline_product_card_normalize,
    normalize_inline_numbered_list,
    normalize_inline_product_card_list,
)

CARDS = "Opciones: **1. 🛍️ Gorra** 💵 $50.000 🌈 Rojo. **2. 🛍️ Bolso** 💵 $90.000"
CARDS_BROKEN = "Opciones: **1. 🛍️ Gorra**\n💵 $50.000\n🌈 Rojo.\n**2. 🛍️ Bolso**\n💵 $90.000"


def _run(pass_, text, config=None):
    meta = {"config": config} if config else None
    result = pass_(Artifact(payload=text, meta=meta))
    return result.payload, result.meta["metrics"][pass_.name]


def test_inline_numbered_list_is_broken_into_lines():
    text, metrics = _run(inline_list_normalize, "Datos: 1. Nombre 2. Email 3. Cédula")
    assert text == "Datos:\n1. Nombre\n2. Email\n3. Cédula"
    assert metrics == {"numbered_items_broken": 3}


def test_colon_glued_to_first_number():
    text = "Necesito estos datos:1. Nombre completo 2. Email"
    assert normalize_inline_numbered_list(text) == "Necesito estos datos:\n1. Nombre completo\n2. Email"


def test_numbers_above_limit_stay_inline():
    assert normalize_inline_numbered_list("Paso: 1. Abrir 25. Cerrar") == "Paso:\n1. Abrir 25. Cerrar"


def test_list_limit_comes_from_config():
    text, metrics = _run(
        inline_list_normalize,
        "Paso: 1. Abrir 25. Cerrar",
        SplitterConfig(max_list_number=30),
    )
    assert text == "Paso:\n1. Abrir\n25. Cerrar"
    assert metrics == {"numbered_items_broken": 2}


def test_formatted_list_is_untouched():
    text = "Datos:\n1. Nombre\n2. Email"
    assert _run(inline_list_normalize, text) == (text, {"numbered_items_broken": 0})


def test_plain_sentence_is_untouched():
    text = "Tengo 2. Bueno, ya veremos."
    assert normalize_inline_numbered_list(text) == text


def test_inline_product_cards_are_broken_into_lines():
    text, metrics = _run(inline_product_card_normalize, CARDS)
    assert text == CARDS_BROKEN
    assert metrics == {"cards_broken": 4}


def test_trailing_question_moves_to_its_own_line():
    text = normalize_inline_product_card_list(f"{CARDS}. ¿Te gusta?")
    assert text == f"{CARDS_BROKEN}.\n¿Te gusta?"


def test_text_without_cards_is_untouched():
    text = "Hola 💵 mundo. ¿Te gusta?"
    assert normalize_inline_product_card_list(text) == text


def test_non_text_payload_passes_through():
    artifact = Artifact(payload=["ya", "dividido"])
    assert inline_list_normalize(artifact) is artifact
    assert inline_product_card_normalize(artifact) is artifact


def test_emoji_after_size_list_period_starts_a_line():
    text, metrics = _run(
        inline_product_card_normalize,
        "Opción: **1. 🛍️ Zapatillas** 💵 $659.000 👟 Talla: 38, 42, 43. ✅ Retro y cómodas.",
    )
    assert text == (
        "Opción: **1. 🛍️ Zapatillas**\n💵 $659.000\n👟 Talla: 38, 42, 43.\n✅ Retro y cómodas."
    )
    assert metrics == {"cards_broken": 3}
