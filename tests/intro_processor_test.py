import pytest

from chat_chunker.config import SplitterConfig
from chat_chunker.processors.base import SplitResult
from chat_chunker.processors.intro import (
    has_question_with_options_pattern,
    process_intro_with_list,
    process_intro_with_long_paragraphs,
    process_question_with_list,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("¿Cuál te gusta?\n\nPuedes responder con:\n- A\n- B", True),
        ("¿Cuál te gusta?\npuedes responder con:\n- A", True),
        ("¿Cuál te gusta?\n\nOpciones:\n- A\n- B", False),
        ("Puedes responder con:\n- A", False),
    ],
)
def test_has_question_with_options_pattern(text, expected):
    assert has_question_with_options_pattern(text) is expected


def test_intro_before_bullets():
    result = process_intro_with_list("Opciones:\n- Rojo\n- Azul", [])
    assert result == SplitResult(("Opciones:",), "- Rojo\n- Azul")


def test_intro_before_numbered_list():
    result = process_intro_with_list("Datos:\n\n1. Nombre\n2. Email", [])
    assert result == SplitResult(("Datos:",), "1. Nombre\n2. Email")


def test_intro_with_response_prompt():
    result = process_intro_with_list("Datos necesarios: puedes responder con:\n- Nombre\n- Email", [])
    assert result == SplitResult(("Datos necesarios: puedes responder con:",), "- Nombre\n- Email")


def test_long_intro_declines():
    intro = "Te cuento " + "muchas cosas " * 12 + "así:"
    assert process_intro_with_list(f"{intro}\n- Rojo", []) is None
    loose = SplitterConfig(max_intro_length=500)
    assert process_intro_with_list(f"{intro}\n- Rojo", [], loose) == SplitResult((intro,), "- Rojo")


def test_question_with_numbered_options_stays_whole():
    text = "¿Cuál prefieres?\n1. Rojo\n2. Azul"
    assert process_question_with_list(text, []) == SplitResult((text,), "")


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("¿Cuál prefieres?\n1. Rojo", id="single-option"),
        pytest.param("¿Cuál prefieres?\n1. Rojo\nOtra cosa", id="free-text"),
        pytest.param("Sin pregunta\n1. Rojo\n2. Azul", id="no-question"),
    ],
)
def test_question_with_list_declines(text):
    assert process_question_with_list(text, []) is None


def test_intro_with_long_paragraph():
    long_paragraph = "x" * 160
    result = process_intro_with_long_paragraphs(f"Detalles:\n{long_paragraph}", [])
    assert result == SplitResult(("Detalles:",), long_paragraph)


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("Detalles:\nCorto.", id="short-paragraph"),
        pytest.param("Detalles\n" + "x" * 160, id="no-colon"),
        pytest.param("y" * 120 + ":\n" + "x" * 160, id="late-newline"),
        pytest.param("Sin salto de línea:", id="single-line"),
    ],
)
def test_intro_with_long_paragraph_declines(text):
    assert process_intro_with_long_paragraphs(text, []) is None
