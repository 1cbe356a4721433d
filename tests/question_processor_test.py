import pytest

from chat_chunker.config import SplitterConfig
from chat_chunker.processors.base import SplitResult
from chat_chunker.processors.questions import (
    find_valid_question_indices,
    handle_long_question,
    handle_short_question,
    process_contiguous_questions,
    process_question_marks,
)

QUESTION = "¿Qué te parece esta opción?"


@pytest.mark.parametrize(
    "after",
    [
        pytest.param("😊", id="emoji-only"),
        pytest.param("para conocerte mejor", id="lowercase"),
        pytest.param("😊 para ti", id="emoji-then-lowercase"),
    ],
)
def test_long_question_declines(after):
    assert handle_long_question(QUESTION, after) is None


def test_long_question_splits_before_text():
    result = handle_long_question(QUESTION, "Tenemos más.")
    assert result == SplitResult(chunks=(QUESTION,), remaining="Tenemos más.")


def test_leading_emoji_travels_with_question():
    result = handle_long_question(QUESTION, "😊 Tenemos más")
    assert result == SplitResult(chunks=(f"{QUESTION} 😊 ",), remaining="Tenemos más")


def test_short_question_keeps_short_answer():
    assert handle_short_question("¿Cómo estás?", "Bien, gracias. Y tú qué tal") is None


def test_short_question_splits_long_answer():
    after = (
        "Tenemos otras opciones disponibles para ti en la tienda virtual y también en "
        "nuestras sedes de Bogotá y Medellín. Escríbenos."
    )
    result = handle_short_question("¿Te gusta?", after)
    assert result == SplitResult(chunks=("¿Te gusta?",), remaining=after)


def test_combined_threshold_comes_from_config():
    tight = SplitterConfig(combined_length_threshold=10)
    result = handle_short_question("¿Cómo estás?", "Bien, gracias. Y tú qué tal", tight)
    assert result == SplitResult(chunks=("¿Cómo estás?",), remaining="Bien, gracias. Y tú qué tal")


def test_contiguous_questions_keep_spacing():
    text = "¿Te gusta? ¿Lo quieres? Sí, claro."
    result = process_contiguous_questions(text, text.rindex("?"))
    assert result == SplitResult(chunks=("¿Te gusta? ¿Lo quieres? ",), remaining="Sí, claro.")


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("¿Te gusta? ¿Lo quieres? 😊", id="emoji-only"),
        pytest.param("¿Te gusta? ¿Lo quieres? 5", id="digit-only"),
        pytest.param("¿Te gusta? ¿Lo quieres?", id="nothing-after"),
    ],
)
def test_contiguous_questions_decline(text):
    assert process_contiguous_questions(text, text.rindex("?")) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        pytest.param("- ¿Opción?\n¿Pregunta?", [len("- ¿Opción?\n¿Pregunta?") - 1], id="bullet-line"),
        pytest.param("Hola (¿sí?) bien?", [len("Hola (¿sí?) bien?") - 1], id="parentheses"),
        pytest.param("¿Qué quieres?\n\nOpciones:\n- Cancelar\n- Modificar", [], id="options-block"),
        pytest.param("¿Uno? ¿Dos?", [4, 10], id="plain"),
    ],
)
def test_find_valid_question_indices(text, expected):
    assert find_valid_question_indices(text) == expected


def test_process_question_marks_single():
    text = (
        "¿Te gusta este producto? Podemos buscar otras opciones para ti en la tienda de productos "
        "y accesorios deportivos."
    )
    result = process_question_marks(text, [])
    assert result is not None
    assert result.chunks == ("¿Te gusta este producto?",)
    assert result.remaining.startswith("Podemos buscar")


def test_process_question_marks_without_marks():
    assert process_question_marks("Sin preguntas aquí.", []) is None
