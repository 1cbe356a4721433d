import pytest

from chat_chunker.framework import Artifact
from chat_chunker.passes.punctuation_normalize import (
    normalize_spanish_punctuation,
    punctuation_normalize,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        pytest.param("Hola ¿Cómo estás?", "Hola ¿cómo estás?", id="question"),
        pytest.param(
            "Oferta ¡Envío gratis! Y ¿Sabías?",
            "Oferta ¡envío gratis! Y ¿sabías?",
            id="both-marks",
        ),
        pytest.param("Hola ¿ Cómo?", "Hola ¿ cómo?", id="space-after-mark"),
        pytest.param("Hola, ¿Élite?", "Hola, ¿élite?", id="accented"),
    ],
)
def test_mid_sentence_marks_lowercase(raw, expected):
    assert normalize_spanish_punctuation(raw) == expected


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("¿Qué tal?", id="chunk-start"),
        pytest.param("😊 ¿Qué tal?", id="only-emoji-before"),
        pytest.param("Hola.\n¿Qué tal?", id="after-newline"),
        pytest.param("Hola.\n  ¿Qué tal?", id="after-indented-newline"),
        pytest.param("Bien. ¿Qué tal?", id="after-period"),
        pytest.param("¡Hola! ¡Qué bueno!", id="after-exclamation"),
        pytest.param("Mira ¿😀 Te gusta?", id="emoji-after-mark"),
        pytest.param("Hay ¡123 productos!", id="digit-after-mark"),
        pytest.param("Hola ¿", id="mark-at-end"),
    ],
)
def test_sentence_start_keeps_case(text):
    assert normalize_spanish_punctuation(text) == text


def test_pass_counts_lowercased_letters():
    result = punctuation_normalize(Artifact(payload=["Hola ¿Cómo estás?", "Bien. ¿Y tú?"]))
    assert result.payload == ["Hola ¿cómo estás?", "Bien. ¿Y tú?"]
    assert result.meta["metrics"]["punctuation_normalize"] == {"lowercased": 1}
