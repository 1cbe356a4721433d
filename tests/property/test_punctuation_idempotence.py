from functools import reduce
from typing import Callable, TypeVar

from hypothesis import given, settings, strategies as st
from chat_chunker.framework import Artifact
from chat_chunker.passes.punctuation_normalize import punctuation_normalize

T = TypeVar("T")


def _apply(times: int, fn: Callable[[T], T], value: T) -> T:
    return reduce(lambda acc, _: fn(acc), range(times), value)


alphabet = st.characters(
    whitelist_categories=("Ll", "Lu", "Zs"), whitelist_characters="¿¡.?!\n"
)


@given(st.lists(st.text(alphabet=alphabet, max_size=80), max_size=5))
@settings(deadline=None)
def test_punctuation_normalize_idempotent(chunks: list) -> None:
    once = punctuation_normalize(Artifact(payload=chunks))
    twice = _apply(2, punctuation_normalize, Artifact(payload=chunks))
    assert twice.payload == once.payload
    again = punctuation_normalize(Artifact(payload=once.payload))
    assert again.meta["metrics"]["punctuation_normalize"] == {"lowercased": 0}
