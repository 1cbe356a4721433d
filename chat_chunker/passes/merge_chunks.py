from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.framework import Artifact, register
from chat_chunker.strategies.markers import starts_with_list_marker

logger = logging.getLogger(__name__)


def _is_short(chunk: str, config: SplitterConfig) -> bool:
    return len(chunk.strip()) < config.min_chunk_size


def _opens_question(chunk: str) -> bool:
    return chunk.strip().startswith("¿")


def _ends_with_colon(chunk: str) -> bool:
    return chunk.strip().endswith(":")


def _keeps_intro_attached(chunk: str, nxt: str, config: SplitterConfig) -> bool:
    """Colon intros stay apart from the list or long paragraph they announce."""
    if _ends_with_colon(chunk) and (
        starts_with_list_marker(nxt)
        or len(nxt.strip()) > config.long_paragraph_threshold
    ):
        return True
    return _ends_with_colon(nxt)


def _merges_forward(chunk: str, nxt: str, config: SplitterConfig) -> bool:
    if _keeps_intro_attached(chunk, nxt, config):
        return False
    return _is_short(chunk, config) and not _opens_question(nxt)


def _merges_backward(chunk: str, merged: Sequence[str], config: SplitterConfig) -> bool:
    return _is_short(chunk, config) and bool(merged) and not _opens_question(chunk)


def _merge_with_count(
    chunks: Sequence[str], config: SplitterConfig
) -> Tuple[List[str], int]:
    merged: List[str] = []
    pending: str | None = None
    joins = 0
    for i, original in enumerate(chunks):
        chunk = pending if pending is not None else original
        pending = None
        if i == len(chunks) - 1:
            if _merges_backward(chunk, merged, config):
                merged[-1] = f"{merged[-1]} {chunk.strip()}"
                joins += 1
            else:
                merged.append(chunk)
        elif _merges_forward(chunk, chunks[i + 1], config):
            pending = f"{chunk} {chunks[i + 1]}"
            joins += 1
        else:
            merged.append(chunk)
    return merged, joins


def merge_small_chunks(
    chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> List[str]:
    """Fold chunks shorter than ``config.min_chunk_size`` into a neighbour.

    A short chunk joins the next one with a space unless the next chunk
    opens a ``¿`` question or a colon intro would lose its list. A short
    final chunk joins the previous one instead.
    """
    return _merge_with_count(chunks, config)[0]


class _MergeSmallChunksPass:
    name = "merge_small_chunks"
    input_type = list
    output_type = list

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, list):
            return a
        merged, joins = _merge_with_count(a.payload, a.config)
        if joins:
            logger.debug("merged %d short chunk(s)", joins)
        return a.with_metrics(merged, self.name, {"merged": joins})


merge_small_chunks_pass = register(_MergeSmallChunksPass())


__all__ = ["merge_small_chunks", "merge_small_chunks_pass"]
