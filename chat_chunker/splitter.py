"""Chunk driver for chat replies.

The text is normalized once by the pre-passes, then split by a
priority-ordered loop: every iteration offers the remaining text to each
stage in :data:`SPLIT_STAGES` and takes the first result that consumes
input. When no stage applies, the rest is emitted verbatim. The chunk list
finally runs through the post-passes.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import chat_chunker.passes  # noqa: F401  (registers passes)
from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.framework import Artifact, run_pipeline
from chat_chunker.processors import (
    SplitResult,
    Stage,
    process_intro_with_list,
    process_intro_with_long_paragraphs,
    process_list_section,
    process_long_paragraph_sequence,
    process_long_paragraphs_after_intro,
    process_markdown_section,
    process_markdown_table,
    process_period_splits,
    process_product_card_lists,
    process_question_marks,
    process_question_with_list,
    process_section_breaks,
)

logger = logging.getLogger(__name__)

PRE_PASSES: Tuple[str, ...] = (
    "url_normalize",
    "inline_list_normalize",
    "inline_product_card_normalize",
)
POST_PASSES: Tuple[str, ...] = ("merge_small_chunks", "punctuation_normalize")


def _period_fallback(
    text: str, chunks: Sequence[str], config: SplitterConfig
) -> Optional[SplitResult]:
    if len(text) <= config.period_split_text_threshold:
        return None
    return process_period_splits(text, chunks, config)


SPLIT_STAGES: Tuple[Tuple[str, Stage], ...] = (
    ("markdown_table", process_markdown_table),
    ("intro_with_list", process_intro_with_list),
    ("question_with_list", process_question_with_list),
    ("intro_with_long_paragraphs", process_intro_with_long_paragraphs),
    ("product_card_lists", process_product_card_lists),
    ("list_section", process_list_section),
    ("long_paragraphs_after_intro", process_long_paragraphs_after_intro),
    ("long_paragraph_sequence", process_long_paragraph_sequence),
    ("markdown_section", process_markdown_section),
    ("section_breaks", process_section_breaks),
    ("question_marks", process_question_marks),
    ("period_splits", _period_fallback),
)


# ---------------------------------------------------------------------------
# Split loop
# ---------------------------------------------------------------------------


def _first_split(
    text: str, chunks: Sequence[str], config: SplitterConfig
) -> Optional[Tuple[str, SplitResult]]:
    """Return the first stage result that strictly shortens ``text``."""
    for name, stage in SPLIT_STAGES:
        result = stage(text, chunks, config)
        if result is None:
            continue
        if len(result.remaining) >= len(text):
            logger.debug("%s: discarded result that consumed no input", name)
            continue
        return name, result
    return None


def _split_loop(text: str, config: SplitterConfig) -> List[str]:
    chunks: List[str] = []
    remaining = text
    while remaining:
        found = _first_split(remaining, chunks, config)
        if found is None:
            logger.debug("no stage applies; emitting %d chars verbatim", len(remaining))
            chunks.append(remaining)
            break
        name, result = found
        emitted = [chunk for chunk in result.chunks if chunk.strip()]
        logger.debug("%s: emitted %d chunk(s)", name, len(emitted))
        chunks.extend(emitted)
        remaining = result.remaining
    return chunks


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def split_chat_artifact(
    text: str | None, config: SplitterConfig | None = None
) -> Artifact:
    """Split ``text`` and return the chunks with per-pass metrics.

    ``payload`` is the final list of chunks; ``meta["metrics"]`` maps each
    pass name to the counts it reported.
    """
    cfg = config or DEFAULT_CONFIG
    if not text:
        return Artifact(payload=[], meta={"config": cfg, "metrics": {}})
    if not text.strip():
        return Artifact(payload=[text], meta={"config": cfg, "metrics": {}})
    pre = run_pipeline(PRE_PASSES, Artifact(payload=text, meta={"config": cfg}))
    chunks = _split_loop(pre.payload, cfg)
    return run_pipeline(POST_PASSES, Artifact(payload=chunks, meta=pre.meta))


def split_chat_text(text: str | None, config: SplitterConfig | None = None) -> List[str]:
    """Split a chat reply into message-sized chunks.

    ``None`` and ``""`` yield ``[]``; whitespace-only text is returned
    unchanged as a single chunk.
    """
    return list(split_chat_artifact(text, config).payload)


__all__ = [
    "POST_PASSES",
    "PRE_PASSES",
    "SPLIT_STAGES",
    "split_chat_artifact",
    "split_chat_text",
]
