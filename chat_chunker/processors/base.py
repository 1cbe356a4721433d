"""Shared result contract for the split stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from chat_chunker.config import SplitterConfig


@dataclass(frozen=True)
class SplitResult:
    """Chunks a stage emits plus the text left for the next iteration."""

    chunks: Tuple[str, ...]
    remaining: str


Stage = Callable[[str, Sequence[str], SplitterConfig], Optional[SplitResult]]


def split(remaining: str, *chunks: str) -> SplitResult:
    return SplitResult(chunks=chunks, remaining=remaining)


__all__ = ["SplitResult", "Stage", "split"]
