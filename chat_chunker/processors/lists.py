"""Generic numbered and bullet list sections."""

from __future__ import annotations

from typing import List, Optional, Sequence

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig
from chat_chunker.processors.base import SplitResult
from chat_chunker.sections import find_list_section
from chat_chunker.strategies.markers import default_marker_strategy


def _split_per_item(items: List[str], kind: str, config: SplitterConfig) -> bool:
    if any(len(item) > config.huge_item_length for item in items):
        return True
    if kind != "numbered" or not items:
        return False
    average = sum(len(item) for item in items) / len(items)
    return (
        average > config.avg_item_length_threshold
        and len(items) <= config.max_items_for_long_split
    )


def process_list_section(
    text: str, chunks: Sequence[str], config: SplitterConfig = DEFAULT_CONFIG
) -> Optional[SplitResult]:
    """Emit the list opening ``text`` whole, or item by item when items are long."""
    section = find_list_section(text)
    if section is None:
        return None
    list_text, after_list = text[section.start : section.end], text[section.end :]
    strategy = default_marker_strategy()
    items = (
        strategy.split_numbered_items(list_text)
        if section.kind == "numbered"
        else strategy.split_bullet_items(list_text)
    )
    if _split_per_item(items, section.kind, config):
        emitted = tuple(item.strip() for item in items)
    else:
        emitted = (list_text.strip(),)
    return SplitResult(chunks=emitted, remaining=after_list.strip())


__all__ = ["process_list_section"]
