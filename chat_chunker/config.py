from __future__ import annotations

import os
import pathlib
import warnings
from functools import reduce
from importlib import import_module
from typing import Any, Dict, Iterable, Mapping, cast

from pydantic import BaseModel, ConfigDict, Field

yaml = cast(Any, import_module("yaml"))

ENV_PREFIX = "CHAT_CHUNKER__"


class SplitterConfig(BaseModel):
    """Tuned thresholds driving the split heuristics.

    Defaults are empirical values tuned against recorded replies; change
    them only with matching test expectations.
    """

    model_config = ConfigDict(frozen=True)

    min_chunk_size: int = Field(20, ge=0)
    max_intro_length: int = Field(150, ge=0)
    max_question_with_options_length: int = Field(250, ge=0)
    short_intro_threshold: int = Field(50, ge=0)
    long_question_threshold: int = Field(100, ge=0)
    combined_length_threshold: int = Field(110, ge=0)
    short_question_fragment_threshold: int = Field(35, ge=0)
    min_content_before_break: int = Field(45, ge=0)
    short_chunk_threshold: int = Field(50, ge=0)
    current_text_short_threshold: int = Field(150, ge=0)
    avg_item_length_threshold: int = Field(70, ge=0)
    max_items_for_long_split: int = Field(3, ge=0)
    max_list_number: int = Field(20, ge=0)
    first_newline_search_limit: int = Field(100, ge=0)
    double_newline_distance_threshold: int = Field(5, ge=0)
    long_paragraph_threshold: int = Field(150, ge=0)
    huge_item_length: int = Field(150, ge=0)
    min_list_items_for_options: int = Field(2, ge=0)
    contiguous_questions_text_threshold: int = Field(50, ge=0)
    period_split_text_threshold: int = Field(100, ge=0)
    column_separator_width: int = Field(3, ge=0)
    table_monospace_width_threshold: int = Field(47, ge=0)


DEFAULT_CONFIG = SplitterConfig()


def _read_yaml(path: str | os.PathLike | None) -> Dict[str, Any]:
    """Return the ``thresholds`` mapping from YAML, or {} if path is None/missing/empty."""
    if not path:
        return {}
    p = pathlib.Path(path)
    if not p.exists():
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise TypeError(f"{p.name} must contain a top-level mapping")
    thresholds = data.get("thresholds") or {}
    if not isinstance(thresholds, dict):
        raise TypeError(f"{p.name}: 'thresholds' must be a mapping")
    return thresholds


def _env_overrides(environ: Mapping[str, str] | None = None) -> Dict[str, Any]:
    """
    Map CHAT_CHUNKER__FIELD=value -> {field: value} (field lower-cased).
    Values are YAML-coerced (so '42' becomes an int).
    """
    env = os.environ if environ is None else environ
    out: Dict[str, Any] = {}
    for k, v in env.items():
        if not k.startswith(ENV_PREFIX):
            continue
        try:
            val = yaml.safe_load(v)
        except yaml.YAMLError:
            val = v
        out[k[len(ENV_PREFIX) :].lower()] = val
    return out


def _known_thresholds(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop and warn about keys that are not SplitterConfig fields."""
    fields = SplitterConfig.model_fields
    unknown = sorted(k for k in values if k not in fields)
    if unknown:
        warnings.warn(
            f"Unknown splitter thresholds: {', '.join(unknown)}",
            stacklevel=3,
        )
    return {k: v for k, v in values.items() if k in fields}


def load_config(
    path: str | os.PathLike | None = "chat_chunker.yaml",
    overrides: Mapping[str, Any] | None = None,
) -> SplitterConfig:
    """Load YAML + env/CLI overrides into a validated SplitterConfig."""
    sources: Iterable[Mapping[str, Any]] = (
        d for d in (_read_yaml(path), _env_overrides(), overrides) if d
    )
    acc: Dict[str, Any] = {}
    merged = reduce(lambda base, extra: {**base, **extra}, sources, acc)
    return SplitterConfig.model_validate(_known_thresholds(merged))


__all__ = ["DEFAULT_CONFIG", "ENV_PREFIX", "SplitterConfig", "load_config"]
