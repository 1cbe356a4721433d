"""Pass registry for the whole-text and whole-chunk-list steps.

Pre-passes carry a ``str`` payload, post-passes a ``list[str]`` of chunks.
Each pass receives the active :class:`SplitterConfig` through
``meta["config"]`` and reports counts under ``meta["metrics"][name]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Protocol, Type, runtime_checkable

from chat_chunker.config import DEFAULT_CONFIG, SplitterConfig


@dataclass(frozen=True)
class Artifact:
    """Immutable carrier of text or chunks + metadata between passes."""

    payload: Any
    meta: Dict[str, Any] | None = None

    @property
    def config(self) -> SplitterConfig:
        cfg = (self.meta or {}).get("config")
        return cfg if isinstance(cfg, SplitterConfig) else DEFAULT_CONFIG

    def with_metrics(self, payload: Any, step: str, counts: Mapping[str, int]) -> Artifact:
        """Return a new artifact carrying ``payload`` and ``step`` metrics."""
        meta = dict(self.meta or {})
        metrics = dict(meta.get("metrics", {}))
        metrics[step] = {**metrics.get(step, {}), **counts}
        meta["metrics"] = metrics
        return Artifact(payload=payload, meta=meta)


@runtime_checkable
class Pass(Protocol):
    name: str
    input_type: Type
    output_type: Type

    def __call__(self, a: Artifact) -> Artifact:
        """Execute the pass."""
        ...


_REGISTRY: Mapping[str, Pass] = MappingProxyType({})


def register(p: Pass) -> Pass:
    """Register a pass by name; idempotent for same object."""
    global _REGISTRY
    _REGISTRY = MappingProxyType({**dict(_REGISTRY), p.name: p})
    return p


def run_step(name: str, a: Artifact) -> Artifact:
    """Run a single registered step."""
    return _REGISTRY[name](a)


def run_pipeline(steps: Iterable[str], a: Artifact) -> Artifact:
    """Apply registered steps in order."""
    return reduce(lambda acc, s: run_step(s, acc), steps, a)


def registry() -> Dict[str, Pass]:
    """Shallow copy of the registry for inspection/testing."""
    return dict(_REGISTRY)


__all__ = ["Artifact", "Pass", "register", "registry", "run_pipeline", "run_step"]
