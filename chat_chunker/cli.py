from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable, Iterator, Sequence
from importlib import import_module
from pathlib import Path
from typing import Any, cast


try:  # pragma: no cover - exercised via CLI tests
    typer = cast(Any, import_module("typer"))
except ModuleNotFoundError:  # pragma: no cover - fallback when Typer is absent
    typer = None

from chat_chunker.config import SplitterConfig, load_config
from chat_chunker.framework import registry
from chat_chunker.splitter import POST_PASSES, PRE_PASSES, SPLIT_STAGES, split_chat_artifact

CHUNK_SEPARATOR = "\n---\n"


def _config_path_candidates(path: str | Path) -> Iterator[Path]:
    """Yield potential config locations without hitting the filesystem."""
    candidate = Path(path)
    pkg_dir = Path(__file__).resolve().parent
    yield from (
        candidate,
        pkg_dir.parent / candidate,
        pkg_dir.parent / "config" / candidate,
    )


def _resolve_config_path(path: str | Path) -> Path:
    """Pick the first existing config file from candidate locations."""
    return next((p for p in _config_path_candidates(path) if p.exists()), Path(path))


def _exit_with_error(exc: Exception) -> None:
    """Print ``exc`` to stderr and exit with status 1."""
    print(f"error: {exc}", file=sys.stderr)
    raise typer.Exit(1) if typer else SystemExit(1)


def _safe(func: Callable[[], None]) -> None:
    """Invoke ``func`` and exit non-zero on any exception."""
    try:
        func()
    except Exception as exc:  # pragma: no cover - exercised in CLI tests
        _exit_with_error(exc)


def _load(config: str) -> SplitterConfig:
    return load_config(_resolve_config_path(config))


def _read_input(input_path: str | None) -> str:
    """Return the text of ``input_path``; ``None`` or ``-`` reads stdin."""
    if input_path is None or input_path == "-":
        return sys.stdin.read()
    return Path(input_path).read_text(encoding="utf-8")


def _render(chunks: Sequence[str], as_json: bool) -> str:
    if as_json:
        return json.dumps(list(chunks), ensure_ascii=False, indent=2)
    return CHUNK_SEPARATOR.join(chunks)


def _run_split(input_path: str | None, config: str, as_json: bool, verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    text = _read_input(input_path)
    result = split_chat_artifact(text, _load(config))
    print(_render(result.payload, as_json))
    if verbose:
        metrics = (result.meta or {}).get("metrics", {})
        print(json.dumps(metrics, indent=2, sort_keys=True), file=sys.stderr)


def _inspect_view(config: SplitterConfig) -> dict[str, Any]:
    """Return the registered passes, stage order and thresholds."""
    return {
        "passes": {
            name: {"input": str(p.input_type), "output": str(p.output_type)}
            for name, p in registry().items()
        },
        "pre_passes": list(PRE_PASSES),
        "stages": [name for name, _ in SPLIT_STAGES],
        "post_passes": list(POST_PASSES),
        "thresholds": config.model_dump(),
    }


def _run_inspect(config: str) -> None:
    print(json.dumps(_inspect_view(_load(config)), indent=2))


if typer:
    app = typer.Typer(add_completion=False, no_args_is_help=True)

    @app.command()
    def split(  # pragma: no cover - exercised in CLI tests
        input_path: str | None = typer.Argument(None, help="File to split, or '-' for stdin."),
        config: str = typer.Option("chat_chunker.yaml", "--config"),
        as_json: bool = typer.Option(True, "--json/--plain"),
        verbose: bool = typer.Option(False, "--verbose"),
    ) -> None:
        _safe(lambda: _run_split(input_path, config, as_json, verbose))

    @app.command()
    def inspect(  # pragma: no cover - exercised in CLI tests
        config: str = typer.Option("chat_chunker.yaml", "--config"),
    ) -> None:
        _safe(lambda: _run_inspect(config))

else:

    def app(argv: list[str] | None = None) -> None:
        parser = argparse.ArgumentParser(prog="chat-chunker")
        sub = parser.add_subparsers(dest="cmd", required=True)

        spl = sub.add_parser("split")
        spl.add_argument("input_path", nargs="?")
        spl.add_argument("--config", default="chat_chunker.yaml")
        spl.add_argument("--json", dest="as_json", action="store_true")
        spl.add_argument("--plain", dest="as_json", action="store_false")
        spl.add_argument("--verbose", action="store_true")
        spl.set_defaults(
            as_json=True,
            func=lambda ns: _safe(
                lambda: _run_split(ns.input_path, ns.config, ns.as_json, ns.verbose)
            ),
        )

        insp = sub.add_parser("inspect")
        insp.add_argument("--config", default="chat_chunker.yaml")
        insp.set_defaults(func=lambda ns: _safe(lambda: _run_inspect(ns.config)))

        args = parser.parse_args(argv)
        args.func(args)


if __name__ == "__main__":
    app()
