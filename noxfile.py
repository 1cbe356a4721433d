"""Nox automation sessions for chat_chunker."""

from __future__ import annotations

import nox

nox.options.sessions = ("lint", "typecheck", "tests")
nox.options.reuse_existing_virtualenvs = True


@nox.session()
def lint(session: nox.Session) -> None:
    session.install("black", "flake8")
    session.run("black", "--check", "chat_chunker", "tests")
    session.run("flake8", "chat_chunker", "tests")


@nox.session()
def typecheck(session: nox.Session) -> None:
    session.install("mypy", "types-PyYAML")
    session.install("-e", ".")
    session.run("mypy", "chat_chunker")


@nox.session()
def tests(session: nox.Session) -> None:
    session.install("-e", ".[test]")
    session.run("pytest", "tests")
