from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import typer
from rich.markup import escape

from repokit.core.console import stderr_console
from repokit.core.errors import GitCommandError, RepokitError

F = TypeVar("F", bound=Callable[..., Any])


def _handle_exception(exc: Exception) -> NoReturn:
    stderr_console.print(f"[red]{escape(str(exc))}[/red]")
    if isinstance(exc, GitCommandError):
        detail = exc.stderr.strip() or exc.stdout.strip()
        if detail:
            stderr_console.print(escape(detail), style="dim")
    raise typer.Exit(code=1)


def handle_exceptions(func: F) -> F:
    """Decorate CLI entrypoints to present friendly errors and exit cleanly."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (RepokitError, PermissionError) as exc:
            _handle_exception(exc)

    return wrapper  # type: ignore[return-value]


__all__ = ["handle_exceptions"]
