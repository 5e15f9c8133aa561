from __future__ import annotations

import typer

from repokit.core.console import console
from repokit.core.decorators import handle_exceptions

from ._context import get_repository


@handle_exceptions
def add(
    ctx: typer.Context,
    paths: list[str] = typer.Argument(..., help="Paths to stage."),
) -> None:
    """Stage paths in the index."""
    repo = get_repository(ctx)
    for path in paths:
        repo.add(path)
    console.print(f"[green]Staged[/green] {len(paths)} path(s)")


@handle_exceptions
def rm(
    ctx: typer.Context,
    paths: list[str] = typer.Argument(..., help="Paths to remove."),
) -> None:
    """Remove paths from the working tree and index."""
    repo = get_repository(ctx)
    for path in paths:
        repo.rm(path)
    console.print(f"[green]Removed[/green] {len(paths)} path(s)")


@handle_exceptions
def commit(
    ctx: typer.Context,
    message: str = typer.Option(..., "--message", "-m", help="Commit message."),
) -> None:
    """Commit staged changes (signed when sign_commits is configured)."""
    get_repository(ctx).commit(message)
    console.print("[green]Committed[/green]")


@handle_exceptions
def tag(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Tag name."),
    message: str | None = typer.Option(None, "--message", "-m", help="Tag message."),
) -> None:
    """Create a tag (signed when sign_tags is configured)."""
    get_repository(ctx).tag(name, message)
    console.print(f"[green]Tagged[/green] {name}")
