from __future__ import annotations

import typer

from repokit.core.console import console
from repokit.core.decorators import handle_exceptions

from ._context import get_repository

app = typer.Typer(help="Manage remotes.")


@app.command("list")
@handle_exceptions
def list_remotes(ctx: typer.Context) -> None:
    """List configured remotes."""
    for name in get_repository(ctx).list_remotes():
        console.print(name, markup=False, highlight=False)


@app.command("add")
@handle_exceptions
def add_remote(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Remote URL."),
    name: str = typer.Option("origin", "--name", "-n", help="Remote name."),
) -> None:
    """Add a remote."""
    get_repository(ctx).remote_add(url, name)
    console.print(f"[green]Added remote[/green] {name} -> {url}")


@app.command("set-url")
@handle_exceptions
def set_url(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="New remote URL."),
    name: str = typer.Option("origin", "--name", "-n", help="Remote name."),
    fetch_only: bool = typer.Option(False, "--fetch-only", help="Only change the fetch url."),
    push_only: bool = typer.Option(False, "--push-only", help="Only change the push url."),
) -> None:
    """Change the fetch and/or push url of a remote."""
    if fetch_only and push_only:
        console.print("[red]--fetch-only and --push-only are mutually exclusive.[/red]")
        raise typer.Exit(code=2)

    repo = get_repository(ctx)
    if fetch_only:
        repo.remote_set_fetch_url(url, name)
    elif push_only:
        repo.remote_set_push_url(url, name)
    else:
        repo.remote_set_url(url, name)
    console.print(f"[green]Updated remote[/green] {name} -> {url}")


@app.command("fetch")
@handle_exceptions
def fetch(
    ctx: typer.Context,
    name: str = typer.Option("origin", "--name", "-n", help="Remote name."),
    prune: bool = typer.Option(False, "--prune", "-p", help="Prune deleted remote refs."),
) -> None:
    """Fetch objects and refs from a remote."""
    get_repository(ctx).remote_fetch(prune=prune, remote=name)
    console.print(f"[green]Fetched[/green] {name}")
