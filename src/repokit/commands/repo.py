from __future__ import annotations

from pathlib import Path

import typer
from rich import box
from rich.table import Table

from repokit.core.console import console
from repokit.core.decorators import handle_exceptions
from repokit.git import DescribeSearch, GitRepository

from ._context import get_repository


@handle_exceptions
def init(ctx: typer.Context) -> None:
    """Initialize a repository at --repo, creating the directory if needed."""
    repo = get_repository(ctx).init()
    console.print(f"[green]Initialized[/green] {repo.repository_path}")


@handle_exceptions
def clone(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Repository URL to clone."),
    destination: Path | None = typer.Argument(
        None, help="Target directory (defaults to --repo)."
    ),
) -> None:
    """Clone a repository."""
    state = ctx.obj
    target = destination if destination is not None else state.repo_path
    repo = GitRepository(target, state.config).clone_repository(url)
    console.print(f"[green]Cloned[/green] {url} into {repo.repository_path}")


@handle_exceptions
def status(ctx: typer.Context) -> None:
    """Show short modification status of the working tree and index."""
    files = get_repository(ctx).status()
    if not files:
        console.print("[green]clean[/green]")
        return

    table = Table(title="Status", box=box.SIMPLE_HEAVY, expand=True)
    table.add_column("Path", style="cyan")
    table.add_column("Working", style="yellow", no_wrap=True)
    table.add_column("Staging", style="green", no_wrap=True)
    for path, file_status in sorted(files.items()):
        table.add_row(path, file_status.working or "-", file_status.staging or "-")
    console.print(table)


@handle_exceptions
def branches(
    ctx: typer.Context,
    all_branches: bool = typer.Option(
        False, "--all", "-a", help="Include remote-tracking branches."
    ),
) -> None:
    """List branches."""
    for name in get_repository(ctx).list_branches(include_remote=all_branches):
        console.print(name, markup=False, highlight=False)


@handle_exceptions
def describe(
    ctx: typer.Context,
    ref: str = typer.Argument("HEAD", help="Commit-ish to describe."),
    search: str = typer.Option(
        DescribeSearch.ANNOTATED.value,
        "--search",
        "-s",
        help="Refs to consider: annotated, lightweight or all.",
    ),
) -> None:
    """Show the most recent tag reachable from a commit."""
    console.print(get_repository(ctx).describe(search, ref), markup=False, highlight=False)


@handle_exceptions
def checkout(
    ctx: typer.Context,
    ref: str = typer.Argument(..., help="Branch, tag or commit to check out."),
    force: bool = typer.Option(False, "--force", "-f", help="Discard local changes."),
) -> None:
    """Check out a ref."""
    get_repository(ctx).checkout(ref, force=force)
    console.print(f"[green]Checked out[/green] {ref}")


@handle_exceptions
def push(
    ctx: typer.Context,
    ref: str = typer.Argument(..., help="Ref to push."),
    remote: str = typer.Option("origin", "--remote", "-r", help="Remote name."),
) -> None:
    """Push a ref to a remote."""
    get_repository(ctx).push(ref, remote)
    console.print(f"[green]Pushed[/green] {ref} to {remote}")
