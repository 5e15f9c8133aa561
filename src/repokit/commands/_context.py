from __future__ import annotations

import typer

from repokit.git import GitRepository


def get_repository(ctx: typer.Context) -> GitRepository:
    """Build the repository handle for the ``--repo`` path of the current invocation."""
    state = ctx.obj
    return GitRepository(state.repo_path, state.config)
