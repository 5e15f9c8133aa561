from __future__ import annotations

import os
from pathlib import Path

from repokit.core.config import GitConfig, get_default_config

from . import commands
from .commands import DescribeSearch, GitCommand
from .parsing import FileStatus, parse_branches, parse_remotes, parse_status
from .runner import run_command


class GitRepository:
    """Synchronous git wrapper bound to one repository path.

    Mutating operations return the repository itself so calls can be
    chained; read operations return parsed values. Every failure raises
    GitCommandError.
    """

    def __init__(
        self, repository_path: str | os.PathLike[str], config: GitConfig | None = None
    ) -> None:
        self._repository_path = os.fspath(repository_path)
        self._config = config if config is not None else get_default_config()

    def __repr__(self) -> str:
        return f"GitRepository({self._repository_path!r})"

    @property
    def repository_path(self) -> str:
        return self._repository_path

    @property
    def config(self) -> GitConfig:
        return self._config

    def is_initialized(self) -> bool:
        """Return True when the path already contains a ``.git`` directory."""
        return (Path(self._repository_path) / ".git").is_dir()

    def _run(self, command: GitCommand) -> str:
        return run_command(command, self._config)

    # -------------------------------------------------------------------------
    # Repository setup
    # -------------------------------------------------------------------------

    def init(self) -> GitRepository:
        """Create the repository directory if needed and run ``git init`` in it."""
        Path(self._repository_path).mkdir(parents=True, exist_ok=True)
        self._run(commands.init_command(self._config, self._repository_path))
        return self

    def clone_repository(self, url: str) -> GitRepository:
        """Clone ``url`` into the repository path.

        Runs without a working directory; the destination is passed to git
        as an argument.
        """
        self._run(commands.clone_command(self._config, url, self._repository_path))
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_remotes(self) -> list[str]:
        output = self._run(commands.remote_list_command(self._config, self._repository_path))
        return parse_remotes(output)

    def list_branches(self, include_remote: bool = False) -> list[str]:
        """List branch names; ``include_remote`` adds remote-tracking branches."""
        output = self._run(
            commands.branch_list_command(
                self._config, self._repository_path, include_remote=include_remote
            )
        )
        return parse_branches(output)

    def describe(
        self,
        search: DescribeSearch | str = DescribeSearch.ANNOTATED,
        branch: str = "HEAD",
    ) -> str:
        """Return the most recent tag reachable from ``branch``.

        Args:
            search: ``annotated`` (default), ``lightweight`` (``--tags``) or
                ``all`` (``--all``). Unrecognized values behave like ``annotated``.
            branch: Commit-ish to describe.
        """
        output = self._run(
            commands.describe_command(self._config, self._repository_path, search, branch)
        )
        return output.strip()

    def status(self) -> dict[str, FileStatus]:
        """Return short-status codes keyed by repository-relative path."""
        output = self._run(commands.status_command(self._config, self._repository_path))
        return parse_status(output)

    # -------------------------------------------------------------------------
    # Remote operations
    # -------------------------------------------------------------------------

    def remote_set_url(self, url: str, remote: str = "origin") -> GitRepository:
        """Set both fetch and push url of ``remote``.

        The two updates are independent invocations; if the push url fails
        the fetch url stays changed.
        """
        self.remote_set_fetch_url(url, remote)
        self.remote_set_push_url(url, remote)
        return self

    def remote_set_fetch_url(self, url: str, remote: str = "origin") -> GitRepository:
        self._run(
            commands.remote_set_url_command(self._config, self._repository_path, url, remote)
        )
        return self

    def remote_set_push_url(self, url: str, remote: str = "origin") -> GitRepository:
        self._run(
            commands.remote_set_url_command(
                self._config, self._repository_path, url, remote, push=True
            )
        )
        return self

    def remote_add(self, url: str, remote: str = "origin") -> GitRepository:
        self._run(commands.remote_add_command(self._config, self._repository_path, url, remote))
        return self

    def remote_fetch(self, prune: bool = False, remote: str = "origin") -> GitRepository:
        self._run(
            commands.fetch_command(self._config, self._repository_path, remote, prune=prune)
        )
        return self

    def push(self, ref: str, remote: str = "origin") -> GitRepository:
        self._run(commands.push_command(self._config, self._repository_path, ref, remote))
        return self

    # -------------------------------------------------------------------------
    # Working tree operations
    # -------------------------------------------------------------------------

    def checkout(self, ref: str, force: bool = False) -> GitRepository:
        self._run(commands.checkout_command(self._config, self._repository_path, ref, force=force))
        return self

    def add(self, path: str) -> GitRepository:
        self._run(commands.add_command(self._config, self._repository_path, path))
        return self

    def rm(self, path: str) -> GitRepository:
        self._run(commands.rm_command(self._config, self._repository_path, path))
        return self

    def commit(self, message: str) -> GitRepository:
        """Commit staged changes, signing when ``config.sign_commits`` is set."""
        self._run(commands.commit_command(self._config, self._repository_path, message))
        return self

    def tag(self, name: str, message: str | None = None) -> GitRepository:
        """Create tag ``name``; a message makes it annotated, signing follows config."""
        self._run(commands.tag_command(self._config, self._repository_path, name, message))
        return self


__all__ = ["GitRepository"]
