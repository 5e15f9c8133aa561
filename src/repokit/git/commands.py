"""Pure builders for git argument vectors.

Every builder takes the shared GitConfig plus the operation parameters and
returns an immutable GitCommand. Nothing here touches the filesystem or
spawns a process, so the exact argv of each operation can be asserted
directly in tests.

Argument order is always ``executable, subcommand, *flags, *positionals``:
optional flags are placed before the fixed positionals git expects.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum

from repokit.core.config import GitConfig


class DescribeSearch(str, Enum):
    """Which refs ``git describe`` may use."""

    ANNOTATED = "annotated"
    LIGHTWEIGHT = "lightweight"
    ALL = "all"


DESCRIBE_ANNOTATED_TAGS = DescribeSearch.ANNOTATED.value
DESCRIBE_LIGHTWEIGHT_TAGS = DescribeSearch.LIGHTWEIGHT.value
DESCRIBE_ALL = DescribeSearch.ALL.value

_DESCRIBE_FLAGS: dict[DescribeSearch, tuple[str, ...]] = {
    DescribeSearch.ANNOTATED: (),
    DescribeSearch.LIGHTWEIGHT: ("--tags",),
    DescribeSearch.ALL: ("--all",),
}


@dataclass(frozen=True, slots=True)
class GitCommand:
    """A fully resolved git invocation.

    ``cwd`` is None only for commands that must run outside the repository
    (clone).
    """

    argv: tuple[str, ...]
    description: str
    cwd: str | None = None

    @property
    def command_line(self) -> str:
        return shlex.join(self.argv)


def _build(
    config: GitConfig,
    subcommand: str,
    *args: str,
    description: str,
    cwd: str | None,
) -> GitCommand:
    return GitCommand(
        argv=(config.executable_path, subcommand, *args),
        description=description,
        cwd=cwd,
    )


def _flag(enabled: bool, *tokens: str) -> tuple[str, ...]:
    return tokens if enabled else ()


def describe_flags(search: DescribeSearch | str) -> tuple[str, ...]:
    """Map a search mode to its flags; unknown modes fall back to annotated (no flag)."""
    try:
        mode = DescribeSearch(search)
    except ValueError:
        return ()
    return _DESCRIBE_FLAGS[mode]


def commit_sign_flags(config: GitConfig) -> tuple[str, ...]:
    if not config.sign_commits:
        return ()
    if config.sign_commit_user:
        return (f"--gpg-sign={config.sign_commit_user}",)
    return ("--gpg-sign",)


def tag_sign_flags(config: GitConfig) -> tuple[str, ...]:
    if not config.sign_tags:
        return ()
    if config.sign_tag_user:
        return ("-s", "-u", config.sign_tag_user)
    return ("-s",)


def init_command(config: GitConfig, cwd: str) -> GitCommand:
    return _build(config, "init", description="Could not init repository", cwd=cwd)


def clone_command(config: GitConfig, url: str, destination: str) -> GitCommand:
    return _build(
        config, "clone", url, destination, description="Could not clone repository", cwd=None
    )


def remote_list_command(config: GitConfig, cwd: str) -> GitCommand:
    return _build(config, "remote", description="Could not get remotes from repository", cwd=cwd)


def branch_list_command(config: GitConfig, cwd: str, *, include_remote: bool = False) -> GitCommand:
    return _build(
        config,
        "branch",
        *_flag(include_remote, "-a"),
        description="Could not get branches from repository",
        cwd=cwd,
    )


def describe_command(
    config: GitConfig,
    cwd: str,
    search: DescribeSearch | str = DescribeSearch.ANNOTATED,
    branch: str = "HEAD",
) -> GitCommand:
    return _build(
        config,
        "describe",
        *describe_flags(search),
        branch,
        description="Could not find recent tag from repository",
        cwd=cwd,
    )


def remote_set_url_command(
    config: GitConfig,
    cwd: str,
    url: str,
    remote: str = "origin",
    *,
    push: bool = False,
) -> GitCommand:
    kind = "push" if push else "fetch"
    return _build(
        config,
        "remote",
        "set-url",
        *_flag(push, "--push"),
        remote,
        url,
        description=f"Could not set remote {kind} url of repository",
        cwd=cwd,
    )


def remote_add_command(config: GitConfig, cwd: str, url: str, remote: str = "origin") -> GitCommand:
    return _build(
        config,
        "remote",
        "add",
        remote,
        url,
        description="Could not add remote to repository",
        cwd=cwd,
    )


def fetch_command(
    config: GitConfig, cwd: str, remote: str = "origin", *, prune: bool = False
) -> GitCommand:
    return _build(
        config,
        "fetch",
        *_flag(prune, "--prune"),
        remote,
        description="Could not fetch from remote of repository",
        cwd=cwd,
    )


def checkout_command(config: GitConfig, cwd: str, ref: str, *, force: bool = False) -> GitCommand:
    return _build(
        config,
        "checkout",
        *_flag(force, "-f"),
        ref,
        description="Could not checkout branch",
        cwd=cwd,
    )


def push_command(config: GitConfig, cwd: str, ref: str, remote: str = "origin") -> GitCommand:
    return _build(config, "push", remote, ref, description="Could not push branch", cwd=cwd)


def status_command(config: GitConfig, cwd: str) -> GitCommand:
    return _build(
        config,
        "status",
        "-s",
        description="Could not determine modification status of repository",
        cwd=cwd,
    )


def add_command(config: GitConfig, cwd: str, path: str) -> GitCommand:
    return _build(config, "add", path, description="Could not add file", cwd=cwd)


def rm_command(config: GitConfig, cwd: str, path: str) -> GitCommand:
    return _build(config, "rm", path, description="Could not remove file", cwd=cwd)


def commit_command(config: GitConfig, cwd: str, message: str) -> GitCommand:
    return _build(
        config,
        "commit",
        *commit_sign_flags(config),
        "-m",
        message,
        description="Could not commit changes",
        cwd=cwd,
    )


def tag_command(config: GitConfig, cwd: str, name: str, message: str | None = None) -> GitCommand:
    return _build(
        config,
        "tag",
        *tag_sign_flags(config),
        *_flag(bool(message), "-m", message or ""),
        name,
        description="Could not create tag",
        cwd=cwd,
    )


__all__ = [
    "DESCRIBE_ALL",
    "DESCRIBE_ANNOTATED_TAGS",
    "DESCRIBE_LIGHTWEIGHT_TAGS",
    "DescribeSearch",
    "GitCommand",
    "add_command",
    "branch_list_command",
    "checkout_command",
    "clone_command",
    "commit_command",
    "commit_sign_flags",
    "describe_command",
    "describe_flags",
    "fetch_command",
    "init_command",
    "push_command",
    "remote_add_command",
    "remote_list_command",
    "remote_set_url_command",
    "rm_command",
    "status_command",
    "tag_command",
    "tag_sign_flags",
]
