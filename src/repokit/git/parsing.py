"""Parsers for git's human-oriented output.

Handles:
    - ``git status -s`` fixed-column output (and its inverse, format_status)
    - ``git remote`` one-name-per-line output
    - ``git branch [-a]`` output with the current-branch marker
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FileStatus:
    """Short-status codes for one path. ``None`` means unchanged on that side."""

    working: str | None
    staging: str | None


def parse_status(output: str) -> dict[str, FileStatus]:
    """Parse ``git status -s`` output into a path -> FileStatus mapping.

    Column 0 is the working state, column 1 the staging state, and the
    remainder after column 2 (stripped) is the repository-relative path.
    Duplicate paths keep the last entry.
    """
    files: dict[str, FileStatus] = {}
    for line in output.split("\n"):
        if not line.strip():
            continue
        working = line[0:1].strip() or None
        staging = line[1:2].strip() or None
        if working is None and staging is None:
            continue
        path = line[2:].strip()
        files[path] = FileStatus(working=working, staging=staging)
    return files


def format_status(files: Mapping[str, FileStatus]) -> str:
    """Render a mapping back into ``git status -s`` layout."""
    lines = [
        f"{status.working or ' '}{status.staging or ' '} {path}" for path, status in files.items()
    ]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _clean_lines(output: str, strip_chars: str = "") -> list[str]:
    entries: list[str] = []
    for raw in output.split("\n"):
        line = raw.lstrip(strip_chars).strip() if strip_chars else raw.strip()
        if line:
            entries.append(line)
    return entries


def parse_remotes(output: str) -> list[str]:
    """Parse ``git remote`` output, keeping encounter order."""
    return _clean_lines(output)


def parse_branches(output: str) -> list[str]:
    """Parse ``git branch`` output, dropping the leading ``*`` current-branch marker."""
    return _clean_lines(output, strip_chars="*")


__all__ = [
    "FileStatus",
    "format_status",
    "parse_branches",
    "parse_remotes",
    "parse_status",
]
