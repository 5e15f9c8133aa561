"""Git operations and repository management.

This package provides a synchronous git adapter:
    - GitRepository: facade mapping one method to one git invocation
    - Pure argv builders (GitCommand values)
    - Parsers for status, remote and branch output
"""

from __future__ import annotations

from .commands import (
    DESCRIBE_ALL,
    DESCRIBE_ANNOTATED_TAGS,
    DESCRIBE_LIGHTWEIGHT_TAGS,
    DescribeSearch,
    GitCommand,
)
from .parsing import FileStatus, format_status, parse_branches, parse_remotes, parse_status
from .repository import GitRepository
from .runner import run_command

__all__ = [
    "DESCRIBE_ALL",
    "DESCRIBE_ANNOTATED_TAGS",
    "DESCRIBE_LIGHTWEIGHT_TAGS",
    "DescribeSearch",
    "FileStatus",
    "GitCommand",
    "GitRepository",
    "format_status",
    "parse_branches",
    "parse_remotes",
    "parse_status",
    "run_command",
]
