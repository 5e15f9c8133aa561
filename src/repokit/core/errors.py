"""Error hierarchy for repokit.

This module defines the exceptions raised across the package without
creating circular import dependencies:
    - RepokitError: base class carrying a message and structured context
    - ConfigurationError: configuration could not be loaded or validated
    - GitCommandError: the git executable exited non-zero or could not start
    - GitTimeoutError: the git executable exceeded the configured timeout
"""

from __future__ import annotations

import subprocess
from typing import Any


def decode_output(value: str | bytes | None) -> str:
    """Decode captured process output without translating line endings."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class RepokitError(Exception):
    """Base exception for all repokit errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class ConfigurationError(RepokitError):
    """Raised for configuration issues.

    Examples:
    - Config file parse errors
    - Config root that is not a mapping
    """


class GitCommandError(RepokitError):
    """Raised when a git invocation fails.

    ``message`` names the attempted operation (e.g. "Could not commit
    changes"). The captured streams are kept verbatim so callers can inspect
    exactly what git wrote.
    """

    def __init__(
        self,
        message: str,
        *,
        exit_code: int,
        command: str,
        working_directory: str | None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(
            message,
            context={
                "exit_code": exit_code,
                "command": command,
                "cwd": working_directory or "",
            },
        )
        self.exit_code = exit_code
        self.command = command
        self.working_directory = working_directory
        self.stdout = stdout
        self.stderr = stderr

    @classmethod
    def from_process(
        cls,
        message: str,
        process: subprocess.CompletedProcess[bytes] | subprocess.CompletedProcess[str],
        command: str,
        working_directory: str | None,
    ) -> GitCommandError:
        """Build the error from a finished process, keeping its streams byte-for-byte."""
        return cls(
            message,
            exit_code=process.returncode,
            command=command,
            working_directory=working_directory,
            stdout=decode_output(process.stdout),
            stderr=decode_output(process.stderr),
        )


class GitTimeoutError(GitCommandError):
    """Raised when git does not finish within ``GitConfig.timeout`` seconds."""

    def __init__(
        self,
        message: str,
        *,
        timeout: float,
        command: str,
        working_directory: str | None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(
            message,
            exit_code=-1,
            command=command,
            working_directory=working_directory,
            stdout=stdout,
            stderr=stderr,
        )
        self.timeout = timeout
        self.context["timeout"] = timeout


__all__ = [
    "ConfigurationError",
    "GitCommandError",
    "GitTimeoutError",
    "RepokitError",
    "decode_output",
]
