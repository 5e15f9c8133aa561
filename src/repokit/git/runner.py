"""Synchronous execution of GitCommand values.

run_command() is the single place where git is spawned. It logs the
resolved command line, blocks until git exits (or GitConfig.timeout
expires) and converts every failure into GitCommandError.
"""

from __future__ import annotations

import subprocess

from repokit.core.config import GitConfig
from repokit.core.errors import GitCommandError, GitTimeoutError, decode_output

from .commands import GitCommand

LOG_COMPONENT = "repokit"

# Conventional shell exit status for "command not found / not executable".
SPAWN_FAILURE_EXIT_CODE = 127


def _log_exec(command: GitCommand, config: GitConfig) -> None:
    try:
        config.logger.debug(
            "[%s] exec [%s] %s", LOG_COMPONENT, command.cwd or "", command.command_line
        )
    except Exception:  # a broken log sink must not fail the git call
        pass


def run_command(command: GitCommand, config: GitConfig) -> str:
    """Run ``command`` and return its stdout.

    Raises:
        GitCommandError: git exited non-zero or could not be started.
        GitTimeoutError: ``config.timeout`` elapsed before git exited.
    """
    _log_exec(command, config)

    try:
        process = subprocess.run(
            list(command.argv),
            cwd=command.cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            timeout=config.timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise GitTimeoutError(
            command.description,
            timeout=float(exc.timeout),
            command=command.command_line,
            working_directory=command.cwd,
            stdout=decode_output(exc.stdout),
            stderr=decode_output(exc.stderr),
        ) from exc
    except OSError as exc:
        raise GitCommandError(
            command.description,
            exit_code=SPAWN_FAILURE_EXIT_CODE,
            command=command.command_line,
            working_directory=command.cwd,
            stderr=str(exc),
        ) from exc

    if process.returncode != 0:
        raise GitCommandError.from_process(
            command.description, process, command.command_line, command.cwd
        )

    return decode_output(process.stdout)


__all__ = ["LOG_COMPONENT", "SPAWN_FAILURE_EXIT_CODE", "run_command"]
