"""repokit - a synchronous Python adapter over the git command line.

This package wraps the ``git`` executable behind a small facade that builds
argument vectors, runs them in a repository directory and parses the output.

Exports:
    __version__: Package version string.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
