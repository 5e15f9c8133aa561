"""Core infrastructure shared by the git adapter and the CLI.

Modules:
    - config: GitConfig settings model and loading helpers
    - console: Rich consoles and logging setup
    - errors: Exception hierarchy
    - decorators: CLI error presentation
    - registry: CLI command discovery
"""

from __future__ import annotations
