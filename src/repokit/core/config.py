"""Git adapter configuration management.

Handles loading and validating configuration from multiple sources:
    - TOML/JSON config files
    - Environment variables (REPOKIT_* prefix)
    - Default values

Key components:
    - GitConfig: Settings shared by every repository handle
    - load_config(): Safe config loading with fallback
    - get_default_config(): Process-wide default used when no config is passed
    - ConfigLoadResult: Metadata about config source
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from collections.abc import Mapping
from contextlib import nullcontext
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from unittest.mock import patch

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from repokit.core.console import get_logger
from repokit.core.errors import ConfigurationError

CONFIG_ENV_VAR = "REPOKIT_CONFIG"


class GitConfig(BaseSettings):
    """Settings injected into every git invocation.

    Instances are frozen: a single config may be shared by reference between
    any number of repository handles.
    """

    model_config = SettingsConfigDict(
        env_prefix="REPOKIT_",
        extra="ignore",
        frozen=True,
        arbitrary_types_allowed=True,
    )

    executable_path: str = Field(default="git", description="Path or name of the git executable.")
    sign_commits: bool = Field(default=False, description="Pass --gpg-sign to git commit.")
    sign_commit_user: str | None = Field(
        default=None, description="Key identity used when signing commits."
    )
    sign_tags: bool = Field(default=False, description="Create signed tags (-s -u <identity>).")
    sign_tag_user: str | None = Field(
        default=None, description="Key identity used when signing tags."
    )
    timeout: float | None = Field(
        default=None,
        description="Seconds before a git invocation is killed. None blocks until git exits.",
    )
    log_level: str = Field(default="INFO", description="Log level for repokit output.")
    logger: logging.Logger = Field(
        default_factory=get_logger,
        exclude=True,
        repr=False,
        description="Logger receiving one debug line per git invocation.",
    )

    @field_validator("executable_path")
    @classmethod
    def ensure_executable_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("executable_path must not be empty")
        return v

    @field_validator("timeout")
    @classmethod
    def ensure_positive_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive when set")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
    ]:
        # Explicit arguments win; load_config drops file entries that env overrides.
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)


@dataclass
class ConfigLoadResult:
    path: Path
    file_loaded: bool
    env_overrides: set[str]
    error: str | None = None


def _resolve_config_path(config_path: Path | None, env_vars: Mapping[str, str]) -> Path:
    candidate = config_path or env_vars.get(CONFIG_ENV_VAR) or (Path.home() / ".repokit.toml")
    return Path(candidate).expanduser()


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read {path}: {exc}") from exc
    suffix = path.suffix.lower()
    parser = json.loads if suffix == ".json" else tomllib.loads

    try:
        data = parser(raw)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Syntax error in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config root in {path} must be a mapping.")

    # Allow the settings to live under [tool.repokit] in a shared file.
    tool_section = data.get("tool", {})
    if isinstance(tool_section, dict) and isinstance(tool_section.get("repokit"), dict):
        return dict(tool_section["repokit"])
    return data


def _detect_env_overrides(env_vars: Mapping[str, str]) -> set[str]:
    """Detect which fields are overridden by environment variables."""
    prefix = GitConfig.model_config.get("env_prefix", "")
    overrides: set[str] = set()
    for field in GitConfig.model_fields:
        if field == "logger":
            continue
        if f"{prefix}{field}".upper() in env_vars:
            overrides.add(field)
    return overrides


def load_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> tuple[GitConfig, ConfigLoadResult]:
    """
    Load configuration with Safe Mode fallback.
    If the file is invalid, returns default config + error message.
    """
    env_vars: Mapping[str, str] = os.environ if env is None else {**os.environ, **env}
    resolved_path = _resolve_config_path(config_path, env_vars)
    env_overrides = _detect_env_overrides(env_vars)

    error: str | None = None
    file_loaded = False
    file_data: dict[str, Any] = {}

    try:
        file_data = _read_config_file(resolved_path)
        file_loaded = resolved_path.exists()
    except ConfigurationError as exc:
        error = str(exc)

    file_data.pop("logger", None)
    # Environment variables override config file entries.
    for field in env_overrides:
        file_data.pop(field, None)

    context_manager = (
        patch.dict(os.environ, env_vars, clear=False) if env is not None else nullcontext()
    )

    try:
        with context_manager:
            config = GitConfig(**file_data)
    except ValidationError as exc:
        error = str(exc)
        try:
            with context_manager:
                config = GitConfig()
        except ValidationError:
            # Environment itself is invalid; fall back to unvalidated defaults.
            config = GitConfig.model_construct()

    load_result = ConfigLoadResult(
        path=resolved_path,
        file_loaded=file_loaded,
        env_overrides=env_overrides,
        error=error,
    )

    return config, load_result


# Process-wide default, built lazily on first use.
_default_config: GitConfig | None = None


def get_default_config() -> GitConfig:
    """Return the process-wide default config, creating it on first access."""
    global _default_config
    if _default_config is None:
        _default_config = GitConfig()
    return _default_config


def set_default_config(config: GitConfig | None) -> None:
    """Replace the process-wide default. ``None`` resets it to lazy creation."""
    global _default_config
    _default_config = config


__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigLoadResult",
    "GitConfig",
    "get_default_config",
    "load_config",
    "set_default_config",
]
