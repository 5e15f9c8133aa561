from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter

import typer
from rich import box
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .core.config import ConfigLoadResult, GitConfig, load_config, set_default_config
from .core.console import console, setup_logging
from .core.registry import discover_commands

app = typer.Typer(help="repokit: run git operations through a typed Python adapter.")
logger = logging.getLogger(__name__)


@dataclass
class AppState:
    config: GitConfig
    config_meta: ConfigLoadResult
    logger: logging.Logger
    repo_path: Path


@app.callback()
def main(
    ctx: typer.Context,
    repo: Path = typer.Option(
        Path("."), "--repo", "-C", help="Repository directory to operate on."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a repokit config file (TOML or JSON)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    loaded_config, meta = load_config(config_path=config)
    app_logger = setup_logging(level=loaded_config.log_level, verbose=verbose)
    loaded_config = loaded_config.model_copy(update={"logger": app_logger})
    set_default_config(loaded_config)

    ctx.obj = AppState(
        config=loaded_config,
        config_meta=meta,
        logger=app_logger,
        repo_path=repo,
    )

    if meta.error:
        console.print(
            Panel(
                f"[bold red]Configuration Error - Safe Mode Active[/bold red]\n\n"
                f"Failed to load {meta.path}:\n{meta.error}\n\n"
                f"[yellow]Using default settings.[/yellow]",
                border_style="red",
            )
        )
    else:
        app_logger.debug(
            "Loaded configuration from %s (env overrides: %s)",
            meta.path,
            sorted(meta.env_overrides),
        )


@app.command("config")
def show_config(ctx: typer.Context) -> None:
    """Show the active configuration and where it came from."""
    state: AppState = ctx.obj
    config = state.config
    meta = state.config_meta

    table = Table(title="Config", box=box.SIMPLE, expand=True)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    for key, value in config.model_dump().items():
        table.add_row(key, str(value))

    console.print(table)

    meta_lines = [
        f"Path: {meta.path}",
        "File loaded: yes" if meta.file_loaded else "File loaded: no (using defaults + env)",
    ]

    if meta.env_overrides:
        meta_lines.append("Env overrides: " + ", ".join(sorted(meta.env_overrides)))

    console.print(Panel("\n".join(meta_lines), title="Config source", box=box.SIMPLE))


@app.command("version")
def show_version() -> None:
    """Print the repokit version."""
    console.print(__version__)


def _register_commands() -> None:
    commands_path = Path(__file__).resolve().parent / "commands"
    typer_modules, function_commands = discover_commands(commands_path)

    registered = {command.name for command in app.registered_commands}
    registered_groups = {group.name for group in app.registered_groups}

    for name, module in typer_modules:
        if name not in registered_groups:
            app.add_typer(module.app, name=name)

    for spec in function_commands:
        if spec.name not in registered:
            app.command(spec.name)(spec.handler)


def _register_commands_with_timing() -> None:
    start = perf_counter()
    _register_commands()
    elapsed = perf_counter() - start
    logger.debug("Command registry initialized in %.3f seconds", elapsed)


_register_commands_with_timing()


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
