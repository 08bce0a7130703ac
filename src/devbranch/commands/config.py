"""Config command implementation."""

import json
from pathlib import Path

import typer

from ..config import ConfigError, load_config
from ..constants import CONFIG_FILENAME
from ..output import get_output_context


def show_config() -> None:
    """Show the effective configuration for the current directory."""
    ctx = get_output_context()
    repo_root = Path.cwd()
    try:
        config = load_config(repo_root)
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None

    data = config.model_dump()
    if ctx.json_mode:
        ctx.print_json(data)
        return

    source = repo_root / CONFIG_FILENAME
    ctx.print(f"[bold]Source:[/bold] {source if source.exists() else '(defaults)'}")
    ctx.console.print_json(json.dumps(data))
