"""Init command implementation."""

import typer

from ..config import write_config_template
from ..constants import CONFIG_FILENAME
from ..output import get_output_context
from ..services import GitError, get_repo_root


def init() -> None:
    """Write a .devbranch.toml with the default settings to the repository root."""
    ctx = get_output_context()

    try:
        repo_root = get_repo_root()
    except GitError:
        ctx.error("Not a git repository")
        raise typer.Exit(1) from None

    config_path = repo_root / CONFIG_FILENAME

    if ctx.dry_run:
        ctx.print("[cyan][DRY RUN][/cyan] Would initialize devbranch in this repository:")
        if not config_path.exists():
            ctx.print(f"  Create config: {config_path}")
        else:
            ctx.print(f"  Config already exists: {config_path}")
        return

    if config_path.exists():
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")
        return

    write_config_template(repo_root)
    ctx.print(f"[green]Created config template:[/green] {config_path}")
