"""Create command implementation."""

from pathlib import Path

import typer
from rich.markup import escape

from ..config import ConfigError, load_config
from ..core import BranchInitializer, DirtyWorkingTreeError, InitError, RepoContext
from ..core.initializer import Reporter
from ..models import BRANCH_NAME_EXAMPLE, InitSummary
from ..output import OutputContext, get_output_context


def _reporter(ctx: OutputContext) -> Reporter:
    """Route initializer progress lines to the output context."""

    def report(level: str, message: str) -> None:
        if level == "success":
            ctx.print(f"[green]✓[/green] {escape(message)}")
        elif level == "warning":
            ctx.warning(message)
        else:
            ctx.info(message)

    return report


def _print_summary(ctx: OutputContext, summary: InitSummary) -> None:
    if ctx.json_mode:
        ctx.print_json({"success": True, **summary.model_dump(mode="json")})
        return

    ctx.print("")
    if summary.dry_run:
        ctx.print("[cyan][DRY RUN][/cyan] Nothing was changed. Planned commit message:")
        ctx.print(escape(summary.commit_message), style="dim")
        return

    ctx.print("[green]===================================[/green]")
    ctx.print("[bold green]SUCCESS! Development branch created[/bold green]")
    ctx.print("[green]===================================[/green]")
    ctx.print("")
    ctx.info(f"Branch name: {summary.branch}")
    ctx.info(f"Version: {summary.version.version}")
    if summary.commit_sha:
        ctx.info(f"Commit: {summary.commit_sha[:12]}")
    ctx.print("")
    ctx.info("Next steps:")
    ctx.info("  1. Start your development work")
    ctx.info(f"  2. When ready, push the branch: git push -u origin {summary.branch}")


def create(
    branch_name: str | None = typer.Argument(
        None,
        metavar="BRANCH_NAME",
        help=f"Development branch to create, e.g. {BRANCH_NAME_EXAMPLE}",
        show_default=False,
    ),
) -> None:
    """Create a Major.Minor.Rev_Dev branch from the synced trunk."""
    ctx = get_output_context()

    if branch_name is None:
        ctx.error("Branch name is required!")
        ctx.err_console.print("Usage: devbranch create <BranchName>")
        ctx.err_console.print(f"Example: devbranch create {BRANCH_NAME_EXAMPLE}")
        raise typer.Exit(1)

    repo_root = Path.cwd()
    try:
        config = load_config(repo_root)
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None

    ctx.info("=== Development Branch Creation ===")
    if ctx.dry_run:
        ctx.print("[cyan][DRY RUN][/cyan] Read-only checks only, no changes will be made")
    ctx.print("")

    initializer = BranchInitializer(RepoContext(root=repo_root, config=config), _reporter(ctx))
    try:
        summary = initializer.initialize(branch_name, dry_run=ctx.dry_run)
    except InitError as e:
        ctx.error(e.message, data=e.to_dict())
        if not ctx.json_mode:
            if isinstance(e, DirtyWorkingTreeError):
                for path in e.paths:
                    ctx.err_console.print(f"  {path}", markup=False, highlight=False)
            ctx.err_console.print(f"[yellow]{e.hint}[/yellow]")
        raise typer.Exit(1) from None
    except (OSError, UnicodeError) as e:
        ctx.error(f"Filesystem operation failed: {e}", data={"stage": initializer.stage.value})
        raise typer.Exit(1) from None

    _print_summary(ctx, summary)
