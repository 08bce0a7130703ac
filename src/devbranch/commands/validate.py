"""Validate command implementation."""

import typer

from ..core import InvalidFormatError, parse_branch_name
from ..output import get_output_context


def validate(
    branch_name: str = typer.Argument(..., metavar="BRANCH_NAME", help="Branch name to check"),
) -> None:
    """Check a branch name against Major.Minor.Rev_Dev without touching git."""
    ctx = get_output_context()
    try:
        version = parse_branch_name(branch_name)
    except InvalidFormatError as e:
        ctx.error(e.message, data=e.to_dict())
        if not ctx.json_mode:
            ctx.err_console.print(f"[yellow]{e.hint}[/yellow]")
        raise typer.Exit(1) from None

    ctx.success(
        f"Branch name is valid: {version.version}",
        data={"branch": branch_name, **version.model_dump()},
    )
