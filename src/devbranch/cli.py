"""devbranch CLI: development branch initializer for the mainboard repository."""

import typer
from rich.console import Console

from devbranch import __version__

from .commands import create, init, show_config, validate
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"devbranch {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="devbranch",
    help="Create Major.Minor.Rev_Dev development branches from the synced trunk",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Run read-only checks and show what would change",
    ),
) -> None:
    """devbranch - development branch initializer."""
    configure_logging(verbosity=verbose, quiet=quiet, no_color=no_color)
    console = Console(no_color=no_color, highlight=False, quiet=quiet)
    err_console = Console(stderr=True, no_color=no_color, highlight=False)
    set_output_context(
        OutputContext(
            console=console,
            err_console=err_console,
            json_mode=json_output,
            dry_run=dry_run,
        )
    )


app.command()(create)
app.command()(validate)
app.command()(init)
app.command("config")(show_config)


if __name__ == "__main__":
    app()
