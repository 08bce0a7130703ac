"""Output formatting for devbranch CLI."""

import json
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.markup import escape


@dataclass
class OutputContext:
    """Context for output formatting.

    Operator-facing lines come in four categories (info, success, warning,
    error). Errors go to the error console so they land on stderr.
    """

    console: Console
    err_console: Console = field(default_factory=lambda: Console(stderr=True))
    json_mode: bool = False
    dry_run: bool = False

    def print(self, message: str, style: str | None = None) -> None:
        """Print message respecting output mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_json(self, data: dict[str, Any]) -> None:
        """Print JSON data."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def result(self, data: dict[str, Any], message: str = "") -> None:
        """Print result in appropriate format."""
        if self.json_mode:
            self.print_json(data)
        elif message:
            self.console.print(message)

    def info(self, message: str) -> None:
        """Print an informational line."""
        self.print(f"[cyan]{escape(message)}[/cyan]")

    def warning(self, message: str) -> None:
        """Print a warning line."""
        self.print(f"[yellow]⚠ {escape(message)}[/yellow]")

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print error in appropriate format."""
        if self.json_mode and data:
            self.print_json({"error": message, **data})
        elif self.json_mode:
            self.print_json({"error": message})
        else:
            self.err_console.print(f"[red]Error: {escape(message)}[/red]")

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print success message in appropriate format."""
        if self.json_mode and data:
            self.print_json({"success": message, **data})
        elif self.json_mode:
            self.print_json({"success": message})
        else:
            self.console.print(f"[green]✓ {escape(message)}[/green]")


# Global output context (set by cli.py main callback)
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context.

    Returns a default OutputContext if not yet initialized by CLI.
    """
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext) -> None:
    """Set the global output context. Called by CLI main callback."""
    global _ctx
    _ctx = ctx
