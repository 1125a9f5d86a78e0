"""Output for the deploydoc CLI.

Plans and run results go to stdout, either as rich text or, with
``--json``, as a single JSON document per command.
"""

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import ExecutionResult


@dataclass
class OutputContext:
    """Where and how a command reports its results."""

    console: Console
    json_mode: bool = False

    def print(self, message: str, style: str | None = None) -> None:
        """Print a rich-markup message; suppressed in JSON mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_raw(self, text: str) -> None:
        """Print text verbatim (shell blocks, rendered plans); suppressed in JSON mode."""
        if not self.json_mode:
            self.console.print(text, markup=False, highlight=False)

    def print_json(self, data: dict[str, Any]) -> None:
        """Write the command's JSON document; only in JSON mode."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Report a failure with optional machine-readable context."""
        if self.json_mode:
            self.print_json({"error": message, **(data or {})})
        else:
            self.console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Report success with optional machine-readable context."""
        if self.json_mode:
            self.print_json({"success": message, **(data or {})})
        else:
            self.console.print(f"[green]{escape(message)}[/green]", highlight=False)

    def step_summary(self, result: ExecutionResult) -> None:
        """Print one row per executed step; suppressed in JSON mode."""
        if self.json_mode or not result.steps:
            return
        table = Table(title="Steps")
        table.add_column("Phase")
        table.add_column("Step")
        table.add_column("Exit", justify="right")
        table.add_column("Time", justify="right")
        for step in result.steps:
            exit_code = "-" if step.exit_code is None else str(step.exit_code)
            style = None if step.passed else "red"
            table.add_row(
                step.phase.value,
                escape(step.step),
                exit_code,
                f"{step.duration_ms} ms",
                style=style,
            )
        self.console.print(table)


# Set by the cli.py main callback
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Return the CLI's output context, or a plain stdout one outside the CLI."""
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext | None) -> None:
    """Install the output context for the current command."""
    global _ctx
    _ctx = ctx
