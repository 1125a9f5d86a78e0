"""Plan command implementation."""

from pathlib import Path

import typer

from ..constants import EXIT_INVALID_DOCUMENT
from ..core import from_file, plan_to_dict, render_json, render_text
from ..errors import ConfigurationError, DocumentError, MetadataParseError
from ..models import TestPlan
from ..output import get_output_context


def load_plan(file: Path) -> TestPlan:
    """Build the test plan for a document, exiting on invalid documents."""
    ctx = get_output_context()
    try:
        return from_file(file)
    except (DocumentError, MetadataParseError, ConfigurationError) as e:
        ctx.error(str(e), {"file": str(file)})
        raise typer.Exit(EXIT_INVALID_DOCUMENT) from None


def plan(
    file: Path = typer.Argument(..., help="Markdown deployment document"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Also write the JSON plan to this file"
    ),
) -> None:
    """Show the test plan of a document without running it."""
    ctx = get_output_context()
    test_plan = load_plan(file)

    if output is not None:
        output.write_text(render_json(test_plan, indent=2) + "\n")

    if ctx.json_mode:
        ctx.print_json(plan_to_dict(test_plan))
        return

    ctx.print_raw(render_text(test_plan))
    if output is not None:
        ctx.print(f"\n[bold]JSON plan written to:[/bold] {output}")
