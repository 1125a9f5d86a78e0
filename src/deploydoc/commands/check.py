"""Check command implementation."""

from pathlib import Path

import typer

from ..constants import EXIT_MISSING_ENV
from ..core import validate_environment
from ..errors import MissingEnvironmentError
from ..models import Phase
from ..output import get_output_context
from .plan import load_plan


def check(
    file: Path = typer.Argument(..., help="Markdown deployment document"),
) -> None:
    """Validate a document and its required environment without running it."""
    ctx = get_output_context()
    test_plan = load_plan(file)

    try:
        validate_environment(test_plan)
    except MissingEnvironmentError as e:
        ctx.error(str(e), {"missing": e.missing})
        raise typer.Exit(EXIT_MISSING_ENV) from None

    counts = {phase.value: len(test_plan.steps(phase)) for phase in Phase}
    ctx.success(
        f"{file} is ready to run ({test_plan.step_count} steps)",
        {"file": str(file), "steps": counts},
    )
    for phase, count in counts.items():
        ctx.print(f"  {phase}: {count}")
