"""Run command implementation."""

from pathlib import Path

import typer

from ..config import load_config
from ..constants import (
    CONFIG_FILE_NAME,
    EXIT_CLEANUP_FAILED,
    EXIT_FAILED,
    EXIT_MISSING_ENV,
    EXIT_PRE_INSTALL_FAILED,
)
from ..core import execute_plan, render_text
from ..errors import CleanupFailureError, MissingEnvironmentError, StepExecutionError
from ..output import get_output_context
from .plan import load_plan


def run(
    file: Path = typer.Argument(..., help="Markdown deployment document"),
    config_path: Path = typer.Option(
        Path(CONFIG_FILE_NAME), "--config", "-c", help="Path to deploydoc.toml"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Show the test plan instead of running it"
    ),
) -> None:
    """Run the deployment test plan of a document."""
    ctx = get_output_context()
    test_plan = load_plan(file)
    config = load_config(config_path)

    if dry_run:
        ctx.print("[cyan][DRY RUN][/cyan] Would run:")
        ctx.print_raw(render_text(test_plan))
        return

    execution = config.execution
    if ctx.json_mode:
        execution = execution.model_copy(update={"output_to_stderr": True})

    try:
        result = execute_plan(test_plan, config=execution)
    except MissingEnvironmentError as e:
        ctx.error(str(e), {"missing": e.missing})
        raise typer.Exit(EXIT_MISSING_ENV) from None
    except CleanupFailureError as e:
        ctx.error(
            str(e),
            {"phase": e.step_error.phase.value, "step": e.step_error.step.identity},
        )
        raise typer.Exit(EXIT_CLEANUP_FAILED) from None
    except StepExecutionError as e:
        ctx.error(str(e), {"phase": e.phase.value, "step": e.step.identity})
        raise typer.Exit(EXIT_PRE_INSTALL_FAILED) from None

    ctx.step_summary(result)
    data = result.model_dump(mode="json")
    if not result.success:
        ctx.error(f"Deployment test failed: {result.failure}", data)
        raise typer.Exit(EXIT_FAILED)

    ctx.success("Deployment test succeeded", data)
