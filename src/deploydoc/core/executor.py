"""Phase executor for deploydoc test plans.

Runs a built TestPlan through its pipeline:

1. Check that every required environment variable is set
2. Run pre-install; a failure here is fatal and nothing is cleaned up
3. Run create-infrastructure and run-tests; the first failure stops
   them and is recorded
4. Always run destroy-infrastructure afterwards; a failure here is fatal
   and reported as a cleanup failure

Nothing in this module exits the process. Fatal conditions are raised as
typed errors for the caller to map to exit codes.
"""

import logging
import time
from collections.abc import Callable, Mapping
from functools import partial

from ..config import ExecutionConfig
from ..errors import CleanupFailureError, MissingEnvironmentError, StepExecutionError
from ..models import (
    PROTECTED_PHASES,
    ExecutionResult,
    Outcome,
    Phase,
    Step,
    StepResult,
    TestPlan,
)
from ..services.shell import ShellError, run_shell

logger = logging.getLogger(__name__)

# Runs a step's shell text and returns its exit status
StepRunner = Callable[[str], int]


def default_runner(config: ExecutionConfig) -> StepRunner:
    """Build a runner that executes steps through the configured shell."""
    return partial(
        run_shell,
        shell=config.shell,
        cwd=config.working_dir,
        output_to_stderr=config.output_to_stderr,
    )


def validate_environment(plan: TestPlan, environ: Mapping[str, str] | None = None) -> None:
    """Check that all required environment variables are set.

    Raises:
        MissingEnvironmentError: With every missing name, in declaration order
    """
    missing = plan.missing_env_vars(environ)
    if missing:
        raise MissingEnvironmentError(missing)


def _record(
    results: list[StepResult] | None,
    phase: Phase,
    step: Step,
    exit_code: int | None,
    started: float,
) -> int:
    duration_ms = int((time.monotonic() - started) * 1000)
    if results is not None:
        results.append(
            StepResult(
                phase=phase,
                step=step.identity,
                exit_code=exit_code,
                duration_ms=duration_ms,
            )
        )
    return duration_ms


def execute_phase(
    plan: TestPlan,
    phase: Phase,
    runner: StepRunner,
    results: list[StepResult] | None = None,
    *,
    show_commands: bool = True,
) -> None:
    """Run all steps of a phase in order, stopping at the first failure.

    Args:
        plan: Plan to take the steps from
        phase: Phase to run
        runner: Callable running a step's shell text
        results: Optional list that receives a StepResult per step run
        show_commands: Log each step's shell text before running it

    Raises:
        StepExecutionError: If a step exits non-zero or cannot be started
    """
    logger.info(f"Executing phase {phase.value}")

    for step in plan.steps(phase):
        logger.info(f"Running step {step.identity}")
        if show_commands:
            logger.info(step.shell.strip())

        started = time.monotonic()
        try:
            exit_code = runner(step.shell)
        except ShellError as e:
            _record(results, phase, step, None, started)
            raise StepExecutionError(phase, step, None, str(e)) from e

        duration_ms = _record(results, phase, step, exit_code, started)
        if exit_code != 0:
            raise StepExecutionError(phase, step, exit_code)
        logger.debug(f"Step {step.identity} finished in {duration_ms} ms")


def execute_plan(
    plan: TestPlan,
    *,
    runner: StepRunner | None = None,
    environ: Mapping[str, str] | None = None,
    config: ExecutionConfig | None = None,
) -> ExecutionResult:
    """Execute a test plan with guaranteed cleanup.

    Args:
        plan: Plan to execute
        runner: Step runner (default: run through the configured shell)
        environ: Environment checked for required variables (default: os.environ)
        config: Execution settings

    Returns:
        ExecutionResult; outcome is ``failed`` when create-infrastructure or
        run-tests failed and cleanup succeeded

    Raises:
        MissingEnvironmentError: If required variables are unset (no phase runs)
        StepExecutionError: If a pre-install step fails (no cleanup runs)
        CleanupFailureError: If a destroy-infrastructure step fails
    """
    config = config or ExecutionConfig()
    runner = runner or default_runner(config)

    validate_environment(plan, environ)

    phases_run: list[Phase] = []
    step_results: list[StepResult] = []

    def run(phase: Phase) -> None:
        phases_run.append(phase)
        execute_phase(plan, phase, runner, step_results, show_commands=config.show_commands)

    run(Phase.PRE_INSTALL)

    failure: str | None = None
    try:
        for phase in PROTECTED_PHASES:
            run(phase)
    except StepExecutionError as e:
        logger.error(str(e))
        failure = str(e)
    finally:
        try:
            run(Phase.DESTROY_INFRASTRUCTURE)
        except StepExecutionError as e:
            logger.error("Failed to clean up the infrastructure!")
            raise CleanupFailureError(e) from e

    return ExecutionResult(
        outcome=Outcome.FAILED if failure else Outcome.SUCCEEDED,
        phases_run=phases_run,
        steps=step_results,
        failure=failure,
    )


def execute(
    plan: TestPlan,
    *,
    runner: StepRunner | None = None,
    environ: Mapping[str, str] | None = None,
    config: ExecutionConfig | None = None,
) -> bool:
    """Execute a test plan and return True if it succeeded.

    Raises the same fatal errors as execute_plan.
    """
    return execute_plan(plan, runner=runner, environ=environ, config=config).success
