"""Execution result models."""

from enum import Enum

from pydantic import BaseModel, Field

from .phase import Phase


class Outcome(str, Enum):
    """Terminal outcome of a run that reached the cleanup phase."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


class StepResult(BaseModel):
    """Result of running a single step."""

    phase: Phase = Field(description="Phase the step ran in")
    step: str = Field(description="Step identity (source:start-end)")
    exit_code: int | None = Field(description="Command exit status, None if not started")
    duration_ms: int = Field(default=0, description="Wall time in ms")

    @property
    def passed(self) -> bool:
        return self.exit_code == 0


class ExecutionResult(BaseModel):
    """Outcome of executing a test plan.

    Attributes:
        outcome: ``succeeded`` or ``failed``.
        phases_run: Phases that were attempted, in order.
        steps: Per-step results, in execution order.
        failure: Message of the protected-region failure, if any.
    """

    outcome: Outcome = Field(description="Terminal outcome")
    phases_run: list[Phase] = Field(default_factory=list, description="Attempted phases")
    steps: list[StepResult] = Field(default_factory=list, description="Per-step results")
    failure: str | None = Field(default=None, description="Caught failure message")

    @property
    def success(self) -> bool:
        return self.outcome == Outcome.SUCCEEDED
