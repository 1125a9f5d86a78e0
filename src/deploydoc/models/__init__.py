"""Pydantic data models for deploydoc.

This package defines the data structures passed between the parser,
builder, executor and presentation layers:
- Pipeline phases (Phase)
- Parsed document markers (Annotation)
- Executable steps and the plan that owns them (Step, TestPlan)
- Execution outcomes (Outcome, StepResult, ExecutionResult)

Annotation, Step and TestPlan are frozen: they cannot be modified once built.

Example:
    >>> from deploydoc.models import Phase, Step
    >>> step = Step(source_name="deploy.md", line_span=(3, 5), shell="echo hi\\n")
    >>> [phase.value for phase in Phase][0]
    'pre-install'
"""

from .annotation import Annotation
from .phase import PROTECTED_PHASES, Phase
from .result import ExecutionResult, Outcome, StepResult
from .step import Step
from .test_plan import TestPlan

__all__ = [
    "PROTECTED_PHASES",
    "Annotation",
    "ExecutionResult",
    "Outcome",
    "Phase",
    "Step",
    "StepResult",
    "TestPlan",
]
