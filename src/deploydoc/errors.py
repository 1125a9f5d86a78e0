"""Errors raised while building and executing a deployment test plan.

Construction errors (``DocumentError``, ``MetadataParseError``,
``ConfigurationError``) abort before anything runs. Execution errors carry
enough context to locate the offending block in the source document.
"""

from .models import Phase, Step


class DeployDocError(Exception):
    """Base exception for deploydoc errors."""


class DocumentError(DeployDocError):
    """Raised when a document cannot be read."""


class MetadataParseError(DeployDocError):
    """Raised when the front matter of a document is missing or malformed."""

    def __init__(self, file_name: str) -> None:
        super().__init__(f"Could not parse metadata in {file_name}")
        self.file_name = file_name


MetadataError = MetadataParseError


class ConfigurationError(DeployDocError):
    """Raised when a document is not marked with ``deployDoc: true``."""

    def __init__(self, file_name: str) -> None:
        super().__init__(f"Markdown file {file_name} does not have a 'deployDoc: true' metadatum")
        self.file_name = file_name


class MissingEnvironmentError(DeployDocError):
    """Raised when required environment variables are not set."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            "Missing the following required environment variables: " + ", ".join(missing)
        )
        self.missing = list(missing)


class StepExecutionError(DeployDocError):
    """Raised when a step's command does not exit with status 0.

    Attributes:
        phase: Phase the step belongs to.
        step: The failing step.
        exit_code: Exit status of the command, or None if it never started.
    """

    def __init__(
        self,
        phase: Phase,
        step: Step,
        exit_code: int | None,
        reason: str | None = None,
    ) -> None:
        detail = reason or f"exit status {exit_code}"
        super().__init__(
            f"Could not finish step {step.identity} in phase {phase.value} ({detail})"
        )
        self.phase = phase
        self.step = step
        self.exit_code = exit_code


class CleanupFailureError(DeployDocError):
    """Raised when the destroy-infrastructure phase fails.

    Infrastructure may have been left behind.
    """

    def __init__(self, step_error: StepExecutionError) -> None:
        super().__init__(f"Failed to clean up the infrastructure: {step_error}")
        self.step_error = step_error
