"""Step model for executable plan steps."""

from pydantic import BaseModel, ConfigDict, Field


class Step(BaseModel):
    """One shell block assigned to a phase.

    Example:
        >>> step = Step(source_name="deploy.md", line_span=(12, 16), shell="make up\\n")
        >>> step.identity
        'deploy.md:12-16'
    """

    model_config = ConfigDict(frozen=True)

    source_name: str = Field(description="Originating document")
    line_span: tuple[int, int] = Field(description="Inclusive block line span")
    shell: str = Field(description="Command text to execute")

    @property
    def identity(self) -> str:
        """Location of the step in its document, for diagnostics."""
        start, end = self.line_span
        return f"{self.source_name}:{start}-{end}"
