"""Annotation model for parsed document markers."""

from pydantic import BaseModel, ConfigDict, Field


class Annotation(BaseModel):
    """A parsed ``deploy-doc`` marker and the code block that follows it.

    Attributes:
        kind: Marker kind, a phase name or ``require-env``. Not validated.
        params: Whitespace-separated arguments after the kind.
        source_name: Document the annotation came from.
        line_span: Inclusive 1-based (start, end) lines of the block,
            fences included.
        content: Raw text between the fences.
    """

    model_config = ConfigDict(frozen=True)

    kind: str = Field(description="Marker kind")
    params: tuple[str, ...] = Field(default=(), description="Marker arguments")
    source_name: str = Field(description="Originating document")
    line_span: tuple[int, int] = Field(description="Inclusive block line span")
    content: str = Field(default="", description="Raw block content")
