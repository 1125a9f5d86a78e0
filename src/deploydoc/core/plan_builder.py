"""Test plan construction from deploydoc documents."""

from pathlib import Path

from ..constants import ACTIVATION_KEY, REQUIRE_ENV_KIND
from ..errors import ConfigurationError
from ..models import Annotation, Phase, Step, TestPlan
from ..services.documents import read_document
from .annotation_parser import parse_annotations
from .metadata import parse_metadata


def required_env_vars(annotations: list[Annotation]) -> tuple[str, ...]:
    """Flatten the parameters of all require-env annotations, in order."""
    return tuple(
        name
        for annotation in annotations
        if annotation.kind == REQUIRE_ENV_KIND
        for name in annotation.params
    )


def phases_from_annotations(annotations: list[Annotation]) -> dict[Phase, tuple[Step, ...]]:
    """Group phase annotations into steps, keyed in pipeline order.

    Annotations whose kind is not a phase name are ignored.
    """
    return {
        phase: tuple(
            Step(
                source_name=annotation.source_name,
                line_span=annotation.line_span,
                shell=annotation.content,
            )
            for annotation in annotations
            if annotation.kind == phase.value
        )
        for phase in Phase
    }


def from_document(text: str, file_name: str) -> TestPlan:
    """Build a test plan from document text.

    Args:
        text: Full document text
        file_name: Document name, used for diagnostics

    Returns:
        The built TestPlan

    Raises:
        MetadataParseError: If the front matter cannot be decoded
        ConfigurationError: If the front matter lacks ``deployDoc: true``
    """
    metadata = parse_metadata(text, file_name)
    if metadata.get(ACTIVATION_KEY) is not True:
        raise ConfigurationError(file_name)

    annotations = parse_annotations(text, file_name)
    return TestPlan(
        metadata=metadata,
        required_env_vars=required_env_vars(annotations),
        steps_in_phases=phases_from_annotations(annotations),
    )


def from_file(path: Path) -> TestPlan:
    """Read a document from disk and build its test plan.

    Raises:
        DocumentError: If the file cannot be read
        MetadataParseError: If the front matter cannot be decoded
        ConfigurationError: If the front matter lacks ``deployDoc: true``
    """
    return from_document(read_document(path), str(path))
