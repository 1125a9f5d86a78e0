"""Core logic for deploydoc.

- annotation_parser: Marker and code block parsing
- metadata: Front matter decoding
- plan_builder: TestPlan construction
- executor: Phased execution with guaranteed cleanup
- presentation: Text and JSON views of a plan
"""

from .annotation_parser import parse_annotations
from .executor import (
    StepRunner,
    default_runner,
    execute,
    execute_phase,
    execute_plan,
    validate_environment,
)
from .metadata import parse_metadata
from .plan_builder import from_document, from_file, phases_from_annotations, required_env_vars
from .presentation import plan_to_dict, render_json, render_text

__all__ = [
    "StepRunner",
    "default_runner",
    "execute",
    "execute_phase",
    "execute_plan",
    "from_document",
    "from_file",
    "parse_annotations",
    "parse_metadata",
    "phases_from_annotations",
    "plan_to_dict",
    "render_json",
    "render_text",
    "required_env_vars",
    "validate_environment",
]
