"""Front matter extraction for deploydoc documents."""

import re
from typing import Any

import yaml

from ..constants import FRONT_MATTER_FENCE
from ..errors import MetadataParseError

FENCE_PATTERN = re.compile(rf"^{re.escape(FRONT_MATTER_FENCE)}[ \t]*\r?$", re.MULTILINE)


def parse_metadata(text: str, file_name: str) -> dict[str, Any]:
    """Decode the YAML front matter of a document.

    The front matter is the region between the first two ``---`` lines.

    Args:
        text: Full document text
        file_name: Document name used in error messages

    Returns:
        Decoded key-value mapping

    Raises:
        MetadataParseError: If the fences are missing, the YAML is invalid,
            or it does not decode to a mapping
    """
    parts = FENCE_PATTERN.split(text, maxsplit=2)
    if len(parts) < 3:
        raise MetadataParseError(file_name)

    try:
        metadata = yaml.safe_load(parts[1])
    except Exception as e:
        raise MetadataParseError(file_name) from e

    if not isinstance(metadata, dict):
        raise MetadataParseError(file_name)
    return metadata
