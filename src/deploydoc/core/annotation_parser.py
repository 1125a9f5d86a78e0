"""Annotation parsing for deploydoc documents.

A marker is an HTML comment on its own line naming a kind and optional
parameters. The fenced code block that follows it (blank lines allowed in
between) is the marker's content:

    <!-- deploy-doc create-infrastructure -->
    ```bash
    terraform apply -auto-approve
    ```

A marker that is not followed by a fence carries no content; this is the
usual form for ``require-env``:

    <!-- deploy-doc require-env AWS_ACCESS_KEY_ID AWS_SECRET_ACCESS_KEY -->
"""

import re

from ..constants import MARKER_TOKEN
from ..models import Annotation

MARKER_PATTERN = re.compile(
    rf"^\s*<!--\s*{re.escape(MARKER_TOKEN)}\s+(?P<kind>\S+?)(?P<args>(?:\s.*?)?)\s*-->\s*$"
)
FENCE_OPEN_PATTERN = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})")
FENCE_CLOSE_PATTERN = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})\s*$")


def _opening_fence(line: str) -> str | None:
    match = FENCE_OPEN_PATTERN.match(line)
    return match.group("fence") if match else None


def _closing_index(lines: list[str], open_index: int, fence: str) -> int:
    """Return the index of the line closing the fence opened at open_index.

    Returns len(lines) when the block is never closed.
    """
    for index in range(open_index + 1, len(lines)):
        match = FENCE_CLOSE_PATTERN.match(lines[index])
        if match is None:
            continue
        candidate = match.group("fence")
        if candidate[0] == fence[0] and len(candidate) >= len(fence):
            return index
    return len(lines)


def parse_annotations(text: str, source_name: str) -> list[Annotation]:
    """Parse all deploy-doc annotations in a document.

    Args:
        text: Full document text
        source_name: Name of the document, recorded on each annotation

    Returns:
        Annotations in document order (empty if there are no markers)
    """
    lines = text.splitlines(keepends=True)
    annotations: list[Annotation] = []

    index = 0
    while index < len(lines):
        fence = _opening_fence(lines[index])
        if fence is not None:
            # Unannotated block: markers inside it are literal text
            index = _closing_index(lines, index, fence) + 1
            continue

        marker = MARKER_PATTERN.match(lines[index])
        if marker is None:
            index += 1
            continue

        kind = marker.group("kind")
        params = tuple(marker.group("args").split())

        block_index = index + 1
        while block_index < len(lines) and not lines[block_index].strip():
            block_index += 1
        fence = _opening_fence(lines[block_index]) if block_index < len(lines) else None

        if fence is None:
            annotations.append(
                Annotation(
                    kind=kind,
                    params=params,
                    source_name=source_name,
                    line_span=(index + 1, index + 1),
                )
            )
            index += 1
            continue

        close_index = _closing_index(lines, block_index, fence)
        last_index = min(close_index, len(lines) - 1)
        annotations.append(
            Annotation(
                kind=kind,
                params=params,
                source_name=source_name,
                line_span=(block_index + 1, last_index + 1),
                content="".join(lines[block_index + 1 : close_index]),
            )
        )
        index = close_index + 1

    return annotations
