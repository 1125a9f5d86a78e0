"""Document reading for deploydoc."""

from pathlib import Path

from ..errors import DocumentError


def read_document(path: Path) -> str:
    """Read a markdown document as UTF-8 text, dropping a leading BOM.

    Raises:
        DocumentError: If the file does not exist or cannot be read
    """
    if not path.is_file():
        raise DocumentError(f"Document not found: {path}")
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(f"Could not read {path}: {e}") from e
