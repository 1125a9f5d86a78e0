"""External collaborators for deploydoc.

- shell: Runs step commands and reports exit status
- documents: Reads documents from disk
"""

from .documents import read_document
from .shell import ShellError, run_shell

__all__ = [
    "ShellError",
    "read_document",
    "run_shell",
]
