"""CLI command implementations for deploydoc.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .check import check
from .init import init
from .plan import load_plan, plan
from .run import run

__all__ = [
    "check",
    "init",
    "load_plan",
    "plan",
    "run",
]
