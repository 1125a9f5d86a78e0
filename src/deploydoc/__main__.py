"""Allow running deploydoc as ``python -m deploydoc``."""

from .cli import app

app()
