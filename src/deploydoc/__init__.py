"""deploydoc: execute the shell steps of a markdown deployment document."""

__version__ = "0.1.0"
