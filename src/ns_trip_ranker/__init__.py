"""NS trip ranking handlers."""

__version__ = "0.1.0"
