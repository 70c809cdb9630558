"""Interactive command-line task tracker backed by a flat local file."""

__version__ = "0.1.0"
