"""Output formatting for the command-line interface."""

from .formatter import format_diagnostics, format_graph

__all__ = [
    "format_diagnostics",
    "format_graph",
]
