"""Schema layer for parsing and validating graph description files."""

from .errors import SchemaLoadError, SchemaValidationError
from .models import (
    DataEdge,
    EdgeSpecs,
    GraphSpec,
    Module,
    NetworkEdge,
    Sensor,
    StateEdge,
)
from .loader import load_yaml, parse_graph_spec, parse_graph_spec_from_string

__all__ = [
    "SchemaLoadError",
    "SchemaValidationError",
    "DataEdge",
    "EdgeSpecs",
    "GraphSpec",
    "Module",
    "NetworkEdge",
    "Sensor",
    "StateEdge",
    "load_yaml",
    "parse_graph_spec",
    "parse_graph_spec_from_string",
]
