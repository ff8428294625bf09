"""flowgraph: a dataflow graph of sensors and modules with connector bookkeeping."""

from .diagnostics import Diagnostic, DiagnosticLog, IssueKind, Severity
from .graph import DataflowGraph, build_graph
from .schema import DataEdge, Module, NetworkEdge, Sensor, StateEdge

__all__ = [
    "Diagnostic",
    "DiagnosticLog",
    "IssueKind",
    "Severity",
    "DataflowGraph",
    "build_graph",
    "DataEdge",
    "Module",
    "NetworkEdge",
    "Sensor",
    "StateEdge",
]
