"""Runner that builds a graph file and audits the result."""

from pathlib import Path

from ..diagnostics import DiagnosticLog
from ..graph.builder import build_graph
from ..graph.dataflow_graph import DataflowGraph
from ..graph.engine import DEFAULT_SLOT_PITCH
from ..schema.loader import parse_graph_spec
from .consistency import check_connector_consistency


def run_validators(graph: DataflowGraph) -> DiagnosticLog:
    """Run all audits on a built graph.

    Args:
        graph: The graph to audit.

    Returns:
        Combined DiagnosticLog from all audits.
    """
    result = DiagnosticLog()
    result.merge(check_connector_consistency(graph))
    return result


def check_graph_file(
    path: str | Path, slot_pitch: float = DEFAULT_SLOT_PITCH
) -> tuple[DataflowGraph, DiagnosticLog]:
    """Load a graph file, build it headlessly and audit it.

    Args:
        path: Path to the YAML graph file.
        slot_pitch: Horizontal distance between slot anchors.

    Returns:
        The built graph and every diagnostic: rejected requests first,
        then audit findings.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the file fails schema validation.
    """
    spec = parse_graph_spec(path)
    graph = build_graph(spec, slot_pitch=slot_pitch)

    result = DiagnosticLog()
    result.merge(graph.diagnostics)
    result.merge(run_validators(graph))
    return graph, result
