"""Audit of the correspondence between data edges and their connectors."""

from ..diagnostics import Diagnostic, DiagnosticLog, IssueKind, Severity
from ..graph.dataflow_graph import DataflowGraph

OPERATION = "audit"


def check_connector_consistency(graph: DataflowGraph) -> DiagnosticLog:
    """Check that every data edge has exactly one connector on each end.

    This validator checks:
    - Each entity's outgoing and incoming ledgers hold one handle per edge
    - Each outgoing connector appears exactly once among the target's
      incoming connectors, next to an equal edge
    - Each incoming connector appears among its source's outgoing connectors

    Args:
        graph: The graph to audit.

    Returns:
        DiagnosticLog with a consistency error per broken correspondence.
    """
    result = DiagnosticLog()
    registry = graph.registry

    for record in registry.records():
        if not record.outgoing.is_aligned():
            _add(result, f"outgoing connectors of '{record.id}' are misaligned", {"entity": record.id})
        if not record.incoming.is_aligned():
            _add(result, f"incoming connectors of '{record.id}' are misaligned", {"entity": record.id})

    for record in registry.records():
        for edge, connector in record.outgoing.pairs():
            request = edge.model_dump(mode="json")
            target = registry.module(edge.module_id)
            if target is None:
                _add(result, f"data edge from '{record.id}' targets a missing module", request)
                continue

            matches = [
                incoming_edge
                for incoming_edge, handle in target.incoming.pairs()
                if handle is connector
            ]
            if not matches:
                _add(result, "data edge connector missing from target", request)
            elif len(matches) > 1:
                _add(result, "data edge connector recorded more than once on target", request)
            elif matches[0] != edge:
                _add(result, "data edge connector attached to a different edge on target", request)

        for edge, connector in record.incoming.pairs():
            source = registry.data_source(edge.out_id)
            if source is None or source.outgoing.position_of_handle(connector) is None:
                _add(
                    result,
                    "data edge connector missing from source",
                    edge.model_dump(mode="json"),
                )

    return result


def _add(result: DiagnosticLog, message: str, request: dict) -> None:
    result.add(
        Diagnostic(
            kind=IssueKind.CONSISTENCY,
            message=message,
            severity=Severity.ERROR,
            operation=OPERATION,
            request=request,
        )
    )
