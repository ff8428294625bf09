"""Output formatting for diagnostics and graph listings."""

import json
from typing import Literal

import networkx as nx

from ..diagnostics import Diagnostic, DiagnosticLog, IssueKind, Severity
from ..graph.dataflow_graph import DataflowGraph


def format_diagnostics(
    result: DiagnosticLog,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a diagnostics log for output.

    Args:
        result: The diagnostics to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_diagnostics_json(result)
    return _format_diagnostics_text(result)


def _format_diagnostics_text(result: DiagnosticLog) -> str:
    """Format diagnostics as human-readable text."""
    lines: list[str] = []

    rejected = [i for i in result.issues if i.kind == IssueKind.VALIDATION]
    inconsistent = result.consistency_errors

    lines.append("REJECTED:")
    if rejected:
        for issue in rejected:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    lines.append("")

    lines.append("INCONSISTENT:")
    if inconsistent:
        for issue in inconsistent:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    lines.append("")
    if result.is_clean:
        lines.append("Graph check passed")
    else:
        lines.append(
            f"Graph check failed: {len(rejected)} rejected request(s), "
            f"{len(inconsistent)} consistency error(s)"
        )

    return "\n".join(lines)


def _format_issue_text(issue: Diagnostic) -> str:
    """Format a single diagnostic as text."""
    if issue.severity == Severity.ERROR:
        symbol = "✘"
    elif issue.severity == Severity.WARNING:
        symbol = "⚠"
    else:
        symbol = "ℹ"

    request = json.dumps(issue.request, sort_keys=True)
    return f"{symbol} {issue.operation}: {issue.message} {request}"


def _format_diagnostics_json(result: DiagnosticLog) -> str:
    """Format diagnostics as JSON."""
    data = {
        "valid": result.is_clean,
        "rejected_count": sum(1 for i in result.issues if i.kind == IssueKind.VALIDATION),
        "consistency_error_count": len(result.consistency_errors),
        "issues": [
            {
                "kind": issue.kind.value,
                "operation": issue.operation,
                "message": issue.message,
                "severity": issue.severity.value,
                "request": issue.request,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)


def format_graph(
    graph: DataflowGraph,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a graph's contents.

    Text lists sensors, modules and edges one JSON object per line; JSON is
    networkx node-link data.
    """
    if format == "json":
        data = nx.node_link_data(graph.to_networkx(), edges="links")
        return json.dumps(data, indent=2)

    lines: list[str] = ["Sensors:"]
    for sensor_id in graph.sensor_ids():
        lines.append(f"  - {graph.get_sensor(sensor_id).model_dump_json()}")

    lines.append("Modules:")
    for module_id in graph.module_ids():
        lines.append(f"  - {graph.get_module(module_id).model_dump_json()}")

    lines.append("Edges:")
    for edge in graph.iter_edges():
        lines.append(f"  - {edge.model_dump_json()}")

    return "\n".join(lines)
