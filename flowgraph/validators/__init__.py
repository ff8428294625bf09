"""Audits of a built dataflow graph."""

from .consistency import check_connector_consistency
from .runner import check_graph_file, run_validators

__all__ = [
    "check_connector_consistency",
    "check_graph_file",
    "run_validators",
]
