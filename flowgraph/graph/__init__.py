"""Graph layer: entity registry, edge engine and connector bookkeeping."""

from .node_types import NETWORK_NODE_ID, EdgeKind, NodeKind
from .collaborator import ConnectorStyle, RenderingCollaborator
from .ledger import IndexedLedger
from .registry import EntityRegistry, ModuleRecord, ResolvedEntity, SensorRecord
from .engine import DEFAULT_SLOT_PITCH, EdgeEngine, slot_offset
from .dataflow_graph import DataflowGraph
from .builder import build_graph

__all__ = [
    "NETWORK_NODE_ID",
    "EdgeKind",
    "NodeKind",
    "ConnectorStyle",
    "RenderingCollaborator",
    "IndexedLedger",
    "EntityRegistry",
    "ModuleRecord",
    "ResolvedEntity",
    "SensorRecord",
    "DEFAULT_SLOT_PITCH",
    "EdgeEngine",
    "slot_offset",
    "DataflowGraph",
    "build_graph",
]
