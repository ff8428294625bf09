"""DataflowGraph: the single graph instance a session works with."""

from typing import Iterator

import networkx as nx

from ..diagnostics import DiagnosticLog
from ..schema.models import DataEdge, Module, NetworkEdge, Sensor, StateEdge
from .collaborator import RenderingCollaborator
from .engine import DEFAULT_SLOT_PITCH, EdgeEngine
from .node_types import NETWORK_NODE_ID, EdgeKind, NodeKind
from .registry import EntityRegistry

Edge = DataEdge | StateEdge | NetworkEdge


class DataflowGraph:
    """Sensors, modules and the edges between them, kept in step with their visuals.

    Wraps an EntityRegistry and an EdgeEngine sharing one renderer and one
    diagnostics log.
    """

    def __init__(
        self,
        renderer: RenderingCollaborator,
        diagnostics: DiagnosticLog | None = None,
        slot_pitch: float = DEFAULT_SLOT_PITCH,
    ):
        self.renderer = renderer
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self.registry = EntityRegistry(renderer, self.diagnostics)
        self.engine = EdgeEngine(self.registry, renderer, self.diagnostics, slot_pitch)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def register_sensor(self, sensor: Sensor) -> bool:
        return self.registry.register_sensor(sensor)

    def register_module(self, module: Module) -> bool:
        return self.registry.register_module(module)

    def add_data_edge(self, edge: DataEdge) -> bool:
        return self.engine.add_data_edge(edge)

    def add_state_edge(self, edge: StateEdge) -> bool:
        return self.engine.add_state_edge(edge)

    def add_network_edge(self, edge: NetworkEdge) -> bool:
        return self.engine.add_network_edge(edge)

    def remove_data_edge(self, edge: DataEdge) -> bool:
        return self.engine.remove_data_edge(edge)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def sensor_ids(self) -> list[str]:
        """Get sensor ids in registration order."""
        return [record.id for record in self.registry.sensors()]

    def module_ids(self) -> list[str]:
        """Get module ids in registration order."""
        return [record.id for record in self.registry.modules()]

    def get_sensor(self, sensor_id: str) -> Sensor | None:
        record = self.registry.sensor(sensor_id)
        return record.value if record else None

    def get_module(self, module_id: str) -> Module | None:
        record = self.registry.module(module_id)
        return record.value if record else None

    def data_edges_from(self, entity_id: str) -> list[DataEdge]:
        """Get data edges leaving a sensor or module, in insertion order."""
        record = self.registry.data_source(entity_id)
        return record.outgoing.edges if record else []

    def data_edges_into(self, module_id: str) -> list[DataEdge]:
        """Get data edges arriving at a module, in insertion order."""
        record = self.registry.module(module_id)
        return record.incoming.edges if record else []

    def state_edges_for(self, module_id: str) -> list[StateEdge]:
        record = self.registry.module(module_id)
        return list(record.state_edges) if record else []

    def network_edges_for(self, module_id: str) -> list[NetworkEdge]:
        record = self.registry.module(module_id)
        return list(record.network_edges) if record else []

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate all edges.

        Yields each module's data, network and state edges, then the data
        edges leaving each sensor.
        """
        for module in self.registry.modules():
            yield from module.outgoing.edges
            yield from module.network_edges
            yield from module.state_edges
        for sensor in self.registry.sensors():
            yield from sensor.outgoing.edges

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def to_networkx(self) -> nx.MultiDiGraph:
        """Project the logical graph onto a networkx MultiDiGraph.

        Nodes carry ``kind`` and slot names; edges carry ``kind`` plus the
        fields of the logical edge. The reserved network node is added only
        when some module has a network edge.
        """
        graph = nx.MultiDiGraph()

        for sensor in self.registry.sensors():
            graph.add_node(
                sensor.id,
                kind=NodeKind.SENSOR.value,
                state_keys=list(sensor.value.state_keys),
                returns=list(sensor.value.returns),
            )
        for module in self.registry.modules():
            graph.add_node(
                module.id,
                kind=NodeKind.MODULE.value,
                params=list(module.value.params),
                returns=list(module.value.returns),
                network=module.value.network,
            )

        for edge in self.iter_edges():
            if isinstance(edge, DataEdge):
                graph.add_edge(
                    edge.out_id,
                    edge.module_id,
                    kind=EdgeKind.DATA.value,
                    out_ret=edge.out_ret,
                    module_param=edge.module_param,
                    stateless=edge.stateless,
                )
            elif isinstance(edge, StateEdge):
                graph.add_edge(
                    edge.module_id,
                    edge.sensor_id,
                    kind=EdgeKind.STATE.value,
                    module_ret=edge.module_ret,
                    sensor_key=edge.sensor_key,
                )
            else:
                if not graph.has_node(NETWORK_NODE_ID):
                    graph.add_node(NETWORK_NODE_ID, kind=NodeKind.NETWORK.value)
                graph.add_edge(
                    edge.module_id,
                    NETWORK_NODE_ID,
                    kind=EdgeKind.NETWORK.value,
                    domain=edge.domain,
                )

        return graph
