"""Validation and mutation of data, state and network edges.

Every ``add_*`` operation walks an ordered chain of preconditions and stops
at the first one that fails; that failure's message is the rejection reason
even when later checks would also fail. A rejected request changes nothing.
"""

import logging

from ..diagnostics import DiagnosticLog
from ..schema.models import DataEdge, NetworkEdge, StateEdge
from .collaborator import ConnectorStyle, RenderingCollaborator
from .node_types import NodeKind
from .registry import EntityRegistry

logger = logging.getLogger(__name__)

# Horizontal distance in pixels between neighbouring slot anchors.
DEFAULT_SLOT_PITCH = 24.0


def slot_offset(index: int, count: int, pitch: float = DEFAULT_SLOT_PITCH) -> float:
    """Horizontal offset of the ``index``-th of ``count`` slot anchors.

    Offsets are evenly spaced by ``pitch`` and centered on zero, so a single
    slot sits at 0 and two slots sit at ``-pitch/2`` and ``+pitch/2``.
    """
    if count <= 0 or not 0 <= index < count:
        raise ValueError(f"slot index {index} out of range for {count} slot(s)")
    return pitch * ((index + 1) - count / 2 - 0.5)


class EdgeEngine:
    """Adds and removes edges between entities of an EntityRegistry."""

    def __init__(
        self,
        registry: EntityRegistry,
        renderer: RenderingCollaborator,
        diagnostics: DiagnosticLog | None = None,
        slot_pitch: float = DEFAULT_SLOT_PITCH,
    ):
        self._registry = registry
        self._renderer = renderer
        self.diagnostics = diagnostics if diagnostics is not None else registry.diagnostics
        self.slot_pitch = slot_pitch

    # -------------------------------------------------------------------------
    # State edges
    # -------------------------------------------------------------------------

    def add_state_edge(self, edge: StateEdge) -> bool:
        """Connect a module return to a sensor state key."""
        registry = self._registry
        module = registry.module(edge.module_id)
        sensor = registry.sensor(edge.sensor_id)

        if registry.kind_of(edge.module_id) == NodeKind.SENSOR:
            reason = "state edge output cannot be a sensor"
        elif registry.kind_of(edge.sensor_id) == NodeKind.MODULE:
            reason = "state edge input cannot be a module"
        elif module is None:
            reason = "output module does not exist"
        elif sensor is None:
            reason = "input sensor does not exist"
        elif edge.module_ret not in module.returns:
            reason = "output return value does not exist"
        elif edge.sensor_key not in sensor.inputs:
            reason = "input state key does not exist"
        elif edge in module.state_edges:
            reason = "state edge already exists"
        else:
            # No visual yet; the handle is not kept since state edges are never removed.
            self._renderer.create_connector(
                module.handle, 0.0, sensor.handle, 0.0, ConnectorStyle.state()
            )
            module.state_edges.append(edge)
            logger.debug("added state edge %s", edge)
            return True

        self.diagnostics.reject("add_state_edge", reason, edge)
        return False

    # -------------------------------------------------------------------------
    # Network edges
    # -------------------------------------------------------------------------

    def add_network_edge(self, edge: NetworkEdge) -> bool:
        """Record a module's egress domain."""
        module = self._registry.module(edge.module_id)

        if self._registry.kind_of(edge.module_id) == NodeKind.SENSOR:
            reason = "network edge output cannot be a sensor"
        elif module is None:
            reason = "output module does not exist"
        elif edge in module.network_edges:
            reason = "network edge already exists"
        else:
            # The reserved network node has no visual to connect to.
            module.network_edges.append(edge)
            logger.debug("added network edge %s", edge)
            return True

        self.diagnostics.reject("add_network_edge", reason, edge)
        return False

    # -------------------------------------------------------------------------
    # Data edges
    # -------------------------------------------------------------------------

    def add_data_edge(self, edge: DataEdge) -> bool:
        """Connect a sensor or module return to a module param and draw it."""
        registry = self._registry
        target = registry.module(edge.module_id)
        source = registry.data_source(edge.out_id)

        if registry.kind_of(edge.module_id) == NodeKind.SENSOR:
            reason = "data edge input cannot be a sensor"
        elif target is None:
            reason = "input module does not exist"
        elif edge.module_param not in target.inputs:
            reason = "input param does not exist"
        elif source is None:
            reason = "output entity does not exist"
        elif edge.out_ret not in source.returns:
            reason = "output return value does not exist"
        elif edge in source.outgoing:
            reason = "data edge already exists"
        else:
            source_offset = slot_offset(
                source.returns.index(edge.out_ret), len(source.returns), self.slot_pitch
            )
            target_offset = slot_offset(
                target.inputs.index(edge.module_param), len(target.inputs), self.slot_pitch
            )
            connector = self._renderer.create_connector(
                source.handle,
                source_offset,
                target.handle,
                target_offset,
                ConnectorStyle.data(edge.stateless),
            )
            source.outgoing.append(edge, connector)
            target.incoming.append(edge, connector)
            logger.debug("added data edge %s", edge)
            return True

        self.diagnostics.reject("add_data_edge", reason, edge)
        return False

    def remove_data_edge(self, edge: DataEdge) -> bool:
        """Remove the first data edge equal to ``edge`` and destroy its connector.

        The connector is found on the source side by the edge's position and on
        the target side by identity, since a target's incoming connectors
        interleave edges from several sources.
        """
        target = self._registry.module(edge.module_id)
        source = self._registry.data_source(edge.out_id)

        if target is None:
            self.diagnostics.reject("remove_data_edge", "input module does not exist", edge)
            return False
        if source is None:
            self.diagnostics.reject("remove_data_edge", "output entity does not exist", edge)
            return False

        index = source.outgoing.index_of(edge)
        if index is None:
            self.diagnostics.reject("remove_data_edge", "data edge does not exist", edge)
            return False

        try:
            connector = source.outgoing.handle_at(index)
        except IndexError:
            self.diagnostics.inconsistent(
                "remove_data_edge", "data edge connector missing from source", edge
            )
            return False

        position = target.incoming.position_of_handle(connector)
        if position is None:
            self.diagnostics.inconsistent(
                "remove_data_edge", "data edge connector missing from target", edge
            )
            return False

        # Both sides located; mutate together.
        source.outgoing.remove_at(index)
        target.incoming.remove_at(position)
        self._renderer.destroy_connector(connector)
        logger.debug("removed data edge %s", edge)
        return True
