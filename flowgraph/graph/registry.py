"""Registry of sensors and modules sharing one identifier namespace."""

import logging
from dataclasses import dataclass, field
from typing import Iterator

from ..diagnostics import DiagnosticLog
from ..schema.models import DataEdge, Module, NetworkEdge, Sensor, StateEdge
from .collaborator import ConnectorHandle, NodeHandle, RenderingCollaborator
from .ledger import IndexedLedger
from .node_types import NETWORK_NODE_ID, NodeKind

logger = logging.getLogger(__name__)


@dataclass
class SensorRecord:
    """A registered sensor, its node visual and its data-edge bookkeeping."""

    value: Sensor
    handle: NodeHandle
    outgoing: IndexedLedger[DataEdge, ConnectorHandle] = field(default_factory=IndexedLedger)
    incoming: IndexedLedger[DataEdge, ConnectorHandle] = field(default_factory=IndexedLedger)

    kind = NodeKind.SENSOR

    @property
    def id(self) -> str:
        return self.value.id

    @property
    def returns(self) -> tuple[str, ...]:
        return self.value.returns

    @property
    def inputs(self) -> tuple[str, ...]:
        return self.value.state_keys


@dataclass
class ModuleRecord:
    """A registered module, its node visual and all edges it owns."""

    value: Module
    handle: NodeHandle
    outgoing: IndexedLedger[DataEdge, ConnectorHandle] = field(default_factory=IndexedLedger)
    incoming: IndexedLedger[DataEdge, ConnectorHandle] = field(default_factory=IndexedLedger)
    state_edges: list[StateEdge] = field(default_factory=list)
    network_edges: list[NetworkEdge] = field(default_factory=list)

    kind = NodeKind.MODULE

    @property
    def id(self) -> str:
        return self.value.id

    @property
    def returns(self) -> tuple[str, ...]:
        return self.value.returns

    @property
    def inputs(self) -> tuple[str, ...]:
        return self.value.params


EntityRecord = SensorRecord | ModuleRecord


@dataclass(frozen=True)
class ResolvedEntity:
    """What an identifier names. ``record`` is None for the reserved node."""

    kind: NodeKind
    record: EntityRecord | None = None


_NETWORK = ResolvedEntity(kind=NodeKind.NETWORK)


class EntityRegistry:
    """Owns every sensor and module, keyed by a single disjoint namespace."""

    def __init__(
        self,
        renderer: RenderingCollaborator,
        diagnostics: DiagnosticLog | None = None,
    ):
        self._renderer = renderer
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self._entries: dict[str, EntityRecord] = {}

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register_sensor(self, sensor: Sensor) -> bool:
        """Register a sensor and draw its node.

        Returns:
            False, with nothing changed, if the id is already taken.
        """
        if not self._claimable(sensor.id, "register_sensor", sensor):
            return False
        handle = self._renderer.create_node(
            sensor.id, NodeKind.SENSOR, sensor.state_keys, sensor.returns
        )
        self._entries[sensor.id] = SensorRecord(value=sensor, handle=handle)
        logger.debug("registered sensor %s", sensor.id)
        return True

    def register_module(self, module: Module) -> bool:
        """Register a module and draw its node.

        Returns:
            False, with nothing changed, if the id is already taken.
        """
        if not self._claimable(module.id, "register_module", module):
            return False
        handle = self._renderer.create_node(
            module.id, NodeKind.MODULE, module.params, module.returns
        )
        self._entries[module.id] = ModuleRecord(value=module, handle=handle)
        logger.debug("registered module %s", module.id)
        return True

    def _claimable(self, entity_id: str, operation: str, request: Sensor | Module) -> bool:
        resolved = self.resolve(entity_id)
        if resolved is None:
            return True
        if resolved.kind == NodeKind.NETWORK:
            self.diagnostics.reject(operation, "entity id is reserved", request)
        elif resolved.kind == NodeKind.SENSOR:
            self.diagnostics.reject(operation, "sensor id already exists", request)
        else:
            self.diagnostics.reject(operation, "module id already exists", request)
        return False

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def resolve(self, entity_id: str) -> ResolvedEntity | None:
        """Resolve an identifier to a sensor, a module or the reserved node."""
        if entity_id == NETWORK_NODE_ID:
            return _NETWORK
        record = self._entries.get(entity_id)
        if record is None:
            return None
        return ResolvedEntity(kind=record.kind, record=record)

    def kind_of(self, entity_id: str) -> NodeKind | None:
        """Get the kind an identifier names, or None if it names nothing."""
        resolved = self.resolve(entity_id)
        return resolved.kind if resolved is not None else None

    def exists(self, entity_id: str) -> bool:
        """Check whether an identifier is taken, counting the reserved id."""
        return self.resolve(entity_id) is not None

    def sensor(self, sensor_id: str) -> SensorRecord | None:
        """Get a sensor record by id."""
        record = self._entries.get(sensor_id)
        return record if isinstance(record, SensorRecord) else None

    def module(self, module_id: str) -> ModuleRecord | None:
        """Get a module record by id."""
        record = self._entries.get(module_id)
        return record if isinstance(record, ModuleRecord) else None

    def data_source(self, entity_id: str) -> EntityRecord | None:
        """Get the module or sensor a data edge may originate from.

        Modules take precedence; the namespace is disjoint so at most one matches.
        """
        return self.module(entity_id) or self.sensor(entity_id)

    def sensors(self) -> Iterator[SensorRecord]:
        """Iterate sensor records in registration order."""
        for record in self._entries.values():
            if isinstance(record, SensorRecord):
                yield record

    def modules(self) -> Iterator[ModuleRecord]:
        """Iterate module records in registration order."""
        for record in self._entries.values():
            if isinstance(record, ModuleRecord):
                yield record

    def records(self) -> Iterator[EntityRecord]:
        """Iterate all records in registration order."""
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entries
