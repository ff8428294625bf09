"""Interface the graph core expects from whatever draws it."""

from dataclasses import dataclass
from typing import Any, Protocol, Sequence, runtime_checkable

from .node_types import EdgeKind, NodeKind

# Handles are opaque to the core; it only stores them and hands them back.
NodeHandle = Any
ConnectorHandle = Any

COLORS = {
    EdgeKind.DATA: "#2196f3",
    EdgeKind.NETWORK: "green",
    EdgeKind.STATE: "red",
}


@dataclass(frozen=True)
class ConnectorStyle:
    """How a connector should be drawn."""

    kind: EdgeKind
    dashed: bool = False

    @property
    def color(self) -> str:
        return COLORS[self.kind]

    @classmethod
    def data(cls, stateless: bool) -> "ConnectorStyle":
        """Stateful data edges are drawn dashed."""
        return cls(kind=EdgeKind.DATA, dashed=not stateless)

    @classmethod
    def state(cls) -> "ConnectorStyle":
        return cls(kind=EdgeKind.STATE)


@runtime_checkable
class RenderingCollaborator(Protocol):
    """Creates and destroys node and connector visuals.

    Implementations own all placement logic. The graph core calls these
    synchronously from inside the mutation that needs them.
    """

    def create_node(
        self,
        node_id: str,
        kind: NodeKind,
        input_slot_names: Sequence[str],
        output_slot_names: Sequence[str],
    ) -> NodeHandle:
        """Draw a node with one anchor per input and output slot."""
        ...

    def create_connector(
        self,
        source: NodeHandle,
        source_slot_offset: float,
        target: NodeHandle,
        target_slot_offset: float,
        style: ConnectorStyle,
    ) -> ConnectorHandle:
        """Draw a connector between two nodes.

        Offsets are horizontal pixel offsets from each node's center.
        Non-data styles may be no-ops returning ``None``.
        """
        ...

    def destroy_connector(self, connector: ConnectorHandle) -> None:
        """Remove a connector previously returned by ``create_connector``."""
        ...
