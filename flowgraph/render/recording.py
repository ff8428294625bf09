"""Headless rendering collaborator that keeps node and connector geometry in memory."""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..graph.collaborator import ConnectorStyle
from ..graph.node_types import EdgeKind, NodeKind

logger = logging.getLogger(__name__)

TOP_START = 100
TOP_DELTA = 200
NODE_LEFT = 100
NODE_WIDTH = 160
NODE_HEIGHT = 80


@dataclass(eq=False)
class NodeVisual:
    """A drawn node. Inputs are anchored on its top edge, outputs on its bottom edge."""

    node_id: str
    kind: NodeKind
    inputs: tuple[str, ...]
    outputs: tuple[str, ...]
    left: float
    top: float
    width: float = NODE_WIDTH
    height: float = NODE_HEIGHT
    outgoing: list["ConnectorVisual"] = field(default_factory=list, repr=False)
    incoming: list["ConnectorVisual"] = field(default_factory=list, repr=False)

    def bottom_anchor(self, offset: float) -> tuple[float, float]:
        return self.left + self.width / 2 + offset, self.top + self.height

    def top_anchor(self, offset: float) -> tuple[float, float]:
        return self.left + self.width / 2 + offset, self.top


@dataclass(eq=False)
class ConnectorVisual:
    """A drawn connector line. Compared by identity."""

    source: NodeVisual = field(repr=False)
    target: NodeVisual = field(repr=False)
    x1: float
    y1: float
    x2: float
    y2: float
    style: ConnectorStyle

    @property
    def marker(self) -> str:
        return f"url(#endarrow-{self.style.kind.value})"


class RecordingRenderer:
    """Draws into plain Python objects instead of a document.

    Nodes are stacked vertically in creation order. State and network
    connector requests are accepted but draw nothing.
    """

    def __init__(self, top_start: float = TOP_START, top_delta: float = TOP_DELTA):
        self._top_next = top_start
        self._top_delta = top_delta
        self.nodes: dict[str, NodeVisual] = {}
        self.connectors: list[ConnectorVisual] = []
        self.created_count = 0
        self.destroyed_count = 0
        self.ignored_requests: list[EdgeKind] = []

    def create_node(
        self,
        node_id: str,
        kind: NodeKind,
        input_slot_names: Sequence[str],
        output_slot_names: Sequence[str],
    ) -> NodeVisual:
        node = NodeVisual(
            node_id=node_id,
            kind=kind,
            inputs=tuple(input_slot_names),
            outputs=tuple(output_slot_names),
            left=NODE_LEFT,
            top=self._top_next,
        )
        self._top_next += self._top_delta
        self.nodes[node_id] = node
        return node

    def create_connector(
        self,
        source: NodeVisual,
        source_slot_offset: float,
        target: NodeVisual,
        target_slot_offset: float,
        style: ConnectorStyle,
    ) -> ConnectorVisual | None:
        if style.kind != EdgeKind.DATA:
            self.ignored_requests.append(style.kind)
            return None

        x1, y1 = source.bottom_anchor(source_slot_offset)
        x2, y2 = target.top_anchor(target_slot_offset)
        connector = ConnectorVisual(
            source=source, target=target, x1=x1, y1=y1, x2=x2, y2=y2, style=style
        )
        source.outgoing.append(connector)
        target.incoming.append(connector)
        self.connectors.append(connector)
        self.created_count += 1
        return connector

    def destroy_connector(self, connector: ConnectorVisual) -> None:
        """Remove a live connector.

        Raises:
            ValueError: If the connector was never created here or is already destroyed.
        """
        for index, live in enumerate(self.connectors):
            if live is connector:
                del self.connectors[index]
                break
        else:
            raise ValueError("connector is not live; it was already destroyed or never created")

        _remove_identical(connector.source.outgoing, connector)
        _remove_identical(connector.target.incoming, connector)
        self.destroyed_count += 1

    def move_node(self, node: NodeVisual, dx: float, dy: float) -> None:
        """Translate a node and the endpoints of connectors attached to it."""
        node.left += dx
        node.top += dy
        for line in node.outgoing:
            line.x1 += dx
            line.y1 += dy
        for line in node.incoming:
            line.x2 += dx
            line.y2 += dy

    @property
    def live_count(self) -> int:
        return len(self.connectors)


def _remove_identical(items: list, item: object) -> None:
    for index, existing in enumerate(items):
        if existing is item:
            del items[index]
            return
    logger.error("connector missing from node visual %r", item)
