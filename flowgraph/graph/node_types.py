"""Node and edge kinds for the dataflow graph."""

from enum import Enum

# Identifier of the external network endpoint. It always exists but is never stored.
NETWORK_NODE_ID = "NET"


class NodeKind(str, Enum):
    """Kinds of nodes an entity id can resolve to."""

    SENSOR = "sensor"
    MODULE = "module"
    NETWORK = "network"


class EdgeKind(str, Enum):
    """Kinds of edges in the dataflow graph."""

    DATA = "data"  # sensor/module return -> module param
    STATE = "state"  # module return -> sensor state key
    NETWORK = "network"  # module -> external domain
