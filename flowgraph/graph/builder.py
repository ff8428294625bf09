"""Builder for turning a GraphSpec into a DataflowGraph."""

from ..diagnostics import DiagnosticLog
from ..schema.models import GraphSpec
from .collaborator import RenderingCollaborator
from .dataflow_graph import DataflowGraph
from .engine import DEFAULT_SLOT_PITCH


def build_graph(
    spec: GraphSpec,
    renderer: RenderingCollaborator | None = None,
    diagnostics: DiagnosticLog | None = None,
    slot_pitch: float = DEFAULT_SLOT_PITCH,
) -> DataflowGraph:
    """Build a DataflowGraph from a parsed graph description.

    Rejected requests do not stop the build; they are recorded in the
    graph's diagnostics log.

    Args:
        spec: The parsed graph description.
        renderer: Collaborator that draws nodes and connectors. A headless
            RecordingRenderer is used if omitted.
        diagnostics: Log to record rejections in. A new one is created if omitted.
        slot_pitch: Horizontal distance between slot anchors.

    Returns:
        The populated graph.
    """
    if renderer is None:
        # render.recording imports from this package
        from ..render.recording import RecordingRenderer

        renderer = RecordingRenderer()

    graph = DataflowGraph(renderer, diagnostics=diagnostics, slot_pitch=slot_pitch)

    # Entities first so every edge can resolve its endpoints
    for sensor in spec.sensors.values():
        graph.register_sensor(sensor)

    for module in spec.modules.values():
        graph.register_module(module)

    for data_edge in spec.edges.data:
        graph.add_data_edge(data_edge)

    for state_edge in spec.edges.state:
        graph.add_state_edge(state_edge)

    for network_edge in spec.edges.network:
        graph.add_network_edge(network_edge)

    return graph
