"""Rendering collaborators for the dataflow graph."""

from .recording import ConnectorVisual, NodeVisual, RecordingRenderer

__all__ = [
    "ConnectorVisual",
    "NodeVisual",
    "RecordingRenderer",
]
