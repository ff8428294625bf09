"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from flowgraph.graph.dataflow_graph import DataflowGraph
from flowgraph.render.recording import RecordingRenderer
from flowgraph.schema.models import DataEdge, Module, Sensor


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def renderer() -> RecordingRenderer:
    """Return a fresh headless renderer."""
    return RecordingRenderer()


@pytest.fixture
def graph(renderer) -> DataflowGraph:
    """Return an empty graph drawing into ``renderer``."""
    return DataflowGraph(renderer)


@pytest.fixture
def sensor() -> Sensor:
    return Sensor(id="s1", state_keys=[], returns=["temp"])


@pytest.fixture
def module() -> Module:
    return Module(id="m1", params=["x"], returns=["y"], network=False)


@pytest.fixture
def data_edge() -> DataEdge:
    return DataEdge(
        stateless=True, out_id="s1", out_ret="temp", module_id="m1", module_param="x"
    )


@pytest.fixture
def basic_graph(graph, sensor, module) -> DataflowGraph:
    """Return a graph holding sensor ``s1`` and module ``m1``."""
    assert graph.register_sensor(sensor)
    assert graph.register_module(module)
    return graph


@pytest.fixture
def station_yaml() -> str:
    """Return a graph with every edge kind."""
    return """
sensors:
  thermo:
    state_keys: [offset]
    returns: [celsius, humidity]

modules:
  smooth:
    params: [reading, window]
    returns: [average]
  publish:
    params: [value]
    returns: [status]
    network: true

edges:
  data:
    - out_id: thermo
      out_ret: celsius
      module_id: smooth
      module_param: reading
    - out_id: smooth
      out_ret: average
      module_id: publish
      module_param: value
      stateful: true
  state:
    - module_id: smooth
      module_ret: average
      sensor_id: thermo
      sensor_key: offset
  network:
    - module_id: publish
      domain: example.com
"""
