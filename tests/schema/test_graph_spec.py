"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from flowgraph.schema.models import (
    DataEdge,
    GraphSpec,
    Module,
    NetworkEdge,
    Sensor,
    StateEdge,
)


class TestSensor:
    def test_basic_sensor(self):
        sensor = Sensor(id="s1", state_keys=["mode"], returns=["temp", "rh"])
        assert sensor.id == "s1"
        assert sensor.state_keys == ("mode",)
        assert sensor.returns == ("temp", "rh")

    def test_defaults(self):
        sensor = Sensor(id="s1")
        assert sensor.state_keys == ()
        assert sensor.returns == ()

    def test_frozen(self):
        sensor = Sensor(id="s1", returns=["temp"])
        with pytest.raises(ValidationError):
            sensor.returns = ("other",)


class TestModule:
    def test_network_defaults_false(self):
        module = Module(id="m1", params=["x"], returns=["y"])
        assert module.network is False

    def test_frozen(self):
        module = Module(id="m1")
        with pytest.raises(ValidationError):
            module.network = True


class TestDataEdge:
    def test_stateless_defaults_true(self):
        edge = DataEdge(out_id="s1", out_ret="temp", module_id="m1", module_param="x")
        assert edge.stateless is True

    def test_stateful_alias(self):
        edge = DataEdge.model_validate(
            {
                "out_id": "s1",
                "out_ret": "temp",
                "module_id": "m1",
                "module_param": "x",
                "stateful": True,
            }
        )
        assert edge.stateless is False

    def test_field_wise_equality(self):
        a = DataEdge(out_id="s1", out_ret="temp", module_id="m1", module_param="x")
        b = DataEdge(out_id="s1", out_ret="temp", module_id="m1", module_param="x")
        c = DataEdge(
            stateless=False, out_id="s1", out_ret="temp", module_id="m1", module_param="x"
        )
        assert a == b
        assert a is not b
        assert a != c

    def test_missing_fields(self):
        with pytest.raises(ValidationError):
            DataEdge(out_id="s1", module_id="m1")


class TestStateAndNetworkEdges:
    def test_state_edge_equality(self):
        a = StateEdge(module_id="m1", module_ret="y", sensor_id="s1", sensor_key="k")
        b = StateEdge(module_id="m1", module_ret="y", sensor_id="s1", sensor_key="k")
        assert a == b

    def test_network_edge_equality(self):
        assert NetworkEdge(module_id="m1", domain="a.com") == NetworkEdge(
            module_id="m1", domain="a.com"
        )
        assert NetworkEdge(module_id="m1", domain="a.com") != NetworkEdge(
            module_id="m1", domain="b.com"
        )


class TestGraphSpec:
    def test_ids_filled_from_keys(self):
        spec = GraphSpec.model_validate(
            {
                "sensors": {"s1": {"returns": ["temp"]}},
                "modules": {"m1": {"params": ["x"]}},
            }
        )
        assert spec.sensors["s1"].id == "s1"
        assert spec.modules["m1"].id == "m1"

    def test_empty_entity_body(self):
        spec = GraphSpec.model_validate({"sensors": {"s1": None}})
        assert spec.sensors["s1"] == Sensor(id="s1")

    def test_null_sections(self):
        spec = GraphSpec.model_validate({"sensors": None, "modules": None, "edges": None})
        assert spec.sensors == {}
        assert spec.modules == {}
        assert spec.edges.network == []

    def test_get_missing_entity(self):
        spec = GraphSpec()
        assert spec.get_sensor("s1") is None
        assert spec.get_module("m1") is None

    def test_input_not_mutated(self):
        raw = {"sensors": {"s1": {"returns": ["temp"]}}}

        spec = GraphSpec.model_validate(raw)

        assert spec.sensors["s1"].id == "s1"
        assert raw == {"sensors": {"s1": {"returns": ["temp"]}}}
