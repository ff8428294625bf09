"""Tests for schema loader."""

import pytest

from flowgraph.schema.loader import (
    load_yaml,
    parse_graph_spec,
    parse_graph_spec_from_string,
)
from flowgraph.schema.errors import SchemaLoadError, SchemaValidationError


class TestLoadYaml:
    def test_load_valid_yaml(self, tmp_path):
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text("key: value\nlist:\n  - item1\n  - item2")

        data = load_yaml(yaml_file)
        assert data["key"] == "value"
        assert data["list"] == ["item1", "item2"]

    def test_file_not_found(self):
        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml("/nonexistent/path.yaml")
        assert "not found" in str(exc_info.value).lower()
        assert exc_info.value.path == "/nonexistent/path.yaml"

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(tmp_path)
        assert "Not a file" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("key: [unclosed bracket")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(yaml_file)
        assert "Invalid YAML" in str(exc_info.value)

    def test_empty_file_returns_empty_dict(self, tmp_path):
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert load_yaml(yaml_file) == {}

    def test_non_mapping_at_root(self, tmp_path):
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- item1\n- item2")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(yaml_file)
        assert "mapping" in str(exc_info.value).lower()


class TestParseGraphSpecFromString:
    def test_parse_full_graph(self, station_yaml):
        spec = parse_graph_spec_from_string(station_yaml)

        assert list(spec.sensors) == ["thermo"]
        assert list(spec.modules) == ["smooth", "publish"]
        assert len(spec.edges.data) == 2
        assert len(spec.edges.state) == 1
        assert len(spec.edges.network) == 1

    def test_parse_empty_graph(self):
        spec = parse_graph_spec_from_string("")
        assert spec.sensors == {}
        assert spec.modules == {}
        assert spec.edges.data == []

    def test_invalid_yaml_string(self):
        with pytest.raises(SchemaLoadError):
            parse_graph_spec_from_string("invalid: [yaml")

    def test_non_mapping_string(self):
        with pytest.raises(SchemaLoadError):
            parse_graph_spec_from_string("- a\n- b")

    def test_missing_edge_fields(self):
        yaml_str = """
edges:
  data:
    - out_id: s1
      module_id: m1
"""
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_graph_spec_from_string(yaml_str)

        locs = {err["loc"] for err in exc_info.value.errors}
        assert "edges.data.0.out_ret" in locs
        assert "edges.data.0.module_param" in locs

    def test_unknown_entity_field(self):
        yaml_str = """
sensors:
  s1:
    outputs: [temp]
"""
        with pytest.raises(SchemaValidationError):
            parse_graph_spec_from_string(yaml_str)

    def test_unknown_section(self):
        yaml_str = """
sensors: {}
edge:
  data: []
"""
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_graph_spec_from_string(yaml_str)

        assert exc_info.value.path is None
        assert exc_info.value.errors == [
            {
                "loc": "edge",
                "msg": "Unknown section, expected one of: sensors, modules, edges",
                "type": "unknown_section",
            }
        ]

    def test_unknown_section_reported_with_field_errors(self):
        yaml_str = """
sensor: {}
edges:
  network:
    - module_id: m1
"""
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_graph_spec_from_string(yaml_str)

        locs = [err["loc"] for err in exc_info.value.errors]
        assert locs == ["sensor", "edges.network.0.domain"]
        assert "2 error(s)" in str(exc_info.value)


class TestParseGraphSpec:
    def test_parse_example_file(self, examples_dir):
        spec = parse_graph_spec(examples_dir / "minimal_valid.yaml")
        assert "s1" in spec.sensors
        assert "m1" in spec.modules
        assert spec.edges.data[0].out_ret == "temp"

    def test_parse_weather_station(self, examples_dir):
        spec = parse_graph_spec(examples_dir / "weather_station.yaml")
        assert spec.get_module("publish").network is True
        assert spec.get_sensor("thermometer").state_keys == ("offset", "unit")

    def test_schema_error_file(self, examples_dir):
        with pytest.raises(SchemaValidationError):
            parse_graph_spec(examples_dir / "invalid" / "bad_schema.yaml")

    def test_schema_error_names_file(self, examples_dir):
        path = examples_dir / "invalid" / "bad_schema.yaml"

        with pytest.raises(SchemaValidationError) as exc_info:
            parse_graph_spec(path)

        assert exc_info.value.path == str(path)
        assert str(exc_info.value).startswith(f"{path}: ")

    def test_unreadable_encoding(self, tmp_path):
        yaml_file = tmp_path / "latin1.yaml"
        yaml_file.write_bytes(b"sensors:\n  caf\xe9: {}\n")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(yaml_file)
        assert "Cannot read file" in str(exc_info.value)
        assert exc_info.value.path == str(yaml_file)
