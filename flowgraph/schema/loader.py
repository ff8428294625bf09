"""YAML loading and parsing for graph description files."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import GraphSpec

GRAPH_SECTIONS = ("sensors", "modules", "edges")


def load_yaml(path: str | Path) -> dict:
    """Read a graph file and return its root mapping.

    An empty file yields an empty mapping.

    Raises:
        SchemaLoadError: If the file is missing, unreadable, not YAML, or
            its root is not a mapping.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))
    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    return _load_root(text, str(path))


def parse_graph_spec(path: str | Path) -> GraphSpec:
    """Load and parse a YAML file into a GraphSpec.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data fails validation; its ``path``
            names the file.
    """
    data = load_yaml(path)
    return _parse_graph_data(data, str(path))


def parse_graph_spec_from_string(yaml_string: str) -> GraphSpec:
    """Parse a YAML string into a GraphSpec.

    Raises:
        SchemaLoadError: If the YAML cannot be parsed.
        SchemaValidationError: If the data fails validation.
    """
    return _parse_graph_data(_load_root(yaml_string))


def _load_root(text: str, path: str | None = None) -> dict:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", path) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected a mapping of {', '.join(GRAPH_SECTIONS)} at root, "
            f"got {type(data).__name__}",
            path,
        )

    return data


def _parse_graph_data(data: dict, path: str | None = None) -> GraphSpec:
    """Validate a root mapping, collecting unknown sections and pydantic errors."""
    errors = [
        {
            "loc": str(key),
            "msg": f"Unknown section, expected one of: {', '.join(GRAPH_SECTIONS)}",
            "type": "unknown_section",
        }
        for key in data
        if key not in GRAPH_SECTIONS
    ]

    try:
        spec = GraphSpec.model_validate(
            {key: value for key, value in data.items() if key in GRAPH_SECTIONS}
        )
    except ValidationError as e:
        errors.extend(
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        )

    if errors:
        message = f"Schema validation failed with {len(errors)} error(s)"
        if path is not None:
            message = f"{path}: {message}"
        raise SchemaValidationError(message, errors, path)

    return spec
