"""Pydantic models for sensors, modules and the edges between them."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Frozen(BaseModel):
    """Base for schema values that never change after creation."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Sensor(_Frozen):
    """A data source exposing mutable state keys and return values."""

    id: str
    state_keys: tuple[str, ...] = ()
    returns: tuple[str, ...] = ()


class Module(_Frozen):
    """A transformation unit consuming params and producing return values."""

    id: str
    params: tuple[str, ...] = ()
    returns: tuple[str, ...] = ()
    network: bool = False


class DataEdge(_Frozen):
    """A value flowing from a sensor or module return into a module param."""

    stateless: bool = True
    out_id: str
    out_ret: str
    module_id: str
    module_param: str

    @model_validator(mode="before")
    @classmethod
    def normalize_stateful(cls, data: dict) -> dict:
        """Accept ``stateful`` as the negation of ``stateless``."""
        if isinstance(data, dict) and "stateful" in data:
            data = dict(data)
            stateful = data.pop("stateful")
            data.setdefault("stateless", not stateful)
        return data


class StateEdge(_Frozen):
    """A module return written into a sensor state key."""

    module_id: str
    module_ret: str
    sensor_id: str
    sensor_key: str


class NetworkEdge(_Frozen):
    """A module's declared egress domain."""

    module_id: str
    domain: str


class EdgeSpecs(BaseModel):
    """Edge requests grouped by kind, in file order."""

    data: list[DataEdge] = Field(default_factory=list)
    state: list[StateEdge] = Field(default_factory=list)
    network: list[NetworkEdge] = Field(default_factory=list)


class GraphSpec(BaseModel):
    """Root model for a graph description file."""

    sensors: dict[str, Sensor] = Field(default_factory=dict)
    modules: dict[str, Module] = Field(default_factory=dict)
    edges: EdgeSpecs = Field(default_factory=EdgeSpecs)

    @model_validator(mode="before")
    @classmethod
    def normalize_graph(cls, data: dict) -> dict:
        """Fill entity ids from mapping keys and allow empty sections."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for section in ("sensors", "modules"):
            entities = data.get(section)
            if entities is None:
                data[section] = {}
                continue
            if isinstance(entities, dict):
                normalized = {}
                for entity_id, entity_data in entities.items():
                    if entity_data is None:
                        entity_data = {}
                    if isinstance(entity_data, dict):
                        entity_data = {**entity_data, "id": str(entity_id)}
                    normalized[str(entity_id)] = entity_data
                data[section] = normalized

        if data.get("edges") is None:
            data["edges"] = {}

        return data

    def get_sensor(self, sensor_id: str) -> Sensor | None:
        """Get a sensor by id."""
        return self.sensors.get(sensor_id)

    def get_module(self, module_id: str) -> Module | None:
        """Get a module by id."""
        return self.modules.get(module_id)
