"""Core data models for dagprogress."""
from __future__ import annotations

from collections.abc import Hashable
from fractions import Fraction
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

Adjacencies = dict[Hashable, list[Hashable]]

# Ints stay ints so large integer weights keep their exact value.
Weight = Union[
    Annotated[int, Field(ge=0)],
    Annotated[float, Field(ge=0, allow_inf_nan=False)],
]


class NodeOptions(BaseModel):
    """Per-node options. ``progress: false`` is shorthand for ``weight: 0``."""
    model_config = ConfigDict(frozen=True)

    weight: Weight = 1

    @model_validator(mode="before")
    @classmethod
    def _legacy_progress_flag(cls, data: Any) -> Any:
        if isinstance(data, dict) and "progress" in data:
            data = dict(data)
            progress = data.pop("progress")
            if progress is False and "weight" not in data:
                data["weight"] = 0
        return data

    @property
    def exact_weight(self) -> Fraction:
        if isinstance(self.weight, int):
            return Fraction(self.weight)
        return Fraction(str(self.weight))


class ProgressRecord(BaseModel):
    """Progress of a single node along its heaviest containing path.

    ``value``, ``before``, ``own`` and ``remaining`` are ratios of
    ``path_total`` and are all 0 when ``path_total`` is 0. The ``raw_*``
    fields carry the un-normalized weights so records can be recombined.
    ``fraction`` and ``own_fraction`` are the exact values behind
    ``value`` and ``own``.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: float
    before: float
    own: float
    remaining: float
    raw_value: float
    raw_before: float
    raw_own: float
    raw_remaining: float
    path_total: float
    fraction: Fraction
    own_fraction: Fraction

    @field_serializer("fraction", "own_fraction", when_used="json")
    def _fraction_str(self, fraction: Fraction) -> str:
        return f"{fraction.numerator}/{fraction.denominator}"


class NodeSpec(BaseModel):
    """A node declared in a graph definition file.

    Numeric ids in YAML (``id: 1``) are read as strings.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    next: list[str] = Field(default_factory=list)
    weight: Weight | None = None
    progress: bool | None = None


class GraphDefinition(BaseModel):
    """A named graph loaded from YAML."""
    name: str
    description: str = ""
    nodes: list[NodeSpec] = Field(default_factory=list)

    def adjacencies(self) -> Adjacencies:
        return {node.id: list(node.next) for node in self.nodes}

    def node_options(self) -> dict[Hashable, NodeOptions]:
        options: dict[Hashable, NodeOptions] = {}
        for node in self.nodes:
            if node.weight is not None:
                options[node.id] = NodeOptions(weight=node.weight)
            elif node.progress is not None:
                options[node.id] = NodeOptions(progress=node.progress)
        return options
