"""
Endpoint tree domain.

An API surface is a tree of namespaces whose leaves are endpoints. Each
endpoint names its input and output types by id.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from apicodegen.registry import TypeRegistry
from apicodegen.types import TypeDescriptor, TypeId


@dataclass(frozen=True)
class TypeRef:
    """Reference to a registry entry by id."""

    type_id: TypeId


@dataclass(frozen=True)
class Endpoint:
    """A callable operation: one input value in, one output value out."""

    input: TypeRef
    output: TypeRef
    description: str | None = None
    deprecated: str | None = None


@dataclass(frozen=True)
class Namespace:
    """Interior node of the endpoint tree. Key order is kept."""

    entries: Mapping[str, Entry] = field(default_factory=dict)


type Entry = Endpoint | Namespace


@dataclass(frozen=True)
class ApiDescription:
    """Everything one generation call consumes."""

    types: TypeRegistry
    entries: Namespace

    def __post_init__(self):
        if not isinstance(self.types, TypeRegistry):
            object.__setattr__(self, "types", TypeRegistry(self.types))

    @classmethod
    def build(
        cls,
        types: Mapping[TypeId, TypeDescriptor],
        entries: Mapping[str, Entry],
    ) -> ApiDescription:
        return cls(types=TypeRegistry(types), entries=Namespace(dict(entries)))
