"""
Type descriptor domain for serializable API type graphs.

This module defines the tagged variants that describe every type an API
surface can reference. Descriptors never hold other descriptors directly;
composites point at their members by type id, and the ids are resolved
through a TypeRegistry.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import ClassVar, dataclass_transform

type TypeId = str | int
type LiteralValue = str | int | float | bool

# =============================================================================
# Field Definitions
# =============================================================================


@dataclass(frozen=True)
class FieldDef:
    """A named slot of an Object or Struct, pointing at its type by id."""

    type_id: TypeId
    description: str | None = None
    deprecated: str | None = None


# =============================================================================
# Type Descriptor Base
# =============================================================================


@dataclass_transform(frozen_default=True)
@dataclass(frozen=True)
class TypeDescriptor:
    """Base for type descriptors."""

    _tag: ClassVar[str]
    _registry: ClassVar[dict[str, type[TypeDescriptor]]] = {}

    name: str | None = field(default=None, kw_only=True)
    description: str | None = field(default=None, kw_only=True)
    deprecated: str | None = field(default=None, kw_only=True)

    def __init_subclass__(cls, tag: str | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        dataclass(frozen=True)(cls)

        cls._tag = tag or cls.__name__.removesuffix("Type")

        if existing := TypeDescriptor._registry.get(cls._tag):
            if existing is not cls:
                raise ValueError(
                    f"Tag '{cls._tag}' already registered to {existing}. "
                    f"Choose a different tag."
                )

        TypeDescriptor._registry[cls._tag] = cls

    @classmethod
    def for_tag(cls, tag: str) -> type[TypeDescriptor] | None:
        """Return the descriptor class registered under a wire tag."""
        return cls._registry.get(tag)

    @property
    def tag(self) -> str:
        return self._tag


# =============================================================================
# Atomic Types
# =============================================================================


class AnyType(TypeDescriptor, tag="Any"):
    """Any value."""


class JSONType(TypeDescriptor, tag="JSON"):
    """A JSON-compatible value."""


class StringType(TypeDescriptor, tag="String"):
    """String type."""


class BooleanType(TypeDescriptor, tag="Boolean"):
    """Boolean type."""


class FloatType(TypeDescriptor, tag="Float"):
    """Floating point number."""


class IDType(TypeDescriptor, tag="ID"):
    """Opaque identifier, transported as a string."""


class IntType(TypeDescriptor, tag="Int"):
    """Integer number."""


class NumberType(TypeDescriptor, tag="Number"):
    """Any number."""


class UnknownType(TypeDescriptor, tag="Unknown"):
    """A value whose type is not known."""


class LiteralType(TypeDescriptor, tag="Literal"):
    """
    A single literal value.

    Example: Literal("ok") renders as "ok", Literal(3) as 3.
    """

    value: LiteralValue


# =============================================================================
# Composite Types
# =============================================================================


class RecordType(TypeDescriptor, tag="Record"):
    """String-keyed mapping whose values have the item type."""

    item_type_id: TypeId


class NullableType(TypeDescriptor, tag="Nullable"):
    """The item type, or null, or not provided at all."""

    item_type_id: TypeId


class ListType(TypeDescriptor, tag="List"):
    """
    Homogeneous list.

    Example: ListType("1") with 1 -> String renders as string[]
    """

    item_type_id: TypeId


class UnionType(TypeDescriptor, tag="Union"):
    """
    Union of member types. Member order is kept in the output.

    Example: UnionType(("1", "2")) renders as A | B
    """

    item_type_ids: tuple[TypeId, ...]


class IntersectType(TypeDescriptor, tag="Intersect"):
    """Intersection of member types, in authoring order."""

    item_type_ids: tuple[TypeId, ...]


class ObjectType(TypeDescriptor, tag="Object"):
    """
    Named field set.

    Fields keep their insertion order. An ObjectType is never expanded
    inline: it is emitted as a declaration and referenced by name.
    """

    fields: Mapping[str, FieldDef]


class StructType(TypeDescriptor, tag="Struct"):
    """Named field set, rendered the same way as ObjectType."""

    fields: Mapping[str, FieldDef]


INLINE_TYPES: tuple[type[TypeDescriptor], ...] = (
    AnyType,
    JSONType,
    StringType,
    BooleanType,
    FloatType,
    IDType,
    IntType,
    NumberType,
    UnknownType,
    LiteralType,
    RecordType,
    NullableType,
    ListType,
    UnionType,
    IntersectType,
)

FIELD_SET_TYPES: tuple[type[TypeDescriptor], ...] = (ObjectType, StructType)


# =============================================================================
# Helpers
# =============================================================================


def get_type_name(descriptor: TypeDescriptor) -> str | None:
    """Return the display name of an exported type, or None for inline types."""
    return descriptor.name or None


def is_inline_type(descriptor: TypeDescriptor) -> bool:
    """True for the kinds that are rendered in place rather than declared."""
    return isinstance(descriptor, INLINE_TYPES)
