"""
Field type resolution.

Turns a type id into the TypeScript expression used wherever a type appears
in value position: a field's type, a composite's member, an endpoint's input
or output.
"""

from __future__ import annotations

from apicodegen.config import DEFAULT_OPTIONS, CodegenOptions
from apicodegen.errors import CyclicTypeError, UnsupportedTypeError
from apicodegen.registry import TypeRegistry
from apicodegen.types import (
    FIELD_SET_TYPES,
    AnyType,
    BooleanType,
    FloatType,
    IDType,
    IntersectType,
    IntType,
    JSONType,
    ListType,
    LiteralType,
    LiteralValue,
    NullableType,
    NumberType,
    RecordType,
    StringType,
    TypeId,
    UnionType,
    UnknownType,
    get_type_name,
)


def synthetic_type_name(type_id: TypeId, options: CodegenOptions = DEFAULT_OPTIONS) -> str:
    """Name given to an unnamed Object/Struct, derived from its registry id."""
    return f"{options.synthetic_prefix}{type_id}"


def render_literal(value: LiteralValue) -> str:
    """Strings are wrapped in double quotes as-is; other values print bare."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    return repr(value)


def resolve_field_type(
    type_id: TypeId,
    registry: TypeRegistry,
    options: CodegenOptions = DEFAULT_OPTIONS,
) -> str:
    """
    Resolve a type id into a TypeScript type expression.

    Named types resolve to their name and unnamed Object/Struct types to
    their synthetic id-based name; everything else is expanded in place.

    Raises:
        UnresolvedTypeError: if an id along the way is not in the registry
        UnsupportedTypeError: if a descriptor kind has no rendering rule
        CyclicTypeError: if an inline type reaches itself again
    """
    return _resolve(type_id, registry, options, ())


def _resolve(
    type_id: TypeId,
    registry: TypeRegistry,
    options: CodegenOptions,
    chain: tuple[str, ...],
) -> str:
    key = str(type_id)
    descriptor = registry.lookup(key)

    if type_name := get_type_name(descriptor):
        return type_name

    if isinstance(descriptor, FIELD_SET_TYPES):
        return synthetic_type_name(key, options)

    if key in chain:
        raise CyclicTypeError((*chain, key))
    chain = (*chain, key)

    def member(item_type_id: TypeId) -> str:
        return _resolve(item_type_id, registry, options, chain)

    match descriptor:
        case AnyType():
            return "any"
        case JSONType():
            return options.json_type_name
        case StringType() | IDType():
            return "string"
        case BooleanType():
            return "boolean"
        case FloatType() | IntType() | NumberType():
            return "number"
        case UnknownType():
            return "unknown"
        case RecordType(item_type_id=item):
            return f"Record<string, {member(item)}>"
        case LiteralType(value=value):
            return render_literal(value)
        case NullableType(item_type_id=item):
            # null and undefined stay distinct: explicit null vs. not provided
            return f"{member(item)} | null | undefined"
        case ListType(item_type_id=item):
            return f"{member(item)}[]"
        case UnionType(item_type_ids=items):
            return " | ".join(member(item) for item in items)
        case IntersectType(item_type_ids=items):
            return " & ".join(member(item) for item in items)
        case _:
            raise UnsupportedTypeError(descriptor)
