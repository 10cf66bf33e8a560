"""
Reading and writing the JSON form of an API description.

Wire format::

    {
      "types": {"1": {"type": "String"}, "2": {"type": "List", "itemTypeId": 1}},
      "entries": {
        "type": "Entries",
        "entries": {
          "ping": {"type": "Api", "input": {"typeId": 1}, "output": {"typeId": 1}}
        }
      }
    }

Descriptor fields use camelCase keys on the wire (itemTypeId, itemTypeIds,
typeId). Any other top-level keys are ignored.
"""

from __future__ import annotations

import json
import math
from dataclasses import fields
from typing import Any

from apicodegen.entries import ApiDescription, Endpoint, Entry, Namespace, TypeRef
from apicodegen.errors import DescriptionError
from apicodegen.registry import TypeRegistry
from apicodegen.types import FieldDef, LiteralValue, TypeDescriptor

_API_TAG = "Api"
_ENTRIES_TAG = "Entries"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _require(payload: dict[str, Any], key: str, where: str) -> Any:
    if not isinstance(payload, dict):
        raise DescriptionError(f"{where}: expected an object, got {type(payload).__name__}")
    if key not in payload:
        raise DescriptionError(f"{where}: missing '{key}'")
    return payload[key]


def _optional_str(payload: dict[str, Any], key: str, where: str) -> str | None:
    value = payload.get(key)
    if value is not None and not isinstance(value, str):
        raise DescriptionError(f"{where}.{key}: expected a string, got {type(value).__name__}")
    return value


def _literal_value(payload: dict[str, Any], where: str) -> LiteralValue:
    value = _require(payload, "value", where)
    if not isinstance(value, str | int | float):
        raise DescriptionError(f"{where}.value: expected a string, number or boolean, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise DescriptionError(f"{where}.value: literal numbers must be finite, got {value!r}")
    return value


# =============================================================================
# Types
# =============================================================================


def _field_from_dict(payload: dict[str, Any], where: str) -> FieldDef:
    return FieldDef(
        type_id=str(_require(payload, "typeId", where)),
        description=_optional_str(payload, "description", where),
        deprecated=_optional_str(payload, "deprecated", where),
    )


def type_from_dict(type_id: str, payload: dict[str, Any]) -> TypeDescriptor:
    """Decode one registry entry."""
    where = f"types[{type_id!r}]"
    tag = _require(payload, "type", where)
    if not isinstance(tag, str):
        raise DescriptionError(f"{where}.type: expected a string, got {type(tag).__name__}")
    cls = TypeDescriptor.for_tag(tag)
    if cls is None:
        raise DescriptionError(f"{where}: unknown type kind {tag!r}")

    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        key = _camel(f.name)
        if f.name == "fields":
            raw_fields = _require(payload, key, where)
            if not isinstance(raw_fields, dict):
                raise DescriptionError(f"{where}.fields: expected an object")
            kwargs[f.name] = {
                name: _field_from_dict(value, f"{where}.fields[{name!r}]")
                for name, value in raw_fields.items()
            }
        elif f.name == "item_type_ids":
            items = _require(payload, key, where)
            if not isinstance(items, list):
                raise DescriptionError(f"{where}.{key}: expected a list")
            kwargs[f.name] = tuple(str(item) for item in items)
        elif f.name == "item_type_id":
            kwargs[f.name] = str(_require(payload, key, where))
        elif f.kw_only:
            if (value := _optional_str(payload, key, where)) is not None:
                kwargs[f.name] = value
        elif f.name == "value":
            kwargs[f.name] = _literal_value(payload, where)
        else:
            kwargs[f.name] = _require(payload, key, where)

    return cls(**kwargs)


def type_to_dict(descriptor: TypeDescriptor) -> dict[str, Any]:
    """Encode one registry entry."""
    result: dict[str, Any] = {"type": descriptor.tag}
    for f in fields(descriptor):
        value = getattr(descriptor, f.name)
        if value is None:
            continue
        if f.name == "fields":
            value = {name: _field_to_dict(field) for name, field in value.items()}
        elif f.name == "item_type_ids":
            value = list(value)
        result[_camel(f.name)] = value
    return result


def _field_to_dict(field: FieldDef) -> dict[str, Any]:
    result: dict[str, Any] = {"typeId": field.type_id}
    if field.description is not None:
        result["description"] = field.description
    if field.deprecated is not None:
        result["deprecated"] = field.deprecated
    return result


# =============================================================================
# Entries
# =============================================================================


def entries_from_dict(payload: dict[str, Any], where: str = "entries") -> Namespace:
    """Decode a namespace and everything below it."""
    children = _require(payload, "entries", where)
    if not isinstance(children, dict):
        raise DescriptionError(f"{where}.entries: expected an object")

    result: dict[str, Entry] = {}
    for key, child in children.items():
        child_where = f"{where}[{key!r}]"
        tag = _require(child, "type", child_where)
        if tag == _API_TAG:
            result[key] = Endpoint(
                input=TypeRef(str(_require(_require(child, "input", child_where), "typeId", child_where))),
                output=TypeRef(str(_require(_require(child, "output", child_where), "typeId", child_where))),
                description=_optional_str(child, "description", child_where),
                deprecated=_optional_str(child, "deprecated", child_where),
            )
        elif tag == _ENTRIES_TAG:
            result[key] = entries_from_dict(child, child_where)
        else:
            raise DescriptionError(f"{child_where}: unknown entry kind {tag!r}")

    return Namespace(result)


def entries_to_dict(namespace: Namespace) -> dict[str, Any]:
    """Encode a namespace and everything below it."""
    children: dict[str, Any] = {}
    for key, entry in namespace.entries.items():
        if isinstance(entry, Namespace):
            children[key] = entries_to_dict(entry)
            continue
        child: dict[str, Any] = {
            "type": _API_TAG,
            "input": {"typeId": entry.input.type_id},
            "output": {"typeId": entry.output.type_id},
        }
        if entry.description is not None:
            child["description"] = entry.description
        if entry.deprecated is not None:
            child["deprecated"] = entry.deprecated
        children[key] = child
    return {"type": _ENTRIES_TAG, "entries": children}


# =============================================================================
# Descriptions
# =============================================================================


def from_dict(payload: dict[str, Any]) -> ApiDescription:
    """Decode an API description from its JSON-compatible form."""
    raw_types = _require(payload, "types", "description")
    if not isinstance(raw_types, dict):
        raise DescriptionError("description.types: expected an object")

    types = {str(type_id): type_from_dict(str(type_id), value) for type_id, value in raw_types.items()}
    entries = entries_from_dict(_require(payload, "entries", "description"))
    return ApiDescription(types=TypeRegistry(types), entries=entries)


def to_dict(description: ApiDescription) -> dict[str, Any]:
    """Encode an API description to its JSON-compatible form."""
    return {
        "types": {type_id: type_to_dict(descriptor) for type_id, descriptor in description.types.items()},
        "entries": entries_to_dict(description.entries),
    }


def from_json(text: str) -> ApiDescription:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise DescriptionError(f"Invalid JSON: {e}") from e
    return from_dict(payload)


def to_json(description: ApiDescription, indent: int | None = 2) -> str:
    return json.dumps(to_dict(description), indent=indent)
