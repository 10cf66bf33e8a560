"""
Declaration generation.

Emits one TypeScript declaration per Object/Struct in the registry, renders
the endpoint tree into a single aggregate type and assembles both into one
formatted source string.
"""

from __future__ import annotations

from loguru import logger

from apicodegen.config import DEFAULT_OPTIONS, CodegenOptions
from apicodegen.entries import ApiDescription, Endpoint, Entry, Namespace
from apicodegen.errors import UnsupportedTypeError
from apicodegen.registry import ExportNames, TypeRegistry
from apicodegen.resolver import resolve_field_type, synthetic_type_name
from apicodegen.types import (
    FIELD_SET_TYPES,
    JSONType,
    TypeDescriptor,
    TypeId,
    get_type_name,
    is_inline_type,
)


def json_type_source(options: CodegenOptions = DEFAULT_OPTIONS) -> str:
    """Recursive alias for JSON-compatible values."""
    name = options.json_type_name
    return (
        f"type {name} = number | string | boolean | null | undefined | {name}[]"
        f" | {{ toJSON(): string }} | {{ [key: string]: {name} }}"
    )


# =============================================================================
# Comments
# =============================================================================


def _comment_lines(tag: str, text: str) -> list[str]:
    text = text.replace("*/", "*\\/")
    first, *rest = text.splitlines() or [""]
    return [f"* {tag} {first}", *(f"* {line}" for line in rest)]


def attach_comment(result: str, description: str | None = None, deprecated: str | None = None) -> str:
    """Prefix a JSDoc block when a description or deprecation note is present."""
    if not description and not deprecated:
        return result

    lines = ["/**"]
    if description:
        lines.extend(_comment_lines("@remarks", description))
    if deprecated:
        lines.extend(_comment_lines("@deprecated", deprecated))
    lines.append("*/")

    return "\n".join(lines) + "\n" + result


def _members(members: list[str]) -> str:
    if not members:
        return "{}"
    return "{\n" + "\n".join(members) + "\n}"


# =============================================================================
# Declarations
# =============================================================================


def emit_declaration(
    type_id: TypeId,
    descriptor: TypeDescriptor,
    registry: TypeRegistry,
    export_names: ExportNames,
    options: CodegenOptions = DEFAULT_OPTIONS,
) -> str | None:
    """
    Render one registry entry as a standalone declaration.

    Inline kinds produce no declaration and return None. Named Object/Struct
    types are exported and claim their name in export_names; unnamed ones are
    declared privately under their synthetic name.
    """
    if is_inline_type(descriptor):
        return None

    if not isinstance(descriptor, FIELD_SET_TYPES):
        raise UnsupportedTypeError(descriptor, site="declaration")

    fields = [
        attach_comment(
            f"{key}: {resolve_field_type(field.type_id, registry, options)}",
            field.description,
            field.deprecated,
        )
        for key, field in descriptor.fields.items()
    ]

    if type_name := get_type_name(descriptor):
        export_names.claim(type_name)
        declaration = f"export type {type_name} = {_members(fields)}"
    else:
        declaration = f"type {synthetic_type_name(type_id, options)} = {_members(fields)}"

    logger.debug(f"Emitted declaration for type {type_id} ({descriptor.tag}, {len(fields)} fields)")
    return attach_comment(declaration, descriptor.description, descriptor.deprecated)


def emit_declarations(
    registry: TypeRegistry,
    export_names: ExportNames,
    options: CodegenOptions = DEFAULT_OPTIONS,
) -> list[str]:
    """All declarations, in registry order."""
    declarations = (
        emit_declaration(type_id, descriptor, registry, export_names, options)
        for type_id, descriptor in registry.items()
    )
    return [declaration for declaration in declarations if declaration is not None]


# =============================================================================
# Endpoint Tree
# =============================================================================


def render_endpoint(endpoint: Endpoint, registry: TypeRegistry, options: CodegenOptions = DEFAULT_OPTIONS) -> str:
    """Callable signature of a single endpoint."""
    input_type = resolve_field_type(endpoint.input.type_id, registry, options)
    output_type = resolve_field_type(endpoint.output.type_id, registry, options)
    return f"(input: {input_type}) => Promise<{output_type}>"


def render_entries(namespace: Namespace, registry: TypeRegistry, options: CodegenOptions = DEFAULT_OPTIONS) -> str:
    """Structural type mirroring the namespace, one member per key."""
    members: list[str] = []

    for key, entry in namespace.entries.items():
        members.append(_render_entry(key, entry, registry, options))

    return _members(members)


def _render_entry(key: str, entry: Entry, registry: TypeRegistry, options: CodegenOptions) -> str:
    match entry:
        case Endpoint():
            result = f"{key}: {render_endpoint(entry, registry, options)}"
            return attach_comment(result, entry.description, entry.deprecated)
        case Namespace():
            return f"{key}: {render_entries(entry, registry, options)}"
        case _:
            raise UnsupportedTypeError(entry, site="entry")


# =============================================================================
# Assembly
# =============================================================================


def has_json_type(registry: TypeRegistry) -> bool:
    return any(isinstance(descriptor, JSONType) for descriptor in registry.values())


def codegen(description: ApiDescription, options: CodegenOptions | None = None) -> str:
    """
    Generate TypeScript declarations for an API description.

    The output holds the JSON alias (only if some type needs it), every
    Object/Struct declaration in registry order and finally the exported
    aggregate type of the endpoint tree, passed through options.formatter.

    Any failure aborts the whole call; no partial output is returned.
    """
    options = options or DEFAULT_OPTIONS
    registry = description.types
    export_names = ExportNames()

    logger.debug(f"Generating declarations for {len(registry)} types")
    definitions = emit_declarations(registry, export_names, options)
    entries = render_entries(description.entries, registry, options)

    parts: list[str] = []
    if has_json_type(registry):
        parts.append(json_type_source(options))
    parts.extend(definitions)
    parts.append(f"export type {options.api_type_name} = {entries}")

    source = "\n\n".join(parts)

    logger.debug(f"Formatting {len(source)} characters with {type(options.formatter).__name__}")
    return options.formatter.format(source)
