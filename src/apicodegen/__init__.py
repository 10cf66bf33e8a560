"""apicodegen - TypeScript declarations from serializable API descriptions."""

from apicodegen.codegen import (
    attach_comment,
    codegen,
    emit_declaration,
    emit_declarations,
    render_endpoint,
    render_entries,
)
from apicodegen.config import CodegenOptions
from apicodegen.entries import (
    ApiDescription,
    Endpoint,
    Entry,
    Namespace,
    TypeRef,
)
from apicodegen.errors import (
    CodegenError,
    CyclicTypeError,
    DescriptionError,
    DuplicateTypeNameError,
    FormatError,
    UnresolvedTypeError,
    UnsupportedTypeError,
)
from apicodegen.formatting import (
    Formatter,
    PrettierFormatter,
    SourceFormatter,
)
from apicodegen.registry import ExportNames, TypeRegistry
from apicodegen.resolver import resolve_field_type
from apicodegen.serialization import (
    from_dict,
    from_json,
    to_dict,
    to_json,
)
from apicodegen.types import (
    AnyType,
    BooleanType,
    FieldDef,
    FloatType,
    IDType,
    IntersectType,
    IntType,
    JSONType,
    ListType,
    LiteralType,
    NullableType,
    NumberType,
    ObjectType,
    RecordType,
    StringType,
    StructType,
    TypeDescriptor,
    UnionType,
    UnknownType,
    get_type_name,
    is_inline_type,
)

__all__ = [
    "AnyType",
    "ApiDescription",
    "BooleanType",
    "CodegenError",
    "CodegenOptions",
    "CyclicTypeError",
    "DescriptionError",
    "DuplicateTypeNameError",
    "Endpoint",
    "Entry",
    "ExportNames",
    "FieldDef",
    "FloatType",
    "FormatError",
    "Formatter",
    "IDType",
    "IntType",
    "IntersectType",
    "JSONType",
    "ListType",
    "LiteralType",
    "Namespace",
    "NullableType",
    "NumberType",
    "ObjectType",
    "PrettierFormatter",
    "RecordType",
    "SourceFormatter",
    "StringType",
    "StructType",
    "TypeDescriptor",
    "TypeRef",
    "TypeRegistry",
    "UnionType",
    "UnknownType",
    "UnresolvedTypeError",
    "UnsupportedTypeError",
    "attach_comment",
    "codegen",
    "emit_declaration",
    "emit_declarations",
    "from_dict",
    "from_json",
    "get_type_name",
    "is_inline_type",
    "render_endpoint",
    "render_entries",
    "resolve_field_type",
    "to_dict",
    "to_json",
]
