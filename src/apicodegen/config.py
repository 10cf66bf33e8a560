"""Generator options."""

from __future__ import annotations

from dataclasses import dataclass, field

from apicodegen.formatting import Formatter, SourceFormatter


@dataclass(frozen=True)
class CodegenOptions:
    """Configuration for one generation call. Use dataclasses.replace to vary."""

    # Name of the aggregate type describing the whole endpoint tree
    api_type_name: str = "__API__"

    # Unnamed Object/Struct declarations are called <prefix><type id>
    synthetic_prefix: str = "Type"

    json_type_name: str = "JsonType"

    formatter: Formatter = field(default_factory=SourceFormatter)


DEFAULT_OPTIONS = CodegenOptions()
