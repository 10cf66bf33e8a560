"""Exceptions raised while generating declarations."""

from __future__ import annotations

from typing import Any


class CodegenError(Exception):
    """Base class for every generation failure."""


class UnresolvedTypeError(CodegenError, KeyError):
    """A type id is referenced but absent from the registry."""

    def __init__(self, type_id: str | int) -> None:
        self.type_id = type_id
        super().__init__(f"Type id {type_id!r} is not present in the registry")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class UnsupportedTypeError(CodegenError, TypeError):
    """A descriptor reached a rendering site with no rule for its kind."""

    def __init__(self, descriptor: Any, site: str = "field") -> None:
        self.descriptor = descriptor
        super().__init__(f"Unsupported {site} type: {descriptor!r}")


class DuplicateTypeNameError(CodegenError, ValueError):
    """Two exported declarations share a display name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate Object Type name: {name}")


class CyclicTypeError(CodegenError, ValueError):
    """An inline type refers back to itself without a named type in between."""

    def __init__(self, chain: tuple[str, ...]) -> None:
        self.chain = chain
        super().__init__(f"Cyclic inline type reference: {' -> '.join(chain)}")


class FormatError(CodegenError, ValueError):
    """The formatter rejected the assembled source."""


class DescriptionError(CodegenError, ValueError):
    """A serialized API description is malformed."""
