"""
Lookup tables used during one generation call.

TypeRegistry is the read-only id -> descriptor table every reference is
resolved through. ExportNames tracks which display names have already been
emitted as top-level declarations.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from apicodegen.errors import DuplicateTypeNameError, UnresolvedTypeError
from apicodegen.types import TypeDescriptor, TypeId


class TypeRegistry(Mapping[str, TypeDescriptor]):
    """
    Mapping from type id to descriptor.

    Ids are normalized to strings, so 1 and "1" address the same entry.
    Iteration follows insertion order.
    """

    def __init__(self, types: Mapping[TypeId, TypeDescriptor] | None = None) -> None:
        self._types: dict[str, TypeDescriptor] = {
            str(type_id): descriptor for type_id, descriptor in (types or {}).items()
        }

    def lookup(self, type_id: TypeId) -> TypeDescriptor:
        """Return the descriptor for a type id, failing if it is absent."""
        try:
            return self._types[str(type_id)]
        except KeyError:
            raise UnresolvedTypeError(type_id) from None

    def __getitem__(self, type_id: TypeId) -> TypeDescriptor:
        return self.lookup(type_id)

    def __contains__(self, type_id: object) -> bool:
        return str(type_id) in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"TypeRegistry({self._types!r})"


class ExportNames:
    """Display names already emitted as exported declarations."""

    def __init__(self) -> None:
        self._names: set[str] = set()

    def claim(self, name: str) -> None:
        if name in self._names:
            raise DuplicateTypeNameError(name)
        self._names.add(name)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)
