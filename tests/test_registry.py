"""Tests for apicodegen.registry module."""

import pytest

from apicodegen.errors import DuplicateTypeNameError, UnresolvedTypeError
from apicodegen.registry import ExportNames, TypeRegistry
from apicodegen.types import IntType, StringType


class TestTypeRegistry:
    """Test id lookup."""

    def test_lookup(self):
        """Test looking up a registered id."""
        registry = TypeRegistry({"1": StringType()})
        assert registry.lookup("1") == StringType()

    def test_int_and_str_ids_match(self):
        """Test that integer ids address string keys and vice versa."""
        registry = TypeRegistry({1: StringType(), "2": IntType()})
        assert registry.lookup("1") == StringType()
        assert registry.lookup(2) == IntType()
        assert 1 in registry
        assert "2" in registry

    def test_missing_id(self):
        """Test that a missing id raises UnresolvedTypeError."""
        registry = TypeRegistry({"1": StringType()})
        with pytest.raises(UnresolvedTypeError, match="'99'") as excinfo:
            registry.lookup("99")
        assert excinfo.value.type_id == "99"

    def test_missing_id_is_key_error(self):
        """Test that mapping access behaves like a dict."""
        registry = TypeRegistry()
        with pytest.raises(KeyError):
            registry["1"]
        assert registry.get("1") is None

    def test_iteration_order(self):
        """Test that iteration follows insertion order."""
        registry = TypeRegistry({"3": StringType(), "1": IntType(), "2": StringType()})
        assert list(registry) == ["3", "1", "2"]
        assert len(registry) == 3


class TestExportNames:
    """Test export name collision detection."""

    def test_claim(self):
        """Test claiming distinct names."""
        names = ExportNames()
        names.claim("User")
        names.claim("Post")
        assert "User" in names
        assert len(names) == 2

    def test_duplicate(self):
        """Test that claiming a name twice fails."""
        names = ExportNames()
        names.claim("User")
        with pytest.raises(DuplicateTypeNameError, match="User"):
            names.claim("User")

    def test_instances_are_independent(self):
        """Test that two registries never share names."""
        first = ExportNames()
        first.claim("User")
        second = ExportNames()
        second.claim("User")
        assert "User" in second
