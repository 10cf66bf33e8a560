"""Tests for apicodegen.types module."""

import pytest

from apicodegen.types import (
    AnyType,
    FieldDef,
    IDType,
    JSONType,
    ListType,
    LiteralType,
    ObjectType,
    StringType,
    StructType,
    TypeDescriptor,
    UnionType,
    get_type_name,
    is_inline_type,
)


class TestTagRegistry:
    """Test tag registration of descriptor classes."""

    def test_atomic_tags(self):
        """Test that atomic kinds register under their wire names."""
        assert TypeDescriptor.for_tag("Any") is AnyType
        assert TypeDescriptor.for_tag("JSON") is JSONType
        assert TypeDescriptor.for_tag("ID") is IDType

    def test_composite_tags(self):
        """Test that composite kinds register under their wire names."""
        assert TypeDescriptor.for_tag("List") is ListType
        assert TypeDescriptor.for_tag("Union") is UnionType
        assert TypeDescriptor.for_tag("Struct") is StructType

    def test_unknown_tag(self):
        """Test that an unregistered tag yields None."""
        assert TypeDescriptor.for_tag("Tuple") is None

    def test_instance_tag(self):
        """Test the tag property on instances."""
        assert ListType("1").tag == "List"

    def test_duplicate_tag_rejected(self):
        """Test that a second class cannot claim an existing tag."""
        with pytest.raises(ValueError, match="already registered"):

            class OtherString(TypeDescriptor, tag="String"):
                pass


class TestDescriptors:
    """Test descriptor construction."""

    def test_positional_payload_keyword_metadata(self):
        """Test that payload is positional while metadata is keyword-only."""
        descriptor = ListType("3", name="Tags", description="All tags")
        assert descriptor.item_type_id == "3"
        assert descriptor.name == "Tags"
        assert descriptor.description == "All tags"
        assert descriptor.deprecated is None

    def test_frozen(self):
        """Test that descriptors are immutable."""
        descriptor = LiteralType("ok")
        with pytest.raises(AttributeError):
            descriptor.value = "nope"

    def test_equality(self):
        """Test structural equality."""
        assert UnionType(("1", "2")) == UnionType(("1", "2"))
        assert UnionType(("1", "2")) != UnionType(("2", "1"))

    def test_object_fields_keep_order(self):
        """Test that Object fields keep insertion order."""
        descriptor = ObjectType({"b": FieldDef("1"), "a": FieldDef("2")})
        assert list(descriptor.fields) == ["b", "a"]


class TestHelpers:
    """Test get_type_name and is_inline_type."""

    def test_named(self):
        """Test that a display name is returned."""
        assert get_type_name(ObjectType({}, name="User")) == "User"

    def test_unnamed(self):
        """Test that unnamed and empty-named types have no name."""
        assert get_type_name(StringType()) is None
        assert get_type_name(StringType(name="")) is None

    def test_inline_kinds(self):
        """Test that every kind except Object/Struct is inline."""
        assert is_inline_type(StringType())
        assert is_inline_type(ListType("1"))
        assert is_inline_type(LiteralType(1))
        assert not is_inline_type(ObjectType({}))
        assert not is_inline_type(StructType({}, name="Point"))
