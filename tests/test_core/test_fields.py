"""Tests for accessor-based field inference."""

import pytest

from entitygen.core.errors import MalformedMethodShape
from entitygen.core.fields import (
    accessor_prefix,
    build_field_table,
    derive_field_name,
    infer_field,
)
from entitygen.core.types import FieldEntry, MethodDescriptor


class TestDeriveFieldName:
    """Tests for derive_field_name."""

    @pytest.mark.parametrize(
        ("method_name", "expected"),
        [
            ("getName", "name"),
            ("setName", "name"),
            ("isActive", "active"),
            ("getURL", "url"),
            ("getFirstName", "firstname"),
            ("getx", "x"),
        ],
    )
    def test_accessor_prefixes(self, method_name, expected):
        assert derive_field_name(method_name) == expected

    @pytest.mark.parametrize("method_name", ["toString", "hashCode", "GetName", "fetchName", "Is"])
    def test_non_accessors(self, method_name):
        """Prefixes are matched case-sensitively."""
        assert derive_field_name(method_name) is None
        assert accessor_prefix(method_name) is None

    def test_prefix_only(self):
        """A bare prefix derives the empty name."""
        assert derive_field_name("get") == ""

    def test_is_prefix_strips_two_characters(self):
        assert derive_field_name("isSet") == "set"
        assert derive_field_name("issue") == "sue"
        assert accessor_prefix("issue") == "is"


class TestInferField:
    """Tests for infer_field."""

    def test_getter_uses_return_type(self, getter):
        entry = infer_field(getter("getAge", "int"))

        assert entry == FieldEntry(
            name="age", type_name="int", is_identifier=False, getter_prefix="get"
        )

    def test_setter_uses_first_parameter(self):
        method = MethodDescriptor(
            name="setAge",
            return_type_name="void",
            parameter_type_names=("int", "String"),
        )

        entry = infer_field(method)

        assert entry.type_name == "int"
        assert entry.getter_prefix is None

    def test_empty_return_type_is_a_setter(self):
        method = MethodDescriptor(name="setAge", return_type_name="", parameter_type_names=("int",))

        assert infer_field(method).type_name == "int"

    def test_setter_without_parameters_is_malformed(self):
        with pytest.raises(MalformedMethodShape) as exc_info:
            infer_field(MethodDescriptor(name="setFoo"))

        assert exc_info.value.code == "MALFORMED_METHOD_SHAPE"
        assert exc_info.value.details["method"] == "setFoo"

    def test_non_accessor_is_malformed(self, getter):
        with pytest.raises(MalformedMethodShape):
            infer_field(getter("toString", "String"))

    def test_non_void_setter_is_treated_as_getter(self):
        """Shape is decided by the return type, not the prefix."""
        method = MethodDescriptor(
            name="setName",
            return_type_name="Builder",
            parameter_type_names=("String",),
        )

        entry = infer_field(method)

        assert entry.type_name == "Builder"
        assert entry.getter_prefix is None

    def test_identifier_flag(self, getter):
        assert infer_field(getter("getId", "long", is_identifier=True)).is_identifier is True

    @pytest.mark.parametrize(("method_name", "prefix"), [("isActive", "is"), ("getActive", "get")])
    def test_getter_prefix_is_recorded(self, getter, method_name, prefix):
        assert infer_field(getter(method_name, "boolean")).getter_prefix == prefix


class TestBuildFieldTable:
    """Tests for build_field_table."""

    def test_person_example(self, person_methods):
        table = build_field_table(person_methods)

        assert list(table) == [
            FieldEntry(name="name", type_name="String", is_identifier=False, getter_prefix="get"),
            FieldEntry(name="active", type_name="boolean", is_identifier=True, getter_prefix="is"),
        ]

    def test_getter_setter_pair_gives_one_field(self, getter, setter):
        table = build_field_table([setter("setFoo", "Foo"), getter("getFoo", "Foo")])

        assert table.names() == ["foo"]

    def test_first_seen_type_wins(self, getter, setter):
        table = build_field_table([getter("getFoo", "int"), setter("setFoo", "String")])

        assert len(table) == 1
        assert table.get("foo").type_name == "int"

    def test_first_seen_identifier_wins(self, getter, setter):
        table = build_field_table([
            setter("setKey", "String"),
            getter("getKey", "String", is_identifier=True),
        ])

        assert table.get("key").is_identifier is False

    def test_identifier_on_setter(self, getter, setter):
        """The flag is taken from whichever accessor is seen first."""
        table = build_field_table([
            setter("setKey", "String", is_identifier=True),
            getter("getKey", "String"),
        ])

        assert table.get("key").is_identifier is True

    def test_later_getter_supplies_prefix(self, getter, setter):
        """A getter after the setter only contributes its prefix."""
        table = build_field_table([
            setter("setActive", "boolean"),
            getter("getActive", "Boolean", is_identifier=True),
        ])

        assert table.get("active") == FieldEntry(
            name="active", type_name="boolean", is_identifier=False, getter_prefix="get"
        )

    def test_first_getter_prefix_wins(self, getter):
        table = build_field_table([getter("isOpen", "boolean"), getter("getOpen", "boolean")])

        assert table.get("open").getter_prefix == "is"

    def test_case_collision(self, getter):
        """getX and getx name the same field."""
        table = build_field_table([getter("getX", "int"), getter("getx", "long")])

        assert table.names() == ["x"]
        assert table.get("x").type_name == "int"

    def test_skips_non_accessors_and_malformed_setters(self, getter):
        table = build_field_table([
            getter("toString", "String"),
            MethodDescriptor(name="setFoo"),
            MethodDescriptor(name="touch"),
            getter("getBar", "Bar"),
        ])

        assert table.names() == ["bar"]

    def test_malformed_setter_does_not_reserve_the_name(self, getter):
        table = build_field_table([MethodDescriptor(name="setFoo"), getter("getFoo", "Foo")])

        assert table.get("foo").type_name == "Foo"

    def test_preserves_encounter_order(self, getter, setter):
        table = build_field_table([
            getter("getZeta", "int"),
            getter("getAlpha", "int"),
            setter("setZeta", "int"),
            getter("isMiddle", "boolean"),
        ])

        assert table.names() == ["zeta", "alpha", "middle"]

    def test_empty(self):
        assert len(build_field_table([])) == 0

    def test_accepts_generators(self, person_methods):
        table = build_field_table(m for m in person_methods)

        assert table.names() == ["name", "active"]


class TestMethodDescriptorIdentifier:
    """Tests for the declared identifier value."""

    def test_absent_by_default(self):
        method = MethodDescriptor(name="getId", return_type_name="long")

        assert method.identifier is None
        assert method.is_identifier is False

    @pytest.mark.parametrize("declared", [True, False])
    def test_resolves_flag(self, declared):
        method = MethodDescriptor(name="getId", return_type_name="long", identifier=declared)

        assert method.is_identifier is declared

    def test_explicit_flag_is_kept(self):
        method = MethodDescriptor(name="getId", identifier=False, is_identifier=True)

        assert method.is_identifier is True

    def test_drives_field_flag(self):
        table = build_field_table([
            MethodDescriptor(name="getId", return_type_name="long", identifier=True),
        ])

        assert table.get("id").is_identifier is True
