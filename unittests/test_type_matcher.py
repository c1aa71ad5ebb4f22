from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any, Literal, Optional, Union

import pytest
from example_objects import ExampleEnumInt, ExampleEnumString, ExampleSubObject
from frozendict import frozendict

from pvschema import ObjectSchema, TypeCode
from pvschema.reflect import match_enum, match_type, match_type_by_name, match_value, match_value_by_name
from pvschema.types import AliasType, CodeType, RuntimeType, SchemaType, to_type_spec


class TestTypeMatcher:
    @pytest.mark.parametrize(
        "type_name, value",
        [
            pytest.param("int", 123),
            pytest.param("Integer", 123),
            pytest.param("long", 2**40),
            pytest.param("bool", True),
            pytest.param("Boolean", False),
            pytest.param("float", 123.456),
            pytest.param("Double", Decimal("1.5")),
            pytest.param("string", "ABC"),
            pytest.param("str", "ABC"),
            pytest.param("date", date(2000, 1, 1)),
            pytest.param("DateTime", datetime.now()),
            pytest.param("duration", 123),
            pytest.param("TimeSpan", timedelta(seconds=1)),
            pytest.param("map", {}),
            pytest.param("dict", frozendict()),
            pytest.param("Dictionary", {"a": 1}),
            pytest.param("array", [1, 2]),
            pytest.param("list", (1, 2)),
            pytest.param("int[]", [1, 2]),
            pytest.param("object", object()),
            pytest.param("enum", ExampleEnumInt.ONE),
            pytest.param("ExampleSubObject", ExampleSubObject("1")),
            pytest.param("examplesubobject[]", [ExampleSubObject("1")]),
        ],
    )
    def test_match_value_by_name(self, type_name: str, value: Any):
        assert match_value_by_name(type_name, value)

    @pytest.mark.parametrize(
        "type_name, value",
        [
            pytest.param("int", True, id="bool is no integer"),
            pytest.param("int", 1.5),
            pytest.param("string", 1),
            pytest.param("array", "ABC", id="strings are no arrays"),
            pytest.param("map", [1]),
            pytest.param("boolean", 1),
            pytest.param("enum", 1),
            pytest.param("unknown_type", 1),
        ],
    )
    def test_no_match_by_name(self, type_name: str, value: Any):
        assert not match_value_by_name(type_name, value)

    def test_match_type_by_name(self):
        assert match_type_by_name(None, int)
        assert match_type_by_name("LIST", list)
        with pytest.raises(ValueError):
            match_type_by_name("int", None)  # type:ignore[arg-type]

    @pytest.mark.parametrize(
        "expected, value, result",
        [
            pytest.param(int, 123, True),
            pytest.param(str, 123, False),
            pytest.param(list[int], [1, 2, 3], True),
            pytest.param(list[int], ["A"], False),
            pytest.param(list[str], ["a", 1, 2], False, id="bad element after the first"),
            pytest.param(dict[str, int], {"a": 1, "b": "2"}, False, id="bad value after the first"),
            pytest.param(dict[str, int], {"a": 1}, True),
            pytest.param(Optional[int], 1, True),
            pytest.param(int | str, "A", True),
            pytest.param(Literal["A", "B"], "B", True),
            pytest.param(Literal["A", "B"], "C", False),
            pytest.param(Any, object(), True),
            pytest.param(ExampleEnumString, ExampleEnumString.AAA, True),
            pytest.param(TypeCode.INTEGER, 2**40, True),
            pytest.param(TypeCode.LONG, 1, True),
            pytest.param(TypeCode.FLOAT, 1.5, True),
            pytest.param(TypeCode.STRING, 1, False),
            pytest.param(TypeCode.MAP, {}, True),
            pytest.param(TypeCode.ARRAY, [1], True),
            pytest.param(TypeCode.OBJECT, ExampleSubObject("1"), True),
            pytest.param(TypeCode.ENUM, ExampleEnumInt.ONE, True),
            pytest.param(TypeCode.DURATION, timedelta(), True),
            pytest.param("integer", 1, True),
            pytest.param(None, object(), True),
        ],
    )
    def test_match_value(self, expected: Any, value: Any, result: bool):
        assert match_value(expected, value) == result

    def test_match_type(self):
        assert match_type(int, bool)
        assert match_type(list[int], list)
        assert not match_type(list[int], tuple)
        assert match_type(Union[int, str], str)
        assert not match_type(Literal["A"], str)
        assert match_type(CodeType(TypeCode.DOUBLE), Decimal)
        assert match_type(AliasType("string"), str)
        assert match_type(None, int)

    def test_none_actual_raises(self):
        with pytest.raises(ValueError):
            match_type(int, None)  # type:ignore[arg-type]
        with pytest.raises(ValueError):
            match_value(int, None)
        with pytest.raises(ValueError):
            match_value_by_name("int", None)

    def test_schema_is_no_type(self):
        with pytest.raises(TypeError):
            match_type(ObjectSchema(), dict)

    def test_match_enum(self):
        assert match_enum(ExampleEnumInt, ExampleEnumInt.ONE)
        assert match_enum(ExampleEnumInt, 2)
        assert match_enum(ExampleEnumInt, "TWO")
        assert match_enum(ExampleEnumString, "AAA")
        assert not match_enum(ExampleEnumInt, 3)
        assert not match_enum(ExampleEnumInt, None)
        assert not match_enum(int, 1)


class TestTypeSpec:
    def test_to_type_spec(self):
        schema = ObjectSchema()

        assert to_type_spec(None) is None
        assert to_type_spec(schema) == SchemaType(schema)
        assert to_type_spec("string") == AliasType("string")
        assert to_type_spec(TypeCode.STRING) == CodeType(TypeCode.STRING)
        assert to_type_spec(int) == RuntimeType(int)
        assert to_type_spec(list[str]) == RuntimeType(list[str])
        assert to_type_spec(int | None) == RuntimeType(int | None)
        assert to_type_spec(AliasType("x")) == AliasType("x")

    def test_invalid_type_spec(self):
        with pytest.raises(TypeError):
            to_type_spec(123)  # type:ignore[arg-type]

    def test_str(self):
        assert str(AliasType("string")) == "string"
        assert str(RuntimeType(int)) == "int"
        assert str(CodeType(TypeCode.LONG)) == "Long"
        assert str(SchemaType(ObjectSchema())) == "ObjectSchema"
