"""
Contains functions to check if a runtime type or value matches an expected type description (see `TypeSpec`).
"""
import types
from collections.abc import Mapping
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Optional, Union, get_args, get_origin

from frozendict import frozendict
from typeguard import CollectionCheckStrategy, TypeCheckError, check_type

from pvschema.convert import TypeCode, is_sequence_type, to_type_code_from_type
from pvschema.types import AliasType, CodeType, RawTypeSpec, RuntimeType, SchemaType, TypeSpec, to_type_spec


def _is_integer(actual_type: type) -> bool:
    return issubclass(actual_type, int) and not issubclass(actual_type, bool)


def _is_floating(actual_type: type) -> bool:
    return issubclass(actual_type, (float, Decimal))


def _is_duration(actual_type: type) -> bool:
    return issubclass(actual_type, timedelta) or _is_integer(actual_type) or issubclass(actual_type, float)


def _is_string(actual_type: type) -> bool:
    return issubclass(actual_type, str)


def _is_boolean(actual_type: type) -> bool:
    return issubclass(actual_type, bool)


def _is_datetime(actual_type: type) -> bool:
    return issubclass(actual_type, date)


def _is_enum(actual_type: type) -> bool:
    return issubclass(actual_type, Enum)


def _is_map(actual_type: type) -> bool:
    return issubclass(actual_type, Mapping)


def _is_any(_: type) -> bool:
    return True


_ALIAS_MATCHERS: frozendict[str, Callable[[type], bool]] = frozendict(
    {
        "object": _is_any,
        "int": _is_integer,
        "integer": _is_integer,
        "long": _is_integer,
        "float": _is_floating,
        "double": _is_floating,
        "str": _is_string,
        "string": _is_string,
        "bool": _is_boolean,
        "boolean": _is_boolean,
        "date": _is_datetime,
        "datetime": _is_datetime,
        "timespan": _is_duration,
        "duration": _is_duration,
        "enum": _is_enum,
        "map": _is_map,
        "dict": _is_map,
        "dictionary": _is_map,
        "array": is_sequence_type,
        "list": is_sequence_type,
    }
)

# Codes in the same family are interchangeable since python doesn't distinguish the sizes of numbers.
_TYPE_CODE_FAMILIES: frozendict[TypeCode, TypeCode] = frozendict(
    {TypeCode.LONG: TypeCode.INTEGER, TypeCode.FLOAT: TypeCode.DOUBLE}
)


def _type_code_family(code: TypeCode) -> TypeCode:
    return _TYPE_CODE_FAMILIES.get(code, code)


def match_type_by_name(expected_type: Optional[str], actual_type: type) -> bool:
    """
    Matches the type against a symbolic, case-insensitive type name like "integer", "map" or "string[]".
    The name of the class itself is accepted as well. Unknown names never match.
    """
    if expected_type is None:
        return True
    if actual_type is None:
        raise ValueError("Actual type cannot be None")

    expected_type = expected_type.lower()
    if actual_type.__name__.lower() == expected_type:
        return True
    matcher = _ALIAS_MATCHERS.get(expected_type)
    if matcher is not None:
        return matcher(actual_type)
    if expected_type.endswith("[]"):
        # the element type is not checked
        return is_sequence_type(actual_type)
    return False


def match_type(expected_type: RawTypeSpec, actual_type: type) -> bool:
    """
    Checks if `actual_type` satisfies the expected type. `None` always matches.
    Nested schemas are no types. They have to be validated structurally by the schema itself.
    """
    spec: Optional[TypeSpec] = to_type_spec(expected_type)
    if spec is None:
        return True
    if actual_type is None:
        raise ValueError("Actual type cannot be None")

    if isinstance(spec, SchemaType):
        raise TypeError("Schemas can't be matched by type, use Schema.perform_validation instead")
    if isinstance(spec, RuntimeType):
        if spec.type is Any:
            return True
        origin = get_origin(spec.type)
        if origin in (Union, types.UnionType):
            return any(match_type(RuntimeType(argument), actual_type) for argument in get_args(spec.type))
        try:
            return issubclass(actual_type, origin or spec.type)
        except TypeError:
            # special forms like Literal can only be checked against values
            return False
    if isinstance(spec, AliasType):
        return match_type_by_name(spec.name, actual_type)
    if isinstance(spec, CodeType):
        return _type_code_family(to_type_code_from_type(actual_type)) == _type_code_family(spec.code)
    raise TypeError(f"{spec!r} is not a valid type description")


def match_value(expected_type: RawTypeSpec, actual_value: Any) -> bool:
    """
    Checks if the value satisfies the expected type. Classes and typing annotations (e.g. `list[str]` or
    `int | None`) are checked with typeguard, including every element of collections. All other type descriptions
    are checked by the type of the value.
    """
    spec: Optional[TypeSpec] = to_type_spec(expected_type)
    if spec is None:
        return True
    if actual_value is None:
        raise ValueError("Actual value cannot be None")

    if isinstance(spec, RuntimeType):
        try:
            check_type(actual_value, spec.type, collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS)
        except TypeCheckError:
            return False
        return True
    return match_type(spec, type(actual_value))


def match_value_by_name(expected_type: Optional[str], actual_value: Any) -> bool:
    """
    Checks if the value satisfies the symbolic type name. See `match_type_by_name`.
    """
    if expected_type is None:
        return True
    if actual_value is None:
        raise ValueError("Actual value cannot be None")
    return match_type_by_name(expected_type, type(actual_value))


def match_enum(expected_type: Any, value: Any) -> bool:
    """
    Checks if the value can be converted into a member of the enum class `expected_type`, either by value or by
    name.
    """
    if value is None or not isinstance(expected_type, type) or not issubclass(expected_type, Enum):
        return False
    if isinstance(value, expected_type):
        return True
    if any(member.value == value for member in expected_type):
        return True
    return isinstance(value, str) and value in expected_type.__members__
