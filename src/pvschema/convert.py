"""
Contains the scalar conversions the validation framework relies on: a coarse classification of runtime types and
lenient numeric conversions used for comparisons.
"""
from collections import UserString
from collections.abc import Mapping, Sequence, Set
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class TypeCode(Enum):
    """
    Coarse classification of runtime types. It is used by the type matcher and to decide whether a value is a leaf
    when object graphs get flattened.
    """

    UNKNOWN = "Unknown"
    STRING = "String"
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    LONG = "Long"
    FLOAT = "Float"
    DOUBLE = "Double"
    DATETIME = "DateTime"
    DURATION = "Duration"
    OBJECT = "Object"
    ENUM = "Enum"
    ARRAY = "Array"
    MAP = "Map"

    def __str__(self):
        return self.value


SCALAR_TYPES: tuple[type, ...] = (
    str,
    UserString,
    bytes,
    bytearray,
    bool,
    int,
    float,
    complex,
    Decimal,
    date,
    time,
    timedelta,
    UUID,
    Enum,
)


def is_sequence_type(cls: type) -> bool:
    """
    Native sequences are all `Sequence`s and `Set`s except the text and binary types.
    """
    if issubclass(cls, (str, bytes, bytearray, UserString)):
        return False
    return issubclass(cls, (Sequence, Set))


def to_type_code_from_type(cls: Optional[type]) -> TypeCode:
    """
    Classifies a runtime type. `int` is classified as INTEGER because the magnitude of the value is unknown here,
    see `to_type_code` for the value based variant.
    """
    # pylint: disable=too-many-return-statements
    if cls is None or cls is type(None):
        return TypeCode.UNKNOWN
    if issubclass(cls, Enum):
        return TypeCode.ENUM
    if issubclass(cls, bool):
        return TypeCode.BOOLEAN
    if issubclass(cls, int):
        return TypeCode.INTEGER
    if issubclass(cls, (float, Decimal)):
        return TypeCode.DOUBLE
    if issubclass(cls, (str, UserString)):
        return TypeCode.STRING
    if issubclass(cls, date):
        return TypeCode.DATETIME
    if issubclass(cls, timedelta):
        return TypeCode.DURATION
    if issubclass(cls, Mapping):
        return TypeCode.MAP
    if is_sequence_type(cls):
        return TypeCode.ARRAY
    if issubclass(cls, SCALAR_TYPES):
        return TypeCode.UNKNOWN
    return TypeCode.OBJECT


def to_type_code(value: Any) -> TypeCode:
    """
    Classifies a runtime value. Integers outside the 32 bit range are classified as LONG.
    """
    if value is None:
        return TypeCode.UNKNOWN
    code = to_type_code_from_type(type(value))
    if code == TypeCode.INTEGER and not _INT32_MIN <= value <= _INT32_MAX:
        return TypeCode.LONG
    return code


def to_nullable_double(value: Any) -> Optional[float]:
    """
    Converts the value into a float or returns `None` if this is not possible.
    Durations are converted into milliseconds and date times into milliseconds since the epoch.
    """
    # pylint: disable=too-many-return-statements
    if value is None:
        return None
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, timedelta):
        return value.total_seconds() * 1000
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (value - _EPOCH).total_seconds() * 1000
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def to_nullable_integer(value: Any) -> Optional[int]:
    """
    Converts the value into an int or returns `None` if this is not possible. Floating point values are truncated.
    """
    if value is None:
        return None
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    number = to_nullable_double(value)
    if number is None or number != number or number in (float("inf"), float("-inf")):
        return None
    return int(number)
