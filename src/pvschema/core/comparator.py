"""
Contains the comparison helper used by the comparison rules.
"""
import re
from typing import Any

from pvschema.convert import to_nullable_double


def are_equal(value1: Any, value2: Any) -> bool:
    """Two `None`s are equal, a single `None` is equal to nothing"""
    if value1 is None and value2 is None:
        return True
    if value1 is None or value2 is None:
        return False
    return bool(value1 == value2)


def are_not_equal(value1: Any, value2: Any) -> bool:
    return not are_equal(value1, value2)


def less(value1: Any, value2: Any) -> bool:
    """Compares numerically. If one of the values is not a number the result is False."""
    number1 = to_nullable_double(value1)
    number2 = to_nullable_double(value2)
    if number1 is None or number2 is None:
        return False
    return number1 < number2


def more(value1: Any, value2: Any) -> bool:
    """Compares numerically. If one of the values is not a number the result is False."""
    number1 = to_nullable_double(value1)
    number2 = to_nullable_double(value2)
    if number1 is None or number2 is None:
        return False
    return number1 > number2


def match(value1: Any, value2: Any) -> bool:
    """
    Checks if the string representation of `value1` contains a match of the regular expression `value2`.
    The pattern is used as is, a malformed pattern raises `re.error`.
    """
    if value1 is None and value2 is None:
        return True
    if value1 is None or value2 is None:
        return False
    return re.search(str(value2), str(value1)) is not None


def compare(value1: Any, operation: str, value2: Any) -> bool:
    """
    Compares two values using the given operation. Supported operations (case-insensitive) are
    `=`, `==`, `EQ`, `!=`, `<>`, `NE`, `<`, `LT`, `<=`, `LE`, `>`, `GT`, `>=`, `GE` and `LIKE`.
    Unknown operations always return True.
    """
    # pylint: disable=too-many-return-statements
    operation = operation.upper()

    if operation in ("=", "==", "EQ"):
        return are_equal(value1, value2)
    if operation in ("!=", "<>", "NE"):
        return are_not_equal(value1, value2)
    if operation in ("<", "LT"):
        return less(value1, value2)
    if operation in ("<=", "LE"):
        return are_equal(value1, value2) or less(value1, value2)
    if operation in (">", "GT"):
        return more(value1, value2)
    if operation in (">=", "GE"):
        return are_equal(value1, value2) or more(value1, value2)
    if operation == "LIKE":
        return match(value1, value2)

    return True
