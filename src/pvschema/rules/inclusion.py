"""
Contains the rules checking if a value is (not) one of a list of values.
"""
from typing import TYPE_CHECKING, Any, Optional

from pvschema.core.result import ValidationResult, ValidationResultType

from .base import ValidationRule, value_name

if TYPE_CHECKING:
    from pvschema.schemas.schema import Schema


def _is_same_value(this_value: Any, value: Any) -> bool:
    # booleans never match numbers although True == 1
    if this_value is None or isinstance(this_value, bool) != isinstance(value, bool):
        return False
    return bool(this_value == value)


def _contains(values: tuple[Any, ...], value: Any) -> bool:
    return any(_is_same_value(this_value, value) for this_value in values)


class IncludedRule(ValidationRule):
    """
    The value must be equal to one of the given values.
    """

    def __init__(self, *values: Any):
        self.values = values

    def validate(self, path: Optional[str], schema: "Schema", value: Any, results: list[ValidationResult]):
        if not _contains(self.values, value):
            results.append(
                ValidationResult(
                    path,
                    ValidationResultType.ERROR,
                    "VALUE_NOT_INCLUDED",
                    f"{value_name(path)} must be one of {list(self.values)}",
                    self.values,
                    value,
                )
            )


class ExcludedRule(ValidationRule):
    """
    The value must not be equal to any of the given values.
    """

    def __init__(self, *values: Any):
        self.values = values

    def validate(self, path: Optional[str], schema: "Schema", value: Any, results: list[ValidationResult]):
        if _contains(self.values, value):
            results.append(
                ValidationResult(
                    path,
                    ValidationResultType.ERROR,
                    "VALUE_INCLUDED",
                    f"{value_name(path)} must not be one of {list(self.values)}",
                    self.values,
                    value,
                )
            )
