"""
Contains the rules comparing a value to a constant or two properties of a value with each other.
"""
from typing import TYPE_CHECKING, Any, Optional

from pvschema.core.comparator import compare
from pvschema.core.result import ValidationResult, ValidationResultType
from pvschema.reflect.property_access import get_property

from .base import ValidationRule, value_name

if TYPE_CHECKING:
    from pvschema.schemas.schema import Schema


class ValueComparisonRule(ValidationRule):
    """
    Compares the value to a constant, e.g. `ValueComparisonRule(">=", 1)`.
    See `pvschema.core.comparator.compare` for the supported operations.
    """

    def __init__(self, operation: str, value: Any):
        self.operation = operation
        self.value = value

    def validate(self, path: Optional[str], schema: "Schema", value: Any, results: list[ValidationResult]):
        if not compare(value, self.operation, self.value):
            results.append(
                ValidationResult(
                    path,
                    ValidationResultType.ERROR,
                    "BAD_VALUE",
                    f"{value_name(path)} must have {self.operation} {self.value} but found {value}",
                    f"{self.operation} {self.value}",
                    value,
                )
            )


class PropertiesComparisonRule(ValidationRule):
    """
    Compares two properties of the value with each other, e.g. `PropertiesComparisonRule("start", "<", "end")`.
    """

    def __init__(self, property1: str, operation: str, property2: str):
        self.property1 = property1
        self.operation = operation
        self.property2 = property2

    def validate(self, path: Optional[str], schema: "Schema", value: Any, results: list[ValidationResult]):
        value1 = get_property(value, self.property1)
        value2 = get_property(value, self.property2)

        if not compare(value1, self.operation, value2):
            results.append(
                ValidationResult(
                    path,
                    ValidationResultType.ERROR,
                    "PROPERTIES_NOT_MATCH",
                    f"{value_name(path)} must have {self.property1} {self.operation} {self.property2}",
                    value2,
                    value1,
                )
            )
