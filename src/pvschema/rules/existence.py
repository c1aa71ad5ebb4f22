"""
Contains the rules checking which properties of a value are set
"""
from typing import TYPE_CHECKING, Any, Optional

from pvschema.core.result import ValidationResult, ValidationResultType
from pvschema.reflect.property_access import get_property

from .base import ValidationRule, value_name

if TYPE_CHECKING:
    from pvschema.schemas.schema import Schema


def _find_set_properties(value: Any, properties: tuple[str, ...]) -> list[str]:
    return [property_name for property_name in properties if get_property(value, property_name) is not None]


class AtLeastOneExistsRule(ValidationRule):
    """
    At least one of the given properties must not be None.
    """

    def __init__(self, *properties: str):
        self.properties = properties

    def validate(self, path: Optional[str], schema: "Schema", value: Any, results: list[ValidationResult]):
        found = _find_set_properties(value, self.properties)

        if len(found) == 0:
            results.append(
                ValidationResult(
                    path,
                    ValidationResultType.ERROR,
                    "VALUE_NULL",
                    f"{value_name(path)} must have at least one property from {list(self.properties)}",
                    self.properties,
                    None,
                )
            )


class OnlyOneExistsRule(ValidationRule):
    """
    Exactly one of the given properties must not be None.
    """

    def __init__(self, *properties: str):
        self.properties = properties

    def validate(self, path: Optional[str], schema: "Schema", value: Any, results: list[ValidationResult]):
        found = _find_set_properties(value, self.properties)

        if len(found) == 0:
            results.append(
                ValidationResult(
                    path,
                    ValidationResultType.ERROR,
                    "VALUE_NULL",
                    f"{value_name(path)} must have at least one property from {list(self.properties)}",
                    self.properties,
                    None,
                )
            )
        elif len(found) > 1:
            results.append(
                ValidationResult(
                    path,
                    ValidationResultType.ERROR,
                    "VALUE_ONLY_ONE",
                    f"{value_name(path)} must have only one property from {list(self.properties)}",
                    self.properties,
                    found,
                )
            )
