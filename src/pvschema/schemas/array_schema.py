"""
Contains the schema of arrays
"""
from collections.abc import Sequence
from typing import Any, Optional

from pvschema.core.result import ValidationResult, ValidationResultType
from pvschema.reflect.property_access import get_value
from pvschema.rules.base import ValidationRule, value_name
from pvschema.types import RawTypeSpec, TypeSpec, ValueKind, classify, to_type_spec

from .schema import Schema, join_path


class ArraySchema(Schema):
    """
    Validates that the value is a sequence (list, tuple, set, ...) and checks the type of every element.
    Elements are reported by their index.
    """

    def __init__(
        self,
        value_type: RawTypeSpec = None,
        required: bool = False,
        rules: Optional[list[ValidationRule]] = None,
    ):
        super().__init__(required, rules)
        self.value_type: Optional[TypeSpec] = to_type_spec(value_type)

    def perform_validation(self, path: Optional[str], value: Any, results: list[ValidationResult]):
        value = get_value(value)

        super().perform_validation(path, value, results)

        if value is None:
            return

        if classify(value) != ValueKind.SEQUENCE:
            results.append(
                ValidationResult(
                    path,
                    ValidationResultType.ERROR,
                    "VALUE_ISNOT_ARRAY",
                    f"{value_name(path)} type must be List or Array",
                    Sequence,
                    type(value),
                )
            )
            return

        for index, element in enumerate(value):
            self.perform_type_validation(join_path(path, str(index)), self.value_type, element, results)
