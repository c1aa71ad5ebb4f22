"""
Contains the schema of maps
"""
from collections.abc import Mapping
from typing import Any, Optional

from pvschema.core.result import ValidationResult, ValidationResultType
from pvschema.reflect.property_access import get_value
from pvschema.rules.base import ValidationRule, value_name
from pvschema.types import RawTypeSpec, TypeSpec, ValueKind, classify, to_type_spec

from .schema import Schema, join_path


class MapSchema(Schema):
    """
    Validates that the value is a mapping and checks the types of all keys and values.
    Entries are reported by their (stringified) key.
    """

    def __init__(
        self,
        key_type: RawTypeSpec = None,
        value_type: RawTypeSpec = None,
        required: bool = False,
        rules: Optional[list[ValidationRule]] = None,
    ):
        super().__init__(required, rules)
        self.key_type: Optional[TypeSpec] = to_type_spec(key_type)
        self.value_type: Optional[TypeSpec] = to_type_spec(value_type)

    def perform_validation(self, path: Optional[str], value: Any, results: list[ValidationResult]):
        value = get_value(value)

        super().perform_validation(path, value, results)

        if value is None:
            return

        if classify(value) != ValueKind.KEYED:
            results.append(
                ValidationResult(
                    path,
                    ValidationResultType.ERROR,
                    "VALUE_ISNOT_MAP",
                    f"{value_name(path)} type must be Map (Dictionary)",
                    Mapping,
                    type(value),
                )
            )
            return

        for key, element in value.items():
            element_path = join_path(path, str(key))
            self.perform_type_validation(element_path, self.key_type, key, results)
            self.perform_type_validation(element_path, self.value_type, element, results)
