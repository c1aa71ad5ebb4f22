"""
Contains the schema of a single property of an object
"""
from typing import Any, Optional

from pvschema.core.result import ValidationResult
from pvschema.rules.base import ValidationRule
from pvschema.types import RawTypeSpec, TypeSpec, to_type_spec

from .schema import Schema, join_path


class PropertySchema(Schema):
    """
    Validates the property `name` of an object. The value of the property is checked against the rules and the
    expected `type`.
    """

    def __init__(
        self,
        name: str,
        value_type: RawTypeSpec = None,
        required: bool = False,
        rules: Optional[list[ValidationRule]] = None,
    ):
        if name is None:
            raise ValueError("Property name cannot be None")
        super().__init__(required, rules)
        self.name: str = name
        self.type: Optional[TypeSpec] = to_type_spec(value_type)

    def perform_validation(self, path: Optional[str], value: Any, results: list[ValidationResult]):
        path = join_path(path, self.name)

        super().perform_validation(path, value, results)
        if value is None and self.is_required:
            return
        self.perform_type_validation(path, self.type, value, results)
