"""
Contains the schema of objects, i.e. values which consist of named properties
"""
from typing import Any, Optional

from pvschema.core.result import ValidationResult, ValidationResultType
from pvschema.reflect.property_access import get_properties
from pvschema.rules.base import ValidationRule, value_name
from pvschema.types import RawTypeSpec

from .property_schema import PropertySchema
from .schema import Schema, join_path


class ObjectSchema(Schema):
    """
    Validates the properties of an object. The object may be a dictionary or any class instance, property names are
    matched case-insensitive. Properties which are not declared are reported as warnings unless undefined
    properties are allowed.
    """

    def __init__(
        self,
        required: bool = False,
        rules: Optional[list[ValidationRule]] = None,
        properties: Optional[list[PropertySchema]] = None,
        allow_undefined: bool = False,
    ):
        super().__init__(required, rules)
        self.properties: list[PropertySchema] = list(properties) if properties is not None else []
        self.is_undefined_allowed: bool = allow_undefined

    def allow_undefined(self, value: bool) -> "ObjectSchema":
        """Sets whether undeclared properties are accepted without a warning"""
        self.is_undefined_allowed = value
        return self

    def with_property(self, schema: PropertySchema) -> "ObjectSchema":
        """Adds the schema of a property"""
        if schema is None:
            raise ValueError("Property schema cannot be None")
        self.properties.append(schema)
        return self

    def with_required_property(
        self, name: str, value_type: RawTypeSpec = None, *rules: ValidationRule
    ) -> "ObjectSchema":
        """Adds a property which must not be None"""
        return self.with_property(PropertySchema(name, value_type, required=True, rules=list(rules)))

    def with_optional_property(
        self, name: str, value_type: RawTypeSpec = None, *rules: ValidationRule
    ) -> "ObjectSchema":
        """Adds a property which may be None"""
        return self.with_property(PropertySchema(name, value_type, required=False, rules=list(rules)))

    def perform_validation(self, path: Optional[str], value: Any, results: list[ValidationResult]):
        super().perform_validation(path, value, results)

        if value is None:
            return

        properties = get_properties(value)

        for property_schema in self.properties:
            processed_name: Optional[str] = None
            for property_name, property_value in properties.items():
                if property_name.lower() == property_schema.name.lower():
                    property_schema.perform_validation(path, property_value, results)
                    processed_name = property_name
                    break

            if processed_name is None:
                property_schema.perform_validation(path, None, results)
            else:
                del properties[processed_name]

        if self.is_undefined_allowed:
            return

        for property_name in properties:
            results.append(
                ValidationResult(
                    join_path(path, property_name),
                    ValidationResultType.WARNING,
                    "UNEXPECTED_PROPERTY",
                    f"{value_name(path)} contains unexpected property {property_name}",
                    None,
                    property_name,
                )
            )
