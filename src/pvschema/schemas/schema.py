"""
Contains the base class of all schemas
"""
import logging
from typing import Any, Optional, TypeVar

from pvschema.core.exception import ValidationException
from pvschema.core.result import ValidationResult, ValidationResultType
from pvschema.reflect.property_access import get_value
from pvschema.reflect.type_matcher import match_value
from pvschema.rules.base import ValidationRule, value_name
from pvschema.types import RawTypeSpec, SchemaType, to_type_spec

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound="Schema")


def join_path(path: Optional[str], name: str) -> str:
    """Appends `name` to the dot-path. An empty path results in `name` itself."""
    if path is None or path.strip() == "":
        return name
    return f"{path}.{name}"


class Schema:
    """
    A schema describes the constraints a value has to satisfy: whether it is required and which rules apply to it.
    Subclasses describe the structure of objects, arrays and maps.
    Schemas are set up once using the builder methods and can then be used to validate any number of values.
    """

    def __init__(self, required: bool = False, rules: Optional[list[ValidationRule]] = None):
        self.is_required: bool = required
        self.rules: list[ValidationRule] = list(rules) if rules is not None else []

    def make_required(self: SchemaT) -> SchemaT:
        """Values validated by this schema must not be None"""
        self.is_required = True
        return self

    def make_optional(self: SchemaT) -> SchemaT:
        """Values validated by this schema may be None"""
        self.is_required = False
        return self

    def with_rule(self: SchemaT, rule: ValidationRule) -> SchemaT:
        """Adds a rule which is checked for every non None value"""
        if rule is None:
            raise ValueError("Rule cannot be None")
        self.rules.append(rule)
        return self

    def perform_validation(self, path: Optional[str], value: Any, results: list[ValidationResult]):
        """
        Validates the value located at `path` and appends all findings to `results`.
        None values are only checked for being required, all other values are checked by the rules.
        """
        if value is None:
            if self.is_required:
                results.append(
                    ValidationResult(
                        path,
                        ValidationResultType.ERROR,
                        "VALUE_IS_NULL",
                        f"{value_name(path)} cannot be null",
                        "NOT NULL",
                        None,
                    )
                )
            return

        value = get_value(value)
        for rule in self.rules:
            rule.validate(path, self, value, results)

    def perform_type_validation(
        self, path: Optional[str], value_type: RawTypeSpec, value: Any, results: list[ValidationResult]
    ):
        """
        Checks the value against the expected type. Nested schemas validate the value structurally.
        """
        spec = to_type_spec(value_type)
        if spec is None:
            return

        if isinstance(spec, SchemaType):
            spec.schema.perform_validation(path, value, results)
            return

        value = get_value(value)
        if value is None:
            return

        if match_value(spec, value):
            return

        actual_type_name = type(value).__name__
        results.append(
            ValidationResult(
                path,
                ValidationResultType.ERROR,
                "TYPE_MISMATCH",
                f"{value_name(path)} type must be {spec} but found {actual_type_name}",
                spec,
                actual_type_name,
            )
        )

    def validate(self, value: Any) -> list[ValidationResult]:
        """
        Validates the value and returns all results, including warnings and informations. Never raises.
        """
        results: list[ValidationResult] = []
        self.perform_validation("", value, results)
        return results

    def validate_and_throw_exception(self, correlation_id: Optional[str], value: Any, strict: bool = False):
        """
        Validates the value and raises a `ValidationException` if any error occurred. If `strict` is True warnings
        make the validation fail as well.
        """
        results = self.validate(value)
        try:
            ValidationException.throw_exception_if_needed(correlation_id, results, strict)
        except ValidationException:
            logger.debug("Validation failed (correlation id: %s) with %i results", correlation_id, len(results))
            raise
