"""
Contains the rules combining other rules
"""
from typing import TYPE_CHECKING, Any, Optional

from pvschema.core.result import ValidationResult, ValidationResultType

from .base import ValidationRule, value_name

if TYPE_CHECKING:
    from pvschema.schemas.schema import Schema


class AndRule(ValidationRule):
    """
    All rules must be satisfied. Every rule is evaluated and all of their results are reported.
    """

    def __init__(self, *rules: ValidationRule):
        self.rules = rules

    def validate(self, path: Optional[str], schema: "Schema", value: Any, results: list[ValidationResult]):
        for rule in self.rules:
            rule.validate(path, schema, value, results)


class OrRule(ValidationRule):
    """
    At least one rule must be satisfied. The rules are evaluated in order until the first one reports nothing.
    If none is satisfied the results of all rules are reported.
    """

    def __init__(self, *rules: ValidationRule):
        self.rules = rules

    def validate(self, path: Optional[str], schema: "Schema", value: Any, results: list[ValidationResult]):
        if len(self.rules) == 0:
            return

        local_results: list[ValidationResult] = []
        for rule in self.rules:
            result_count = len(local_results)
            rule.validate(path, schema, value, local_results)
            if result_count == len(local_results):
                return

        results.extend(local_results)


class NotRule(ValidationRule):
    """
    Inverts the wrapped rule: the value is valid only if the wrapped rule reports at least one result.
    """

    def __init__(self, rule: Optional[ValidationRule]):
        self.rule = rule

    def validate(self, path: Optional[str], schema: "Schema", value: Any, results: list[ValidationResult]):
        if self.rule is None:
            return

        local_results: list[ValidationResult] = []
        self.rule.validate(path, schema, value, local_results)
        if len(local_results) > 0:
            return

        results.append(
            ValidationResult(
                path,
                ValidationResultType.ERROR,
                "NOT_FAILED",
                f"Negative check for {value_name(path)} failed",
            )
        )
