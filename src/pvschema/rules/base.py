"""
Contains the interface all validation rules implement
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from pvschema.core.result import ValidationResult

if TYPE_CHECKING:
    from pvschema.schemas.schema import Schema


class ValidationRule(ABC):
    """
    A rule checks a (non None) value beyond its plain type. Rules are attached to schemas and may be combined using
    the logical rules `AndRule`, `OrRule` and `NotRule`.
    """

    @abstractmethod
    def validate(self, path: Optional[str], schema: "Schema", value: Any, results: list[ValidationResult]):
        """
        Validates the `value` located at `path` and appends a `ValidationResult` to `results` for every violation.
        """


def value_name(path: Optional[str]) -> str:
    """The name used for the value in result messages"""
    return path or "value"
