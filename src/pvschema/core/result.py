"""
Contains the result records produced by a validation
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ValidationResultType(str, Enum):
    """
    The severity of a validation result. Only errors (and warnings in strict mode) make a validation fail.
    """

    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"


@dataclass(frozen=True)
class ValidationResult:
    """
    A single diagnostic produced during validation. `path` is the dot-path of the offending value inside the
    validated object ("" for the root), `expected` and `actual` describe the mismatch for programmatic consumers.
    """

    path: Optional[str]
    type: ValidationResultType
    code: str
    message: str
    expected: Any = None
    actual: Any = None

    def __str__(self):
        return f"{self.type.value} {self.code} at '{self.path or ''}': {self.message}"
