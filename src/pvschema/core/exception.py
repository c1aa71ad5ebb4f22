"""
Contains the exception raised if a validation failed
"""
from typing import Optional, Sequence

from pvschema.analysis import ResultAnalysis
from pvschema.errors import BadRequestError

from .result import ValidationResult, ValidationResultType


class ValidationException(BadRequestError):
    """
    Raised by `Schema.validate_and_throw_exception` if the validated value contains errors.
    The complete list of results is attached as detail "results" (and as attribute `results`).
    """

    def __init__(self, correlation_id: Optional[str], results: Optional[Sequence[ValidationResult]] = None):
        super().__init__(correlation_id, "INVALID_DATA", self.compose_message(results))
        self.results: list[ValidationResult] = list(results or [])
        self.with_details("results", self.results)

    @staticmethod
    def compose_message(results: Optional[Sequence[ValidationResult]]) -> str:
        """
        Composes a human readable message out of all results except informations.
        """
        messages = [result.message for result in results or [] if result.type != ValidationResultType.INFORMATION]
        if len(messages) == 0:
            return "Validation failed"
        return "Validation failed, " + ", ".join(messages)

    @classmethod
    def throw_exception_if_needed(
        cls, correlation_id: Optional[str], results: Sequence[ValidationResult], strict: bool = False
    ):
        """
        Raises a ValidationException if `results` contain any error. If `strict` is True warnings are treated as
        errors.
        """
        if ResultAnalysis(results).has_errors(strict):
            raise cls(correlation_id, results)
