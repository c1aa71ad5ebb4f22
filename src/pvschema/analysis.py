"""
Contains functionality to analyze the results of a validation
"""
import itertools
from typing import Iterable, Optional

from .core.result import ValidationResult, ValidationResultType


def _extract_code(validation_result: ValidationResult) -> str:
    return validation_result.code


class ResultAnalysis:
    """
    Wraps the list returned by `Schema.validate` and provides properties for further analysis of the results.
    Note that the values are calculated only if you use them - this saves some CPU time if you are only interested
    in e.g. whether any error occurred.
    """

    def __init__(self, results: Iterable[ValidationResult]):
        self._results: list[ValidationResult] = list(results)

        self._errors: Optional[list[ValidationResult]] = None
        self._warnings: Optional[list[ValidationResult]] = None
        self._informations: Optional[list[ValidationResult]] = None
        self._num_errors_per_code: Optional[dict[str, int]] = None
        self._num_warnings_per_code: Optional[dict[str, int]] = None

    def _determine_types(self):
        """Groups the results by their type"""
        self._errors = []
        self._warnings = []
        self._informations = []
        for result in self._results:
            if result.type == ValidationResultType.ERROR:
                self._errors.append(result)
            elif result.type == ValidationResultType.WARNING:
                self._warnings.append(result)
            else:
                self._informations.append(result)

    @property
    def results(self) -> list[ValidationResult]:
        """All results in the order they were produced"""
        return self._results

    @property
    def errors(self) -> list[ValidationResult]:
        """All results of type ERROR"""
        if self._errors is None:
            self._determine_types()
            assert self._errors is not None
        return self._errors

    @property
    def warnings(self) -> list[ValidationResult]:
        """All results of type WARNING"""
        if self._warnings is None:
            self._determine_types()
            assert self._warnings is not None
        return self._warnings

    @property
    def informations(self) -> list[ValidationResult]:
        """All results of type INFORMATION"""
        if self._informations is None:
            self._determine_types()
            assert self._informations is not None
        return self._informations

    @property
    def num_errors(self) -> int:
        return len(self.errors)

    @property
    def num_warnings(self) -> int:
        return len(self.warnings)

    @property
    def num_errors_per_code(self) -> dict[str, int]:
        """
        This is a dictionary which maps the result code to the number of times it occurred as an error.
        """
        if self._num_errors_per_code is None:
            self._num_errors_per_code = {
                key: sum(1 for _ in values_iter)
                for key, values_iter in itertools.groupby(sorted(self.errors, key=_extract_code), key=_extract_code)
            }
        return self._num_errors_per_code

    @property
    def num_warnings_per_code(self) -> dict[str, int]:
        """
        This is a dictionary which maps the result code to the number of times it occurred as a warning.
        """
        if self._num_warnings_per_code is None:
            self._num_warnings_per_code = {
                key: sum(1 for _ in values_iter)
                for key, values_iter in itertools.groupby(sorted(self.warnings, key=_extract_code), key=_extract_code)
            }
        return self._num_warnings_per_code

    def has_errors(self, strict: bool = False) -> bool:
        """
        True if any error occurred. In strict mode warnings count as errors, too. Informations never do.
        """
        return self.num_errors > 0 or (strict and self.num_warnings > 0)
