"""
Contains the core records of the validation framework: the validation results and the comparison helper.
The `ValidationException` lives in `pvschema.core.exception`.
"""
from .comparator import compare
from .result import ValidationResult, ValidationResultType
