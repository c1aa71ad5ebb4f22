"""
This package enables you to describe the structure of your data with declarative schemas and to validate arbitrary
object structures (dictionaries, lists, dataclasses or any other objects) against them.
Every finding is reported as a `ValidationResult` annotated with the dot-path of the offending value.
"""

from .analysis import ResultAnalysis
from .convert import TypeCode
from .core.exception import ValidationException
from .core.result import ValidationResult, ValidationResultType
from .rules import (
    AndRule,
    AtLeastOneExistsRule,
    ExcludedRule,
    IncludedRule,
    NotRule,
    OnlyOneExistsRule,
    OrRule,
    PropertiesComparisonRule,
    ValidationRule,
    ValueComparisonRule,
)
from .schemas import ArraySchema, MapSchema, ObjectSchema, PropertySchema, Schema
from .types import AliasType, CodeType, RuntimeType, SchemaType, TypeSpec, ValueKind
