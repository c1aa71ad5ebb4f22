"""
Contains the validation rules which can be attached to schemas
"""
from .base import ValidationRule
from .comparison import PropertiesComparisonRule, ValueComparisonRule
from .existence import AtLeastOneExistsRule, OnlyOneExistsRule
from .inclusion import ExcludedRule, IncludedRule
from .logical import AndRule, NotRule, OrRule
