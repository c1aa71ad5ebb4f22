"""
Contains the uniform property access on arbitrary object structures and the type matching.
"""
from .property_access import (
    get_properties,
    get_property,
    get_property_names,
    get_value,
    has_property,
    set_properties,
    set_property,
)
from .type_matcher import match_enum, match_type, match_type_by_name, match_value, match_value_by_name
