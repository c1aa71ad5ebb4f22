"""
Contains some useful utility functions to query and modify arbitrary object structures by dot-paths.
"""
from .query_object import (
    MAX_TRAVERSAL_DEPTH,
    copy_properties,
    get_path,
    get_path_names,
    get_path_properties,
    has_path,
    optional_field,
    required_field,
    set_path,
    set_path_properties,
)
