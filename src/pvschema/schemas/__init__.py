"""
Contains the schemas to validate objects, arrays, maps and their properties
"""
from .array_schema import ArraySchema
from .map_schema import MapSchema
from .object_schema import ObjectSchema
from .params import (
    FilterParamsSchema,
    PagingParamsSchema,
    ProjectionParamsSchema,
    SortFieldSchema,
    SortParamsSchema,
)
from .property_schema import PropertySchema
from .schema import Schema, join_path
