"""
Contains predefined schemas for the common query parameters paging, filtering, sorting and projection.
"""
from pvschema.convert import TypeCode

from .array_schema import ArraySchema
from .map_schema import MapSchema
from .object_schema import ObjectSchema


class PagingParamsSchema(ObjectSchema):
    """Paging parameters: `skip` and `take` are integers, `total` is a flag"""

    def __init__(self):
        super().__init__()
        self.with_optional_property("skip", int)
        self.with_optional_property("take", int)
        self.with_optional_property("total", TypeCode.BOOLEAN)


class FilterParamsSchema(MapSchema):
    """Filter parameters: a map with string keys and values of any type"""

    def __init__(self):
        super().__init__(TypeCode.STRING, None)


class SortFieldSchema(ObjectSchema):
    """A single sort field: the `name` of the field and whether to sort `ascending`"""

    def __init__(self):
        super().__init__()
        self.with_optional_property("name", TypeCode.STRING)
        self.with_optional_property("ascending", TypeCode.BOOLEAN)


class SortParamsSchema(ArraySchema):
    """Sort parameters: a list of sort fields"""

    def __init__(self):
        super().__init__(SortFieldSchema())


class ProjectionParamsSchema(ArraySchema):
    """Projection parameters: a list of field names"""

    def __init__(self):
        super().__init__(TypeCode.STRING)
