from example_objects import PagingParams, SortField

from pvschema.schemas import (
    FilterParamsSchema,
    PagingParamsSchema,
    ProjectionParamsSchema,
    SortFieldSchema,
    SortParamsSchema,
)


class TestPagingParamsSchema:
    def test_empty_paging_params(self):
        assert PagingParamsSchema().validate(PagingParams()) == []

    def test_non_empty_paging_params(self):
        assert PagingParamsSchema().validate(PagingParams(skip=1, take=1, total=True)) == []

    def test_paging_params_map(self):
        schema = PagingParamsSchema()

        assert schema.validate({"skip": 10, "take": 100}) == []

        results = schema.validate({"skip": "abc", "total": "yes"})
        assert [(result.path, result.code) for result in results] == [
            ("skip", "TYPE_MISMATCH"),
            ("total", "TYPE_MISMATCH"),
        ]


class TestFilterParamsSchema:
    def test_empty_filter_params(self):
        assert FilterParamsSchema().validate({}) == []

    def test_non_empty_filter_params(self):
        assert FilterParamsSchema().validate({"key": "test", "count": 1}) == []

    def test_filter_params_keys(self):
        results = FilterParamsSchema().validate({1: "test"})

        assert len(results) == 1
        assert results[0].path == "1"


class TestSortParamsSchema:
    def test_sort_field(self):
        assert SortFieldSchema().validate(SortField("name", False)) == []

    def test_sort_params(self):
        schema = SortParamsSchema()

        assert schema.validate([SortField("name"), {"name": "id", "ascending": False}]) == []

        results = schema.validate([{"name": 1}])
        assert len(results) == 1
        assert results[0].path == "0.name"
        assert results[0].code == "TYPE_MISMATCH"


class TestProjectionParamsSchema:
    def test_projection_params(self):
        schema = ProjectionParamsSchema()

        assert schema.validate(["id", "name"]) == []
        assert schema.validate("id")[0].code == "VALUE_ISNOT_ARRAY"
