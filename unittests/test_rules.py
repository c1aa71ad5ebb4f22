from example_objects import ExampleObject, Period

from pvschema import (
    AndRule,
    AtLeastOneExistsRule,
    ExcludedRule,
    IncludedRule,
    NotRule,
    ObjectSchema,
    OnlyOneExistsRule,
    OrRule,
    PropertiesComparisonRule,
    Schema,
    ValidationResultType,
    ValueComparisonRule,
)


class TestValueComparisonRule:
    def test_equal_comparison(self):
        schema = Schema().with_rule(ValueComparisonRule("EQ", 123))
        assert len(schema.validate(123)) == 0

        results = schema.validate(432)
        assert len(results) == 1
        assert results[0].code == "BAD_VALUE"
        assert results[0].type == ValidationResultType.ERROR
        assert results[0].expected == "EQ 123"
        assert results[0].actual == 432

        schema = Schema().with_rule(ValueComparisonRule("EQ", "ABC"))
        assert len(schema.validate("ABC")) == 0

    def test_not_equal_comparison(self):
        schema = Schema().with_rule(ValueComparisonRule("NE", 123))
        assert len(schema.validate(123)) == 1
        assert len(schema.validate(432)) == 0

    def test_less_comparison(self):
        schema = Schema().with_rule(ValueComparisonRule("LE", 123))
        assert len(schema.validate(123)) == 0
        assert len(schema.validate(432)) == 1

        schema = Schema().with_rule(ValueComparisonRule("LT", 123))
        assert len(schema.validate(123)) == 1

    def test_more_comparison(self):
        schema = Schema().with_rule(ValueComparisonRule("GE", 123))
        assert len(schema.validate(123)) == 0
        assert len(schema.validate(432)) == 0

        schema = Schema().with_rule(ValueComparisonRule("GT", 123))
        assert len(schema.validate(123)) == 1

    def test_match_comparison(self):
        schema = Schema().with_rule(ValueComparisonRule("LIKE", "A.*"))
        assert len(schema.validate("ABC")) == 0
        assert len(schema.validate("XYZ")) == 1

    def test_rules_are_not_applied_to_none(self):
        schema = Schema().with_rule(ValueComparisonRule("EQ", 123))
        assert len(schema.validate(None)) == 0


class TestInclusionRules:
    def test_included_rule(self):
        schema = Schema().with_rule(IncludedRule("AAA", "BBB", "CCC", None))
        assert len(schema.validate("AAA")) == 0

        results = schema.validate("ABC")
        assert len(results) == 1
        assert results[0].code == "VALUE_NOT_INCLUDED"

    def test_excluded_rule(self):
        schema = Schema().with_rule(ExcludedRule("AAA", "BBB", "CCC", None))

        results = schema.validate("AAA")
        assert len(results) == 1
        assert results[0].code == "VALUE_INCLUDED"

        assert len(schema.validate("ABC")) == 0


class TestLogicalRules:
    def test_or_rule(self):
        schema = Schema().with_rule(OrRule(ValueComparisonRule("=", 1), ValueComparisonRule("=", 2)))
        assert len(schema.validate(-100)) == 2
        assert len(schema.validate(1)) == 0
        assert len(schema.validate(2)) == 0
        assert len(schema.validate(200)) == 2

    def test_or_rule_range(self):
        schema = Schema().with_rule(OrRule(ValueComparisonRule("<", 1), ValueComparisonRule(">", 10)))
        assert len(schema.validate(5)) >= 1
        assert len(schema.validate(0)) == 0
        assert len(schema.validate(20)) == 0

    def test_and_rule(self):
        schema = Schema().with_rule(AndRule(ValueComparisonRule(">", 0), ValueComparisonRule("<", 200)))
        assert len(schema.validate(-100)) == 1
        assert len(schema.validate(100)) == 0
        assert len(schema.validate(200)) == 1

    def test_and_rule_range(self):
        schema = Schema().with_rule(AndRule(ValueComparisonRule(">=", 1), ValueComparisonRule("<=", 10)))
        assert len(schema.validate(0)) >= 1
        assert len(schema.validate(5)) == 0
        assert len(schema.validate(20)) >= 1

    def test_empty_logical_rules(self):
        schema = Schema().with_rule(AndRule()).with_rule(OrRule()).with_rule(NotRule(None))
        assert len(schema.validate(1)) == 0

    def test_not_rule(self):
        schema = Schema().with_rule(NotRule(ValueComparisonRule("=", 1)))

        results = schema.validate(1)
        assert len(results) == 1
        assert results[0].code == "NOT_FAILED"
        assert len(schema.validate(2)) == 0

    def test_nested_not_rule(self):
        # valid are all values except 5, 6 and 7
        schema = Schema().with_rule(
            OrRule(
                NotRule(AndRule(ValueComparisonRule(">=", 5), ValueComparisonRule("<=", 7))),
                AndRule(NotRule(IncludedRule(5, 6, 7))),
            )
        )
        assert len(schema.validate(4)) == 0
        assert len(schema.validate(8)) == 0
        assert len(schema.validate(6)) == 2
        assert all(result.code == "NOT_FAILED" for result in schema.validate(6))


class TestPropertiesComparisonRule:
    def test_properties_comparison(self):
        obj = ExampleObject()
        schema = Schema().with_rule(PropertiesComparisonRule("string_property", "EQ", "null_property"))

        obj.string_property = "ABC"
        obj.null_property = "ABC"
        assert len(schema.validate(obj)) == 0

        obj.null_property = "XYZ"
        results = schema.validate(obj)
        assert len(results) == 1
        assert results[0].code == "PROPERTIES_NOT_MATCH"
        assert results[0].expected == "XYZ"
        assert results[0].actual == "ABC"

    def test_compare_dataclass_properties(self):
        schema = ObjectSchema(allow_undefined=True).with_rule(PropertiesComparisonRule("START", "<", "end"))

        assert len(schema.validate(Period(start=1, end=2))) == 0
        assert len(schema.validate({"start": 3, "end": 2})) == 1


class TestExistenceRules:
    def test_at_least_one_exists_rule(self):
        obj = ExampleObject()

        schema = Schema().with_rule(AtLeastOneExistsRule("missing_property", "string_property", "null_property"))
        assert len(schema.validate(obj)) == 0

        schema = Schema().with_rule(AtLeastOneExistsRule("string_property", "null_property", "int_field"))
        assert len(schema.validate(obj)) == 0

        schema = Schema().with_rule(AtLeastOneExistsRule("missing_property", "null_property"))
        results = schema.validate(obj)
        assert len(results) == 1
        assert results[0].code == "VALUE_NULL"

    def test_only_one_exists_rule(self):
        obj = ExampleObject()

        schema = Schema().with_rule(OnlyOneExistsRule("missing_property", "string_property", "null_property"))
        assert len(schema.validate(obj)) == 0

        schema = Schema().with_rule(OnlyOneExistsRule("string_property", "null_property", "int_field"))
        results = schema.validate(obj)
        assert len(results) == 1
        assert results[0].code == "VALUE_ONLY_ONE"
        assert results[0].actual == ["string_property", "int_field"]

        schema = Schema().with_rule(OnlyOneExistsRule("missing_property", "null_property"))
        results = schema.validate(obj)
        assert len(results) == 1
        assert results[0].code == "VALUE_NULL"


class TestInclusionOfBooleans:
    def test_booleans_are_no_numbers(self):
        assert len(Schema().with_rule(IncludedRule(1, 2)).validate(True)) == 1
        assert len(Schema().with_rule(IncludedRule(True)).validate(1)) == 1
        assert len(Schema().with_rule(IncludedRule(True, 1)).validate(True)) == 0
        assert len(Schema().with_rule(IncludedRule(1, 2)).validate(2)) == 0
        assert len(Schema().with_rule(ExcludedRule(0)).validate(False)) == 0
        assert len(Schema().with_rule(ExcludedRule(False)).validate(False)) == 1
