"""
Contains example object structures shared by the tests
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from functools import cached_property
from typing import Any, Optional


class ExampleEnumInt(Enum):
    ONE = 1
    TWO = 2


class ExampleEnumString(Enum):
    AAA = "AAA"
    BBB = "BBB"


@dataclass
class ExampleSubObject:
    id: str
    float_field: float = 432.0
    null_property: Any = None


class ExampleObject:
    """
    A plain object with 13 public attributes and one private attribute
    """

    # pylint: disable=too-many-instance-attributes
    def __init__(self):
        self._private_field = 124.0
        self.int_field = 12345
        self.long_field = 2**40
        self.float_field = 547.0
        self.double_field = 0.02
        self.string_property = "ABC"
        self.null_property: Any = None
        self.int_array_property = [1, 2, 3]
        self.string_list_property = ["AAA", "BBB"]
        self.map_property = {"Key1": 111, "Key2": 222}
        self.sub_object_property = ExampleSubObject("1")
        self.sub_array_property: Optional[list[ExampleSubObject]] = [ExampleSubObject("2"), ExampleSubObject("3")]
        self.enum_int_property = ExampleEnumInt.TWO
        self.enum_string_property = ExampleEnumString.BBB


class ExampleNestedClass:
    def __init__(self, int_property: int = 0):
        self.int_property = int_property


class ExampleClass:
    """
    An object with a public field, properties (one of them read-only) and methods
    """

    some_class_attribute = "not a property"

    def __init__(self):
        self._private_field = 123
        self.public_field = "ABC"
        self._public_prop = datetime(1975, 4, 8, tzinfo=timezone.utc)
        self.nested_property: Optional[ExampleNestedClass] = None

    @property
    def public_prop(self) -> datetime:
        return self._public_prop

    @public_prop.setter
    def public_prop(self, value: datetime):
        self._public_prop = value

    @property
    def read_only_prop(self) -> int:
        return 543

    def public_method(self, arg1: int, arg2: int) -> int:
        return arg1 + arg2


class ExampleBrokenObject:
    """
    An object whose property `total` raises on access
    """

    def __init__(self, name: str = "A"):
        self.name = name

    @property
    def total(self) -> int:
        raise ValueError("not computed yet")


class ExampleCachedObject:
    def __init__(self):
        self.calls = 0

    @cached_property
    def cached(self) -> int:
        self.calls += 1
        return 42


class ExampleSlotsClass:
    __slots__ = ("value", "_hidden")

    def __init__(self, value: Any):
        self.value = value
        self._hidden = "hidden"


@dataclass
class PagingParams:
    skip: Optional[int] = None
    take: Optional[int] = None
    total: bool = False


@dataclass
class SortField:
    name: Optional[str] = None
    ascending: bool = True


@dataclass
class Period:
    start: int
    end: int
    tags: list[str] = field(default_factory=list)


def create_example_map() -> dict[str, Any]:
    """
    `{"value1": 123, "value2": {"value21": 111, "value22": 222}, "value3": [444, {"value311": 555}]}`
    """
    return {"value1": 123, "value2": {"value21": 111, "value22": 222}, "value3": [444, {"value311": 555}]}
