"""
Contains the types used in the validation framework
"""
import types
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeAlias, Union, get_origin

from .convert import SCALAR_TYPES, TypeCode, is_sequence_type

if TYPE_CHECKING:
    from .schemas.schema import Schema


class ValueKind(Enum):
    """
    The structural kind of a runtime value. Property access and traversal dispatch on this classification.
    """

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    KEYED = "keyed"
    STRUCTURED = "structured"


def classify(value: Any) -> ValueKind:
    """
    Resolves the kind of the value. Text, numbers, dates and enum members are scalars, every `Mapping` is keyed,
    every other native collection is a sequence and anything else is a structured object.
    """
    if value is None or isinstance(value, SCALAR_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, Mapping):
        return ValueKind.KEYED
    if is_sequence_type(type(value)):
        return ValueKind.SEQUENCE
    return ValueKind.STRUCTURED


@dataclass(frozen=True)
class SchemaType:
    """The expected type is described by a nested schema which validates the value structurally."""

    schema: "Schema"

    def __str__(self):
        return type(self.schema).__name__


@dataclass(frozen=True)
class RuntimeType:
    """The expected type is a class or a typing annotation like `list[str]`."""

    type: Any

    def __str__(self):
        if isinstance(self.type, type):
            return self.type.__name__
        return repr(self.type)


@dataclass(frozen=True)
class AliasType:
    """The expected type is a symbolic name like "integer", "map" or "string[]". Names are case-insensitive."""

    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class CodeType:
    """The expected type is a coarse type classification."""

    code: TypeCode

    def __str__(self):
        return str(self.code)


TypeSpec: TypeAlias = SchemaType | RuntimeType | AliasType | CodeType
RawTypeSpec: TypeAlias = Union[TypeSpec, "Schema", str, TypeCode, type, None]


def _is_annotation(raw: Any) -> bool:
    return raw is Any or get_origin(raw) is not None or isinstance(raw, types.UnionType)


def to_type_spec(raw: RawTypeSpec) -> TypeSpec | None:
    """
    Converts the `raw` type description given by the user into one of the `TypeSpec` variants.
    `None` stays `None` (= no type check). Unrecognized descriptions raise a TypeError.
    """
    # pylint: disable=import-outside-toplevel
    from .schemas.schema import Schema

    if raw is None:
        return None
    if isinstance(raw, (SchemaType, RuntimeType, AliasType, CodeType)):
        return raw
    if isinstance(raw, Schema):
        return SchemaType(raw)
    if isinstance(raw, str):
        return AliasType(raw)
    if isinstance(raw, TypeCode):
        return CodeType(raw)
    if isinstance(raw, type) or _is_annotation(raw):
        return RuntimeType(raw)
    raise TypeError(f"{raw!r} is not a valid type description")
