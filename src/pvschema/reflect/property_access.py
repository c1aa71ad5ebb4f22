"""
Contains a uniform way to access the properties of arbitrary object structures. Mappings are accessed by their
keys, sequences by their (stringified) indices and any other object by its public attributes and properties.
Names are always matched case-insensitive.
"""
import logging
from collections import UserDict, UserList, UserString
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from functools import cached_property
from typing import Any, Iterator, Optional

from pvschema.types import ValueKind, classify

logger = logging.getLogger(__name__)


def get_value(obj: Any) -> Any:
    """
    Unwraps the containers of the `collections` module (`UserString`, `UserList` and `UserDict`). Any other value is
    returned as is.
    """
    if isinstance(obj, (UserString, UserList, UserDict)):
        return obj.data
    return obj


def to_ordinal(name: Any) -> Optional[int]:
    """
    Parses a property name as index of a sequence. Returns `None` if the name is not a (non negative) integer.
    """
    try:
        index = int(name)
    except (TypeError, ValueError):
        return None
    return index if index >= 0 else None


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_readable_property(attr: Any) -> bool:
    if isinstance(attr, cached_property):
        return True
    return (
        isinstance(attr, property) and attr.fget is not None and not getattr(attr.fget, "__isabstractmethod__", False)
    )


def _iter_attribute_names(obj: Any) -> Iterator[str]:
    """
    Yields the public instance attributes (from `__dict__` and `__slots__`) and the readable properties of `obj`.
    Methods and class attributes are no properties.
    """
    seen: set[str] = set()
    for name in getattr(obj, "__dict__", {}):
        if _is_public(name) and name not in seen:
            seen.add(name)
            yield name
    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if _is_public(name) and name not in seen and hasattr(obj, name):
                seen.add(name)
                yield name
        for name, attr in cls.__dict__.items():
            if _is_public(name) and name not in seen and _is_readable_property(attr):
                seen.add(name)
                yield name


def _find_attribute_name(obj: Any, name: str) -> Optional[str]:
    lowered_name = name.lower()
    for attribute_name in _iter_attribute_names(obj):
        if attribute_name.lower() == lowered_name:
            return attribute_name
    return None


def _find_key(obj: Mapping, name: str) -> tuple[bool, Any]:
    """Returns whether the key was found and the actual key in `obj`"""
    if name in obj:
        return True, name
    lowered_name = name.lower()
    for key in obj:
        if str(key).lower() == lowered_name:
            return True, key
    return False, None


def _get_element(obj: Any, index: int) -> Any:
    if isinstance(obj, Sequence):
        return obj[index] if index < len(obj) else None
    # sets
    for element_index, element in enumerate(obj):
        if element_index == index:
            return element
    return None


def has_property(obj: Any, name: Optional[str]) -> bool:
    """
    Checks if `obj` has a property with the given name. Returns False if `obj` or `name` is None.
    """
    if obj is None or name is None:
        return False
    obj = get_value(obj)
    kind = classify(obj)
    if kind == ValueKind.KEYED:
        return _find_key(obj, name)[0]
    if kind == ValueKind.SEQUENCE:
        index = to_ordinal(name)
        return index is not None and index < len(obj)
    if kind == ValueKind.STRUCTURED:
        return _find_attribute_name(obj, name) is not None
    return False


def get_property(obj: Any, name: Optional[str]) -> Any:
    """
    Returns the value of the property with the given name. Returns None if `obj` or `name` is None, if the
    property does not exist or if its getter raises.
    """
    if obj is None or name is None:
        return None
    obj = get_value(obj)
    kind = classify(obj)
    if kind == ValueKind.KEYED:
        found, key = _find_key(obj, name)
        return obj[key] if found else None
    if kind == ValueKind.SEQUENCE:
        index = to_ordinal(name)
        return None if index is None else _get_element(obj, index)
    if kind == ValueKind.STRUCTURED:
        attribute_name = _find_attribute_name(obj, name)
        if attribute_name is None:
            return None
        try:
            return getattr(obj, attribute_name)
        except Exception as error:  # pylint: disable=broad-exception-caught
            logger.debug("Can't read property '%s' of %s: %r", attribute_name, type(obj).__name__, error)
            return None
    return None


def get_property_names(obj: Any) -> list[str]:
    """
    Returns the names of all properties of `obj`. For sequences these are the stringified indices.
    """
    if obj is None:
        raise ValueError("Object cannot be None")
    obj = get_value(obj)
    kind = classify(obj)
    if kind == ValueKind.KEYED:
        return [str(key) for key in obj]
    if kind == ValueKind.SEQUENCE:
        return [str(index) for index in range(len(obj))]
    if kind == ValueKind.STRUCTURED:
        return list(_iter_attribute_names(obj))
    return []


def get_properties(obj: Any) -> dict[str, Any]:
    """
    Returns all properties of `obj` as a dictionary mapping the property names to their values.
    Properties whose getter raises are left out.
    """
    if obj is None:
        raise ValueError("Object cannot be None")
    obj = get_value(obj)
    kind = classify(obj)
    if kind == ValueKind.KEYED:
        return {str(key): value for key, value in obj.items()}
    if kind == ValueKind.SEQUENCE:
        return {str(index): value for index, value in enumerate(obj)}
    if kind == ValueKind.STRUCTURED:
        properties: dict[str, Any] = {}
        for attribute_name in _iter_attribute_names(obj):
            try:
                properties[attribute_name] = getattr(obj, attribute_name)
            except Exception as error:  # pylint: disable=broad-exception-caught
                logger.debug("Can't read property '%s' of %s: %r", attribute_name, type(obj).__name__, error)
        return properties
    return {}


def _set_element(obj: Any, name: str, value: Any):
    index = to_ordinal(name)
    if not isinstance(obj, MutableSequence) or index is None:
        logger.debug("Can't set '%s' on sequence of type %s", name, type(obj).__name__)
        return
    if index < len(obj):
        obj[index] = value
    else:
        obj.extend([None] * (index - len(obj)))
        obj.append(value)


def _set_attribute(obj: Any, name: str, value: Any):
    attribute_name = _find_attribute_name(obj, name)
    if attribute_name is None:
        logger.debug("%s has no property '%s'", type(obj).__name__, name)
        return
    try:
        setattr(obj, attribute_name, value)
    except AttributeError:
        logger.debug("Property '%s' of %s is read-only", attribute_name, type(obj).__name__)


def set_property(obj: Any, name: Optional[str], value: Any):
    """
    Sets the property with the given name. Mappings get the key added if it doesn't exist yet, lists are padded
    with None if the index is out of range. Properties which can't be written are skipped.
    """
    if obj is None:
        raise ValueError("Object cannot be None")
    if name is None:
        raise ValueError("Property name cannot be None")
    obj = get_value(obj)
    kind = classify(obj)
    if kind == ValueKind.KEYED:
        if not isinstance(obj, MutableMapping):
            logger.debug("Can't set '%s' on immutable mapping of type %s", name, type(obj).__name__)
            return
        found, key = _find_key(obj, name)
        obj[key if found else name] = value
    elif kind == ValueKind.SEQUENCE:
        _set_element(obj, name, value)
    elif kind == ValueKind.STRUCTURED:
        _set_attribute(obj, name, value)
    else:
        logger.debug("Can't set '%s' on scalar of type %s", name, type(obj).__name__)


def set_properties(obj: Any, values: Optional[Mapping[str, Any]]):
    """
    Sets all given properties. See `set_property`.
    """
    if not values:
        return
    for name, value in values.items():
        set_property(obj, name, value)
