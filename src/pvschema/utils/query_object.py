"""
Contains functions to query and modify arbitrary object structures using dot-paths like "customer.addresses.0.city".
Every segment of a path is resolved by the property access of `pvschema.reflect`, i.e. mapping keys and attribute
names are matched case-insensitive and sequence elements are addressed by their index.
"""
import logging
from typing import Any, Mapping, Optional, TypeVar, overload

from typeguard import CollectionCheckStrategy, TypeCheckError, check_type

from pvschema.convert import TypeCode, to_type_code
from pvschema.reflect.property_access import get_properties, get_property, has_property, set_property, to_ordinal

logger = logging.getLogger(__name__)

MAX_TRAVERSAL_DEPTH = 100
"""
The maximum number of nested containers which are traversed when an object structure gets flattened.
Deeper branches are returned as they are.
"""

AttrT = TypeVar("AttrT")

_CONTAINER_CODES = (TypeCode.ARRAY, TypeCode.MAP, TypeCode.OBJECT)


def _split_path(path: Optional[str]) -> Optional[list[str]]:
    if path is None or path == "":
        return None
    return path.split(".")


def has_path(obj: Any, path: Optional[str]) -> bool:
    """
    Checks if the property addressed by `path` exists. Returns False as soon as a segment can't be resolved.
    """
    names = _split_path(path)
    if obj is None or names is None:
        return False
    current_obj = obj
    for name in names[:-1]:
        current_obj = get_property(current_obj, name)
        if current_obj is None:
            return False
    return has_property(current_obj, names[-1])


def get_path(obj: Any, path: Optional[str]) -> Any:
    """
    Returns the value addressed by `path` or None as soon as a segment can't be resolved.
    """
    names = _split_path(path)
    if obj is None or names is None:
        return None
    current_obj = obj
    for name in names:
        current_obj = get_property(current_obj, name)
        if current_obj is None:
            return None
    return current_obj


def _is_leaf(value: Any) -> bool:
    return to_type_code(value) not in _CONTAINER_CODES


def _flatten(obj: Any, path: Optional[str], result: dict[str, Any], ancestors: set[int]):
    """
    Adds all leaves below `obj` to `result`. `ancestors` holds the ids of the containers currently being
    traversed. A value which is one of its own ancestors is skipped.
    """
    properties = get_properties(obj)
    if len(properties) == 0 or len(ancestors) >= MAX_TRAVERSAL_DEPTH:
        if len(properties) > 0:
            logger.debug("Reached the maximum traversal depth of %i at '%s'", MAX_TRAVERSAL_DEPTH, path)
        if path is not None:
            result[path] = obj
        return

    ancestors.add(id(obj))
    try:
        for name, value in properties.items():
            if id(value) in ancestors:
                continue
            key = name if path is None else f"{path}.{name}"
            if _is_leaf(value):
                result[key] = value
            else:
                _flatten(value, key, result, ancestors)
    finally:
        ancestors.discard(id(obj))


def get_path_properties(obj: Any) -> dict[str, Any]:
    """
    Flattens the object structure into a dictionary which maps the dot-path of every leaf to its value.
    Cyclic references are skipped and branches deeper than `MAX_TRAVERSAL_DEPTH` are not traversed any further.
    """
    result: dict[str, Any] = {}
    if obj is None:
        return result
    _flatten(obj, None, result, set())
    return result


def get_path_names(obj: Any) -> list[str]:
    """
    Returns the dot-paths of all leaves of the object structure. See `get_path_properties`.
    """
    return list(get_path_properties(obj))


def _create_container(names: list[str], name_index: int) -> list[Any] | dict[str, Any]:
    # an index as next segment needs a list, anything else a dictionary
    if to_ordinal(names[name_index + 1]) is not None:
        return []
    return {}


def _set_path(obj: Any, names: list[str], name_index: int, value: Any):
    if name_index == len(names) - 1:
        set_property(obj, names[name_index], value)
        return
    sub_obj = get_property(obj, names[name_index])
    if sub_obj is not None:
        _set_path(sub_obj, names, name_index + 1, value)
        return
    sub_obj = _create_container(names, name_index)
    _set_path(sub_obj, names, name_index + 1, value)
    set_property(obj, names[name_index], sub_obj)


def set_path(obj: Any, path: Optional[str], value: Any):
    """
    Sets the value addressed by `path`. Missing containers on the way are created: a list if the following segment
    is an index, a dictionary otherwise.
    """
    names = _split_path(path)
    if obj is None or names is None:
        return
    _set_path(obj, names, 0, value)


def set_path_properties(obj: Any, values: Optional[Mapping[str, Any]]):
    """
    Sets all values of the dictionary which maps dot-paths to values. See `set_path`.
    """
    if not values:
        return
    for path, value in values.items():
        set_path(obj, path, value)


def copy_properties(dest: Any, src: Any):
    """
    Copies all leaves of `src` into `dest` using their dot-paths.
    """
    if dest is None or src is None:
        return
    set_path_properties(dest, get_path_properties(src))


def optional_field(obj: Any, attribute_path: str, attribute_type: type[AttrT]) -> Optional[AttrT]:
    """
    Tries to query the `obj` with the provided `attribute_path`. If it is not existent, `None` will be returned.
    If the attribute is found but the type doesn't match the value, `None` will be returned as well.
    """
    try:
        return required_field(obj, attribute_path, attribute_type)
    except (AttributeError, TypeCheckError):
        return None


@overload
def required_field(
    obj: Any, attribute_path: str, attribute_type: type[AttrT], base_path: Optional[str] = None
) -> AttrT:
    ...


@overload
def required_field(obj: Any, attribute_path: str, attribute_type: Any, base_path: Optional[str] = None) -> Any:
    ...


def required_field(obj: Any, attribute_path: str, attribute_type: Any, base_path: Optional[str] = None) -> Any:
    """
    Tries to query the `obj` with the provided `attribute_path`. If it is not existent,
    an AttributeError will be raised.
    If the attribute is found, the type will be checked and TypeCheckError will be raised if the type doesn't match
    the value.
    """
    current_obj: Any = obj
    splitted_path = attribute_path.split(".")
    for index, attr_name in enumerate(splitted_path):
        if not has_property(current_obj, attr_name):
            current_path = ".".join(splitted_path[0 : index + 1])
            if base_path is not None:
                current_path = f"{base_path}.{current_path}"
            raise AttributeError(f"{current_path}: Not found")
        current_obj = get_property(current_obj, attr_name)
    try:
        check_type(current_obj, attribute_type, collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS)
    except TypeCheckError as error:
        current_path = attribute_path
        if base_path is not None:
            current_path = f"{base_path}.{attribute_path}"
        raise TypeCheckError(f"{current_path}: {error}") from error
    return current_obj
