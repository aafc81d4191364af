"""Dotted key-path access for TreeWalker.

Nodes have no fixed schema, so child fields are addressed by dotted paths
("children", "attrs.left"). Mappings are accessed by item, every other
object by attribute. There is no escaping: a field name containing a dot
cannot be addressed.
"""

from collections.abc import Mapping, MutableMapping
from enum import Enum
from types import ModuleType
from typing import Any, Dict, Iterable, List


_MISSING = object()


def split_path(path: str) -> List[str]:
    """Split a dotted path into its segments."""
    return path.split('.')


def get_field(node: Any, name: str, default: Any = None) -> Any:
    """Read a single field from a node.

    Args:
        node: Mapping or plain object
        name: Field name (no dots)
        default: Returned when the field does not exist

    Returns:
        The field value or default
    """
    if isinstance(node, Mapping):
        return node.get(name, default)
    return getattr(node, name, default)


def set_field(node: Any, name: str, value: Any) -> None:
    """Assign a single field on a node (item for mappings, attribute otherwise)."""
    if isinstance(node, MutableMapping):
        node[name] = value
    else:
        setattr(node, name, value)


def has_path(node: Any, path: str) -> bool:
    """Check whether every segment of a dotted path is present.

    ``a.b.c`` is present only if ``node.a``, ``node.a.b`` and
    ``node.a.b.c`` are all present. A segment is present when it is
    truthy or an empty container (list, tuple or mapping); None, 0, ''
    and a missing segment are absent.

    Args:
        node: Node to inspect
        path: Dotted field path

    Returns:
        True if the path resolves to a present value
    """
    current = node
    for segment in split_path(path):
        current = get_field(current, segment)
        if not current and not is_container(current):
            return False
    return True


def get_path(node: Any, path: str) -> Any:
    """Resolve a dotted path without an existence check.

    A missing segment yields None; callers that care about absence
    should guard with has_path() first.
    """
    current = node
    for segment in split_path(path):
        if current is None:
            return None
        current = get_field(current, segment)
    return current


def set_path(node: Any, path: str, value: Any) -> None:
    """Assign the last segment of a dotted path.

    The intermediate segments must already exist (normally created by
    copy_excluding()); a missing one raises KeyError or AttributeError.
    """
    segments = split_path(path)
    target = node
    for segment in segments[:-1]:
        if isinstance(target, Mapping):
            target = target[segment]
        else:
            target = getattr(target, segment)
    set_field(target, segments[-1], value)


def is_group(value: Any) -> bool:
    """Check whether a value is a child group (ordered sequence of nodes)."""
    return isinstance(value, (list, tuple))


def is_container(value: Any) -> bool:
    """Check whether a value is a group or a mapping."""
    return is_group(value) or isinstance(value, Mapping)


def is_record(value: Any) -> bool:
    """Check whether a value is a plain attribute-bearing object.

    Records are copied field by field through ``vars()``. Classes,
    modules, callables and enum members are treated as opaque values.
    """
    if isinstance(value, (type, ModuleType, Enum)) or callable(value):
        return False
    return hasattr(value, '__dict__')


def copy_excluding(record: Mapping,
                   excluded: Iterable[str],
                   literal_arrays: bool = False) -> Dict[Any, Any]:
    """Copy a record field by field, leaving out excluded dotted paths.

    Nested mappings and records (see is_record()) are copied recursively
    with the excluded paths that start with ``field + "."`` shifted by
    that prefix, so a child declared as ``attrs.left`` is removed from the
    copied ``attrs`` while the rest of ``attrs`` survives. Records come
    out as plain dicts.

    Args:
        record: Mapping to copy
        excluded: Dotted paths of child fields to drop
        literal_arrays: Copy non-child arrays as index-keyed mappings
            instead of lists

    Returns:
        A new dict sharing no mapping, record or list with the input
    """
    excluded = list(excluded)
    copy: Dict[Any, Any] = {}

    for key, value in record.items():
        if isinstance(key, str) and key in excluded:
            continue
        copy[key] = _copy_value(key, value, excluded, literal_arrays)

    return copy


def _copy_value(key: Any, value: Any, excluded: List[str], literal_arrays: bool) -> Any:
    if isinstance(value, Mapping):
        return copy_excluding(value, _shift(key, excluded), literal_arrays)

    if is_record(value):
        return copy_excluding(vars(value), _shift(key, excluded), literal_arrays)

    if is_group(value):
        nested = _shift(key, excluded)
        if literal_arrays:
            return copy_excluding(
                {str(index): item for index, item in enumerate(value)},
                nested,
                literal_arrays
            )
        return [
            _copy_value(str(index), item, nested, literal_arrays)
            for index, item in enumerate(value)
        ]

    return value


def _shift(key: Any, excluded: List[str]) -> List[str]:
    """Keep the excluded paths below ``key`` with the ``key.`` prefix removed."""
    if not excluded or not isinstance(key, str):
        return []
    head = key + '.'
    return [path[len(head):] for path in excluded if path.startswith(head)]
