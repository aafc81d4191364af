"""Structure-preserving transforms for TreeWalker.

map_tree() and filter_tree() rebuild a tree node by node. For each node
the child fields reported by the WalkSpec are left out of a field-by-field
copy, then the (recursively processed) children are reattached at the
same dotted paths. The caller's nodes are never mutated by the library.
"""

from collections.abc import Mapping
from numbers import Number
from typing import Any, Callable, Optional

from .paths import _MISSING, copy_excluding, get_field, is_group, set_path
from .walker import WalkSpec


Transform = Callable[[Any], Any]
Predicate = Callable[[Any], Any]


def map_tree(walk_spec: WalkSpec,
             node: Any,
             transform: Transform,
             literal_arrays: bool = False) -> Any:
    """Apply ``transform`` to every node and rebuild the tree.

    ``transform`` is called exactly once per node with a copy that lacks
    the node's child fields. Children are mapped independently and
    reattached to whatever the transform returned, keeping group order.

    Args:
        walk_spec: WalkSpec describing the tree shape
        node: Root of the (sub)tree
        transform: Function(copy) -> new node
        literal_arrays: See copy_excluding()

    Returns:
        The transformed root
    """
    steps = walk_spec.steps(node)
    result = transform(_copy_node(node, [key for key, _ in steps], literal_arrays))

    for key, child in steps:
        if child is None:
            kid = None
        elif is_group(child):
            kid = [map_tree(walk_spec, item, transform, literal_arrays) for item in child]
        else:
            kid = map_tree(walk_spec, child, transform, literal_arrays)
        set_path(result, key, kid)

    return result


def filter_tree(walk_spec: WalkSpec,
                node: Any,
                predicate: Predicate,
                literal_arrays: bool = False) -> Optional[Any]:
    """Prune every subtree whose root fails ``predicate``.

    Keep/drop is decided per child by filtering it recursively, but a kept
    child is attached as the original child, not as its filtered copy.
    A failing single child is replaced by None; failing group members are
    dropped from a new list.

    Args:
        walk_spec: WalkSpec describing the tree shape
        node: Root of the (sub)tree
        predicate: Function(node) -> truthy to keep
        literal_arrays: See copy_excluding()

    Returns:
        Copy of the root with filtered children, or None if the root fails
    """
    if not predicate(node):
        return None

    steps = walk_spec.steps(node)
    copy = _copy_node(node, [key for key, _ in steps], literal_arrays)

    for key, child in steps:
        kid = None
        if is_group(child):
            kid = [
                item for item in child
                if filter_tree(walk_spec, item, predicate, literal_arrays) is not None
            ]
        elif child is not None and filter_tree(walk_spec, child, predicate, literal_arrays) is not None:
            kid = child
        set_path(copy, key, kid)

    return copy


def strictly_equal(value: Any, expected: Any) -> bool:
    """Compare two field values without structural equality.

    Strings and bytes compare by value within their own type, numbers by
    value (bool only equals itself) and everything else, containers
    included, by identity.
    """
    if value is expected:
        return True
    if isinstance(value, bool) or isinstance(expected, bool):
        return False
    if isinstance(value, Number) and isinstance(expected, Number):
        return value == expected
    for scalar in (str, bytes):
        if isinstance(value, scalar) and isinstance(expected, scalar):
            return value == expected
    return False


def match_filter(match: Mapping) -> Predicate:
    """Build a predicate that checks every item of ``match`` on a node.

    Each field is compared with strictly_equal(), so ``[1]`` never matches
    a different list and ``True`` never matches ``1``. A missing field
    never matches. An empty match spec matches everything.
    """
    items = list(match.items())

    def matches(node: Any) -> bool:
        for key, expected in items:
            value = get_field(node, key, _MISSING)
            if value is _MISSING or not strictly_equal(value, expected):
                return False
        return True

    return matches


def where_tree(walk_spec: WalkSpec,
               node: Any,
               match: Mapping,
               literal_arrays: bool = False) -> Optional[Any]:
    """Filter a tree down to the nodes whose fields equal ``match``."""
    return filter_tree(walk_spec, node, match_filter(match), literal_arrays)


def _copy_node(node: Any, child_keys, literal_arrays: bool) -> Any:
    if isinstance(node, Mapping):
        return copy_excluding(node, child_keys, literal_arrays)
    # Plain objects are copied through their attribute dict
    return copy_excluding(vars(node), child_keys, literal_arrays)
