"""High-level consumer API for TreeWalker.

This module provides simple, functional interfaces over any traverser:
the same for_each/find/reduce/parent/siblings logic runs depth-first or
breadth-first depending on the traverser passed in.

Callbacks receive ``(value, parent, tree)`` (reduce: ``(acc, value,
parent, tree)``), trimmed to as many positional arguments as the callback
accepts, so ``lambda node: ...`` works too.
"""

import inspect
from collections.abc import Mapping
from typing import Any, Callable, Iterator, NamedTuple, Optional, List

from .core.traverser import TreeTraverser
from .core.transform import match_filter
from .core.walker import first_group_containing


_NO_SEED = object()


class Siblings(NamedTuple):
    """The other members of a node's child group, split at its position."""
    left: List[Any]
    right: List[Any]


def adapt_callback(fn: Callable[..., Any], max_args: int) -> Callable[..., Any]:
    """Wrap ``fn`` so it receives only the positional args it can accept.

    Args:
        fn: User callback
        max_args: Number of positional arguments the caller will pass

    Returns:
        fn itself when it accepts them all, else a trimming wrapper
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures get everything
        return fn

    accepted = 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return fn
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            accepted += 1

    if accepted >= max_args:
        return fn

    def trimmed(*args: Any) -> Any:
        return fn(*args[:accepted])

    return trimmed


def for_each(
    tree: Any,
    traverser: TreeTraverser,
    fn: Callable[..., Any],
    adapt: bool = True
) -> None:
    """Call ``fn(value, parent, tree)`` for every node in traversal order.

    Example:
        >>> for_each(tree, DepthFirstTraverser(spec), lambda node: print(node['id']))
    """
    if adapt:
        fn = adapt_callback(fn, 3)
    for value, owner, _ in traverser.iterate(tree):
        fn(value, owner, tree)


def find(
    tree: Any,
    traverser: TreeTraverser,
    predicate: Callable[..., Any],
    adapt: bool = True
) -> Optional[Any]:
    """Return the first node for which ``predicate(value, parent, tree)`` is truthy.

    Returns:
        The matching node, or None once the traversal is exhausted
    """
    if adapt:
        predicate = adapt_callback(predicate, 3)
    for value, owner, _ in traverser.iterate(tree):
        if predicate(value, owner, tree):
            return value
    return None


def find_where(tree: Any, traverser: TreeTraverser, match: Mapping) -> Optional[Any]:
    """Return the first node whose fields equal every item of ``match``."""
    return find(tree, traverser, match_filter(match))


def find_all(
    tree: Any,
    traverser: TreeTraverser,
    predicate: Callable[..., Any],
    adapt: bool = True
) -> Iterator[Any]:
    """Yield every node for which ``predicate(value, parent, tree)`` is truthy."""
    if adapt:
        predicate = adapt_callback(predicate, 3)
    for value, owner, _ in traverser.iterate(tree):
        if predicate(value, owner, tree):
            yield value


def reduce(
    tree: Any,
    traverser: TreeTraverser,
    combine: Callable[..., Any],
    seed: Any = _NO_SEED,
    adapt: bool = True
) -> Any:
    """Fold every node into an accumulator.

    Without ``seed`` the first visited node becomes the accumulator as-is
    and ``combine`` starts at the second node. With ``seed``,
    ``combine(acc, value, parent, tree)`` runs once per node.

    Example:
        >>> reduce(tree, DepthFirstTraverser(spec), lambda total, node: total + 1, 0)
        7
    """
    if adapt:
        combine = adapt_callback(combine, 4)

    records = traverser.iterate(tree)
    if seed is _NO_SEED:
        first = next(records, None)
        if first is None:
            return None
        accumulator = first.value
    else:
        accumulator = seed

    for value, owner, _ in records:
        accumulator = combine(accumulator, value, owner, tree)
    return accumulator


def count_nodes(tree: Any, traverser: TreeTraverser) -> int:
    """Count the nodes reachable from ``tree``."""
    count = 0
    for _ in traverser.iterate(tree):
        count += 1
    return count


def get_leaf_nodes(tree: Any, traverser: TreeTraverser) -> Iterator[Any]:
    """Yield every node that has no children, in traversal order."""
    for value, _, _ in traverser.iterate(tree):
        if not traverser.walk_spec.children(value):
            yield value


def parent(tree: Any, traverser: TreeTraverser, node: Any) -> Optional[Any]:
    """Find the parent of ``node`` (matched by identity).

    Returns:
        The parent node, or None for the root and for nodes not in the tree
    """
    if node is tree:
        return None
    for record in traverser.iterate(tree):
        if record.value is node:
            return record.parent
    return None


def siblings(tree: Any, traverser: TreeTraverser, node: Any) -> Optional[Siblings]:
    """Split the child group holding ``node`` into left and right siblings.

    Returns:
        Siblings(left, right), or None for the root, for nodes not in the
        tree and for nodes held by a single-child field
    """
    owner = parent(tree, traverser, node)
    if owner is None:
        return None

    group = first_group_containing(traverser.walk_spec, owner, node)
    if group is None:
        return None

    group = list(group)
    position = next(index for index, item in enumerate(group) if item is node)
    return Siblings(left=group[:position], right=group[position + 1:])
