"""Continuation-style recursive walker.

walk() is independent of WalkSpec: it discovers nothing on its own. The
caller's function decides which fields are children and recurses into
them explicitly through the continuation it is handed:

    def show(node, recurse):
        if 'op' in node:
            return '(' + recurse(node['left']) + node['op'] + recurse(node['right']) + ')'
        return str(node['value'])

    walk(expression, show)

Recursion depth equals tree depth, so Python's recursion limit bounds the
depth of trees it can handle.
"""

from typing import Any, Callable, List, Union

from .paths import is_group


Continuation = Callable[..., Any]
WalkCallback = Callable[..., Any]


def walk(node: Any, fn: WalkCallback = None, *extra: Any) -> Union[Any, List[Any], Callable[..., Any]]:
    """Apply ``fn(node, recurse, *extra)`` to a node or to each element of a list.

    ``recurse(child, *new_extra)`` applies the same rule to ``child`` with a
    new set of extra arguments.

    Called with a single argument, ``walk(fn)`` returns a reusable
    function ``tree -> walk(tree, fn, *extra)``.

    Args:
        node: Node, or list/tuple of nodes to fan out over
        fn: Function(node, recurse, *extra)
        *extra: Extra positional arguments passed through to fn

    Returns:
        fn's result, a list of results for a list/tuple node, or a bound
        walker when fn is omitted
    """
    if fn is None:
        callback = node

        def bound(tree: Any, *more: Any) -> Any:
            return walk(tree, callback, *more)

        return bound

    def recurse(child: Any, *more: Any) -> Any:
        return walk(child, fn, *more)

    if is_group(node):
        return [fn(item, recurse, *extra) for item in node]
    return fn(node, recurse, *extra)
