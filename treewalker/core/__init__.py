"""Core abstractions for TreeWalker.

This module contains the walk-spec abstraction, the iterators built on it
and the structure-preserving transforms.
"""

from .walker import (
    WalkSpec,
    FunctionWalkSpec,
    FieldListWalkSpec,
    Step,
    InvalidWalkSpecError,
    make_walk_spec,
)
from .traverser import (
    TraversalRecord,
    DepthIterator,
    BreadthIterator,
    TreeTraverser,
    DepthFirstTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .transform import map_tree, filter_tree, where_tree, match_filter
from .continuation import walk

__all__ = [
    "WalkSpec",
    "FunctionWalkSpec",
    "FieldListWalkSpec",
    "Step",
    "InvalidWalkSpecError",
    "make_walk_spec",
    "TraversalRecord",
    "DepthIterator",
    "BreadthIterator",
    "TreeTraverser",
    "DepthFirstTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    "map_tree",
    "filter_tree",
    "where_tree",
    "match_filter",
    "walk",
]
