"""TreeWalker - traversal toolkit for trees of unknown shape.

Describe once how a node's children are found, then iterate, map, filter
and query any tree of that shape:

    from treewalker import TreeWalker

    walker = TreeWalker(['children'])          # or a function(node, emit)
    for record in walker.breadth_iterator(tree):
        print(record.value['id'], record.parent and record.parent['id'])

walk() is a separate, continuation-style recursive walker that needs no
walk spec at all.
"""

__version__ = "0.1.0"

from .config import (
    TraversalConfig,
    TraversalStrategy,
    ConfigurationError,
    parse_strategy,
)
from .core.walker import (
    WalkSpec,
    FunctionWalkSpec,
    FieldListWalkSpec,
    Step,
    InvalidWalkSpecError,
    make_walk_spec,
)
from .core.traverser import (
    TraversalRecord,
    DepthIterator,
    BreadthIterator,
    TreeTraverser,
    DepthFirstTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .core.paths import has_path, get_path, set_path, copy_excluding
from .core.transform import map_tree, filter_tree, where_tree, match_filter
from .core.continuation import walk
from .api import (
    Siblings,
    for_each,
    find,
    find_where,
    find_all,
    reduce,
    count_nodes,
    get_leaf_nodes,
    parent,
    siblings,
)
from .toolkit import TreeWalker, create_walker

__all__ = [
    "__version__",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "ConfigurationError",
    "parse_strategy",
    # Walk specs
    "WalkSpec",
    "FunctionWalkSpec",
    "FieldListWalkSpec",
    "Step",
    "InvalidWalkSpecError",
    "make_walk_spec",
    # Traversal
    "TraversalRecord",
    "DepthIterator",
    "BreadthIterator",
    "TreeTraverser",
    "DepthFirstTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    # Paths
    "has_path",
    "get_path",
    "set_path",
    "copy_excluding",
    # Transforms
    "map_tree",
    "filter_tree",
    "where_tree",
    "match_filter",
    "walk",
    # API
    "Siblings",
    "for_each",
    "find",
    "find_where",
    "find_all",
    "reduce",
    "count_nodes",
    "get_leaf_nodes",
    "parent",
    "siblings",
    "TreeWalker",
    "create_walker",
]
