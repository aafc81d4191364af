"""The configured TreeWalker toolkit.

A TreeWalker is built once from a walk specification and then used on
any number of trees of that shape:

    walker = TreeWalker(['children'])
    walker.depth_find_where(tree, {'id': 'G'})
    walker.map(tree, lambda node: {**node, 'id': node['id'] * 2})
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterator, Optional, Union

from . import api
from .api import Siblings
from .config import ConfigurationError, TraversalConfig, TraversalStrategy, parse_strategy
from .core.continuation import walk
from .core.transform import filter_tree, map_tree, where_tree
from .core.traverser import (
    BreadthIterator,
    DepthIterator,
    TraversalRecord,
    TreeTraverser,
    create_traverser,
)
from .core.walker import WalkSpecLike, make_walk_spec


logger = logging.getLogger(__name__)

StrategyLike = Union[TraversalStrategy, str, None]


class TreeWalker:
    """Traversal toolkit bound to one walk specification.

    The TreeWalker validates its configuration up front, normalizes the
    walk spec once and shares it between both traversers and the
    map/filter transforms, so every operation sees identical child steps.
    """

    walk = staticmethod(walk)

    def __init__(self, walk_spec: WalkSpecLike, config: Optional[TraversalConfig] = None):
        """Create and validate a toolkit.

        Args:
            walk_spec: List of child field names or function(node, emit)
            config: Optional TraversalConfig (defaults to depth-first)

        Raises:
            InvalidWalkSpecError: If walk_spec has an unsupported shape
            ConfigurationError: If config fails validation
        """
        self.config = config or TraversalConfig()

        config_errors = self.config.validate()
        if config_errors:
            logger.warning("Rejecting TreeWalker config: %s", config_errors)
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.walk_spec = make_walk_spec(walk_spec)
        self.depth_traverser = create_traverser(TraversalStrategy.DEPTH_FIRST.value, self.walk_spec)
        self.breadth_traverser = create_traverser(TraversalStrategy.BREADTH_FIRST.value, self.walk_spec)

        logger.debug(
            "TreeWalker ready: spec=%r strategy=%s",
            self.walk_spec, self.config.strategy.value
        )

    def __repr__(self) -> str:
        return f"TreeWalker({self.walk_spec!r}, strategy={self.config.strategy.value!r})"

    def _select_traverser(self, strategy: StrategyLike = None) -> TreeTraverser:
        """Pick the traverser for a strategy (None = configured default)."""
        chosen = self.config.strategy if strategy is None else parse_strategy(strategy)
        if chosen == TraversalStrategy.BREADTH_FIRST:
            return self.breadth_traverser
        return self.depth_traverser

    @property
    def _adapt(self) -> bool:
        return self.config.adapt_callback_arity

    # Iterators

    def depth_iterator(self, tree: Any) -> DepthIterator:
        """Pre-order iterator of TraversalRecord(value, parent, depth)."""
        return self.depth_traverser.iterate(tree)

    def breadth_iterator(self, tree: Any) -> BreadthIterator:
        """Level-order iterator of TraversalRecord(value, parent, depth)."""
        return self.breadth_traverser.iterate(tree)

    def iterate(self, tree: Any, strategy: StrategyLike = None) -> Iterator[TraversalRecord]:
        return self._select_traverser(strategy).iterate(tree)

    def traverse(self, tree: Any, strategy: StrategyLike = None) -> Iterator[Any]:
        """Yield just the nodes in the chosen order."""
        return self._select_traverser(strategy).traverse(tree)

    # Structure-preserving transforms

    def map(self, tree: Any, transform: Callable[[Any], Any]) -> Any:
        return map_tree(self.walk_spec, tree, transform, self.config.literal_array_copy)

    def filter(self, tree: Any, predicate: Callable[[Any], Any]) -> Optional[Any]:
        return filter_tree(self.walk_spec, tree, predicate, self.config.literal_array_copy)

    def where(self, tree: Any, match: Mapping) -> Optional[Any]:
        return where_tree(self.walk_spec, tree, match, self.config.literal_array_copy)

    # Strategy-neutral consumers

    def for_each(self, tree: Any, fn: Callable[..., Any], strategy: StrategyLike = None) -> None:
        api.for_each(tree, self._select_traverser(strategy), fn, self._adapt)

    def find(self, tree: Any, predicate: Callable[..., Any], strategy: StrategyLike = None) -> Optional[Any]:
        return api.find(tree, self._select_traverser(strategy), predicate, self._adapt)

    def find_where(self, tree: Any, match: Mapping, strategy: StrategyLike = None) -> Optional[Any]:
        return api.find_where(tree, self._select_traverser(strategy), match)

    def find_all(self, tree: Any, predicate: Callable[..., Any], strategy: StrategyLike = None) -> Iterator[Any]:
        return api.find_all(tree, self._select_traverser(strategy), predicate, self._adapt)

    def reduce(self, tree: Any, combine: Callable[..., Any], *seed: Any, strategy: StrategyLike = None) -> Any:
        """Fold the tree; ``seed`` is optional and passed positionally."""
        return api.reduce(tree, self._select_traverser(strategy), combine, *seed[:1], adapt=self._adapt)

    def parent(self, tree: Any, node: Any, strategy: StrategyLike = None) -> Optional[Any]:
        return api.parent(tree, self._select_traverser(strategy), node)

    def siblings(self, tree: Any, node: Any, strategy: StrategyLike = None) -> Optional[Siblings]:
        return api.siblings(tree, self._select_traverser(strategy), node)

    def count_nodes(self, tree: Any) -> int:
        return api.count_nodes(tree, self.depth_traverser)

    def get_leaf_nodes(self, tree: Any, strategy: StrategyLike = None) -> Iterator[Any]:
        return api.get_leaf_nodes(tree, self._select_traverser(strategy))

    # Depth-first consumers

    def depth_for_each(self, tree: Any, fn: Callable[..., Any]) -> None:
        self.for_each(tree, fn, strategy=TraversalStrategy.DEPTH_FIRST)

    def depth_find(self, tree: Any, predicate: Callable[..., Any]) -> Optional[Any]:
        return self.find(tree, predicate, strategy=TraversalStrategy.DEPTH_FIRST)

    def depth_find_where(self, tree: Any, match: Mapping) -> Optional[Any]:
        return self.find_where(tree, match, strategy=TraversalStrategy.DEPTH_FIRST)

    def depth_reduce(self, tree: Any, combine: Callable[..., Any], *seed: Any) -> Any:
        return self.reduce(tree, combine, *seed, strategy=TraversalStrategy.DEPTH_FIRST)

    def depth_parent(self, tree: Any, node: Any) -> Optional[Any]:
        return self.parent(tree, node, strategy=TraversalStrategy.DEPTH_FIRST)

    def depth_siblings(self, tree: Any, node: Any) -> Optional[Siblings]:
        return self.siblings(tree, node, strategy=TraversalStrategy.DEPTH_FIRST)

    # Breadth-first consumers

    def breadth_for_each(self, tree: Any, fn: Callable[..., Any]) -> None:
        self.for_each(tree, fn, strategy=TraversalStrategy.BREADTH_FIRST)

    def breadth_find(self, tree: Any, predicate: Callable[..., Any]) -> Optional[Any]:
        return self.find(tree, predicate, strategy=TraversalStrategy.BREADTH_FIRST)

    def breadth_find_where(self, tree: Any, match: Mapping) -> Optional[Any]:
        return self.find_where(tree, match, strategy=TraversalStrategy.BREADTH_FIRST)

    def breadth_reduce(self, tree: Any, combine: Callable[..., Any], *seed: Any) -> Any:
        return self.reduce(tree, combine, *seed, strategy=TraversalStrategy.BREADTH_FIRST)

    def breadth_parent(self, tree: Any, node: Any) -> Optional[Any]:
        return self.parent(tree, node, strategy=TraversalStrategy.BREADTH_FIRST)

    def breadth_siblings(self, tree: Any, node: Any) -> Optional[Siblings]:
        return self.siblings(tree, node, strategy=TraversalStrategy.BREADTH_FIRST)


def create_walker(
    walk_spec: WalkSpecLike,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST,
    literal_array_copy: bool = False,
    **kwargs
) -> TreeWalker:
    """Simple factory for a TreeWalker.

    Args:
        walk_spec: List of child field names or function(node, emit)
        strategy: Default order for strategy-neutral consumers (dfs, bfs)
        literal_array_copy: Copy non-child arrays as index-keyed mappings
        **kwargs: Additional TraversalConfig options

    Returns:
        Configured TreeWalker

    Example:
        >>> walker = create_walker(['children'], strategy='bfs')
        >>> [node['id'] for node in walker.traverse(tree)]
        ['A', 'B', 'C', 'D', 'E', 'F', 'G']
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        literal_array_copy=literal_array_copy
    )

    # Apply any additional kwargs to config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
        else:
            raise TypeError(f"Unknown TreeWalker option: {key}")

    return TreeWalker(walk_spec, config)
