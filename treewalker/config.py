"""Configuration system for TreeWalker.

This module defines how users pick the default traversal order and the
copy behavior of map/filter for a TreeWalker.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    DEPTH_FIRST = "dfs"     # Parent before children, subtree before sibling
    BREADTH_FIRST = "bfs"   # Level by level


class ConfigurationError(ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass


@dataclass
class TraversalConfig:
    """Configuration for a TreeWalker.

    The depth_* and breadth_* methods of a TreeWalker always use their own
    order; ``strategy`` only picks the order of the strategy-neutral ones
    (for_each, find, reduce, parent, ...).
    """

    # Default order for strategy-neutral consumers
    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST

    # Copy non-child arrays as index-keyed mappings during map/filter
    literal_array_copy: bool = False

    # Pass callbacks only as many positional args as they accept
    adapt_callback_arity: bool = True

    @classmethod
    def depth_first(cls) -> 'TraversalConfig':
        """Create config whose neutral consumers run depth-first."""
        return cls(strategy=TraversalStrategy.DEPTH_FIRST)

    @classmethod
    def breadth_first(cls) -> 'TraversalConfig':
        """Create config whose neutral consumers run breadth-first."""
        return cls(strategy=TraversalStrategy.BREADTH_FIRST)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if not isinstance(self.literal_array_copy, bool):
            errors.append("literal_array_copy must be a bool")

        if not isinstance(self.adapt_callback_arity, bool):
            errors.append("adapt_callback_arity must be a bool")

        return errors


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    # Map string names to enum values
    strategy_map = {
        'dfs': TraversalStrategy.DEPTH_FIRST,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST,
        'depth': TraversalStrategy.DEPTH_FIRST,
        'depth_first': TraversalStrategy.DEPTH_FIRST,
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'level': TraversalStrategy.BREADTH_FIRST,
        'level_order': TraversalStrategy.BREADTH_FIRST,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
