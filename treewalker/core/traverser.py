"""Tree traversal strategies for TreeWalker.

Traversers implement the algorithms for walking through trees. They work
with any WalkSpec, making them universal across tree shapes. Both
iterators are pull-based: state lives on the iterator object and advances
only when next() is called, so auxiliary memory is bounded by the tree's
depth and width rather than its node count.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, NamedTuple, Optional

from .walker import WalkSpec


class TraversalRecord(NamedTuple):
    """A visited node together with the node whose steps produced it."""
    value: Any
    parent: Optional[Any]
    depth: int


class DepthIterator:
    """Pre-order depth-first iterator over a stack of frames.

    Each frame is ``[sibling_nodes, cursor]``. The top frame holds the
    children of the node most recently advanced past in the frame below,
    which is how each record gets its parent.
    """

    def __init__(self, walk_spec: WalkSpec, tree: Any):
        self.walk_spec = walk_spec
        self._frames: List[list] = [[[tree], 0]]

    def __iter__(self) -> 'DepthIterator':
        return self

    def __next__(self) -> TraversalRecord:
        frames = self._frames
        while frames:
            frame = frames[-1]
            nodes, index = frame
            if index >= len(nodes):
                # Exhausted siblings: ascend to the aunts/uncles.
                frames.pop()
                continue

            frame[1] = index + 1
            parent = None
            if len(frames) > 1:
                below_nodes, below_index = frames[-2]
                parent = below_nodes[below_index - 1]
            depth = len(frames) - 1

            node = nodes[index]
            children = self.walk_spec.children(node)
            if children:
                frames.append([children, 0])

            return TraversalRecord(node, parent, depth)

        raise StopIteration


class BreadthIterator:
    """Level-order iterator.

    State:
        _level: children collected so far for the next level
        _nodes/_index: the previous level, expanded one node at a time
        _elder: the node most recently expanded
        _subnodes/_subindex: the elder's children still awaiting emission

    Children of several parents are interleaved into one level buffer,
    but a child is only ever emitted together with the elder that
    produced it.
    """

    def __init__(self, walk_spec: WalkSpec, tree: Any):
        self.walk_spec = walk_spec
        self._level: List[Any] = [tree]
        self._nodes: List[Any] = []
        self._index = 0
        self._elder: Optional[Any] = None
        self._subnodes: List[Any] = [tree]
        self._subindex = 0
        self._depth = 0

    def __iter__(self) -> 'BreadthIterator':
        return self

    def __next__(self) -> TraversalRecord:
        while True:
            if self._subindex < len(self._subnodes):
                node = self._subnodes[self._subindex]
                self._subindex += 1
                return TraversalRecord(node, self._elder, self._depth)

            if self._index < len(self._nodes):
                self._elder = self._nodes[self._index]
                self._index += 1
                self._subnodes = self.walk_spec.children(self._elder)
                self._subindex = 0
                self._level.extend(self._subnodes)
                continue

            if not self._level:
                raise StopIteration

            self._nodes = self._level
            self._level = []
            self._index = 0
            self._depth += 1


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    A traverser binds an iteration order to a WalkSpec and produces a
    fresh iterator per tree.
    """

    def __init__(self, walk_spec: WalkSpec):
        """Initialize traverser with a walk spec.

        Args:
            walk_spec: WalkSpec used to discover children
        """
        self.walk_spec = walk_spec

    @abstractmethod
    def iterate(self, tree: Any) -> Iterator[TraversalRecord]:
        """Start a traversal of ``tree``.

        Args:
            tree: Root node

        Returns:
            Iterator of TraversalRecord, root first
        """
        pass

    def __call__(self, tree: Any) -> Iterator[TraversalRecord]:
        return self.iterate(tree)

    def traverse(self, tree: Any) -> Iterator[Any]:
        """Yield just the visited nodes."""
        for record in self.iterate(tree):
            yield record.value


class DepthFirstTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Visits a node before its descendants and finishes a node's whole
    subtree before its next sibling.
    """

    def iterate(self, tree: Any) -> DepthIterator:
        return DepthIterator(self.walk_spec, tree)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def iterate(self, tree: Any) -> BreadthIterator:
        return BreadthIterator(self.walk_spec, tree)


def create_traverser(strategy: str, walk_spec: WalkSpec) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (dfs, bfs)
        walk_spec: WalkSpec for the tree shape

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'dfs': DepthFirstTraverser,
        'bfs': BreadthFirstTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](walk_spec)
