"""Walk specifications for TreeWalker.

The WalkSpec is what makes TreeWalker work with any tree shape. The node
itself is just data; the walk spec knows HOW to find a node's children.
It plays the same role for every downstream component (iterators,
map/filter, parent/siblings), so all of them see identical, order-stable
steps for the same node.

Two ways of declaring children are supported and normalized into one
contract, an ordered list of Step(key, value):

    FieldListWalkSpec(['children', 'attrs.left'])

    def spec(node, emit):
        if node.get('children'):
            emit('children')
        if node.get('next'):
            emit('next', node['next'])
    FunctionWalkSpec(spec)
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Union

from .paths import get_path, has_path, is_group


logger = logging.getLogger(__name__)

_UNSET = object()

Emit = Callable[..., None]
WalkFunction = Callable[[Any, Emit], None]


class InvalidWalkSpecError(TypeError):
    """Raised when a walk specification is neither a field list nor a function."""
    pass


class Step(NamedTuple):
    """One child relation of a node.

    ``value`` is a single child node or a child group (list/tuple of nodes).
    """
    key: str
    value: Any


class WalkSpec(ABC):
    """Abstract child-discovery strategy.

    Subclasses implement steps(); everything else (children(), calling
    the spec directly) is derived from it.
    """

    @abstractmethod
    def steps(self, node: Any) -> List[Step]:
        """Return the ordered child steps of a node.

        Args:
            node: Node to inspect

        Returns:
            List of Step(key, value) in declaration/emission order
        """
        pass

    def children(self, node: Any) -> List[Any]:
        """Flatten every step value into one ordered child list.

        Group values are extended element by element, single children are
        appended and None values are skipped.
        """
        kids: List[Any] = []
        for _, value in self.steps(node):
            if value is None:
                continue
            if is_group(value):
                kids.extend(value)
            else:
                kids.append(value)
        return kids

    def __call__(self, node: Any) -> List[Step]:
        return self.steps(node)


class FunctionWalkSpec(WalkSpec):
    """Walk spec backed by a ``fn(node, emit)`` function.

    ``emit(key)`` registers a step whose value is resolved with
    get_path(node, key); ``emit(key, value)`` registers an explicit value.
    """

    def __init__(self, walk_fn: WalkFunction):
        """Initialize with the user walk function.

        Args:
            walk_fn: Function(node, emit) called once per node
        """
        if not callable(walk_fn):
            raise InvalidWalkSpecError(
                f"Walk function must be callable, got {type(walk_fn).__name__}"
            )
        self.walk_fn = walk_fn

    def steps(self, node: Any) -> List[Step]:
        steps: List[Step] = []

        def emit(key: str, value: Any = _UNSET) -> None:
            if value is _UNSET:
                value = get_path(node, key)
            steps.append(Step(key, value))

        self.walk_fn(node, emit)
        return steps

    def __repr__(self) -> str:
        name = getattr(self.walk_fn, '__name__', repr(self.walk_fn))
        return f"{self.__class__.__name__}({name})"


class FieldListWalkSpec(FunctionWalkSpec):
    """Walk spec declared as an ordered list of (possibly dotted) field names.

    The list is compiled once into the function form: a step is emitted
    for every field that is present on the node (see has_path()).
    """

    def __init__(self, fields: Sequence[str]):
        """Initialize with the child field names.

        Args:
            fields: Ordered field names, dotted paths allowed

        Raises:
            InvalidWalkSpecError: If fields is a bare string or holds a non-string
        """
        if isinstance(fields, str):
            raise InvalidWalkSpecError(
                f"Expected a list of field names, got the string {fields!r}"
            )
        for field in fields:
            if not isinstance(field, str):
                raise InvalidWalkSpecError(
                    f"Child field names must be strings, got {field!r}"
                )
        self.fields = tuple(fields)

        def walk_fields(node: Any, emit: Emit) -> None:
            for name in self.fields:
                if has_path(node, name):
                    emit(name)

        super().__init__(walk_fields)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.fields)!r})"


WalkSpecLike = Union[WalkSpec, Sequence[str], WalkFunction]


def make_walk_spec(spec: WalkSpecLike) -> WalkSpec:
    """Normalize any supported walk specification into a WalkSpec.

    Args:
        spec: A WalkSpec, a list/tuple of field names, or a function(node, emit)

    Returns:
        WalkSpec instance

    Raises:
        InvalidWalkSpecError: If spec has none of the supported shapes
    """
    if isinstance(spec, WalkSpec):
        return spec

    if isinstance(spec, (list, tuple)):
        logger.debug("Compiling field-list walk spec: %r", list(spec))
        return FieldListWalkSpec(spec)

    if callable(spec):
        logger.debug("Using function walk spec: %r", spec)
        return FunctionWalkSpec(spec)

    raise InvalidWalkSpecError(
        "Walk spec must be a list of field names or a function(node, emit), "
        f"got {type(spec).__name__}"
    )


def first_group_containing(spec: WalkSpec, parent: Any, node: Any) -> Optional[Sequence[Any]]:
    """Find the first child group of ``parent`` that holds ``node`` (by identity)."""
    for _, value in spec.steps(parent):
        if is_group(value) and any(item is node for item in value):
            return value
    return None
