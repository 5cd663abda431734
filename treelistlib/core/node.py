"""Node contract for TreeListLib.

The library does not own a node type. Any object exposing an integer ``id``,
a writable ``parent`` reference and a writable ``children`` list can be
assembled, walked and searched. SimpleTreeNode is provided as a convenience
base class for callers who don't already have a record type.
"""

from typing import Any, Iterable, List, Optional, Protocol, TypeVar, Union, runtime_checkable


@runtime_checkable
class TreeListNode(Protocol):
    """Structural contract every node handed to TreeListLib must satisfy.

    Attributes:
        id: Integer identifier, unique within a flat collection that is
            assembled together. The only key used for matching nodes.
        parent: Reference to the parent node, or None for a root. Before
            assembly this may be any object carrying the right ``id``; after
            assembly it is the canonical parent object from the same input.
        children: Ordered list of child nodes. Replaced with a fresh list
            for every node that passes through ``convert_to_trees``.
    """

    id: int
    parent: Optional[Any]
    children: Optional[List[Any]]


NodeT = TypeVar("NodeT", bound=TreeListNode)


class SimpleTreeNode:
    """Minimal concrete node satisfying the TreeListNode contract.

    Subclass it to attach domain data:

        class Category(SimpleTreeNode):
            def __init__(self, id, name, parent=None):
                super().__init__(id, parent)
                self.name = name
    """

    def __init__(self, id: int, parent: Optional["SimpleTreeNode"] = None):
        self.id = id
        self.parent = parent
        self.children: List["SimpleTreeNode"] = []

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        parent_id = self.parent.id if self.parent is not None else None
        return f"{self.__class__.__name__}(id={self.id!r}, parent={parent_id!r})"


def as_forest(forest: Union[NodeT, Iterable[NodeT]]) -> Iterable[NodeT]:
    """Treat a single node as a one-tree forest; pass forests through.

    Anything with both ``id`` and ``children`` attributes counts as a node,
    so a collection type carrying those attribute names is treated as a
    single node, not as a forest.
    """
    if hasattr(forest, "children") and hasattr(forest, "id"):
        return [forest]
    return forest
