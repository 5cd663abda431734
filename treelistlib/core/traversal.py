"""Traversal helpers for TreeListLib.

All three walkers are lazy generators. They hold nothing but a position in
the tree, so they can be abandoned part way through (e.g. once a search
has found its match) without cleanup.

The tree must not be mutated while a walker is being consumed, and the
parent/children links must be acyclic; neither condition is checked.
"""

from typing import Iterator, List, Optional

from .node import NodeT
from ..errors import NoParentError


def _children_of(node: NodeT) -> List[NodeT]:
    # Nodes that never went through convert_to_trees may still have None
    children = node.children
    return children if children is not None else []


def get_children(start_node: NodeT, include_start: bool = True) -> Iterator[NodeT]:
    """Walk the subtree under start_node depth-first, pre-order.

    Uses an explicit stack instead of recursion, so arbitrarily deep trees
    don't hit the interpreter's recursion limit.

    Args:
        start_node: Node whose subtree to walk
        include_start: True if start_node itself should be yielded first

    Yields:
        Nodes in pre-order: each parent before its children, children in
        their stored order
    """
    if include_start:
        stack = [start_node]
    else:
        stack = list(reversed(_children_of(start_node)))

    while stack:
        node = stack.pop()
        yield node
        # Push reversed so the first child is popped first
        stack.extend(reversed(_children_of(node)))


def get_parents(start_node: NodeT, include_start: bool = True) -> Iterator[NodeT]:
    """Walk parent references from start_node up to its root.

    Args:
        start_node: Node to start from
        include_start: True if start_node itself should be yielded first

    Yields:
        start_node (optionally), its parent, grandparent, ... and finally
        the root
    """
    current: Optional[NodeT] = start_node if include_start else start_node.parent

    while current is not None:
        yield current
        current = current.parent


def get_siblings(start_node: NodeT, include_start: bool = True) -> Iterator[NodeT]:
    """Get the nodes that share start_node's parent.

    Siblings are matched by id, so a stale copy of start_node inside the
    parent's children is skipped as well.

    Args:
        start_node: Node to find siblings of
        include_start: True if start_node itself should be yielded first

    Returns:
        Iterator over start_node (optionally) followed by the parent's other
        children in stored order

    Raises:
        NoParentError: If start_node is a root. Raised at call time, not on
            first iteration.
    """
    parent = start_node.parent
    if parent is None:
        raise NoParentError(start_node.id, "get_siblings")

    return _iter_siblings(start_node, parent, include_start)


def _iter_siblings(start_node: NodeT, parent: NodeT, include_start: bool) -> Iterator[NodeT]:
    if include_start:
        yield start_node

    for sibling in _children_of(parent):
        if sibling.id != start_node.id:
            yield sibling
