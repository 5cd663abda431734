"""Searching a forest for nodes."""

from typing import Callable, Iterable, Iterator, Optional, Union

from .node import NodeT, as_forest
from .traversal import get_children


def find_node_by_id(forest: Union[NodeT, Iterable[NodeT]], node_id: int) -> Optional[NodeT]:
    """Find a node inside a set of trees.

    Trees are searched in order, each one pre-order. Ids are expected to be
    unique, but if they aren't, the first pre-order hit is returned.

    Args:
        forest: Root nodes to search (or a single node)
        node_id: Identifier of the node to locate

    Returns:
        Matching node, or None if no node in the forest has that id
    """
    for root in as_forest(forest):
        for node in get_children(root, include_start=True):
            if node.id == node_id:
                return node

    return None


def find_nodes(forest: Union[NodeT, Iterable[NodeT]],
               predicate: Callable[[NodeT], bool]) -> Iterator[NodeT]:
    """Find nodes that match a predicate.

    Args:
        forest: Root nodes to search (or a single node)
        predicate: Function that returns True for matching nodes

    Yields:
        Matching nodes, in the same order as find_node_by_id visits them

    Example:
        >>> leaves = find_nodes(forest, lambda n: not n.children)
    """
    for root in as_forest(forest):
        for node in get_children(root, include_start=True):
            if predicate(node):
                yield node
