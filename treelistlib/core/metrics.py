"""Depth and size measurements over trees."""

from typing import Any, Dict, Iterable, Iterator, Union

from .node import NodeT, as_forest
from .traversal import get_children


def get_depth(node: NodeT) -> int:
    """Get the depth of a node in its tree.

    Args:
        node: Node to measure

    Returns:
        Number of parent hops to the root; a root has depth 0
    """
    depth = 0

    while node.parent is not None:
        depth += 1
        node = node.parent

    return depth


def count_nodes(forest: Union[NodeT, Iterable[NodeT]]) -> int:
    """Count every node reachable from the given roots.

    Args:
        forest: Root nodes (or a single node)

    Returns:
        Total number of nodes, roots included
    """
    count = 0
    for root in as_forest(forest):
        for _ in get_children(root, include_start=True):
            count += 1
    return count


def get_leaf_nodes(forest: Union[NodeT, Iterable[NodeT]]) -> Iterator[NodeT]:
    """Get all leaf nodes (nodes without children), in pre-order."""
    for root in as_forest(forest):
        for node in get_children(root, include_start=True):
            if not node.children:
                yield node


def get_tree_stats(forest: Union[NodeT, Iterable[NodeT]]) -> Dict[str, Any]:
    """Get statistics about a forest.

    Depths are measured from each tree's own root, so a single subtree can
    be passed in without its ancestors affecting the numbers.

    Args:
        forest: Root nodes (or a single node)

    Returns:
        Dictionary with total_nodes, root_count, leaf_nodes, internal_nodes,
        max_depth, depths (depth -> node count) and average_branching
        (children per internal node)

    Example:
        >>> stats = get_tree_stats(forest)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'root_count': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for root in as_forest(forest):
        stats['root_count'] += 1
        stack = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            stats['total_nodes'] += 1

            children = node.children or []
            if not children:
                stats['leaf_nodes'] += 1

            stats['max_depth'] = max(stats['max_depth'], depth)
            stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

            for child in reversed(children):
                stack.append((child, depth + 1))

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    # Every non-root node is exactly one parent's child
    edges = stats['total_nodes'] - stats['root_count']
    stats['average_branching'] = (
        edges / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats
