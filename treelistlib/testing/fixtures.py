"""Test fixtures for TreeListLib consumers.

Records loaded from a database or file usually only know their parent's id.
These helpers build flat node lists in that shape, with each ``parent`` set
to a lightweight placeholder rather than the real parent node, so tests
exercise the same id-based resolution convert_to_trees performs on real data.
"""

from typing import Iterable, List, Optional, Tuple, Type

from ..core.node import SimpleTreeNode


class PlaceholderParent:
    """Stand-in parent reference that carries only an id.

    convert_to_trees replaces it with the canonical node of the same id.
    """

    def __init__(self, id: int):
        self.id = id
        self.parent = None
        self.children = None

    def __repr__(self) -> str:
        return f"PlaceholderParent(id={self.id!r})"


def build_flat_nodes(rows: Iterable[Tuple[int, Optional[int]]],
                     node_class: Type[SimpleTreeNode] = SimpleTreeNode) -> List[SimpleTreeNode]:
    """Build an unlinked flat node list from (id, parent_id) rows.

    Args:
        rows: Pairs of node id and parent id (None for roots), in any order
        node_class: SimpleTreeNode subclass to instantiate

    Returns:
        Nodes in row order, each with a PlaceholderParent (or None) as parent
        and an empty children list

    Example:
        >>> nodes = build_flat_nodes([(1, None), (2, 1), (3, 2)])
        >>> forest = convert_to_trees(nodes)
    """
    nodes = []
    for node_id, parent_id in rows:
        parent = PlaceholderParent(parent_id) if parent_id is not None else None
        nodes.append(node_class(node_id, parent))
    return nodes


def build_chain(length: int, first_id: int = 1) -> List[SimpleTreeNode]:
    """Build a single-path tree of the given length, root first.

    Useful for checking behavior on trees deeper than the recursion limit.

    Args:
        length: Number of nodes in the chain
        first_id: Id of the root; each following node's id is one higher

    Returns:
        Unlinked flat node list, root first
    """
    rows = [(first_id, None)]
    rows.extend((node_id, node_id - 1)
                for node_id in range(first_id + 1, first_id + length))
    return build_flat_nodes(rows[:length])
