"""Flat list <-> forest conversion for TreeListLib.

convert_to_trees links a flat, arbitrarily ordered collection of records into
a forest in two passes: index every node by id, then resolve each node's
parent reference through that index and append the node to the canonical
parent's children. flatten_trees walks a forest back into a flat list.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .node import NodeT
from .traversal import get_children
from ..config import AssemblyConfig, DanglingParentPolicy, DuplicateIdPolicy, check_config
from ..errors import DanglingParentError, DuplicateNodeIdError

logger = logging.getLogger(__name__)


def convert_to_trees(flat_nodes: Iterable[NodeT],
                     config: Optional[AssemblyConfig] = None) -> List[NodeT]:
    """Convert a flat collection of nodes into a list of trees.

    Each node's ``parent`` only needs to carry the right ``id``; it is
    rebound to the matching node from ``flat_nodes``. Every node gets a
    fresh ``children`` list. Nodes are linked in place and shared with the
    input; nothing is copied.

    A node whose parent id is not present in the input is dangling. Under
    the default DanglingParentPolicy.DROP it is left out of the result
    entirely: it is neither a root nor anyone's child, and its own
    descendants become unreachable from the returned forest. Compare
    ``count_nodes(result)`` with the input length to detect this.

    Args:
        flat_nodes: Nodes in any order. Consumed once.
        config: Assembly policies (defaults to AssemblyConfig())

    Returns:
        Root nodes in input order, each with children populated in input
        order

    Raises:
        DuplicateNodeIdError: If two nodes share an id under
            DuplicateIdPolicy.RAISE
        DanglingParentError: If a parent id is unknown under
            DanglingParentPolicy.RAISE
        ConfigurationError: If config fails validation

        All of these are raised before any node is modified.
    """
    config = check_config(config or AssemblyConfig())
    nodes = list(flat_nodes)

    all_nodes = _index_nodes(nodes, config.duplicate_ids)

    if config.dangling_parents is DanglingParentPolicy.RAISE:
        for node in nodes:
            if node.parent is not None and node.parent.id not in all_nodes:
                raise DanglingParentError(node.id, node.parent.id)

    for node in nodes:
        node.children = []

    roots: List[NodeT] = []
    dropped = 0

    for node in nodes:
        if node.parent is None:
            roots.append(node)
            continue

        parent_id = node.parent.id
        parent = all_nodes.get(parent_id)
        if parent is None:
            dropped += 1
            _report_dangling(node, parent_id, config.dangling_parents)
            continue

        node.parent = parent
        parent.children.append(node)

    logger.debug(
        "Assembled %d nodes into %d trees (%d dropped)",
        len(nodes), len(roots), dropped
    )
    return roots


def flatten_trees(forest: Iterable[NodeT]) -> List[NodeT]:
    """Convert a list of trees back into a flat list of nodes.

    Parent and children links are left as they are. Each tree is walked
    pre-order, so the result is not necessarily in the order the nodes
    were originally assembled from.

    Args:
        forest: Root nodes to flatten

    Returns:
        Every node reachable from the roots, root by root, in pre-order
    """
    flat_nodes: List[NodeT] = []

    for root in forest:
        flat_nodes.extend(get_children(root, include_start=True))

    return flat_nodes


def _index_nodes(nodes: List[NodeT], policy: DuplicateIdPolicy) -> Dict[int, NodeT]:
    all_nodes: Dict[int, NodeT] = {}

    for node in nodes:
        if node.id in all_nodes:
            if policy is DuplicateIdPolicy.RAISE:
                raise DuplicateNodeIdError(node.id)
            logger.debug("Duplicate node id %r, keeping the later node", node.id)
        all_nodes[node.id] = node

    return all_nodes


def _report_dangling(node: NodeT, parent_id: int, policy: DanglingParentPolicy) -> None:
    if policy is DanglingParentPolicy.WARN:
        logger.warning(
            "Dropping node %r: parent %r is not in the input", node.id, parent_id
        )
    else:
        logger.debug(
            "Dropping node %r: parent %r is not in the input", node.id, parent_id
        )
