"""Core node contract and tree operations for TreeListLib.

Everything here is a plain function over the TreeListNode contract. The
TreeAssembler facade in treelistlib.assembler binds them to a config.
"""

from .node import TreeListNode, SimpleTreeNode, as_forest
from .construction import convert_to_trees, flatten_trees
from .traversal import get_children, get_parents, get_siblings
from .search import find_node_by_id, find_nodes
from .metrics import get_depth, count_nodes, get_leaf_nodes, get_tree_stats

__all__ = [
    "TreeListNode",
    "SimpleTreeNode",
    "as_forest",
    "convert_to_trees",
    "flatten_trees",
    "get_children",
    "get_parents",
    "get_siblings",
    "find_node_by_id",
    "find_nodes",
    "get_depth",
    "count_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
]
