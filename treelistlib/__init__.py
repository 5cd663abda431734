"""TreeListLib - flat record lists to in-memory trees, and back.

TreeListLib links records that each carry an ``id`` and a ``parent``
reference into a forest, flattens forests back into lists, and walks,
searches and measures the result. It works on any object with ``id``,
``parent`` and ``children`` attributes; it never creates nodes of its own.

Functional interface:
    from treelistlib import convert_to_trees, find_node_by_id
    forest = convert_to_trees(rows)

Object interface:
    from treelistlib import TreeAssembler, AssemblyConfig
    assembler = TreeAssembler(AssemblyConfig.strict())
"""

__version__ = "1.0.0"

from .core import (
    TreeListNode,
    SimpleTreeNode,
    convert_to_trees,
    flatten_trees,
    get_children,
    get_parents,
    get_siblings,
    find_node_by_id,
    find_nodes,
    get_depth,
    count_nodes,
    get_leaf_nodes,
    get_tree_stats,
)
from .config import AssemblyConfig, DanglingParentPolicy, DuplicateIdPolicy
from .errors import (
    TreeListError,
    NoParentError,
    DanglingParentError,
    DuplicateNodeIdError,
    ConfigurationError,
)
from .assembler import TreeAssembler

__all__ = [
    "__version__",
    # Core
    "TreeListNode",
    "SimpleTreeNode",
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
    # Config
    "AssemblyConfig",
    "DanglingParentPolicy",
    "DuplicateIdPolicy",
    # Errors
    "TreeListError",
    "NoParentError",
    "DanglingParentError",
    "DuplicateNodeIdError",
    "ConfigurationError",
    # Facade
    "TreeAssembler",
]
