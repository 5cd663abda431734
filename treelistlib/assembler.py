"""TreeAssembler: object interface over the TreeListLib operations.

The functions in treelistlib.core are enough for most uses. TreeAssembler
is for code that wants to carry one validated AssemblyConfig around and
reach every operation through a single object.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union

from .config import AssemblyConfig, check_config
from .core.node import NodeT
from .core import construction, metrics, search, traversal


class TreeAssembler:
    """Builds forests from flat node lists and walks them.

    Example:
        >>> assembler = TreeAssembler(AssemblyConfig.strict())
        >>> forest = assembler.convert_to_trees(rows)
        >>> node = assembler.find_node_by_id(forest, 42)
        >>> path = [n.id for n in assembler.get_parents(node)]
    """

    def __init__(self, config: Optional[AssemblyConfig] = None):
        """Create an assembler and validate its configuration.

        Args:
            config: Assembly policies (defaults to AssemblyConfig())

        Raises:
            ConfigurationError: If the config fails validation
        """
        self.config = check_config(config or AssemblyConfig())

    # Construction

    def convert_to_trees(self, flat_nodes: Iterable[NodeT]) -> List[NodeT]:
        return construction.convert_to_trees(flat_nodes, self.config)

    def flatten_trees(self, forest: Iterable[NodeT]) -> List[NodeT]:
        return construction.flatten_trees(forest)

    def verify_complete(self, flat_nodes: Iterable[NodeT], forest: Iterable[NodeT]) -> List[NodeT]:
        """Find input nodes that did not make it into the forest.

        With the default drop policy a dangling node, and everything under
        it, is silently left out of convert_to_trees' result. This reports
        those nodes so callers can decide what to do about them.

        Args:
            flat_nodes: The nodes that were passed to convert_to_trees
            forest: The forest it returned

        Returns:
            Missing nodes, in input order (empty if the forest is complete)
        """
        reachable = {id(node) for node in construction.flatten_trees(forest)}
        return [node for node in flat_nodes if id(node) not in reachable]

    # Traversal

    def get_children(self, start_node: NodeT, include_start: bool = True) -> Iterator[NodeT]:
        return traversal.get_children(start_node, include_start)

    def get_parents(self, start_node: NodeT, include_start: bool = True) -> Iterator[NodeT]:
        return traversal.get_parents(start_node, include_start)

    def get_siblings(self, start_node: NodeT, include_start: bool = True) -> Iterator[NodeT]:
        return traversal.get_siblings(start_node, include_start)

    # Search

    def find_node_by_id(self, forest: Union[NodeT, Iterable[NodeT]], node_id: int) -> Optional[NodeT]:
        return search.find_node_by_id(forest, node_id)

    def find_nodes(self, forest: Union[NodeT, Iterable[NodeT]],
                   predicate: Callable[[NodeT], bool]) -> Iterator[NodeT]:
        return search.find_nodes(forest, predicate)

    # Metrics

    def get_depth(self, node: NodeT) -> int:
        return metrics.get_depth(node)

    def count_nodes(self, forest: Union[NodeT, Iterable[NodeT]]) -> int:
        return metrics.count_nodes(forest)

    def get_leaf_nodes(self, forest: Union[NodeT, Iterable[NodeT]]) -> Iterator[NodeT]:
        return metrics.get_leaf_nodes(forest)

    def get_tree_stats(self, forest: Union[NodeT, Iterable[NodeT]]) -> Dict[str, Any]:
        return metrics.get_tree_stats(forest)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config!r})"
