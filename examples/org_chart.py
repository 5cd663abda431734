#!/usr/bin/env python3
"""
Assemble an org chart from flat rows and walk it.

This example demonstrates:
- Turning (id, name, manager_id) rows into a forest
- Reporting chains, teams and peers
- Detecting rows that could not be placed
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treelistlib import AssemblyConfig, SimpleTreeNode, TreeAssembler
from treelistlib.testing import PlaceholderParent


class Employee(SimpleTreeNode):
    def __init__(self, id, name, manager_id=None):
        manager = PlaceholderParent(manager_id) if manager_id is not None else None
        super().__init__(id, manager)
        self.name = name


ROWS = [
    (4, "Dana", 2),
    (1, "Alex", None),
    (2, "Blake", 1),
    (3, "Casey", 1),
    (5, "Eli", 2),
    (6, "Frankie", 3),
    (7, "Gray", 42),  # manager left the company
]


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    employees = [Employee(*row) for row in ROWS]
    assembler = TreeAssembler(AssemblyConfig.lenient())
    forest = assembler.convert_to_trees(employees)

    print("Org chart:")
    for node in assembler.flatten_trees(forest):
        print(f"  {'  ' * assembler.get_depth(node)}{node.name}")

    dana = assembler.find_node_by_id(forest, 4)
    chain = " -> ".join(e.name for e in assembler.get_parents(dana))
    print(f"\nReporting chain for {dana.name}: {chain}")

    peers = ", ".join(e.name for e in assembler.get_siblings(dana, include_start=False))
    print(f"Peers of {dana.name}: {peers}")

    missing = assembler.verify_complete(employees, forest)
    if missing:
        print(f"\nUnplaced: {', '.join(e.name for e in missing)}")

    stats = assembler.get_tree_stats(forest)
    print(f"\n{stats['total_nodes']} placed, {stats['max_depth'] + 1} levels")


if __name__ == "__main__":
    main()
