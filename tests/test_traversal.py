"""Tests for the lazy tree walkers: get_children, get_parents, get_siblings."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from treelistlib import (
    NoParentError,
    SimpleTreeNode,
    TreeListError,
    convert_to_trees,
    get_children,
    get_parents,
    get_siblings,
)
from treelistlib.testing import build_chain, build_flat_nodes


@pytest.fixture
def forest():
    """Two trees.

    1
    ├── 2
    │   ├── 4
    │   └── 5
    │       └── 7
    └── 3
        └── 6
    8
    └── 9
    """
    nodes = build_flat_nodes([
        (1, None), (2, 1), (3, 1), (4, 2), (5, 2), (6, 3), (7, 5),
        (8, None), (9, 8),
    ])
    roots = convert_to_trees(nodes)
    return roots, {node.id: node for node in nodes}


def ids(nodes):
    return [node.id for node in nodes]


# get_children

def test_get_children_preorder(forest):
    roots, _ = forest
    assert ids(get_children(roots[0])) == [1, 2, 4, 5, 7, 3, 6]


def test_get_children_excludes_start(forest):
    roots, _ = forest
    result = ids(get_children(roots[0], include_start=False))
    assert result == [2, 4, 5, 7, 3, 6]
    assert 1 not in result


def test_get_children_subtree_only(forest):
    _, by_id = forest
    assert ids(get_children(by_id[2])) == [2, 4, 5, 7]


def test_get_children_leaf(forest):
    _, by_id = forest
    assert ids(get_children(by_id[7])) == [7]
    assert ids(get_children(by_id[7], include_start=False)) == []


def test_get_children_is_lazy_and_restartable(forest):
    roots, _ = forest
    walker = get_children(roots[0])
    assert next(walker).id == 1
    assert next(walker).id == 2
    # Abandon the first walk; a new call starts over
    assert ids(get_children(roots[0]))[:3] == [1, 2, 4]


def test_get_children_treats_missing_children_as_empty():
    node = SimpleTreeNode(1)
    node.children = None
    assert ids(get_children(node)) == [1]


@pytest.mark.slow
def test_get_children_deep_chain():
    """Walking far past the recursion limit must not raise RecursionError."""
    depth = sys.getrecursionlimit() * 5
    nodes = build_chain(depth)
    roots = convert_to_trees(nodes)

    walked = list(get_children(roots[0]))
    assert len(walked) == depth
    assert walked[-1] is nodes[-1]


# get_parents

def test_get_parents_to_root(forest):
    _, by_id = forest
    assert ids(get_parents(by_id[7])) == [7, 5, 2, 1]


def test_get_parents_excludes_start(forest):
    _, by_id = forest
    assert ids(get_parents(by_id[7], include_start=False)) == [5, 2, 1]


def test_get_parents_of_root(forest):
    roots, _ = forest
    assert ids(get_parents(roots[1])) == [8]
    assert ids(get_parents(roots[1], include_start=False)) == []


def test_get_parents_ends_at_depth_zero(forest):
    _, by_id = forest
    chain = list(get_parents(by_id[6]))
    assert chain[-1].parent is None


# get_siblings

def test_get_siblings_includes_start_first(forest):
    _, by_id = forest
    assert ids(get_siblings(by_id[5])) == [5, 4]


def test_get_siblings_stored_order(forest):
    _, by_id = forest
    assert ids(get_siblings(by_id[4], include_start=False)) == [5]
    assert ids(get_siblings(by_id[3], include_start=False)) == [2]


def test_get_siblings_only_child(forest):
    _, by_id = forest
    assert ids(get_siblings(by_id[6], include_start=False)) == []
    assert ids(get_siblings(by_id[6])) == [6]


def test_get_siblings_matches_by_id():
    """A stand-in with the start node's id is not reported as a sibling."""
    parent = SimpleTreeNode(1)
    child = SimpleTreeNode(2, parent)
    twin = SimpleTreeNode(2, parent)
    other = SimpleTreeNode(3, parent)
    parent.children = [twin, other]

    assert ids(get_siblings(child, include_start=False)) == [3]


def test_get_siblings_of_root_raises(forest):
    roots, _ = forest
    with pytest.raises(NoParentError) as exc_info:
        get_siblings(roots[0])

    assert exc_info.value.node_id == 1
    assert "has no parent" in str(exc_info.value)


def test_get_siblings_error_is_value_error():
    root = SimpleTreeNode(1)
    with pytest.raises(ValueError):
        get_siblings(root, include_start=False)
    with pytest.raises(TreeListError):
        get_siblings(root)
