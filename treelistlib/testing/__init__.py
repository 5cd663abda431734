"""Testing utilities for TreeListLib consumers."""

from .fixtures import PlaceholderParent, build_flat_nodes, build_chain

__all__ = ['PlaceholderParent', 'build_flat_nodes', 'build_chain']
