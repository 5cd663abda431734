"""Exceptions raised by TreeListLib.

Every error derives from TreeListError, and also from the builtin exception
that best describes it, so callers can catch either.
"""

from typing import Any


class TreeListError(Exception):
    """Base class for all TreeListLib errors."""
    pass


class NoParentError(TreeListError, ValueError):
    """Raised when an operation needs a parent but the node is a root."""

    def __init__(self, node_id: Any, operation: str = "get_siblings"):
        self.node_id = node_id
        self.operation = operation
        super().__init__(
            f"{operation}: node {node_id!r} has no parent"
        )


class DanglingParentError(TreeListError, LookupError):
    """Raised when a node's parent id is missing from the assembled input.

    Only raised under DanglingParentPolicy.RAISE; the default policy drops
    such nodes instead.
    """

    def __init__(self, node_id: Any, parent_id: Any):
        self.node_id = node_id
        self.parent_id = parent_id
        super().__init__(
            f"Node {node_id!r} references parent {parent_id!r}, "
            f"which is not in the input"
        )


class DuplicateNodeIdError(TreeListError, ValueError):
    """Raised when two input nodes share the same id."""

    def __init__(self, node_id: Any):
        self.node_id = node_id
        super().__init__(f"Duplicate node id: {node_id!r}")


class ConfigurationError(TreeListError, ValueError):
    """Raised when an AssemblyConfig fails validation."""
    pass
