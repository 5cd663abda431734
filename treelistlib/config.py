"""Configuration system for TreeListLib.

Assembly is deterministic and has no tuning knobs beyond how to treat
malformed input: parent references that don't resolve, and ids that appear
more than once.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from .errors import ConfigurationError


class DanglingParentPolicy(Enum):
    """What convert_to_trees does with a node whose parent id is unknown."""
    DROP = "drop"      # Silently leave the node out of the forest
    WARN = "warn"      # Leave it out, but log a warning
    RAISE = "raise"    # Raise DanglingParentError


class DuplicateIdPolicy(Enum):
    """What convert_to_trees does when two input nodes share an id."""
    RAISE = "raise"           # Raise DuplicateNodeIdError
    LAST_WINS = "last_wins"   # Later node replaces earlier one in the lookup


@dataclass
class AssemblyConfig:
    """Configuration for flat-list to forest assembly.

    The defaults reproduce the long-standing behavior: unresolved parents are
    dropped without a diagnostic and duplicate ids are rejected. Stricter or
    more forgiving handling is opt-in.
    """

    dangling_parents: DanglingParentPolicy = DanglingParentPolicy.DROP
    duplicate_ids: DuplicateIdPolicy = DuplicateIdPolicy.RAISE

    # Convenience constructors for common configurations

    @classmethod
    def strict(cls) -> 'AssemblyConfig':
        """Create config that rejects any malformed input.

        Returns:
            AssemblyConfig raising on dangling parents and duplicate ids
        """
        return cls(
            dangling_parents=DanglingParentPolicy.RAISE,
            duplicate_ids=DuplicateIdPolicy.RAISE,
        )

    @classmethod
    def lenient(cls) -> 'AssemblyConfig':
        """Create config that assembles whatever it can.

        Returns:
            AssemblyConfig warning on dangling parents, last duplicate wins
        """
        return cls(
            dangling_parents=DanglingParentPolicy.WARN,
            duplicate_ids=DuplicateIdPolicy.LAST_WINS,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.dangling_parents, DanglingParentPolicy):
            errors.append(
                f"dangling_parents must be a DanglingParentPolicy, "
                f"got {self.dangling_parents!r}"
            )

        if not isinstance(self.duplicate_ids, DuplicateIdPolicy):
            errors.append(
                f"duplicate_ids must be a DuplicateIdPolicy, "
                f"got {self.duplicate_ids!r}"
            )

        return errors


def check_config(config: AssemblyConfig) -> AssemblyConfig:
    """Validate a configuration, raising if it has problems.

    Args:
        config: Configuration to check

    Returns:
        The same config, for chaining

    Raises:
        ConfigurationError: If config.validate() reports any errors
    """
    config_errors = config.validate()
    if config_errors:
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )
    return config
