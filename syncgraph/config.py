"""Configuration classes for syncgraph components."""

from dataclasses import dataclass


@dataclass
class PathFinderConfig:
    """Configuration for path finders."""

    # Recursion chain length at which a search branch is abandoned.
    # Bounds stack usage of the recursive depth-first finder.
    max_depth: int = 255

    def validate_depth(self, max_depth: int) -> int:
        """Return ``max_depth`` if usable as a depth bound, else raise ValueError."""
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        return max_depth


# Global configuration instance
PATH_FINDER_CONFIG = PathFinderConfig()
