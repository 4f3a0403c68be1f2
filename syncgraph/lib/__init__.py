"""Library utilities for syncgraph.

This package contains integration modules for external libraries.
"""

from syncgraph.lib.nx import to_networkx

__all__ = [
    "to_networkx",
]
