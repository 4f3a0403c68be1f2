"""Value-compared edge types.

An edge only identifies its endpoints by VertexID. Edges are immutable
(frozen dataclasses) and compare by value, so two edges are equal when
their class and every field match. ``copy()`` and ``reverse()`` go through
:func:`dataclasses.replace`, which keeps the concrete subclass and any
extra fields a subclass declares.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeVar

#: Dense positive integer handle of a vertex, starting at 1.
VertexID = int

E = TypeVar("E", bound="Edge")


@dataclass(frozen=True)
class Edge:
    """Directed pair of vertex IDs.

    Direction is formal: an undirected graph stores the same ``Edge`` and
    synthesizes the reverse orientation when a path is searched.

    Attributes:
        source: ID of the vertex the edge leaves.
        target: ID of the vertex the edge enters. May equal ``source``.
    """

    source: VertexID
    target: VertexID

    def copy(self: E) -> E:
        """Return a new edge equal in value to this one."""
        return replace(self)

    def reverse(self: E) -> E:
        """Return a new edge with ``source`` and ``target`` swapped."""
        return replace(self, source=self.target, target=self.source)

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def __str__(self) -> str:
        return f"({self.source},{self.target})"


@dataclass(frozen=True)
class WeightedEdge(Edge):
    """Edge carrying a floating-point weight.

    The weight survives ``copy()`` and ``reverse()`` and is rendered after a
    ``|`` separator, e.g. ``(1,2|1.5)``.
    """

    weight: float = 0.0

    def __post_init__(self) -> None:
        # Store as float so ``2`` and ``2.0`` render and compare the same way.
        object.__setattr__(self, "weight", float(self.weight))

    def __str__(self) -> str:
        return f"({self.source},{self.target}|{self.weight})"
