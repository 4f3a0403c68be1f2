"""Read-only adjacency snapshots consumed by path finders."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from syncgraph.graph.edge import Edge, VertexID

#: Maps a vertex ID to the edges leaving that vertex. A missing key means
#: the vertex has no outgoing edges.
TransitionMap = Mapping[VertexID, Tuple[Edge, ...]]


def build_transition_map(edges: Iterable[Edge], directed: bool) -> TransitionMap:
    """Group edges by their source vertex into an immutable mapping.

    For undirected graphs each edge also contributes its reverse, except
    self-loops, which are listed once. Reverse copies are appended after all
    forward edges, so per-vertex order is: forward edges in input order,
    then reversed edges in input order.

    Args:
        edges: Edges to project. They are used as given; callers pass copies
            when the originals belong to a mutable container.
        directed: If False, synthesize reverse orientations.

    Returns:
        A read-only mapping of vertex ID to a tuple of outgoing edges.
    """
    oriented: List[Edge] = list(edges)
    if not directed:
        oriented.extend([edge.reverse() for edge in oriented if not edge.is_self_loop])

    grouped: Dict[VertexID, List[Edge]] = {}
    for edge in oriented:
        grouped.setdefault(edge.source, []).append(edge)

    return MappingProxyType({vid: tuple(out) for vid, out in grouped.items()})
