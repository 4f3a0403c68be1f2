"""Helpers for inspecting edge paths returned by path finders."""

from __future__ import annotations

from typing import List, Sequence

from syncgraph.graph.edge import Edge, VertexID


def is_chained(path: Sequence[Edge]) -> bool:
    """Return True if every edge starts where the previous one ends.

    An empty or single-edge path is trivially chained.
    """
    return all(prev.target == nxt.source for prev, nxt in zip(path, path[1:]))


def path_vertices(path: Sequence[Edge]) -> List[VertexID]:
    """Return the vertex IDs visited along an edge path, in order.

    Args:
        path: Chained sequence of edges, as returned by a path finder.

    Returns:
        ``[path[0].source, path[0].target, path[1].target, ...]``; an empty
        list for an empty path.

    Raises:
        ValueError: If consecutive edges do not share an endpoint.
    """
    if not path:
        return []
    if not is_chained(path):
        raise ValueError(f"Edges do not form a chain: {', '.join(map(str, path))}")
    return [path[0].source] + [edge.target for edge in path]
