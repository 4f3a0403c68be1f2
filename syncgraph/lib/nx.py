"""NetworkX export utilities.

Example:
    >>> from syncgraph import WeightedEdge, new_directed
    >>> from syncgraph.lib.nx import to_networkx
    >>>
    >>> g = new_directed()
    >>> a, b = g.add_vertex("A"), g.add_vertex("B")
    >>> g.add_edge(WeightedEdge(a, b, 2.5))
    >>> G = to_networkx(g)
    >>> G.nodes[a]["value"], G.edges[a, b]["weight"]
    ('A', 2.5)
"""

from __future__ import annotations

from typing import Union

import networkx as nx

from syncgraph.graph.simple_graph import SimpleGraph

NxGraph = Union[nx.DiGraph, nx.Graph]


def to_networkx(graph: SimpleGraph) -> NxGraph:
    """Export a snapshot of *graph* to a NetworkX graph.

    Directed graphs become ``nx.DiGraph`` and undirected graphs ``nx.Graph``.
    Every vertex ID becomes a node with its value under the ``value``
    attribute, including vertices without edges. Edges that carry a
    ``weight`` field export it as the ``weight`` attribute.

    Vertices and edges are read under separate locks, so edges added
    concurrently with the export may or may not be included.

    Args:
        graph: Graph to export.

    Returns:
        A new NetworkX graph; later changes to *graph* do not affect it.
    """
    G: NxGraph = nx.DiGraph() if graph.directed else nx.Graph()

    for vid, value in graph.get_vertex_map().items():
        G.add_node(vid, value=value)

    for edge in graph.get_edges():
        attrs = {}
        weight = getattr(edge, "weight", None)
        if weight is not None:
            attrs["weight"] = weight
        G.add_edge(edge.source, edge.target, **attrs)

    return G
