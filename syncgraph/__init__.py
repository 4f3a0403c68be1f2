"""syncgraph: thread-safe in-memory graphs with pluggable path finding.

Primary API:
    new_directed(), new_undirected() - Create an empty graph
    SimpleGraph - Graph container (vertices, edges, path queries)
    Edge, WeightedEdge - Value-compared edge types
    PathFinder, DepthFirstPathFinder - Path finding over adjacency snapshots
    to_networkx() - Export a graph snapshot to NetworkX

Example:
    from syncgraph import Edge, new_directed

    g = new_directed()
    a = g.add_vertex("A")
    b = g.add_vertex("B")
    g.add_edge(Edge(a, b))

    path = g.get_path(a, b)  # (Edge(source=1, target=2),)
"""

from __future__ import annotations

from syncgraph import logging
from syncgraph._version import __version__
from syncgraph.config import PATH_FINDER_CONFIG, PathFinderConfig
from syncgraph.graph.edge import Edge, VertexID, WeightedEdge
from syncgraph.graph.simple_graph import (
    InvalidEndpointError,
    SimpleGraph,
    new_directed,
    new_undirected,
)
from syncgraph.lib.nx import to_networkx
from syncgraph.paths.finder import (
    MAX_DEPTH,
    DepthFirstPathFinder,
    EdgePath,
    PathFinder,
    register_path_finder,
)
from syncgraph.paths.transition import TransitionMap, build_transition_map
from syncgraph.paths.utils import is_chained, path_vertices

__all__ = [
    # Version
    "__version__",
    # Graph
    "SimpleGraph",
    "new_directed",
    "new_undirected",
    "InvalidEndpointError",
    # Edges
    "Edge",
    "WeightedEdge",
    "VertexID",
    # Path finding
    "PathFinder",
    "DepthFirstPathFinder",
    "register_path_finder",
    "MAX_DEPTH",
    "EdgePath",
    "TransitionMap",
    "build_transition_map",
    "is_chained",
    "path_vertices",
    # Configuration
    "PathFinderConfig",
    "PATH_FINDER_CONFIG",
    # Library integrations (NetworkX)
    "to_networkx",
    # Utilities
    "logging",
]
