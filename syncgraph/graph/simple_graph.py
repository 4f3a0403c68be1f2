"""Thread-safe in-memory graph with user-valued vertices.

`SimpleGraph` owns a vertex store and an edge set, each guarded by its own
:class:`~syncgraph.utils.locks.ReadWriteLock`. Vertices receive dense IDs
starting at 1; edges are validated against the highest assigned ID and
stored once per value. Path queries run against a transition map snapshot
built under a short read lock, so concurrent mutation never affects an
in-flight search.

Vertices and edges are append-only. Vertex values are caller-owned objects
and are not synchronized by the graph.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar, Union

from syncgraph.graph.edge import Edge, VertexID
from syncgraph.logging import get_logger
from syncgraph.paths.finder import EdgePath, PathFinder, resolve_path_finder
from syncgraph.paths.transition import TransitionMap, build_transition_map
from syncgraph.utils.locks import ReadWriteLock

logger = get_logger(__name__)

V = TypeVar("V")


class InvalidEndpointError(ValueError):
    """Raised when an edge references a vertex ID that was never assigned.

    Attributes:
        source: Source vertex ID of the rejected edge.
        target: Target vertex ID of the rejected edge.
    """

    def __init__(self, source: VertexID, target: VertexID) -> None:
        super().__init__(f"Unable to add edge: vertex {source} or {target} not found.")
        self.source = source
        self.target = target


class SimpleGraph(Generic[V]):
    """Directed or undirected graph of user values joined by value-compared edges.

    Use :meth:`new_directed` or :meth:`new_undirected` to create instances.

    Args:
        directed: Whether an edge (u, v) is traversable only from u to v.
        vertex_capacity: Expected vertex count (accepted for API parity;
            Python lists grow on demand).
        edge_capacity: Expected edge count (see ``vertex_capacity``).
    """

    def __init__(
        self,
        directed: bool = True,
        vertex_capacity: int = 0,
        edge_capacity: int = 0,
    ) -> None:
        if vertex_capacity < 0 or edge_capacity < 0:
            raise ValueError("Capacity hints must be non-negative.")
        self._directed = directed
        # Vertex ID n lives at index n - 1.
        self._vertices: List[Optional[V]] = []
        # Insertion-ordered set: keys are edges, values unused.
        self._edges: Dict[Edge, None] = {}
        self._vertex_lock = ReadWriteLock()
        self._edge_lock = ReadWriteLock()

    @classmethod
    def new_directed(cls, vertex_capacity: int = 0, edge_capacity: int = 0) -> "SimpleGraph[Any]":
        """Return an empty directed graph."""
        return cls(True, vertex_capacity, edge_capacity)

    @classmethod
    def new_undirected(cls, vertex_capacity: int = 0, edge_capacity: int = 0) -> "SimpleGraph[Any]":
        """Return an empty undirected graph."""
        return cls(False, vertex_capacity, edge_capacity)

    @property
    def directed(self) -> bool:
        return self._directed

    #
    # Vertex management
    #
    def add_vertex(self, value: Optional[V] = None) -> VertexID:
        """Append a vertex holding *value* and return its ID.

        IDs are assigned consecutively from 1 and never reused. Concurrent
        callers each receive a distinct ID.
        """
        with self._vertex_lock.write_locked():
            self._vertices.append(value)
            return len(self._vertices)

    def get_vertices(self) -> List[Optional[V]]:
        """Return a new list of vertex values ordered by ascending vertex ID."""
        with self._vertex_lock.read_locked():
            return list(self._vertices)

    def get_vertex_map(self) -> Dict[VertexID, Optional[V]]:
        """Return a new ``{vertex_id: value}`` dict ordered by ascending vertex ID."""
        with self._vertex_lock.read_locked():
            return {vid: value for vid, value in enumerate(self._vertices, start=1)}

    def get_vertex(self, vertex_id: VertexID) -> Optional[V]:
        """Return the value held by *vertex_id*.

        Raises:
            KeyError: If no vertex has this ID.
        """
        with self._vertex_lock.read_locked():
            if not 1 <= vertex_id <= len(self._vertices):
                raise KeyError(f"Vertex {vertex_id} not found.")
            return self._vertices[vertex_id - 1]

    def vertex_count(self) -> int:
        with self._vertex_lock.read_locked():
            return len(self._vertices)

    def __len__(self) -> int:
        return self.vertex_count()

    def apply(self, fn: Callable[[Optional[V]], Optional[V]]) -> None:
        """Replace every vertex value with ``fn(value)``, in ascending ID order.

        Runs under the vertex write lock, so concurrent ``apply`` calls are
        serialized and readers never observe a partially applied batch. If
        *fn* raises, values already replaced keep their new value and the
        exception propagates. *fn* must not call back into this graph's
        vertex methods; the write lock is not reentrant.
        """
        with self._vertex_lock.write_locked():
            for idx, value in enumerate(self._vertices):
                self._vertices[idx] = fn(value)

    #
    # Edge management
    #
    def add_edge(self, edge: Edge) -> None:
        """Insert *edge* unless an equal edge is already present.

        Both endpoints must lie in ``[1, max_vertex_id]`` at call time.
        Vertex IDs only grow, so a passing check stays valid while the edge
        lock is acquired.

        Raises:
            TypeError: If *edge* is not an :class:`Edge`.
            InvalidEndpointError: If either endpoint is not an assigned ID.
        """
        if not isinstance(edge, Edge):
            raise TypeError(f"Expected an Edge, got {type(edge).__name__}")

        with self._vertex_lock.read_locked():
            max_id = len(self._vertices)

        if not (1 <= edge.source <= max_id and 1 <= edge.target <= max_id):
            logger.debug(f"Rejected edge {edge}: highest vertex ID is {max_id}")
            raise InvalidEndpointError(edge.source, edge.target)

        with self._edge_lock.write_locked():
            self._edges.setdefault(edge, None)

    def get_edges(self) -> List[Edge]:
        """Return a new list of the stored edges in insertion order.

        Undirected graphs store each edge once, in the orientation it was added.
        """
        with self._edge_lock.read_locked():
            return list(self._edges)

    def edge_count(self) -> int:
        with self._edge_lock.read_locked():
            return len(self._edges)

    #
    # Path finding
    #
    def transition_map(self) -> TransitionMap:
        """Build a read-only adjacency snapshot of the current edge set.

        Edge copies are taken under the edge read lock; orientation and
        grouping happen afterwards on the private copies.
        """
        with self._edge_lock.read_locked():
            edge_copies = [edge.copy() for edge in self._edges]
        return build_transition_map(edge_copies, self._directed)

    def get_path(
        self,
        src: VertexID,
        dst: VertexID,
        finder: Union[PathFinder, str, None] = None,
    ) -> EdgePath:
        """Return edges leading from *src* to *dst*, or ``()`` if none was found.

        The result is oriented from *src* to *dst* even for undirected graphs,
        so edges of an undirected graph may appear reversed relative to how
        they were added.

        Args:
            src: ID of the first vertex of the path.
            dst: ID of the last vertex of the path.
            finder: A :class:`PathFinder` instance, the name of a registered
                finder, or None for a fresh depth-first finder.

        Returns:
            Tuple of edges with ``path[0].source == src`` and
            ``path[-1].target == dst``. Not necessarily a shortest path.
        """
        path_finder = resolve_path_finder(finder)
        path_finder.set_transition_map(self.transition_map())
        path = path_finder.find(src, dst)
        logger.debug(
            f"get_path {src}->{dst} with {type(path_finder).__name__}: "
            f"{len(path)} edge(s)"
        )
        return path

    def __str__(self) -> str:
        with self._edge_lock.read_locked():
            return ",".join(str(edge) for edge in self._edges)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"SimpleGraph({kind}, vertices={self.vertex_count()}, edges={self.edge_count()})"


def new_directed(vertex_capacity: int = 0, edge_capacity: int = 0) -> SimpleGraph[Any]:
    """Return an empty directed graph."""
    return SimpleGraph.new_directed(vertex_capacity, edge_capacity)


def new_undirected(vertex_capacity: int = 0, edge_capacity: int = 0) -> SimpleGraph[Any]:
    """Return an empty undirected graph."""
    return SimpleGraph.new_undirected(vertex_capacity, edge_capacity)
