"""Pluggable path finders.

A path finder receives a fresh :data:`TransitionMap` snapshot through
``set_transition_map()`` and answers one ``find(src, dst)`` query against
it. Finders are cheap, single-query objects; the graph installs a new
snapshot before every search, so a finder never sees concurrent mutation.

Concrete finders can be registered by name with :func:`register_path_finder`
and instantiated with :meth:`PathFinder.create`.
"""

from __future__ import annotations

import abc
from typing import Any, Callable, Dict, List, Optional, Set, Tuple, Type, Union

from syncgraph.config import PATH_FINDER_CONFIG
from syncgraph.graph.edge import Edge, VertexID
from syncgraph.logging import get_logger
from syncgraph.paths.transition import TransitionMap

logger = get_logger(__name__)

#: Recursion chain length at which the depth-first finder abandons a branch.
MAX_DEPTH = PATH_FINDER_CONFIG.max_depth

#: Ordered edges from the source vertex to the destination vertex.
EdgePath = Tuple[Edge, ...]

PATH_FINDER_REGISTRY: Dict[str, Type["PathFinder"]] = {}


def register_path_finder(name: str) -> Callable[[Type["PathFinder"]], Type["PathFinder"]]:
    """Class decorator that registers a concrete :class:`PathFinder` under *name*.

    Raises:
        ValueError: If *name* is already registered.
    """

    def decorator(cls: Type["PathFinder"]) -> Type["PathFinder"]:
        if name in PATH_FINDER_REGISTRY:
            raise ValueError(f"Path finder '{name}' already registered.")
        PATH_FINDER_REGISTRY[name] = cls
        return cls

    return decorator


class PathFinder(abc.ABC):
    """Finds a path between two vertices of a transition map snapshot.

    Subclasses must override :meth:`find`.
    """

    def __init__(self) -> None:
        self._transition_map: Optional[TransitionMap] = None

    def set_transition_map(self, transition_map: TransitionMap) -> None:
        """Install the adjacency snapshot used by the next :meth:`find` call.

        Each key is a vertex ID; each value lists the edges leaving that
        vertex. For undirected graphs every edge appears in both
        orientations, except self-loops.
        """
        self._transition_map = transition_map

    @property
    def transition_map(self) -> TransitionMap:
        if self._transition_map is None:
            raise RuntimeError(
                f"{type(self).__name__} has no transition map; "
                "call set_transition_map() first."
            )
        return self._transition_map

    @abc.abstractmethod
    def find(self, src: VertexID, dst: VertexID) -> EdgePath:
        """Return the edges leading from *src* to *dst*, or ``()`` if none found."""
        ...

    @classmethod
    def create(cls, name: str, **kwargs: Any) -> "PathFinder":
        """Instantiate a registered path finder by *name*.

        Args:
            name: Name given in :func:`register_path_finder`.
            **kwargs: Arguments forwarded to the finder constructor.

        Raises:
            KeyError: If *name* is not registered.
        """
        try:
            impl = PATH_FINDER_REGISTRY[name]
        except KeyError as exc:
            raise KeyError(f"Unknown path finder '{name}'.") from exc
        return impl(**kwargs)


def resolve_path_finder(finder: Union[PathFinder, str, None]) -> PathFinder:
    """Turn a finder argument into a finder instance.

    ``None`` yields a fresh default (``"dfs"``) finder, a string is looked up
    in the registry, and a :class:`PathFinder` instance is returned as is.

    Raises:
        KeyError: If a string names no registered finder.
        TypeError: For any other argument type.
    """
    if finder is None:
        return PathFinder.create("dfs")
    if isinstance(finder, str):
        return PathFinder.create(finder)
    if isinstance(finder, PathFinder):
        return finder
    raise TypeError(
        f"Expected a PathFinder, a registered finder name or None, "
        f"got {type(finder).__name__}"
    )


@register_path_finder("dfs")
class DepthFirstPathFinder(PathFinder):
    """Depth-bounded recursive depth-first search.

    Returns *a* path, not necessarily the shortest one. At each vertex:

      - if any outgoing edge ends at the goal, the first such edge wins;
      - otherwise the targets of all outgoing edges are added to the shared
        ``passed`` set and the edges are explored in transition map order,
        taking the first one whose subtree reaches the goal;
      - a vertex without outgoing edges, or a recursion chain reaching
        ``max_depth``, yields nothing.

    The ``passed`` set is seeded with the source and grows as vertices are
    expanded but is never consulted to prune edges: cycles are bounded only
    by ``max_depth``. Returned paths therefore hold at most
    ``max_depth - 1`` edges.

    Args:
        max_depth: Recursion chain length at which a branch is abandoned.
    """

    def __init__(self, max_depth: int = MAX_DEPTH) -> None:
        super().__init__()
        self.max_depth = PATH_FINDER_CONFIG.validate_depth(max_depth)
        self.passed: Set[VertexID] = set()

    def find(self, src: VertexID, dst: VertexID) -> EdgePath:
        self.passed = {src}
        reversed_path = self._find_reversed_sub_path(src, dst, 1)
        reversed_path.reverse()
        logger.debug(
            f"DFS {src}->{dst}: {len(reversed_path)} edge(s), "
            f"{len(self.passed)} vertices passed"
        )
        return tuple(reversed_path)

    def _find_reversed_sub_path(self, current: VertexID, goal: VertexID, depth: int) -> List[Edge]:
        """Search from *current* and return the found sub-path in reverse order."""
        if depth >= self.max_depth:
            return []

        out_edges = self.transition_map.get(current)
        if not out_edges:
            return []

        for edge in out_edges:
            if edge.target == goal:
                return [edge]

        self.passed.update(edge.target for edge in out_edges)

        for edge in out_edges:
            sub_path = self._find_reversed_sub_path(edge.target, goal, depth + 1)
            if sub_path:
                sub_path.append(edge)
                return sub_path
        return []


@register_path_finder("classic-dfs")
class ClassicDepthFirstPathFinder(PathFinder):
    """Depth-first search that remembers the shallowest depth of each vertex.

    Uses an explicit work stack instead of recursion. Edge order, the goal
    short-circuit and the depth bound match :class:`DepthFirstPathFinder`,
    but a vertex is entered again only when reached at a smaller depth than
    before. Each vertex is therefore entered at most ``max_depth`` times,
    and a route cut off by the depth bound never hides a shorter route to
    the same vertex. Like the default finder it returns *a* path, not
    necessarily the shortest one.

    Args:
        max_depth: Path length (in edges) at which a branch is abandoned;
            returned paths hold at most ``max_depth - 1`` edges.
    """

    def __init__(self, max_depth: int = MAX_DEPTH) -> None:
        super().__init__()
        self.max_depth = PATH_FINDER_CONFIG.validate_depth(max_depth)

    def find(self, src: VertexID, dst: VertexID) -> EdgePath:
        transition_map = self.transition_map
        # Shallowest stack depth at which each vertex was entered
        best_depth: Dict[VertexID, int] = {src: 1}
        path: List[Edge] = []
        # Each stack entry: (vertex, index of the next outgoing edge to try)
        stack: List[List[Any]] = [[src, 0]]

        while stack:
            frame = stack[-1]
            vertex, next_idx = frame
            out_edges = transition_map.get(vertex, ())

            if next_idx == 0:
                goal_edge = next((e for e in out_edges if e.target == dst), None)
                if goal_edge is not None and len(stack) < self.max_depth:
                    path.append(goal_edge)
                    return tuple(path)

            if len(stack) >= self.max_depth or next_idx >= len(out_edges):
                stack.pop()
                if path:
                    path.pop()
                continue

            frame[1] = next_idx + 1
            edge = out_edges[next_idx]
            depth = len(stack) + 1
            known = best_depth.get(edge.target)
            if known is not None and known <= depth:
                continue
            best_depth[edge.target] = depth
            path.append(edge)
            stack.append([edge.target, 0])

        return ()
