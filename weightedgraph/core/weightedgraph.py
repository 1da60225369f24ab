"""
Main facade class for weighted directed graphs.

This module provides the Graph class that exposes the whole public API while
delegating to the core store and the analysis components.
"""

import logging
from typing import Iterator, List, Set, Tuple, TypeVar

import numpy as np

from .graph import GraphStore
from ..analysis.pathfinding import PathFinder
from ..analysis.traversal import Traverser, VisitCallback

logger = logging.getLogger(__name__)

E = TypeVar('E')


class Graph(GraphStore[E]):
    """
    Weighted directed graph with named vertices carrying arbitrary payloads.

    Example:
        >>> graph = Graph()
        >>> graph.add_vertex("A", 1)
        >>> graph.add_vertex("B", 2)
        >>> graph.add_directed_edge("A", "B", 7)
        >>> graph.shortest_path("A", "B")
        (7, ['A', 'B'])
    """

    def __init__(self, sort_neighbors: bool = False):
        """
        Initialize an empty graph.

        Args:
            sort_neighbors: Enumerate neighbours lexicographically during
                traversal and search. Makes BFS and DFS orders deterministic.
        """
        super().__init__(sort_neighbors=sort_neighbors)

        # Initialize analysis components
        self._traverser = Traverser(self)
        self._pathfinder = PathFinder(self)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.get_vertex_count()}, edges={self.get_edge_count()})"

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def traverse_breadth_first(self, start: str, visit: VisitCallback) -> None:
        """Call visit(name, payload) once per reachable vertex in breadth-first order."""
        self._traverser.breadth_first(start, visit)

    def traverse_depth_first(self, start: str, visit: VisitCallback) -> None:
        """Call visit(name, payload) once per reachable vertex in depth-first order."""
        self._traverser.depth_first(start, visit)

    def iter_breadth_first(self, start: str) -> Iterator[Tuple[str, E]]:
        """Lazily yield (name, payload) pairs in breadth-first order."""
        return self._traverser.iter_breadth_first(start)

    def iter_depth_first(self, start: str) -> Iterator[Tuple[str, E]]:
        """Lazily yield (name, payload) pairs in depth-first order."""
        return self._traverser.iter_depth_first(start)

    # ========================================================================
    # PATH FINDING
    # ========================================================================

    def shortest_path(self, start: str, end: str) -> Tuple[int, List[str]]:
        """Find the cheapest path from start to end (Dijkstra)."""
        return self._pathfinder.shortest_path(start, end)

    def find_reachable_vertices(self, start: str) -> Set[str]:
        """Find all vertices reachable from start, including start."""
        return self._pathfinder.find_reachable_vertices(start)

    def has_path(self, start: str, end: str) -> bool:
        return self._pathfinder.has_path(start, end)

    # ========================================================================
    # EXPORT
    # ========================================================================

    def to_cost_matrix(self, fill_value: float = np.inf) -> Tuple[List[str], np.ndarray]:
        """
        Build a dense cost matrix for the graph.

        Args:
            fill_value: Value stored where no edge exists

        Returns:
            Tuple of (names, matrix). names is the sorted vertex list and
            matrix[i, j] is the cost of the edge names[i] -> names[j].
        """
        names = sorted(self.get_vertices())
        position = {name: i for i, name in enumerate(names)}
        matrix = np.full((len(names), len(names)), fill_value, dtype=float)

        for start, end, cost in self.iter_edges():
            matrix[position[start], position[end]] = cost

        logger.debug(f"Built {len(names)}x{len(names)} cost matrix")
        return names, matrix
