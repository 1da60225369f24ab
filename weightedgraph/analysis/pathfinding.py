"""
Path finding and reachability analysis for weighted directed graphs.

This module provides Dijkstra's shortest path and reachability queries.
"""

import heapq
import logging
import math
from collections import deque
from typing import Dict, List, Optional, Set, Tuple

from ..core.graph import GraphStore

logger = logging.getLogger(__name__)

# Returned by shortest_path when the end vertex cannot be reached
NO_PATH_COST = -1
NO_PATH_MARKER = "None"


class PathFinder:
    """
    Path finding algorithms for weighted directed graphs.

    This class provides methods for:
    - Finding the cheapest path between two vertices (Dijkstra)
    - Finding all vertices reachable from a start vertex
    - Checking whether any path connects two vertices
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize the path finder.

        Args:
            graph: GraphStore instance to analyze
        """
        self.graph = graph

    def shortest_path(self, start: str, end: str) -> Tuple[int, List[str]]:
        """
        Find the cheapest path from start to end using Dijkstra's algorithm.

        Edge costs must be non-negative. Results for graphs with negative
        costs are undefined.

        Args:
            start: Name of the start vertex
            end: Name of the end vertex

        Returns:
            Tuple of (cost, path) where path lists vertex names from start to
            end. If end is unreachable, returns (NO_PATH_COST, [NO_PATH_MARKER]).

        Raises:
            VertexNotFoundError: If either vertex is not in the graph
        """
        self.graph.require_vertex(start)
        self.graph.require_vertex(end)

        distances: Dict[str, float] = {name: math.inf for name in self.graph.get_vertices()}
        distances[start] = 0
        previous: Dict[str, Optional[str]] = {start: None}
        finalized: Set[str] = set()
        frontier: List[Tuple[float, str]] = [(0, start)]

        while frontier:
            distance, current = heapq.heappop(frontier)
            if current in finalized:
                # Stale entry left behind by a later, cheaper relaxation
                continue
            finalized.add(current)

            if current == end:
                path = self._reconstruct_path(previous, end)
                logger.debug(f"Shortest path '{start}' -> '{end}': cost {distance}, {len(path)} vertices")
                return distance, path

            for neighbor, cost in self.graph.neighbors(current):
                if neighbor in finalized:
                    continue
                new_distance = distance + cost
                if new_distance < distances[neighbor]:
                    distances[neighbor] = new_distance
                    previous[neighbor] = current
                    heapq.heappush(frontier, (new_distance, neighbor))

        logger.debug(f"No path from '{start}' to '{end}'")
        return NO_PATH_COST, [NO_PATH_MARKER]

    @staticmethod
    def _reconstruct_path(previous: Dict[str, Optional[str]], end: str) -> List[str]:
        path = []
        current: Optional[str] = end
        while current is not None:
            path.append(current)
            current = previous[current]
        path.reverse()
        return path

    def find_reachable_vertices(self, start: str) -> Set[str]:
        """
        Find all vertices reachable from start, including start itself.

        Args:
            start: Name of the start vertex

        Returns:
            Set of reachable vertex names

        Raises:
            VertexNotFoundError: If start is not in the graph
        """
        self.graph.require_vertex(start)
        reachable = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor, _ in self.graph.neighbors(current):
                if neighbor not in reachable:
                    reachable.add(neighbor)
                    queue.append(neighbor)

        return reachable

    def has_path(self, start: str, end: str) -> bool:
        """
        Check whether end can be reached from start.

        Raises:
            VertexNotFoundError: If either vertex is not in the graph
        """
        self.graph.require_vertex(end)
        return end in self.find_reachable_vertices(start)
