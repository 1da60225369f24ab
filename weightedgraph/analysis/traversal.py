"""
Breadth-first and depth-first traversal of weighted directed graphs.
"""

import logging
from collections import deque
from typing import Any, Callable, Iterator, Set, Tuple

from ..core.graph import GraphStore

logger = logging.getLogger(__name__)

VisitCallback = Callable[[str, Any], None]


class Traverser:
    """
    Visits every vertex reachable from a start vertex exactly once.

    Each traversal is offered in two forms: a lazy iterator of
    (name, payload) pairs, and a callback form that drains the iterator.
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize the traverser.

        Args:
            graph: GraphStore instance to traverse
        """
        self.graph = graph

    def iter_breadth_first(self, start: str) -> Iterator[Tuple[str, Any]]:
        """
        Iterate over reachable vertices in breadth-first order.

        Args:
            start: Name of the start vertex

        Returns:
            Iterator of (name, payload) pairs

        Raises:
            VertexNotFoundError: If start is not in the graph. Raised on call,
                not on the first next().
        """
        self.graph.require_vertex(start)
        return self._breadth_first(start)

    def iter_depth_first(self, start: str) -> Iterator[Tuple[str, Any]]:
        """
        Iterate over reachable vertices in depth-first order.

        Siblings are pushed on the stack in neighbour order, so without
        sort_neighbors the order among siblings is not specified. With
        sort_neighbors the lexicographically smallest sibling comes first.

        Raises:
            VertexNotFoundError: If start is not in the graph
        """
        self.graph.require_vertex(start)
        return self._depth_first(start)

    def breadth_first(self, start: str, visit: VisitCallback) -> None:
        """Call visit(name, payload) for each reachable vertex, breadth first."""
        count = 0
        for name, data in self.iter_breadth_first(start):
            visit(name, data)
            count += 1
        logger.debug(f"Breadth-first traversal from '{start}' visited {count} vertices")

    def depth_first(self, start: str, visit: VisitCallback) -> None:
        """Call visit(name, payload) for each reachable vertex, depth first."""
        count = 0
        for name, data in self.iter_depth_first(start):
            visit(name, data)
            count += 1
        logger.debug(f"Depth-first traversal from '{start}' visited {count} vertices")

    def _breadth_first(self, start: str) -> Iterator[Tuple[str, Any]]:
        visited: Set[str] = set()
        queue = deque([start])

        while queue:
            current = queue.popleft()
            if current in visited:
                continue

            visited.add(current)
            yield current, self.graph.get_data(current)

            for neighbor, _ in self.graph.neighbors(current):
                if neighbor not in visited:
                    queue.append(neighbor)

    def _depth_first(self, start: str) -> Iterator[Tuple[str, Any]]:
        visited: Set[str] = set()
        stack = [start]

        while stack:
            current = stack.pop()
            if current in visited:
                continue

            visited.add(current)
            yield current, self.graph.get_data(current)

            neighbors = [neighbor for neighbor, _ in self.graph.neighbors(current)]
            # Reversed so the first neighbour is popped first
            for neighbor in reversed(neighbors):
                if neighbor not in visited:
                    stack.append(neighbor)
