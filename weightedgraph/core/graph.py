"""
Core graph data structure for weighted directed graphs.

This module provides the fundamental graph structure without traversal or
search operations.
"""

import logging
from typing import Dict, Generic, Iterator, List, Set, Tuple, TypeVar

from ..exceptions import EdgeNotFoundError, VertexNotFoundError

logger = logging.getLogger(__name__)

E = TypeVar('E')


class GraphStore(Generic[E]):
    """
    Core storage for a weighted directed graph.

    Two name-indexed maps hold all state:
    - payload by vertex name
    - outgoing edges by vertex name (target name -> integer cost)

    Every vertex has an outgoing-edge mapping, possibly empty. Edges may only
    reference vertices that already exist.
    """

    def __init__(self, sort_neighbors: bool = False):
        """
        Initialize an empty graph.

        Args:
            sort_neighbors: Enumerate neighbours in lexicographic order instead
                of edge insertion order
        """
        self.sort_neighbors = sort_neighbors
        self._data: Dict[str, E] = {}
        self._adjacency: Dict[str, Dict[str, int]] = {}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_vertex(self, name: str, data: E) -> None:
        """
        Add a vertex, or overwrite an existing one.

        Overwriting replaces the payload and resets the vertex's outgoing
        edges to empty. Edges from other vertices into it are kept.

        Args:
            name: Unique vertex name
            data: Payload associated with the vertex
        """
        replaced = name in self._data
        self._data[name] = data
        self._adjacency[name] = {}
        if replaced:
            logger.debug(f"Replaced vertex '{name}' and cleared its outgoing edges")
        else:
            logger.debug(f"Added vertex '{name}'")

    def add_directed_edge(self, start: str, end: str, cost: int) -> None:
        """
        Add a directed edge from start to end, overwriting any previous cost.

        Args:
            start: Name of the start vertex
            end: Name of the end vertex
            cost: Cost of travelling the edge

        Raises:
            VertexNotFoundError: If either vertex is not in the graph
        """
        self.require_vertex(start)
        self.require_vertex(end)
        self._adjacency[start][end] = cost
        logger.debug(f"Added edge '{start}' -> '{end}' with cost {cost}")

    # ========================================================================
    # QUERIES
    # ========================================================================

    def require_vertex(self, name: str) -> None:
        """Raise VertexNotFoundError unless name is a vertex of the graph."""
        if name not in self._data:
            raise VertexNotFoundError(name)

    def has_vertex(self, name: str) -> bool:
        return name in self._data

    def has_edge(self, start: str, end: str) -> bool:
        return start in self._adjacency and end in self._adjacency[start]

    def get_vertices(self) -> Set[str]:
        """Get the names of all vertices. The returned set is a copy."""
        return set(self._data)

    def get_vertex_count(self) -> int:
        return len(self._data)

    def get_edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

    def get_data(self, name: str) -> E:
        """
        Get the payload stored with a vertex.

        Args:
            name: Vertex name

        Returns:
            The payload last assigned by add_vertex

        Raises:
            VertexNotFoundError: If the vertex is not in the graph
        """
        self.require_vertex(name)
        return self._data[name]

    def get_adjacent_vertices(self, name: str) -> Dict[str, int]:
        """
        Get the outgoing edges of a vertex.

        Args:
            name: Vertex name

        Returns:
            A new dict mapping each adjacent vertex name to the edge cost

        Raises:
            VertexNotFoundError: If the vertex is not in the graph
        """
        self.require_vertex(name)
        return dict(self._adjacency[name])

    def get_cost(self, start: str, end: str) -> int:
        """
        Get the cost of the directed edge from start to end.

        Raises:
            VertexNotFoundError: If either vertex is not in the graph
            EdgeNotFoundError: If both vertices exist but are not connected
        """
        self.require_vertex(start)
        self.require_vertex(end)
        try:
            return self._adjacency[start][end]
        except KeyError:
            raise EdgeNotFoundError(start, end) from None

    def neighbors(self, name: str) -> Iterator[Tuple[str, int]]:
        """
        Iterate over (neighbour, cost) pairs of an existing vertex.

        Order follows edge insertion, or name order when sort_neighbors is set.
        No existence check is made; algorithms validate their inputs first.
        """
        edges = self._adjacency[name]
        if self.sort_neighbors:
            return iter(sorted(edges.items()))
        return iter(list(edges.items()))

    def iter_edges(self) -> Iterator[Tuple[str, str, int]]:
        """Iterate over all edges as (start, end, cost) in sorted order."""
        for start in sorted(self._adjacency):
            for end, cost in sorted(self._adjacency[start].items()):
                yield start, end, cost

    def get_sources(self) -> List[str]:
        """Get vertices with no incoming edges, sorted by name."""
        targets = {end for edges in self._adjacency.values() for end in edges}
        return sorted(name for name in self._data if name not in targets)

    def get_sinks(self) -> List[str]:
        """Get vertices with no outgoing edges, sorted by name."""
        return sorted(name for name, edges in self._adjacency.items() if not edges)

    # ========================================================================
    # RENDERING
    # ========================================================================

    def to_display_string(self) -> str:
        """
        Render the graph as text with vertices and edges in sorted order.

        Example:
            Vertices: [A, B]
            Edges:
            Vertex(A)--->{B=3}
            Vertex(B)--->{}
        """
        names = sorted(self._data)
        lines = [f"Vertices: [{', '.join(names)}]", "Edges:"]
        for name in names:
            edges = ', '.join(f"{end}={cost}" for end, cost in sorted(self._adjacency[name].items()))
            lines.append(f"Vertex({name})--->{{{edges}}}")
        return '\n'.join(lines) + '\n'

    def __str__(self) -> str:
        return self.to_display_string()
