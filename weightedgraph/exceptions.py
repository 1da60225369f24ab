"""
Exceptions raised by weightedgraph.
"""


class GraphError(Exception):
    """Base exception for weightedgraph"""
    pass


class VertexNotFoundError(GraphError, LookupError):
    """A vertex name is not present in the graph"""

    def __init__(self, name: str):
        super().__init__(f"Vertex '{name}' does not exist in graph")
        self.name = name


class EdgeNotFoundError(GraphError, LookupError):
    """Both vertices exist but no directed edge connects them"""

    def __init__(self, start: str, end: str):
        super().__init__(f"No edge from '{start}' to '{end}'")
        self.start = start
        self.end = end
