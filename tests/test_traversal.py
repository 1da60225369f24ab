from collections import deque

import pytest

from weightedgraph import Graph, GraphStore, VertexNotFoundError
from weightedgraph.analysis import Traverser


def hop_distances(graph, start):
    """Edge-count distance of every vertex reachable from start."""
    distances = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in graph.get_adjacent_vertices(current):
            if neighbor not in distances:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)
    return distances


def collect(traverse, start):
    visited = []
    traverse(start, lambda name, data: visited.append((name, data)))
    return visited


@pytest.mark.parametrize("method", ["traverse_breadth_first", "traverse_depth_first"])
def test_visits_reachable_vertices_exactly_once(sample_graph, method):
    visited = collect(getattr(sample_graph, method), "A")
    names = [name for name, _ in visited]
    assert len(names) == len(set(names))
    assert set(names) == sample_graph.find_reachable_vertices("A")
    assert names[0] == "A"


@pytest.mark.parametrize("method", ["traverse_breadth_first", "traverse_depth_first"])
def test_callback_receives_payload(sample_graph, method):
    visited = collect(getattr(sample_graph, method), "B")
    assert dict(visited) == {"B": "b", "C": "c", "D": "d"}


@pytest.mark.parametrize("method", ["traverse_breadth_first", "traverse_depth_first"])
def test_does_not_cross_into_unreachable_component(two_components, method):
    visited = collect(getattr(two_components, method), "A")
    assert {name for name, _ in visited} == {"A", "B"}


@pytest.mark.parametrize("method", ["traverse_breadth_first", "traverse_depth_first"])
def test_unknown_start_vertex(sample_graph, method):
    calls = []
    with pytest.raises(VertexNotFoundError):
        getattr(sample_graph, method)("Z", lambda name, data: calls.append(name))
    assert calls == []


@pytest.mark.parametrize("method", ["iter_breadth_first", "iter_depth_first"])
def test_iterators_raise_before_first_item(sample_graph, method):
    with pytest.raises(VertexNotFoundError):
        getattr(sample_graph, method)("Z")


def test_breadth_first_follows_layer_order():
    graph = Graph()
    for name in "ABCDEFG":
        graph.add_vertex(name, None)
    for start, end in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"),
                       ("D", "E"), ("A", "F"), ("F", "G"), ("G", "E")]:
        graph.add_directed_edge(start, end, 1)

    distances = hop_distances(graph, "A")
    order = [name for name, _ in graph.iter_breadth_first("A")]
    layers = [distances[name] for name in order]
    assert layers == sorted(layers)
    assert set(order) == set(distances)


def test_breadth_first_sorted_order(tree_graph):
    order = [name for name, _ in tree_graph.iter_breadth_first("A")]
    assert order == ["A", "B", "C", "D", "E", "F"]


def test_depth_first_sorted_order(tree_graph):
    order = [name for name, _ in tree_graph.iter_depth_first("A")]
    assert order == ["A", "B", "D", "F", "C", "E"]


def test_traversal_terminates_on_cycles():
    graph = Graph(sort_neighbors=True)
    for name in "ABC":
        graph.add_vertex(name, None)
    graph.add_directed_edge("A", "B", 1)
    graph.add_directed_edge("B", "C", 1)
    graph.add_directed_edge("C", "A", 1)
    graph.add_directed_edge("C", "C", 1)

    assert [name for name, _ in graph.iter_breadth_first("B")] == ["B", "C", "A"]
    assert [name for name, _ in graph.iter_depth_first("B")] == ["B", "C", "A"]


def test_single_vertex_traversal():
    graph = Graph()
    graph.add_vertex("solo", 42)
    assert list(graph.iter_breadth_first("solo")) == [("solo", 42)]
    assert list(graph.iter_depth_first("solo")) == [("solo", 42)]


def test_iterator_is_lazy(sample_graph):
    iterator = sample_graph.iter_breadth_first("A")
    assert next(iterator) == ("A", "a")


def test_traverser_on_plain_store():
    store = GraphStore()
    store.add_vertex("x", 1)
    store.add_vertex("y", 2)
    store.add_directed_edge("x", "y", 5)
    traverser = Traverser(store)
    assert list(traverser.iter_depth_first("x")) == [("x", 1), ("y", 2)]


@pytest.mark.parametrize("method", ["iter_breadth_first", "iter_depth_first"])
def test_long_chain_traversal(long_chain, method):
    visited = list(getattr(long_chain, method)("v00000"))
    assert len(visited) == 3000
    assert visited[0] == ("v00000", 0)
    assert visited[-1] == ("v02999", 2999)
    assert [data for _, data in visited] == list(range(3000))
