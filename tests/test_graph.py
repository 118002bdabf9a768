import math

import pytest

from dsakit.graph import Graph

EDGES = [
    (0, 1, 5),
    (0, 2, 3),
    (1, 3, 6),
    (1, 2, 2),
    (2, 4, 4),
    (2, 5, 2),
    (2, 3, 7),
    (3, 4, -1),
    (4, 5, -2),
]


@pytest.fixture
def graph():
    g = Graph(6)
    for head, tail, weight in EDGES:
        g.add_edge(head, tail, weight)
    return g


def test_shortest_paths_worked_example(graph):
    assert graph.shortest_paths(1) == [math.inf, 0, 2, 6, 5, 3]


@pytest.mark.parametrize("source", range(6))
def test_shortest_paths_satisfy_edges(graph, source):
    dist = graph.shortest_paths(source)
    assert dist[source] == 0
    for head, tail, weight in EDGES:
        if dist[head] != math.inf:
            assert dist[tail] <= dist[head] + weight


def test_topological_order_respects_edges(graph):
    order = graph.topological_order(1)
    assert order[0] == 1
    assert set(order) == {1, 2, 3, 4, 5}
    position = {vertex: index for index, vertex in enumerate(order)}
    for head, tail, _ in EDGES:
        if head in position:
            assert position[head] < position[tail]


def test_format():
    g = Graph(2)
    g.add_edge(0, 1, 5)
    assert g.format() == "0 -> 1\n1 ->"


def test_bad_vertex_raises(graph):
    with pytest.raises(ValueError):
        graph.add_edge(0, 6, 1)
    with pytest.raises(ValueError):
        graph.shortest_paths(-1)