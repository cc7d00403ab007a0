import pytest

from dslabs.graph import Graph


def test_source_scenario():
    graph = Graph(10, 1)
    assert graph.get_vertex_data(0) == 1

    for i in range(10):
        graph.set_vertex_data(i, i)
    assert [graph.get_vertex_data(i) for i in range(10)] == list(range(10))

    v = graph.get_vertex
    graph.add_edge(v(0), v(9), 10)
    assert graph.check_edge(v(0), v(9))

    graph.add_edge(v(0), v(9), 15)
    graph.add_edge(v(0), v(2), 35)
    graph.get_edge(v(0), v(9)).weight = 80
    assert graph.get_edge_weight(v(0), v(9)) == 80

    graph.remove_edge(v(0), v(9))
    assert not graph.check_edge(v(0), v(9))

    assert len(list(graph.edges(v(0)))) == 1

    graph.remove_vertex(6)
    assert len(graph) == 9
    assert [graph.get_vertex_data(i) for i in range(9)] == [0, 1, 2, 3, 4, 5, 7, 8, 9]


def test_add_edge_twice_keeps_one_edge():
    graph = Graph(2, 0)
    a, b = graph.get_vertex(0), graph.get_vertex(1)
    graph.add_edge(a, b, 10)
    graph.add_edge(a, b, 15)
    assert [e.weight for e in graph.edges(a)] == [15]
    assert not graph.check_edge(b, a)


def test_remove_vertex_drops_incoming_edges():
    graph = Graph(3, 0)
    a, b, c = (graph.get_vertex(i) for i in range(3))
    graph.add_edge(a, b, 1)
    graph.add_edge(c, b, 2)
    graph.add_edge(a, c, 3)
    graph.remove_vertex(1)
    assert [e.to_vertex for e in graph.edges(a)] == [c]
    assert list(graph.edges(c)) == []
    assert graph.index_of(c) == 1


def test_add_vertex_and_index_of():
    graph = Graph(1, "x")
    vertex = graph.add_vertex("y")
    assert len(graph) == 2
    assert graph.index_of(vertex) == 1
    assert graph.get_vertex_data(1) == "y"


def test_index_of_missing_vertex():
    graph = Graph(1, 0)
    other = Graph(1, 0).get_vertex(0)
    with pytest.raises(ValueError):
        graph.index_of(other)


def test_missing_edge_weight_raises():
    graph = Graph(2, 0)
    with pytest.raises(KeyError):
        graph.get_edge_weight(graph.get_vertex(0), graph.get_vertex(1))
    assert graph.get_edge(graph.get_vertex(0), graph.get_vertex(1)) is None


def test_remove_vertex_out_of_range():
    graph = Graph(2, 0)
    with pytest.raises(IndexError):
        graph.remove_vertex(5)
    assert len(graph) == 2


def test_set_vertex_data_out_of_range():
    graph = Graph(2, 0)
    with pytest.raises(IndexError):
        graph.set_vertex_data(2, 1)


def test_vertex_edge_methods():
    graph = Graph(2, 0)
    a, b = graph.get_vertex(0), graph.get_vertex(1)
    edge = a.add_edge(b)
    assert a.get_edge(b) is edge
    a.remove_edge(b)
    assert a.get_edge(b) is None
    a.remove_edge(b)
    assert len(a.edges) == 0