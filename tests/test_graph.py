import io

import pytest

from wgraph.graph import Edge, EdgeNotFoundError, Graph, Neighbor, NeighborList


def test_graph_basic_operations():
    g = Graph(5)
    g.add_edge(0, 1, 10)
    g.add_edge(1, 2, 20)
    g.add_edge(2, 3, 30)
    g.add_edge(3, 4, 40)

    assert g.has_edge(0, 1)
    assert g.has_edge(1, 0)
    assert g.has_edge(3, 4)
    assert not g.has_edge(0, 4)

    assert g.edge_weight(1, 2) == 20

    g.remove_edge(1, 2)
    assert not g.has_edge(1, 2)
    assert not g.has_edge(2, 1)


def test_edge_weight_is_symmetric_and_defaults():
    g = Graph(3)
    g.add_edge(0, 1, 7)
    g.add_edge(1, 2)
    assert g.edge_weight(0, 1) == g.edge_weight(1, 0) == 7
    assert g.edge_weight(2, 1) == 1


def test_duplicate_edge_keeps_first_weight():
    g = Graph(2)
    g.add_edge(0, 1, 4)
    g.add_edge(0, 1, 9)
    assert g.edge_weight(0, 1) == 4
    assert len(g.neighbors(0)) == 1
    assert len(g.neighbors(1)) == 1


def test_num_vertices():
    assert Graph(6).num_vertices == 6


def test_non_positive_vertex_count_raises():
    with pytest.raises(ValueError, match="Number of vertices must be positive."):
        Graph(0)
    with pytest.raises(ValueError):
        Graph(-3)


def test_invalid_vertex_indices():
    g = Graph(3)
    with pytest.raises(IndexError, match="Invalid vertex index."):
        g.add_edge(0, 3)
    with pytest.raises(IndexError):
        g.remove_edge(-1, 0)
    with pytest.raises(IndexError):
        g.edge_weight(5, 0)
    with pytest.raises(IndexError):
        g.neighbors(3)
    assert not g.has_edge(-1, 0)
    assert not g.has_edge(0, 99)


def test_remove_missing_edge_raises():
    g = Graph(3)
    g.add_edge(0, 1)
    with pytest.raises(EdgeNotFoundError):
        g.remove_edge(0, 2)
    assert g.has_edge(0, 1)


def test_edge_weight_of_missing_edge_raises():
    g = Graph(3)
    with pytest.raises(EdgeNotFoundError):
        g.edge_weight(0, 2)


def test_neighbors_keep_insertion_order():
    g = Graph(4)
    g.add_edge(0, 3, 5)
    g.add_edge(0, 1, 2)
    g.add_edge(0, 2, 8)
    assert list(g.neighbors(0)) == [Neighbor(3, 5), Neighbor(1, 2), Neighbor(2, 8)]


def test_format_single_edge():
    g = Graph(2)
    g.add_edge(0, 1, 7)
    assert g.format() == "Vertex 0: -> (0, 1, 7) \nVertex 1: -> (1, 0, 7) \n"


def test_format_vertices_without_edges_share_a_line():
    assert Graph(2).format() == "Vertex 0: Vertex 1: "


def test_print_graph_writes_format():
    g = Graph(3)
    g.add_edge(0, 2, 3)
    buffer = io.StringIO()
    g.print_graph(buffer)
    assert buffer.getvalue() == g.format()


def test_print_graph_defaults_to_stdout(capsys):
    g = Graph(2)
    g.add_edge(0, 1, 2)
    g.print_graph()
    assert capsys.readouterr().out == g.format()


def test_neighbor_list_add_remove_contains():
    nl = NeighborList()
    nl.add(3, 4)
    nl.add(5, 6)
    nl.add(3, 9)
    assert len(nl) == 2
    assert 3 in nl
    assert nl.weight(3) == 4
    assert nl.remove(3) is True
    assert nl.remove(3) is False
    assert 3 not in nl
    assert [n.vertex for n in nl] == [5]


def test_neighbor_list_weight_missing_raises():
    nl = NeighborList()
    with pytest.raises(EdgeNotFoundError):
        nl.weight(1)


def test_neighbor_list_format():
    nl = NeighborList()
    nl.add(3, 4)
    assert nl.format() == " -> 3 (w=4)"
    assert NeighborList().format() == ""


def test_edge_default_weight():
    edge = Edge(2, 5)
    assert edge.weight == 1
    assert (edge.source, edge.target) == (2, 5)
    assert Edge(0, 1, 8) == Edge(0, 1, 8)