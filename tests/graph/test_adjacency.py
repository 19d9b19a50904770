import pytest

from lazyspf.graph import AdjacencyGraph, Arc, Graph


def test_add_vertex_and_duplicates():
    g = AdjacencyGraph()
    g.add_vertex("A")
    assert "A" in g
    assert len(g) == 1
    with pytest.raises(ValueError):
        g.add_vertex("A")


def test_add_edge_requires_existing_vertices():
    g = AdjacencyGraph()
    g.add_vertex("A")
    with pytest.raises(ValueError, match="Target vertex"):
        g.add_edge("A", "B", 1)
    with pytest.raises(ValueError, match="Source vertex"):
        g.add_edge("B", "A", 1)


def test_parallel_edges_and_edges_appends():
    g = AdjacencyGraph.from_edges([("A", "B", 1), ("A", "B", 2), ("B", "C", 3)])
    assert sorted(g.vertices()) == ["A", "B", "C"]
    out = [Arc("X", "Y", 0)]
    g.edges("A", out)
    # Existing buffer content is preserved; edges are appended
    assert out == [Arc("X", "Y", 0), Arc("A", "B", 1), Arc("A", "B", 2)]
    assert len(list(g.arcs())) == 3


def test_edges_unknown_vertex():
    g = AdjacencyGraph()
    with pytest.raises(KeyError):
        g.edges("nope", [])


def test_contract_accessors():
    g = AdjacencyGraph.from_edges([(1, 2, 7)])
    arc = next(g.arcs())
    assert g.weight(arc, 1) == 7
    assert g.target(arc) == 2
    assert isinstance(g, Graph)
