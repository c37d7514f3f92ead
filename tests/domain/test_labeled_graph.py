# tests/domain/test_labeled_graph.py
from mapnav.domain.graph import LabeledGraph


def test_set_registers_vertices_in_insertion_order():
    g: LabeledGraph[str, int] = LabeledGraph()
    g.set("A", "B", 5)
    g.set("C", "A", 7)
    assert g.get_vertex_labels() == ["A", "B", "C"]
    assert g.is_vertex_label("B") and "C" in g
    assert not g.is_vertex_label("Z")
    assert len(g) == 3


def test_get_overwrite_and_absent_edge():
    g = LabeledGraph()
    g.set("A", "B", 5)
    g.set("A", "B", 6)
    assert g.get("A", "B") == 6
    assert g.get("B", "A") is None
    assert g.get("X", "Y") is None


def test_zero_label_is_not_absence():
    g = LabeledGraph()
    g.set("A", "B", 0)
    assert g.get("A", "B") == 0
    assert g.get("A", "B") is not None


def test_remove_is_idempotent_and_keeps_vertices():
    g = LabeledGraph()
    g.set("A", "B", 1)
    g.remove("A", "B")
    g.remove("A", "B")
    g.remove("Q", "R")  # unknown vertices are fine
    assert g.get("A", "B") is None
    assert g.get_vertex_labels() == ["A", "B"]


def test_successors_in_edge_insertion_order():
    g = LabeledGraph()
    g.set("A", "C", 10)
    g.set("A", "B", 5)
    g.set("B", "A", 5)
    assert g.get_successors("A") == ["C", "B"]
    assert g.get_successors("C") == []
    assert g.get_successors("unknown") == []
    assert sorted(g.edges()) == [("A", "B", 5), ("A", "C", 10), ("B", "A", 5)]


def test_clear():
    g = LabeledGraph()
    g.set(1, 2, "x")
    g.clear()
    assert g.get_vertex_labels() == []
    assert g.get(1, 2) is None
