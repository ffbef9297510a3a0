import pytest

from netroute.lib.graph import (
    Edge,
    Node,
    RouteGraph,
    build_adjacency,
    build_graph,
)


def test_init_empty_graph():
    """Ensure a newly initialized graph has no nodes or edges."""
    g = RouteGraph()
    assert len(g) == 0
    assert g.number_of_edges() == 0


def test_add_node():
    g = RouteGraph()
    g.add_node("A")
    assert "A" in g
    assert g.nodes["A"] == {}


def test_add_node_duplicate():
    """Adding a node that already exists should raise ValueError."""
    g = RouteGraph()
    g.add_node("A")
    with pytest.raises(ValueError, match="already exists"):
        g.add_node("A")


def test_add_edge_basic():
    g = RouteGraph()
    g.add_node("A")
    g.add_node("B")

    e_id = g.add_edge("A", "B", weight=10)
    assert e_id == "A-B"
    assert g["A"]["B"]["id"] == "A-B"
    # Undirected: both endpoints see the link
    assert g.weight("A", "B") == 10
    assert g.weight("B", "A") == 10


def test_add_edge_with_custom_key():
    g = RouteGraph()
    g.add_node("A")
    g.add_node("B")
    assert g.add_edge("A", "B", key="uplink", weight=3) == "uplink"
    assert g["A"]["B"]["id"] == "uplink"


def test_add_edge_missing_nodes():
    """Edges never create nodes implicitly."""
    g = RouteGraph()
    g.add_node("A")
    with pytest.raises(ValueError, match="Target node 'B' does not exist"):
        g.add_edge("A", "B")
    with pytest.raises(ValueError, match="Source node 'C' does not exist"):
        g.add_edge("C", "A")
    assert len(g) == 1


def test_add_edge_duplicate_id():
    g = RouteGraph()
    for n in "ABC":
        g.add_node(n)
    g.add_edge("A", "B", key="e1")
    with pytest.raises(ValueError, match="already exists"):
        g.add_edge("B", "C", key="e1")


def test_parallel_edge_replaces_weight():
    g = RouteGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", key="e1", weight=5)
    g.add_edge("B", "A", key="e2", weight=2)
    assert g.weight("A", "B") == 2
    assert g["A"]["B"]["id"] == "e2"
    assert g.number_of_edges() == 1
    # Both ids stay reserved
    with pytest.raises(ValueError, match="already exists"):
        g.add_edge("A", "B", key="e1")


def test_neighbors_weights_is_a_copy():
    g = RouteGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", weight=4)
    nbrs = g.neighbors_weights("A")
    nbrs["B"] = 100
    assert g.weight("A", "B") == 4


def test_build_graph_copies_display_attributes():
    nodes = [Node("A", x=1.0, y=2.0), Node("B", label="Core")]
    graph = build_graph(nodes, [Edge("l1", "A", "B", 7, status="active")])
    assert graph.nodes["A"] == {"x": 1.0, "y": 2.0, "label": "A"}
    assert graph.nodes["B"]["label"] == "Core"
    assert graph.weight("B", "A") == 7
    assert "status" not in graph["A"]["B"]


def test_build_graph_rejects_unknown_endpoint():
    with pytest.raises(ValueError, match="does not exist"):
        build_graph([Node("A")], [Edge("e", "A", "Z", 1)])


def test_build_graph_rejects_duplicate_nodes():
    with pytest.raises(ValueError, match="already exists"):
        build_graph([Node("A"), Node("A")], [])


def test_build_adjacency_symmetric(six_node):
    adjacency = build_adjacency(*six_node)
    assert list(adjacency) == ["A", "B", "C", "D", "E", "F"]
    assert adjacency["A"] == {"B": 4, "D": 2}
    assert adjacency["E"] == {"C": 2, "D": 7, "F": 3}
    for u, nbrs in adjacency.items():
        for v, w in nbrs.items():
            assert adjacency[v][u] == w


def test_build_adjacency_isolated_node(disconnected):
    adjacency = build_adjacency(*disconnected)
    assert adjacency["E"] == {}
