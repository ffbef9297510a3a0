from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Set

import networkx as nx

NodeID = str
EdgeID = str

#: Adjacency mapping: node -> {neighbor -> edge weight}.
Adjacency = Dict[NodeID, Dict[NodeID, float]]


@dataclass(frozen=True)
class Node:
    """A router in the topology.

    Attributes:
        id: Unique identifier within a run.
        x: Horizontal display position. Not used by any algorithm.
        y: Vertical display position. Not used by any algorithm.
        label: Display label; defaults to the id.
        status: Display status. Ignored by the engine.
    """

    id: NodeID
    x: float = 0.0
    y: float = 0.0
    label: Optional[str] = None
    status: str = "default"


@dataclass(frozen=True)
class Edge:
    """An undirected, weighted link between two routers.

    Attributes:
        id: Edge identifier.
        source: One endpoint node id.
        target: The other endpoint node id.
        weight: Link weight, non-negative by convention.
        status: Display status. Ignored by the engine.
    """

    id: EdgeID
    source: NodeID
    target: NodeID
    weight: float = 1.0
    status: str = "default"


def build_adjacency(nodes: Iterable[Node], edges: Iterable[Edge]) -> Adjacency:
    """
    Build the neighbor-weight lookup for an undirected topology.

    Every edge is inserted in both directions. Node order follows the input
    node list and neighbor order follows the edge list. When two edges join
    the same pair of nodes, the later one wins.

    Args:
        nodes: Topology nodes.
        edges: Topology edges. Endpoints must reference known node ids.

    Returns:
        Mapping of node id -> {neighbor id -> weight}.

    Raises:
        ValueError: If an edge references a node that is not in nodes.
    """
    return build_graph(nodes, edges).to_adjacency()


class RouteGraph(nx.Graph):
    """
    An undirected, weighted graph with strict node/edge rules.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raising ValueError on duplicates).
      - No duplicate edge ids (raising ValueError on duplicates).

    Edges carry a ``weight`` attribute and are looked up in O(1) from either
    endpoint.

    Inherits from:
        networkx.Graph
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._edge_ids: Set[EdgeID] = set()

    def add_node(self, n: NodeID, **attr: Any) -> None:
        """
        Add a single node, disallowing duplicates.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if n in self:
            raise ValueError(f"Node '{n}' already exists in this graph.")
        super().add_node(n, **attr)

    def add_edge(
        self,
        u_of_edge: NodeID,
        v_of_edge: NodeID,
        key: Optional[EdgeID] = None,
        weight: float = 1.0,
        **attr: Any,
    ) -> EdgeID:
        """
        Add an undirected edge between u_of_edge and v_of_edge.

        Both nodes must already exist. If key is omitted, ``"u-v"`` is used.
        Adding a second edge between the same pair replaces the stored weight
        (the graph is simple), but both ids stay reserved.

        Args:
            u_of_edge: One endpoint. Must exist in the graph.
            v_of_edge: The other endpoint. Must exist in the graph.
            key: Unique edge id.
            weight: Edge weight.
            **attr: Additional edge attributes.

        Returns:
            The edge id.

        Raises:
            ValueError: If either node does not exist, or the id is in use.
        """
        if u_of_edge not in self:
            raise ValueError(f"Source node '{u_of_edge}' does not exist.")
        if v_of_edge not in self:
            raise ValueError(f"Target node '{v_of_edge}' does not exist.")

        if key is None:
            key = f"{u_of_edge}-{v_of_edge}"
        if key in self._edge_ids:
            raise ValueError(f"Edge with id '{key}' already exists.")

        super().add_edge(u_of_edge, v_of_edge, weight=weight, id=key, **attr)
        self._edge_ids.add(key)
        return key

    def neighbors_weights(self, node: NodeID) -> Dict[NodeID, float]:
        """Return a copy of the neighbor -> weight mapping for node."""
        return {nbr: attr["weight"] for nbr, attr in self._adj[node].items()}

    def weight(self, u: NodeID, v: NodeID) -> float:
        """Return the weight of the edge joining u and v (either direction)."""
        return self._adj[u][v]["weight"]

    def to_adjacency(self) -> Adjacency:
        """Export the plain node -> {neighbor -> weight} mapping."""
        return {n: self.neighbors_weights(n) for n in self._adj}


def build_graph(nodes: Iterable[Node], edges: Iterable[Edge]) -> RouteGraph:
    """
    Build a RouteGraph from node and edge lists.

    Node display attributes (position, label) are copied onto graph nodes;
    display status is dropped.

    Raises:
        ValueError: On duplicate node ids, duplicate edge ids or edges that
            reference unknown nodes.
    """
    graph = RouteGraph()
    for node in nodes:
        graph.add_node(node.id, x=node.x, y=node.y, label=node.label or node.id)
    for edge in edges:
        graph.add_edge(edge.source, edge.target, key=edge.id, weight=edge.weight)
    return graph
