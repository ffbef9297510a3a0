"""Shared topology fixtures.

Each fixture returns a ``(nodes, edges)`` pair. All edges are undirected; the
diagrams show link weights in brackets.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import pytest

from netroute.lib.graph import Edge, Node

Topology = Tuple[List[Node], List[Edge]]


def make_topology(
    links: Iterable[Tuple[str, str, float]],
    node_ids: Optional[Sequence[str]] = None,
) -> Topology:
    """Build nodes and edges from (u, v, weight) triples.

    Nodes are taken from node_ids if given, otherwise in order of first
    appearance in links.
    """
    links = list(links)
    if node_ids is None:
        node_ids = []
        for u, v, _ in links:
            for n in (u, v):
                if n not in node_ids:
                    node_ids.append(n)
    nodes = [Node(n, x=float(i), y=0.0) for i, n in enumerate(node_ids)]
    edges = [Edge(f"{u}-{v}", u, v, w) for u, v, w in links]
    return nodes, edges


@pytest.fixture
def topology():
    """Expose make_topology to tests that build ad-hoc graphs."""
    return make_topology


@pytest.fixture
def line1() -> Topology:
    #     [1]     [2]
    #  A──────B──────C
    return make_topology([("A", "B", 1), ("B", "C", 2)])


@pytest.fixture
def square1() -> Topology:
    #       [1]        [1]
    #   ┌────────B─────────┐
    #   A                  C
    #   └────────D─────────┘
    #       [2]        [2]
    return make_topology(
        [("A", "B", 1), ("B", "C", 1), ("A", "D", 2), ("D", "C", 2)],
        node_ids=["A", "B", "C", "D"],
    )


@pytest.fixture
def square_equal() -> Topology:
    # Same shape as square1 but every link costs 1. The A-D side is listed
    # first so that it is also enumerated first.
    return make_topology(
        [("A", "D", 1), ("D", "C", 1), ("A", "B", 1), ("B", "C", 1)],
        node_ids=["A", "B", "C", "D"],
    )


@pytest.fixture
def six_node() -> Topology:
    #        [4]       [3]
    #   A─────────B─────────C
    #   │         │         │
    #   │[2]      │[1]      │[2]
    #   │         │         │
    #   D─────────F─────────E
    #   │   [5]       [3]   │
    #   └───────────────────┘
    #            [7]
    return make_topology(
        [
            ("A", "B", 4),
            ("A", "D", 2),
            ("B", "C", 3),
            ("B", "F", 1),
            ("C", "E", 2),
            ("D", "F", 5),
            ("D", "E", 7),
            ("F", "E", 3),
        ],
        node_ids=["A", "B", "C", "D", "E", "F"],
    )


@pytest.fixture
def disconnected() -> Topology:
    #     [1]          [1]
    #  A──────B     C──────D     E
    return make_topology(
        [("A", "B", 1), ("C", "D", 1)], node_ids=["A", "B", "C", "D", "E"]
    )


@pytest.fixture
def negative_triangle() -> Topology:
    #        [1]
    #   A─────────B
    #    \       /
    #  [1]\     /[-3]
    #      \   /
    #        C
    return make_topology([("A", "B", 1), ("B", "C", -3), ("C", "A", 1)])


@pytest.fixture
def enterprise() -> Topology:
    # Five routers and one switch.
    #
    #        [10]        [8]
    #   R1────────R2──────────R3
    #   │          │[2]        │
    #   │[5]      SW1          │[6]
    #   │    [4] /   \ [3]     │
    #   R4──────┘     └───────R5
    #   └──────────────────────┘
    #             [12]
    return make_topology(
        [
            ("R1", "R2", 10),
            ("R1", "R4", 5),
            ("R2", "R3", 8),
            ("R2", "SW1", 2),
            ("R3", "R5", 6),
            ("R4", "SW1", 4),
            ("R4", "R5", 12),
            ("SW1", "R5", 3),
        ],
        node_ids=["R1", "R2", "R3", "R4", "R5", "SW1"],
    )
