from __future__ import annotations

import math
from enum import IntEnum
from typing import Dict, Optional, Union

from netroute.lib.graph import NodeID

#: Represents numeric cost in the network (e.g. link weight, distance).
Cost = Union[int, float]

#: Distance recorded for nodes the source cannot reach.
INF: float = math.inf

#: Node -> shortest distance found from the source.
DistanceMap = Dict[NodeID, Cost]

#: Node -> node immediately before it on its best-known path (None for none).
PredecessorMap = Dict[NodeID, Optional[NodeID]]


class RouteAlg(IntEnum):
    """
    Routing-decision strategies offered by the engine.
    """

    #: Shortest path first, link-state style (OSPF-like).
    DIJKSTRA = 1
    #: Distance-vector relaxation with negative-cycle detection (RIP-like).
    BELLMAN_FORD = 2
    #: Path-vector policy election over enumerated candidates (BGP-like).
    BGP = 3
