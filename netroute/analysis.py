"""Algorithm registry and side-by-side comparison of routing engines.

Every engine shares the signature ``(nodes, edges, source, destination,
**kwargs) -> AlgorithmResult``, so callers can pick one by enum or by name and
swap them freely.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from netroute.lib.algorithms.base import Cost, RouteAlg
from netroute.lib.algorithms.bellman_ford import NegativeCycleError, distance_vector_path
from netroute.lib.algorithms.bgp import select_policy_path
from netroute.lib.algorithms.spf import shortest_path
from netroute.lib.algorithms.types import AlgorithmResult
from netroute.lib.graph import Edge, Node, NodeID
from netroute.logging import get_logger

logger = get_logger(__name__)

RoutingFunc = Callable[..., AlgorithmResult]


@dataclass(frozen=True)
class AlgorithmSpec:
    """A registered routing engine."""

    alg: RouteAlg
    name: str
    description: str
    func: RoutingFunc


ALGORITHMS: Dict[RouteAlg, AlgorithmSpec] = {
    RouteAlg.DIJKSTRA: AlgorithmSpec(
        RouteAlg.DIJKSTRA,
        "Dijkstra",
        "OSPF-like: shortest path first, link-state routing",
        shortest_path,
    ),
    RouteAlg.BELLMAN_FORD: AlgorithmSpec(
        RouteAlg.BELLMAN_FORD,
        "Bellman-Ford",
        "RIP-like: distance vector, detects negative cycles",
        distance_vector_path,
    ),
    RouteAlg.BGP: AlgorithmSpec(
        RouteAlg.BGP,
        "BGP",
        "Path vector: policy-based routing with multiple criteria",
        select_policy_path,
    ),
}


def get_algorithm(alg: Union[RouteAlg, str]) -> AlgorithmSpec:
    """
    Look up a routing engine by enum member or by name.

    Names are matched case-insensitively against the display name
    ("Bellman-Ford") and the enum name ("BELLMAN_FORD").

    Raises:
        ValueError: If no engine matches.
    """
    if isinstance(alg, RouteAlg):
        return ALGORITHMS[alg]

    wanted = alg.strip().lower()
    for spec in ALGORITHMS.values():
        if wanted in (spec.name.lower(), spec.alg.name.lower()):
            return spec
    known = ", ".join(spec.name for spec in ALGORITHMS.values())
    raise ValueError(f"Unknown routing algorithm '{alg}'. Known: {known}")


def _check_query(nodes: Sequence[Node], source: NodeID, destination: NodeID) -> None:
    if source == destination:
        raise ValueError("Source and destination must differ.")
    known = {node.id for node in nodes}
    for role, node_id in (("Source", source), ("Destination", destination)):
        if node_id not in known:
            raise ValueError(f"{role} node '{node_id}' is not in the topology.")


def run_algorithm(
    alg: Union[RouteAlg, str],
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    source: NodeID,
    destination: NodeID,
    **kwargs: Any,
) -> AlgorithmResult:
    """
    Validate a query and run one routing engine on it.

    Args:
        alg: Engine to run.
        nodes: Topology nodes.
        edges: Topology edges.
        source: Source node ID.
        destination: Destination node ID.
        **kwargs: Engine-specific options (e.g. ``attributes`` for BGP).

    Returns:
        The engine's AlgorithmResult.

    Raises:
        ValueError: If source equals destination or either is not a node.
        NegativeCycleError: From the Bellman-Ford engine.
    """
    spec = get_algorithm(alg)
    _check_query(nodes, source, destination)

    logger.debug("Running %s for %s -> %s", spec.name, source, destination)
    return spec.func(nodes, edges, source, destination, **kwargs)


@dataclass
class AlgorithmSummary:
    """Headline figures of one engine run inside a comparison."""

    name: str
    path_length: int = 0
    total_cost: Cost = math.inf
    execution_time: float = 0.0
    iterations: int = 0
    result: Optional[AlgorithmResult] = field(default=None, repr=False)
    error: Optional[str] = None

    @classmethod
    def from_result(cls, name: str, result: AlgorithmResult) -> AlgorithmSummary:
        return cls(
            name=name,
            path_length=len(result.path),
            total_cost=result.cost,
            execution_time=result.execution_time,
            iterations=result.iterations,
            result=result,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path_length": self.path_length,
            "total_cost": None if math.isinf(self.total_cost) else self.total_cost,
            "execution_time": self.execution_time,
            "iterations": self.iterations,
            "error": self.error,
        }


def _format_cost(value: Cost) -> str:
    if math.isinf(value):
        return "inf"
    s = f"{float(value):,.3f}"
    return s.rstrip("0").rstrip(".")


def _format_duration(seconds: float) -> str:
    if seconds < 1.0:
        return f"{seconds * 1000.0:.2f} ms"
    return f"{seconds:.2f} s"


@dataclass
class ComparisonReport:
    """Results of running several engines on the same query."""

    source: NodeID
    destination: NodeID
    summaries: List[AlgorithmSummary] = field(default_factory=list)

    def get(self, name: str) -> Optional[AlgorithmSummary]:
        for summary in self.summaries:
            if summary.name == name:
                return summary
        return None

    def agree_on_cost(self, names: Optional[Sequence[str]] = None) -> bool:
        """True if the selected successful runs report the same total cost."""
        costs = {
            s.total_cost
            for s in self.summaries
            if s.error is None and (names is None or s.name in names)
        }
        return len(costs) <= 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "destination": self.destination,
            "summaries": [s.to_dict() for s in self.summaries],
        }

    def format_table(self, min_width: int = 8) -> str:
        """Render the summaries as a plain ASCII table."""
        headers = ["Algorithm", "Path Length", "Total Cost", "Execution Time", "Iterations"]
        rows = []
        for s in self.summaries:
            if s.error is not None:
                rows.append([s.name, "N/A", "N/A", "N/A", f"error: {s.error}"])
                continue
            rows.append(
                [
                    s.name,
                    f"{s.path_length} nodes",
                    _format_cost(s.total_cost),
                    _format_duration(s.execution_time),
                    str(s.iterations),
                ]
            )
        if not rows:
            return ""

        widths = [
            max(min_width, len(headers[i]), *(len(row[i]) for row in rows))
            for i in range(len(headers))
        ]

        def format_row(cells: List[str]) -> str:
            return "   " + " | ".join(f"{c:<{widths[i]}}" for i, c in enumerate(cells))

        lines = [format_row(headers), "   " + "-+-".join("-" * w for w in widths)]
        lines.extend(format_row(row) for row in rows)
        return "\n".join(lines)


def compare_algorithms(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    source: NodeID,
    destination: NodeID,
    algorithms: Optional[Sequence[Union[RouteAlg, str]]] = None,
    **kwargs: Any,
) -> ComparisonReport:
    """
    Run several engines on one query and collect their summaries.

    A failing engine (for example Bellman-Ford on a graph with a negative
    cycle) is logged and recorded in its summary's ``error``; the remaining
    engines still run. Invalid queries (same source and destination, unknown
    nodes or algorithm names) raise before anything runs.

    Args:
        nodes: Topology nodes.
        edges: Topology edges.
        source: Source node ID.
        destination: Destination node ID.
        algorithms: Engines to run, in order. Defaults to all registered ones.
            An empty sequence runs nothing.
        **kwargs: Forwarded to the BGP engine only (``attributes``, ``max_depth``).

    Returns:
        A ComparisonReport with one summary per engine.
    """
    selected = ALGORITHMS if algorithms is None else algorithms
    specs = [get_algorithm(a) for a in selected]
    _check_query(nodes, source, destination)
    report = ComparisonReport(source=source, destination=destination)

    for spec in specs:
        options = kwargs if spec.alg == RouteAlg.BGP else {}
        try:
            result = run_algorithm(spec.alg, nodes, edges, source, destination, **options)
        except NegativeCycleError as exc:
            logger.error("%s failed for %s -> %s: %s", spec.name, source, destination, exc)
            report.summaries.append(AlgorithmSummary(name=spec.name, error=str(exc)))
            continue
        report.summaries.append(AlgorithmSummary.from_result(spec.name, result))

    return report
