"""Shortest-path computation using Dijkstra's algorithm.

The frontier lives in an IndexedMinHeap holding exactly one record per
node, keyed by node key; relaxing an edge lowers the neighbor's record
in place and calls ``decrease_key``, so no duplicate entries are pushed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple, Union

from ..domain.models import CostModel, RouteResult, TimeCostParameters
from ..ports.graph import GraphView
from .heap import IndexedMinHeap

Cost = Union[int, float]

logger = logging.getLogger(__name__)


@dataclass
class FrontierRecord:
    """Best known cost and path to ``node`` during one search."""

    node: str
    cost: Cost
    path: Tuple[str, ...]


def edge_cost(
    cost_model: CostModel,
    weight: int,
    time_params: Optional[TimeCostParameters] = None,
) -> int:
    """Return the search cost of traversing an edge of ``weight`` units."""
    if cost_model is CostModel.TIME:
        return (time_params or TimeCostParameters()).edge_seconds(weight)
    return weight


def _cheaper(a: FrontierRecord, b: FrontierRecord) -> bool:
    return a.cost < b.cost


def find_shortest_path(
    graph: GraphView,
    source: str,
    destination: str,
    cost_model: CostModel = CostModel.DISTANCE,
    time_params: Optional[TimeCostParameters] = None,
) -> RouteResult:
    """Compute the least-cost route between two nodes.

    Parameters
    ----------
    graph:
        Graph to search; must not be mutated during the call.
    source:
        Key of the departure node.
    destination:
        Key of the arrival node.
    cost_model:
        ``CostModel.DISTANCE`` sums edge weights; ``CostModel.TIME``
        charges ``time_params.edge_seconds(weight)`` per edge.
    time_params:
        Constants of the time model, defaults to 120 s + 40 s per unit.

    Returns
    -------
    RouteResult
        FOUND with the node sequence (source and destination inclusive)
        and its cost, INVALID_ENDPOINTS if either endpoint is absent
        (no search is run), or UNREACHABLE if the frontier runs out.
    """
    missing = tuple(key for key in (source, destination) if not graph.has_node(key))
    if missing:
        return RouteResult.invalid_endpoints(source, destination, cost_model, missing)

    heap: IndexedMinHeap[FrontierRecord] = IndexedMinHeap(
        identity=lambda record: record.node, less=_cheaper
    )
    live: Dict[str, FrontierRecord] = {}
    for key in graph:
        if key == source:
            record = FrontierRecord(key, 0, (key,))
        else:
            record = FrontierRecord(key, math.inf, ())
        heap.insert(record)
        live[key] = record

    logger.debug(
        "Frontier seeded",
        extra={
            "source": source,
            "destination": destination,
            "records": len(heap),
            "cost_model": cost_model.value,
        },
    )

    settled: Set[str] = set()
    while heap:
        current = heap.extract_min()

        # Everything left has infinite cost: the destination is cut off.
        if math.isinf(current.cost):
            logger.debug(
                "Frontier exhausted",
                extra={"settled": len(settled), "remaining": len(heap) + 1},
            )
            break

        if current.node == destination:
            return RouteResult.found(
                source, destination, cost_model, current.path, int(current.cost)
            )

        if current.node in settled:
            logger.debug("Skipping stale entry", extra={"node": current.node})
            continue
        settled.add(current.node)
        del live[current.node]

        for neighbor, weight in graph.neighbors_of(current.node):
            record = live.get(neighbor)
            if record is None:
                continue
            candidate = current.cost + edge_cost(cost_model, weight, time_params)
            if candidate < record.cost:
                record.cost = candidate
                record.path = current.path + (neighbor,)
                heap.decrease_key(record)

    return RouteResult.unreachable(source, destination, cost_model)


def has_path(graph: GraphView, source: str, destination: str) -> bool:
    """Check whether ``destination`` can be reached from ``source``.

    Unweighted depth-first search with an explicit stack, usable as a
    fast rejection before ``find_shortest_path``. Absent endpoints are
    never reachable.
    """
    if not graph.has_node(source) or not graph.has_node(destination):
        return False
    if source == destination:
        return True

    visited: Set[str] = {source}
    stack: List[str] = [source]
    while stack:
        node = stack.pop()
        for neighbor, _ in graph.neighbors_of(node):
            if neighbor == destination:
                return True
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append(neighbor)
    return False
