"""Graph ports - Abstractions for graph access and routing.

These protocols define the contracts between the shortest-path engine,
the solver adapters and the planner service.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import CostModel, RouteResult


class GraphView(Protocol):
    """Read-only access to a weighted graph.

    Implementation: graph/network.py (Graph)

    This is everything a search needs; searches never mutate the graph.
    """

    def __iter__(self) -> Iterator[str]:
        """Iterate over node keys."""
        ...

    def has_node(self, key: str) -> bool:
        """Check if ``key`` is a node of the graph."""
        ...

    def neighbors_of(self, key: str) -> Sequence[Tuple[str, int]]:
        """Return ``(neighbor, weight)`` pairs of ``key``."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    Wraps: graph/dijkstra.py (find_shortest_path)
    """

    def solve(
        self,
        graph: GraphView,
        source: str,
        destination: str,
        cost_model: CostModel,
    ) -> RouteResult:
        """Find the least-cost route between two nodes.

        Args:
            graph: The graph to search.
            source: Source node key.
            destination: Destination node key.
            cost_model: Distance or time cost model.

        Returns:
            RouteResult whose status tells found, invalid endpoints
            or unreachable apart.
        """
        ...
