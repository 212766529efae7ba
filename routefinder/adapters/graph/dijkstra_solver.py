"""Dijkstra Route Solver adapter.

This adapter wraps the shortest-path engine and adds:
- Time cost constants taken from configuration
- Logging of every query outcome
- A raising variant for callers that prefer exceptions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...config import CostConfig, get_config
from ...domain.models import CostModel, RouteResult, RouteStatus, TimeCostParameters
from ...graph.dijkstra import find_shortest_path
from ...ports.graph import GraphView


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.

    Attributes:
        config: Cost configuration (time model constants)
    """

    config: CostConfig = field(default_factory=lambda: get_config().cost)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def time_params(self) -> TimeCostParameters:
        return TimeCostParameters(
            transfer_overhead_seconds=self.config.transfer_overhead_seconds,
            seconds_per_unit=self.config.seconds_per_unit,
        )

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
            RouteResult; failures are reported through its status.
        """
        self._logger.debug(
            "Solving route",
            extra={
                "source": source,
                "destination": destination,
                "cost_model": cost_model.value,
            },
        )

        result = find_shortest_path(
            graph, source, destination, cost_model, self.time_params
        )

        if result.is_found:
            self._logger.info(
                "Route found",
                extra={
                    "source": source,
                    "destination": destination,
                    "stops": result.num_stops,
                    "total_cost": result.total_cost,
                },
            )
        elif result.status is RouteStatus.INVALID_ENDPOINTS:
            self._logger.warning(
                "Unknown endpoints",
                extra={"missing": list(result.missing)},
            )
        else:
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
        return result

    def solve_or_raise(
        self,
        graph: GraphView,
        source: str,
        destination: str,
        cost_model: CostModel,
    ) -> RouteResult:
        """Like solve(), but raise instead of returning a failed result.

        Raises:
            InvalidEndpointsError: If source or destination is not in the graph.
            UnreachableError: If no path exists.
        """
        result = self.solve(graph, source, destination, cost_model)
        result.raise_for_status()
        return result
