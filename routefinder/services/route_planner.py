"""Route planner service - Main orchestrator.

This service is the entry point for outer callers (CLI, web handlers):
it runs the cheap reachability check, the weighted search and the
itinerary formatting, and turns failed results into typed errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from ..adapters.graph import DijkstraRouteSolver
from ..config import AppConfig, get_config
from ..domain.errors import ConfigurationError, UnreachableError
from ..domain.models import CostModel, FormattedItinerary, RouteResult
from ..graph.dijkstra import has_path
from ..graph.itinerary import format_itinerary
from ..graph.network import Graph
from ..ports.graph import RouteSolverPort


@dataclass
class RoutePlannerService:
    """Main service for planning routes over one graph.

    The graph is owned by the caller and must not be mutated while a
    query runs.

    Attributes:
        graph: The network to plan over
        config: Application configuration
        route_solver: Computes least-cost routes
    """

    graph: Graph
    config: AppConfig = field(default_factory=get_config)
    route_solver: Optional[RouteSolverPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.route_solver is None:
            self.route_solver = DijkstraRouteSolver(self.config.cost)

    def resolve_cost_model(
        self, cost_model: Union[CostModel, str, None] = None
    ) -> CostModel:
        """Return ``cost_model`` as a CostModel, defaulting to the configured one.

        Raises:
            ConfigurationError: If a string does not name a cost model.
        """
        if isinstance(cost_model, CostModel):
            return cost_model
        name = cost_model if cost_model is not None else self.config.cost.default_model
        try:
            return CostModel(name.lower())
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown cost model: {name}",
                cause=e,
                setting_name="cost_model",
                expected_type="distance or time",
            ) from e

    def find_route(
        self,
        source: str,
        destination: str,
        cost_model: Union[CostModel, str, None] = None,
    ) -> RouteResult:
        """Compute the route between two nodes.

        Returns:
            A FOUND RouteResult.

        Raises:
            InvalidEndpointsError: If either node is not in the graph.
            UnreachableError: If no path exists.
        """
        model = self.resolve_cost_model(cost_model)

        if (
            self.graph.has_node(source)
            and self.graph.has_node(destination)
            and not has_path(self.graph, source, destination)
        ):
            self._logger.info(
                "Rejected by reachability check",
                extra={"source": source, "destination": destination},
            )
            raise UnreachableError(
                f"No path from {source} to {destination}",
                source=source,
                destination=destination,
            )

        assert self.route_solver is not None
        result = self.route_solver.solve(self.graph, source, destination, model)
        result.raise_for_status()
        return result

    def shortest_cost(
        self,
        source: str,
        destination: str,
        cost_model: Union[CostModel, str, None] = None,
    ) -> int:
        """Return the least cost (units or seconds) between two nodes."""
        result = self.find_route(source, destination, cost_model)
        assert result.total_cost is not None
        return result.total_cost

    def plan(
        self,
        source: str,
        destination: str,
        cost_model: Union[CostModel, str, None] = None,
    ) -> FormattedItinerary:
        """Compute and format the route between two nodes.

        Raises:
            InvalidEndpointsError: If either node is not in the graph.
            UnreachableError: If no path exists.
            MalformedNodeNameError: If a node on the route has no line code.
        """
        result = self.find_route(source, destination, cost_model)
        return format_itinerary(result)
