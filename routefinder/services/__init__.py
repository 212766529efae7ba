"""Application services orchestrating the routing core."""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
