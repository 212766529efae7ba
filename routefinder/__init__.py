"""Top-level package for the route finder.

Least-cost routing over an undirected weighted graph of
``LINE~NAME`` nodes, under a distance or a time cost model, with
itineraries annotated by line changes.
"""

from .domain.models import CostModel, FormattedItinerary, RouteResult, RouteStatus
from .graph import Graph, find_shortest_path, format_itinerary, has_path

__all__ = [
    "CostModel",
    "FormattedItinerary",
    "Graph",
    "RouteResult",
    "RouteStatus",
    "find_shortest_path",
    "format_itinerary",
    "has_path",
]
