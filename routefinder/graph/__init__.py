"""Graph-related utilities for representing the route network.

This subpackage contains the graph container, the indexed priority
queue, the shortest-path engine built on it and the itinerary
formatter that post-processes found routes.
"""

from .dijkstra import edge_cost, find_shortest_path, has_path
from .heap import IndexedMinHeap
from .itinerary import format_itinerary
from .network import NODE_SEPARATOR, Graph, line_code_of, split_node_key

__all__ = [
    "Graph",
    "IndexedMinHeap",
    "NODE_SEPARATOR",
    "edge_cost",
    "find_shortest_path",
    "format_itinerary",
    "has_path",
    "line_code_of",
    "split_node_key",
]
