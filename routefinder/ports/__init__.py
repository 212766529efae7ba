"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the routing core and the adapters
and services built around it.
"""

from .graph import GraphView, RouteSolverPort

__all__ = [
    "GraphView",
    "RouteSolverPort",
]
