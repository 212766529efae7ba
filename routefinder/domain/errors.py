"""Typed domain errors for the route finder.

Pathfinding outcomes (invalid endpoints, unreachable destination) are
ordinary results returned by the engine; these error types let callers
that prefer exceptions raise them, and keep data-integrity problems
(malformed node names) separate from "no route".

Heap errors are contract violations: a correctly driven search never
raises them.

All errors inherit from RouteFinderError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass
class RouteFinderError(Exception):
    """Base error for the route finder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidEndpointsError(RouteFinderError):
    """Source or destination is not a node of the graph.

    Attributes:
        source: Requested source node key
        destination: Requested destination node key
        missing: The endpoint keys that were not found
    """

    source: str = ""
    destination: str = ""
    missing: Tuple[str, ...] = ()


@dataclass
class UnreachableError(RouteFinderError):
    """No path exists between the requested nodes.

    Attributes:
        source: Source node key
        destination: Destination node key
    """

    source: str = ""
    destination: str = ""


@dataclass
class MalformedNodeNameError(RouteFinderError):
    """A node key does not follow the ``LINE~NAME`` convention.

    Attributes:
        node_key: The offending key
        previous_key: The key preceding it in the route, if any
    """

    node_key: str = ""
    previous_key: Optional[str] = None


@dataclass
class EmptyHeapError(RouteFinderError):
    """Peek or extract on an empty priority queue."""


@dataclass
class StaleDecreaseKeyError(RouteFinderError):
    """decrease_key called for an identity not resident in the heap.

    Attributes:
        identity: The identity that was looked up
    """

    identity: Any = None


@dataclass
class ConfigurationError(RouteFinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
