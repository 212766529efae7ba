"""Immutable domain models for the route finder.

All models are frozen dataclasses with slots. These models have no
external dependencies and represent the results exchanged between the
shortest-path engine, the itinerary formatter and their callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from .errors import InvalidEndpointsError, UnreachableError


class CostModel(Enum):
    """How an edge weight is turned into a search cost.

    DISTANCE sums raw edge weights. TIME charges a fixed transfer
    overhead plus a per-unit travel time for every edge, in seconds.
    """

    DISTANCE = "distance"
    TIME = "time"


class RouteStatus(Enum):
    """Terminal state of a single shortest-path query."""

    FOUND = auto()
    INVALID_ENDPOINTS = auto()
    UNREACHABLE = auto()


class SegmentKind(Enum):
    """Kind of a line in a formatted itinerary."""

    START = auto()
    STOP = auto()
    CHANGE = auto()
    END = auto()


def seconds_to_minutes(seconds: int) -> int:
    """Convert a time cost in seconds to whole minutes, rounding up."""
    return -(-seconds // 60)


@dataclass(frozen=True, slots=True)
class TimeCostParameters:
    """Constants of the time cost model.

    Attributes:
        transfer_overhead_seconds: Fixed cost charged on every edge
        seconds_per_unit: Travel time per unit of edge weight
    """

    transfer_overhead_seconds: int = 120
    seconds_per_unit: int = 40

    def __post_init__(self) -> None:
        if self.transfer_overhead_seconds < 0 or self.seconds_per_unit < 0:
            raise ValueError(
                "Time cost parameters must be non-negative, got "
                f"overhead={self.transfer_overhead_seconds}, "
                f"per_unit={self.seconds_per_unit}"
            )

    def edge_seconds(self, weight: int) -> int:
        """Return the time needed to traverse an edge of ``weight`` units."""
        return self.transfer_overhead_seconds + self.seconds_per_unit * weight


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query.

    Attributes:
        status: FOUND, INVALID_ENDPOINTS or UNREACHABLE
        source: Requested source node key
        destination: Requested destination node key
        cost_model: Cost model the search ran under
        path: Node keys from source to destination inclusive (empty on failure)
        total_cost: Accumulated cost of ``path`` (None on failure)
        missing: Endpoint keys absent from the graph (INVALID_ENDPOINTS only)
    """

    status: RouteStatus
    source: str
    destination: str
    cost_model: CostModel = CostModel.DISTANCE
    path: tuple[str, ...] = field(default_factory=tuple)
    total_cost: Optional[int] = None
    missing: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def found(
        cls,
        source: str,
        destination: str,
        cost_model: CostModel,
        path: tuple[str, ...],
        total_cost: int,
    ) -> RouteResult:
        return cls(
            status=RouteStatus.FOUND,
            source=source,
            destination=destination,
            cost_model=cost_model,
            path=path,
            total_cost=total_cost,
        )

    @classmethod
    def invalid_endpoints(
        cls,
        source: str,
        destination: str,
        cost_model: CostModel,
        missing: tuple[str, ...],
    ) -> RouteResult:
        return cls(
            status=RouteStatus.INVALID_ENDPOINTS,
            source=source,
            destination=destination,
            cost_model=cost_model,
            missing=missing,
        )

    @classmethod
    def unreachable(
        cls, source: str, destination: str, cost_model: CostModel
    ) -> RouteResult:
        return cls(
            status=RouteStatus.UNREACHABLE,
            source=source,
            destination=destination,
            cost_model=cost_model,
        )

    @property
    def is_found(self) -> bool:
        """Check if a route was found."""
        return self.status is RouteStatus.FOUND

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of nodes in the route."""
        return len(self.path)

    def raise_for_status(self) -> None:
        """Raise the error matching a failed status; do nothing on FOUND.

        Raises:
            InvalidEndpointsError: If an endpoint was absent from the graph.
            UnreachableError: If the destination could not be reached.
        """
        if self.status is RouteStatus.INVALID_ENDPOINTS:
            raise InvalidEndpointsError(
                f"Unknown node(s): {', '.join(self.missing)}",
                source=self.source,
                destination=self.destination,
                missing=self.missing,
            )
        if self.status is RouteStatus.UNREACHABLE:
            raise UnreachableError(
                f"No path from {self.source} to {self.destination}",
                source=self.source,
                destination=self.destination,
            )


@dataclass(frozen=True, slots=True)
class Segment:
    """One display line of an itinerary.

    Attributes:
        kind: START, STOP, CHANGE or END marker
        text: Display text for the line
        node_key: Node the line refers to (None for END)
        from_line: Line code left behind (CHANGE only)
        to_line: Line code boarded (CHANGE only)
    """

    kind: SegmentKind
    text: str
    node_key: Optional[str] = None
    from_line: Optional[str] = None
    to_line: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FormattedItinerary:
    """A route rendered as ordered display segments.

    Attributes:
        segments: START, then stops and line changes in travel order, then END
        interchange_count: Number of line changes along the route
        total_cost: Cost of the route, unchanged from the RouteResult
        cost_model: Cost model the route was computed under
        path: The raw node sequence the itinerary was built from
    """

    segments: tuple[Segment, ...]
    interchange_count: int
    total_cost: int
    cost_model: CostModel = CostModel.DISTANCE
    path: tuple[str, ...] = field(default_factory=tuple)

    @property
    def stops(self) -> tuple[Segment, ...]:
        """Return the segments that name a node (START and STOP)."""
        return tuple(
            s for s in self.segments if s.kind in (SegmentKind.START, SegmentKind.STOP)
        )

    @property
    def changes(self) -> tuple[Segment, ...]:
        """Return the line change instructions."""
        return tuple(s for s in self.segments if s.kind is SegmentKind.CHANGE)

    @property
    def total_minutes(self) -> Optional[int]:
        """Total cost in minutes for time-model routes, else None."""
        if self.cost_model is not CostModel.TIME:
            return None
        return seconds_to_minutes(self.total_cost)

    def render(self) -> str:
        """Render the itinerary as indented arrow-prefixed lines."""
        lines = []
        for segment in self.segments:
            if segment.kind is SegmentKind.START:
                lines.append(f"START ==> {segment.text}")
            else:
                lines.append(f"    ==> {segment.text}")
        return "\n".join(lines)
