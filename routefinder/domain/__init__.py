"""Domain layer - Core result models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EmptyHeapError,
    InvalidEndpointsError,
    MalformedNodeNameError,
    RouteFinderError,
    StaleDecreaseKeyError,
    UnreachableError,
)
from .models import (
    CostModel,
    FormattedItinerary,
    RouteResult,
    RouteStatus,
    Segment,
    SegmentKind,
    TimeCostParameters,
    seconds_to_minutes,
)

__all__ = [
    # Models
    "CostModel",
    "RouteStatus",
    "RouteResult",
    "SegmentKind",
    "Segment",
    "FormattedItinerary",
    "TimeCostParameters",
    "seconds_to_minutes",
    # Errors
    "RouteFinderError",
    "InvalidEndpointsError",
    "UnreachableError",
    "MalformedNodeNameError",
    "EmptyHeapError",
    "StaleDecreaseKeyError",
    "ConfigurationError",
]
