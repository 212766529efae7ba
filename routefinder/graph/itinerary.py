"""Turn a found route into a segmented itinerary with line changes.

A line change (interchange) happens between two consecutive nodes whose
line codes, the part of the key before ``~``, differ.
"""

from __future__ import annotations

import logging
from typing import List

from ..domain.errors import MalformedNodeNameError
from ..domain.models import FormattedItinerary, RouteResult, Segment, SegmentKind
from .network import line_code_of

logger = logging.getLogger(__name__)


def change_instruction(from_line: str, to_line: str, node_key: str) -> str:
    return f"CHANGE FROM {from_line} LINE TO {to_line} LINE AT {node_key}"


def format_itinerary(result: RouteResult) -> FormattedItinerary:
    """Build the display segments and interchange count of a route.

    Args:
        result: A RouteResult; failed results are raised, not formatted.

    Returns:
        FormattedItinerary with a START segment for the source, STOP
        segments for the following nodes, a CHANGE segment before each
        node that switches line, and a closing END marker.

    Raises:
        InvalidEndpointsError: If the result reports unknown endpoints.
        UnreachableError: If the result reports no route.
        MalformedNodeNameError: If a node key on the route has no line code.
    """
    result.raise_for_status()
    path = result.path

    first = path[0]
    segments: List[Segment] = [Segment(SegmentKind.START, first, node_key=first)]
    interchanges = 0

    for previous, current in zip(path, path[1:]):
        try:
            previous_line = line_code_of(previous)
            current_line = line_code_of(current)
        except MalformedNodeNameError as e:
            logger.warning(
                "Malformed node key on route",
                extra={"previous": previous, "current": current},
            )
            raise MalformedNodeNameError(
                f"Malformed node key on route between {previous!r} and {current!r}",
                cause=e,
                node_key=e.node_key,
                previous_key=previous if e.node_key == current else None,
            ) from e

        if previous_line != current_line:
            interchanges += 1
            segments.append(
                Segment(
                    SegmentKind.CHANGE,
                    change_instruction(previous_line, current_line, previous),
                    node_key=previous,
                    from_line=previous_line,
                    to_line=current_line,
                )
            )
        segments.append(Segment(SegmentKind.STOP, current, node_key=current))

    segments.append(Segment(SegmentKind.END, "END"))

    itinerary = FormattedItinerary(
        segments=tuple(segments),
        interchange_count=interchanges,
        total_cost=result.total_cost or 0,
        cost_model=result.cost_model,
        path=path,
    )
    logger.info(
        "Itinerary built",
        extra={
            "stops": len(path),
            "interchanges": interchanges,
            "total_cost": itinerary.total_cost,
        },
    )
    return itinerary
