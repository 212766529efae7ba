import pytest

from routefinder.domain.errors import (
    InvalidEndpointsError,
    MalformedNodeNameError,
    UnreachableError,
)
from routefinder.domain.models import CostModel, RouteResult, SegmentKind
from routefinder.graph import Graph, find_shortest_path, format_itinerary


def test_every_hop_changes_line(abc_graph):
    result = find_shortest_path(abc_graph, "A~Alpha", "C~Gamma")

    itinerary = format_itinerary(result)

    assert itinerary.interchange_count == 2
    assert itinerary.total_cost == 15
    assert [s.kind for s in itinerary.segments] == [
        SegmentKind.START,
        SegmentKind.CHANGE,
        SegmentKind.STOP,
        SegmentKind.CHANGE,
        SegmentKind.STOP,
        SegmentKind.END,
    ]
    first_change = itinerary.changes[0]
    assert (first_change.from_line, first_change.to_line) == ("A", "B")
    assert first_change.node_key == "A~Alpha"


def test_metro_route_render(metro_graph):
    result = find_shortest_path(metro_graph, "RED~North", "BLUE~East")

    itinerary = format_itinerary(result)

    assert itinerary.interchange_count == 1
    assert itinerary.render() == "\n".join(
        [
            "START ==> RED~North",
            "    ==> RED~Central",
            "    ==> CHANGE FROM RED LINE TO BLUE LINE AT RED~Central",
            "    ==> BLUE~Central",
            "    ==> BLUE~East",
            "    ==> END",
        ]
    )
    assert [s.node_key for s in itinerary.stops] == list(result.path)


def test_same_line_route_has_no_interchange(metro_graph):
    result = find_shortest_path(metro_graph, "RED~North", "RED~South")

    itinerary = format_itinerary(result)

    assert itinerary.interchange_count == 0
    assert itinerary.changes == ()


def test_single_node_route():
    graph = Graph()
    graph.add_node("A~Alpha")

    itinerary = format_itinerary(find_shortest_path(graph, "A~Alpha", "A~Alpha"))

    assert itinerary.interchange_count == 0
    assert itinerary.total_cost == 0
    assert itinerary.render() == "START ==> A~Alpha\n    ==> END"


def test_time_itinerary_keeps_seconds(abc_graph):
    result = find_shortest_path(abc_graph, "A~Alpha", "C~Gamma", CostModel.TIME)

    itinerary = format_itinerary(result)

    assert itinerary.total_cost == 840
    assert itinerary.total_minutes == 14


def test_distance_itinerary_has_no_minutes(abc_graph):
    itinerary = format_itinerary(find_shortest_path(abc_graph, "A~Alpha", "B~Beta"))

    assert itinerary.total_minutes is None


def test_malformed_node_name_is_distinct_error():
    graph = Graph()
    graph.add_node("A~Alpha")
    graph.add_node("Broken")
    graph.add_edge("A~Alpha", "Broken", 3)
    result = find_shortest_path(graph, "A~Alpha", "Broken")

    with pytest.raises(MalformedNodeNameError) as excinfo:
        format_itinerary(result)

    assert excinfo.value.node_key == "Broken"
    assert excinfo.value.previous_key == "A~Alpha"
    assert not isinstance(excinfo.value, UnreachableError)


def test_failed_results_are_raised_not_formatted():
    with pytest.raises(UnreachableError):
        format_itinerary(RouteResult.unreachable("A~a", "B~b", CostModel.DISTANCE))

    with pytest.raises(InvalidEndpointsError) as excinfo:
        format_itinerary(
            RouteResult.invalid_endpoints("A~a", "Z~z", CostModel.DISTANCE, ("Z~z",))
        )
    assert excinfo.value.missing == ("Z~z",)
