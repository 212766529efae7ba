"""Shared fixtures for the route finder tests."""

import pytest

from routefinder.config import reset_config
from routefinder.graph import Graph


@pytest.fixture(autouse=True)
def fresh_config():
    """Reload configuration around every test so env overrides do not leak."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def abc_graph() -> Graph:
    """A - B - C chain, every node on its own line."""
    graph = Graph()
    for key in ("A~Alpha", "B~Beta", "C~Gamma"):
        graph.add_node(key)
    graph.add_edge("A~Alpha", "B~Beta", 10)
    graph.add_edge("B~Beta", "C~Gamma", 5)
    return graph


@pytest.fixture
def metro_graph() -> Graph:
    """Two lines (RED, BLUE) crossing at Central, plus a RED shortcut.

    RED:  North -4- Central -3- South
    BLUE: West -2- Central(BLUE) -2- East
    Central and Central(BLUE) are linked by a 1-unit walkway.
    North -9- South is a direct RED edge.
    """
    graph = Graph()
    nodes = [
        "RED~North",
        "RED~Central",
        "RED~South",
        "BLUE~West",
        "BLUE~Central",
        "BLUE~East",
    ]
    for key in nodes:
        graph.add_node(key)
    graph.add_edge("RED~North", "RED~Central", 4)
    graph.add_edge("RED~Central", "RED~South", 3)
    graph.add_edge("RED~North", "RED~South", 9)
    graph.add_edge("BLUE~West", "BLUE~Central", 2)
    graph.add_edge("BLUE~Central", "BLUE~East", 2)
    graph.add_edge("RED~Central", "BLUE~Central", 1)
    return graph
