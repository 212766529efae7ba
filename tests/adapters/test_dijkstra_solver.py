"""Tests for the Dijkstra route solver adapter."""

import logging

import pytest

from routefinder.adapters.graph import DijkstraRouteSolver
from routefinder.config import CostConfig
from routefinder.domain.errors import InvalidEndpointsError, UnreachableError
from routefinder.domain.models import CostModel, RouteStatus


class TestDijkstraRouteSolver:
    """Test suite for DijkstraRouteSolver."""

    @pytest.fixture
    def solver(self):
        return DijkstraRouteSolver(CostConfig())

    def test_solve_distance(self, solver, abc_graph):
        result = solver.solve(abc_graph, "A~Alpha", "C~Gamma", CostModel.DISTANCE)

        assert result.status is RouteStatus.FOUND
        assert result.total_cost == 15

    def test_time_constants_come_from_config(self, abc_graph):
        solver = DijkstraRouteSolver(
            CostConfig(transfer_overhead_seconds=60, seconds_per_unit=10)
        )

        result = solver.solve(abc_graph, "A~Alpha", "C~Gamma", CostModel.TIME)

        assert solver.time_params.transfer_overhead_seconds == 60
        assert result.total_cost == (60 + 100) + (60 + 50)

    def test_solve_returns_failures_as_status(self, solver, abc_graph):
        abc_graph.add_node("D~Delta")

        unreachable = solver.solve(abc_graph, "A~Alpha", "D~Delta", CostModel.DISTANCE)
        invalid = solver.solve(abc_graph, "A~Alpha", "Q~Missing", CostModel.DISTANCE)

        assert unreachable.status is RouteStatus.UNREACHABLE
        assert invalid.status is RouteStatus.INVALID_ENDPOINTS

    def test_solve_or_raise(self, solver, abc_graph):
        abc_graph.add_node("D~Delta")

        with pytest.raises(UnreachableError):
            solver.solve_or_raise(abc_graph, "A~Alpha", "D~Delta", CostModel.DISTANCE)
        with pytest.raises(InvalidEndpointsError):
            solver.solve_or_raise(abc_graph, "Q~Missing", "A~Alpha", CostModel.DISTANCE)

    def test_logs_outcomes(self, solver, abc_graph, caplog):
        with caplog.at_level(logging.INFO, logger="routefinder.adapters.graph.dijkstra_solver"):
            solver.solve(abc_graph, "A~Alpha", "C~Gamma", CostModel.DISTANCE)
            solver.solve(abc_graph, "A~Alpha", "Q~Missing", CostModel.DISTANCE)

        messages = [record.getMessage() for record in caplog.records]
        assert "Route found" in messages
        assert "Unknown endpoints" in messages
