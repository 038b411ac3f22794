"""Unit tests for the simulation entry point

Tests cover:
- Success and failure results (sync core)
- Export-document input
- Async boundary latency handling
"""

from unittest.mock import AsyncMock, patch

import pytest

from hrflow.engine.simulator import (
    SUCCESS_MESSAGE,
    SimulationFailure,
    SimulationSuccess,
    run_simulation,
    simulate,
)


def _doc(nodes, pairs):
    return {
        "nodes": [{"id": i, "type": t, "data": {"label": i, "title": i}} for i, t in nodes],
        "edges": [{"id": f"e{n}", "source": s, "target": t} for n, (s, t) in enumerate(pairs)],
    }


@pytest.fixture
def valid_doc():
    return _doc([("s", "startNode"), ("t", "taskNode"), ("e", "endNode")], [("s", "t"), ("t", "e")])


class TestRunSimulation:
    """Test the synchronous core."""

    def test_success(self, valid_doc):
        result = run_simulation(valid_doc)

        assert isinstance(result, SimulationSuccess)
        assert result.success is True
        assert result.message == SUCCESS_MESSAGE
        assert [s.step_number for s in result.steps] == [1, 2, 3]

    def test_failure_carries_every_error(self):
        result = run_simulation(_doc([("t", "taskNode")], []))

        assert isinstance(result, SimulationFailure)
        assert result.success is False
        assert result.errors == ["Workflow must have a Start Node", "Workflow must have an End Node"]
        assert result.to_dict() == {"success": False, "errors": result.errors}

    def test_cycle_is_never_planned(self):
        doc = _doc(
            [("s", "startNode"), ("a", "taskNode"), ("b", "taskNode"), ("e", "endNode")],
            [("s", "a"), ("a", "b"), ("b", "a"), ("b", "e")],
        )

        with patch("hrflow.engine.simulator.plan") as mock_plan:
            result = run_simulation(doc)

        assert not result.success
        assert "Workflow contains cycles - infinite loops detected" in result.errors
        mock_plan.assert_not_called()

    def test_success_to_dict(self, valid_doc):
        payload = run_simulation(valid_doc).to_dict()

        assert payload["success"] is True
        assert payload["message"] == SUCCESS_MESSAGE
        assert payload["steps"][0]["stepNumber"] == 1
        assert payload["unreachedNodeIds"] == []
        assert payload["warnings"] == []

    def test_malformed_document(self):
        with pytest.raises(ValueError, match="duplicate node IDs"):
            run_simulation({"nodes": [{"id": "a", "type": "startNode"}, {"id": "a", "type": "endNode"}]})


class TestSimulateBoundary:
    """Test the asynchronous boundary."""

    @pytest.mark.asyncio
    async def test_simulate_returns_core_result(self, valid_doc):
        result = await simulate(valid_doc, latency=0)
        assert result == run_simulation(valid_doc)

    @pytest.mark.asyncio
    async def test_simulate_waits_for_configured_latency(self, valid_doc):
        with patch("hrflow.settings.SIMULATION_LATENCY", 0.25), \
                patch("hrflow.engine.simulator.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            await simulate(valid_doc)

        mock_sleep.assert_awaited_once_with(0.25)

    @pytest.mark.asyncio
    async def test_zero_latency_skips_sleep(self, valid_doc):
        with patch("hrflow.engine.simulator.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            await simulate(valid_doc, latency=0)

        mock_sleep.assert_not_awaited()
