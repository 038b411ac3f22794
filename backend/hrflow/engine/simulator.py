"""Workflow simulation entry point.

``run_simulation`` is the synchronous core: validate, then plan only when
validation succeeded. ``simulate`` is the asynchronous boundary used by the
API; it waits for the configured simulated latency before running the core.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .. import settings
from .graph_model import WorkflowGraph
from .planner import Step, plan
from .validator import validate_graph

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Workflow simulation completed successfully"


@dataclass(frozen=True)
class SimulationSuccess:
    steps: List[Step]
    message: str = SUCCESS_MESSAGE
    unreached_node_ids: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    success = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "steps": [step.to_dict() for step in self.steps],
            "message": self.message,
            "unreachedNodeIds": list(self.unreached_node_ids),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class SimulationFailure:
    errors: List[str]

    success = False

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "errors": list(self.errors)}


SimulationResult = Union[SimulationSuccess, SimulationFailure]


def run_simulation(workflow: Union[WorkflowGraph, Mapping[str, Any]]) -> SimulationResult:
    """Validate and, when valid, plan ``workflow``.

    Args:
        workflow: A WorkflowGraph or the editor's ``{nodes, edges}`` document

    Returns:
        SimulationSuccess with the ordered steps, or SimulationFailure
        carrying every validation error

    Raises:
        ValueError: If ``workflow`` is a malformed document
    """
    graph = _as_graph(workflow)
    result = validate_graph(graph)
    if not result.valid:
        return SimulationFailure(errors=list(result.errors))

    execution = plan(result.require_valid())
    logger.info(
        f"Simulated workflow: {len(execution.steps)} step(s), "
        f"{len(execution.unreached_node_ids)} unreached node(s)"
    )
    return SimulationSuccess(
        steps=execution.steps,
        unreached_node_ids=execution.unreached_node_ids,
        warnings=list(result.warnings),
    )


async def simulate(
    workflow: Union[WorkflowGraph, Mapping[str, Any]],
    latency: Optional[float] = None,
) -> SimulationResult:
    """Asynchronous simulation boundary.

    Args:
        workflow: A WorkflowGraph or the editor's ``{nodes, edges}`` document
        latency: Simulated network delay in seconds (defaults to settings)
    """
    delay = settings.SIMULATION_LATENCY if latency is None else latency
    if delay > 0:
        await asyncio.sleep(delay)
    return run_simulation(workflow)


def _as_graph(workflow: Union[WorkflowGraph, Mapping[str, Any]]) -> WorkflowGraph:
    if isinstance(workflow, WorkflowGraph):
        return workflow
    return WorkflowGraph.from_dict(workflow)
