"""Workflow simulation endpoint."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from hrflow.engine.simulator import simulate
from hrflow.logging_config import get_simulation_logger

from ..schemas import SimulationResponse, WorkflowRequest

logger = get_simulation_logger()

router = APIRouter(prefix="/api", tags=["simulation"])


@router.post("/simulate", response_model=SimulationResponse)
async def simulate_workflow(payload: WorkflowRequest):
    """Validate the workflow and, when valid, return its simulated execution steps."""
    try:
        graph = payload.to_graph()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    result = await simulate(graph)
    if not result.success:
        logger.info(f"Simulation rejected: {len(result.errors)} validation error(s)")
        raise HTTPException(status_code=422, detail=result.to_dict())

    logger.info(
        f"Simulation completed: {len(graph.nodes)} nodes, {len(result.steps)} steps"
    )
    return SimulationResponse(**result.to_dict())
