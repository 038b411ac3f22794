"""Graph validation and node type palette endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException

from hrflow.engine.validator import validate_graph
from hrflow.nodes import list_node_types

from ..schemas import NodeTypeResponse, ValidationResponse, WorkflowRequest

router = APIRouter(prefix="/api", tags=["validation"])


@router.get("/node-types", response_model=List[NodeTypeResponse])
def get_node_types():
    """List all registered node types for the editor palette."""
    return [
        NodeTypeResponse(
            nodeType=d.node_type,
            displayName=d.display_name,
            color=d.color,
            labelField=d.label_field,
        )
        for d in list_node_types()
    ]


@router.post("/validate", response_model=ValidationResponse)
def validate_graph_inline(payload: WorkflowRequest):
    """Validate a workflow without simulating it (for live editor feedback)."""
    try:
        result = validate_graph(payload.to_graph())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ValidationResponse(**result.to_dict())
