"""Pydantic request/response models for the designer API."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from hrflow.engine.graph_model import Edge, Node, WorkflowGraph


class NodeRequest(BaseModel):
    """Node in the editor's export format (React Flow)."""
    id: str
    type: str
    position: Optional[dict] = None
    data: dict = Field(default_factory=dict)


class EdgeRequest(BaseModel):
    """Directed edge in the editor's export format."""
    id: str
    source: str
    target: str


class WorkflowRequest(BaseModel):
    """Workflow snapshot sent by the editor."""
    nodes: List[NodeRequest] = Field(default_factory=list)
    edges: List[EdgeRequest] = Field(default_factory=list)

    def to_graph(self) -> WorkflowGraph:
        """Convert to the engine's graph model.

        Raises:
            ValueError: If node or edge ids are empty or repeated
        """
        return WorkflowGraph(
            nodes=[Node(id=n.id, type=n.type, data=n.data, position=n.position) for n in self.nodes],
            edges=[Edge(id=e.id, source=e.source, target=e.target) for e in self.edges],
        )


class StepResponse(BaseModel):
    """One step of a simulated execution trace."""
    stepNumber: int
    nodeId: str
    nodeType: str
    label: str
    status: str
    details: str


class SimulationResponse(BaseModel):
    """Successful simulation."""
    success: bool = True
    steps: List[StepResponse]
    message: str
    unreachedNodeIds: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class ValidationResponse(BaseModel):
    """Graph validation result."""
    valid: bool
    errors: List[str]
    warnings: List[str]


class AutomationResponse(BaseModel):
    """Automated action available to Automated nodes."""
    id: str
    label: str
    params: List[str]


class ParamValuesRequest(BaseModel):
    """Current parameter values of an Automated node."""
    values: Dict[str, str] = Field(default_factory=dict)


class ParamFieldResponse(BaseModel):
    name: str
    value: str


class AutomationFormResponse(BaseModel):
    """Parameter form for one automated action."""
    id: str
    label: str
    fields: List[ParamFieldResponse]


class NodeTypeResponse(BaseModel):
    """Node type definition for the editor palette."""
    nodeType: str
    displayName: str
    color: str
    labelField: str
