"""Workflow Engine: graph model, structural validation, planning and simulation."""

from .graph_model import Edge, Node, NodeType, WorkflowGraph, build_graph
from .validator import (
    ValidatedGraph,
    ValidationResult,
    WorkflowValidationError,
    detect_dangling_edges,
    detect_disconnected_nodes,
    has_cycle,
    validate,
    validate_graph,
)
from .planner import ExecutionPlan, Step, find_entry_node, plan
from .simulator import (
    SimulationFailure,
    SimulationResult,
    SimulationSuccess,
    run_simulation,
    simulate,
)

__all__ = [
    "Edge",
    "Node",
    "NodeType",
    "WorkflowGraph",
    "build_graph",
    "ValidatedGraph",
    "ValidationResult",
    "WorkflowValidationError",
    "detect_dangling_edges",
    "detect_disconnected_nodes",
    "has_cycle",
    "validate",
    "validate_graph",
    "ExecutionPlan",
    "Step",
    "find_entry_node",
    "plan",
    "SimulationFailure",
    "SimulationResult",
    "SimulationSuccess",
    "run_simulation",
    "simulate",
]
