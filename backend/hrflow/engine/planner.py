"""Execution Planner

Turns a validated workflow into an ordered execution trace. Traversal is a
pre-order depth-first walk from the entry node that follows outgoing edges
in the order they were declared, modelling branches as running one after
another. Step numbers come from one counter shared by every branch, so a
plan of k steps is always numbered 1..k.

Nodes not reachable from the entry node never appear in the steps; they are
listed in ``ExecutionPlan.unreached_node_ids`` for diagnostics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from ..nodes import describe_node
from .graph_model import Node, WorkflowGraph
from .validator import ValidatedGraph

logger = logging.getLogger(__name__)

STEP_STATUS_COMPLETED = "completed"


@dataclass(frozen=True)
class Step:
    """One entry of the execution trace.

    Attributes:
        step_number: 1-based position in the trace
        node_id: ID of the visited node
        node_type: Type of the visited node
        label: Display label of the node ("Unnamed Step" when unset)
        status: Simulated outcome; always "completed"
        details: Human-readable description rendered from the node payload
    """

    step_number: int
    node_id: str
    node_type: str
    label: str
    status: str
    details: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the editor's camelCase format."""
        return {
            "stepNumber": self.step_number,
            "nodeId": self.node_id,
            "nodeType": self.node_type,
            "label": self.label,
            "status": self.status,
            "details": self.details,
        }


@dataclass(frozen=True)
class ExecutionPlan:
    """Ordered steps plus the nodes the traversal never reached."""

    steps: List[Step] = field(default_factory=list)
    unreached_node_ids: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.steps)


def plan(validated: ValidatedGraph) -> ExecutionPlan:
    """Plan the simulated execution of a validated workflow.

    Args:
        validated: Graph certified by ``validate_graph``

    Returns:
        ExecutionPlan with contiguously numbered steps

    Raises:
        TypeError: If ``validated`` is not a ValidatedGraph
    """
    if not isinstance(validated, ValidatedGraph):
        raise TypeError(
            f"plan() requires a ValidatedGraph, got {type(validated).__name__}; "
            f"run validate_graph() first"
        )

    graph = validated.graph
    entry = find_entry_node(graph)
    if entry is None:
        return ExecutionPlan(steps=[], unreached_node_ids=graph.node_ids)

    steps: List[Step] = []
    visited: Set[str] = set()
    # Children are pushed in reverse so the first declared edge is walked first
    stack: List[str] = [entry.id]

    while stack:
        node_id = stack.pop()
        if node_id in visited:
            continue
        node = graph.get_node(node_id)
        if node is None:
            continue
        visited.add(node_id)

        steps.append(build_step(node, len(steps) + 1))

        targets = [edge.target for edge in graph.outgoing(node_id)]
        stack.extend(reversed(targets))

    unreached = [nid for nid in graph.node_ids if nid not in visited]
    if unreached:
        logger.debug(f"Nodes unreachable from {entry.id}: {unreached}")

    return ExecutionPlan(steps=steps, unreached_node_ids=unreached)


def find_entry_node(graph: WorkflowGraph) -> Optional[Node]:
    """Return the first declared Start node, or None."""
    start_nodes = graph.start_nodes
    return start_nodes[0] if start_nodes else None


def build_step(node: Node, step_number: int) -> Step:
    return Step(
        step_number=step_number,
        node_id=node.id,
        node_type=node.type,
        label=node.label or "Unnamed Step",
        status=STEP_STATUS_COMPLETED,
        details=describe_node(node.type, node.data),
    )
