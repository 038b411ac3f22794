"""Structural Validator for Workflow Graphs

Checks a workflow snapshot for structural well-formedness before it may be
simulated. Every check runs on every call and contributes its own
human-readable message, so the editor can surface all problems at once.

Checks:
1. Entry presence (at least one Start node)
2. Terminal presence (at least one End node)
3. Connectivity (nodes with no incident edge, multi-node graphs only)
4. Cycle detection (DFS with an on-stack marker set)
5. Dangling edge references (endpoints that are not node ids)

A successful validation mints a ``ValidatedGraph``, the only input the
execution planner accepts.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Set

from .graph_model import WorkflowGraph

logger = logging.getLogger(__name__)

MISSING_START_ERROR = "Workflow must have a Start Node"
MISSING_END_ERROR = "Workflow must have an End Node"
DISCONNECTED_ERROR_PREFIX = "Disconnected nodes found: "
CYCLE_ERROR = "Workflow contains cycles - infinite loops detected"

_VALIDATION_TOKEN = object()


class WorkflowValidationError(Exception):
    """Raised when a validated graph is requested from a failed validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Workflow validation failed: " + "; ".join(self.errors))


class ValidatedGraph:
    """A workflow snapshot that passed structural validation.

    Instances are minted by ``validate_graph``; the planner refuses any
    other input. ``assume_valid`` exists for callers that take over the
    acyclicity guarantee themselves (diagnostics, forced previews).
    """

    __slots__ = ("_graph",)

    def __init__(self, graph: WorkflowGraph, _token: object = None):
        if _token is not _VALIDATION_TOKEN:
            raise TypeError(
                "ValidatedGraph cannot be constructed directly; "
                "use validate_graph() or ValidatedGraph.assume_valid()"
            )
        self._graph = graph

    @property
    def graph(self) -> WorkflowGraph:
        return self._graph

    @classmethod
    def assume_valid(cls, graph: WorkflowGraph) -> "ValidatedGraph":
        """Wrap ``graph`` without validating it."""
        return cls(graph, _token=_VALIDATION_TOKEN)


class ValidationResult:
    """Workflow validation result.

    Attributes:
        errors: Independent error messages, in check order
        warnings: Non-blocking observations (e.g. several Start nodes)
        validated: The certified graph when there are no errors, else None
    """

    def __init__(
        self,
        errors: List[str],
        warnings: List[str],
        validated: Optional[ValidatedGraph] = None,
    ):
        self.errors = errors
        self.warnings = warnings
        self.validated = validated

    @property
    def valid(self) -> bool:
        return not self.errors

    def require_valid(self) -> ValidatedGraph:
        """Return the validated graph.

        Raises:
            WorkflowValidationError: If validation reported errors
        """
        if self.validated is None:
            raise WorkflowValidationError(self.errors)
        return self.validated

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary format."""
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def validate(graph: WorkflowGraph) -> List[str]:
    """Validate ``graph`` and return its error messages (empty = valid)."""
    return validate_graph(graph).errors


def validate_graph(graph: WorkflowGraph) -> ValidationResult:
    """Run every structural check against ``graph``.

    Args:
        graph: Workflow snapshot to validate (never mutated)

    Returns:
        ValidationResult with accumulated errors and warnings
    """
    errors: List[str] = []
    warnings: List[str] = []

    # 1. Entry presence
    start_nodes = graph.start_nodes
    if not start_nodes:
        errors.append(MISSING_START_ERROR)
    elif len(start_nodes) > 1:
        warnings.append(
            f"Multiple Start nodes found; simulation begins at {start_nodes[0].display_name}"
        )

    # 2. Terminal presence
    if not graph.end_nodes:
        errors.append(MISSING_END_ERROR)

    # 3. Connectivity
    disconnected = detect_disconnected_nodes(graph)
    if disconnected:
        names = [graph.get_node(node_id).display_name for node_id in disconnected]
        errors.append(DISCONNECTED_ERROR_PREFIX + ", ".join(names))

    # 4. Cycle detection
    if has_cycle(graph):
        errors.append(CYCLE_ERROR)

    # 5. Dangling edge references
    errors.extend(detect_dangling_edges(graph))

    if errors:
        logger.info(f"Workflow validation failed with {len(errors)} error(s)")
        logger.debug(f"Validation errors: {errors}")
        return ValidationResult(errors=errors, warnings=warnings)

    logger.debug(
        f"Workflow validated: {len(graph.nodes)} nodes, {len(graph.edges)} edges"
    )
    return ValidationResult(
        errors=errors,
        warnings=warnings,
        validated=ValidatedGraph.assume_valid(graph),
    )


def detect_disconnected_nodes(graph: WorkflowGraph) -> List[str]:
    """Detect nodes that are neither source nor target of any edge.

    A graph with a single node is never reported: a lone node is not
    disconnected from anything.

    Returns:
        Disconnected node IDs in declaration order
    """
    if len(graph.nodes) <= 1:
        return []

    connected: Set[str] = set()
    for edge in graph.edges:
        connected.add(edge.source)
        connected.add(edge.target)

    return [node.id for node in graph.nodes if node.id not in connected]


def detect_dangling_edges(graph: WorkflowGraph) -> List[str]:
    """Report edges whose source or target is not a node of the graph."""
    errors: List[str] = []
    for edge in graph.edges:
        if not graph.has_node(edge.source):
            errors.append(f"Edge {edge.id} references unknown source node: {edge.source}")
        if not graph.has_node(edge.target):
            errors.append(f"Edge {edge.id} references unknown target node: {edge.target}")
    return errors


def has_cycle(graph: WorkflowGraph) -> bool:
    """Detect a directed cycle using depth-first search.

    DFS starts from every unvisited node in declaration order and keeps the
    set of nodes on the current path; reaching an on-path node means a back
    edge. The search is iterative, so its depth is bounded by the heap
    rather than the interpreter's recursion limit. O(V + E).

    Edges with a dangling endpoint are ignored here.
    """
    adjacency: Dict[str, List[str]] = defaultdict(list)
    for edge in graph.edges:
        if graph.has_node(edge.source) and graph.has_node(edge.target):
            adjacency[edge.source].append(edge.target)

    visited: Set[str] = set()
    on_stack: Set[str] = set()

    for root in graph.node_ids:
        if root in visited:
            continue

        visited.add(root)
        on_stack.add(root)
        # Each frame: (node, iterator over its successors)
        stack = [(root, iter(adjacency[root]))]

        while stack:
            node_id, successors = stack[-1]
            advanced = False
            for neighbor in successors:
                if neighbor in on_stack:
                    return True
                if neighbor not in visited:
                    visited.add(neighbor)
                    on_stack.add(neighbor)
                    stack.append((neighbor, iter(adjacency[neighbor])))
                    advanced = True
                    break
            if not advanced:
                stack.pop()
                on_stack.discard(node_id)

    return False
