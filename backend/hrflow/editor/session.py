"""Editor Session: the editing context behind one open canvas.

The session owns the workflow being edited and the counters that mint node
and edge ids, so two sessions never share id state. Every edit goes
through the session, which keeps the denormalized fields of a node's
payload (``label``, ``actionLabel``) in step with the fields they derive
from.
"""

from __future__ import annotations

import copy
import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from ..automations.catalog import AutomationCatalog, default_catalog, filter_params
from ..engine.graph_model import Edge, Node, NodeType, WorkflowGraph
from ..engine.simulator import SimulationResult, simulate
from ..engine.validator import ValidationResult, validate_graph
from ..nodes import compute_label, default_data
from .export import dumps_workflow, export_workflow

logger = logging.getLogger(__name__)

NODE_ID_PREFIX = "node_"
EDGE_ID_PREFIX = "edge_"


class EditorSession:
    """Mutable editing state for a single workflow canvas."""

    def __init__(
        self,
        catalog: Optional[AutomationCatalog] = None,
        next_node_id: int = 0,
        next_edge_id: int = 0,
    ) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []
        self._next_node_id = next_node_id
        self._next_edge_id = next_edge_id

    # ── Id minting ──

    def new_node_id(self) -> str:
        node_id = f"{NODE_ID_PREFIX}{self._next_node_id}"
        self._next_node_id += 1
        return node_id

    def new_edge_id(self) -> str:
        edge_id = f"{EDGE_ID_PREFIX}{self._next_edge_id}"
        self._next_edge_id += 1
        return edge_id

    # ── Accessors ──

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    def get_node(self, node_id: str) -> Node:
        for node in self._nodes:
            if node.id == node_id:
                return node
        raise KeyError(f"Unknown node: {node_id}")

    # ── Nodes ──

    def add_node(
        self,
        node_type: str,
        position: Optional[Mapping[str, float]] = None,
    ) -> Node:
        """Drop a new node of ``node_type`` onto the canvas."""
        if isinstance(node_type, NodeType):
            node_type = node_type.value
        node = Node(
            id=self.new_node_id(),
            type=node_type,
            data=default_data(node_type),
            position=dict(position) if position else {"x": 0, "y": 0},
        )
        self._nodes.append(node)
        logger.debug(f"Added node {node.id} ({node_type})")
        return node

    def update_node(self, node_id: str, changes: Mapping[str, Any]) -> Node:
        """Apply form ``changes`` to a node's payload.

        ``label`` is recomputed from the type's label field, and for
        Automated nodes ``actionLabel`` is refreshed from the catalog
        whenever ``action`` is part of the change.

        Raises:
            KeyError: If the node does not exist
        """
        node = self.get_node(node_id)
        data: Dict[str, Any] = {**node.data, **changes}

        if node.type == NodeType.AUTOMATED.value and "action" in changes:
            data["actionLabel"] = self.catalog.label_for(data.get("action") or "")

        data["label"] = compute_label(node.type, data)
        node.data = data
        return node

    def set_automation(
        self,
        node_id: str,
        action_id: str,
        params: Optional[Mapping[str, str]] = None,
    ) -> Node:
        """Point an Automated node at a catalog action.

        Parameters the action does not declare are dropped.

        Raises:
            KeyError: If the node or the action does not exist
            ValueError: If the node is not an Automated node
        """
        node = self.get_node(node_id)
        if node.type != NodeType.AUTOMATED.value:
            raise ValueError(f"node {node_id} is not an Automated node")
        descriptor = self.catalog.require(action_id)
        return self.update_node(
            node_id,
            {"action": descriptor.id, "actionParams": filter_params(descriptor, params or {})},
        )

    def move_node(self, node_id: str, x: float, y: float) -> Node:
        node = self.get_node(node_id)
        node.position = {"x": x, "y": y}
        return node

    def remove_node(self, node_id: str) -> None:
        """Delete a node together with every edge touching it."""
        node = self.get_node(node_id)
        self._nodes.remove(node)
        self._edges = [e for e in self._edges if node_id not in (e.source, e.target)]

    # ── Edges ──

    def connect(self, source: str, target: str) -> Edge:
        """Draw a directed edge from ``source`` to ``target``.

        Raises:
            KeyError: If either endpoint does not exist
        """
        self.get_node(source)
        self.get_node(target)
        edge = Edge(id=self.new_edge_id(), source=source, target=target)
        self._edges.append(edge)
        return edge

    def remove_edge(self, edge_id: str) -> None:
        remaining = [e for e in self._edges if e.id != edge_id]
        if len(remaining) == len(self._edges):
            raise KeyError(f"Unknown edge: {edge_id}")
        self._edges = remaining

    # ── Snapshots ──

    def snapshot(self) -> WorkflowGraph:
        """An independent copy of the current graph for validation/simulation."""
        return WorkflowGraph(
            nodes=copy.deepcopy(self._nodes),
            edges=copy.deepcopy(self._edges),
        )

    def validate(self) -> ValidationResult:
        return validate_graph(self.snapshot())

    async def simulate(self, latency: Optional[float] = None) -> SimulationResult:
        return await simulate(self.snapshot(), latency=latency)

    def export(self) -> Dict[str, Any]:
        return export_workflow(self.snapshot())

    def export_json(self) -> str:
        return dumps_workflow(self.snapshot())

    @classmethod
    def from_export(
        cls,
        document: Mapping[str, Any],
        catalog: Optional[AutomationCatalog] = None,
    ) -> "EditorSession":
        """Restore a session from an export document.

        Id counters resume after the highest ``node_<n>`` / ``edge_<n>`` id
        found, so new ids never collide with imported ones.
        """
        graph = WorkflowGraph.from_dict(document)
        session = cls(
            catalog=catalog,
            next_node_id=_next_counter(NODE_ID_PREFIX, graph.node_ids),
            next_edge_id=_next_counter(EDGE_ID_PREFIX, [e.id for e in graph.edges]),
        )
        session._nodes = list(graph.nodes)
        session._edges = list(graph.edges)
        return session


def _next_counter(prefix: str, ids: List[str]) -> int:
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
    numbers = [int(m.group(1)) for m in (pattern.match(i) for i in ids) if m]
    return max(numbers) + 1 if numbers else 0
