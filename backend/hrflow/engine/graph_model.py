"""Workflow Graph Model

Typed representation of the nodes and directed edges received from the
editor canvas. The model carries shape and invariants only; validation of
workflow semantics lives in ``validator`` and traversal in ``planner``.

Key Components:
- NodeType: Wire values of the five node kinds the editor palette offers
- Node: A typed vertex with its type-specific payload
- Edge: A directed connection between two nodes
- WorkflowGraph: Ordered nodes and edges, with read-only accessors

Node and edge declaration order is preserved: traversal follows edges in
the order they were created on the canvas.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..nodes.types import NodeType


@dataclass
class Node:
    """A single node placed on the workflow canvas.

    Attributes:
        id: Unique node identifier
        type: Node type wire value (see ``NodeType``); unknown types are kept as-is
        data: Type-specific payload, always carrying a display ``label``
        position: UI-only canvas coordinates, passed through untouched
    """

    id: str
    type: str
    data: Dict[str, Any] = field(default_factory=dict)
    position: Optional[Dict[str, float]] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("node id cannot be empty")
        if not self.type:
            raise ValueError("node type cannot be empty")
        if isinstance(self.type, NodeType):
            self.type = self.type.value

    @property
    def label(self) -> str:
        label = self.data.get("label")
        return str(label) if label else ""

    @property
    def display_name(self) -> str:
        """Label, falling back to the node id when no label is set."""
        return self.label or self.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "position": dict(self.position) if self.position is not None else {"x": 0, "y": 0},
            "data": self.data,
        }


@dataclass
class Edge:
    """A directed edge between two nodes.

    Attributes:
        id: Unique edge identifier
        source: Source node ID
        target: Target node ID
    """

    id: str
    source: str
    target: str

    def __post_init__(self):
        if not self.id:
            raise ValueError("edge id cannot be empty")
        if not self.source:
            raise ValueError("source node cannot be empty")
        if not self.target:
            raise ValueError("target node cannot be empty")

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "source": self.source, "target": self.target}


@dataclass
class WorkflowGraph:
    """Snapshot of a workflow: ordered nodes and ordered edges.

    Node and edge ids must be unique. Edges whose endpoints do not exist are
    accepted here so the validator can report them.
    """

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def __post_init__(self):
        node_ids = [node.id for node in self.nodes]
        if len(node_ids) != len(set(node_ids)):
            duplicates = sorted({nid for nid in node_ids if node_ids.count(nid) > 1})
            raise ValueError(f"duplicate node IDs found: {duplicates}")

        edge_ids = [edge.id for edge in self.edges]
        if len(edge_ids) != len(set(edge_ids)):
            duplicates = sorted({eid for eid in edge_ids if edge_ids.count(eid) > 1})
            raise ValueError(f"duplicate edge IDs found: {duplicates}")

        self._index: Dict[str, Node] = {node.id: node for node in self.nodes}

    # ── Accessors ──

    @property
    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._index.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._index

    def outgoing(self, node_id: str) -> List[Edge]:
        """Edges leaving ``node_id``, in declaration order."""
        return [e for e in self.edges if e.source == node_id]

    def nodes_of_type(self, node_type: str) -> List[Node]:
        return [n for n in self.nodes if n.type == node_type]

    @property
    def start_nodes(self) -> List[Node]:
        return self.nodes_of_type(NodeType.START.value)

    @property
    def end_nodes(self) -> List[Node]:
        return self.nodes_of_type(NodeType.END.value)

    def is_empty(self) -> bool:
        return not self.nodes and not self.edges

    # ── Conversion ──

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "WorkflowGraph":
        """Build a graph from the editor's ``{nodes, edges}`` document.

        Raises:
            ValueError: If a node or edge is missing a required field or ids repeat
        """
        nodes = [_node_from_dict(n) for n in payload.get("nodes") or []]
        edges = [_edge_from_dict(e) for e in payload.get("edges") or []]
        return cls(nodes=nodes, edges=edges)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


def _node_from_dict(raw: Mapping[str, Any]) -> Node:
    try:
        return Node(
            id=raw["id"],
            type=raw["type"],
            data=dict(raw.get("data") or {}),
            position=raw.get("position"),
        )
    except KeyError as e:
        raise ValueError(f"node is missing required field {e}") from e


def _edge_from_dict(raw: Mapping[str, Any]) -> Edge:
    try:
        return Edge(id=raw["id"], source=raw["source"], target=raw["target"])
    except KeyError as e:
        raise ValueError(f"edge is missing required field {e}") from e


def build_graph(nodes: Iterable[Node], edges: Iterable[Edge] = ()) -> WorkflowGraph:
    """Convenience constructor accepting any iterables."""
    return WorkflowGraph(nodes=list(nodes), edges=list(edges))
