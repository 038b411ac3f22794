"""Flat JSON export format for workflows.

The document is a direct serialization of the graph plus the UI-only node
``position``::

    {"nodes": [{"id", "type", "position": {"x", "y"}, "data"}],
     "edges": [{"id", "source", "target"}]}

There is no versioning or schema validation beyond what is needed to
rebuild a graph; ``data`` is passed through untouched.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from ..engine.graph_model import WorkflowGraph

EXPORT_FILENAME = "workflow.json"


def export_workflow(graph: WorkflowGraph) -> Dict[str, Any]:
    """Serialize ``graph`` to the export document."""
    return graph.to_dict()


def dumps_workflow(graph: WorkflowGraph) -> str:
    """Serialize ``graph`` to export JSON (2-space indentation)."""
    return json.dumps(export_workflow(graph), indent=2, ensure_ascii=False)


def loads_workflow(text: str) -> WorkflowGraph:
    """Rebuild a graph from export JSON.

    Raises:
        ValueError: If the text is not JSON or not a ``{nodes, edges}`` object
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid workflow JSON: {e}") from e
    if not isinstance(document, dict):
        raise ValueError("workflow document must be a JSON object")
    return WorkflowGraph.from_dict(document)


def save_workflow(graph: WorkflowGraph, path: Union[str, Path]) -> Path:
    """Write export JSON to ``path`` (a directory gets ``workflow.json``)."""
    target = Path(path)
    if target.is_dir():
        target = target / EXPORT_FILENAME
    target.write_text(dumps_workflow(graph), encoding="utf-8")
    return target


def load_workflow(path: Union[str, Path]) -> WorkflowGraph:
    """Read a graph from an export file."""
    return loads_workflow(Path(path).read_text(encoding="utf-8"))
