"""Node type identifiers shared by the graph model and the node registry."""

from __future__ import annotations

from enum import Enum


class NodeType(str, Enum):
    """Node kinds understood by the designer (values match the export format)."""

    START = "startNode"
    TASK = "taskNode"
    APPROVAL = "approvalNode"
    AUTOMATED = "automatedNode"
    END = "endNode"
