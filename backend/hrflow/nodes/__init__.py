"""Node System: type identifiers, registry, and typed payloads."""

# Import payload module to auto-register node types
from . import payloads  # noqa: F401 - registers startNode, taskNode, approvalNode, automatedNode, endNode

from .payloads import (
    ApprovalPayload,
    ApproverRole,
    AutomatedPayload,
    EndPayload,
    KeyValue,
    StartPayload,
    TaskPayload,
)
from .registry import (
    NODE_REGISTRY,
    BasePayload,
    NodeDefinition,
    compute_label,
    default_data,
    describe_node,
    get_node_definition,
    is_node_type_registered,
    list_node_types,
    parse_payload,
    register_node_type,
)
from .types import NodeType

__all__ = [
    "NODE_REGISTRY",
    "ApprovalPayload",
    "ApproverRole",
    "AutomatedPayload",
    "BasePayload",
    "EndPayload",
    "KeyValue",
    "NodeDefinition",
    "NodeType",
    "StartPayload",
    "TaskPayload",
    "compute_label",
    "default_data",
    "describe_node",
    "get_node_definition",
    "is_node_type_registered",
    "list_node_types",
    "parse_payload",
    "register_node_type",
]
