"""Node Registry System for the Workflow Designer

This module provides a decorator-based registry of node types. Each node
type couples palette metadata (display name, colour) with a typed payload
class that knows how to parse the node's ``data`` dict, which field drives
its display label, and how to describe itself in a simulation trace.

Key Components:
- NodeDefinition: Metadata for node types
- BasePayload: Abstract base for typed per-type payloads
- register_node_type: Decorator for registering payload classes
- describe_node / compute_label: Lookups used by the planner and editor
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

# Type variable for payload classes
T = TypeVar("T", bound="BasePayload")


@dataclass
class NodeDefinition:
    """Metadata definition for a node type.

    Attributes:
        node_type: Wire identifier for the node type (e.g., "taskNode")
        display_name: Human-readable name for the palette
        color: Colour code used by the palette and minimap
        label_field: Payload field the display label is recomputed from
        payload_cls: Typed payload class for this node type
    """

    node_type: str
    display_name: str
    color: str
    label_field: str
    payload_cls: Type["BasePayload"]

    def __post_init__(self):
        """Validate node definition after initialization."""
        if not self.node_type:
            raise ValueError("node_type cannot be empty")
        if not self.display_name:
            raise ValueError("display_name cannot be empty")
        if not self.label_field:
            raise ValueError("label_field cannot be empty")


class BasePayload(ABC):
    """Abstract base class for typed node payloads.

    Subclasses parse the editor's camelCase ``data`` dict in ``from_data``
    and render the execution-trace description in ``describe``.
    """

    @classmethod
    @abstractmethod
    def from_data(cls: Type[T], data: Mapping[str, Any]) -> T:
        """Parse a payload from a node's ``data`` dict."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable description of this node as a simulation step."""


# Global registry for node types
NODE_REGISTRY: Dict[str, NodeDefinition] = {}


def register_node_type(
    node_type: str,
    display_name: str,
    color: str,
    label_field: str = "title",
) -> Callable[[Type[T]], Type[T]]:
    """Decorator to register a node payload class.

    Args:
        node_type: Wire identifier for the node type
        display_name: Human-readable name
        color: Palette colour code
        label_field: Payload field the label is recomputed from

    Returns:
        Decorator function that registers the class

    Example:
        @register_node_type(
            node_type="taskNode",
            display_name="Task",
            color="#FF9800",
        )
        @dataclass
        class TaskPayload(BasePayload):
            ...
    """

    def decorator(cls: Type[T]) -> Type[T]:
        NODE_REGISTRY[node_type] = NodeDefinition(
            node_type=node_type,
            display_name=display_name,
            color=color,
            label_field=label_field,
            payload_cls=cls,
        )
        logger.debug(f"Registered node type: {node_type} ({display_name})")
        return cls

    return decorator


def get_node_definition(node_type: str) -> Optional[NodeDefinition]:
    """Get the definition for a registered node type.

    Args:
        node_type: Type identifier

    Returns:
        NodeDefinition if found, None otherwise
    """
    return NODE_REGISTRY.get(node_type)


def list_node_types() -> List[NodeDefinition]:
    """List all registered node types in registration order."""
    return list(NODE_REGISTRY.values())


def is_node_type_registered(node_type: str) -> bool:
    """Check if a node type is registered."""
    return node_type in NODE_REGISTRY


def parse_payload(node_type: str, data: Mapping[str, Any]) -> Optional[BasePayload]:
    """Parse ``data`` into the typed payload of ``node_type``.

    Returns None for unregistered node types.
    """
    definition = NODE_REGISTRY.get(node_type)
    if definition is None:
        return None
    return definition.payload_cls.from_data(data)


def describe_node(node_type: str, data: Mapping[str, Any]) -> str:
    """Render the execution-trace description of a node.

    Unregistered node types fall back to a generic description built from
    the node's label.
    """
    payload = parse_payload(node_type, data)
    if payload is None:
        return f"Executing step: {data.get('label') or 'Unknown'}"
    return payload.describe()


def compute_label(node_type: str, data: Mapping[str, Any]) -> str:
    """Recompute a node's display label from its type-specific source field."""
    definition = NODE_REGISTRY.get(node_type)
    if definition is None:
        return data.get("label") or ""
    return data.get(definition.label_field) or ""


def default_data(node_type: str) -> Dict[str, Any]:
    """Initial ``data`` for a node freshly dropped on the canvas."""
    definition = NODE_REGISTRY.get(node_type)
    name = definition.display_name if definition else node_type
    return {"label": f"New {name}", "title": ""}
