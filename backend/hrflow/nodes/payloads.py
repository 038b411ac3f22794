"""Typed payloads for the five built-in node types.

Importing this module registers Start, Task, Approval, Automated and End
with the node registry. Field names follow Python conventions; ``from_data``
maps them from the editor's camelCase ``data`` keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .registry import BasePayload, register_node_type
from .types import NodeType


class ApproverRole(str, Enum):
    """Roles an approval step can be routed to."""

    MANAGER = "Manager"
    HRBP = "HRBP"
    DIRECTOR = "Director"
    VP = "VP"
    CEO = "CEO"


@dataclass
class KeyValue:
    """One row of a free-form key/value list (metadata, custom fields)."""

    key: str = ""
    value: str = ""


def _key_values(raw: Any) -> List[KeyValue]:
    # Rows that are not key/value objects are dropped
    if not isinstance(raw, (list, tuple)):
        return []
    return [
        KeyValue(key=item.get("key", ""), value=item.get("value", ""))
        for item in raw
        if isinstance(item, Mapping)
    ]


@register_node_type(NodeType.START.value, display_name="Start", color="#2196F3")
@dataclass
class StartPayload(BasePayload):
    title: str = ""
    metadata: List[KeyValue] = field(default_factory=list)

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "StartPayload":
        return cls(title=data.get("title") or "", metadata=_key_values(data.get("metadata")))

    def describe(self) -> str:
        return f"Starting workflow: {self.title or 'Untitled Workflow'}"


@register_node_type(NodeType.TASK.value, display_name="Task", color="#FF9800")
@dataclass
class TaskPayload(BasePayload):
    title: str = ""
    description: str = ""
    assignee: str = ""
    due_date: str = ""
    custom_fields: List[KeyValue] = field(default_factory=list)

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "TaskPayload":
        return cls(
            title=data.get("title") or "",
            description=data.get("description") or "",
            assignee=data.get("assignee") or "",
            due_date=data.get("dueDate") or "",
            custom_fields=_key_values(data.get("customFields")),
        )

    def describe(self) -> str:
        return f"Task assigned to {self.assignee or 'Unassigned'}: {self.title or 'Untitled Task'}"


@register_node_type(NodeType.APPROVAL.value, display_name="Approval", color="#4CAF50")
@dataclass
class ApprovalPayload(BasePayload):
    """Approval step.

    ``approver_role`` and ``auto_approve_threshold`` keep the raw form values
    so that describing a half-filled node never fails; ``role`` and
    ``threshold`` give the typed views.
    """

    title: str = ""
    approver_role: str = ""
    auto_approve_threshold: Any = ""

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "ApprovalPayload":
        return cls(
            title=data.get("title") or "",
            approver_role=data.get("approverRole") or "",
            auto_approve_threshold=data.get("autoApproveThreshold", ""),
        )

    @property
    def role(self) -> Optional[ApproverRole]:
        """Typed approver role, None when unset or not a known role."""
        if self.approver_role not in {r.value for r in ApproverRole}:
            return None
        return ApproverRole(self.approver_role)

    @property
    def threshold(self) -> Optional[float]:
        """Numeric threshold, None when the field is empty.

        Raises:
            ValueError: If a non-empty value is not numeric
        """
        return _threshold(self.auto_approve_threshold)

    def describe(self) -> str:
        return f"Approval required from {self.approver_role or 'Unknown'}: {self.title or 'Untitled Approval'}"


def _threshold(raw: Any) -> Optional[float]:
    """Parse the auto-approve threshold; empty input means no threshold.

    Raises:
        ValueError: If a non-empty value is not numeric
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ValueError(f"autoApproveThreshold must be numeric, got {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"autoApproveThreshold must be numeric, got {raw!r}") from e


@register_node_type(NodeType.AUTOMATED.value, display_name="Automated", color="#9C27B0")
@dataclass
class AutomatedPayload(BasePayload):
    title: str = ""
    action: str = ""
    action_label: str = ""
    action_params: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "AutomatedPayload":
        return cls(
            title=data.get("title") or "",
            action=data.get("action") or "",
            action_label=data.get("actionLabel") or "",
            action_params=_params(data.get("actionParams")),
        )

    def describe(self) -> str:
        return f"Automated action: {self.action_label or self.action or 'No action selected'}"


def _params(raw: Any) -> Dict[str, str]:
    if not isinstance(raw, Mapping):
        return {}
    return {str(k): v for k, v in raw.items()}


@register_node_type(
    NodeType.END.value, display_name="End", color="#F44336", label_field="endMessage"
)
@dataclass
class EndPayload(BasePayload):
    end_message: str = ""
    show_summary: bool = False

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "EndPayload":
        return cls(
            end_message=data.get("endMessage") or "",
            show_summary=bool(data.get("showSummary", False)),
        )

    def describe(self) -> str:
        return f"Workflow completed: {self.end_message or 'End of workflow'}"
