"""Unit tests for the node registry and typed payloads

Tests cover:
- Registration of the five built-in node types
- Per-type descriptions and fallbacks
- Label recomputation and default data
- Approval role / threshold parsing
"""

import pytest

from hrflow.nodes import (
    NODE_REGISTRY,
    ApprovalPayload,
    ApproverRole,
    AutomatedPayload,
    BasePayload,
    NodeType,
    StartPayload,
    TaskPayload,
    compute_label,
    default_data,
    describe_node,
    get_node_definition,
    is_node_type_registered,
    list_node_types,
    parse_payload,
    register_node_type,
)


class TestRegistry:
    """Test built-in registrations and registry queries."""

    def test_builtin_types_registered_in_palette_order(self):
        types = [d.node_type for d in list_node_types()][:5]
        assert types == [t.value for t in NodeType]

    def test_definition_metadata(self):
        definition = get_node_definition("endNode")

        assert definition.display_name == "End"
        assert definition.color == "#F44336"
        assert definition.label_field == "endMessage"

    def test_unknown_type(self):
        assert not is_node_type_registered("webhookNode")
        assert get_node_definition("webhookNode") is None
        assert parse_payload("webhookNode", {}) is None

    def test_register_custom_type(self):
        @register_node_type("testTimerNode", display_name="Timer", color="#000000", label_field="name")
        class TimerPayload(BasePayload):
            def __init__(self, name):
                self.name = name

            @classmethod
            def from_data(cls, data):
                return cls(data.get("name", ""))

            def describe(self):
                return f"Waiting: {self.name}"

        try:
            assert describe_node("testTimerNode", {"name": "2 days"}) == "Waiting: 2 days"
            assert compute_label("testTimerNode", {"name": "2 days"}) == "2 days"
        finally:
            NODE_REGISTRY.pop("testTimerNode", None)


class TestDescriptions:
    """Test trace descriptions for each node type."""

    @pytest.mark.parametrize(
        "node_type,data,expected",
        [
            ("startNode", {"title": "Offboarding"}, "Starting workflow: Offboarding"),
            ("startNode", {}, "Starting workflow: Untitled Workflow"),
            ("taskNode", {"title": "Sign NDA", "assignee": "Alex"}, "Task assigned to Alex: Sign NDA"),
            ("taskNode", {}, "Task assigned to Unassigned: Untitled Task"),
            ("approvalNode", {"title": "Budget", "approverRole": "CEO"}, "Approval required from CEO: Budget"),
            ("approvalNode", {}, "Approval required from Unknown: Untitled Approval"),
            ("automatedNode", {"action": "send_email", "actionLabel": "Send Email"}, "Automated action: Send Email"),
            ("automatedNode", {"action": "send_email"}, "Automated action: send_email"),
            ("automatedNode", {}, "Automated action: No action selected"),
            ("endNode", {"endMessage": "All set"}, "Workflow completed: All set"),
            ("endNode", {}, "Workflow completed: End of workflow"),
            ("webhookNode", {"label": "Ping"}, "Executing step: Ping"),
            ("webhookNode", {}, "Executing step: Unknown"),
        ],
    )
    def test_describe_node(self, node_type, data, expected):
        assert describe_node(node_type, data) == expected


class TestPayloadParsing:
    """Test camelCase data parsing."""

    def test_start_metadata(self):
        payload = StartPayload.from_data({"title": "T", "metadata": [{"key": "dept", "value": "Eng"}]})
        assert payload.metadata[0].key == "dept"
        assert payload.metadata[0].value == "Eng"

    def test_task_fields(self):
        payload = TaskPayload.from_data({
            "title": "Laptop",
            "description": "Order laptop",
            "dueDate": "2026-11-01",
            "customFields": [{"key": "budget", "value": "2000"}],
        })
        assert payload.due_date == "2026-11-01"
        assert payload.custom_fields[0].value == "2000"

    def test_approval_role_and_threshold(self):
        payload = ApprovalPayload.from_data({"approverRole": "HRBP", "autoApproveThreshold": "500"})

        assert payload.role is ApproverRole.HRBP
        assert payload.threshold == 500.0

    def test_approval_empty_threshold(self):
        payload = ApprovalPayload.from_data({"autoApproveThreshold": ""})
        assert payload.threshold is None
        assert payload.role is None

    def test_approval_unknown_role_still_describes(self):
        payload = ApprovalPayload.from_data({"title": "X", "approverRole": "Intern"})
        assert payload.role is None
        assert payload.describe() == "Approval required from Intern: X"

    def test_approval_non_numeric_threshold(self):
        payload = ApprovalPayload.from_data({"autoApproveThreshold": "lots"})
        with pytest.raises(ValueError, match="must be numeric"):
            payload.threshold

    def test_automated_params_are_copied(self):
        params = {"to": "a@example.com"}
        payload = AutomatedPayload.from_data({"actionParams": params})
        payload.action_params["to"] = "b@example.com"
        assert params == {"to": "a@example.com"}

    def test_malformed_key_value_rows_are_dropped(self):
        payload = StartPayload.from_data({"title": "T", "metadata": ["x", {"key": "dept", "value": "Eng"}]})

        assert [row.key for row in payload.metadata] == ["dept"]
        assert payload.describe() == "Starting workflow: T"

    def test_non_list_custom_fields(self):
        payload = TaskPayload.from_data({"title": "T", "customFields": "oops"})
        assert payload.custom_fields == []

    def test_non_mapping_action_params(self):
        payload = AutomatedPayload.from_data({"action": "send_email", "actionParams": ["to"]})

        assert payload.action_params == {}
        assert payload.describe() == "Automated action: send_email"


class TestLabels:
    """Test label recomputation and default node data."""

    def test_title_drives_label(self):
        assert compute_label("taskNode", {"title": "Review", "label": "old"}) == "Review"

    def test_end_message_drives_end_label(self):
        assert compute_label("endNode", {"endMessage": "Bye", "title": "ignored"}) == "Bye"

    def test_unknown_type_keeps_label(self):
        assert compute_label("webhookNode", {"label": "Ping"}) == "Ping"

    def test_default_data(self):
        assert default_data("approvalNode") == {"label": "New Approval", "title": ""}
        assert default_data("webhookNode") == {"label": "New webhookNode", "title": ""}
