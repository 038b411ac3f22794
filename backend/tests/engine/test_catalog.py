"""Unit tests for the Automation Catalog

Tests cover:
- Descriptor validation and immutability
- Registration, lookup and ordering
- Async listing boundary
- Data-driven parameter forms
"""

from dataclasses import FrozenInstanceError

import pytest

from hrflow.automations.catalog import (
    AutomationCatalog,
    AutomationDescriptor,
    ParamField,
    build_param_form,
    default_catalog,
    filter_params,
    list_automations,
)


class TestAutomationDescriptor:
    """Test AutomationDescriptor dataclass."""

    def test_params_become_tuple(self):
        descriptor = AutomationDescriptor("x", "X", ["a", "b"])
        assert descriptor.params == ("a", "b")
        assert descriptor.to_dict() == {"id": "x", "label": "X", "params": ["a", "b"]}

    def test_immutable(self):
        descriptor = AutomationDescriptor("x", "X")
        with pytest.raises(FrozenInstanceError):
            descriptor.label = "Y"

    def test_empty_id(self):
        with pytest.raises(ValueError, match="automation id cannot be empty"):
            AutomationDescriptor("", "X")

    def test_duplicate_params(self):
        with pytest.raises(ValueError, match="duplicate parameter names"):
            AutomationDescriptor("x", "X", ("a", "a"))


class TestAutomationCatalog:
    """Test catalog registration and lookups."""

    def test_default_catalog_contents(self):
        catalog = default_catalog()

        assert [d.id for d in catalog.list()] == ["send_email", "generate_doc", "create_ticket", "notify_slack"]
        assert catalog.get("send_email").params == ("to", "subject", "body")
        assert catalog.label_for("generate_doc") == "Generate Document"

    def test_default_catalogs_are_independent(self):
        first = default_catalog()
        first.register(AutomationDescriptor("custom", "Custom"))

        assert "custom" in first
        assert "custom" not in default_catalog()

    def test_duplicate_registration(self):
        catalog = default_catalog()
        with pytest.raises(ValueError, match="already registered"):
            catalog.register(AutomationDescriptor("send_email", "Another"))

    def test_unknown_lookups(self):
        catalog = default_catalog()

        assert catalog.get("nope") is None
        assert catalog.label_for("nope") is None
        with pytest.raises(KeyError, match="Unknown automation: nope"):
            catalog.require("nope")

    def test_registration_order_is_kept(self):
        catalog = AutomationCatalog([AutomationDescriptor("b", "B"), AutomationDescriptor("a", "A")])
        assert [d.id for d in catalog.list()] == ["b", "a"]
        assert len(catalog) == 2


class TestListAutomations:
    """Test the async listing boundary."""

    @pytest.mark.asyncio
    async def test_lists_default_catalog(self):
        descriptors = await list_automations(latency=0)
        assert [d.label for d in descriptors] == ["Send Email", "Generate Document", "Create Ticket", "Notify Slack"]

    @pytest.mark.asyncio
    async def test_lists_given_catalog(self):
        catalog = AutomationCatalog([AutomationDescriptor("only", "Only")])
        assert await list_automations(catalog, latency=0) == [AutomationDescriptor("only", "Only")]

    @pytest.mark.asyncio
    async def test_empty_catalog_lists_nothing(self):
        assert await list_automations(AutomationCatalog(), latency=0) == []


class TestParamForm:
    """Test data-driven parameter forms."""

    def test_form_follows_declared_order(self):
        descriptor = default_catalog().require("send_email")

        form = build_param_form(descriptor, {"body": "Hi", "to": "new@example.com"})

        assert form == [
            ParamField("to", "new@example.com"),
            ParamField("subject", ""),
            ParamField("body", "Hi"),
        ]

    def test_undeclared_values_are_dropped(self):
        descriptor = default_catalog().require("notify_slack")

        form = build_param_form(descriptor, {"channel": "#hr", "priority": "high"})

        assert [f.name for f in form] == ["channel", "message"]

    def test_filter_params_keeps_only_provided_declared_values(self):
        descriptor = default_catalog().require("create_ticket")
        assert filter_params(descriptor, {"title": "Laptop", "bogus": "x"}) == {"title": "Laptop"}
