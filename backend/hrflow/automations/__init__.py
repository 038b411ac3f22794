"""Automation catalog of simulated actions available to Automated nodes."""

from .catalog import (
    DEFAULT_AUTOMATIONS,
    AutomationCatalog,
    AutomationDescriptor,
    ParamField,
    build_param_form,
    default_catalog,
    filter_params,
    list_automations,
)

__all__ = [
    "DEFAULT_AUTOMATIONS",
    "AutomationCatalog",
    "AutomationDescriptor",
    "ParamField",
    "build_param_form",
    "default_catalog",
    "filter_params",
    "list_automations",
]
