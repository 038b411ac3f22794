"""Automation Catalog

Registry of the automated actions an Automated node may reference. Actions
are simulated: the catalog only describes them (id, label, ordered parameter
names) so the editor can build a parameter form and cache the label on the
node. Nothing here invokes an action.

Key Components:
- AutomationDescriptor: Immutable description of one action
- AutomationCatalog: Ordered registry with lookup by id
- list_automations: Async listing boundary with simulated latency
- build_param_form: Data-driven parameter form for a descriptor
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .. import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutomationDescriptor:
    """Description of a simulated automated action.

    Attributes:
        id: Unique action identifier referenced by Automated nodes
        label: Human-readable action name
        params: Ordered parameter names driving the parameter form
    """

    id: str
    label: str
    params: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.id:
            raise ValueError("automation id cannot be empty")
        if not self.label:
            raise ValueError("automation label cannot be empty")
        # Accept any iterable of names but store an immutable tuple
        object.__setattr__(self, "params", tuple(self.params))
        if len(set(self.params)) != len(self.params):
            raise ValueError(f"automation {self.id}: duplicate parameter names")

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "label": self.label, "params": list(self.params)}


@dataclass(frozen=True)
class ParamField:
    """One field of a rendered parameter form."""

    name: str
    value: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "value": self.value}


class AutomationCatalog:
    """Ordered registry of automation descriptors."""

    def __init__(self, descriptors: Iterable[AutomationDescriptor] = ()) -> None:
        self._descriptors: Dict[str, AutomationDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: AutomationDescriptor) -> None:
        """Add ``descriptor`` to the catalog.

        Raises:
            ValueError: If an action with the same id is already registered
        """
        if descriptor.id in self._descriptors:
            raise ValueError(f"automation already registered: {descriptor.id}")
        self._descriptors[descriptor.id] = descriptor
        logger.debug(f"Registered automation: {descriptor.id} ({descriptor.label})")

    def get(self, automation_id: str) -> Optional[AutomationDescriptor]:
        return self._descriptors.get(automation_id)

    def require(self, automation_id: str) -> AutomationDescriptor:
        """Look up an action by id.

        Raises:
            KeyError: If no action has that id
        """
        descriptor = self._descriptors.get(automation_id)
        if descriptor is None:
            available = list(self._descriptors)
            raise KeyError(f"Unknown automation: {automation_id}. Available: {available}")
        return descriptor

    def label_for(self, automation_id: str) -> Optional[str]:
        descriptor = self._descriptors.get(automation_id)
        return descriptor.label if descriptor else None

    def list(self) -> List[AutomationDescriptor]:
        """All descriptors in registration order."""
        return list(self._descriptors.values())

    def __contains__(self, automation_id: object) -> bool:
        return automation_id in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)


DEFAULT_AUTOMATIONS: Tuple[AutomationDescriptor, ...] = (
    AutomationDescriptor("send_email", "Send Email", ("to", "subject", "body")),
    AutomationDescriptor("generate_doc", "Generate Document", ("template", "recipient")),
    AutomationDescriptor("create_ticket", "Create Ticket", ("title", "priority")),
    AutomationDescriptor("notify_slack", "Notify Slack", ("channel", "message")),
)


def default_catalog() -> AutomationCatalog:
    """A fresh catalog holding the built-in simulated actions."""
    return AutomationCatalog(DEFAULT_AUTOMATIONS)


async def list_automations(
    catalog: Optional[AutomationCatalog] = None,
    latency: Optional[float] = None,
) -> List[AutomationDescriptor]:
    """Asynchronous listing boundary.

    Args:
        catalog: Catalog to list (defaults to the built-in actions)
        latency: Simulated network delay in seconds (defaults to settings)
    """
    delay = settings.AUTOMATION_LATENCY if latency is None else latency
    if delay > 0:
        await asyncio.sleep(delay)
    if catalog is None:
        catalog = default_catalog()
    return catalog.list()


def build_param_form(
    descriptor: AutomationDescriptor,
    values: Optional[Mapping[str, str]] = None,
) -> List[ParamField]:
    """Build the parameter form for ``descriptor``.

    Fields follow the descriptor's declared parameter order; current values
    fill matching fields and values for undeclared parameters are dropped.
    """
    values = values or {}
    return [ParamField(name=name, value=values.get(name) or "") for name in descriptor.params]


def filter_params(descriptor: AutomationDescriptor, values: Mapping[str, str]) -> Dict[str, str]:
    """Keep only the values of parameters ``descriptor`` declares."""
    return {f.name: f.value for f in build_param_form(descriptor, values) if f.name in values}
