"""Automation catalog endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from hrflow.automations.catalog import (
    AutomationCatalog,
    build_param_form,
    default_catalog,
    list_automations,
)

from ..schemas import (
    AutomationFormResponse,
    AutomationResponse,
    ParamFieldResponse,
    ParamValuesRequest,
)

router = APIRouter(prefix="/api/automations", tags=["automations"])

_catalog = default_catalog()


def get_catalog() -> AutomationCatalog:
    """Return the catalog served by the API (the built-in actions)."""
    return _catalog


@router.get("", response_model=List[AutomationResponse])
async def get_automations(catalog: AutomationCatalog = Depends(get_catalog)):
    """List the available automated actions in catalog order."""
    descriptors = await list_automations(catalog)
    return [AutomationResponse(**d.to_dict()) for d in descriptors]


@router.post("/{automation_id}/form", response_model=AutomationFormResponse)
def get_automation_form(
    automation_id: str,
    payload: Optional[ParamValuesRequest] = None,
    catalog: AutomationCatalog = Depends(get_catalog),
):
    """Build the parameter form of an action, filled with the node's current values."""
    descriptor = catalog.get(automation_id)
    if descriptor is None:
        raise HTTPException(status_code=404, detail=f"Unknown automation: {automation_id}")

    values = payload.values if payload else {}
    return AutomationFormResponse(
        id=descriptor.id,
        label=descriptor.label,
        fields=[ParamFieldResponse(**f.to_dict()) for f in build_param_form(descriptor, values)],
    )
