"""Root conftest for API and engine tests.

Provides:
- A throwaway log directory (set before any hrflow import)
- Zero simulated latency for the async boundaries
- FastAPI test client over httpx's ASGI transport
"""

from __future__ import annotations

import os
import tempfile
from typing import AsyncGenerator
from unittest.mock import patch

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="hrflow-logs-"))

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402


@pytest.fixture(autouse=True)
def no_latency():
    """Disable the simulated network delay of simulate/list_automations."""
    with patch("hrflow.settings.SIMULATION_LATENCY", 0.0), \
            patch("hrflow.settings.AUTOMATION_LATENCY", 0.0):
        yield


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI routes."""
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Export-format workflow documents
# ---------------------------------------------------------------------------

def node_doc(node_id: str, node_type: str, **data) -> dict:
    return {"id": node_id, "type": node_type, "position": {"x": 0, "y": 0}, "data": data}


def edge_doc(edge_id: str, source: str, target: str) -> dict:
    return {"id": edge_id, "source": source, "target": target}


@pytest.fixture
def linear_workflow() -> dict:
    """Start → Task → End, fully filled in."""
    return {
        "nodes": [
            node_doc("start", "startNode", label="Onboarding", title="Onboarding"),
            node_doc("task", "taskNode", label="Collect documents", title="Collect documents", assignee="HR Team"),
            node_doc("end", "endNode", label="Done", endMessage="Done"),
        ],
        "edges": [
            edge_doc("e1", "start", "task"),
            edge_doc("e2", "task", "end"),
        ],
    }
