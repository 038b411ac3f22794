"""FastAPI Application Entry Point.

Configures the app, lifespan, CORS, and includes all route modules.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hrflow import settings
from hrflow.config import CORS_ORIGINS
from hrflow.logging_config import get_api_logger

# Ensure node types are registered at import time
import hrflow.nodes.payloads  # noqa: F401

logger = get_api_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the simulated boundary latencies the server runs with."""
    logger.info(
        f"HR workflow designer API starting "
        f"(simulation latency={settings.SIMULATION_LATENCY}s, "
        f"automation latency={settings.AUTOMATION_LATENCY}s)"
    )
    yield
    logger.info("HR workflow designer API stopped")


app = FastAPI(title="HR Workflow Designer API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
from .routes.simulation import router as simulation_router  # noqa: E402
from .routes.automations import router as automations_router  # noqa: E402
from .routes.validation import router as validation_router  # noqa: E402

app.include_router(simulation_router)
app.include_router(automations_router)
app.include_router(validation_router)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "ok"}


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    from hrflow.config import API_HOST, API_PORT

    uvicorn.run("app.main:app", host=API_HOST, port=API_PORT)
