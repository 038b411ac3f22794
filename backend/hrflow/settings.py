"""Runtime settings: tunable parameters for the simulation boundary.

All values read from environment variables with sensible defaults matching
the editor's mock API latencies. Import from here instead of hardcoding.

Infrastructure config (API host, CORS, log directory) stays in
hrflow/config.py.
"""

from __future__ import annotations

import os


def _float(key: str, default: float) -> float:
    return float(os.getenv(key, str(default)))


def _str(key: str, default: str) -> str:
    return os.getenv(key, default)


# =====================================================================
# Simulated boundary latency (seconds)
# =====================================================================

# POST /simulate: delay before the workflow is validated and planned
SIMULATION_LATENCY = _float("SIMULATION_LATENCY", 0.5)

# GET /automations: delay before the catalog listing is returned
AUTOMATION_LATENCY = _float("AUTOMATION_LATENCY", 0.3)


# =====================================================================
# Logging
# =====================================================================

# Level applied to the file and console handlers of named loggers
LOG_LEVEL = _str("LOG_LEVEL", "INFO").upper()
