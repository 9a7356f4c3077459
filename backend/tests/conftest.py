from __future__ import annotations

from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure the backend root is importable even when pytest runs from the repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from app.config import Settings, get_settings
from app.main import app


@pytest.fixture()
def api_client():
    """Provide a TestClient with a small step cap so limits are cheap to hit."""

    settings = Settings(max_steps=1_000)
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as client:
        yield client, settings
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture()
def reference_request() -> dict:
    return {
        "pump": {"flow_rate": 0.01, "head": 10.0},
        "pipe": {"length": 50.0, "diameter": 0.1, "roughness": 0.015, "density": 1000.0},
        "tank": {"height": 5.0, "radius": 1.0},
        "duration": 60.0,
        "time_step": 1.0,
    }
