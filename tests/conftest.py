import os

# must be set before health_companion.core.config is imported
os.environ["CHECKPOINT_BACKEND"] = "memory"
os.environ["INTERNAL_SERVICE_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    from health_companion.main import app
    return TestClient(app)


@pytest.fixture
def internal_headers():
    return {"X-Internal-Key": "test-secret"}
