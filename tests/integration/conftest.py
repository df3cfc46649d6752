"""Integration test fixtures (HTTP client and dependency overrides).

Integration tests run the FastAPI app in-process through TestClient. The
validation pipeline dependency is overridden with one wired to the fake
adapters, so no validation engine needs to be installed.
"""

import pytest
from fastapi.testclient import TestClient

from ccda_validation.api.dependencies import get_validation_pipeline
from ccda_validation.main import app


@pytest.fixture
def client():
    """TestClient with no dependency overrides (adapters come from settings)."""
    get_validation_pipeline.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_validation_pipeline.cache_clear()


@pytest.fixture
def pipeline_client(pipeline):
    """TestClient whose validation pipeline uses the fake adapters."""
    app.dependency_overrides[get_validation_pipeline] = lambda: pipeline
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
