"""
Fixtures for API endpoint tests.

Builds a FastAPI app carrying the production middleware and error
handlers, with services replaced through dependency overrides.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ragchat.api import api_router
from ragchat.api.routers.router_utils import register_exception_handlers
from ragchat.observability.middleware import CorrelationMiddleware


@pytest.fixture
def app() -> FastAPI:
    """Create FastAPI test application with all routers."""
    app = FastAPI()
    app.add_middleware(CorrelationMiddleware)
    register_exception_handlers(app)
    app.include_router(api_router)
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)
