"""Fixtures for API route tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from registrar.api.app import install_exception_handlers
from registrar.api.dependencies import get_registrar
from registrar.api.routes import applicants, courses, registrations, sessions
from registrar.bootstrap import Registrar


@pytest.fixture
def app(seeded: Registrar):
    """Create a test FastAPI app over a seeded in-memory registrar."""
    app = FastAPI()

    # Override registrar dependency
    def override_get_registrar():
        yield seeded

    app.dependency_overrides[get_registrar] = override_get_registrar

    install_exception_handlers(app)

    # Include routes
    app.include_router(courses.router, prefix="/api/v1")
    app.include_router(registrations.router, prefix="/api/v1")
    app.include_router(applicants.router, prefix="/api/v1")
    app.include_router(sessions.router, prefix="/api/v1")

    return app


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client

