"""REST API for Registrar."""

from registrar.api.app import app, create_app
from registrar.api.models import (
    APIResponse,
    CourseResponse,
    CourseUpsert,
    RegistrationRequest,
    RegistrationResponse,
)

__all__ = [
    "APIResponse",
    "CourseResponse",
    "CourseUpsert",
    "RegistrationRequest",
    "RegistrationResponse",
    "app",
    "create_app",
]
