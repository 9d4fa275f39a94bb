"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from registrar import __version__
from registrar.accounts import InvalidCredentialsError, PermissionDeniedError
from registrar.api.dependencies import close_registrar, init_registrar
from registrar.api.models import APIResponse
from registrar.api.routes import applicants, courses, registrations, sessions
from registrar.config import find_config, load_settings
from registrar.exceptions import RegistrarError
from registrar.store import ApplicantNotFoundError, CourseNotFoundError, ValidationError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from registrar.config import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    settings = app.state.settings
    if settings is None:
        settings = load_settings(find_config())
    init_registrar(settings)

    yield
    # Shutdown
    close_registrar()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Map registrar exceptions to API error responses."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(_request: Request, exc: ValidationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(
        _request: Request, _exc: InvalidCredentialsError
    ) -> JSONResponse:
        return _error(status.HTTP_401_UNAUTHORIZED, "Invalid credentials")

    @app.exception_handler(PermissionDeniedError)
    async def permission_denied_handler(
        _request: Request, exc: PermissionDeniedError
    ) -> JSONResponse:
        return _error(status.HTTP_403_FORBIDDEN, str(exc))

    @app.exception_handler(CourseNotFoundError)
    async def course_not_found_handler(
        _request: Request, _exc: CourseNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "Course not found")

    @app.exception_handler(ApplicantNotFoundError)
    async def applicant_not_found_handler(
        _request: Request, _exc: ApplicantNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "Application not found")

    @app.exception_handler(RegistrarError)
    async def registrar_error_handler(_request: Request, exc: RegistrarError) -> JSONResponse:
        logger.error("Unhandled registrar error: %s", exc, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Registrar settings. When None, registrar.yaml is looked up
            at startup and defaults are used if there is none.
    """
    app = FastAPI(
        title="Registrar API",
        description="REST API for course registration and admissions",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_exception_handlers(app)

    app.include_router(courses.router, prefix="/api/v1")
    app.include_router(registrations.router, prefix="/api/v1")
    app.include_router(applicants.router, prefix="/api/v1")
    app.include_router(sessions.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()
