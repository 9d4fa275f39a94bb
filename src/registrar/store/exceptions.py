"""Custom exceptions for the record store."""

from registrar.exceptions import RegistrarError


class StoreError(RegistrarError):
    """Base exception for record store errors."""


class ValidationError(StoreError):
    """Record failed validation before being written."""


class CourseNotFoundError(StoreError):
    """Course with given code does not exist."""


class ApplicantNotFoundError(StoreError):
    """Applicant with given ID does not exist."""


class DatabaseClosedError(StoreError):
    """Database was used after close()."""
