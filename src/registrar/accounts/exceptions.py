"""Exceptions for the accounts module."""

from registrar.exceptions import RegistrarError


class PermissionDeniedError(RegistrarError):
    """Account is missing or its role lacks the required permission."""


class InvalidCredentialsError(PermissionDeniedError):
    """Username and password do not match an account."""
