"""Exceptions for the registration module."""

from registrar.exceptions import RegistrarError


class RegistrationError(RegistrarError):
    """Base exception for registration errors.

    Ordinary registration failures are returned as results, not raised.
    """


class SeatInvariantError(RegistrationError):
    """A course was observed with more students enrolled than its capacity."""
