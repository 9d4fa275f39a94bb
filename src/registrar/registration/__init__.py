"""Registration Engine - atomic capacity, duplicate and prerequisite checks."""

from registrar.registration.engine import RegistrationEngine
from registrar.registration.exceptions import RegistrationError, SeatInvariantError
from registrar.registration.models import RegistrationFailure, RegistrationResult

__all__ = [
    "RegistrationEngine",
    "RegistrationError",
    "RegistrationFailure",
    "RegistrationResult",
    "SeatInvariantError",
]
