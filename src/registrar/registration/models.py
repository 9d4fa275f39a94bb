"""Data models for the registration module."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from registrar.store import Enrollment


class RegistrationFailure(StrEnum):
    """Why a registration attempt was rejected."""

    NOT_AUTHORIZED = "not_authorized"
    NOT_FOUND = "not_found"
    COURSE_FULL = "course_full"
    ALREADY_ENROLLED = "already_enrolled"
    MISSING_PREREQUISITE = "missing_prerequisite"


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of one registration attempt.

    Unpacks as ``ok, message = result``.

    Attributes:
        ok: Whether the student was registered.
        message: Human-readable outcome.
        failure: Failure kind when ok is False.
        prerequisite: First unmet prerequisite code for MISSING_PREREQUISITE.
        enrollment: The new enrollment when ok is True.
    """

    ok: bool
    message: str
    failure: RegistrationFailure | None = None
    prerequisite: str | None = None
    enrollment: Enrollment | None = None

    @classmethod
    def success(cls, enrollment: Enrollment) -> RegistrationResult:
        return cls(
            ok=True,
            message=f"Registered in {enrollment.course_code} - {enrollment.course_title}.",
            enrollment=enrollment,
        )

    @classmethod
    def rejected(
        cls,
        failure: RegistrationFailure,
        message: str,
        prerequisite: str | None = None,
    ) -> RegistrationResult:
        return cls(ok=False, message=message, failure=failure, prerequisite=prerequisite)

    def __iter__(self) -> Iterator[bool | str]:
        yield self.ok
        yield self.message
