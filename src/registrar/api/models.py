"""Pydantic models for REST API."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from registrar.registration import RegistrationFailure, RegistrationResult
from registrar.store import ApplicationStatus, Role

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Course models


class CourseUpsert(BaseModel):
    """Request model for creating or replacing a course.

    Capacity is accepted as given, including zero or negative values.
    """

    title: str = Field(default="", max_length=255)
    department: str = Field(default="", max_length=100)
    capacity: int = 30
    credits: int = 3
    prerequisites: list[str] = Field(default_factory=list)


class CourseResponse(BaseModel):
    """Response model for a course."""

    model_config = ConfigDict(from_attributes=True)

    code: str
    title: str
    department: str
    capacity: int
    enrolled: int
    credits: int
    prerequisites: list[str]
    summary: str


def course_to_response(course: Any) -> CourseResponse:
    """Convert a Course model to CourseResponse."""
    return CourseResponse(
        code=course.code,
        title=course.title,
        department=course.department,
        capacity=course.capacity,
        enrolled=course.enrolled,
        credits=course.credits,
        prerequisites=list(course.prerequisites),
        summary=str(course),
    )


# Registration models


class RegistrationRequest(BaseModel):
    """Request model for a registration attempt."""

    username: str = Field(..., min_length=1, max_length=255)
    course_code: str = Field(..., min_length=1, max_length=50)


class EnrollmentResponse(BaseModel):
    """Response model for an enrollment."""

    model_config = ConfigDict(from_attributes=True)

    student: str
    course_code: str
    course_title: str
    enrolled_at: datetime


def enrollment_to_response(enrollment: Any) -> EnrollmentResponse:
    """Convert an Enrollment model to EnrollmentResponse."""
    return EnrollmentResponse.model_validate(enrollment)


class RegistrationResponse(BaseModel):
    """Response model for a registration attempt."""

    ok: bool
    message: str
    failure: RegistrationFailure | None = None
    prerequisite: str | None = None
    enrollment: EnrollmentResponse | None = None


def registration_to_response(result: RegistrationResult) -> RegistrationResponse:
    """Convert a RegistrationResult to RegistrationResponse."""
    return RegistrationResponse(
        ok=result.ok,
        message=result.message,
        failure=result.failure,
        prerequisite=result.prerequisite,
        enrollment=(
            enrollment_to_response(result.enrollment) if result.enrollment is not None else None
        ),
    )


class CompletionCreate(BaseModel):
    """Request model for recording a completed course."""

    course_code: str = Field(..., min_length=1, max_length=50)


class CompletionResponse(BaseModel):
    """Response model for a completed course."""

    model_config = ConfigDict(from_attributes=True)

    student: str
    course_code: str
    completed_at: datetime


def completion_to_response(completion: Any) -> CompletionResponse:
    """Convert a CompletedCourse model to CompletionResponse."""
    return CompletionResponse.model_validate(completion)


# Admissions models


class ApplicantCreate(BaseModel):
    """Request model for submitting an application."""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    submitted_at: datetime | None = None


class ApplicantResponse(BaseModel):
    """Response model for an applicant."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    submitted_at: datetime
    status: ApplicationStatus


def applicant_to_response(applicant: Any) -> ApplicantResponse:
    """Convert an Applicant model to ApplicantResponse."""
    return ApplicantResponse.model_validate(applicant)


class SubmissionResponse(BaseModel):
    """Response model for a submitted application."""

    id: int
    status: ApplicationStatus
    message: str


class DecisionRequest(BaseModel):
    """Request model for deciding an application."""

    status: ApplicationStatus


class DecisionResponse(BaseModel):
    """Response model for a decision."""

    id: int
    status: ApplicationStatus
    message: str


# Account models


class LoginRequest(BaseModel):
    """Request model for checking credentials."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class AccountResponse(BaseModel):
    """Response model for an account. Never includes credentials."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    role: Role


def account_to_response(account: Any) -> AccountResponse:
    """Convert an Account model to AccountResponse."""
    return AccountResponse.model_validate(account)
