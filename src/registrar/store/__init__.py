"""Record Store - SQLite-backed storage shared by the registrar components."""

from registrar.store.database import Database
from registrar.store.exceptions import (
    ApplicantNotFoundError,
    CourseNotFoundError,
    DatabaseClosedError,
    StoreError,
    ValidationError,
)
from registrar.store.models import (
    Account,
    Applicant,
    ApplicationStatus,
    CompletedCourse,
    Course,
    Enrollment,
    Role,
    normalize_key,
)

__all__ = [
    "Account",
    "Applicant",
    "ApplicantNotFoundError",
    "ApplicationStatus",
    "CompletedCourse",
    "Course",
    "CourseNotFoundError",
    "Database",
    "DatabaseClosedError",
    "Enrollment",
    "Role",
    "StoreError",
    "ValidationError",
    "normalize_key",
]
