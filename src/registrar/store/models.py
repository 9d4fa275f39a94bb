"""SQLAlchemy models for the record store."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from sqlalchemy import (
    JSON,
    DateTime,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
)


class Role(StrEnum):
    """Account role enum."""

    STUDENT = "student"
    FACULTY = "faculty"
    ADMIN = "admin"


class ApplicationStatus(StrEnum):
    """Admissions application status enum."""

    SUBMITTED = "submitted"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Whether the status is a decision (accepted or rejected)."""
        return self is not ApplicationStatus.SUBMITTED


def normalize_key(value: str) -> str:
    """Normalize an identifier for case-insensitive lookup."""
    return value.strip().casefold()


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Current time in UTC."""
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Account(Base):
    """Account model - a user known to the registrar."""

    __tablename__ = "accounts"

    username_key: Mapped[str] = mapped_column(String(255), primary_key=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    def __init__(
        self,
        username: str,
        role: Role | str,
        password_hash: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.username = username.strip()
        self.username_key = normalize_key(username)
        self.role = Role(role).value
        self.password_hash = password_hash

    @property
    def account_role(self) -> Role:
        """Get role as Role enum."""
        return Role(self.role)

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"

    def __repr__(self) -> str:
        return f"<Account(username={self.username!r}, role={self.role!r})>"


class Course(Base):
    """Course model - a catalog entry with finite capacity."""

    __tablename__ = "courses"

    code_key: Mapped[str] = mapped_column(String(50), primary_key=True)
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    department: Mapped[str] = mapped_column(String(100), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    enrolled: Mapped[int] = mapped_column(Integer, nullable=False)
    credits: Mapped[int] = mapped_column(Integer, nullable=False)
    prerequisites: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __init__(
        self,
        code: str,
        title: str = "",
        department: str = "",
        capacity: int = 30,
        credits: int = 3,
        prerequisites: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.code = code.strip()
        self.code_key = normalize_key(code)
        self.title = title
        self.department = department
        self.capacity = capacity
        self.credits = credits
        self.prerequisites = list(prerequisites) if prerequisites is not None else []
        self.enrolled = 0

    def has_seat_available(self) -> bool:
        """Whether at least one seat is still free."""
        return self.enrolled < self.capacity

    def __str__(self) -> str:
        return f"{self.code} - {self.title} (Seats: {self.enrolled}/{self.capacity})"

    def __repr__(self) -> str:
        return (
            f"<Course(code={self.code!r}, enrolled={self.enrolled!r}, "
            f"capacity={self.capacity!r})>"
        )


class Enrollment(Base):
    """Enrollment model - a student's seat in a course.

    Code and title are copied from the course at registration time so the
    record stays readable if the course is later deleted from the catalog.
    """

    __tablename__ = "enrollments"
    __table_args__ = (UniqueConstraint("student_key", "course_key", name="uq_enrollment_pair"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    student_key: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    student: Mapped[str] = mapped_column(String(255), nullable=False)
    course_key: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    course_code: Mapped[str] = mapped_column(String(50), nullable=False)
    course_title: Mapped[str] = mapped_column(String(255), nullable=False)
    enrolled_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __init__(
        self,
        student: str,
        course_code: str,
        course_title: str = "",
        id: str | None = None,
        enrolled_at: datetime | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.student = student.strip()
        self.student_key = normalize_key(student)
        self.course_code = course_code.strip()
        self.course_key = normalize_key(course_code)
        self.course_title = course_title
        self.enrolled_at = enrolled_at if enrolled_at is not None else utcnow()

    def __str__(self) -> str:
        return f"{self.student} -> {self.course_code} @ {self.enrolled_at:%Y-%m-%d %H:%M:%SZ}"

    def __repr__(self) -> str:
        return f"<Enrollment(student={self.student!r}, course_code={self.course_code!r})>"


class CompletedCourse(Base):
    """Completed course model - transcript fact used for prerequisite checks."""

    __tablename__ = "completed_courses"

    student_key: Mapped[str] = mapped_column(String(255), primary_key=True)
    course_key: Mapped[str] = mapped_column(String(50), primary_key=True)
    student: Mapped[str] = mapped_column(String(255), nullable=False)
    course_code: Mapped[str] = mapped_column(String(50), nullable=False)
    completed_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __init__(
        self,
        student: str,
        course_code: str,
        completed_at: datetime | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.student = student.strip()
        self.student_key = normalize_key(student)
        self.course_code = course_code.strip()
        self.course_key = normalize_key(course_code)
        self.completed_at = completed_at if completed_at is not None else utcnow()

    def __repr__(self) -> str:
        return f"<CompletedCourse(student={self.student!r}, course_code={self.course_code!r})>"


class Applicant(Base):
    """Applicant model - one admissions submission and its decision."""

    __tablename__ = "applicants"
    # AUTOINCREMENT keeps SQLite from ever handing out a used id again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name_key: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    submitted_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)

    def __init__(
        self,
        first_name: str,
        last_name: str,
        submitted_at: datetime | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.first_name = first_name
        self.last_name = last_name
        self.last_name_key = normalize_key(last_name)
        self.submitted_at = submitted_at if submitted_at is not None else utcnow()
        self.status = ApplicationStatus.SUBMITTED.value

    @property
    def application_status(self) -> ApplicationStatus:
        """Get status as ApplicationStatus enum."""
        return ApplicationStatus(self.status)

    @application_status.setter
    def application_status(self, value: ApplicationStatus) -> None:
        """Set status from ApplicationStatus enum."""
        self.status = value.value

    def __str__(self) -> str:
        return f"#{self.id} {self.first_name} {self.last_name} ({self.status})"

    def __repr__(self) -> str:
        return f"<Applicant(id={self.id!r}, last_name={self.last_name!r}, status={self.status!r})>"
