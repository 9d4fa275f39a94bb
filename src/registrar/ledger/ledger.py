"""EnrollmentLedger - owns enrollment and completed-course facts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select

from registrar.store import CompletedCourse, Enrollment, normalize_key

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from registrar.store import Database

logger = logging.getLogger(__name__)


class EnrollmentLedger:
    """Set of (student, course) enrollments plus the completion facts used for
    prerequisite checks.

    Methods that take an optional session participate in the caller's
    transaction when one is given.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    def exists(self, student: str, course: str, session: Session | None = None) -> bool:
        """Check whether a student is enrolled in a course, ignoring case."""
        stmt = select(Enrollment.id).where(
            Enrollment.student_key == normalize_key(student),
            Enrollment.course_key == normalize_key(course),
        )
        if session is not None:
            return session.execute(stmt).first() is not None
        with self._db.transaction() as s:
            return s.execute(stmt).first() is not None

    def has_completed(self, student: str, course: str, session: Session | None = None) -> bool:
        """Check whether a student has a completion fact for a course."""
        key = (normalize_key(student), normalize_key(course))
        if session is not None:
            return session.get(CompletedCourse, key) is not None
        with self._db.transaction() as s:
            return s.get(CompletedCourse, key) is not None

    def record_completion(self, student: str, course: str) -> CompletedCourse:
        """Record that a student completed a course.

        Recording the same pair twice keeps the first fact.

        Args:
            student: Student username.
            course: Completed course code.

        Returns:
            The stored completion fact.
        """
        with self._db.transaction() as session:
            key = (normalize_key(student), normalize_key(course))
            fact = session.get(CompletedCourse, key)
            if fact is None:
                fact = CompletedCourse(student=student, course_code=course)
                session.add(fact)
                logger.info("Recorded completion of %s for %s", fact.course_code, fact.student)
            return fact

    def add(self, enrollment: Enrollment, session: Session) -> Enrollment:
        """Insert an enrollment inside the caller's transaction.

        No checks are made here; the registration engine validates first.
        """
        session.add(enrollment)
        session.flush()
        return enrollment

    def schedule_for(self, student: str) -> list[Enrollment]:
        """All enrollments of a student."""
        with self._db.transaction() as session:
            stmt = (
                select(Enrollment)
                .where(Enrollment.student_key == normalize_key(student))
                .order_by(Enrollment.enrolled_at)
            )
            return list(session.execute(stmt).scalars().all())

    def enrollments_for_course(self, course: str) -> list[Enrollment]:
        """All enrollments referencing a course code, including deleted courses."""
        with self._db.transaction() as session:
            stmt = (
                select(Enrollment)
                .where(Enrollment.course_key == normalize_key(course))
                .order_by(Enrollment.enrolled_at)
            )
            return list(session.execute(stmt).scalars().all())

    def completions_for(self, student: str) -> list[CompletedCourse]:
        """All completion facts of a student."""
        with self._db.transaction() as session:
            stmt = (
                select(CompletedCourse)
                .where(CompletedCourse.student_key == normalize_key(student))
                .order_by(CompletedCourse.course_key)
            )
            return list(session.execute(stmt).scalars().all())
