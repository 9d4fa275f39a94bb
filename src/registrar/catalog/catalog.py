"""CourseCatalog - owns course records and their capacity metadata."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select

from registrar.store import Course, ValidationError, normalize_key

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from registrar.store import Database

logger = logging.getLogger(__name__)


def normalize_prerequisites(code: str, prerequisites: list[str]) -> list[str]:
    """Clean a prerequisite list into an ordered set of codes.

    Strips whitespace, drops blanks and keeps the first spelling of codes that
    differ only by case.

    Args:
        code: Code of the course that owns the list.
        prerequisites: Raw prerequisite codes.

    Returns:
        Normalized prerequisite codes in declaration order.

    Raises:
        ValidationError: If the course lists itself as a prerequisite.
    """
    own_key = normalize_key(code)
    seen: set[str] = set()
    result: list[str] = []
    for raw in prerequisites:
        key = normalize_key(raw)
        if not key or key in seen:
            continue
        if key == own_key:
            raise ValidationError(f"Course {code.strip()} cannot be its own prerequisite.")
        seen.add(key)
        result.append(raw.strip())
    return result


class CourseCatalog:
    """Catalog of courses keyed by case-insensitive code.

    Seat counts are read here but only ever incremented by the registration
    engine, inside its own transaction.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    def get(self, code: str, session: Session | None = None) -> Course | None:
        """Look up a course by code, ignoring case.

        Args:
            code: Course code.
            session: Open session to read through (used by the registration
                engine so the row stays attached to its transaction).

        Returns:
            The course, or None if no course has that code.
        """
        key = normalize_key(code)
        if not key:
            return None
        if session is not None:
            return session.get(Course, key)
        with self._db.transaction() as s:
            return s.get(Course, key)

    def list(self) -> list[Course]:
        """List all courses ordered by code, ignoring case."""
        with self._db.transaction() as session:
            stmt = select(Course).order_by(Course.code_key)
            return list(session.execute(stmt).scalars().all())

    def search(self, term: str | None) -> list[Course]:
        """Find courses whose code, title or department contains a term.

        Args:
            term: Search text. Blank or None matches every course.

        Returns:
            Matching courses ordered like list().
        """
        courses = self.list()
        if term is None or not term.strip():
            return courses
        needle = normalize_key(term)
        return [
            c
            for c in courses
            if needle in c.code.casefold()
            or needle in c.title.casefold()
            or needle in c.department.casefold()
        ]

    def upsert(self, course: Course) -> Course:
        """Insert a course or replace the one with the same code.

        The stored seat count is kept on replace. Capacity is accepted as given.

        Args:
            course: Course carrying the desired field values.

        Returns:
            The stored course.

        Raises:
            ValidationError: If the code is blank or the course requires itself.
        """
        if not course.code or not course.code.strip():
            raise ValidationError("Course code is required.")
        prerequisites = normalize_prerequisites(course.code, course.prerequisites or [])

        with self._db.transaction() as session:
            existing = session.get(Course, normalize_key(course.code))
            if existing is None:
                stored = Course(
                    code=course.code,
                    title=course.title,
                    department=course.department,
                    capacity=course.capacity,
                    credits=course.credits,
                    prerequisites=prerequisites,
                )
                session.add(stored)
                logger.info("Added course %s (capacity %d)", stored.code, stored.capacity)
            else:
                stored = existing
                stored.code = course.code.strip()
                stored.title = course.title
                stored.department = course.department
                stored.capacity = course.capacity
                stored.credits = course.credits
                stored.prerequisites = prerequisites
                logger.info("Updated course %s (capacity %d)", stored.code, stored.capacity)
                if stored.enrolled > stored.capacity:
                    logger.warning(
                        "Course %s now has %d enrolled over capacity %d",
                        stored.code,
                        stored.enrolled,
                        stored.capacity,
                    )
            session.flush()
            session.refresh(stored)
            return stored

    def delete(self, code: str) -> bool:
        """Remove a course.

        Enrollments referencing the course are left in place.

        Args:
            code: Course code.

        Returns:
            True if a course was removed, False if none had that code.
        """
        key = normalize_key(code)
        if not key:
            return False
        with self._db.transaction() as session:
            course = session.get(Course, key)
            if course is None:
                return False
            session.delete(course)
            logger.info("Deleted course %s", course.code)
            return True
