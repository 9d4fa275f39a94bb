"""RegistrationEngine - admits or rejects a student's attempt to join a course."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError

from registrar.registration.exceptions import SeatInvariantError
from registrar.registration.models import RegistrationFailure, RegistrationResult
from registrar.store import Enrollment, Role

if TYPE_CHECKING:
    from registrar.accounts import AccountLookup
    from registrar.catalog import CourseCatalog
    from registrar.ledger import EnrollmentLedger
    from registrar.store import Database

logger = logging.getLogger(__name__)


class RegistrationEngine:
    """Coordinates a registration against the catalog and the ledger.

    Holds no state of its own. Each call runs under the database lock and
    inside a single transaction, so the seat increment and the enrollment
    insert are committed together or not at all.
    """

    def __init__(
        self,
        database: Database,
        catalog: CourseCatalog,
        ledger: EnrollmentLedger,
        accounts: AccountLookup,
    ) -> None:
        """Initialize the engine.

        Args:
            database: Database shared by the catalog and the ledger.
            catalog: Course catalog to read courses and seats from.
            ledger: Enrollment ledger to check and record enrollments.
            accounts: Account lookup used to verify the student role.
        """
        self._db = database
        self._catalog = catalog
        self._ledger = ledger
        self._accounts = accounts

    def register(self, student: str, course_code: str) -> RegistrationResult:
        """Register a student in a course.

        Checks run in order and the first failure is returned: student role,
        course exists, seat available, not already enrolled, prerequisites
        completed (first missing one in declaration order).

        Args:
            student: Student username.
            course_code: Course code, matched case-insensitively.

        Returns:
            RegistrationResult describing the outcome.

        Raises:
            SeatInvariantError: If a course ends up with more enrolled students
                than seats. Nothing is committed in that case.
        """
        with self._db.lock:
            account = self._accounts.resolve_account(student)
            if account is None or account.account_role != Role.STUDENT:
                return self._reject(
                    student,
                    course_code,
                    RegistrationFailure.NOT_AUTHORIZED,
                    "Only student accounts can register.",
                )

            try:
                return self._register_in_transaction(account.username, course_code)
            except IntegrityError:
                # The pair's unique constraint fired: another writer got there first
                return self._reject(
                    student,
                    course_code,
                    RegistrationFailure.ALREADY_ENROLLED,
                    "You are already enrolled in this course.",
                )

    def _register_in_transaction(self, student: str, course_code: str) -> RegistrationResult:
        with self._db.transaction() as session:
            course = self._catalog.get(course_code, session=session)
            if course is None:
                return self._reject(
                    student,
                    course_code,
                    RegistrationFailure.NOT_FOUND,
                    f"Course {course_code} not found.",
                )

            if not course.has_seat_available():
                return self._reject(
                    student, course.code, RegistrationFailure.COURSE_FULL, "Course is full."
                )

            if self._ledger.exists(student, course.code, session=session):
                return self._reject(
                    student,
                    course.code,
                    RegistrationFailure.ALREADY_ENROLLED,
                    "You are already enrolled in this course.",
                )

            for prerequisite in course.prerequisites:
                if not self._ledger.has_completed(student, prerequisite, session=session):
                    return self._reject(
                        student,
                        course.code,
                        RegistrationFailure.MISSING_PREREQUISITE,
                        f"Missing prerequisite: {prerequisite}.",
                        prerequisite=prerequisite,
                    )

            course.enrolled += 1
            if course.enrolled > course.capacity:
                raise SeatInvariantError(
                    f"Course {course.code} has {course.enrolled} enrolled "
                    f"over capacity {course.capacity}"
                )
            enrollment = self._ledger.add(
                Enrollment(student=student, course_code=course.code, course_title=course.title),
                session=session,
            )

        logger.info(
            "Registered %s in %s (%d/%d seats)",
            enrollment.student,
            enrollment.course_code,
            course.enrolled,
            course.capacity,
        )
        return RegistrationResult.success(enrollment)

    def _reject(
        self,
        student: str,
        course_code: str,
        failure: RegistrationFailure,
        message: str,
        prerequisite: str | None = None,
    ) -> RegistrationResult:
        logger.info("Registration of %s in %s rejected: %s", student, course_code, failure.value)
        return RegistrationResult.rejected(failure, message, prerequisite=prerequisite)
