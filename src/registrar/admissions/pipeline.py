"""AdmissionsPipeline - applicant records and their decision state machine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select

from registrar.store import Applicant, ApplicationStatus, normalize_key

if TYPE_CHECKING:
    from datetime import datetime

    from registrar.store import Database

logger = logging.getLogger(__name__)


class AdmissionsPipeline:
    """Moves applications from submitted to accepted or rejected.

    Ids come from the applicants table's AUTOINCREMENT key and are assigned
    under the database lock, so concurrent submissions never share an id.

    Decisions are not final: deciding an already-decided application
    overwrites its status. This is logged as a warning.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    def submit(self, first_name: str, last_name: str, submitted_at: datetime | None = None) -> int:
        """Submit an application.

        Args:
            first_name: Applicant's first name.
            last_name: Applicant's last name.
            submitted_at: Submission time. Defaults to now (UTC).

        Returns:
            The id assigned to the application.
        """
        with self._db.transaction() as session:
            applicant = Applicant(
                first_name=first_name,
                last_name=last_name,
                submitted_at=submitted_at,
            )
            session.add(applicant)
            session.flush()
            applicant_id = applicant.id
        logger.info("Application #%d submitted for %s %s", applicant_id, first_name, last_name)
        return applicant_id

    def get(self, applicant_id: int) -> Applicant | None:
        """Get an application by id, or None if it does not exist."""
        with self._db.transaction() as session:
            return session.get(Applicant, applicant_id)

    def list_all(self) -> list[Applicant]:
        """All applications in submission order."""
        with self._db.transaction() as session:
            stmt = select(Applicant).order_by(Applicant.id)
            return list(session.execute(stmt).scalars().all())

    def list_by_last_name(self, last_name: str) -> list[Applicant]:
        """Applications whose last name matches exactly, ignoring case."""
        with self._db.transaction() as session:
            stmt = (
                select(Applicant)
                .where(Applicant.last_name_key == normalize_key(last_name))
                .order_by(Applicant.id)
            )
            return list(session.execute(stmt).scalars().all())

    def decide(self, applicant_id: int, status: ApplicationStatus) -> bool:
        """Set an application's status.

        Args:
            applicant_id: Application id.
            status: New status, normally ACCEPTED or REJECTED.

        Returns:
            False if no application has that id, True otherwise.

        Raises:
            ValueError: If status is not an ApplicationStatus value and the
                application exists.
        """
        with self._db.transaction() as session:
            applicant = session.get(Applicant, applicant_id)
            if applicant is None:
                logger.info("Decision on unknown application #%s ignored", applicant_id)
                return False

            status = ApplicationStatus(status)
            previous = applicant.application_status
            if previous.is_terminal:
                logger.warning(
                    "Application #%d re-decided: %s -> %s",
                    applicant_id,
                    previous.value,
                    status.value,
                )
            applicant.application_status = status

        logger.info("Application #%d is now %s", applicant_id, status.value)
        return True
