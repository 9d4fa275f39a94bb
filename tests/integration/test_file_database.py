"""Integration tests for registrar state in a SQLite file."""

from pathlib import Path

import pytest

from registrar.bootstrap import create_registrar
from registrar.store import ApplicationStatus, Course, Role


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    return str(tmp_path / "data" / "registrar.db")


@pytest.mark.integration
class TestFileDatabase:
    """State written by one registrar is read by the next."""

    def test_creates_file_and_wal_mode(self, db_path: str) -> None:
        registrar = create_registrar(db_path)
        try:
            assert Path(db_path).exists()
            assert registrar.database.is_wal_mode()
        finally:
            registrar.close()

    def test_state_survives_reopen(self, db_path: str) -> None:
        first = create_registrar(db_path)
        first.catalog.upsert(Course(code="CSCI-101", title="Intro", capacity=2))
        first.accounts.add_account("alice", "pw", Role.STUDENT)
        assert first.registration.register("alice", "CSCI-101").ok
        applicant_id = first.admissions.submit("Ada", "Lovelace")
        first.admissions.decide(applicant_id, ApplicationStatus.ACCEPTED)
        first.close()

        second = create_registrar(db_path)
        try:
            assert second.catalog.get("csci-101").enrolled == 1
            assert second.ledger.exists("alice", "CSCI-101")
            assert second.accounts.login("alice", "pw") is not None
            assert second.admissions.get(applicant_id).status == "accepted"
        finally:
            second.close()

    def test_ids_not_reused_after_reopen(self, db_path: str) -> None:
        first = create_registrar(db_path)
        first.admissions.submit("Ada", "Lovelace")
        first.admissions.submit("Alan", "Turing")
        first.close()

        second = create_registrar(db_path)
        try:
            assert second.admissions.submit("Grace", "Hopper") == 3
        finally:
            second.close()
