"""Shared pytest fixtures and configuration."""

import pytest

from registrar.accounts import passwords
from registrar.bootstrap import Registrar, create_registrar
from registrar.store import Course, Role


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use the minimum bcrypt cost so account-heavy tests stay quick."""
    monkeypatch.setattr(passwords, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def registrar() -> Registrar:
    """Create an empty in-memory Registrar."""
    r = create_registrar(":memory:")
    yield r
    r.close()


@pytest.fixture
def seeded(registrar: Registrar) -> Registrar:
    """Registrar with the starter catalog and one account per role."""
    registrar.catalog.upsert(
        Course(code="CSCI-101", title="Intro to Programming", department="CS", capacity=40)
    )
    registrar.catalog.upsert(
        Course(
            code="CSCI-201",
            title="Data Structures",
            department="CS",
            capacity=35,
            prerequisites=["CSCI-101"],
        )
    )
    registrar.catalog.upsert(
        Course(code="MATH-121", title="Calculus I", department="Math", capacity=40)
    )
    registrar.accounts.add_account("alice", "alice-pw", Role.STUDENT)
    registrar.accounts.add_account("prof", "prof-pw", Role.FACULTY)
    registrar.accounts.add_account("admin", "admin-pw", Role.ADMIN)
    return registrar
