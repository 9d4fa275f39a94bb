"""Catalog, account and transcript seeding."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from registrar.config import ConfigError, read_yaml_mapping
from registrar.logging import sanitize_for_log
from registrar.store import Course, Role, StoreError

if TYPE_CHECKING:
    from registrar.bootstrap import Registrar
    from registrar.catalog import CourseCatalog

logger = logging.getLogger(__name__)

DEFAULT_CATALOG: list[dict[str, Any]] = [
    {
        "code": "CSCI-101",
        "title": "Intro to Programming",
        "department": "CS",
        "capacity": 40,
    },
    {
        "code": "CSCI-201",
        "title": "Data Structures",
        "department": "CS",
        "capacity": 35,
        "prerequisites": ["CSCI-101"],
    },
    {
        "code": "MATH-121",
        "title": "Calculus I",
        "department": "Math",
        "capacity": 40,
    },
]


@dataclass
class SeedSummary:
    """Counts of records applied from a seed document."""

    courses: int = 0
    accounts: int = 0
    completions: int = 0


def course_from_entry(entry: Any) -> Course:
    """Build a Course from a seed mapping.

    Raises:
        ConfigError: If the entry is not a mapping or lacks a code.
    """
    if not isinstance(entry, dict) or "code" not in entry:
        raise ConfigError(f"Course entry needs a 'code': {entry!r}")
    prerequisites = entry.get("prerequisites", [])
    if not isinstance(prerequisites, list):
        raise ConfigError(f"Prerequisites of {entry['code']} must be a list")
    try:
        return Course(
            code=str(entry["code"]),
            title=str(entry.get("title", "")),
            department=str(entry.get("department", "")),
            capacity=int(entry.get("capacity", 30)),
            credits=int(entry.get("credits", 3)),
            prerequisites=[str(p) for p in prerequisites],
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid course entry {entry['code']}: {e}") from e


def seed_default_catalog(catalog: CourseCatalog) -> int:
    """Load the built-in starter catalog.

    Returns:
        Number of courses written.
    """
    for entry in DEFAULT_CATALOG:
        catalog.upsert(course_from_entry(entry))
    logger.info("Seeded default catalog with %d courses", len(DEFAULT_CATALOG))
    return len(DEFAULT_CATALOG)


def apply_seed(data: dict[str, Any], registrar: Registrar) -> SeedSummary:
    """Apply a seed document to a registrar.

    Courses are written first, then accounts, then completion facts.

    Args:
        data: Mapping with optional 'courses', 'accounts' and 'completions' lists.
        registrar: Target registrar.

    Returns:
        Counts of applied records.

    Raises:
        ConfigError: If an entry is malformed or rejected by the store.
    """
    summary = SeedSummary()

    for section in ("courses", "accounts", "completions"):
        if not isinstance(data.get(section, []), list):
            raise ConfigError(f"Seed section '{section}' must be a list")

    try:
        for entry in data.get("courses", []):
            registrar.catalog.upsert(course_from_entry(entry))
            summary.courses += 1

        for entry in data.get("accounts", []):
            if not isinstance(entry, dict) or not {"username", "password"} <= entry.keys():
                raise ConfigError(
                    f"Account entry needs 'username' and 'password': {sanitize_for_log(str(entry))}"
                )
            try:
                role = Role(str(entry.get("role", Role.STUDENT.value)).lower())
            except ValueError as e:
                raise ConfigError(
                    f"Unknown role for {entry['username']}: {entry.get('role')}"
                ) from e
            registrar.accounts.add_account(str(entry["username"]), str(entry["password"]), role)
            summary.accounts += 1

        for entry in data.get("completions", []):
            if not isinstance(entry, dict) or not {"student", "course"} <= entry.keys():
                raise ConfigError(f"Completion entry needs 'student' and 'course': {entry!r}")
            registrar.ledger.record_completion(str(entry["student"]), str(entry["course"]))
            summary.completions += 1
    except StoreError as e:
        raise ConfigError(f"Seed data rejected: {e}") from e

    logger.info(
        "Applied seed: %d courses, %d accounts, %d completions",
        summary.courses,
        summary.accounts,
        summary.completions,
    )
    return summary


def load_seed_file(path: Path | str, registrar: Registrar) -> SeedSummary:
    """Read a YAML seed file and apply it.

    Raises:
        ConfigError: If the file is missing, invalid or has malformed entries.
    """
    data = read_yaml_mapping(Path(path))
    return apply_seed(data, registrar)
