"""Wiring of the registrar components."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from registrar.accounts import AccountDirectory
from registrar.admissions import AdmissionsPipeline
from registrar.catalog import CourseCatalog
from registrar.ledger import EnrollmentLedger
from registrar.registration import RegistrationEngine
from registrar.seed import load_seed_file, seed_default_catalog
from registrar.store import Database

if TYPE_CHECKING:
    from registrar.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class Registrar:
    """All registrar components sharing one database."""

    database: Database
    accounts: AccountDirectory
    catalog: CourseCatalog
    ledger: EnrollmentLedger
    registration: RegistrationEngine
    admissions: AdmissionsPipeline

    def close(self) -> None:
        """Close the database connection."""
        self.database.close()


def create_registrar(db_path: str = ":memory:") -> Registrar:
    """Create the components over a database, creating tables if needed.

    Args:
        db_path: SQLite file path, or ":memory:" for process-lifetime state.

    Returns:
        A wired Registrar with no seed data.
    """
    database = Database(db_path)
    database.create_tables()

    accounts = AccountDirectory(database)
    catalog = CourseCatalog(database)
    ledger = EnrollmentLedger(database)

    return Registrar(
        database=database,
        accounts=accounts,
        catalog=catalog,
        ledger=ledger,
        registration=RegistrationEngine(database, catalog, ledger, accounts),
        admissions=AdmissionsPipeline(database),
    )


def bootstrap(settings: Settings) -> Registrar:
    """Create a registrar from settings and apply configured seed data.

    The default catalog is only loaded into an empty catalog.
    """
    registrar = create_registrar(settings.database.path)

    if settings.seed_default_catalog and not registrar.catalog.list():
        seed_default_catalog(registrar.catalog)

    seed_path = settings.get_seed_path()
    if seed_path is not None:
        load_seed_file(seed_path, registrar)

    logger.info("Registrar ready (database=%s)", settings.database.path)
    return registrar
