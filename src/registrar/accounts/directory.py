"""AccountDirectory - resolves usernames to accounts and roles."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from sqlalchemy import select

from registrar.accounts.passwords import hash_password, verify_password
from registrar.store import Account, Role, ValidationError, normalize_key

if TYPE_CHECKING:
    from registrar.store import Database

logger = logging.getLogger(__name__)


class AccountLookup(Protocol):
    """Interface the registration engine uses to resolve a student."""

    def resolve_account(self, username: str) -> Account | None:
        """Find an account by username, ignoring case."""
        ...


class AccountDirectory:
    """In-database account directory.

    Adding an account with an existing username replaces it.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    def add_account(self, username: str, password: str, role: Role | str) -> Account:
        """Create or replace an account.

        Args:
            username: Login name, matched case-insensitively.
            password: Plain text password, stored only as a bcrypt hash.
            role: Account role.

        Returns:
            The stored account.

        Raises:
            ValidationError: If the username is blank.
        """
        key = normalize_key(username)
        if not key:
            raise ValidationError("Username is required.")
        password_hash = hash_password(password)
        with self._db.transaction() as session:
            account = session.get(Account, key)
            if account is None:
                account = Account(username=username, role=role)
                session.add(account)
            else:
                account.username = username.strip()
                account.role = Role(role).value
            account.password_hash = password_hash
            session.flush()
            session.refresh(account)
            logger.info("Stored account %s", account)
            return account

    def resolve_account(self, username: str) -> Account | None:
        """Find an account by username, ignoring case."""
        key = normalize_key(username)
        if not key:
            return None
        with self._db.transaction() as session:
            return session.get(Account, key)

    def login(self, username: str, password: str) -> Account | None:
        """Verify credentials.

        Returns:
            The account when the password matches, otherwise None.
        """
        account = self.resolve_account(username)
        if account is None:
            logger.info("Login failed for unknown user %s", username)
            return None
        if not verify_password(password, account.password_hash):
            logger.info("Login failed for %s", account.username)
            return None
        return account

    def list_accounts(self) -> list[Account]:
        """All accounts ordered by username."""
        with self._db.transaction() as session:
            stmt = select(Account).order_by(Account.username_key)
            return list(session.execute(stmt).scalars().all())
