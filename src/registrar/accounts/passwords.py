"""Password hashing with bcrypt.

The salt and cost factor are embedded in the stored hash, so an account only
needs a single credential column.
"""

from __future__ import annotations

import logging

import bcrypt

logger = logging.getLogger(__name__)

# Cost factor for new hashes. Existing hashes keep the cost they were made with.
BCRYPT_ROUNDS = 12


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a password with a fresh bcrypt salt.

    Args:
        password: Plain text password.
        rounds: bcrypt cost factor. Defaults to BCRYPT_ROUNDS.

    Returns:
        The bcrypt hash string, salt included.
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS if rounds is None else rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash.

    A malformed stored hash counts as a mismatch.
    """
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError as e:
        logger.warning("Unreadable password hash: %s", e)
        return False
