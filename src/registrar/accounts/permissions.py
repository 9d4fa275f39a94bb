"""Role-based permission checks."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from registrar.accounts.exceptions import PermissionDeniedError
from registrar.store import Role, normalize_key

if TYPE_CHECKING:
    from registrar.store import Account


def can_manage_courses(role: Role) -> bool:
    return role == Role.ADMIN


def can_review_admissions(role: Role) -> bool:
    return role in (Role.ADMIN, Role.FACULTY)


def can_enter_grades(role: Role) -> bool:
    return role == Role.FACULTY


def can_view_own_grades(role: Role) -> bool:
    return role == Role.STUDENT


def can_apply(role: Role) -> bool:
    return role == Role.STUDENT


def can_register(role: Role) -> bool:
    return role == Role.STUDENT


def require(permission: Callable[[Role], bool], account: Account | None) -> Account:
    """Ensure an account holds a permission.

    Args:
        permission: One of the can_* checks in this module.
        account: Acting account, or None if the caller is unknown.

    Returns:
        The account, for chaining.

    Raises:
        PermissionDeniedError: If there is no account or the check fails.
    """
    if account is None:
        raise PermissionDeniedError("Login required.")
    if not permission(account.account_role):
        action = permission.__name__.removeprefix("can_").replace("_", " ")
        raise PermissionDeniedError(f"{account.username} ({account.role}) may not {action}.")
    return account


def require_own_record(
    permission: Callable[[Role], bool],
    account: Account | None,
    username: str,
    staff: Callable[[Role], bool] | None = None,
) -> Account:
    """Ensure an account may act on a student's own record.

    Staff roles pass for any student. Everyone else must hold the permission
    and be the named student.

    Raises:
        PermissionDeniedError: If there is no account, the role lacks the
            permission, or the account names another student.
    """
    if account is None:
        raise PermissionDeniedError("Login required.")
    if staff is not None and staff(account.account_role):
        return account
    require(permission, account)
    if normalize_key(account.username) != normalize_key(username):
        raise PermissionDeniedError(
            f"{account.username} ({account.role}) may not act for {username.strip()}."
        )
    return account
