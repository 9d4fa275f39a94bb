"""Accounts - account lookup and role permissions."""

from registrar.accounts.directory import AccountDirectory, AccountLookup
from registrar.accounts.exceptions import InvalidCredentialsError, PermissionDeniedError
from registrar.accounts.passwords import hash_password, verify_password
from registrar.accounts.permissions import (
    can_apply,
    can_enter_grades,
    can_manage_courses,
    can_register,
    can_review_admissions,
    can_view_own_grades,
    require,
    require_own_record,
)

__all__ = [
    "AccountDirectory",
    "AccountLookup",
    "InvalidCredentialsError",
    "PermissionDeniedError",
    "can_apply",
    "can_enter_grades",
    "can_manage_courses",
    "can_register",
    "can_review_admissions",
    "can_view_own_grades",
    "hash_password",
    "require",
    "require_own_record",
    "verify_password",
]
