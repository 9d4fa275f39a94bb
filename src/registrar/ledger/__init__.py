"""Enrollment Ledger - enrollment and completed-course facts."""

from registrar.ledger.ledger import EnrollmentLedger

__all__ = ["EnrollmentLedger"]
