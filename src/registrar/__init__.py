"""Registrar - course registration and admissions tracking."""

__version__ = "0.1.0"
