"""Root exception for Registrar."""


class RegistrarError(Exception):
    """Base exception for all Registrar errors."""
