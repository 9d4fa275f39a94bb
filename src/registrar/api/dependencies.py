"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, Header

from registrar.bootstrap import Registrar, bootstrap
from registrar.store import Account  # noqa: TC001

if TYPE_CHECKING:
    from registrar.config import Settings

# Global Registrar instance (initialized on app startup)
_registrar: Registrar | None = None


def init_registrar(settings: Settings) -> Registrar:
    """Initialize the global Registrar instance."""
    global _registrar  # noqa: PLW0603
    _registrar = bootstrap(settings)
    return _registrar


def close_registrar() -> None:
    """Close the global Registrar instance."""
    global _registrar  # noqa: PLW0603
    if _registrar is not None:
        _registrar.close()
        _registrar = None


def get_registrar() -> Generator[Registrar, None, None]:
    """Dependency that provides the Registrar instance."""
    if _registrar is None:
        raise RuntimeError("Registrar not initialized. Call init_registrar() first.")
    yield _registrar


# Type alias for dependency injection
RegistrarDep = Annotated[Registrar, Depends(get_registrar)]


def get_actor(
    registrar: RegistrarDep,
    x_username: Annotated[str | None, Header()] = None,
) -> Account | None:
    """Dependency that resolves the X-Username header to an account.

    The header is trusted as given; authenticating it is the job of whatever
    sits in front of the API.
    """
    if not x_username:
        return None
    return registrar.accounts.resolve_account(x_username)


# Type alias for dependency injection
ActorDep = Annotated[Account | None, Depends(get_actor)]
