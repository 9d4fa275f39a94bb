"""Credential check endpoint."""

from fastapi import APIRouter

from registrar.accounts import InvalidCredentialsError
from registrar.api.dependencies import RegistrarDep
from registrar.api.models import (
    AccountResponse,
    APIResponse,
    LoginRequest,
    account_to_response,
)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=APIResponse[AccountResponse])
def login(credentials: LoginRequest, registrar: RegistrarDep) -> APIResponse[AccountResponse]:
    """Verify a username and password. No token is issued."""
    account = registrar.accounts.login(credentials.username.strip(), credentials.password)
    if account is None:
        raise InvalidCredentialsError("Invalid credentials")
    return APIResponse(data=account_to_response(account))
