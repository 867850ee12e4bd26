"""User router for sign-up and sign-in."""

import logging

from fastapi import APIRouter

from portal_link.application.commands.user import SignInCommand, SignUpCommand
from portal_link.presentation.api.dependencies import (
    PasswordServiceDep,
    RepoFactory,
    TokenServiceDep,
)
from portal_link.presentation.api.schemas.auth import (
    AccessTokenResponse,
    SignInRequest,
    SignUpRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/signup",
    summary="Register a new user",
    responses={
        200: {"description": "User registered, access token issued"},
        400: {"description": "Invalid input or email already registered"},
    },
)
async def sign_up(
    request: SignUpRequest,
    factory: RepoFactory,
    password_service: PasswordServiceDep,
    token_service: TokenServiceDep,
) -> AccessTokenResponse:
    """
    Register with name, email and password.

    The password needs at least 8 characters including a letter and a digit.
    """
    command = SignUpCommand.from_factory(factory, password_service, token_service)
    result = await command.execute(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    return AccessTokenResponse(access_token=result.access_token)


@router.post(
    "/signin",
    summary="Authenticate user",
    responses={
        200: {"description": "Sign-in successful"},
        400: {"description": "Malformed email or password"},
        401: {"description": "Invalid credentials"},
    },
)
async def sign_in(
    request: SignInRequest,
    factory: RepoFactory,
    password_service: PasswordServiceDep,
    token_service: TokenServiceDep,
) -> AccessTokenResponse:
    """Authenticate with email and password and receive an access token."""
    command = SignInCommand.from_factory(factory, password_service, token_service)
    result = await command.execute(email=request.email, password=request.password)
    return AccessTokenResponse(access_token=result.access_token)
