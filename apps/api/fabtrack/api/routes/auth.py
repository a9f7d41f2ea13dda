"""
Authentication routes.
"""

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from fabtrack.api.dependencies.auth import CurrentCaller, get_auth_service
from fabtrack.core.config import settings
from fabtrack.core.errors import Unauthenticated
from fabtrack.core.responses import success_response
from fabtrack.schemas.auth import CallerResponse, TokenResponse
from fabtrack.services.auth import AuthService

router = APIRouter()

INVALID_CREDENTIALS_MESSAGE = "Geçersiz email veya şifre."


@router.post("/login", response_model=TokenResponse)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Login with email and password."""
    token = await auth_service.login(
        email=form_data.username,
        password=form_data.password,
    )
    if not token:
        raise Unauthenticated(INVALID_CREDENTIALS_MESSAGE)
    return TokenResponse(
        access_token=token,
        token_type="bearer",
        expires_in=settings.auth.access_token_expire_minutes * 60,
    )


@router.get("/me")
async def me(caller: CurrentCaller):
    """Get the authenticated caller."""
    response = CallerResponse(
        id=caller.id,
        email=caller.email,
        name=caller.name,
        role=caller.role.value,
    )
    return success_response(response.to_wire())
