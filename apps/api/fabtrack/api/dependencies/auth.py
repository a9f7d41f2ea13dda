"""
Authentication dependencies.

The caller is resolved once per request from the bearer token. A missing,
invalid or expired token is not an error here: it yields ``None`` and the
authorization gate decides what an anonymous caller may do.

Usage:
    @router.get("/things")
    async def list_things(caller: OptionalCaller):
        gate.require(caller, ResourceType.PROJECT, Action.LIST)

    @router.get("/me")
    async def me(caller: CurrentCaller):
        ...
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from fabtrack.core.auth.interfaces import Caller
from fabtrack.core.errors import Unauthenticated
from fabtrack.services.auth import AuthService

from .database import get_db

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """Get auth service instance (for login and caller lookup)."""
    return AuthService(db)


async def get_current_caller_optional(
    token: str | None = Depends(oauth2_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> Caller | None:
    """Caller behind the bearer token, or None."""
    if not token:
        return None
    return await auth_service.resolve_caller(token)


async def get_current_caller(
    caller: Caller | None = Depends(get_current_caller_optional),
) -> Caller:
    """
    Caller behind the bearer token.

    Raises:
        Unauthenticated: no valid session (401)
    """
    if caller is None:
        raise Unauthenticated()
    return caller


OptionalCaller = Annotated[Caller | None, Depends(get_current_caller_optional)]
CurrentCaller = Annotated[Caller, Depends(get_current_caller)]
