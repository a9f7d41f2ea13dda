"""
Authentication schemas.
"""

from pydantic import BaseModel

from .base import ResponseSchema


class TokenResponse(BaseModel):
    """OAuth2 token response."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class CallerResponse(ResponseSchema):
    """The authenticated caller as seen by ``/auth/me``."""
    id: str
    email: str | None = None
    name: str | None = None
    role: str
