"""
FastAPI dependencies.
"""

from .database import get_db
from .auth import (
    CurrentCaller,
    OptionalCaller,
    get_auth_service,
    get_current_caller,
    get_current_caller_optional,
    oauth2_scheme,
)

__all__ = [
    "get_db",
    "CurrentCaller",
    "OptionalCaller",
    "get_auth_service",
    "get_current_caller",
    "get_current_caller_optional",
    "oauth2_scheme",
]
