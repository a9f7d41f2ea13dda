"""
Authentication service.
"""

from datetime import timedelta
from typing import Any, Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from fabtrack.core.auth.interfaces import Caller, Role
from fabtrack.core.config import settings
from fabtrack.models.user import User
from fabtrack.repositories.base import BaseRepository
from fabtrack.utils.timezone import utc_now

logger = structlog.get_logger()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_TOKEN_TYPE = "access"

DEMO_USERS = (
    ("admin@example.com", "admin123", "Admin User", Role.ADMIN),
    ("manager@example.com", "manager123", "Manager User", Role.MANAGER),
    ("user@example.com", "user123", "Regular User", Role.USER),
)


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain, hashed)


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token. The role is read from the users table, not the token."""
    expire = utc_now() + (
        expires_delta or timedelta(minutes=settings.auth.access_token_expire_minutes)
    )
    payload = {
        "sub": user_id,
        "exp": expire,
        "type": ACCESS_TOKEN_TYPE,
    }
    return jwt.encode(
        payload,
        settings.auth.secret_key,
        algorithm=settings.auth.algorithm,
    )


def decode_access_token(token: str) -> Optional[str]:
    """Return the user id of a valid access token, None otherwise."""
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.auth.secret_key,
            algorithms=[settings.auth.algorithm],
        )
    except JWTError:
        return None

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        return None
    return payload.get("sub")


def to_caller(user: User) -> Caller:
    return Caller(id=user.id, role=Role(user.role), email=user.email, name=user.name)


class UserRepository(BaseRepository[User]):
    model = User


class AuthService:
    """Authentication service."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = UserRepository(db)

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        """Check credentials; None for unknown, wrong password or inactive."""
        user = await self.users.get_one(email=email)
        if not user or not verify_password(password, user.password_hash):
            logger.info("auth.failed", email=email)
            return None

        if not user.is_active:
            logger.info("auth.inactive", user_id=user.id)
            return None

        return user

    async def login(self, email: str, password: str) -> Optional[str]:
        """Authenticate user and return an access token."""
        user = await self.authenticate(email, password)
        if user is None:
            return None
        logger.info("auth.login", user_id=user.id)
        return create_access_token(user.id)

    async def resolve_caller(self, token: str) -> Optional[Caller]:
        """
        Caller behind a bearer token.

        The role comes from the users table, so a role change applies to
        the very next request.
        """
        user_id = decode_access_token(token)
        if user_id is None:
            return None

        user = await self.users.get_by_id(user_id)
        if user is None or not user.is_active:
            return None
        return to_caller(user)

    async def create_user(
        self,
        *,
        email: str,
        password: str,
        name: str,
        role: Role = Role.USER,
        user_id: Optional[str] = None,
    ) -> User:
        data: dict[str, Any] = {
            "email": email,
            "password_hash": hash_password(password),
            "name": name,
            "role": role.value,
        }
        if user_id is not None:
            data["id"] = user_id
        return await self.users.create(**data)

    async def seed_demo_users(self) -> int:
        """Create the demo accounts that do not exist yet."""
        created = 0
        for email, password, name, role in DEMO_USERS:
            if await self.users.get_one(email=email):
                continue
            await self.create_user(email=email, password=password, name=name, role=role)
            created += 1

        if created:
            logger.info("auth.demo_users_seeded", count=created)
        return created
