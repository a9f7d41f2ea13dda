"""
Personnel service.

Every personnel record has a login account with the same id. The two are
created, updated and deleted together.
"""

from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fabtrack.core.auth.interfaces import Caller, Role
from fabtrack.models.personnel import Personnel
from fabtrack.models.user import User
from fabtrack.repositories.base import BaseRepository

from .auth import AuthService, hash_password
from .base import CrudService
from .audit import AuditAction

UNASSIGNED_DEPARTMENT = "Belirtilmemiş"


class PersonnelRepository(BaseRepository[Personnel]):
    model = Personnel

    async def count_by_department(self) -> list[tuple[Optional[str], int]]:
        stmt = (
            select(Personnel.department, func.count(Personnel.id))
            .group_by(Personnel.department)
            .order_by(Personnel.department)
        )
        result = await self.db.execute(stmt)
        return [(department, count) for department, count in result.all()]


class PersonnelService(CrudService[Personnel]):
    """Personnel management service."""

    repository_class = PersonnelRepository

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.auth = AuthService(db)

    async def list(
        self,
        department: Optional[str] = None,
        position: Optional[str] = None,
    ) -> list[Personnel]:
        """List personnel by full name, optionally narrowed by department and position."""
        return await self.repo.all(
            department=department,
            position=position,
            order_by="full_name",
            descending=False,
        )

    async def stats(self) -> dict[str, Any]:
        """Headcount overall and per department."""
        by_department: dict[str, int] = {}
        for department, count in await self.repo.count_by_department():
            key = department or UNASSIGNED_DEPARTMENT
            by_department[key] = by_department.get(key, 0) + count
        return {
            "total": sum(by_department.values()),
            "byDepartment": by_department,
        }

    async def create(
        self,
        data: dict[str, Any],
        actor: Optional[Caller] = None,
    ) -> Personnel:
        data = dict(data)
        password = data.pop("password")

        user = await self.auth.create_user(
            email=data["email"],
            password=password,
            name=data["full_name"],
            role=Role.USER,
        )
        await self.audit.log(
            action=AuditAction.INSERT,
            table_name=User.__tablename__,
            record_id=user.id,
            user_id=actor.id if actor else None,
            new_data=_public_user_data(user),
        )
        return await super().create({**data, "id": user.id}, actor=actor)

    async def update(
        self,
        record_id: str,
        data: dict[str, Any],
        actor: Optional[Caller] = None,
    ) -> Optional[Personnel]:
        data = dict(data)
        password = data.pop("password", None)

        personnel = await super().update(record_id, data, actor=actor)
        if personnel is None:
            return None

        user = await self.auth.users.get_by_id(record_id)
        if user is not None:
            changes: dict[str, Any] = {}
            if "email" in data:
                changes["email"] = data["email"]
            if "full_name" in data:
                changes["name"] = data["full_name"]
            if password is not None:
                changes["password_hash"] = hash_password(password)
            if changes:
                await self.auth.users.update(user, **changes)

        return personnel

    async def delete(self, record_id: str, actor: Optional[Caller] = None) -> bool:
        if not await super().delete(record_id, actor=actor):
            return False

        user = await self.auth.users.get_by_id(record_id)
        if user is not None:
            old_data = _public_user_data(user)
            await self.auth.users.delete(user)
            await self.audit.log(
                action=AuditAction.DELETE,
                table_name=User.__tablename__,
                record_id=record_id,
                user_id=actor.id if actor else None,
                old_data=old_data,
            )
        return True


def _public_user_data(user: User) -> dict[str, Any]:
    data = user.to_dict()
    data.pop("password_hash", None)
    return data
