"""Audit log service for tracking changes."""

from enum import Enum
from typing import Any, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from fabtrack.api.middleware.request_id import get_request_id
from fabtrack.models.audit_log import AuditLog
from fabtrack.repositories.base import BaseRepository

logger = structlog.get_logger()

DEFAULT_LIMIT = 50


class AuditAction(str, Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class AuditLogRepository(BaseRepository[AuditLog]):
    model = AuditLog


class AuditLogService:
    """Service for managing audit logs."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = AuditLogRepository(db)

    async def log(
        self,
        *,
        action: AuditAction,
        table_name: str,
        record_id: str,
        user_id: Optional[str] = None,
        old_data: Optional[dict[str, Any]] = None,
        new_data: Optional[dict[str, Any]] = None,
    ) -> AuditLog:
        """
        Create an audit log entry in the current transaction.

        Args:
            action: INSERT, UPDATE or DELETE
            table_name: Table of the affected record
            record_id: ID of the affected record
            user_id: Acting user, None for system actions
            old_data: Record before the change (update/delete)
            new_data: Record after the change (insert/update)
        """
        entry = await self.repo.create(
            table_name=table_name,
            record_id=record_id,
            action=action.value,
            user_id=user_id,
            old_data=old_data,
            new_data=new_data,
            request_id=get_request_id() or None,
        )

        logger.info(
            "Audit log created",
            action=action.value,
            table_name=table_name,
            record_id=record_id,
            user_id=user_id,
        )

        return entry

    async def get(self, log_id: str) -> Optional[AuditLog]:
        """Get an audit log by ID."""
        return await self.repo.get_by_id(log_id)

    async def list(
        self,
        *,
        table_name: Optional[str] = None,
        user_id: Optional[str] = None,
        action: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[AuditLog]:
        """List audit logs, newest first."""
        logs = await self.repo.all(
            table_name=table_name,
            user_id=user_id,
            action=action,
            limit=limit,
        )
        return logs
