"""
Resource service base.

A resource service owns one table. It delegates queries to a repository and
writes an audit entry for every create, update and delete in the same
transaction as the change itself. Lookups of a missing id return ``None``;
turning that into a 404 is the caller's job.
"""

from typing import Any, ClassVar, Generic, Optional, Type

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from fabtrack.core.auth.interfaces import Caller
from fabtrack.repositories.base import BaseRepository, ModelT

from .audit import AuditAction, AuditLogService

logger = structlog.get_logger()


class CrudService(Generic[ModelT]):
    """
    Get / list / create / update / delete over one model.

    Usage:
        class ShipmentService(CrudService[Shipment]):
            repository_class = ShipmentRepository
    """

    repository_class: ClassVar[Type[BaseRepository]]

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo: BaseRepository[ModelT] = self.repository_class(db)
        self.audit = AuditLogService(db)

    @property
    def table_name(self) -> str:
        return self.repo.model.__tablename__

    async def get(self, record_id: str) -> Optional[ModelT]:
        return await self.repo.get_by_id(record_id)

    async def list(self) -> list[ModelT]:
        """All records, newest first."""
        return await self.repo.all()

    async def create(self, data: dict[str, Any], actor: Optional[Caller] = None) -> ModelT:
        record = await self.repo.create(**data)
        await self.audit.log(
            action=AuditAction.INSERT,
            table_name=self.table_name,
            record_id=record.id,
            user_id=actor.id if actor else None,
            new_data=record.to_dict(),
        )
        logger.info(f"{self.table_name}.created", record_id=record.id)
        return record

    async def update(
        self,
        record_id: str,
        data: dict[str, Any],
        actor: Optional[Caller] = None,
    ) -> Optional[ModelT]:
        record = await self.repo.get_by_id(record_id)
        if record is None:
            return None

        old_data = record.to_dict()
        record = await self.repo.update(record, **data)
        await self.audit.log(
            action=AuditAction.UPDATE,
            table_name=self.table_name,
            record_id=record.id,
            user_id=actor.id if actor else None,
            old_data=old_data,
            new_data=record.to_dict(),
        )
        logger.info(
            f"{self.table_name}.updated",
            record_id=record.id,
            fields=sorted(data),
        )
        return record

    async def delete(self, record_id: str, actor: Optional[Caller] = None) -> bool:
        record = await self.repo.get_by_id(record_id)
        if record is None:
            return False

        old_data = record.to_dict()
        await self.repo.delete(record)
        await self.audit.log(
            action=AuditAction.DELETE,
            table_name=self.table_name,
            record_id=record_id,
            user_id=actor.id if actor else None,
            old_data=old_data,
        )
        logger.info(f"{self.table_name}.deleted", record_id=record_id)
        return True
