"""
Base repository with common CRUD operations.
"""

from typing import Any, Generic, Type, TypeVar

from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from fabtrack.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Base repository providing common CRUD operations.

    Usage:
        class SpoolRepository(BaseRepository[Spool]):
            model = Spool

        repo = SpoolRepository(db)
        spool = await repo.get_by_id(spool_id)
        spools = await repo.all(project_id=project_id)
    """

    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    def _base_query(self) -> Select:
        """Base query - override to add default filters."""
        return select(self.model)

    async def get_by_id(self, id: str) -> ModelT | None:
        """Get entity by ID."""
        stmt = self._base_query().where(self.model.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_one(self, **filters) -> ModelT | None:
        """Get single entity by filters."""
        stmt = self._base_query()
        for field, value in filters.items():
            stmt = stmt.where(getattr(self.model, field) == value)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def all(
        self,
        *conditions: ColumnElement[bool],
        order_by: str = "created_at",
        descending: bool = True,
        limit: int | None = None,
        **filters,
    ) -> list[ModelT]:
        """
        Get all entities matching filters (no pagination).

        Args:
            *conditions: Extra SQL conditions, ANDed with the filters
            order_by: Field name to order by
            descending: Order descending if True
            limit: Maximum number of rows
            **filters: Field=value filters; None values are skipped
        """
        stmt = self._base_query().where(*conditions)
        for field, value in filters.items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, field) == value)

        column = getattr(self.model, order_by)
        stmt = stmt.order_by(column.desc() if descending else column)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create(self, **data: Any) -> ModelT:
        """Create new entity."""
        entity = self.model(**data)
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def update(self, entity: ModelT, **data: Any) -> ModelT:
        """Apply field changes to a loaded entity."""
        for field, value in data.items():
            if hasattr(entity, field):
                setattr(entity, field, value)

        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def delete(self, entity: ModelT) -> None:
        """Delete entity (hard delete)."""
        await self.db.delete(entity)
        await self.db.flush()
