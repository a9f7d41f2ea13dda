"""
Spool service.
"""

from typing import Optional

from fabtrack.core.auth.interfaces import Caller
from fabtrack.models.spool import Spool
from fabtrack.repositories.base import BaseRepository

from .base import CrudService

COMPLETED = "completed"
ACTIVE = "active"


class SpoolRepository(BaseRepository[Spool]):
    model = Spool


class SpoolService(CrudService[Spool]):
    """Spool tracking service."""

    repository_class = SpoolRepository

    async def list(
        self,
        project_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list[Spool]:
        if project_id:
            return await self.repo.all(project_id=project_id)
        if status:
            return await self.repo.all(status=status)
        return await self.repo.all()

    async def update_progress(
        self,
        spool_id: str,
        completed_quantity: float,
        actor: Optional[Caller] = None,
    ) -> Optional[Spool]:
        """
        Record production progress.

        The spool is completed once the completed quantity reaches the
        ordered quantity, and active otherwise.
        """
        spool = await self.repo.get_by_id(spool_id)
        if spool is None:
            return None

        status = COMPLETED if completed_quantity >= spool.quantity else ACTIVE
        return await self.update(
            spool_id,
            {"completed_quantity": completed_quantity, "status": status},
            actor=actor,
        )
