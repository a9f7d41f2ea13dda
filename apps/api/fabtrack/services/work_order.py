"""
Work order service.
"""

from typing import Optional

from fabtrack.models.work_order import WorkOrder
from fabtrack.repositories.base import BaseRepository

from .base import CrudService


class WorkOrderRepository(BaseRepository[WorkOrder]):
    model = WorkOrder


class WorkOrderService(CrudService[WorkOrder]):
    repository_class = WorkOrderRepository

    async def list(
        self,
        project_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list[WorkOrder]:
        """List work orders for a project, or by status, or all."""
        if project_id:
            return await self.repo.all(project_id=project_id)
        if status:
            return await self.repo.all(status=status)
        return await self.repo.all()
