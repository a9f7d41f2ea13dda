"""
Shipment service.
"""

from typing import Optional

from fabtrack.models.shipment import Shipment
from fabtrack.repositories.base import BaseRepository

from .base import CrudService


class ShipmentRepository(BaseRepository[Shipment]):
    model = Shipment


class ShipmentService(CrudService[Shipment]):
    repository_class = ShipmentRepository

    async def list(
        self,
        project_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list[Shipment]:
        if project_id:
            return await self.repo.all(project_id=project_id)
        if status:
            return await self.repo.all(status=status)
        return await self.repo.all()
