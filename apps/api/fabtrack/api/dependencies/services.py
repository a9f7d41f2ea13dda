"""
Service dependencies.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fabtrack.services import (
    AuditLogService,
    InventoryService,
    PersonnelService,
    ProjectService,
    ShipmentService,
    SpoolService,
    WorkOrderService,
)

from .database import get_db


async def get_project_service(db: AsyncSession = Depends(get_db)) -> ProjectService:
    return ProjectService(db)


async def get_work_order_service(db: AsyncSession = Depends(get_db)) -> WorkOrderService:
    return WorkOrderService(db)


async def get_personnel_service(db: AsyncSession = Depends(get_db)) -> PersonnelService:
    return PersonnelService(db)


async def get_shipment_service(db: AsyncSession = Depends(get_db)) -> ShipmentService:
    return ShipmentService(db)


async def get_spool_service(db: AsyncSession = Depends(get_db)) -> SpoolService:
    return SpoolService(db)


async def get_inventory_service(db: AsyncSession = Depends(get_db)) -> InventoryService:
    return InventoryService(db)


async def get_audit_service(db: AsyncSession = Depends(get_db)) -> AuditLogService:
    return AuditLogService(db)
