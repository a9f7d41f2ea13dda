"""
Business logic services.
"""

from .audit import AuditAction, AuditLogService
from .auth import AuthService
from .base import CrudService
from .inventory import InventoryService
from .personnel import PersonnelService
from .project import ProjectService
from .shipment import ShipmentService
from .spool import SpoolService
from .work_order import WorkOrderService

__all__ = [
    "AuditAction",
    "AuditLogService",
    "AuthService",
    "CrudService",
    "InventoryService",
    "PersonnelService",
    "ProjectService",
    "ShipmentService",
    "SpoolService",
    "WorkOrderService",
]
