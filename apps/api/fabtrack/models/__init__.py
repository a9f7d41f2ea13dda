"""
Database models.
"""

from .base import Base, TimestampMixin, StringIdMixin, JSONData
from .user import User
from .project import Project
from .work_order import WorkOrder
from .personnel import Personnel
from .shipment import Shipment
from .spool import Spool
from .inventory import InventoryItem
from .audit_log import AuditLog

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "StringIdMixin",
    "JSONData",
    # Models
    "User",
    "Project",
    "WorkOrder",
    "Personnel",
    "Shipment",
    "Spool",
    "InventoryItem",
    "AuditLog",
]
