"""
Request and response schemas.
"""

from .validation import Operation, SCHEMAS, ValidationResult, validate, validate_model
from .project import ProjectCreate, ProjectUpdate, ProjectResponse
from .work_order import WorkOrderCreate, WorkOrderUpdate, WorkOrderResponse
from .personnel import PersonnelCreate, PersonnelUpdate, PersonnelResponse
from .shipment import ShipmentCreate, ShipmentUpdate, ShipmentResponse
from .spool import SpoolCreate, SpoolUpdate, SpoolProgressUpdate, SpoolResponse
from .inventory import (
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryStockUpdate,
    InventoryItemResponse,
)
from .audit_log import AuditLogResponse
from .auth import TokenResponse, CallerResponse

__all__ = [
    "Operation",
    "SCHEMAS",
    "ValidationResult",
    "validate",
    "validate_model",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "WorkOrderCreate",
    "WorkOrderUpdate",
    "WorkOrderResponse",
    "PersonnelCreate",
    "PersonnelUpdate",
    "PersonnelResponse",
    "ShipmentCreate",
    "ShipmentUpdate",
    "ShipmentResponse",
    "SpoolCreate",
    "SpoolUpdate",
    "SpoolProgressUpdate",
    "SpoolResponse",
    "InventoryItemCreate",
    "InventoryItemUpdate",
    "InventoryStockUpdate",
    "InventoryItemResponse",
    "AuditLogResponse",
    "TokenResponse",
    "CallerResponse",
]
