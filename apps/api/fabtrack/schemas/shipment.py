"""
Shipment schemas.
"""

from .base import RecordResponse, RequestSchema, partial
from .common import PRIORITIES, PRIORITY_REQUIRED, PROJECT_REQUIRED, STATUS_REQUIRED
from .fields import date_string, non_empty, non_negative, one_of, optional_text

SHIPMENT_STATUSES = ("pending", "in_transit", "delivered", "cancelled")


class ShipmentCreate(RequestSchema):
    """Shipment creation schema."""
    number: non_empty("Sevkiyat numarası zorunlu.")
    project_id: non_empty(PROJECT_REQUIRED)
    status: one_of(SHIPMENT_STATUSES, STATUS_REQUIRED)
    priority: one_of(PRIORITIES, PRIORITY_REQUIRED)
    destination: non_empty("Varış noktası zorunlu.")
    scheduled_date: date_string("Planlanan tarih zorunlu.")
    carrier: non_empty("Taşıyıcı zorunlu.")
    total_weight: non_negative("Toplam ağırlık zorunlu ve 0 veya daha fazla olmalı.")
    actual_date: optional_text() = None
    tracking_number: optional_text() = None


ShipmentUpdate = partial(ShipmentCreate)


class ShipmentResponse(RecordResponse):
    """Shipment response schema."""
    number: str
    project_id: str
    status: str
    priority: str
    destination: str
    scheduled_date: str
    actual_date: str | None = None
    carrier: str
    tracking_number: str | None = None
    total_weight: float
