"""
Spool schemas.
"""

from .base import RecordResponse, RequestSchema, partial
from .common import PROJECT_REQUIRED, START_DATE_REQUIRED, STATUS_REQUIRED
from .fields import at_least, date_string, non_empty, non_negative, one_of, optional_text

SPOOL_STATUSES = ("pending", "active", "completed", "cancelled")

COMPLETED_QUANTITY_MESSAGE = "Tamamlanan miktar 0 veya daha fazla olmalı."


class SpoolCreate(RequestSchema):
    name: non_empty("Makara adı zorunlu.")
    project_id: non_empty(PROJECT_REQUIRED)
    status: one_of(SPOOL_STATUSES, STATUS_REQUIRED)
    quantity: at_least(1, "Adet zorunlu ve en az 1 olmalı.")
    completed_quantity: non_negative(COMPLETED_QUANTITY_MESSAGE) = 0
    start_date: date_string(START_DATE_REQUIRED)
    end_date: optional_text() = None
    assigned_to: optional_text() = None
    description: optional_text() = None


SpoolUpdate = partial(SpoolCreate)


class SpoolProgressUpdate(RequestSchema):
    """Body of the progress endpoint."""
    completed_quantity: non_negative(COMPLETED_QUANTITY_MESSAGE)


class SpoolResponse(RecordResponse):
    name: str
    description: str | None = None
    project_id: str
    status: str
    quantity: float
    completed_quantity: float
    start_date: str
    end_date: str | None = None
    assigned_to: str | None = None
