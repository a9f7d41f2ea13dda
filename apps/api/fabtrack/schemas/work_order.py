"""
Work order schemas.
"""

from .base import RecordResponse, RequestSchema, partial
from .common import (
    END_DATE_REQUIRED,
    PRIORITIES,
    PRIORITY_REQUIRED,
    PROJECT_REQUIRED,
    START_DATE_REQUIRED,
    STATUS_REQUIRED,
)
from .fields import date_string, non_empty, one_of, optional_text

WORK_ORDER_STATUSES = ("pending", "in_progress", "completed", "cancelled")


class WorkOrderCreate(RequestSchema):
    number: non_empty("İş emri numarası zorunlu.")
    project_id: non_empty(PROJECT_REQUIRED)
    status: one_of(WORK_ORDER_STATUSES, STATUS_REQUIRED)
    priority: one_of(PRIORITIES, PRIORITY_REQUIRED)
    assigned_to: non_empty("Atanan personel zorunlu.")
    start_date: date_string(START_DATE_REQUIRED)
    due_date: date_string(END_DATE_REQUIRED)
    title: optional_text() = None
    description: optional_text() = None
    spool_id: optional_text() = None


WorkOrderUpdate = partial(WorkOrderCreate)


class WorkOrderResponse(RecordResponse):
    number: str
    title: str | None = None
    description: str | None = None
    project_id: str
    spool_id: str | None = None
    assigned_to: str
    status: str
    priority: str
    start_date: str
    due_date: str
