"""
Project schemas.
"""

from .base import RecordResponse, RequestSchema, partial
from .common import END_DATE_REQUIRED, START_DATE_REQUIRED, STATUS_REQUIRED
from .fields import date_string, non_empty, one_of, optional_text

PROJECT_STATUSES = ("pending", "active", "completed", "cancelled")


class ProjectCreate(RequestSchema):
    """Project creation schema."""
    name: non_empty("Proje adı zorunlu.")
    status: one_of(PROJECT_STATUSES, STATUS_REQUIRED)
    start_date: date_string(START_DATE_REQUIRED)
    end_date: date_string(END_DATE_REQUIRED)
    manager_id: non_empty("Yönetici zorunlu.")
    description: optional_text() = None


ProjectUpdate = partial(ProjectCreate)


class ProjectResponse(RecordResponse):
    """Project response schema."""
    name: str
    description: str | None = None
    status: str
    start_date: str
    end_date: str
    manager_id: str
