"""
Audit log schemas.
"""

from datetime import datetime
from typing import Any

from .base import ResponseSchema


class AuditLogResponse(ResponseSchema):
    """Audit log response schema."""
    id: str
    table_name: str
    record_id: str | None
    action: str
    user_id: str | None
    old_data: dict[str, Any] | None
    new_data: dict[str, Any] | None
    request_id: str | None
    created_at: datetime
