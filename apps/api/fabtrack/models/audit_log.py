"""Audit log model for tracking resource changes."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, JSONData, StringIdMixin


class AuditLog(Base, StringIdMixin):
    """
    Immutable record of one create/update/delete.

    ``action`` uses the row-level vocabulary INSERT / UPDATE / DELETE.
    """

    __tablename__ = "audit_logs"

    table_name: Mapped[str] = mapped_column(String(100), index=True)
    record_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    action: Mapped[str] = mapped_column(String(10), index=True)
    user_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)

    old_data: Mapped[Optional[dict]] = mapped_column(JSONData, nullable=True)
    new_data: Mapped[Optional[dict]] = mapped_column(JSONData, nullable=True)

    request_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )

    def __repr__(self) -> str:
        return f"<AuditLog {self.action} {self.table_name}:{self.record_id}>"
