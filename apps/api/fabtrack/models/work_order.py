"""
Work order model.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, StringIdMixin, TimestampMixin


class WorkOrder(Base, StringIdMixin, TimestampMixin):
    """Shop-floor job assigned to a person, optionally tied to a spool."""

    __tablename__ = "work_orders"

    number: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    project_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    spool_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    assigned_to: Mapped[str] = mapped_column(String(36), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    priority: Mapped[str] = mapped_column(String(20), nullable=False)
    start_date: Mapped[str] = mapped_column(String(40), nullable=False)
    due_date: Mapped[str] = mapped_column(String(40), nullable=False)

    def __repr__(self) -> str:
        return f"<WorkOrder {self.number}>"
