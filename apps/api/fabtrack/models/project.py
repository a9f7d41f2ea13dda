"""
Project model.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, StringIdMixin, TimestampMixin


class Project(Base, StringIdMixin, TimestampMixin):
    """Customer project that spools, work orders and shipments belong to."""

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    start_date: Mapped[str] = mapped_column(String(40), nullable=False)
    end_date: Mapped[str] = mapped_column(String(40), nullable=False)
    manager_id: Mapped[str] = mapped_column(String(36), nullable=False)

    def __repr__(self) -> str:
        return f"<Project {self.name}>"
