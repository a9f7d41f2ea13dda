"""
Shipment model.
"""

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, StringIdMixin, TimestampMixin


class Shipment(Base, StringIdMixin, TimestampMixin):
    """Outgoing delivery for a project."""

    __tablename__ = "shipments"

    number: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    project_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    priority: Mapped[str] = mapped_column(String(20), nullable=False)
    destination: Mapped[str] = mapped_column(String(255), nullable=False)
    scheduled_date: Mapped[str] = mapped_column(String(40), nullable=False)
    actual_date: Mapped[str | None] = mapped_column(String(40), nullable=True)
    carrier: Mapped[str] = mapped_column(String(255), nullable=False)
    tracking_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    total_weight: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Shipment {self.number}>"
