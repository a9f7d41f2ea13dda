"""
Personnel profile model.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, StringIdMixin, TimestampMixin


class Personnel(Base, StringIdMixin, TimestampMixin):
    """
    Staff profile.

    Shares its id with the login account created alongside it.
    """

    __tablename__ = "personnel"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    full_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    department: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    position: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<Personnel {self.full_name}>"
