"""
Base model classes and mixins.

- TimestampMixin: created_at, updated_at (always use)
- StringIdMixin: UUID4 text primary key
- JSONData: JSON column that is JSONB on PostgreSQL
"""

from datetime import datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import JSON, DateTime, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

JSONData = JSON().with_variant(JSONB(), "postgresql")


def new_id() -> str:
    return str(uuid4())


class Base(DeclarativeBase):
    """Base class for all models."""

    type_annotation_map = {
        datetime: DateTime(timezone=True),
    }

    def to_dict(self) -> dict[str, Any]:
        """Column values keyed by attribute name, JSON-safe."""
        data: dict[str, Any] = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            if isinstance(value, datetime):
                value = value.isoformat()
            data[column.key] = value
        return data


class TimestampMixin:
    """
    Mixin for created_at and updated_at timestamps.

    Both are set by the database. Repositories refresh after every flush so
    the values are loaded before the record leaves the session.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class StringIdMixin:
    """UUID4 primary key stored as text, so every id on the wire is a string."""

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
    )
