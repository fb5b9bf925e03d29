"""
Key-value item database model.
Backs the durable storage backend: one row per stored key.
"""
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KeyValueItem(Base):
    """Opaque string value stored under a key."""

    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(
        String(255),
        primary_key=True
    )
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=_utcnow,
        onupdate=_utcnow
    )
