from __future__ import annotations
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KeyValue(SQLModel, table=True):
    """One named blob in the local key-value store."""

    key: str = Field(primary_key=True)
    value: str
    updated_at: datetime = Field(default_factory=_utcnow)
