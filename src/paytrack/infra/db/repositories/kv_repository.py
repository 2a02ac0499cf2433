"""SQLite-backed KeyValueStore. No business logic; caller owns the transaction."""
from __future__ import annotations
from datetime import datetime, timezone
from sqlmodel import Session, select
from paytrack.infra.kv.store import KeyValueStore
from paytrack.models.kv import KeyValue


class KeyValueRepository(KeyValueStore):
    def __init__(self, session: Session) -> None:
        self._s = session

    def get(self, key: str) -> str | None:
        row = self._s.get(KeyValue, key)
        return None if row is None else row.value

    def set(self, key: str, value: str) -> None:
        row = self._s.get(KeyValue, key)
        if row is None:
            row = KeyValue(key=key, value=value)
        else:
            row.value = value
            row.updated_at = datetime.now(timezone.utc)
        self._s.add(row)
        self._s.flush()

    def delete(self, key: str) -> bool:
        row = self._s.get(KeyValue, key)
        if row is None:
            return False
        self._s.delete(row)
        self._s.flush()
        return True

    def keys(self) -> list[str]:
        return sorted(self._s.exec(select(KeyValue.key)).all())
