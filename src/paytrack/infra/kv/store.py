"""KeyValueStore contract used by the payroll persistence adapter."""
from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Opaque string-to-string persistence, shaped like browser local storage."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Insert or overwrite the value for ``key``."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove ``key`` and report whether it existed."""

    @abstractmethod
    def keys(self) -> list[str]:
        """All stored keys, sorted."""


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for headless use and tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> list[str]:
        return sorted(self._data)
