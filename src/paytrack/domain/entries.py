"""Payroll entries and the date-keyed collection that owns them."""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator


def coerce_number(value: Any) -> float:
    """Lenient numeric parse: anything unusable becomes 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def coerce_hours(value: Any) -> float:
    return max(coerce_number(value), 0.0)


@dataclass(frozen=True, slots=True)
class PayrollEntry:
    """One calendar day's recorded work."""

    date: str
    work_hr: float = 0.0
    ot_hr: float = 0.0
    extra: float = 0.0
    remark: str = ""

    @classmethod
    def build(
        cls,
        date: str,
        work_hr: Any = 0,
        ot_hr: Any = 0,
        extra: Any = 0,
        remark: Any = "",
    ) -> "PayrollEntry":
        """Build an entry from raw form or storage values, coercing numbers."""
        return cls(
            date=str(date),
            work_hr=coerce_hours(work_hr),
            ot_hr=coerce_hours(ot_hr),
            extra=coerce_number(extra),
            remark="" if remark is None else str(remark),
        )

    @classmethod
    def zero(cls, date: str) -> "PayrollEntry":
        return cls(date=date)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "PayrollEntry":
        """Read the persisted camelCase shape."""
        return cls.build(
            record["date"],
            work_hr=record.get("workHr"),
            ot_hr=record.get("otHr"),
            extra=record.get("extra"),
            remark=record.get("remark"),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "workHr": self.work_hr,
            "otHr": self.ot_hr,
            "extra": self.extra,
            "remark": self.remark,
        }

    @property
    def has_activity(self) -> bool:
        return self.work_hr != 0 or self.ot_hr != 0 or self.extra != 0


class EntryStore:
    """In-memory collection of entries, at most one per date."""

    def __init__(self, entries: Iterable[PayrollEntry] = ()) -> None:
        self._by_date: dict[str, PayrollEntry] = {}
        for entry in entries:
            self._by_date[entry.date] = entry

    def upsert(self, entry: PayrollEntry) -> PayrollEntry:
        """Insert or wholesale-replace the entry for ``entry.date``."""
        entry = PayrollEntry.build(
            entry.date, entry.work_hr, entry.ot_hr, entry.extra, entry.remark,
        )
        self._by_date[entry.date] = entry
        return entry

    def remove(self, date: str) -> bool:
        return self._by_date.pop(date, None) is not None

    def find(self, date: str) -> PayrollEntry | None:
        return self._by_date.get(date)

    def all(self) -> list[PayrollEntry]:
        return list(self._by_date.values())

    def __len__(self) -> int:
        return len(self._by_date)

    def __contains__(self, date: object) -> bool:
        return date in self._by_date

    def __iter__(self) -> Iterator[PayrollEntry]:
        return iter(list(self._by_date.values()))
