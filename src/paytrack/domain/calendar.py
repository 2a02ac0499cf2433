"""Month arithmetic and expansion of a sparse entry log into a dense month.

Date keys are canonical ``YYYY-MM-DD`` strings: they sort chronologically
and compare by plain equality, so the store can be keyed on them directly.
"""
from __future__ import annotations
import calendar as _stdcal
import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable
from paytrack.domain.entries import PayrollEntry
from paytrack.domain.exceptions import InvalidPeriodError

_DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _check_period(year: int, month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidPeriodError(f"Month {month} is outside 1-12")
    if not 1 <= year <= 9999:
        raise InvalidPeriodError(f"Year {year} is outside 1-9999")


def days_in_month(year: int, month: int) -> int:
    _check_period(year, month)
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def date_key(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_date_key(key: str) -> date | None:
    """Return the date for a canonical key, or None if the key is malformed."""
    if not isinstance(key, str) or not _DATE_KEY_RE.match(key):
        return None
    try:
        return date.fromisoformat(key)
    except ValueError:
        return None


@dataclass(frozen=True, slots=True, order=True)
class MonthRef:
    """The (year, month) currently being viewed; month is 1-12."""

    year: int
    month: int

    def __post_init__(self) -> None:
        _check_period(self.year, self.month)

    @classmethod
    def of(cls, d: date) -> "MonthRef":
        return cls(d.year, d.month)

    @classmethod
    def containing(cls, key: str) -> "MonthRef":
        d = parse_date_key(key)
        if d is None:
            raise InvalidPeriodError(f"Malformed date key {key!r}")
        return cls(d.year, d.month)

    def shift(self, step: int) -> "MonthRef":
        index = self.year * 12 + (self.month - 1) + step
        return MonthRef(index // 12, index % 12 + 1)

    @property
    def title(self) -> str:
        return f"{_stdcal.month_name[self.month]} {self.year}"

    @property
    def first_weekday(self) -> int:
        """Weekday of the 1st on a Sunday-first grid (Sunday=0 ... Saturday=6)."""
        return (date(self.year, self.month, 1).weekday() + 1) % 7

    def contains(self, key: str) -> bool:
        d = parse_date_key(key)
        return d is not None and d.year == self.year and d.month == self.month


def expand_month(year: int, month: int, entries: Iterable[PayrollEntry]) -> list[PayrollEntry]:
    """One entry per calendar day of the month, in day order.

    Stored entries are used as-is; days without one get a zero entry.
    Entries whose date key is malformed are ignored. Pure: the input is
    only read.
    """
    count = days_in_month(year, month)
    ref = MonthRef(year, month)
    by_date = {e.date: e for e in entries if ref.contains(e.date)}

    days: list[PayrollEntry] = []
    for day in range(1, count + 1):
        key = date_key(year, month, day)
        days.append(by_date.get(key) or PayrollEntry.zero(key))
    return days
