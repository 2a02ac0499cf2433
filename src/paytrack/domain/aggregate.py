"""Per-day pay figures and month-wide totals."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence
from paytrack.domain.entries import PayrollEntry
from paytrack.domain.rates import RateSettings


def is_flagged(remark: str | None) -> bool:
    """A day is flagged when its remark has any non-whitespace text.

    Calendar cells, chart bars and statement rows all call this.
    """
    return bool(remark and remark.strip())


@dataclass(frozen=True, slots=True)
class DayFigures:
    date: str
    day: int
    work_hr: float
    ot_hr: float
    extra: float
    remark: str
    regular_pay: float
    ot_pay: float
    daily_total: float
    flagged: bool
    has_activity: bool


@dataclass(frozen=True, slots=True)
class MonthSummary:
    days: tuple[DayFigures, ...]
    total_regular_pay: float
    total_ot_pay: float
    total_extra_pay: float
    grand_total: float
    total_work_hr: float
    total_ot_hr: float


def price_day(entry: PayrollEntry, rates: RateSettings) -> DayFigures:
    regular_pay = entry.work_hr * rates.hourly_rate
    ot_pay = entry.ot_hr * rates.ot_rate
    return DayFigures(
        date=entry.date,
        day=int(entry.date[8:10]),
        work_hr=entry.work_hr,
        ot_hr=entry.ot_hr,
        extra=entry.extra,
        remark=entry.remark,
        regular_pay=regular_pay,
        ot_pay=ot_pay,
        daily_total=regular_pay + ot_pay + entry.extra,
        flagged=is_flagged(entry.remark),
        has_activity=entry.has_activity,
    )


def aggregate(days: Sequence[PayrollEntry], rates: RateSettings) -> MonthSummary:
    """Price every expanded day and sum the figures in day order.

    Sums use plain float addition; rounding is left to display code.
    """
    figures: list[DayFigures] = []
    total_regular = total_ot = total_extra = grand = 0.0
    work_hr = ot_hr = 0.0

    for entry in days:
        f = price_day(entry, rates)
        figures.append(f)
        total_regular += f.regular_pay
        total_ot += f.ot_pay
        total_extra += f.extra
        grand += f.daily_total
        work_hr += f.work_hr
        ot_hr += f.ot_hr

    return MonthSummary(
        days=tuple(figures),
        total_regular_pay=total_regular,
        total_ot_pay=total_ot,
        total_extra_pay=total_extra,
        grand_total=grand,
        total_work_hr=work_hr,
        total_ot_hr=ot_hr,
    )


def hours_distribution(entries: Iterable[PayrollEntry]) -> tuple[float, float]:
    """Regular and overtime hours over every recorded entry, any month."""
    work_hr = ot_hr = 0.0
    for entry in entries:
        work_hr += entry.work_hr
        ot_hr += entry.ot_hr
    return work_hr, ot_hr
