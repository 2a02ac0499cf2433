"""Build the render-ready MonthView from entries and the current rates.

Each call expands and aggregates from scratch; nothing is cached between
renders.
"""
from __future__ import annotations
from typing import Iterable
from paytrack.api.schemas.months import (
    CalendarCell, CalendarView, HoursDistribution, MonthRefRead, MonthView,
    PayBarChart, StatementRow, StatementTotals, StatementView,
)
from paytrack.api.schemas.settings import RateSettingsRead
from paytrack.domain.aggregate import MonthSummary, aggregate, hours_distribution
from paytrack.domain.calendar import MonthRef, expand_month
from paytrack.domain.entries import PayrollEntry
from paytrack.domain.formatting import (
    OT_COLORS, REGULAR_COLORS, bar_color, format_currency, format_day_label,
)
from paytrack.domain.rates import RateSettings

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def summarize(ref: MonthRef, entries: Iterable[PayrollEntry], rates: RateSettings) -> MonthSummary:
    return aggregate(expand_month(ref.year, ref.month, entries), rates)


def period_read(ref: MonthRef) -> MonthRefRead:
    return MonthRefRead(year=ref.year, month=ref.month, title=ref.title)


def calendar_view(
    ref: MonthRef, summary: MonthSummary, recorded: set[str], currency: str,
) -> CalendarView:
    cells = []
    for f in summary.days:
        is_recorded = f.date in recorded
        cells.append(CalendarCell(
            day=f.day,
            date=f.date,
            recorded=is_recorded,
            has_activity=f.has_activity,
            daily_total=f.daily_total,
            daily_total_display=format_currency(f.daily_total, currency, 0) if f.has_activity else None,
            flagged=f.flagged,
        ))
    return CalendarView(weekdays=WEEKDAYS, leading_blanks=ref.first_weekday, cells=cells)


def statement_view(ref: MonthRef, summary: MonthSummary) -> StatementView:
    rows = [
        StatementRow(
            date=f.date,
            label=format_day_label(f.date),
            work_hr=f.work_hr,
            ot_hr=f.ot_hr,
            regular_pay=f.regular_pay,
            ot_pay=f.ot_pay,
            extra=f.extra,
            daily_total=f.daily_total,
            remark=f.remark,
            flagged=f.flagged,
        )
        for f in summary.days
    ]
    return StatementView(
        title=ref.title,
        rows=rows,
        totals=StatementTotals(
            total_regular_pay=summary.total_regular_pay,
            total_ot_pay=summary.total_ot_pay,
            total_extra_pay=summary.total_extra_pay,
            grand_total=summary.grand_total,
            total_work_hr=summary.total_work_hr,
            total_ot_hr=summary.total_ot_hr,
        ),
    )


def bar_chart(summary: MonthSummary) -> PayBarChart:
    return PayBarChart(
        labels=[f.day for f in summary.days],
        regular_pay=[f.regular_pay for f in summary.days],
        ot_pay=[f.ot_pay for f in summary.days],
        regular_colors=[bar_color(f.flagged, REGULAR_COLORS) for f in summary.days],
        ot_colors=[bar_color(f.flagged, OT_COLORS) for f in summary.days],
    )


def hours_view(entries: Iterable[PayrollEntry]) -> HoursDistribution:
    work_hr, ot_hr = hours_distribution(entries)
    return HoursDistribution(work_hours=work_hr, ot_hours=ot_hr)


def build_month_view(
    ref: MonthRef, entries: list[PayrollEntry], rates: RateSettings, currency: str,
) -> MonthView:
    summary = summarize(ref, entries, rates)
    return MonthView(
        period=period_read(ref),
        rates=RateSettingsRead(hourly_rate=rates.hourly_rate, ot_rate=rates.ot_rate),
        balance=summary.grand_total,
        balance_display=format_currency(summary.grand_total, currency),
        calendar=calendar_view(ref, summary, {e.date for e in entries}, currency),
        statement=statement_view(ref, summary),
        bar_chart=bar_chart(summary),
        hours=hours_view(entries),
    )
