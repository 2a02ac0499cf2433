"""Month view DTOs: everything one render of the tracker needs.

Every figure here comes from one MonthSummary, so the calendar, the
statement and the bar chart cannot disagree.
"""
from __future__ import annotations
from pydantic import BaseModel
from paytrack.api.schemas.settings import RateSettingsRead


class MonthRefRead(BaseModel):
    model_config = {"from_attributes": True}

    year: int
    month: int
    title: str


class CalendarCell(BaseModel):
    day: int
    date: str
    recorded: bool
    has_activity: bool
    daily_total: float
    daily_total_display: str | None = None
    flagged: bool


class CalendarView(BaseModel):
    weekdays: list[str]
    leading_blanks: int
    cells: list[CalendarCell]


class StatementRow(BaseModel):
    date: str
    label: str
    work_hr: float
    ot_hr: float
    regular_pay: float
    ot_pay: float
    extra: float
    daily_total: float
    remark: str
    flagged: bool


class StatementTotals(BaseModel):
    total_regular_pay: float
    total_ot_pay: float
    total_extra_pay: float
    grand_total: float
    total_work_hr: float
    total_ot_hr: float


class StatementView(BaseModel):
    title: str
    rows: list[StatementRow]
    totals: StatementTotals


class PayBarChart(BaseModel):
    labels: list[int]
    regular_pay: list[float]
    ot_pay: list[float]
    regular_colors: list[str]
    ot_colors: list[str]


class HoursDistribution(BaseModel):
    """Regular vs overtime hours across every recorded entry, not just one month."""

    labels: list[str] = ["Work Hours", "OT Hours"]
    work_hours: float
    ot_hours: float


class MonthView(BaseModel):
    period: MonthRefRead
    rates: RateSettingsRead
    balance: float
    balance_display: str
    calendar: CalendarView
    statement: StatementView
    bar_chart: PayBarChart
    hours: HoursDistribution
