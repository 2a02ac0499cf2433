"""Per-day pricing, month totals and the shared remark flag."""
import math
import random

import pytest

from paytrack.domain.aggregate import aggregate, hours_distribution, is_flagged, price_day
from paytrack.domain.calendar import expand_month
from paytrack.domain.entries import PayrollEntry
from paytrack.domain.rates import RateSettings


def test_price_day_formulas():
    f = price_day(PayrollEntry("2024-03-05", 8, 2, 50, ""), RateSettings(100, 150))
    assert f.regular_pay == 800
    assert f.ot_pay == 300
    assert f.daily_total == 1150
    assert f.day == 5
    assert f.has_activity is True
    assert f.flagged is False


def test_price_day_formulas_are_exact_for_fractional_values():
    entry = PayrollEntry("2024-03-05", 7.3, 1.7, 12.345, "")
    rates = RateSettings(123.45, 187.6)
    f = price_day(entry, rates)
    assert f.regular_pay == entry.work_hr * rates.hourly_rate
    assert f.ot_pay == entry.ot_hr * rates.ot_rate
    assert f.daily_total == f.regular_pay + f.ot_pay + entry.extra


@pytest.mark.parametrize("remark,expected", [
    ("night shift", True), ("  x  ", True), ("  ", False), ("", False), (None, False), ("\t\n", False),
])
def test_is_flagged(remark, expected):
    assert is_flagged(remark) is expected


def test_zero_entry_has_no_activity():
    f = price_day(PayrollEntry.zero("2024-03-01"), RateSettings())
    assert f.has_activity is False
    assert f.daily_total == 0


def test_extra_only_counts_as_activity():
    f = price_day(PayrollEntry("2024-03-01", extra=200), RateSettings())
    assert f.has_activity is True
    assert f.daily_total == 200


def test_totals_equal_sum_of_days():
    rng = random.Random(7)
    entries = [
        PayrollEntry(f"2024-05-{d:02d}", rng.uniform(0, 10), rng.uniform(0, 4), rng.uniform(-50, 300), "")
        for d in range(1, 32, 2)
    ]
    summary = aggregate(expand_month(2024, 5, entries), RateSettings(97.5, 146.25))

    days = list(summary.days)
    rng.shuffle(days)
    assert math.isclose(summary.total_regular_pay, sum(f.regular_pay for f in days))
    assert math.isclose(summary.total_ot_pay, sum(f.ot_pay for f in days))
    assert math.isclose(summary.total_extra_pay, sum(f.extra for f in days))
    assert math.isclose(summary.grand_total, sum(f.daily_total for f in days))
    assert math.isclose(
        summary.grand_total,
        summary.total_regular_pay + summary.total_ot_pay + summary.total_extra_pay,
    )


def test_empty_input_yields_zero_totals():
    summary = aggregate([], RateSettings())
    assert summary.days == ()
    assert summary.grand_total == 0
    assert summary.total_regular_pay == summary.total_ot_pay == summary.total_extra_pay == 0


def test_hours_distribution_spans_all_months():
    entries = [
        PayrollEntry("2023-12-31", 8, 1),
        PayrollEntry("2024-01-02", 6, 0.5),
        PayrollEntry("2024-03-05", 8, 2),
    ]
    assert hours_distribution(entries) == (22, 3.5)
