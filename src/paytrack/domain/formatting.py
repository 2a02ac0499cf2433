"""Fixed display formats shared by the API views, CLI and image export.

Rounding happens here only; stored and aggregated figures keep full
float precision.
"""
from __future__ import annotations
from paytrack.domain.calendar import parse_date_key

# Bar colours: (normal, flagged)
REGULAR_COLORS = ("#2cc5b1", "#ffc107")
OT_COLORS = ("#58a6ff", "#ffd700")


def format_money(value: float) -> str:
    return f"{value:,.2f}"


def format_hours(value: float) -> str:
    return f"{value:.1f}"


def format_currency(value: float, symbol: str, decimals: int = 2) -> str:
    return f"{symbol}{value:,.{decimals}f}"


def format_day_label(key: str) -> str:
    """``dd/mm`` label for a statement row."""
    d = parse_date_key(key)
    if d is None:
        return key
    return f"{d.day:02d}/{d.month:02d}"


def bar_color(flagged: bool, palette: tuple[str, str]) -> str:
    return palette[1] if flagged else palette[0]
