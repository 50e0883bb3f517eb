"""Chart helpers shared by dashboard queries and the CLI."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta
from typing import Literal

Period = Literal["day", "week", "month"]

_CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}


def calculate_percentage_change(current: float, previous: float) -> float:
    """Percentage change from ``previous`` to ``current``.

    A zero baseline yields 100 for any growth and 0 otherwise.
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return (current - previous) / previous * 100


def clamp_percentage(value: float) -> float:
    """Clamp a share into [0, 100]."""
    return min(max(value, 0.0), 100.0)


def format_compact_number(num: float) -> str:
    """Format large counts as ``1.2M`` / ``3.4K``; small whole floats drop ``.0``."""
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    if isinstance(num, float) and num.is_integer():
        return str(int(num))
    return str(num)


def format_currency(amount: float, currency: str = "USD") -> str:
    """Format an amount with two decimals and a currency symbol."""
    symbol = _CURRENCY_SYMBOLS.get(currency)
    if symbol is None:
        return f"{amount:,.2f} {currency}"
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a percentage delta with an explicit plus sign."""
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.{decimals}f}%"


def period_start(day: date, period: Period) -> date:
    """Return the first day of the bucket containing ``day``.

    Weeks start on Sunday.
    """
    if period == "week":
        return day - timedelta(days=(day.weekday() + 1) % 7)
    if period == "month":
        return day.replace(day=1)
    return day


def aggregate_by_period(
    points: Iterable[tuple[date, float]],
    period: Period,
) -> list[tuple[date, float]]:
    """Average values per day/week/month bucket, ascending by bucket start."""
    grouped: dict[date, list[float]] = {}
    for day, value in points:
        grouped.setdefault(period_start(day, period), []).append(value)

    return [
        (bucket, sum(values) / len(values))
        for bucket, values in sorted(grouped.items())
    ]
