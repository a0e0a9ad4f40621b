"""Trailing calendar-month rollups."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta

from hotel_api.reports.rounding import to_money
from hotel_api.reports.summary import tally_reservations
from hotel_api.reports.types import MonthlySummary, ReservationRecord

DEFAULT_MONTH_SPAN = 6


def month_bounds(anchor: date, months_back: int = 0) -> tuple[date, date]:
    """Return the first and last day of the month ``months_back`` before ``anchor``."""
    index = anchor.year * 12 + (anchor.month - 1) - months_back
    year, month = divmod(index, 12)
    month_start = date(year, month + 1, 1)
    next_year, next_month = divmod(index + 1, 12)
    # Day zero of the following month is the last day of this one.
    month_end = date(next_year, next_month + 1, 1) - timedelta(days=1)
    return month_start, month_end


def month_label(month_start: date) -> str:
    return month_start.strftime("%B %Y")


def rollup_span(today: date, span: int = DEFAULT_MONTH_SPAN) -> tuple[date, date]:
    """Return the date range covered by a rollup ending in ``today``'s month."""
    oldest_start, _ = month_bounds(today, span - 1)
    _, current_end = month_bounds(today)
    return oldest_start, current_end


def monthly_rollup(
    reservations: Sequence[ReservationRecord],
    today: date,
    *,
    span: int = DEFAULT_MONTH_SPAN,
) -> list[MonthlySummary]:
    """Summaries for ``today``'s month and the ``span - 1`` before it, oldest first."""
    summaries: list[MonthlySummary] = []
    for months_back in range(span - 1, -1, -1):
        month_start, month_end = month_bounds(today, months_back)
        tally = tally_reservations(
            r for r in reservations if month_start <= r.check_in <= month_end
        )
        summaries.append(
            MonthlySummary(
                month=month_label(month_start),
                month_start=month_start,
                month_end=month_end,
                reservations=tally.count,
                revenue=to_money(tally.revenue),
                guests=tally.guests,
                average_rate=to_money(tally.average_rate),
            )
        )
    return summaries


__all__ = ["month_bounds", "month_label", "monthly_rollup", "rollup_span"]
