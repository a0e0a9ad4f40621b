"""Pro-rated nightly revenue allocation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from decimal import Decimal

from hotel_api.reports.rounding import ZERO, to_unit
from hotel_api.reports.types import DailyOccupancyPoint, ReportWindow, ReservationRecord


def nightly_rate(reservation: ReservationRecord) -> Decimal:
    """Split the reservation total evenly across its nights (at least one)."""
    nights = max((reservation.check_out - reservation.check_in).days, 1)
    return (reservation.total_amount or ZERO) / nights


def allocate_daily_revenue(
    reservations: Iterable[ReservationRecord],
    window: ReportWindow,
) -> dict[date, Decimal]:
    """Return unrounded revenue per window day.

    A reservation contributes its nightly rate to each occupied day inside the
    window; days outside the window are dropped, not carried over.
    """
    totals: dict[date, Decimal] = {day: ZERO for day in window.days()}
    one_day = timedelta(days=1)
    for reservation in reservations:
        if reservation.check_out <= reservation.check_in:
            continue
        rate = nightly_rate(reservation)
        day = max(reservation.check_in, window.start)
        last = min(reservation.check_out - one_day, window.end)
        while day <= last:
            totals[day] += rate
            day += one_day
    return totals


def daily_points(
    occupancy_series: Sequence[tuple[date, int]],
    revenue_by_day: dict[date, Decimal],
) -> list[DailyOccupancyPoint]:
    """Join occupancy and revenue by date, rounding revenue once per day."""
    return [
        DailyOccupancyPoint(
            date=day,
            occupancy=occupancy,
            revenue=to_unit(revenue_by_day.get(day, ZERO)),
        )
        for day, occupancy in occupancy_series
    ]


__all__ = ["allocate_daily_revenue", "daily_points", "nightly_rate"]
