"""Day-by-day occupancy reconstruction from overlapping stays."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from hotel_api.reports.errors import ComputationError
from hotel_api.reports.rounding import ratio_percent, to_unit
from hotel_api.reports.types import ReportWindow, ReservationRecord

logger = logging.getLogger(__name__)


def stay_nights(reservation: ReservationRecord) -> int:
    """Return the number of nights booked, rejecting non-positive stays."""
    nights = (reservation.check_out - reservation.check_in).days
    if nights <= 0:
        raise ComputationError(
            f"Reservation {reservation.id} checks out on or before its check-in date"
        )
    return nights


def valid_stays(reservations: Iterable[ReservationRecord]) -> list[ReservationRecord]:
    """Drop reservations that cannot be allocated to nights, logging each one."""
    stays: list[ReservationRecord] = []
    for reservation in reservations:
        try:
            stay_nights(reservation)
        except ComputationError as exc:
            logger.warning("Excluding reservation from night allocation: %s", exc.message)
            continue
        stays.append(reservation)
    return stays


def occupies(reservation: ReservationRecord, day: date) -> bool:
    # The check-out morning does not count toward that night.
    return reservation.check_in <= day < reservation.check_out


def nights_within(reservation: ReservationRecord, window: ReportWindow) -> int:
    """Count the reservation's nights that fall inside ``window``."""
    first = max(reservation.check_in, window.start)
    stop = min(reservation.check_out, window.end + timedelta(days=1))
    return max((stop - first).days, 0)


def occupancy_percentage(occupied: int, room_count: int) -> int:
    """Whole-number occupancy; over-booked days are reported above 100."""
    return int(to_unit(ratio_percent(occupied, room_count)))


def daily_occupancy(
    reservations: Iterable[ReservationRecord],
    window: ReportWindow,
    room_count: int,
) -> list[tuple[date, int]]:
    """Return ``(day, percentage)`` for every day of the window, inclusive."""
    stays = list(reservations)
    series: list[tuple[date, int]] = []
    for day in window.days():
        occupied = sum(1 for reservation in stays if occupies(reservation, day))
        series.append((day, occupancy_percentage(occupied, room_count)))
    return series


__all__ = [
    "daily_occupancy",
    "nights_within",
    "occupancy_percentage",
    "occupies",
    "stay_nights",
    "valid_stays",
]
