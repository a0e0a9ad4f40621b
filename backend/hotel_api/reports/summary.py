"""Headline metrics computed directly from the fetched records."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from hotel_api.reports.consumption import consumption_total, in_window
from hotel_api.reports.occupancy import nights_within
from hotel_api.reports.rounding import ZERO, ratio_percent, to_money
from hotel_api.reports.types import (
    ConsumptionEntry,
    ReportSummary,
    ReportWindow,
    ReservationRecord,
    RoomRecord,
    RoomStatusSnapshot,
)


@dataclass(slots=True)
class ReservationTally:
    """Unrounded reservation totals shared by the window and monthly views."""

    count: int = 0
    revenue: Decimal = ZERO
    guests: int = 0

    @property
    def average_rate(self) -> Decimal:
        if self.count == 0:
            return ZERO
        return self.revenue / self.count


def tally_reservations(reservations: Iterable[ReservationRecord]) -> ReservationTally:
    tally = ReservationTally()
    for reservation in reservations:
        tally.count += 1
        tally.revenue += reservation.total_amount or ZERO
        tally.guests += reservation.num_guests or 0
    return tally


def room_snapshot(rooms: Sequence[RoomRecord]) -> RoomStatusSnapshot:
    active = [room for room in rooms if room.is_active]
    occupied = sum(1 for room in active if room.status == "occupied")
    maintenance = sum(1 for room in active if room.status == "maintenance")
    return RoomStatusSnapshot(
        total_rooms=len(active),
        occupied_rooms=occupied,
        maintenance_rooms=maintenance,
        available_rooms=len(active) - occupied - maintenance,
    )


def summarize(
    reservations: Sequence[ReservationRecord],
    consumption: Sequence[ConsumptionEntry],
    rooms: Sequence[RoomRecord],
    window: ReportWindow,
) -> ReportSummary:
    """Build the summary block for ``window``.

    Reservations count when their check-in date is inside the window. The
    occupancy rate only counts the nights that fall inside the window.
    """
    checked_in = [r for r in reservations if window.contains_date(r.check_in)]
    tally = tally_reservations(checked_in)
    snapshot = room_snapshot(rooms)

    occupied_nights = sum(nights_within(r, window) for r in checked_in)
    occupancy_rate = ratio_percent(
        occupied_nights, snapshot.total_rooms * window.day_count
    )

    return ReportSummary(
        total_reservations=tally.count,
        total_revenue=to_money(tally.revenue),
        total_guests=tally.guests,
        occupancy_rate=to_money(occupancy_rate),
        average_daily_rate=to_money(tally.average_rate),
        consumption_revenue=to_money(consumption_total(in_window(consumption, window))),
        period_days=window.day_count,
        rooms=snapshot,
    )


__all__ = ["ReservationTally", "room_snapshot", "summarize", "tally_reservations"]
