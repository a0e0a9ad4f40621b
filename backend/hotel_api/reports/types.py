"""Value types consumed and produced by the reporting engine."""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal


@dataclass(slots=True, frozen=True)
class KnownCategory:
    """Consumption item category supplied by the catalog."""

    label: str


@dataclass(slots=True, frozen=True)
class UnknownCategory:
    """Marker for items without a category (or without an item at all)."""


UNKNOWN_CATEGORY = UnknownCategory()

Category = KnownCategory | UnknownCategory


def category_from_label(label: str | None) -> Category:
    if label is None or not label.strip():
        return UNKNOWN_CATEGORY
    return KnownCategory(label)


@dataclass(slots=True, frozen=True)
class RoomRecord:
    id: uuid.UUID
    room_number: str
    room_type: str
    status: str
    is_active: bool = True


@dataclass(slots=True, frozen=True)
class ReservationRecord:
    """A reservation joined with its room; ``check_out`` is exclusive."""

    id: uuid.UUID
    guest_name: str
    check_in: date
    check_out: date
    total_amount: Decimal | None
    num_guests: int | None
    status: str
    room_id: uuid.UUID
    room_number: str
    room_type: str


@dataclass(slots=True, frozen=True)
class ConsumptionEntry:
    """A consumption charge joined with its item and reservation."""

    id: uuid.UUID
    reservation_id: uuid.UUID
    quantity: int
    total_price: Decimal | None
    consumed_at: datetime
    item_name: str | None
    category: Category
    guest_name: str
    room_number: str


@dataclass(slots=True, frozen=True)
class ReportWindow:
    """Reporting window; both bounds are inclusive.

    ``start``/``end`` drive the date-level computations while
    ``start_at``/``end_at`` bound consumption timestamps.
    """

    start: date
    end: date
    start_at: datetime
    end_at: datetime

    @property
    def day_count(self) -> int:
        return max((self.end - self.start).days + 1, 1)

    def contains_date(self, value: date) -> bool:
        return self.start <= value <= self.end

    def contains_instant(self, value: datetime) -> bool:
        return self.start_at <= value <= self.end_at

    def days(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)


@dataclass(slots=True, frozen=True)
class DailyOccupancyPoint:
    date: date
    occupancy: int
    revenue: Decimal


@dataclass(slots=True, frozen=True)
class CategoryConsumption:
    category: str
    amount: Decimal
    uncategorized: bool = False


@dataclass(slots=True, frozen=True)
class MonthlySummary:
    month: str
    month_start: date
    month_end: date
    reservations: int
    revenue: Decimal
    guests: int
    average_rate: Decimal


@dataclass(slots=True, frozen=True)
class RoomStatusSnapshot:
    total_rooms: int
    occupied_rooms: int
    maintenance_rooms: int
    available_rooms: int


@dataclass(slots=True, frozen=True)
class ReportSummary:
    total_reservations: int
    total_revenue: Decimal
    total_guests: int
    occupancy_rate: Decimal
    average_daily_rate: Decimal
    consumption_revenue: Decimal
    period_days: int
    rooms: RoomStatusSnapshot


@dataclass(slots=True)
class ReportResult:
    """Everything a hotel report returns to its caller."""

    summary: ReportSummary
    occupancy_by_day: list[DailyOccupancyPoint]
    consumption_data: list[CategoryConsumption]
    monthly_reports: list[MonthlySummary]
    reservations: list[ReservationRecord] = field(default_factory=list)
    consumption: list[ConsumptionEntry] = field(default_factory=list)
