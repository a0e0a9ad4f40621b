"""Hotel report response schemas."""
from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class RoomStatusRead(_CamelModel):
    total_rooms: int
    occupied_rooms: int
    maintenance_rooms: int
    available_rooms: int


class ReportSummaryRead(_CamelModel):
    """Headline totals and rates for the report window."""

    total_reservations: int
    total_revenue: Decimal
    total_guests: int
    occupancy_rate: Decimal
    average_daily_rate: Decimal
    consumption_revenue: Decimal
    period_days: int
    rooms: RoomStatusRead


class DailyOccupancyRead(_CamelModel):
    date: date
    occupancy: int
    revenue: Decimal


class CategoryConsumptionRead(_CamelModel):
    category: str
    amount: Decimal
    uncategorized: bool = False


class MonthlySummaryRead(_CamelModel):
    month: str
    month_start: date
    month_end: date
    reservations: int
    revenue: Decimal
    guests: int
    average_rate: Decimal


class ReservationEcho(_CamelModel):
    id: uuid.UUID
    guest_name: str
    check_in_date: date
    check_out_date: date
    total_amount: Decimal | None = None
    num_guests: int | None = None
    status: str
    room_id: uuid.UUID
    room_number: str
    room_type: str


class ConsumptionEcho(_CamelModel):
    id: uuid.UUID
    reservation_id: uuid.UUID
    quantity: int
    total_price: Decimal | None = None
    consumed_at: datetime
    item_name: str | None = None
    category: str | None = None
    guest_name: str
    room_number: str


class HotelReport(_CamelModel):
    """Full report payload."""

    summary: ReportSummaryRead
    occupancy_by_day: list[DailyOccupancyRead]
    consumption_data: list[CategoryConsumptionRead]
    monthly_reports: list[MonthlySummaryRead]
    reservations: list[ReservationEcho]
    consumption: list[ConsumptionEcho]


class HotelReportEnvelope(_CamelModel):
    """``{success, data?, error?}`` wrapper shared by every response."""

    success: bool
    data: HotelReport | None = None
    error: str | None = None
