"""Pydantic schemas."""

from hotel_api.schemas.reporting import (
    CategoryConsumptionRead,
    ConsumptionEcho,
    DailyOccupancyRead,
    HotelReport,
    HotelReportEnvelope,
    MonthlySummaryRead,
    ReportSummaryRead,
    ReservationEcho,
    RoomStatusRead,
)

__all__ = [
    "CategoryConsumptionRead",
    "ConsumptionEcho",
    "DailyOccupancyRead",
    "HotelReport",
    "HotelReportEnvelope",
    "MonthlySummaryRead",
    "ReportSummaryRead",
    "ReservationEcho",
    "RoomStatusRead",
]
