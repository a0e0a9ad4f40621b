"""Hotel occupancy and revenue report endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from hotel_api.api import deps
from hotel_api.api.rate_limit import parse_rate, rate_dependency
from hotel_api.core.clock import Clock
from hotel_api.core.config import get_settings
from hotel_api.reports.errors import ValidationError
from hotel_api.reports.types import (
    ConsumptionEntry,
    KnownCategory,
    ReportResult,
    ReservationRecord,
)
from hotel_api.schemas.reporting import (
    CategoryConsumptionRead,
    ConsumptionEcho,
    DailyOccupancyRead,
    HotelReport,
    HotelReportEnvelope,
    MonthlySummaryRead,
    ReportSummaryRead,
    ReservationEcho,
)
from hotel_api.services import reporting_service
from hotel_api.services.record_store import RecordStore

router = APIRouter(prefix="/hotel-reports")

_settings = get_settings()
_DEFAULT_RATE_DEP = rate_dependency(
    parse_rate(_settings.rate_limit_default, fallback=(100, 60))
)


def _reservation_echo(record: ReservationRecord) -> ReservationEcho:
    return ReservationEcho(
        id=record.id,
        guest_name=record.guest_name,
        check_in_date=record.check_in,
        check_out_date=record.check_out,
        total_amount=record.total_amount,
        num_guests=record.num_guests,
        status=record.status,
        room_id=record.room_id,
        room_number=record.room_number,
        room_type=record.room_type,
    )


def _consumption_echo(entry: ConsumptionEntry) -> ConsumptionEcho:
    category = entry.category
    return ConsumptionEcho(
        id=entry.id,
        reservation_id=entry.reservation_id,
        quantity=entry.quantity,
        total_price=entry.total_price,
        consumed_at=entry.consumed_at,
        item_name=entry.item_name,
        category=category.label if isinstance(category, KnownCategory) else None,
        guest_name=entry.guest_name,
        room_number=entry.room_number,
    )


def _report_payload(result: ReportResult) -> HotelReport:
    return HotelReport(
        summary=ReportSummaryRead.model_validate(result.summary),
        occupancy_by_day=[
            DailyOccupancyRead.model_validate(point) for point in result.occupancy_by_day
        ],
        consumption_data=[
            CategoryConsumptionRead.model_validate(entry)
            for entry in result.consumption_data
        ],
        monthly_reports=[
            MonthlySummaryRead.model_validate(month) for month in result.monthly_reports
        ],
        reservations=[_reservation_echo(r) for r in result.reservations],
        consumption=[_consumption_echo(c) for c in result.consumption],
    )


@router.get(
    "",
    response_model=HotelReportEnvelope,
    summary="Occupancy, revenue and consumption report",
    dependencies=[_DEFAULT_RATE_DEP],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": HotelReportEnvelope},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": HotelReportEnvelope},
    },
)
async def hotel_report(
    store: Annotated[RecordStore, Depends(deps.get_record_store)],
    clock: Annotated[Clock, Depends(deps.get_clock)],
    caller_id: Annotated[str | None, Depends(deps.get_caller_id)],
    professional_id: str | None = Query(default=None),
    start_date: str | None = Query(default=None),
    end_date: str | None = Query(default=None),
) -> JSONResponse:
    settings = get_settings()
    outcome = await reporting_service.generate_report(
        store,
        caller_id=caller_id,
        professional_id=professional_id,
        start_date=start_date,
        end_date=end_date,
        clock=clock,
        default_window_days=settings.report_default_window_days,
        monthly_span=settings.report_monthly_span,
        fallback_label=settings.report_fallback_category,
        fetch_timeout=settings.report_fetch_timeout_seconds,
    )

    if outcome.success and outcome.data is not None:
        envelope = HotelReportEnvelope(success=True, data=_report_payload(outcome.data))
        status_code = status.HTTP_200_OK
    else:
        envelope = HotelReportEnvelope(success=False, error=outcome.message)
        status_code = (
            status.HTTP_400_BAD_REQUEST
            if isinstance(outcome.error, ValidationError)
            else status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True, exclude_unset=True),
    )
