"""Hotel occupancy and revenue report assembly."""

from __future__ import annotations

import asyncio
import logging
import re
import uuid
from collections.abc import Awaitable
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import TypeVar

from hotel_api.core.clock import Clock, system_clock
from hotel_api.reports import (
    aggregate_by_category,
    allocate_daily_revenue,
    daily_occupancy,
    daily_points,
    monthly_rollup,
    rollup_span,
    summarize,
    valid_stays,
)
from hotel_api.reports.errors import (
    ComputationError,
    DataAccessError,
    ReportError,
    ValidationError,
)
from hotel_api.reports.types import ReportResult, ReportWindow
from hotel_api.services.record_store import RecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(slots=True)
class ReportOutcome:
    """Success/failure envelope returned to the HTTP layer."""

    success: bool
    data: ReportResult | None = None
    error: ReportError | None = None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error is not None else None


def parse_professional_id(value: str | uuid.UUID | None) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    if value is None or not value.strip():
        raise ValidationError("professional_id is required")
    try:
        return uuid.UUID(value.strip())
    except ValueError as exc:
        raise ValidationError("professional_id must be a valid UUID") from exc


def parse_iso_date(value: str | None, field: str) -> date | None:
    if value is None or value == "":
        return None
    if not _ISO_DATE.match(value):
        raise ValidationError(f"{field} must be an ISO date (YYYY-MM-DD)")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(f"{field} is not a valid calendar date") from exc


def resolve_window(
    start_date: str | None,
    end_date: str | None,
    *,
    now: datetime,
    default_days: int = 30,
) -> ReportWindow:
    """Build the report window, defaulting to the ``default_days`` before ``now``.

    The window starts at midnight of its first day. A defaulted end is ``now``
    itself; an explicit end covers the whole day. When only ``end_date`` is
    given and it falls before the default start, the start moves back to
    ``default_days`` before it. Only two explicit bounds can conflict.
    """
    start = parse_iso_date(start_date, "start_date")
    end = parse_iso_date(end_date, "end_date")

    if start is not None and end is not None and start > end:
        raise ValidationError("start_date must be on or before end_date")

    if end is None:
        end_at = now
        end = now.date()
    else:
        end_at = datetime.combine(end, time.max, tzinfo=UTC)

    if start is None:
        start = (now - timedelta(days=default_days)).date()
        if end < start:
            start = end - timedelta(days=default_days)

    start_at = datetime.combine(start, time.min, tzinfo=UTC)
    return ReportWindow(start=start, end=end, start_at=start_at, end_at=end_at)


async def _bounded(awaitable: Awaitable[T], timeout: float, what: str) -> T:
    try:
        async with asyncio.timeout(timeout):
            return await awaitable
    except TimeoutError as exc:
        logger.error("Timed out after %ss loading %s", timeout, what)
        raise DataAccessError(f"Failed to load {what}") from exc


async def build_report(
    store: RecordStore,
    *,
    professional_id: uuid.UUID,
    window: ReportWindow,
    today: date,
    monthly_span: int = 6,
    fallback_label: str = "Other",
    fetch_timeout: float = 30.0,
) -> ReportResult:
    """Fetch the source records once and run every aggregation over them."""
    rollup_start, rollup_end = rollup_span(today, monthly_span)
    # The first failed fetch cancels the others so no session outlives the report.
    try:
        async with asyncio.TaskGroup() as group:
            reservations_task = group.create_task(
                _bounded(
                    store.fetch_reservations(professional_id, window.start, window.end),
                    fetch_timeout,
                    "reservations",
                )
            )
            rooms_task = group.create_task(
                _bounded(
                    store.fetch_active_rooms(professional_id), fetch_timeout, "rooms"
                )
            )
            consumption_task = group.create_task(
                _bounded(
                    store.fetch_consumption(
                        professional_id, window.start_at, window.end_at
                    ),
                    fetch_timeout,
                    "consumption",
                )
            )
            rollup_task = group.create_task(
                _bounded(
                    store.fetch_reservations(professional_id, rollup_start, rollup_end),
                    fetch_timeout,
                    "monthly reservations",
                )
            )
    except ExceptionGroup as failures:
        raise failures.exceptions[0]

    reservations = reservations_task.result()
    consumption = consumption_task.result()
    rollup_reservations = rollup_task.result()
    rooms = [room for room in rooms_task.result() if room.is_active]

    stays = valid_stays(reservations)
    occupancy = daily_occupancy(stays, window, len(rooms))
    revenue = allocate_daily_revenue(stays, window)

    return ReportResult(
        summary=summarize(reservations, consumption, rooms, window),
        occupancy_by_day=daily_points(occupancy, revenue),
        consumption_data=aggregate_by_category(
            consumption, window, fallback_label=fallback_label
        ),
        monthly_reports=monthly_rollup(rollup_reservations, today, span=monthly_span),
        reservations=list(reservations),
        consumption=list(consumption),
    )


async def generate_report(
    store: RecordStore,
    *,
    caller_id: str | None,
    professional_id: str | uuid.UUID | None,
    start_date: str | None = None,
    end_date: str | None = None,
    clock: Clock = system_clock,
    default_window_days: int = 30,
    monthly_span: int = 6,
    fallback_label: str = "Other",
    fetch_timeout: float = 30.0,
) -> ReportOutcome:
    """Validate the request, then compute the report for ``professional_id``.

    Failures never raise; they come back as an unsuccessful outcome whose
    ``error`` tells the caller which kind of failure occurred.
    """
    try:
        if not caller_id:
            raise ValidationError("Caller identity is required")
        property_id = parse_professional_id(professional_id)
        now = clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        window = resolve_window(
            start_date, end_date, now=now, default_days=default_window_days
        )
        result = await build_report(
            store,
            professional_id=property_id,
            window=window,
            today=now.date(),
            monthly_span=monthly_span,
            fallback_label=fallback_label,
            fetch_timeout=fetch_timeout,
        )
    except ValidationError as exc:
        logger.info("Rejected hotel report request: %s", exc.message)
        return ReportOutcome(success=False, error=exc)
    except ReportError as exc:
        logger.warning("Hotel report for %s failed: %s", professional_id, exc.message)
        return ReportOutcome(success=False, error=exc)
    except Exception:
        logger.exception("Unexpected failure generating hotel report")
        return ReportOutcome(
            success=False, error=ComputationError("Internal error generating report")
        )

    logger.info(
        "Generated hotel report for %s (%s..%s): %d reservations",
        property_id,
        window.start,
        window.end,
        result.summary.total_reservations,
    )
    return ReportOutcome(success=True, data=result)


__all__ = [
    "ReportOutcome",
    "build_report",
    "generate_report",
    "parse_iso_date",
    "parse_professional_id",
    "resolve_window",
]
