"""Read-only access to reservations, rooms and consumption for reports."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from datetime import UTC, date, datetime
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from hotel_api.models.consumption import HotelConsumption
from hotel_api.models.reservation import HotelReservation
from hotel_api.models.room import HotelRoom
from hotel_api.reports.errors import DataAccessError
from hotel_api.reports.types import (
    ConsumptionEntry,
    ReservationRecord,
    RoomRecord,
    category_from_label,
)

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Source of the raw records a report is computed from."""

    async def fetch_reservations(
        self, professional_id: uuid.UUID, start: date, end: date
    ) -> Sequence[ReservationRecord]: ...

    async def fetch_active_rooms(
        self, professional_id: uuid.UUID
    ) -> Sequence[RoomRecord]: ...

    async def fetch_consumption(
        self, professional_id: uuid.UUID, start_at: datetime, end_at: datetime
    ) -> Sequence[ConsumptionEntry]: ...


def _coerce_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def _enum_value(value: object) -> str:
    return str(getattr(value, "value", value))


def _to_reservation_record(reservation: HotelReservation) -> ReservationRecord:
    room = reservation.room
    return ReservationRecord(
        id=reservation.id,
        guest_name=reservation.guest_name,
        check_in=reservation.check_in_date,
        check_out=reservation.check_out_date,
        total_amount=reservation.total_amount,
        num_guests=reservation.num_guests,
        status=_enum_value(reservation.status),
        room_id=room.id,
        room_number=room.room_number,
        room_type=room.room_type,
    )


def _to_room_record(room: HotelRoom) -> RoomRecord:
    return RoomRecord(
        id=room.id,
        room_number=room.room_number,
        room_type=room.room_type,
        status=_enum_value(room.status),
        is_active=room.is_active,
    )


def _to_consumption_entry(row: HotelConsumption) -> ConsumptionEntry:
    item = row.item
    reservation = row.reservation
    return ConsumptionEntry(
        id=row.id,
        reservation_id=reservation.id,
        quantity=row.quantity,
        total_price=row.total_price,
        consumed_at=_coerce_utc(row.consumed_at),
        item_name=item.name if item is not None else None,
        category=category_from_label(item.category if item is not None else None),
        guest_name=reservation.guest_name,
        room_number=reservation.room.room_number,
    )


class SqlRecordStore:
    """Record store backed by the hotel tables.

    Each fetch opens its own session so that fetches may be awaited
    concurrently.
    """

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]) -> None:
        self._sessionmaker = sessionmaker

    async def fetch_reservations(
        self, professional_id: uuid.UUID, start: date, end: date
    ) -> list[ReservationRecord]:
        """Reservations checking in between ``start`` and ``end`` inclusive."""
        stmt = (
            select(HotelReservation)
            .join(HotelReservation.room)
            .options(selectinload(HotelReservation.room))
            .where(
                HotelRoom.professional_id == professional_id,
                HotelReservation.check_in_date >= start,
                HotelReservation.check_in_date <= end,
            )
            .order_by(HotelReservation.check_in_date.asc(), HotelReservation.id)
        )
        try:
            async with self._sessionmaker() as session:
                result = await session.execute(stmt)
                return [_to_reservation_record(r) for r in result.scalars().all()]
        except SQLAlchemyError as exc:
            logger.exception("Failed to load reservations for %s", professional_id)
            raise DataAccessError("Failed to load reservations") from exc

    async def fetch_active_rooms(self, professional_id: uuid.UUID) -> list[RoomRecord]:
        stmt = (
            select(HotelRoom)
            .where(
                HotelRoom.professional_id == professional_id,
                HotelRoom.is_active.is_(True),
            )
            .order_by(HotelRoom.room_number)
        )
        try:
            async with self._sessionmaker() as session:
                result = await session.execute(stmt)
                return [_to_room_record(room) for room in result.scalars().all()]
        except SQLAlchemyError as exc:
            logger.exception("Failed to load rooms for %s", professional_id)
            raise DataAccessError("Failed to load rooms") from exc

    async def fetch_consumption(
        self, professional_id: uuid.UUID, start_at: datetime, end_at: datetime
    ) -> list[ConsumptionEntry]:
        """Consumption posted between ``start_at`` and ``end_at`` inclusive."""
        stmt = (
            select(HotelConsumption)
            .join(HotelConsumption.reservation)
            .join(HotelReservation.room)
            .options(
                selectinload(HotelConsumption.item),
                selectinload(HotelConsumption.reservation).selectinload(
                    HotelReservation.room
                ),
            )
            .where(
                HotelRoom.professional_id == professional_id,
                HotelConsumption.consumed_at >= _coerce_utc(start_at),
                HotelConsumption.consumed_at <= _coerce_utc(end_at),
            )
            .order_by(HotelConsumption.consumed_at.asc(), HotelConsumption.id)
        )
        try:
            async with self._sessionmaker() as session:
                result = await session.execute(stmt)
                return [_to_consumption_entry(row) for row in result.scalars().all()]
        except SQLAlchemyError as exc:
            logger.exception("Failed to load consumption for %s", professional_id)
            raise DataAccessError("Failed to load consumption") from exc


__all__ = ["RecordStore", "SqlRecordStore"]
