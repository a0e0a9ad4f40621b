"""Tests for the SQL-backed record store."""

from __future__ import annotations

import uuid
from datetime import UTC, date, datetime
from decimal import Decimal

import pytest

from hotel_api.db.session import dispose_engine, get_sessionmaker
from hotel_api.models import (
    ConsumptionItem,
    HotelConsumption,
    HotelReservation,
    HotelRoom,
    Professional,
    ReservationStatus,
    RoomStatus,
)
from hotel_api.reports.errors import DataAccessError
from hotel_api.reports.types import UNKNOWN_CATEGORY, KnownCategory
from hotel_api.services.record_store import SqlRecordStore

pytestmark = pytest.mark.asyncio


async def _seed(session) -> dict[str, uuid.UUID]:
    hotel = Professional(name="Hotel Azul")
    other = Professional(name="Hotel Verde")
    session.add_all([hotel, other])
    await session.flush()

    room = HotelRoom(
        professional_id=hotel.id,
        room_number="12",
        room_type="suite",
        status=RoomStatus.MAINTENANCE,
    )
    closed_room = HotelRoom(
        professional_id=hotel.id, room_number="13", room_type="suite", is_active=False
    )
    other_room = HotelRoom(professional_id=other.id, room_number="1", room_type="single")
    session.add_all([room, closed_room, other_room])
    await session.flush()

    stay = HotelReservation(
        room_id=room.id,
        guest_name="Rita",
        check_in_date=date(2024, 1, 5),
        check_out_date=date(2024, 1, 8),
        total_amount=Decimal("450.00"),
        num_guests=2,
        status=ReservationStatus.CONFIRMED,
    )
    early = HotelReservation(
        room_id=room.id,
        guest_name="Early",
        check_in_date=date(2023, 12, 31),
        check_out_date=date(2024, 1, 2),
        total_amount=Decimal("100.00"),
    )
    other_stay = HotelReservation(
        room_id=other_room.id,
        guest_name="Elsewhere",
        check_in_date=date(2024, 1, 6),
        check_out_date=date(2024, 1, 7),
    )
    session.add_all([stay, early, other_stay])
    await session.flush()

    soda = ConsumptionItem(
        professional_id=hotel.id, name="Soda", category="Minibar", price=Decimal("8.00")
    )
    kit = ConsumptionItem(professional_id=hotel.id, name="Kit", price=Decimal("20.00"))
    session.add_all([soda, kit])
    await session.flush()

    session.add_all(
        [
            HotelConsumption(
                reservation_id=stay.id,
                item_id=soda.id,
                quantity=2,
                unit_price=Decimal("8.00"),
                total_price=Decimal("16.00"),
                consumed_at=datetime(2024, 1, 6, 22, 15, tzinfo=UTC),
            ),
            HotelConsumption(
                reservation_id=stay.id,
                item_id=kit.id,
                total_price=Decimal("20.00"),
                consumed_at=datetime(2024, 1, 5, 14, 0, tzinfo=UTC),
            ),
            HotelConsumption(
                reservation_id=stay.id,
                item_id=None,
                total_price=Decimal("3.00"),
                consumed_at=datetime(2024, 1, 7, 9, 0, tzinfo=UTC),
            ),
            HotelConsumption(
                reservation_id=stay.id,
                item_id=soda.id,
                total_price=Decimal("8.00"),
                consumed_at=datetime(2024, 1, 9, 0, 0, tzinfo=UTC),
            ),
            HotelConsumption(
                reservation_id=other_stay.id,
                total_price=Decimal("50.00"),
                consumed_at=datetime(2024, 1, 6, 10, 0, tzinfo=UTC),
            ),
        ]
    )
    await session.commit()
    return {"hotel_id": hotel.id, "room_id": room.id, "stay_id": stay.id}


async def test_reservations_filtered_by_property_and_check_in(
    reset_database, db_url: str
) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        ids = await _seed(session)

    store = SqlRecordStore(sessionmaker)
    records = await store.fetch_reservations(
        ids["hotel_id"], date(2024, 1, 1), date(2024, 1, 31)
    )

    assert [r.guest_name for r in records] == ["Rita"]
    record = records[0]
    assert record.id == ids["stay_id"]
    assert (record.check_in, record.check_out) == (date(2024, 1, 5), date(2024, 1, 8))
    assert record.total_amount == Decimal("450.00")
    assert record.status == "confirmed"
    assert (record.room_id, record.room_number, record.room_type) == (
        ids["room_id"],
        "12",
        "suite",
    )

    inclusive = await store.fetch_reservations(
        ids["hotel_id"], date(2023, 12, 31), date(2024, 1, 5)
    )
    assert [r.guest_name for r in inclusive] == ["Early", "Rita"]


async def test_only_active_rooms_are_returned(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        ids = await _seed(session)

    rooms = await SqlRecordStore(sessionmaker).fetch_active_rooms(ids["hotel_id"])

    assert [(room.room_number, room.status) for room in rooms] == [("12", "maintenance")]


async def test_consumption_joins_item_category(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        ids = await _seed(session)

    entries = await SqlRecordStore(sessionmaker).fetch_consumption(
        ids["hotel_id"],
        datetime(2024, 1, 5, tzinfo=UTC),
        datetime(2024, 1, 8, 23, 59, 59, tzinfo=UTC),
    )

    assert [(e.item_name, e.category, e.total_price) for e in entries] == [
        ("Kit", UNKNOWN_CATEGORY, Decimal("20.00")),
        ("Soda", KnownCategory("Minibar"), Decimal("16.00")),
        (None, UNKNOWN_CATEGORY, Decimal("3.00")),
    ]
    assert all(e.consumed_at.tzinfo is not None for e in entries)
    assert {e.guest_name for e in entries} == {"Rita"}
    assert {e.room_number for e in entries} == {"12"}


async def test_store_failures_raise_data_access_error(tmp_path) -> None:
    url = f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}"
    store = SqlRecordStore(get_sessionmaker(url))
    try:
        with pytest.raises(DataAccessError, match="Failed to load reservations"):
            await store.fetch_reservations(uuid.uuid4(), date(2024, 1, 1), date(2024, 1, 2))
        with pytest.raises(DataAccessError, match="Failed to load rooms"):
            await store.fetch_active_rooms(uuid.uuid4())
        with pytest.raises(DataAccessError, match="Failed to load consumption"):
            await store.fetch_consumption(
                uuid.uuid4(),
                datetime(2024, 1, 1, tzinfo=UTC),
                datetime(2024, 1, 2, tzinfo=UTC),
            )
    finally:
        await dispose_engine(url)
