"""Test fixtures for the hotel reports backend."""
from __future__ import annotations

import os
import uuid
from collections.abc import AsyncIterator, Callable
from datetime import UTC, date, datetime
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from hotel_api.api import deps
from hotel_api.core.clock import fixed_clock
from hotel_api.core.config import get_settings
from hotel_api.core.security import create_access_token
from hotel_api.db.base import Base
from hotel_api.db.session import dispose_engine, get_sessionmaker
from hotel_api.main import app
from hotel_api.models import HotelRoom, Professional, RoomStatus
from hotel_api.reports.types import (
    UNKNOWN_CATEGORY,
    Category,
    ConsumptionEntry,
    ReportWindow,
    ReservationRecord,
    RoomRecord,
    category_from_label,
)
from hotel_api.services.record_store import SqlRecordStore

REPORT_NOW = datetime(2024, 1, 20, 12, 0, tzinfo=UTC)


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)


@pytest_asyncio.fixture()
async def app_context(
    reset_database: None, db_url: str
) -> AsyncIterator[dict[str, object]]:
    """Yield an async client plus a professional with one active room."""
    sessionmaker = get_sessionmaker(db_url)

    async with sessionmaker() as session:
        professional = Professional(name="Pousada Teste")
        session.add(professional)
        await session.flush()

        active_room = HotelRoom(
            professional_id=professional.id,
            room_number="101",
            room_type="double",
            status=RoomStatus.OCCUPIED,
        )
        retired_room = HotelRoom(
            professional_id=professional.id,
            room_number="999",
            room_type="single",
            is_active=False,
        )
        session.add_all([active_room, retired_room])
        await session.commit()

        context: dict[str, object] = {
            "professional_id": professional.id,
            "room_id": active_room.id,
            "sessionmaker": sessionmaker,
            "token": create_access_token(str(uuid.uuid4())),
        }

    app.dependency_overrides[deps.get_clock] = lambda: fixed_clock(REPORT_NOW)
    app.dependency_overrides[deps.get_record_store] = lambda: SqlRecordStore(
        sessionmaker
    )
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            context["client"] = client
            yield context
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def make_reservation() -> Callable[..., ReservationRecord]:
    """Build reservation records for engine tests."""

    def _make(
        check_in: date,
        check_out: date,
        total: str | None = "0",
        *,
        guests: int | None = 1,
        status: str = "confirmed",
        room_number: str = "101",
    ) -> ReservationRecord:
        return ReservationRecord(
            id=uuid.uuid4(),
            guest_name="Guest",
            check_in=check_in,
            check_out=check_out,
            total_amount=Decimal(total) if total is not None else None,
            num_guests=guests,
            status=status,
            room_id=uuid.uuid4(),
            room_number=room_number,
            room_type="double",
        )

    return _make


@pytest.fixture()
def make_consumption() -> Callable[..., ConsumptionEntry]:
    """Build consumption entries for engine tests."""

    def _make(
        consumed_at: datetime,
        total: str | None,
        category: Category | str | None = UNKNOWN_CATEGORY,
        *,
        quantity: int = 1,
    ) -> ConsumptionEntry:
        if category is None or isinstance(category, str):
            category = category_from_label(category)
        return ConsumptionEntry(
            id=uuid.uuid4(),
            reservation_id=uuid.uuid4(),
            quantity=quantity,
            total_price=Decimal(total) if total is not None else None,
            consumed_at=consumed_at,
            item_name="Item",
            category=category,
            guest_name="Guest",
            room_number="101",
        )

    return _make


@pytest.fixture()
def make_rooms() -> Callable[..., list[RoomRecord]]:
    def _make(count: int, status: str = "available") -> list[RoomRecord]:
        return [
            RoomRecord(
                id=uuid.uuid4(),
                room_number=str(100 + index),
                room_type="double",
                status=status,
            )
            for index in range(count)
        ]

    return _make


@pytest.fixture()
def window_for() -> Callable[[date, date], ReportWindow]:
    """Build an inclusive whole-day report window."""

    def _make(start: date, end: date) -> ReportWindow:
        return ReportWindow(
            start=start,
            end=end,
            start_at=datetime(start.year, start.month, start.day, tzinfo=UTC),
            end_at=datetime(end.year, end.month, end.day, 23, 59, 59, 999999, tzinfo=UTC),
        )

    return _make
