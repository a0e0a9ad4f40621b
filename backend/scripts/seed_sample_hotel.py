"""Seed a sample hotel with rooms, reservations and consumption.

Usage: ``python scripts/seed_sample_hotel.py`` from ``backend/`` with
``DATABASE_URL`` pointing at a migrated database.
"""

from __future__ import annotations

import asyncio
import random
from datetime import UTC, date, datetime, time, timedelta
from decimal import Decimal

from hotel_api.core.config import get_settings
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

ROOMS = [
    ("101", "single", Decimal("180.00")),
    ("102", "double", Decimal("240.00")),
    ("103", "double", Decimal("240.00")),
    ("201", "suite", Decimal("420.00")),
]
ITEMS = [
    ("Water", "Minibar", Decimal("6.00")),
    ("Soda", "Minibar", Decimal("8.00")),
    ("Club sandwich", "Room service", Decimal("38.00")),
    ("Laundry bag", "Laundry", Decimal("45.00")),
    ("Welcome kit", None, Decimal("25.00")),
]
GUESTS = ["Ana Souza", "Bruno Lima", "Carla Dias", "Diego Rocha", "Elisa Prado"]


async def main() -> None:
    rng = random.Random(42)
    settings = get_settings()
    sessionmaker = get_sessionmaker(settings.database_url)
    async with sessionmaker() as session:
        professional = Professional(name="Pousada Exemplo")
        session.add(professional)
        await session.flush()

        rooms: list[tuple[HotelRoom, Decimal]] = []
        for number, room_type, rate in ROOMS:
            room = HotelRoom(
                professional_id=professional.id,
                room_number=number,
                room_type=room_type,
                status=RoomStatus.AVAILABLE,
            )
            session.add(room)
            rooms.append((room, rate))

        items = [
            ConsumptionItem(
                professional_id=professional.id,
                name=name,
                category=category,
                price=price,
            )
            for name, category, price in ITEMS
        ]
        session.add_all(items)
        await session.flush()

        today = date.today()
        for room, rate in rooms:
            check_in = today - timedelta(days=170)
            while check_in < today:
                nights = rng.randint(1, 5)
                reservation = HotelReservation(
                    room_id=room.id,
                    guest_name=rng.choice(GUESTS),
                    check_in_date=check_in,
                    check_out_date=check_in + timedelta(days=nights),
                    total_amount=rate * nights,
                    num_guests=rng.randint(1, 3),
                    status=ReservationStatus.CHECKED_OUT,
                )
                session.add(reservation)
                await session.flush()

                for _ in range(rng.randint(0, 3)):
                    item = rng.choice(items)
                    quantity = rng.randint(1, 3)
                    consumed_on = check_in + timedelta(days=rng.randrange(nights))
                    session.add(
                        HotelConsumption(
                            reservation_id=reservation.id,
                            item_id=item.id,
                            quantity=quantity,
                            unit_price=item.price,
                            total_price=item.price * quantity,
                            consumed_at=datetime.combine(
                                consumed_on, time(hour=rng.randint(8, 22)), tzinfo=UTC
                            ),
                        )
                    )
                check_in += timedelta(days=nights + rng.randint(0, 4))

        await session.commit()
        print(f"Seeded professional {professional.id} with {len(rooms)} rooms")

    await dispose_engine(settings.database_url)


if __name__ == "__main__":
    asyncio.run(main())
