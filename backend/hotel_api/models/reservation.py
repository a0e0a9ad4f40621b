"""Hotel reservation models."""
from __future__ import annotations

import enum
import uuid
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, Enum, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_api.db.base import Base
from hotel_api.models.mixins import TimestampMixin, enum_values


if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from hotel_api.models.consumption import HotelConsumption
    from hotel_api.models.room import HotelRoom


class ReservationStatus(str, enum.Enum):
    """Lifecycle states for hotel reservations."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    CANCELLED = "cancelled"


class HotelReservation(TimestampMixin, Base):
    """A guest stay in a room; ``check_out_date`` is exclusive."""

    __tablename__ = "hotel_reservations"
    __table_args__ = (Index("ix_hotel_reservations_check_in", "check_in_date"),)

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    room_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("hotel_rooms.id", ondelete="CASCADE"), nullable=False
    )
    guest_name: Mapped[str] = mapped_column(String(255), nullable=False)
    guest_email: Mapped[str | None] = mapped_column(String(320))
    check_in_date: Mapped[date] = mapped_column(Date, nullable=False)
    check_out_date: Mapped[date] = mapped_column(Date, nullable=False)
    total_amount: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    num_guests: Mapped[int | None] = mapped_column(Integer)
    status: Mapped[ReservationStatus] = mapped_column(
        Enum(ReservationStatus, values_callable=enum_values),
        default=ReservationStatus.PENDING,
        nullable=False,
    )
    notes: Mapped[str | None] = mapped_column(String(1024))

    room: Mapped["HotelRoom"] = relationship("HotelRoom", back_populates="reservations")
    consumption: Mapped[list["HotelConsumption"]] = relationship(
        "HotelConsumption", back_populates="reservation", cascade="all, delete-orphan"
    )
