"""Hotel room inventory."""

from __future__ import annotations

import enum
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_api.db.base import Base
from hotel_api.models.mixins import TimestampMixin, enum_values


if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from hotel_api.models.professional import Professional
    from hotel_api.models.reservation import HotelReservation


class RoomStatus(str, enum.Enum):
    """Housekeeping state of a room."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    CLEANING = "cleaning"


class HotelRoom(TimestampMixin, Base):
    """A bookable room belonging to a professional."""

    __tablename__ = "hotel_rooms"
    __table_args__ = (Index("ix_hotel_rooms_professional", "professional_id"),)

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    professional_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("professionals.id", ondelete="CASCADE"), nullable=False
    )
    room_number: Mapped[str] = mapped_column(String(32), nullable=False)
    room_type: Mapped[str] = mapped_column(String(64), nullable=False)
    status: Mapped[RoomStatus] = mapped_column(
        Enum(RoomStatus, values_callable=enum_values),
        default=RoomStatus.AVAILABLE,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    professional: Mapped["Professional"] = relationship(
        "Professional", back_populates="rooms"
    )
    reservations: Mapped[list["HotelReservation"]] = relationship(
        "HotelReservation", back_populates="room"
    )
