"""Ancillary consumption (minibar, room service, ...) models."""
from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_api.db.base import Base
from hotel_api.models.mixins import TimestampMixin


if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from hotel_api.models.professional import Professional
    from hotel_api.models.reservation import HotelReservation


class ConsumptionItem(TimestampMixin, Base):
    """A chargeable catalog item; ``category`` is optional."""

    __tablename__ = "hotel_consumption_items"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    professional_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("professionals.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str | None] = mapped_column(String(120))
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    professional: Mapped["Professional"] = relationship(
        "Professional", back_populates="consumption_items"
    )


class HotelConsumption(TimestampMixin, Base):
    """A consumption charge posted against a reservation."""

    __tablename__ = "hotel_consumption"
    __table_args__ = (Index("ix_hotel_consumption_consumed_at", "consumed_at"),)

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    reservation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("hotel_reservations.id", ondelete="CASCADE"), nullable=False
    )
    item_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("hotel_consumption_items.id", ondelete="SET NULL"), nullable=True
    )
    quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    unit_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    total_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    consumed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    reservation: Mapped["HotelReservation"] = relationship(
        "HotelReservation", back_populates="consumption"
    )
    item: Mapped["ConsumptionItem | None"] = relationship("ConsumptionItem")
