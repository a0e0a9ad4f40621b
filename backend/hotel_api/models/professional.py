"""Professional (tenant/property) model."""

from __future__ import annotations

import enum
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_api.db.base import Base
from hotel_api.models.mixins import TimestampMixin, enum_values


if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from hotel_api.models.consumption import ConsumptionItem
    from hotel_api.models.room import HotelRoom


class Sector(str, enum.Enum):
    """Business sector a professional operates in."""

    HOSPITALITY = "hospitality"
    HEALTH = "health"
    BEAUTY = "beauty"


class Professional(TimestampMixin, Base):
    """A business owning rooms and consumption items."""

    __tablename__ = "professionals"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    sector: Mapped[Sector] = mapped_column(
        Enum(Sector, values_callable=enum_values),
        default=Sector.HOSPITALITY,
        nullable=False,
    )
    user_id: Mapped[uuid.UUID | None] = mapped_column(nullable=True)

    rooms: Mapped[list["HotelRoom"]] = relationship(
        "HotelRoom", back_populates="professional", cascade="all, delete-orphan"
    )
    consumption_items: Mapped[list["ConsumptionItem"]] = relationship(
        "ConsumptionItem", back_populates="professional", cascade="all, delete-orphan"
    )
