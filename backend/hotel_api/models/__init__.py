"""ORM models package export."""

from hotel_api.models.consumption import ConsumptionItem, HotelConsumption
from hotel_api.models.professional import Professional, Sector
from hotel_api.models.reservation import HotelReservation, ReservationStatus
from hotel_api.models.room import HotelRoom, RoomStatus

__all__ = [
    "ConsumptionItem",
    "HotelConsumption",
    "HotelReservation",
    "HotelRoom",
    "Professional",
    "ReservationStatus",
    "RoomStatus",
    "Sector",
]
