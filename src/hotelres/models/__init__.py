from .room import Room, RoomCategory
from .guest import Guest
from .reservation import Reservation, ReservationStatus, PaymentMethod, count_nights
from .inputs import GuestInput, StayInput

__all__ = [
    "Room",
    "RoomCategory",
    "Guest",
    "Reservation",
    "ReservationStatus",
    "PaymentMethod",
    "count_nights",
    "GuestInput",
    "StayInput",
]
