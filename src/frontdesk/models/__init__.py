from .room import Room
from .booking import Booking
from .payment import Payment
from .room_view import RoomView

__all__ = [
    "Room",
    "Booking",
    "Payment",
    "RoomView",
]
