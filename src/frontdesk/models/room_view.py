from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, ClassVar

from frontdesk.models.booking import Booking
from frontdesk.models.room import Room


@dataclass
class RoomView:
    """A room decorated with the status derived for one reference day."""

    room: Room
    status: str

    STATUS_AVAILABLE: ClassVar[str] = Room.STATUS_AVAILABLE
    STATUS_OCCUPIED: ClassVar[str] = Room.STATUS_OCCUPIED
    STATUS_BOOKED: ClassVar[str] = Room.STATUS_BOOKED

    current_booking: Optional[Booking] = field(default=None)
    future_booking: Optional[Booking] = field(default=None)

    @property
    def id(self) -> Any:
        return self.room.id

    @property
    def room_number(self) -> str:
        return self.room.room_number

    @property
    def base_status(self) -> str:
        return self.room.base_status

    @property
    def booking(self) -> Optional[Booking]:
        return self.current_booking or self.future_booking

    @property
    def guest_name(self) -> Optional[str]:
        return self.booking.guest_name if self.booking else None

    def is_available(self) -> bool:
        return self.status == self.STATUS_AVAILABLE

    def is_occupied(self) -> bool:
        return self.status == self.STATUS_OCCUPIED

    def is_booked(self) -> bool:
        return self.status == self.STATUS_BOOKED

    def is_available_today(self) -> bool:
        """Free on the reference day, even if reserved for a later one."""
        return not self.is_occupied()

    def to_dict(self) -> Dict[str, Any]:
        data = self.room.to_dict()
        data["base_status"] = data.pop("status")
        data["status"] = self.status
        data["current_booking"] = self.current_booking.to_dict() if self.current_booking else None
        data["future_booking"] = self.future_booking.to_dict() if self.future_booking else None
        return data
