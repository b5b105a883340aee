from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional, Dict, Any, ClassVar

from frontdesk.dates import to_day, format_day, nights_between
from frontdesk.models.room import normalize_room_number


def _stay_end(check_in: date, check_out: date) -> date:
    """Exclusive end day of a stay, at least one day after check-in."""
    return max(check_out, check_in + timedelta(days=1))


@dataclass
class Booking:
    """A guest stay in a room, bounded by calendar days."""

    # Required
    room_number: str
    guest_name: str
    check_in: Optional[date]
    check_out: Optional[date]

    # Optional
    id: Optional[Any] = field(default=None)
    room_id: Optional[Any] = field(default=None)
    num_persons: int = field(default=1)

    PAYMENT_PAID: ClassVar[str] = "Paid"
    PAYMENT_PENDING: ClassVar[str] = "Pending"
    PAYMENT_ADVANCE: ClassVar[str] = "Advance Paid"

    payment_status: str = field(default=PAYMENT_PENDING)
    # Day the booking is listed under in day lists; defaults to check-in.
    booking_date: Optional[date] = field(default=None)

    def __post_init__(self) -> None:
        self.room_number = normalize_room_number(self.room_number)
        self.check_in = to_day(self.check_in)
        self.check_out = to_day(self.check_out)
        self.booking_date = to_day(self.booking_date) or self.check_in

    def has_valid_interval(self) -> bool:
        return (
            self.check_in is not None
            and self.check_out is not None
            and self.check_in <= self.check_out
        )

    def nights(self) -> int:
        if not self.has_valid_interval():
            return 0
        return nights_between(self.check_in, self.check_out)

    def overlaps(self, check_in: date, check_out: date) -> bool:
        """
        Half-open overlap: a stay may start on the day another one ends. A
        same-day stay still holds its own day.
        """
        if not self.has_valid_interval():
            return False
        return (
            self.check_in < _stay_end(check_in, check_out)
            and check_in < _stay_end(self.check_in, self.check_out)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "room_id": self.room_id,
            "room_number": self.room_number,
            "guest_name": self.guest_name,
            "check_in": format_day(self.check_in),
            "check_out": format_day(self.check_out),
            "num_persons": self.num_persons,
            "payment_status": self.payment_status,
            "booking_date": format_day(self.booking_date),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Booking:
        data = data.copy()
        # Older records carry the listing day under "date".
        if "booking_date" not in data and "date" in data:
            data["booking_date"] = data.pop("date")

        field_names = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in field_names}
        filtered_data.setdefault("room_number", "")
        filtered_data.setdefault("guest_name", "")
        filtered_data.setdefault("check_in", None)
        filtered_data.setdefault("check_out", None)
        if filtered_data.get("num_persons") is None:
            filtered_data.pop("num_persons", None)
        if not filtered_data.get("payment_status"):
            filtered_data.pop("payment_status", None)

        return cls(**filtered_data)
