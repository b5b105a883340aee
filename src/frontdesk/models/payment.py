from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Dict, Any

from frontdesk.dates import to_day, format_day
from frontdesk.models.room import normalize_room_number


@dataclass
class Payment:
    """Money received against a booking."""

    amount: float
    mode: str
    payment_date: Optional[date]

    id: Optional[Any] = field(default=None)
    booking_id: Optional[Any] = field(default=None)
    room_id: Optional[Any] = field(default=None)
    room_number: str = field(default="")

    def __post_init__(self) -> None:
        self.amount = float(self.amount or 0)
        self.payment_date = to_day(self.payment_date)
        self.room_number = normalize_room_number(self.room_number)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "booking_id": self.booking_id,
            "room_id": self.room_id,
            "room_number": self.room_number,
            "amount": self.amount,
            "mode": self.mode,
            "payment_date": format_day(self.payment_date),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Payment:
        data = data.copy()
        if "payment_date" not in data and "date" in data:
            data["payment_date"] = data.pop("date")

        field_names = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in field_names}
        filtered_data.setdefault("amount", 0.0)
        filtered_data.setdefault("mode", "")
        filtered_data.setdefault("payment_date", None)
        if filtered_data.get("room_number") is None:
            filtered_data.pop("room_number", None)

        return cls(**filtered_data)
