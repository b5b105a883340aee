from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, ClassVar, Tuple


def normalize_room_number(value: Any) -> str:
    """Room numbers are compared as stripped strings (101 == "101" == " 101 ")."""
    if value is None:
        return ""
    return str(value).strip()


@dataclass
class Room:
    """Hotel room record as kept by storage."""

    room_number: str

    id: Optional[Any] = field(default=None)

    # Stored status is informational only; the dashboard always derives it.
    STATUS_AVAILABLE: ClassVar[str] = "Available"
    STATUS_OCCUPIED: ClassVar[str] = "Occupied"
    STATUS_BOOKED: ClassVar[str] = "Booked"
    STATUS_MAINTENANCE: ClassVar[str] = "Maintenance"

    base_status: str = field(default=STATUS_AVAILABLE)

    def __post_init__(self) -> None:
        self.room_number = normalize_room_number(self.room_number)

    def sort_key(self) -> Tuple[int, int, str]:
        """Numeric room numbers first in numeric order, the rest lexically."""
        if self.room_number.isdigit():
            return (0, int(self.room_number), self.room_number)
        return (1, 0, self.room_number)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "room_number": self.room_number,
            "status": self.base_status,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Room:
        return cls(
            room_number=data.get("room_number", ""),
            id=data.get("id"),
            base_status=data.get("status") or data.get("base_status") or cls.STATUS_AVAILABLE,
        )
