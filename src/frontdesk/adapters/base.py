from __future__ import annotations

from typing import Protocol, runtime_checkable, Optional, Dict, Any, List, Tuple


@runtime_checkable
class FrontDeskAdapter(Protocol):
    # lifecycle
    def init(self) -> None: ...

    # rooms
    def create_room(self, room_number: str, status: str = "Available") -> Dict[str, Any]: ...
    def get_room(self, room_id: int) -> Optional[Dict[str, Any]]: ...
    def find_room_by_number(self, room_number: str) -> Optional[Dict[str, Any]]: ...
    def list_rooms(self) -> List[Dict[str, Any]]: ...

    # bookings
    def create_booking(self, data: Dict[str, Any]) -> Dict[str, Any]: ...
    def get_booking(self, booking_id: int) -> Optional[Dict[str, Any]]: ...
    def list_bookings(self) -> List[Dict[str, Any]]: ...
    def list_bookings_for_room(self, room_number: str) -> List[Dict[str, Any]]: ...
    def update_booking(self, booking_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]: ...
    def delete_booking(self, booking_id: int) -> bool: ...

    # payments
    def create_payment(self, data: Dict[str, Any]) -> Dict[str, Any]: ...
    def list_payments(self) -> List[Dict[str, Any]]: ...
    def list_payments_for_booking(self, booking_id: int) -> List[Dict[str, Any]]: ...
    def delete_payments_for_booking(self, booking_id: int) -> int: ...

    # atomic multi-record writes
    def create_booking_with_payment(
        self, booking: Dict[str, Any], payment: Dict[str, Any]
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]: ...
    def settle_booking(
        self, booking_id: int, payment: Dict[str, Any], payment_status: str
    ) -> Optional[Tuple[Dict[str, Any], Dict[str, Any]]]: ...
    def delete_booking_cascade(self, booking_id: int) -> Optional[int]: ...
