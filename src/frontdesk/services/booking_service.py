from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from frontdesk.adapters.base import FrontDeskAdapter
from frontdesk.base_config import DEFAULT_NIGHTLY_RATE, FrontDeskConfig
from frontdesk.config import get_config
from frontdesk.exceptions import BookingError, PaymentError
from frontdesk.models import Booking, Payment, Room
from frontdesk.runtime import get_adapter
from frontdesk.schemas import BookingRequest, PaymentRequest

logger = logging.getLogger(__name__)


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    location = ".".join(str(part) for part in err.get("loc", ())) or "input"
    return f"{location}: {err.get('msg')}"


class BookingService:
    """
    Booking workflow behind the front desk dialogs: new bookings, settling the
    balance, and check-out.
    """

    def __init__(self, adapter: FrontDeskAdapter, nightly_rate: float = DEFAULT_NIGHTLY_RATE):
        self.adapter = adapter
        self.nightly_rate = nightly_rate

    @classmethod
    def from_config(cls, config: Optional[FrontDeskConfig] = None) -> BookingService:
        """Builds the service on the shared adapter with the configured nightly rate."""
        config = config or get_config()
        return cls(get_adapter(), nightly_rate=config.get_nightly_rate())

    def _get_booking(self, booking_id: Any) -> Booking:
        data = self.adapter.get_booking(booking_id)
        if not data:
            raise BookingError(f"Booking with ID {booking_id} not found.")
        return Booking.from_dict(data)

    def _payments_for(self, booking_id: Any) -> List[Payment]:
        return [Payment.from_dict(p) for p in self.adapter.list_payments_for_booking(booking_id)]

    def _find_or_create_room(self, room_number: str) -> Room:
        room_data = self.adapter.find_room_by_number(room_number)
        if room_data is None:
            logger.info(f"Room {room_number} not on record, creating it.")
            room_data = self.adapter.create_room(room_number, Room.STATUS_AVAILABLE)
        return Room.from_dict(room_data)

    def _find_conflict(self, room_number: str, check_in: date, check_out: date) -> Optional[Booking]:
        for data in self.adapter.list_bookings_for_room(room_number):
            existing = Booking.from_dict(data)
            if existing.overlaps(check_in, check_out):
                return existing
        return None

    # ------------------------------------
    # Operations
    # ------------------------------------
    def create_booking(self, data: Union[BookingRequest, Dict[str, Any]]) -> Dict[str, Any]:
        """
        Records a booking and its first payment.

        The room is looked up by number and created when missing. A stay that
        overlaps another booking of the same room is rejected.

        Returns:
            {"booking": Booking, "payment": Payment}
        """
        if isinstance(data, BookingRequest):
            request = data
        else:
            try:
                request = BookingRequest.model_validate(data)
            except ValidationError as e:
                raise BookingError(f"Invalid booking data - {_first_error(e)}") from e

        conflict = self._find_conflict(request.room_number, request.check_in, request.check_out)
        if conflict is not None:
            raise BookingError(
                f"Room {request.room_number} is already booked by {conflict.guest_name} "
                f"from {conflict.check_in} to {conflict.check_out}."
            )

        room = self._find_or_create_room(request.room_number)
        payment_status = Booking.PAYMENT_PAID if request.payment_type == "Full" else Booking.PAYMENT_ADVANCE

        booking = Booking(
            room_number=room.room_number,
            room_id=room.id,
            guest_name=request.guest_name,
            check_in=request.check_in,
            check_out=request.check_out,
            num_persons=request.num_persons,
            payment_status=payment_status,
        )
        payment = Payment(
            amount=request.payment_amount,
            mode=request.payment_mode,
            payment_date=request.check_in,
            room_id=room.id,
            room_number=room.room_number,
        )
        booking_data = booking.to_dict()
        booking_data.pop("id")
        payment_data = payment.to_dict()
        payment_data.pop("id")
        payment_data.pop("booking_id")

        booking_row, payment_row = self.adapter.create_booking_with_payment(booking_data, payment_data)
        saved_booking = Booking.from_dict(booking_row)
        saved_payment = Payment.from_dict(payment_row)

        logger.info(f"Room {room.room_number} booked for {request.guest_name} (booking ID {saved_booking.id}).")
        return {"booking": saved_booking, "payment": saved_payment}

    def balance_due(self, booking_id: Any) -> float:
        """Nights x nightly rate minus everything paid so far, never negative."""
        booking = self._get_booking(booking_id)
        total_cost = booking.nights() * self.nightly_rate
        amount_paid = sum(p.amount for p in self._payments_for(booking_id))
        return max(total_cost - amount_paid, 0.0)

    def get_booking_details(self, booking_id: Any) -> Dict[str, Any]:
        booking = self._get_booking(booking_id)
        return {
            "booking": booking,
            "payments": self._payments_for(booking_id),
            "balance_due": self.balance_due(booking_id),
        }

    def complete_payment(
        self,
        booking_id: Any,
        amount: float,
        mode: str = "Cash",
        paid_on: Optional[date] = None,
    ) -> Dict[str, Any]:
        """Records the final payment and marks the booking as Paid."""
        try:
            request = PaymentRequest(amount=amount, mode=mode, paid_on=paid_on)
        except ValidationError as e:
            raise PaymentError(f"Invalid payment - {_first_error(e)}") from e

        booking = self._get_booking(booking_id)
        payment = Payment(
            amount=request.amount,
            mode=request.mode,
            payment_date=request.paid_on or date.today(),
            booking_id=booking.id,
            room_id=booking.room_id,
            room_number=booking.room_number,
        )
        payment_data = payment.to_dict()
        payment_data.pop("id")

        settled = self.adapter.settle_booking(booking.id, payment_data, Booking.PAYMENT_PAID)
        if settled is None:
            raise BookingError(f"Booking {booking.id} disappeared while completing payment.")
        booking_row, payment_row = settled

        logger.info(f"Remaining balance for room {booking.room_number} paid ({request.amount} via {request.mode}).")
        return {"booking": Booking.from_dict(booking_row), "payment": Payment.from_dict(payment_row)}

    def check_out(self, booking_id: Any) -> Booking:
        """
        Removes the booking and its payments. Not allowed while only an
        advance has been paid.
        """
        booking = self._get_booking(booking_id)
        if booking.payment_status == Booking.PAYMENT_ADVANCE:
            raise PaymentError(
                f"Payment pending for room {booking.room_number}: complete the payment before checking out."
            )

        removed_payments = self.adapter.delete_booking_cascade(booking.id)
        if removed_payments is None:
            raise BookingError(f"Booking {booking.id} could not be removed.")

        logger.info(
            f"{booking.guest_name} checked out from room {booking.room_number} "
            f"({removed_payments} payment record(s) removed)."
        )
        return booking
