"""
Day lists and summary figures for the dashboard.

Day lists use exact calendar-day equality: ``bookings_for_day`` shows the
bookings *starting* on a day. The room board uses interval containment
instead (see ``room_status``); ``bookings_active_on`` is its list form.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from frontdesk.dates import to_day
from frontdesk.models import Booking, Payment, RoomView
from frontdesk.services.room_status import is_active_on


@dataclass
class PaymentSummary:
    total_income: float = 0.0
    breakdown: Dict[str, float] = field(default_factory=dict)
    total_bookings: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_income": self.total_income,
            "breakdown": dict(self.breakdown),
            "total_bookings": self.total_bookings,
        }


@dataclass
class StatusCounts:
    total: int = 0
    available: int = 0
    occupied: int = 0
    booked: int = 0

    @property
    def available_today(self) -> int:
        """Rooms not occupied on the reference day, reserved-later ones included."""
        return self.total - self.occupied

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "available": self.available,
            "occupied": self.occupied,
            "booked": self.booked,
            "available_today": self.available_today,
        }


@dataclass
class UpcomingBooking:
    booking: Booking
    payment: Optional[Payment] = None


def bookings_for_day(reference_date: Any, bookings: Iterable[Booking]) -> List[Booking]:
    """Bookings listed under ``reference_date`` (their check-in day)."""
    day = to_day(reference_date)
    return [b for b in bookings if day is not None and b.booking_date == day]


def bookings_active_on(reference_date: Any, bookings: Iterable[Booking]) -> List[Booking]:
    """Bookings whose stay covers ``reference_date``."""
    return [b for b in bookings if is_active_on(b, reference_date)]


def payments_for_day(reference_date: Any, payments: Iterable[Payment]) -> List[Payment]:
    day = to_day(reference_date)
    return [p for p in payments if day is not None and p.payment_date == day]


def summarize_payments(payments: Iterable[Payment], bookings: Iterable[Booking] = ()) -> PaymentSummary:
    """Total income and per-mode breakdown; ``bookings`` is the day list being summarised."""
    summary = PaymentSummary()
    for payment in payments:
        summary.total_income += payment.amount
        summary.breakdown[payment.mode] = summary.breakdown.get(payment.mode, 0.0) + payment.amount
    summary.total_bookings = len(list(bookings))
    return summary


def count_statuses(room_views: Iterable[RoomView]) -> StatusCounts:
    counts = StatusCounts()
    for view in room_views:
        counts.total += 1
        if view.is_occupied():
            counts.occupied += 1
        elif view.is_booked():
            counts.booked += 1
        else:
            counts.available += 1
    return counts


def future_bookings(
    reference_date: Any,
    bookings: Iterable[Booking],
    payments: Iterable[Payment] = (),
) -> List[UpcomingBooking]:
    """
    Bookings starting after ``reference_date``, earliest first, each paired
    with the first payment recorded against it.
    """
    day = to_day(reference_date)
    first_payment: Dict[Any, Payment] = {}
    for payment in payments:
        if payment.booking_id is not None:
            first_payment.setdefault(payment.booking_id, payment)

    upcoming = [
        b for b in bookings
        if day is not None and b.check_in is not None and b.check_in > day
    ]
    upcoming.sort(key=lambda b: (b.check_in, "" if b.id is None else str(b.id)))
    return [UpcomingBooking(booking=b, payment=first_payment.get(b.id)) for b in upcoming]
