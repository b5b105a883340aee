from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from frontdesk.adapters.base import FrontDeskAdapter
from frontdesk.base_config import FrontDeskConfig
from frontdesk.config import get_config
from frontdesk.dates import to_day
from frontdesk.models import Booking, Payment, Room, RoomView
from frontdesk.runtime import get_adapter
from frontdesk.services.daily_summary import (
    PaymentSummary,
    StatusCounts,
    UpcomingBooking,
    bookings_for_day,
    count_statuses,
    future_bookings,
    payments_for_day,
    summarize_payments,
)
from frontdesk.services.room_status import BookingIssue, find_invalid_bookings, resolve_room_views

logger = logging.getLogger(__name__)


@dataclass
class DashboardSnapshot:
    """Everything the dashboard shows for one reference day."""
    reference_day: date
    rooms: List[RoomView] = field(default_factory=list)
    bookings_for_day: List[Booking] = field(default_factory=list)
    payments_for_day: List[Payment] = field(default_factory=list)
    payment_summary: PaymentSummary = field(default_factory=PaymentSummary)
    counts: StatusCounts = field(default_factory=StatusCounts)
    future_bookings: List[UpcomingBooking] = field(default_factory=list)
    issues: List[BookingIssue] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reference_day": self.reference_day.isoformat(),
            "rooms": [r.to_dict() for r in self.rooms],
            "bookings_for_day": [b.to_dict() for b in self.bookings_for_day],
            "payments_for_day": [p.to_dict() for p in self.payments_for_day],
            "payment_summary": self.payment_summary.to_dict(),
            "counts": self.counts.to_dict(),
            "future_bookings": [
                {
                    "booking": u.booking.to_dict(),
                    "payment": u.payment.to_dict() if u.payment else None,
                }
                for u in self.future_bookings
            ],
            "issues": [{"booking_id": i.booking.id, "reason": i.reason} for i in self.issues],
        }


class DashboardService:
    """
    Loads rooms, bookings and payments from storage and derives the dashboard
    for a reference day. Holds no state between calls, so it can be re-run on
    every refresh.
    """

    def __init__(self, adapter: FrontDeskAdapter, strict: bool = False):
        self.adapter = adapter
        self.strict = strict

    @classmethod
    def from_config(cls, config: Optional[FrontDeskConfig] = None) -> DashboardService:
        config = config or get_config()
        return cls(get_adapter(), strict=config.get_strict_validation())

    def snapshot(self, reference_date: Any) -> DashboardSnapshot:
        day = to_day(reference_date)
        if day is None:
            raise ValueError(f"Invalid reference date: {reference_date!r}")

        rooms = [Room.from_dict(r) for r in self.adapter.list_rooms()]
        bookings = [Booking.from_dict(b) for b in self.adapter.list_bookings()]
        payments = [Payment.from_dict(p) for p in self.adapter.list_payments()]
        logger.debug(f"Dashboard for {day}: {len(rooms)} rooms, {len(bookings)} bookings, {len(payments)} payments")

        room_views = resolve_room_views(day, rooms, bookings, strict=self.strict)
        day_bookings = bookings_for_day(day, bookings)
        day_payments = payments_for_day(day, payments)

        return DashboardSnapshot(
            reference_day=day,
            rooms=room_views,
            bookings_for_day=day_bookings,
            payments_for_day=day_payments,
            payment_summary=summarize_payments(day_payments, day_bookings),
            counts=count_statuses(room_views),
            future_bookings=future_bookings(day, bookings, payments),
            issues=find_invalid_bookings(bookings),
        )
