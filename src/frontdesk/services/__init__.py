from .room_status import (
    BookingIssue,
    classify_room,
    dedupe_rooms,
    find_invalid_bookings,
    is_active_on,
    resolve_room_views,
    select_relevant_booking,
)
from .daily_summary import (
    PaymentSummary,
    StatusCounts,
    UpcomingBooking,
    bookings_active_on,
    bookings_for_day,
    count_statuses,
    future_bookings,
    payments_for_day,
    summarize_payments,
)
from .booking_service import BookingService
from .dashboard_service import DashboardService, DashboardSnapshot

__all__ = [
    # Room status
    "BookingIssue",
    "classify_room",
    "dedupe_rooms",
    "find_invalid_bookings",
    "is_active_on",
    "resolve_room_views",
    "select_relevant_booking",

    # Day lists and summaries
    "PaymentSummary",
    "StatusCounts",
    "UpcomingBooking",
    "bookings_active_on",
    "bookings_for_day",
    "count_statuses",
    "future_bookings",
    "payments_for_day",
    "summarize_payments",

    # Workflows
    "BookingService",
    "DashboardService",
    "DashboardSnapshot",
]
