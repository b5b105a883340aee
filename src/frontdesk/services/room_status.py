"""
Room status resolution.

Derives, for one reference day, whether each room is Available, Occupied or
Booked from the full booking list. Status stored on room records is never
consulted.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from frontdesk.dates import end_of_day, start_of_day, to_day
from frontdesk.exceptions import DataIntegrityError
from frontdesk.models import Booking, Room, RoomView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingIssue:
    """A booking that cannot take part in status resolution."""
    booking: Booking
    reason: str


# ------------------------------------
# Interval helpers
# ------------------------------------
def _booking_bounds(booking: Booking) -> Tuple[datetime, datetime]:
    """[start of check-in day, end of check-out day] for a valid booking."""
    return start_of_day(booking.check_in), end_of_day(booking.check_out)


def _invalid_reason(booking: Booking) -> Optional[str]:
    if booking.check_in is None or booking.check_out is None:
        return "missing check-in or check-out date"
    if booking.check_out < booking.check_in:
        return f"check-out {booking.check_out} is before check-in {booking.check_in}"
    return None


def _tie_break(booking: Booking) -> str:
    return "" if booking.id is None else str(booking.id)


def is_active_on(booking: Booking, reference_date: Any) -> bool:
    """True when the reference day falls inside the stay, both ends inclusive."""
    ref = start_of_day(reference_date)
    if ref is None or _invalid_reason(booking):
        return False
    check_in, check_out = _booking_bounds(booking)
    return check_in <= ref <= check_out


def find_invalid_bookings(bookings: Iterable[Booking]) -> List[BookingIssue]:
    """Lists bookings with unusable dates, in input order."""
    issues = []
    for booking in bookings:
        reason = _invalid_reason(booking)
        if reason:
            issues.append(BookingIssue(booking=booking, reason=reason))
    return issues


# ------------------------------------
# Resolution
# ------------------------------------
def dedupe_rooms(rooms: Iterable[Room]) -> List[Room]:
    """
    Keeps the first record for every room number and orders the result by
    numeric room number ascending.
    """
    seen = set()
    unique = []
    for room in rooms:
        if room.room_number in seen:
            logger.debug(f"Duplicate room record ignored: {room.room_number} (id={room.id})")
            continue
        seen.add(room.room_number)
        unique.append(room)
    return sorted(unique, key=lambda r: r.sort_key())


def select_relevant_booking(reference_date: Any, bookings: Iterable[Booking]) -> Optional[Booking]:
    """
    Earliest-starting booking whose stay has not fully elapsed as of the
    reference day. Invalid bookings are ignored.
    """
    ref = start_of_day(reference_date)
    candidates = []
    for booking in bookings:
        if _invalid_reason(booking):
            continue
        check_in, check_out = _booking_bounds(booking)
        if check_out >= ref:
            candidates.append((check_in, _tie_break(booking), booking))

    if not candidates:
        return None
    candidates.sort(key=lambda c: (c[0], c[1]))
    return candidates[0][2]


def classify_room(room: Room, reference_date: Any, bookings: Sequence[Booking]) -> RoomView:
    """Status of a single room; ``bookings`` should be that room's bookings."""
    relevant = select_relevant_booking(reference_date, bookings)
    if relevant is None:
        return RoomView(room=room, status=RoomView.STATUS_AVAILABLE)

    ref = start_of_day(reference_date)
    check_in, check_out = _booking_bounds(relevant)

    if check_in <= ref <= check_out:
        return RoomView(room=room, status=RoomView.STATUS_OCCUPIED, current_booking=relevant)
    if ref < check_in:
        return RoomView(room=room, status=RoomView.STATUS_BOOKED, future_booking=relevant)
    return RoomView(room=room, status=RoomView.STATUS_AVAILABLE)


def resolve_room_views(
    reference_date: Any,
    rooms: Iterable[Room],
    bookings: Iterable[Booking],
    strict: bool = False,
) -> List[RoomView]:
    """
    Decorates every distinct room with its status for ``reference_date``.

    Args:
        reference_date: Day being looked at (date, datetime or ISO string)
        rooms: Room records, duplicates allowed
        bookings: All bookings across all rooms
        strict: Raise DataIntegrityError on broken bookings instead of skipping them

    Returns:
        One RoomView per room number, in ascending numeric order
    """
    if to_day(reference_date) is None:
        raise ValueError(f"Invalid reference date: {reference_date!r}")

    bookings = list(bookings)
    issues = find_invalid_bookings(bookings)
    if issues:
        if strict:
            first = issues[0]
            raise DataIntegrityError(
                f"Booking {first.booking.id} for room {first.booking.room_number}: {first.reason}"
            )
        for issue in issues:
            logger.warning(
                f"Skipping booking {issue.booking.id} for room {issue.booking.room_number}: {issue.reason}"
            )

    by_room: Dict[str, List[Booking]] = {}
    for booking in bookings:
        by_room.setdefault(booking.room_number, []).append(booking)

    return [
        classify_room(room, reference_date, by_room.get(room.room_number, []))
        for room in dedupe_rooms(rooms)
    ]
