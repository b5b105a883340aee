"""
Tests for room status resolution.

Covers the classification over time, relevant-booking selection, room
de-duplication and the handling of broken booking records.
"""
import copy
import logging
from datetime import date, datetime, timedelta

import pytest

from frontdesk.exceptions import DataIntegrityError
from frontdesk.models import Booking, Room, RoomView
from frontdesk.services.room_status import (
    dedupe_rooms,
    find_invalid_bookings,
    is_active_on,
    resolve_room_views,
    select_relevant_booking,
)


# ============================================================================
# Helpers
# ============================================================================

def make_booking(room_number, check_in, check_out, booking_id=None, guest="Guest"):
    return Booking(
        room_number=room_number,
        guest_name=guest,
        check_in=check_in,
        check_out=check_out,
        id=booking_id,
    )


def view_for(views, room_number):
    matches = [v for v in views if v.room_number == room_number]
    assert len(matches) == 1
    return matches[0]


ROOMS = [Room(room_number="101", id="r1"), Room(room_number="102", id="r2")]
JUNE_STAY = make_booking("101", date(2024, 6, 1), date(2024, 6, 3), booking_id="b1")


# ============================================================================
# Reference scenarios
# ============================================================================

class TestScenarios:
    """Room board for a single stay on 2024-06-01 .. 2024-06-03."""

    def test_occupied_during_stay(self):
        views = resolve_room_views(date(2024, 6, 2), ROOMS, [JUNE_STAY])

        room_101 = view_for(views, "101")
        assert room_101.status == RoomView.STATUS_OCCUPIED
        assert room_101.current_booking == JUNE_STAY
        assert room_101.future_booking is None

        room_102 = view_for(views, "102")
        assert room_102.status == RoomView.STATUS_AVAILABLE
        assert room_102.booking is None

    def test_booked_before_stay(self):
        views = resolve_room_views(date(2024, 5, 30), ROOMS, [JUNE_STAY])

        room_101 = view_for(views, "101")
        assert room_101.status == RoomView.STATUS_BOOKED
        assert room_101.future_booking == JUNE_STAY
        assert room_101.current_booking is None
        assert room_101.is_available_today()

    def test_available_after_stay(self):
        views = resolve_room_views(date(2024, 6, 10), ROOMS, [JUNE_STAY])

        room_101 = view_for(views, "101")
        assert room_101.status == RoomView.STATUS_AVAILABLE
        assert room_101.current_booking is None
        assert room_101.future_booking is None


# ============================================================================
# Classification over time
# ============================================================================

class TestMonotonicity:
    """Booked -> Occupied -> Available as the reference day advances."""

    @pytest.mark.parametrize("nights", [0, 1, 2, 5])
    def test_status_sequence(self, nights):
        check_in = date(2024, 3, 10)
        check_out = check_in + timedelta(days=nights)
        booking = make_booking("7", check_in, check_out, booking_id=1)
        room = [Room(room_number="7")]

        statuses = []
        day = check_in - timedelta(days=1)
        while day <= check_out + timedelta(days=1):
            statuses.append(resolve_room_views(day, room, [booking])[0].status)
            day += timedelta(days=1)

        expected = (
            [RoomView.STATUS_BOOKED]
            + [RoomView.STATUS_OCCUPIED] * (nights + 1)
            + [RoomView.STATUS_AVAILABLE]
        )
        assert statuses == expected

    def test_room_without_bookings_is_always_available(self):
        other_room_booking = make_booking("202", date(2024, 1, 1), date(2024, 1, 31))
        room = [Room(room_number="201")]

        for offset in range(-5, 40):
            day = date(2024, 1, 1) + timedelta(days=offset)
            view = resolve_room_views(day, room, [other_room_booking])[0]
            assert view.status == RoomView.STATUS_AVAILABLE
            assert view.booking is None

    def test_time_of_day_is_ignored(self):
        late_evening = datetime(2024, 6, 3, 23, 59)
        early_morning = datetime(2024, 6, 1, 0, 1)

        assert resolve_room_views(late_evening, ROOMS, [JUNE_STAY])[0].is_occupied()
        assert resolve_room_views(early_morning, ROOMS, [JUNE_STAY])[0].is_occupied()

    def test_iso_string_reference_date(self):
        views = resolve_room_views("2024-06-02", ROOMS, [JUNE_STAY])
        assert view_for(views, "101").is_occupied()

    def test_invalid_reference_date_raises(self):
        with pytest.raises(ValueError):
            resolve_room_views("not-a-date", ROOMS, [JUNE_STAY])

    def test_booking_datetimes_are_normalized(self):
        booking = make_booking("101", datetime(2024, 6, 1, 14, 0), datetime(2024, 6, 3, 11, 0))
        views = resolve_room_views(date(2024, 6, 3), ROOMS, [booking])
        assert view_for(views, "101").is_occupied()


# ============================================================================
# Relevant booking selection
# ============================================================================

class TestRelevantBooking:

    def test_earliest_future_booking_wins(self):
        later = make_booking("101", date(2024, 1, 10), date(2024, 1, 12), booking_id="late")
        earlier = make_booking("101", date(2024, 1, 5), date(2024, 1, 7), booking_id="early")

        assert select_relevant_booking(date(2024, 1, 1), [later, earlier]) is earlier

        view = view_for(resolve_room_views(date(2024, 1, 1), ROOMS, [later, earlier]), "101")
        assert view.status == RoomView.STATUS_BOOKED
        assert view.future_booking is earlier

    def test_elapsed_bookings_are_ignored(self):
        past = make_booking("101", date(2024, 1, 1), date(2024, 1, 3), booking_id="past")
        upcoming = make_booking("101", date(2024, 1, 10), date(2024, 1, 12), booking_id="next")

        view = view_for(resolve_room_views(date(2024, 1, 6), ROOMS, [past, upcoming]), "101")
        assert view.status == RoomView.STATUS_BOOKED
        assert view.future_booking is upcoming

    def test_ties_broken_by_booking_id(self):
        b = make_booking("101", date(2024, 2, 1), date(2024, 2, 2), booking_id="b")
        a = make_booking("101", date(2024, 2, 1), date(2024, 2, 4), booking_id="a")

        assert select_relevant_booking(date(2024, 1, 1), [b, a]) is a
        assert select_relevant_booking(date(2024, 1, 1), [a, b]) is a

    def test_no_candidates(self):
        assert select_relevant_booking(date(2024, 1, 1), []) is None

    def test_bookings_match_rooms_by_number(self):
        booking = make_booking(101, date(2024, 6, 1), date(2024, 6, 3))
        rooms = [Room(room_number=" 101 ")]
        assert resolve_room_views(date(2024, 6, 2), rooms, [booking])[0].is_occupied()


# ============================================================================
# Room list handling
# ============================================================================

class TestRoomList:

    def test_duplicate_room_numbers_collapse(self):
        rooms = [
            Room(room_number="101", id="first"),
            Room(room_number="101", id="second"),
            Room(room_number="102", id="other"),
        ]
        views = resolve_room_views(date(2024, 6, 2), rooms, [JUNE_STAY])

        assert [v.room_number for v in views] == ["101", "102"]
        assert view_for(views, "101").id == "first"
        assert view_for(views, "101").is_occupied()

    def test_numeric_ordering(self):
        rooms = [Room(room_number=n) for n in ["101", "10", "9", "Annex", "2"]]
        ordered = [r.room_number for r in dedupe_rooms(rooms)]
        assert ordered == ["2", "9", "10", "101", "Annex"]

    def test_empty_rooms(self):
        assert resolve_room_views(date(2024, 6, 2), [], [JUNE_STAY]) == []

    def test_exactly_one_booking_attached_per_status(self):
        bookings = [
            make_booking("1", date(2024, 6, 1), date(2024, 6, 5), booking_id=1),
            make_booking("2", date(2024, 6, 8), date(2024, 6, 9), booking_id=2),
        ]
        rooms = [Room(room_number=n) for n in ["1", "2", "3"]]

        for view in resolve_room_views(date(2024, 6, 3), rooms, bookings):
            assert (view.current_booking is not None) == view.is_occupied()
            assert (view.future_booking is not None) == view.is_booked()

    def test_inputs_are_not_mutated(self):
        rooms = [Room(room_number="102"), Room(room_number="101"), Room(room_number="101")]
        bookings = [JUNE_STAY, make_booking("102", date(2024, 6, 5), date(2024, 6, 6))]
        rooms_before = copy.deepcopy(rooms)
        bookings_before = copy.deepcopy(bookings)

        resolve_room_views(date(2024, 6, 2), rooms, bookings)

        assert rooms == rooms_before
        assert bookings == bookings_before

    def test_repeated_calls_give_the_same_result(self):
        first = resolve_room_views(date(2024, 6, 2), ROOMS, [JUNE_STAY])
        second = resolve_room_views(date(2024, 6, 2), ROOMS, [JUNE_STAY])
        assert first == second


# ============================================================================
# Broken records
# ============================================================================

class TestInvalidBookings:

    def test_reversed_interval_is_skipped(self, caplog):
        broken = make_booking("101", date(2024, 6, 5), date(2024, 6, 1), booking_id="bad")

        with caplog.at_level(logging.WARNING, logger="frontdesk.services.room_status"):
            views = resolve_room_views(date(2024, 6, 3), ROOMS, [broken])

        assert view_for(views, "101").status == RoomView.STATUS_AVAILABLE
        assert "bad" in caplog.text

    def test_broken_booking_does_not_hide_valid_one(self):
        broken = make_booking("101", date(2024, 6, 1), date(2024, 5, 1), booking_id="bad")
        views = resolve_room_views(date(2024, 6, 2), ROOMS, [broken, JUNE_STAY])
        assert view_for(views, "101").current_booking is JUNE_STAY

    def test_missing_dates_are_reported(self):
        undated = make_booking("101", None, date(2024, 6, 3), booking_id="undated")
        issues = find_invalid_bookings([JUNE_STAY, undated])

        assert len(issues) == 1
        assert issues[0].booking is undated
        assert "missing" in issues[0].reason

    def test_strict_mode_raises(self):
        broken = make_booking("101", date(2024, 6, 5), date(2024, 6, 1), booking_id="bad")
        with pytest.raises(DataIntegrityError):
            resolve_room_views(date(2024, 6, 3), ROOMS, [broken], strict=True)

    def test_invalid_booking_is_never_active(self):
        broken = make_booking("101", date(2024, 6, 5), date(2024, 6, 1))
        assert is_active_on(broken, date(2024, 6, 3)) is False
        assert is_active_on(JUNE_STAY, date(2024, 6, 3)) is True
