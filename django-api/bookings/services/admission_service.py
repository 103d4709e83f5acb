"""Booking admission - decides whether a proposed booking may be accepted.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable
from datetime import date

from bookings.domain import (
    BookingDetails,
    Identity,
    NewBooking,
    Room,
    RoomId,
    TimeOfDay,
    TimeRange,
)
from bookings.domain.errors import (
    InvalidDateFormatError,
    InvalidTimeFormatError,
    InvalidTimeRangeError,
    MissingFieldsError,
    PastDateError,
    RoomNotFoundError,
    RoomUnavailableError,
    TimeConflictError,
)
from bookings.domain.value_objects import parse_calendar_date
from bookings.stores.interfaces import BookingStore, RoomStore

logger = logging.getLogger(__name__)


class BookingAdmissionService:
    """Validates proposed bookings and admits those that do not conflict."""

    def __init__(
        self,
        rooms: RoomStore,
        bookings: BookingStore,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._rooms = rooms
        self._bookings = bookings
        self._today = today

    def propose_booking(
        self,
        identity: Identity,
        room_id: str | None,
        booking_date: str | None,
        start_time: str | None,
        end_time: str | None,
        purpose: str | None,
    ) -> BookingDetails:
        """Admit a booking for identity, or raise the first rule it breaks.

        Checks run in a fixed order so the reported error is deterministic:
        required fields, room existence, room availability, time format,
        time order, date format, past date, then conflicts with confirmed
        bookings for the same room and date. The room is read again under
        the admission lock, so a room deleted or withdrawn in the meantime
        is reported rather than booked.

        Raises:
            MissingFieldsError: If any field is absent or blank.
            RoomNotFoundError: If the room does not exist.
            RoomUnavailableError: If the room is flagged unavailable.
            InvalidTimeFormatError: If a time is not HH:MM (24-hour).
            InvalidTimeRangeError: If end time is not after start time.
            InvalidDateFormatError: If the date is not YYYY-MM-DD.
            PastDateError: If the date is before today.
            TimeConflictError: If a confirmed booking overlaps the range.
        """
        supplied = {
            "roomId": room_id,
            "date": booking_date,
            "startTime": start_time,
            "endTime": end_time,
            "purpose": purpose,
        }
        missing = [name for name, value in supplied.items() if not value or not value.strip()]
        if missing:
            raise MissingFieldsError(missing)

        room = self._find_room(room_id.strip())
        if not room.available:
            raise RoomUnavailableError()

        try:
            start = TimeOfDay.from_string(start_time.strip())
            end = TimeOfDay.from_string(end_time.strip())
        except ValueError:
            raise InvalidTimeFormatError() from None
        if end <= start:
            raise InvalidTimeRangeError()
        time_range = TimeRange(start=start, end=end)

        try:
            on = parse_calendar_date(booking_date.strip())
        except ValueError:
            raise InvalidDateFormatError() from None
        if on < self._today():
            raise PastDateError()

        with self._bookings.admission_lock(room.id):
            # The room may have been deleted or withdrawn since it was read.
            room = self._rooms.get_room(room.id)
            if room is None:
                raise RoomNotFoundError()
            if not room.available:
                raise RoomUnavailableError()

            existing = self._bookings.list_confirmed_for_room_on(room.id, on)
            clash = next((b for b in existing if time_range.overlaps(b.time_range)), None)
            if clash is not None:
                logger.info(
                    "Rejected booking of room %s on %s %s: overlaps booking %s (%s)",
                    room.id, on, time_range, clash.id, clash.time_range,
                )
                raise TimeConflictError()
            booking = self._bookings.create_booking(
                NewBooking(
                    user_id=identity.id,
                    room_id=room.id,
                    date=on,
                    time_range=time_range,
                    purpose=purpose.strip(),
                )
            )

        logger.info(
            "Admitted booking %s for user %s: room %s on %s %s",
            booking.id, identity.id, room.id, on, time_range,
        )
        return BookingDetails(booking=booking, room=room, owner=identity)

    def _find_room(self, room_id: str) -> Room:
        try:
            parsed = RoomId.from_string(room_id)
        except ValueError:
            raise RoomNotFoundError() from None
        room = self._rooms.get_room(parsed)
        if room is None:
            raise RoomNotFoundError()
        return room
