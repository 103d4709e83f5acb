"""Booking lifecycle - listing scope, retrieval and cancellation."""

import logging

from bookings.domain import Booking, BookingDetails, BookingId, Identity
from bookings.domain.errors import BookingNotFoundError, ForbiddenError
from bookings.services.details import attach_details
from bookings.stores.interfaces import BookingStore, RoomStore, UserStore

logger = logging.getLogger(__name__)


class BookingLifecycleService:
    """Service for reading and cancelling existing bookings."""

    def __init__(self, rooms: RoomStore, bookings: BookingStore, users: UserStore) -> None:
        self._rooms = rooms
        self._bookings = bookings
        self._users = users

    def list_mine(self, identity: Identity) -> list[BookingDetails]:
        """Return the caller's bookings, newest date and start time first."""
        bookings = self._bookings.list_bookings(user_id=identity.id)
        return attach_details(bookings, self._rooms, self._users)

    def list_all(self, identity: Identity) -> list[BookingDetails]:
        """Return every booking, newest first.

        Raises:
            ForbiddenError: If the caller is not an admin.
        """
        if not identity.is_admin:
            raise ForbiddenError("Access denied. Admin only.")
        bookings = self._bookings.list_bookings()
        return attach_details(bookings, self._rooms, self._users)

    def get_booking(self, identity: Identity, booking_id: str) -> BookingDetails:
        """Return one booking visible to the caller.

        Raises:
            BookingNotFoundError: If the ID is malformed or unknown.
            ForbiddenError: If the caller neither owns it nor is an admin.
        """
        booking = self._find(booking_id)
        self._authorize(identity, booking, "Not authorized to view this booking")
        return attach_details([booking], self._rooms, self._users)[0]

    def cancel(self, identity: Identity, booking_id: str) -> None:
        """Cancel a confirmed booking.

        A booking that is already cancelled is reported as not found, so
        cancelling twice succeeds once and then fails.

        Raises:
            BookingNotFoundError: If the booking is unknown or not confirmed.
            ForbiddenError: If the caller neither owns it nor is an admin.
        """
        booking = self._find(booking_id)
        if not booking.is_confirmed:
            raise BookingNotFoundError()
        self._authorize(identity, booking, "Not authorized to cancel this booking")
        if not self._bookings.cancel_booking(booking.id):
            # Cancelled by a concurrent request since it was read.
            raise BookingNotFoundError()
        logger.info("Booking %s cancelled by user %s", booking.id, identity.id)

    def _find(self, booking_id: str) -> Booking:
        try:
            parsed = BookingId.from_string(booking_id)
        except ValueError:
            raise BookingNotFoundError() from None
        booking = self._bookings.get_booking(parsed)
        if booking is None:
            raise BookingNotFoundError()
        return booking

    @staticmethod
    def _authorize(identity: Identity, booking: Booking, message: str) -> None:
        if booking.user_id != identity.id and not identity.is_admin:
            logger.warning(
                "User %s denied access to booking %s owned by %s",
                identity.id, booking.id, booking.user_id,
            )
            raise ForbiddenError(message)
