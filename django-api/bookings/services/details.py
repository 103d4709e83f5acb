"""Attach room and owner details to bookings for display."""

from bookings.domain import Booking, BookingDetails
from bookings.stores.interfaces import RoomStore, UserStore


def attach_details(
    bookings: list[Booking], rooms: RoomStore, users: UserStore
) -> list[BookingDetails]:
    """Return bookings with their rooms and owners, preserving order.

    Looks rooms and owners up in one batch each. A booking whose room was
    deleted keeps ``room=None``.
    """
    if not bookings:
        return []
    room_map = rooms.get_rooms({booking.room_id for booking in bookings})
    owner_map = users.get_identities({booking.user_id for booking in bookings})
    return [
        BookingDetails(
            booking=booking,
            room=room_map.get(booking.room_id),
            owner=owner_map.get(booking.user_id),
        )
        for booking in bookings
    ]
