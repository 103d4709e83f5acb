"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from contextlib import AbstractContextManager
from datetime import date

from bookings.domain import (
    Booking,
    BookingId,
    Identity,
    NewBooking,
    NewRoom,
    NewUser,
    Room,
    RoomChanges,
    RoomId,
    RoomType,
    User,
    UserId,
)


class RoomStore(ABC):
    """Interface for room persistence operations."""

    @abstractmethod
    def list_rooms(self, room_type: RoomType | None = None) -> list[Room]:
        """Return rooms ordered by name, optionally only those of one type."""
        ...

    @abstractmethod
    def get_room(self, room_id: RoomId) -> Room | None:
        """Return a room by ID, or None if not found."""
        ...

    @abstractmethod
    def get_rooms(self, room_ids: Iterable[RoomId]) -> dict[RoomId, Room]:
        """Return the rooms that still exist among room_ids, keyed by ID."""
        ...

    @abstractmethod
    def get_room_by_name(self, name: str) -> Room | None:
        ...

    @abstractmethod
    def create_room(self, room: NewRoom) -> Room:
        """Persist a new room.

        Raises:
            DuplicateRoomNameError: If the name is already taken.
        """
        ...

    @abstractmethod
    def update_room(self, room_id: RoomId, changes: RoomChanges) -> Room | None:
        """Apply the supplied fields of changes; None if the room is gone.

        Raises:
            DuplicateRoomNameError: If the new name is already taken.
        """
        ...

    @abstractmethod
    def delete_room(self, room_id: RoomId) -> bool:
        """Remove a room. Return False if it did not exist."""
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def admission_lock(self, room_id: RoomId) -> AbstractContextManager[None]:
        """Serialize admission for one room.

        The conflict check and the insert of a new booking for room_id must
        both happen inside this context so that concurrent admissions for
        the same room cannot both pass the check.
        """
        ...

    @abstractmethod
    def list_confirmed_for_room_on(self, room_id: RoomId, on: date) -> list[Booking]:
        """Return confirmed bookings for a room on one date."""
        ...

    @abstractmethod
    def create_booking(self, booking: NewBooking) -> Booking:
        """Persist a new confirmed booking."""
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def list_bookings(self, user_id: UserId | None = None) -> list[Booking]:
        """Return bookings ordered by date then start time, newest first.

        When user_id is given only that user's bookings are returned.
        """
        ...

    @abstractmethod
    def cancel_booking(self, booking_id: BookingId) -> bool:
        """Mark a confirmed booking cancelled.

        Return False if the booking does not exist or was not confirmed.
        """
        ...


class UserStore(ABC):
    """Interface for user persistence operations."""

    @abstractmethod
    def get_user(self, user_id: UserId) -> User | None:
        ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None:
        """Return a user by email, compared case-insensitively."""
        ...

    @abstractmethod
    def get_identities(self, user_ids: Iterable[UserId]) -> dict[UserId, Identity]:
        """Return identities for the users that exist among user_ids."""
        ...

    @abstractmethod
    def create_user(self, user: NewUser) -> User:
        """Persist a new user.

        Raises:
            EmailTakenError: If the email is already registered.
        """
        ...
