"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in bookings/models.py (persistence layer).
"""

from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Any

from bookings.domain.value_objects import (
    UNSET,
    BookingId,
    BookingStatus,
    Capacity,
    Role,
    RoomId,
    RoomType,
    TimeRange,
    Unset,
    UserId,
)


@dataclass(frozen=True)
class Identity:
    """The authenticated caller of a request."""

    id: UserId
    name: str
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class User:
    """Domain representation of a User, including the stored credential.

    Only the auth service reads ``password_hash``; everything else works
    with ``identity``.
    """

    id: UserId
    name: str
    email: str
    password_hash: str
    role: Role
    created_at: datetime
    updated_at: datetime

    @property
    def identity(self) -> Identity:
        return Identity(id=self.id, name=self.name, email=self.email, role=self.role)


@dataclass(frozen=True)
class NewUser:
    name: str
    email: str
    password_hash: str
    role: Role


@dataclass(frozen=True)
class Room:
    """Domain representation of a bookable Room."""

    id: RoomId
    name: str
    room_type: RoomType
    capacity: Capacity
    facilities: tuple[str, ...]
    available: bool
    description: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class NewRoom:
    name: str
    room_type: RoomType
    capacity: Capacity
    facilities: tuple[str, ...] = ()
    available: bool = True
    description: str | None = None


@dataclass(frozen=True)
class RoomChanges:
    """Partial room update. Fields left as UNSET keep their stored value."""

    name: str | Unset = UNSET
    room_type: str | Unset = UNSET
    capacity: int | Unset = UNSET
    facilities: list[str] | tuple[str, ...] | Unset = UNSET
    description: str | None | Unset = UNSET
    available: bool | Unset = UNSET

    def supplied(self) -> dict[str, Any]:
        """Return only the fields that were explicitly supplied."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not UNSET
        }


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId
    user_id: UserId
    room_id: RoomId
    date: date
    time_range: TimeRange
    purpose: str
    status: BookingStatus
    created_at: datetime
    updated_at: datetime

    @property
    def is_confirmed(self) -> bool:
        return self.status is BookingStatus.CONFIRMED


@dataclass(frozen=True)
class NewBooking:
    user_id: UserId
    room_id: RoomId
    date: date
    time_range: TimeRange
    purpose: str


@dataclass(frozen=True)
class BookingDetails:
    """A booking with its room and owner attached for display.

    ``room`` is None when the referenced room has since been deleted.
    """

    booking: Booking
    room: Room | None
    owner: Identity | None
