from bookings.domain.models import (
    Booking,
    BookingDetails,
    Identity,
    NewBooking,
    NewRoom,
    NewUser,
    Room,
    RoomChanges,
    User,
)
from bookings.domain.value_objects import (
    UNSET,
    BookingId,
    BookingStatus,
    Capacity,
    Role,
    RoomId,
    RoomType,
    TimeOfDay,
    TimeRange,
    UserId,
)

__all__ = [
    "Booking",
    "BookingDetails",
    "Identity",
    "NewBooking",
    "NewRoom",
    "NewUser",
    "Room",
    "RoomChanges",
    "User",
    "UNSET",
    "BookingId",
    "BookingStatus",
    "Capacity",
    "Role",
    "RoomId",
    "RoomType",
    "TimeOfDay",
    "TimeRange",
    "UserId",
]
