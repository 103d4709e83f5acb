"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import Self
from uuid import UUID

from bookings.domain.overlap import overlaps

_TIME_PATTERN = re.compile(r"([0-1]?[0-9]|2[0-3]):([0-5][0-9])")
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class RoomId:
    """Unique identifier for a Room."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class RoomType(Enum):
    CLASSROOM = "classroom"
    LAB = "lab"


class Role(Enum):
    STUDENT = "student"
    FACULTY = "faculty"
    ADMIN = "admin"


class BookingStatus(Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Capacity:
    """Number of people a room holds; at least one."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Capacity must be at least 1")


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Minute-precision time of day, held as minutes since midnight."""

    minutes: int

    def __post_init__(self) -> None:
        if not 0 <= self.minutes < 24 * 60:
            raise ValueError("Time of day must fall within a single day")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse a 24-hour ``HH:MM`` string. A single-digit hour is accepted."""
        match = _TIME_PATTERN.fullmatch(value)
        if match is None:
            raise ValueError(f"Invalid time of day: {value!r}")
        return cls(minutes=int(match.group(1)) * 60 + int(match.group(2)))

    @classmethod
    def from_time(cls, value: time) -> Self:
        return cls(minutes=value.hour * 60 + value.minute)

    def to_time(self) -> time:
        return time(hour=self.minutes // 60, minute=self.minutes % 60)

    def __str__(self) -> str:
        return f"{self.minutes // 60:02d}:{self.minutes % 60:02d}"


@dataclass(frozen=True)
class TimeRange:
    """Half-open ``[start, end)`` window within one day."""

    start: TimeOfDay
    end: TimeOfDay

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("End time must be after start time")

    def overlaps(self, other: "TimeRange") -> bool:
        return overlaps(
            self.start.minutes, self.end.minutes, other.start.minutes, other.end.minutes
        )

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


def parse_calendar_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date.

    Raises:
        ValueError: If the string is not in that shape or names no real day.
    """
    if _DATE_PATTERN.fullmatch(value) is None:
        raise ValueError(f"Invalid date: {value!r}")
    return date.fromisoformat(value)


class Unset(Enum):
    """Marker for a field that was not supplied in a partial update."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET
