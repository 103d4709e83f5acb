"""Domain error codes for the bookings module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_TIME_RANGE = "INVALID_TIME_RANGE"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    PAST_DATE = "PAST_DATE"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    ROOM_UNAVAILABLE = "ROOM_UNAVAILABLE"
    DUPLICATE_NAME = "DUPLICATE_NAME"
    INVALID_ROOM_DATA = "INVALID_ROOM_DATA"
    TIME_CONFLICT = "TIME_CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    INVALID_USER_DATA = "INVALID_USER_DATA"
    INVALID_INPUT = "INVALID_INPUT"
    STORAGE_FAILURE = "STORAGE_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class MissingFieldsError(DomainError):
    """Raised when required fields are absent or blank."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELDS,
            message=f"Please provide all required fields: {', '.join(missing)}",
        )


class InvalidTimeFormatError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_FORMAT,
            message="Invalid time format. Use HH:MM (24-hour format)",
        )


class InvalidTimeRangeError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_RANGE,
            message="End time must be after start time",
        )


class InvalidDateFormatError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE_FORMAT,
            message="Invalid date. Use YYYY-MM-DD",
        )


class PastDateError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAST_DATE,
            message="Cannot book a room for a past date",
        )


class RoomNotFoundError(DomainError):
    """Raised when a room is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ROOM_NOT_FOUND,
            message="Room not found",
        )


class RoomUnavailableError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ROOM_UNAVAILABLE,
            message="Room is not available for booking",
        )


class DuplicateRoomNameError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_NAME,
            message="Room with this name already exists",
        )


class InvalidRoomDataError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_ROOM_DATA, message=message)


class TimeConflictError(DomainError):
    """Raised when a proposed booking overlaps a confirmed one."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TIME_CONFLICT,
            message="Room is already booked for this time slot. Please choose a different time.",
        )


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found or is no longer active."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message="Booking not found",
        )


class ForbiddenError(DomainError):
    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message=message)


class UnauthenticatedError(DomainError):
    def __init__(self, message: str = "Not authorized, token failed") -> None:
        super().__init__(code=ErrorCode.UNAUTHENTICATED, message=message)


class InvalidCredentialsError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid email or password",
        )


class EmailTakenError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMAIL_TAKEN,
            message="User already exists with this email",
        )


class InvalidUserDataError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_USER_DATA, message=message)


class InvalidInputError(DomainError):
    """Raised by handlers when a request body cannot be parsed."""

    def __init__(self, message: str = "Invalid request body") -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class StorageFailureError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_FAILURE,
            message="An unexpected error occurred",
        )
