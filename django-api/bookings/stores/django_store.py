"""Django ORM implementation of the stores.

Each method queries the ORM and converts rows to domain models.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import date

from django.db import IntegrityError, transaction

from bookings import models
from bookings.domain import (
    Booking,
    BookingId,
    BookingStatus,
    Capacity,
    Identity,
    NewBooking,
    NewRoom,
    NewUser,
    Role,
    Room,
    RoomChanges,
    RoomId,
    RoomType,
    TimeOfDay,
    TimeRange,
    User,
    UserId,
)
from bookings.domain.errors import DuplicateRoomNameError, EmailTakenError
from bookings.stores.interfaces import BookingStore, RoomStore, UserStore

# Domain field name -> ORM column, for partial room updates.
_ROOM_COLUMNS = {
    "name": "name",
    "room_type": "type",
    "capacity": "capacity",
    "facilities": "facilities",
    "description": "description",
    "available": "available",
}


def _to_room(row: models.Room) -> Room:
    return Room(
        id=RoomId(row.id),
        name=row.name,
        room_type=RoomType(row.type),
        capacity=Capacity(row.capacity),
        facilities=tuple(row.facilities or ()),
        available=row.available,
        description=row.description,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_booking(row: models.Booking) -> Booking:
    return Booking(
        id=BookingId(row.id),
        user_id=UserId(row.user_id),
        room_id=RoomId(row.room_id),
        date=row.date,
        time_range=TimeRange(
            start=TimeOfDay.from_time(row.start_time),
            end=TimeOfDay.from_time(row.end_time),
        ),
        purpose=row.purpose,
        status=BookingStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_user(row: models.User) -> User:
    return User(
        id=UserId(row.id),
        name=row.name,
        email=row.email,
        password_hash=row.password,
        role=Role(row.role),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoRoomStore(RoomStore):
    """Room store backed by the Django ORM."""

    def list_rooms(self, room_type: RoomType | None = None) -> list[Room]:
        queryset = models.Room.objects.all()
        if room_type is not None:
            queryset = queryset.filter(type=room_type.value)
        return [_to_room(row) for row in queryset.order_by("name")]

    def get_room(self, room_id: RoomId) -> Room | None:
        row = models.Room.objects.filter(pk=room_id.value).first()
        return _to_room(row) if row is not None else None

    def get_rooms(self, room_ids: Iterable[RoomId]) -> dict[RoomId, Room]:
        rows = models.Room.objects.filter(pk__in={room_id.value for room_id in room_ids})
        return {RoomId(row.id): _to_room(row) for row in rows}

    def get_room_by_name(self, name: str) -> Room | None:
        row = models.Room.objects.filter(name=name).first()
        return _to_room(row) if row is not None else None

    def create_room(self, room: NewRoom) -> Room:
        try:
            with transaction.atomic():
                row = models.Room.objects.create(
                    name=room.name,
                    type=room.room_type.value,
                    capacity=room.capacity.value,
                    facilities=list(room.facilities),
                    available=room.available,
                    description=room.description,
                )
        except IntegrityError as exc:
            raise DuplicateRoomNameError() from exc
        return _to_room(row)

    def update_room(self, room_id: RoomId, changes: RoomChanges) -> Room | None:
        row = models.Room.objects.filter(pk=room_id.value).first()
        if row is None:
            return None
        for field, value in changes.supplied().items():
            if field == "facilities":
                value = list(value)
            setattr(row, _ROOM_COLUMNS[field], value)
        try:
            with transaction.atomic():
                row.save()
        except IntegrityError as exc:
            raise DuplicateRoomNameError() from exc
        return _to_room(row)

    def delete_room(self, room_id: RoomId) -> bool:
        deleted, _ = models.Room.objects.filter(pk=room_id.value).delete()
        return deleted > 0


class DjangoBookingStore(BookingStore):
    """Booking store backed by the Django ORM.

    Admission is serialized per room by locking the room row for the
    duration of a transaction (``SELECT ... FOR UPDATE`` on PostgreSQL).
    """

    @contextmanager
    def admission_lock(self, room_id: RoomId) -> Iterator[None]:
        with transaction.atomic():
            list(
                models.Room.objects.select_for_update()
                .filter(pk=room_id.value)
                .values_list("pk", flat=True)
            )
            yield

    def list_confirmed_for_room_on(self, room_id: RoomId, on: date) -> list[Booking]:
        rows = models.Booking.objects.filter(
            room_id=room_id.value,
            date=on,
            status=BookingStatus.CONFIRMED.value,
        ).order_by("start_time")
        return [_to_booking(row) for row in rows]

    def create_booking(self, booking: NewBooking) -> Booking:
        row = models.Booking.objects.create(
            user_id=booking.user_id.value,
            room_id=booking.room_id.value,
            date=booking.date,
            start_time=booking.time_range.start.to_time(),
            end_time=booking.time_range.end.to_time(),
            purpose=booking.purpose,
            status=BookingStatus.CONFIRMED.value,
        )
        return _to_booking(row)

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        row = models.Booking.objects.filter(pk=booking_id.value).first()
        return _to_booking(row) if row is not None else None

    def list_bookings(self, user_id: UserId | None = None) -> list[Booking]:
        queryset = models.Booking.objects.all()
        if user_id is not None:
            queryset = queryset.filter(user_id=user_id.value)
        return [_to_booking(row) for row in queryset.order_by("-date", "-start_time")]

    def cancel_booking(self, booking_id: BookingId) -> bool:
        row = models.Booking.objects.filter(
            pk=booking_id.value,
            status=BookingStatus.CONFIRMED.value,
        ).first()
        if row is None:
            return False
        row.status = BookingStatus.CANCELLED.value
        row.save(update_fields=["status", "updated_at"])
        return True


class DjangoUserStore(UserStore):
    """User store backed by the Django ORM."""

    def get_user(self, user_id: UserId) -> User | None:
        row = models.User.objects.filter(pk=user_id.value).first()
        return _to_user(row) if row is not None else None

    def get_user_by_email(self, email: str) -> User | None:
        row = models.User.objects.filter(email=email.strip().lower()).first()
        return _to_user(row) if row is not None else None

    def get_identities(self, user_ids: Iterable[UserId]) -> dict[UserId, Identity]:
        rows = models.User.objects.filter(pk__in={user_id.value for user_id in user_ids})
        return {UserId(row.id): _to_user(row).identity for row in rows}

    def create_user(self, user: NewUser) -> User:
        try:
            with transaction.atomic():
                row = models.User.objects.create(
                    name=user.name,
                    email=user.email.strip().lower(),
                    password=user.password_hash,
                    role=user.role.value,
                )
        except IntegrityError as exc:
            raise EmailTakenError() from exc
        return _to_user(row)
