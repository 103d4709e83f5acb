"""Pytest configuration and shared fixtures."""

import threading
import uuid
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone

import pytest
from django.utils import timezone as dj_timezone
from rest_framework.test import APIClient

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
    User,
    UserId,
)
from bookings.domain.errors import DuplicateRoomNameError, EmailTakenError
from bookings.stores.interfaces import BookingStore, RoomStore, UserStore

NOW = datetime(2026, 3, 10, 8, 0, tzinfo=timezone.utc)


class InMemoryRoomStore(RoomStore):
    def __init__(self) -> None:
        self.rooms: dict[RoomId, Room] = {}

    def list_rooms(self, room_type: RoomType | None = None) -> list[Room]:
        rooms = [r for r in self.rooms.values() if room_type is None or r.room_type is room_type]
        return sorted(rooms, key=lambda r: r.name)

    def get_room(self, room_id: RoomId) -> Room | None:
        return self.rooms.get(room_id)

    def get_rooms(self, room_ids: Iterable[RoomId]) -> dict[RoomId, Room]:
        return {room_id: self.rooms[room_id] for room_id in room_ids if room_id in self.rooms}

    def get_room_by_name(self, name: str) -> Room | None:
        return next((r for r in self.rooms.values() if r.name == name), None)

    def create_room(self, room: NewRoom) -> Room:
        if self.get_room_by_name(room.name) is not None:
            raise DuplicateRoomNameError()
        created = Room(
            id=RoomId(uuid.uuid4()),
            name=room.name,
            room_type=room.room_type,
            capacity=room.capacity,
            facilities=tuple(room.facilities),
            available=room.available,
            description=room.description,
            created_at=NOW,
            updated_at=NOW,
        )
        self.rooms[created.id] = created
        return created

    def update_room(self, room_id: RoomId, changes: RoomChanges) -> Room | None:
        room = self.rooms.get(room_id)
        if room is None:
            return None
        values = changes.supplied()
        if "room_type" in values:
            values["room_type"] = RoomType(values["room_type"])
        if "capacity" in values:
            values["capacity"] = Capacity(values["capacity"])
        if "facilities" in values:
            values["facilities"] = tuple(values["facilities"])
        updated = replace(room, **values)
        self.rooms[room_id] = updated
        return updated

    def delete_room(self, room_id: RoomId) -> bool:
        return self.rooms.pop(room_id, None) is not None


class InMemoryBookingStore(BookingStore):
    def __init__(self) -> None:
        self.bookings: dict[BookingId, Booking] = {}
        self.inserts = 0
        self._lock = threading.Lock()

    @contextmanager
    def admission_lock(self, room_id: RoomId) -> Iterator[None]:
        with self._lock:
            yield

    def list_confirmed_for_room_on(self, room_id: RoomId, on: date) -> list[Booking]:
        return [
            b for b in self.bookings.values()
            if b.room_id == room_id and b.date == on and b.is_confirmed
        ]

    def create_booking(self, booking: NewBooking) -> Booking:
        created = Booking(
            id=BookingId(uuid.uuid4()),
            user_id=booking.user_id,
            room_id=booking.room_id,
            date=booking.date,
            time_range=booking.time_range,
            purpose=booking.purpose,
            status=BookingStatus.CONFIRMED,
            created_at=NOW,
            updated_at=NOW,
        )
        self.bookings[created.id] = created
        self.inserts += 1
        return created

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        return self.bookings.get(booking_id)

    def list_bookings(self, user_id: UserId | None = None) -> list[Booking]:
        bookings = [b for b in self.bookings.values() if user_id is None or b.user_id == user_id]
        return sorted(bookings, key=lambda b: (b.date, b.time_range.start), reverse=True)

    def cancel_booking(self, booking_id: BookingId) -> bool:
        booking = self.bookings.get(booking_id)
        if booking is None or not booking.is_confirmed:
            return False
        self.bookings[booking_id] = replace(booking, status=BookingStatus.CANCELLED)
        return True


class InMemoryUserStore(UserStore):
    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}

    def get_user(self, user_id: UserId) -> User | None:
        return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> User | None:
        wanted = email.strip().lower()
        return next((u for u in self.users.values() if u.email == wanted), None)

    def get_identities(self, user_ids: Iterable[UserId]) -> dict[UserId, Identity]:
        return {
            user_id: self.users[user_id].identity for user_id in user_ids if user_id in self.users
        }

    def create_user(self, user: NewUser) -> User:
        if self.get_user_by_email(user.email) is not None:
            raise EmailTakenError()
        created = User(
            id=UserId(uuid.uuid4()),
            name=user.name,
            email=user.email.strip().lower(),
            password_hash=user.password_hash,
            role=user.role,
            created_at=NOW,
            updated_at=NOW,
        )
        self.users[created.id] = created
        return created


@pytest.fixture
def room_store() -> InMemoryRoomStore:
    return InMemoryRoomStore()


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


def _add_user(store: InMemoryUserStore, name: str, role: Role) -> Identity:
    return store.create_user(
        NewUser(name=name, email=f"{name.lower()}@campus.edu", password_hash="!", role=role)
    ).identity


@pytest.fixture
def student(user_store) -> Identity:
    return _add_user(user_store, "Alice", Role.STUDENT)


@pytest.fixture
def other_student(user_store) -> Identity:
    return _add_user(user_store, "Bob", Role.STUDENT)


@pytest.fixture
def admin(user_store) -> Identity:
    return _add_user(user_store, "Admin", Role.ADMIN)


@pytest.fixture
def make_room(room_store):
    def _make_room(name: str = "Computer Lab 1", available: bool = True, **kwargs) -> Room:
        return room_store.create_room(
            NewRoom(
                name=name,
                room_type=kwargs.pop("room_type", RoomType.LAB),
                capacity=Capacity(kwargs.pop("capacity", 30)),
                facilities=kwargs.pop("facilities", ("computers",)),
                available=available,
                **kwargs,
            )
        )

    return _make_room


@pytest.fixture
def room(make_room) -> Room:
    return make_room()


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def future_date() -> str:
    return (dj_timezone.localdate() + timedelta(days=7)).isoformat()


@pytest.fixture
def register(api_client):
    """Register a user over HTTP and return (payload, auth header)."""

    def _register(name: str = "Alice", role: str | None = None) -> tuple[dict, str]:
        body = {"name": name, "email": f"{name.lower()}@campus.edu", "password": "secret123"}
        if role:
            body["role"] = role
        response = api_client.post("/api/auth/register", body, format="json")
        assert response.status_code == 201, response.data
        return response.data, f"Bearer {response.data['token']}"

    return _register


@pytest.fixture
def admin_header(db) -> str:
    from bookings.handlers.dependencies import get_auth_service

    service = get_auth_service()
    identity = service.create_admin(name="Admin", email="admin@campus.edu", password="secret123")
    return f"Bearer {service.issue_token(identity)}"
