"""Room inventory service - public reads, admin-only writes."""

import logging
from dataclasses import replace
from typing import Any

from bookings.domain import Capacity, Identity, NewRoom, Room, RoomChanges, RoomId, RoomType
from bookings.domain.errors import (
    DuplicateRoomNameError,
    ForbiddenError,
    InvalidRoomDataError,
    MissingFieldsError,
    RoomNotFoundError,
)
from bookings.stores.interfaces import RoomStore

logger = logging.getLogger(__name__)


def _parse_room_type(value: str) -> RoomType:
    try:
        return RoomType(value.strip().lower())
    except ValueError:
        allowed = ", ".join(room_type.value for room_type in RoomType)
        raise InvalidRoomDataError(f"Room type must be one of: {allowed}") from None


def _parse_capacity(value: int) -> Capacity:
    try:
        return Capacity(value)
    except ValueError:
        raise InvalidRoomDataError("Capacity must be at least 1") from None


def _clean_facilities(values: Any) -> tuple[str, ...]:
    return tuple(label.strip() for label in values if label and label.strip())


def _clean_description(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


class RoomService:
    """Service for the room and lab inventory."""

    def __init__(self, store: RoomStore) -> None:
        self._store = store

    def list_rooms(self, room_type: str | None = None) -> list[Room]:
        """Return all rooms ordered by name, optionally of one type.

        Raises:
            InvalidRoomDataError: If room_type is not a known type.
        """
        parsed = _parse_room_type(room_type) if room_type else None
        return self._store.list_rooms(room_type=parsed)

    def get_room(self, room_id: str) -> Room:
        """Return a room by ID.

        Raises:
            RoomNotFoundError: If the ID is malformed or the room does not exist.
        """
        parsed = self._parse_id(room_id)
        room = self._store.get_room(parsed)
        if room is None:
            raise RoomNotFoundError()
        return room

    def create_room(
        self,
        identity: Identity,
        name: str | None = None,
        room_type: str | None = None,
        capacity: int | None = None,
        facilities: list[str] | None = None,
        description: str | None = None,
        available: bool | None = None,
    ) -> Room:
        """Create a room. Facilities default to empty, availability to True.

        Raises:
            ForbiddenError: If the caller is not an admin.
            MissingFieldsError: If name, type or capacity is missing.
            InvalidRoomDataError: If type or capacity is invalid.
            DuplicateRoomNameError: If a room with this name exists.
        """
        self._require_admin(identity)
        supplied = {"name": name, "type": room_type, "capacity": capacity}
        missing = [
            field for field, value in supplied.items()
            if value is None or (isinstance(value, str) and not value.strip())
        ]
        if missing:
            raise MissingFieldsError(missing)

        new_room = NewRoom(
            name=name.strip(),
            room_type=_parse_room_type(room_type),
            capacity=_parse_capacity(capacity),
            facilities=_clean_facilities(facilities or ()),
            available=True if available is None else available,
            description=_clean_description(description),
        )
        if self._store.get_room_by_name(new_room.name) is not None:
            raise DuplicateRoomNameError()
        room = self._store.create_room(new_room)
        logger.info("Room %s (%s) created by %s", room.id, room.name, identity.id)
        return room

    def update_room(self, identity: Identity, room_id: str, changes: RoomChanges) -> Room:
        """Apply a partial update. Only supplied fields change.

        An explicitly supplied ``available=False`` is applied like any other
        value; omitted fields keep their stored values.

        Raises:
            ForbiddenError: If the caller is not an admin.
            RoomNotFoundError: If the room does not exist.
            InvalidRoomDataError: If a supplied value is invalid.
            DuplicateRoomNameError: If renaming onto another room's name.
        """
        self._require_admin(identity)
        parsed = self._parse_id(room_id)
        if self._store.get_room(parsed) is None:
            raise RoomNotFoundError()

        cleaned = self._clean_changes(changes)
        if "name" in cleaned.supplied():
            existing = self._store.get_room_by_name(cleaned.name)
            if existing is not None and existing.id != parsed:
                raise DuplicateRoomNameError()

        room = self._store.update_room(parsed, cleaned)
        if room is None:
            raise RoomNotFoundError()
        logger.info(
            "Room %s updated by %s: %s", room.id, identity.id, sorted(cleaned.supplied())
        )
        return room

    def delete_room(self, identity: Identity, room_id: str) -> None:
        """Delete a room. Bookings that reference it are left untouched.

        Raises:
            ForbiddenError: If the caller is not an admin.
            RoomNotFoundError: If the room does not exist.
        """
        self._require_admin(identity)
        parsed = self._parse_id(room_id)
        if not self._store.delete_room(parsed):
            raise RoomNotFoundError()
        logger.info("Room %s deleted by %s", parsed, identity.id)

    @staticmethod
    def _clean_changes(changes: RoomChanges) -> RoomChanges:
        supplied = changes.supplied()
        cleaned: dict[str, Any] = {}
        if "name" in supplied:
            name = (supplied["name"] or "").strip()
            if not name:
                raise InvalidRoomDataError("Room name cannot be empty")
            cleaned["name"] = name
        if "room_type" in supplied:
            cleaned["room_type"] = _parse_room_type(supplied["room_type"] or "").value
        if "capacity" in supplied:
            if supplied["capacity"] is None:
                raise InvalidRoomDataError("Capacity must be at least 1")
            cleaned["capacity"] = _parse_capacity(supplied["capacity"]).value
        if "facilities" in supplied:
            cleaned["facilities"] = _clean_facilities(supplied["facilities"] or ())
        if "description" in supplied:
            cleaned["description"] = _clean_description(supplied["description"])
        if "available" in supplied:
            if supplied["available"] is None:
                raise InvalidRoomDataError("Availability must be true or false")
            cleaned["available"] = bool(supplied["available"])
        return replace(changes, **cleaned)

    @staticmethod
    def _parse_id(room_id: str) -> RoomId:
        try:
            return RoomId.from_string(room_id)
        except ValueError:
            raise RoomNotFoundError() from None

    @staticmethod
    def _require_admin(identity: Identity) -> None:
        if not identity.is_admin:
            raise ForbiddenError("Access denied. Admin only.")
