"""Serializers for request parsing and domain model responses.

Request serializers only check the shape of the body; business rules and
required-field checks live in the services so that errors follow the
domain taxonomy.
"""

from rest_framework import serializers


class BookingRequestSerializer(serializers.Serializer):
    """Body of POST /api/bookings."""

    roomId = serializers.CharField(source="room_id", required=False, allow_blank=True, allow_null=True)
    date = serializers.CharField(source="booking_date", required=False, allow_blank=True, allow_null=True)
    startTime = serializers.CharField(source="start_time", required=False, allow_blank=True, allow_null=True)
    endTime = serializers.CharField(source="end_time", required=False, allow_blank=True, allow_null=True)
    purpose = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class RoomRequestSerializer(serializers.Serializer):
    """Body of room create and update requests."""

    name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    type = serializers.CharField(source="room_type", required=False, allow_blank=True, allow_null=True)
    capacity = serializers.IntegerField(required=False, allow_null=True)
    facilities = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False, allow_null=True
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    available = serializers.BooleanField(required=False, allow_null=True)


class RegisterRequestSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    password = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    role = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    password = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )


class IdentitySerializer(serializers.Serializer):
    """Serializer for Identity domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    email = serializers.CharField()
    role = serializers.CharField(source="role.value")


class RoomSerializer(serializers.Serializer):
    """Serializer for Room domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    type = serializers.CharField(source="room_type.value")
    capacity = serializers.IntegerField(source="capacity.value")
    facilities = serializers.ListField(child=serializers.CharField())
    available = serializers.BooleanField()
    description = serializers.CharField(allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class BookedRoomSerializer(serializers.Serializer):
    """Room summary embedded in a booking."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    type = serializers.CharField(source="room_type.value")
    capacity = serializers.IntegerField(source="capacity.value")
    facilities = serializers.ListField(child=serializers.CharField())


class BookingSerializer(serializers.Serializer):
    """Serializer for BookingDetails domain model."""

    id = serializers.UUIDField(source="booking.id.value")
    roomId = serializers.UUIDField(source="booking.room_id.value")
    userId = serializers.UUIDField(source="booking.user_id.value")
    room = BookedRoomSerializer(allow_null=True)
    user = IdentitySerializer(source="owner", allow_null=True)
    date = serializers.DateField(source="booking.date")
    startTime = serializers.CharField(source="booking.time_range.start")
    endTime = serializers.CharField(source="booking.time_range.end")
    purpose = serializers.CharField(source="booking.purpose")
    status = serializers.CharField(source="booking.status.value")
    createdAt = serializers.DateTimeField(source="booking.created_at")
    updatedAt = serializers.DateTimeField(source="booking.updated_at")
