"""Wire services to the Django ORM stores."""

from django.conf import settings
from django.utils import timezone

from bookings.services import (
    AuthService,
    BookingAdmissionService,
    BookingLifecycleService,
    RoomService,
)
from bookings.stores.django_store import DjangoBookingStore, DjangoRoomStore, DjangoUserStore


def get_auth_service() -> AuthService:
    return AuthService(DjangoUserStore(), token_max_age=settings.AUTH_TOKEN_MAX_AGE)


def get_room_service() -> RoomService:
    return RoomService(DjangoRoomStore())


def get_admission_service() -> BookingAdmissionService:
    return BookingAdmissionService(
        DjangoRoomStore(), DjangoBookingStore(), today=timezone.localdate
    )


def get_lifecycle_service() -> BookingLifecycleService:
    return BookingLifecycleService(DjangoRoomStore(), DjangoBookingStore(), DjangoUserStore())
