from bookings.services.admission_service import BookingAdmissionService
from bookings.services.auth_service import AuthService
from bookings.services.lifecycle_service import BookingLifecycleService
from bookings.services.room_service import RoomService

__all__ = [
    "AuthService",
    "BookingAdmissionService",
    "BookingLifecycleService",
    "RoomService",
]
