from django.urls import path

from bookings.handlers.views import (
    BookingAllView,
    BookingDetailView,
    BookingListView,
    LoginView,
    MeView,
    RegisterView,
    RoomDetailView,
    RoomListView,
)

urlpatterns = [
    path("auth/register", RegisterView.as_view(), name="auth-register"),
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("auth/me", MeView.as_view(), name="auth-me"),
    path("rooms", RoomListView.as_view(), name="room-list"),
    path("rooms/<str:room_id>", RoomDetailView.as_view(), name="room-detail"),
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("bookings/all", BookingAllView.as_view(), name="booking-all"),
    path(
        "bookings/<str:booking_id>",
        BookingDetailView.as_view(),
        name="booking-detail",
    ),
]
