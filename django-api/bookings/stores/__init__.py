from bookings.stores.interfaces import BookingStore, RoomStore, UserStore

__all__ = ["BookingStore", "RoomStore", "UserStore"]
