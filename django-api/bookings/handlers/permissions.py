from rest_framework.permissions import SAFE_METHODS, BasePermission

from bookings.domain import Identity


class IsIdentified(BasePermission):
    """Allow requests that resolved to an Identity."""

    message = "Not authorized, no token"

    def has_permission(self, request, view) -> bool:
        return isinstance(request.user, Identity)


class IsIdentifiedOrReadOnly(IsIdentified):
    """Reads are public; writes need an Identity."""

    def has_permission(self, request, view) -> bool:
        return request.method in SAFE_METHODS or super().has_permission(request, view)
