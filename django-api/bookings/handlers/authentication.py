"""Bearer token authentication for DRF.

Resolves ``Authorization: Bearer <token>`` to an ``Identity`` once per
request; views receive it as ``request.user``.
"""

from rest_framework import HTTP_HEADER_ENCODING, exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header

from bookings.domain.errors import UnauthenticatedError
from bookings.handlers.dependencies import get_auth_service


class BearerTokenAuthentication(BaseAuthentication):
    keyword = "Bearer"

    def authenticate(self, request):
        parts = get_authorization_header(request).split()
        if not parts or parts[0].lower() != self.keyword.lower().encode(HTTP_HEADER_ENCODING):
            return None
        if len(parts) != 2:
            raise exceptions.AuthenticationFailed("Not authorized, token failed")

        try:
            token = parts[1].decode(HTTP_HEADER_ENCODING)
        except UnicodeError:
            raise exceptions.AuthenticationFailed("Not authorized, token failed") from None

        try:
            identity = get_auth_service().resolve(token)
        except UnauthenticatedError as exc:
            raise exceptions.AuthenticationFailed(exc.message) from exc
        return identity, token

    def authenticate_header(self, request) -> str:
        return self.keyword
