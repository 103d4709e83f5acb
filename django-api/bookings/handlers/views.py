"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave error mapping to the DRF exception handler
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.domain import RoomChanges
from bookings.domain.errors import InvalidInputError
from bookings.handlers.dependencies import (
    get_admission_service,
    get_auth_service,
    get_lifecycle_service,
    get_room_service,
)
from bookings.handlers.permissions import IsIdentifiedOrReadOnly
from bookings.handlers.serializers import (
    BookingRequestSerializer,
    BookingSerializer,
    IdentitySerializer,
    LoginRequestSerializer,
    RegisterRequestSerializer,
    RoomRequestSerializer,
    RoomSerializer,
)


def _parse(serializer_class, request: Request) -> dict:
    serializer = serializer_class(data=request.data)
    if not serializer.is_valid():
        raise InvalidInputError()
    return dict(serializer.validated_data)


def _auth_payload(identity, token: str) -> dict:
    return {**IdentitySerializer(identity).data, "token": token}


class RootView(APIView):
    """Handler for GET /"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        return Response({"message": "Campus Booking API is running!"})


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        data = _parse(RegisterRequestSerializer, request)
        identity, token = get_auth_service().register(
            name=data.get("name"),
            email=data.get("email"),
            password=data.get("password"),
            role=data.get("role"),
        )
        return Response(_auth_payload(identity, token), status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        data = _parse(LoginRequestSerializer, request)
        identity, token = get_auth_service().login(
            email=data.get("email"),
            password=data.get("password"),
        )
        return Response(_auth_payload(identity, token))


class MeView(APIView):
    """Handler for GET /api/auth/me"""

    def get(self, request: Request) -> Response:
        return Response(IdentitySerializer(request.user).data)


class RoomListView(APIView):
    """Handler for GET/POST /api/rooms"""

    permission_classes = [IsIdentifiedOrReadOnly]

    def get(self, request: Request) -> Response:
        rooms = get_room_service().list_rooms(room_type=request.query_params.get("type"))
        return Response(RoomSerializer(rooms, many=True).data)

    def post(self, request: Request) -> Response:
        data = _parse(RoomRequestSerializer, request)
        room = get_room_service().create_room(request.user, **data)
        return Response(RoomSerializer(room).data, status=status.HTTP_201_CREATED)


class RoomDetailView(APIView):
    """Handler for /api/rooms/{room_id}

    PUT and PATCH both apply a partial update.
    """

    permission_classes = [IsIdentifiedOrReadOnly]

    def get(self, request: Request, room_id: str) -> Response:
        room = get_room_service().get_room(room_id)
        return Response(RoomSerializer(room).data)

    def put(self, request: Request, room_id: str) -> Response:
        changes = RoomChanges(**_parse(RoomRequestSerializer, request))
        room = get_room_service().update_room(request.user, room_id, changes)
        return Response(RoomSerializer(room).data)

    def patch(self, request: Request, room_id: str) -> Response:
        return self.put(request, room_id)

    def delete(self, request: Request, room_id: str) -> Response:
        get_room_service().delete_room(request.user, room_id)
        return Response({"message": "Room deleted successfully"})


class BookingListView(APIView):
    """Handler for GET/POST /api/bookings"""

    def get(self, request: Request) -> Response:
        bookings = get_lifecycle_service().list_mine(request.user)
        return Response(BookingSerializer(bookings, many=True).data)

    def post(self, request: Request) -> Response:
        data = _parse(BookingRequestSerializer, request)
        details = get_admission_service().propose_booking(
            request.user,
            room_id=data.get("room_id"),
            booking_date=data.get("booking_date"),
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            purpose=data.get("purpose"),
        )
        return Response(BookingSerializer(details).data, status=status.HTTP_201_CREATED)


class BookingAllView(APIView):
    """Handler for GET /api/bookings/all"""

    def get(self, request: Request) -> Response:
        bookings = get_lifecycle_service().list_all(request.user)
        return Response(BookingSerializer(bookings, many=True).data)


class BookingDetailView(APIView):
    """Handler for GET/DELETE /api/bookings/{booking_id}"""

    def get(self, request: Request, booking_id: str) -> Response:
        details = get_lifecycle_service().get_booking(request.user, booking_id)
        return Response(BookingSerializer(details).data)

    def delete(self, request: Request, booking_id: str) -> Response:
        get_lifecycle_service().cancel(request.user, booking_id)
        return Response({"message": "Booking cancelled successfully"})
