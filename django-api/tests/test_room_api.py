"""Integration tests for the room inventory endpoints.

Run with: pytest tests/test_room_api.py -v
"""

import uuid

import pytest
from rest_framework.test import APIClient

LAB = {
    "name": "Computer Lab 1",
    "type": "lab",
    "capacity": 30,
    "facilities": ["computers", "projector"],
    "description": "Computer lab with 30 workstations",
}


@pytest.fixture
def create_room(api_client: APIClient, admin_header: str):
    def _create_room(**overrides) -> dict:
        response = api_client.post("/api/rooms", {**LAB, **overrides}, HTTP_AUTHORIZATION=admin_header)
        assert response.status_code == 201, response.data
        return response.data

    return _create_room


@pytest.mark.django_db
class TestRoomList:
    """Tests for GET/POST /api/rooms"""

    def test_list_rooms_is_public_and_ordered(self, api_client, create_room):
        create_room(name="Physics Lab")
        create_room(name="Classroom A-101", type="classroom", capacity=40, facilities=[])

        response = api_client.get("/api/rooms")

        assert response.status_code == 200
        assert [room["name"] for room in response.data] == ["Classroom A-101", "Physics Lab"]

    def test_list_rooms_filtered_by_type(self, api_client, create_room):
        create_room(name="Physics Lab")
        create_room(name="Classroom A-101", type="classroom")

        response = api_client.get("/api/rooms", {"type": "classroom"})

        assert [room["name"] for room in response.data] == ["Classroom A-101"]

    def test_list_rooms_unknown_type(self, api_client):
        response = api_client.get("/api/rooms", {"type": "office"})

        assert response.status_code == 400
        assert response.data["code"] == "INVALID_ROOM_DATA"

    def test_create_room_defaults(self, api_client, admin_header):
        response = api_client.post(
            "/api/rooms",
            {"name": "Seminar 4", "type": "classroom", "capacity": 12},
            HTTP_AUTHORIZATION=admin_header,
        )

        assert response.status_code == 201
        assert response.data["facilities"] == []
        assert response.data["available"] is True
        assert response.data["description"] is None
        uuid.UUID(response.data["id"])

    def test_create_room_requires_token(self, api_client):
        response = api_client.post("/api/rooms", LAB)

        assert response.status_code == 401
        assert response.data["code"] == "UNAUTHENTICATED"

    def test_create_room_requires_admin(self, api_client, register):
        _, header = register("Alice")

        response = api_client.post("/api/rooms", LAB, HTTP_AUTHORIZATION=header)

        assert response.status_code == 403
        assert response.data["code"] == "FORBIDDEN"

    def test_create_room_duplicate_name(self, api_client, admin_header, create_room):
        create_room()

        response = api_client.post("/api/rooms", LAB, HTTP_AUTHORIZATION=admin_header)

        assert response.status_code == 400
        assert response.data["code"] == "DUPLICATE_NAME"

    def test_create_room_missing_fields(self, api_client, admin_header):
        response = api_client.post("/api/rooms", {"name": "Seminar 4"}, HTTP_AUTHORIZATION=admin_header)

        assert response.status_code == 400
        assert response.data["code"] == "MISSING_FIELDS"

    def test_create_room_malformed_capacity(self, api_client, admin_header):
        response = api_client.post(
            "/api/rooms", {**LAB, "capacity": "lots"}, HTTP_AUTHORIZATION=admin_header
        )

        assert response.status_code == 400
        assert response.data["code"] == "INVALID_INPUT"


@pytest.mark.django_db
class TestRoomDetail:
    """Tests for /api/rooms/{id}"""

    def test_get_room(self, api_client, create_room):
        room = create_room()

        response = api_client.get(f"/api/rooms/{room['id']}")

        assert response.status_code == 200
        assert response.data["name"] == "Computer Lab 1"
        assert response.data["capacity"] == 30

    @pytest.mark.parametrize("room_id", ["lab-101", str(uuid.uuid4())])
    def test_get_room_not_found(self, api_client, room_id):
        response = api_client.get(f"/api/rooms/{room_id}")

        assert response.status_code == 404
        assert response.data["code"] == "ROOM_NOT_FOUND"

    def test_partial_update_applies_false_and_keeps_others(self, api_client, admin_header, create_room):
        room = create_room()

        response = api_client.put(
            f"/api/rooms/{room['id']}", {"available": False}, HTTP_AUTHORIZATION=admin_header
        )

        assert response.status_code == 200
        assert response.data["available"] is False
        assert response.data["name"] == room["name"]
        assert response.data["capacity"] == room["capacity"]
        assert response.data["facilities"] == room["facilities"]
        assert response.data["description"] == room["description"]

    def test_patch_updates_capacity(self, api_client, admin_header, create_room):
        room = create_room()

        response = api_client.patch(
            f"/api/rooms/{room['id']}", {"capacity": 28}, HTTP_AUTHORIZATION=admin_header
        )

        assert response.data["capacity"] == 28
        assert response.data["available"] is True

    def test_update_rename_to_existing_name(self, api_client, admin_header, create_room):
        create_room(name="Physics Lab")
        room = create_room()

        response = api_client.put(
            f"/api/rooms/{room['id']}", {"name": "Physics Lab"}, HTTP_AUTHORIZATION=admin_header
        )

        assert response.status_code == 400
        assert response.data["code"] == "DUPLICATE_NAME"

    def test_update_requires_admin(self, api_client, register, create_room):
        room = create_room()
        _, header = register("Alice")

        response = api_client.put(f"/api/rooms/{room['id']}", {"available": False}, HTTP_AUTHORIZATION=header)

        assert response.status_code == 403

    def test_delete_room(self, api_client, admin_header, create_room):
        room = create_room()

        response = api_client.delete(f"/api/rooms/{room['id']}", HTTP_AUTHORIZATION=admin_header)

        assert response.status_code == 200
        assert response.data == {"message": "Room deleted successfully"}
        assert api_client.get(f"/api/rooms/{room['id']}").status_code == 404

    def test_delete_unknown_room(self, api_client, admin_header):
        response = api_client.delete(f"/api/rooms/{uuid.uuid4()}", HTTP_AUTHORIZATION=admin_header)

        assert response.status_code == 404
