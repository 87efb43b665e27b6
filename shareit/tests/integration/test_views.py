"""
Integration tests for ShareIt API endpoints.
"""

from datetime import timedelta

import pytest
from rest_framework import status

from shareit.models import Item, User
from shareit.models.booking import APPROVED, WAITING
from shareit.tests.conftest import get_client_for_user


def iso(moment):
    return moment.isoformat()


@pytest.mark.django_db
class TestSharerHeader:
    """Tests for the X-Sharer-User-Id header."""

    def test_missing_header(self, api_client):
        response = api_client.get("/api/v1/bookings/")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "X-Sharer-User-Id" in response.data

    def test_non_numeric_header(self, api_client):
        api_client.credentials(HTTP_X_SHARER_USER_ID="abc")
        response = api_client.get("/api/v1/bookings/")
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_user(self, api_client):
        api_client.credentials(HTTP_X_SHARER_USER_ID="999")
        response = api_client.get("/api/v1/bookings/")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["user_id"] == "User 999 not found"


@pytest.mark.django_db
class TestCreateBookingView:
    """Tests for POST /api/v1/bookings/."""

    def test_create_booking(self, booker_client, item, booker, now):
        response = booker_client.post(
            "/api/v1/bookings/",
            {
                "item_id": item.id,
                "start": iso(now + timedelta(days=1)),
                "end": iso(now + timedelta(days=2)),
            },
            format="json",
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["status"] == WAITING
        assert response.data["item"] == {"id": item.id, "name": item.name}
        assert response.data["booker"]["id"] == booker.id

    def test_owner_cannot_book(self, owner_client, item, now):
        response = owner_client.post(
            "/api/v1/bookings/",
            {
                "item_id": item.id,
                "start": iso(now + timedelta(days=1)),
                "end": iso(now + timedelta(days=2)),
            },
            format="json",
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unavailable_item(self, booker_client, unavailable_item, now):
        response = booker_client.post(
            "/api/v1/bookings/",
            {
                "item_id": unavailable_item.id,
                "start": iso(now + timedelta(days=1)),
                "end": iso(now + timedelta(days=2)),
            },
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_missing_start(self, booker_client, item, now):
        response = booker_client.post(
            "/api/v1/bookings/",
            {"item_id": item.id, "end": iso(now + timedelta(days=2))},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "start" in response.data

    def test_end_before_start(self, booker_client, item, now):
        response = booker_client.post(
            "/api/v1/bookings/",
            {
                "item_id": item.id,
                "start": iso(now + timedelta(days=3)),
                "end": iso(now + timedelta(days=2)),
            },
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "end" in response.data

    def test_missing_item_id(self, booker_client, now):
        response = booker_client.post(
            "/api/v1/bookings/",
            {"start": iso(now + timedelta(days=1)), "end": iso(now + timedelta(days=2))},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "item_id" in response.data

    def test_unknown_item(self, booker_client, now):
        response = booker_client.post(
            "/api/v1/bookings/",
            {
                "item_id": 999,
                "start": iso(now + timedelta(days=1)),
                "end": iso(now + timedelta(days=2)),
            },
            format="json",
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {"item_id": "Item 999 not found"}


@pytest.mark.django_db
class TestAcknowledgeBookingView:
    """Tests for PATCH /api/v1/bookings/{id}/."""

    def test_owner_approves(self, owner_client, waiting_booking):
        response = owner_client.patch(f"/api/v1/bookings/{waiting_booking.id}/?approved=true")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["status"] == APPROVED

    def test_owner_rejects(self, owner_client, waiting_booking):
        response = owner_client.patch(f"/api/v1/bookings/{waiting_booking.id}/?approved=false")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["status"] == "REJECTED"

    def test_second_acknowledge(self, owner_client, waiting_booking):
        owner_client.patch(f"/api/v1/bookings/{waiting_booking.id}/?approved=true")
        response = owner_client.patch(f"/api/v1/bookings/{waiting_booking.id}/?approved=false")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "status" in response.data

    def test_booker_cannot_acknowledge(self, booker_client, waiting_booking):
        response = booker_client.patch(f"/api/v1/bookings/{waiting_booking.id}/?approved=true")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_approved_param_required(self, owner_client, waiting_booking):
        response = owner_client.patch(f"/api/v1/bookings/{waiting_booking.id}/")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "approved" in response.data

    def test_approved_param_must_be_boolean(self, owner_client, waiting_booking):
        response = owner_client.patch(f"/api/v1/bookings/{waiting_booking.id}/?approved=maybe")
        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestGetBookingView:
    """Tests for GET /api/v1/bookings/{id}/."""

    def test_booker_and_owner_can_view(self, owner_client, booker_client, waiting_booking):
        for client in (owner_client, booker_client):
            response = client.get(f"/api/v1/bookings/{waiting_booking.id}/")
            assert response.status_code == status.HTTP_200_OK
            assert response.data["id"] == waiting_booking.id

    def test_stranger_gets_not_found(self, stranger, waiting_booking):
        client = get_client_for_user(stranger)
        response = client.get(f"/api/v1/bookings/{waiting_booking.id}/")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_booking(self, booker_client):
        response = booker_client.get("/api/v1/bookings/999/")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {"booking_id": "Booking 999 not found"}


@pytest.mark.django_db
class TestListBookingsView:
    """Tests for GET /api/v1/bookings/ and /api/v1/bookings/owner/."""

    def test_booker_list(self, booker_client, make_booking):
        early = make_booking(1, 2)
        late = make_booking(3, 4)
        response = booker_client.get("/api/v1/bookings/")
        assert response.status_code == status.HTTP_200_OK
        assert [booking["id"] for booking in response.data] == [late.id, early.id]

    def test_owner_list_with_state(self, owner_client, make_booking):
        make_booking(-3, -1, status=APPROVED)
        future = make_booking(3, 4)
        response = owner_client.get("/api/v1/bookings/owner/?state=FUTURE")
        assert response.status_code == status.HTTP_200_OK
        assert [booking["id"] for booking in response.data] == [future.id]

    def test_pagination_params(self, booker_client, make_booking):
        bookings = [make_booking(day, day + 1) for day in range(1, 6)]
        response = booker_client.get("/api/v1/bookings/?from=1&size=2")
        assert [booking["id"] for booking in response.data] == [
            bookings[3].id,
            bookings[2].id,
        ]

    def test_offset_larger_than_database_integer(self, booker_client, make_booking):
        make_booking(1, 2)
        response = booker_client.get("/api/v1/bookings/?from=9223372036854775808&size=10")
        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_default_page_size(self, booker_client, make_booking):
        for day in range(1, 13):
            make_booking(day, day + 1)
        response = booker_client.get("/api/v1/bookings/")
        assert len(response.data) == 10

    def test_unknown_state(self, booker_client):
        response = booker_client.get("/api/v1/bookings/?state=UNSUPPORTED_STATUS")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {"error": "Unknown state: UNSUPPORTED_STATUS"}

    @pytest.mark.parametrize("query", ["from=-1&size=10", "from=0&size=0", "size=-5"])
    def test_invalid_pagination(self, owner_client, query):
        response = owner_client.get(f"/api/v1/bookings/owner/?{query}")
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_owner_list_does_not_accept_post(self, owner_client):
        response = owner_client.post("/api/v1/bookings/owner/", {}, format="json")
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.django_db
class TestUserViews:
    """Tests for /api/v1/users/."""

    def test_create_and_get_user(self, api_client):
        response = api_client.post(
            "/api/v1/users/",
            {"name": "Ann", "email": "ann@example.com"},
            format="json",
        )
        assert response.status_code == status.HTTP_201_CREATED
        user_id = response.data["id"]

        response = api_client.get(f"/api/v1/users/{user_id}/")
        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"id": user_id, "name": "Ann", "email": "ann@example.com"}

    def test_duplicate_email(self, api_client, owner):
        response = api_client.post(
            "/api/v1/users/",
            {"name": "Copy", "email": owner.email},
            format="json",
        )
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_invalid_email(self, api_client):
        response = api_client.post(
            "/api/v1/users/",
            {"name": "Ann", "email": "not-an-email"},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "email" in response.data

    def test_update_user(self, api_client, owner):
        response = api_client.patch(
            f"/api/v1/users/{owner.id}/", {"name": "New name"}, format="json"
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data["name"] == "New name"
        assert response.data["email"] == owner.email

    def test_update_to_taken_email(self, api_client, owner, booker):
        response = api_client.patch(
            f"/api/v1/users/{owner.id}/", {"email": booker.email}, format="json"
        )
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_list_users(self, api_client, owner, booker):
        response = api_client.get("/api/v1/users/")
        assert [user["id"] for user in response.data] == [owner.id, booker.id]

    def test_delete_user(self, api_client, owner):
        response = api_client.delete(f"/api/v1/users/{owner.id}/")
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(pk=owner.id).exists()

    def test_get_unknown_user(self, api_client):
        response = api_client.get("/api/v1/users/999/")
        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestItemViews:
    """Tests for /api/v1/items/."""

    def test_create_item(self, owner_client, owner):
        response = owner_client.post(
            "/api/v1/items/",
            {"name": "Tent", "description": "Two person tent", "available": True},
            format="json",
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["owner_id"] == owner.id
        assert Item.objects.filter(owner=owner, name="Tent").exists()

    def test_create_item_requires_available(self, owner_client):
        response = owner_client.post(
            "/api/v1/items/",
            {"name": "Tent", "description": "Two person tent"},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "available" in response.data

    def test_create_item_rejects_html(self, owner_client):
        response = owner_client.post(
            "/api/v1/items/",
            {"name": "<script>x</script>", "description": "Tent", "available": True},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "name" in response.data

    def test_update_item(self, owner_client, item):
        response = owner_client.patch(
            f"/api/v1/items/{item.id}/", {"available": False}, format="json"
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data["available"] is False

    def test_update_item_by_other_user(self, booker_client, item):
        response = booker_client.patch(
            f"/api/v1/items/{item.id}/", {"name": "Stolen"}, format="json"
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_owner_sees_booking_hints(self, owner_client, item, make_booking):
        upcoming = make_booking(2, 4, status=APPROVED)
        response = owner_client.get(f"/api/v1/items/{item.id}/")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["last_booking"] is None
        assert response.data["next_booking"]["id"] == upcoming.id
        assert response.data["next_booking"]["booker_id"] == upcoming.booker_id
        assert response.data["comments"] == []

    def test_others_do_not_see_booking_hints(self, booker_client, item, make_booking):
        make_booking(2, 4, status=APPROVED)
        response = booker_client.get(f"/api/v1/items/{item.id}/")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["next_booking"] is None
        assert response.data["last_booking"] is None

    def test_list_own_items(self, owner_client, item, unavailable_item):
        response = owner_client.get("/api/v1/items/?from=0&size=1")
        assert response.status_code == status.HTTP_200_OK
        assert [listed["id"] for listed in response.data] == [item.id]

    def test_search(self, booker_client, item):
        response = booker_client.get("/api/v1/items/search/?text=DRILL")
        assert response.status_code == status.HTTP_200_OK
        assert [found["id"] for found in response.data] == [item.id]

    def test_search_blank(self, booker_client, item):
        response = booker_client.get("/api/v1/items/search/?text=")
        assert response.data == []

    def test_comment(self, booker_client, booker, item, make_booking):
        make_booking(-5, -1, status=APPROVED)
        response = booker_client.post(
            f"/api/v1/items/{item.id}/comment/", {"text": "Great drill"}, format="json"
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["author_name"] == booker.name
        assert response.data["text"] == "Great drill"

    def test_comment_without_rental(self, booker_client, item):
        response = booker_client.post(
            f"/api/v1/items/{item.id}/comment/", {"text": "Great drill"}, format="json"
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "item_id" in response.data


@pytest.mark.django_db
class TestItemRequestViews:
    """Tests for /api/v1/requests/."""

    def test_create_request(self, booker_client, booker):
        response = booker_client.post(
            "/api/v1/requests/", {"description": "Need a ladder"}, format="json"
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["requester_id"] == booker.id
        assert response.data["description"] == "Need a ladder"
        assert response.data["items"] == []

    def test_create_request_requires_description(self, booker_client):
        response = booker_client.post("/api/v1/requests/", {}, format="json")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "description" in response.data

    def test_answer_request_with_item(self, booker_client, owner_client, owner):
        response = booker_client.post(
            "/api/v1/requests/", {"description": "Need a ladder"}, format="json"
        )
        request_id = response.data["id"]

        response = owner_client.post(
            "/api/v1/items/",
            {
                "name": "Ladder",
                "description": "Three metre ladder",
                "available": True,
                "request_id": request_id,
            },
            format="json",
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["request_id"] == request_id
        item_id = response.data["id"]

        response = booker_client.get("/api/v1/requests/")
        assert response.status_code == status.HTTP_200_OK
        assert [found["id"] for found in response.data[0]["items"]] == [item_id]

        response = owner_client.get(f"/api/v1/requests/{request_id}/")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["items"][0]["owner_id"] == owner.id

    def test_item_for_unknown_request(self, owner_client):
        response = owner_client.post(
            "/api/v1/items/",
            {"name": "Ladder", "description": "Ladder", "available": True, "request_id": 999},
            format="json",
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {"request_id": "Request 999 not found"}
        assert not Item.objects.filter(name="Ladder").exists()

    def test_all_excludes_own_requests(self, booker_client, owner_client):
        booker_client.post("/api/v1/requests/", {"description": "Need a ladder"}, format="json")
        owner_client.post("/api/v1/requests/", {"description": "Need a tent"}, format="json")

        response = booker_client.get("/api/v1/requests/all/?from=0&size=10")
        assert response.status_code == status.HTTP_200_OK
        assert [found["description"] for found in response.data] == ["Need a tent"]

    def test_all_invalid_pagination(self, booker_client):
        response = booker_client.get("/api/v1/requests/all/?from=-1&size=10")
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_request(self, booker_client):
        response = booker_client.get("/api/v1/requests/999/")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_requires_sharer_header(self, api_client):
        response = api_client.get("/api/v1/requests/")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
