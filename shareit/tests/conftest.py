"""
Pytest fixtures for ShareIt tests.
"""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from shareit.models import Booking, Item, User
from shareit.models.booking import APPROVED, WAITING


def get_client_for_user(user):
    """Create an API client acting as the given user."""
    client = APIClient()
    client.credentials(HTTP_X_SHARER_USER_ID=str(user.id))
    return client


@pytest.fixture
def api_client():
    """Return an API client without the sharer header."""
    return APIClient()


@pytest.fixture
def owner(db):
    """Create the user who owns the test item."""
    return User.objects.create(name="Owner", email="owner@example.com")


@pytest.fixture
def booker(db):
    """Create a user who books other people's items."""
    return User.objects.create(name="Booker", email="booker@example.com")


@pytest.fixture
def stranger(db):
    """Create a user unrelated to any booking."""
    return User.objects.create(name="Stranger", email="stranger@example.com")


@pytest.fixture
def owner_client(owner):
    return get_client_for_user(owner)


@pytest.fixture
def booker_client(booker):
    return get_client_for_user(booker)


@pytest.fixture
def item(db, owner):
    """Create an available item."""
    return Item.objects.create(
        owner=owner,
        name="Cordless drill",
        description="Drill with two batteries",
        available=True,
    )


@pytest.fixture
def unavailable_item(db, owner):
    """Create an item that cannot be booked."""
    return Item.objects.create(
        owner=owner,
        name="Ladder",
        description="Broken ladder",
        available=False,
    )


@pytest.fixture
def now():
    return timezone.now()


@pytest.fixture
def make_booking(db, item, booker, now):
    """Factory for bookings relative to now, bypassing the date checks."""

    def _make(start_days, end_days, status=WAITING, booking_item=None, user=None):
        return Booking.objects.create(
            item=booking_item or item,
            booker=user or booker,
            start=now + timedelta(days=start_days),
            end=now + timedelta(days=end_days),
            status=status,
        )

    return _make


@pytest.fixture
def waiting_booking(make_booking):
    return make_booking(1, 5)


@pytest.fixture
def approved_booking(make_booking):
    return make_booking(2, 6, status=APPROVED)
