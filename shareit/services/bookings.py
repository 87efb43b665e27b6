"""
Booking services: creation, owner acknowledgement, lookup and listings.

Each function is one request-scoped unit of work. Lookups raise the
matching NotFound error; authorization failures raise NotAuthorized.
"""

import logging

from django.db import transaction
from django.utils import timezone

from shareit.exceptions import (
    BookingNotFound,
    InvalidState,
    ItemUnavailable,
    NotAuthorized,
)
from shareit.filters import BOOKER, OWNER, BookingFilter
from shareit.models import Booking
from shareit.services.items import get_item
from shareit.services.users import get_user
from shareit.validators import validate_booking_range

logger = logging.getLogger(__name__)


def _get_booking(booking_id):
    try:
        return Booking.objects.with_related().get(pk=booking_id)
    except Booking.DoesNotExist:
        raise BookingNotFound(booking_id)


@transaction.atomic
def create_booking(booker_id, item_id, start, end):
    """Create a WAITING booking of someone else's available item."""
    booker = get_user(booker_id)
    item = get_item(item_id)

    if not item.available:
        raise ItemUnavailable(f"Item {item.id} is not available for booking")

    if item.is_owner(booker_id):
        raise NotAuthorized(
            f"Item {item.id} already belongs to user {booker_id}",
            field="item_id",
        )

    validate_booking_range(start, end)

    booking = Booking.objects.create(item=item, booker=booker, start=start, end=end)
    logger.info(f"User {booker_id} requested booking {booking.id} of item {item.id}")
    return booking


@transaction.atomic
def acknowledge_booking(user_id, booking_id, approved):
    """
    Approve or reject a WAITING booking. Only the item owner may do this,
    and only once.
    """
    get_user(user_id)
    booking = _get_booking(booking_id)

    if not booking.is_owned_by(user_id):
        raise NotAuthorized(
            f"User {user_id} does not own item {booking.item_id}",
            field="booking_id",
        )

    if not booking.is_waiting():
        raise InvalidState(f"Booking {booking.id} is already {booking.status}")

    if not booking.acknowledge(approved):
        raise InvalidState(f"Booking {booking.id} has already been processed")

    logger.info(f"User {user_id} set booking {booking.id} to {booking.status}")
    return booking


def get_booking(user_id, booking_id):
    """Return a booking visible to its booker or to the item owner."""
    get_user(user_id)
    booking = _get_booking(booking_id)

    if not booking.is_visible_to(user_id):
        raise NotAuthorized(
            f"User {user_id} has no access to booking {booking_id}",
            field="booking_id",
        )
    return booking


def list_bookings(user_id, role, state, page, now=None):
    """
    List the user's bookings (role BOOKER) or bookings of the user's items
    (role OWNER), filtered by state, newest start first, bounded by page.
    """
    get_user(user_id)
    booking_filter = BookingFilter(state, now or timezone.now())

    bookings = Booking.objects.with_related()
    if role == BOOKER:
        bookings = bookings.for_booker(user_id)
    elif role == OWNER:
        bookings = bookings.for_owner(user_id)
    else:
        raise ValueError(f"Unknown booking role: {role}")

    bookings = bookings.matching(booking_filter).newest_first()
    return list(page.slice(bookings))
