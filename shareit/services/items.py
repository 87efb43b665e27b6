"""
Item services for ShareIt: items, their nearest bookings and comments.
"""

import logging
from collections import defaultdict

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from shareit.exceptions import ItemNotFound, ItemUnavailable
from shareit.models import Booking, Comment, Item
from shareit.models.booking import APPROVED
from shareit.services.requests import get_item_request
from shareit.services.users import get_user

logger = logging.getLogger(__name__)


def get_item(item_id):
    try:
        return Item.objects.select_related("owner").get(pk=item_id)
    except Item.DoesNotExist:
        raise ItemNotFound(item_id)


def resolve_nearest_bookings(item, bookings, viewer_id, now=None):
    """
    Find the last and the next approved booking of an item.

    - last: the approved booking with the greatest start at or before now
    - next: the approved booking with the smallest start after now

    Only the item owner gets these hints; anyone else gets (None, None).
    """
    if not item.is_owner(viewer_id):
        return None, None

    if now is None:
        now = timezone.now()

    last_booking = None
    next_booking = None
    for booking in bookings:
        if booking.item_id != item.id or booking.status != APPROVED:
            continue
        if booking.start <= now:
            if last_booking is None or booking.start > last_booking.start:
                last_booking = booking
        elif next_booking is None or booking.start < next_booking.start:
            next_booking = booking
    return last_booking, next_booking


def _attach_booking_hints(item, bookings, viewer_id, now):
    item.last_booking, item.next_booking = resolve_nearest_bookings(
        item, bookings, viewer_id, now
    )
    return item


@transaction.atomic
def create_item(owner_id, name, description, available, request_id=None):
    """Create an item, optionally in answer to an item request."""
    owner = get_user(owner_id)
    item_request = get_item_request(request_id) if request_id is not None else None
    item = Item.objects.create(
        owner=owner,
        name=name,
        description=description,
        available=available,
        request=item_request,
    )
    logger.info(f"User {owner_id} added item {item.id}")
    return item


@transaction.atomic
def update_item(user_id, item_id, **changes):
    """Partial update of name, description and availability. Owner only."""
    get_user(user_id)
    item = get_item(item_id)
    if not item.is_owner(user_id):
        raise ItemNotFound(item_id)

    update_fields = []
    for field in ("name", "description", "available"):
        if changes.get(field) is not None:
            setattr(item, field, changes[field])
            update_fields.append(field)
    if update_fields:
        item.save(update_fields=update_fields)
    logger.info(f"User {user_id} updated item {item_id}")
    return item


def get_item_details(user_id, item_id, now=None):
    """
    Return an item with its comments. The owner also sees the item's last
    and next approved bookings.
    """
    item = get_item(item_id)
    bookings = Booking.objects.for_item(item_id).approved().select_related("booker")
    _attach_booking_hints(item, bookings, user_id, now)
    item.comment_list = list(item.comments.select_related("author"))
    return item


def list_owner_items(user_id, page, now=None):
    """List the user's items by id, each with its last and next booking."""
    get_user(user_id)
    items = list(page.slice(Item.objects.filter(owner_id=user_id).order_by("id")))
    item_ids = [item.id for item in items]

    bookings_by_item = defaultdict(list)
    for booking in Booking.objects.for_items(item_ids).approved().select_related("booker"):
        bookings_by_item[booking.item_id].append(booking)

    comments_by_item = defaultdict(list)
    for comment in Comment.objects.filter(item_id__in=item_ids).select_related("author"):
        comments_by_item[comment.item_id].append(comment)

    if now is None:
        now = timezone.now()
    for item in items:
        _attach_booking_hints(item, bookings_by_item[item.id], user_id, now)
        item.comment_list = comments_by_item[item.id]
    return items


def search_items(text, page):
    """Case-insensitive search in name or description of available items."""
    if not text or not text.strip():
        return []
    items = Item.objects.filter(
        Q(name__icontains=text) | Q(description__icontains=text),
        available=True,
    ).order_by("id")
    return list(page.slice(items))


@transaction.atomic
def add_comment(user_id, item_id, text, now=None):
    """
    Add a comment to an item. Only users with a finished, approved booking
    of the item may comment.
    """
    author = get_user(user_id)
    item = get_item(item_id)

    if now is None:
        now = timezone.now()
    has_rented = (
        Booking.objects.for_item_and_booker(item_id, user_id)
        .approved()
        .filter(end__lt=now)
        .exists()
    )
    if not has_rented:
        raise ItemUnavailable(f"User {user_id} has not rented item {item_id}")

    comment = Comment.objects.create(item=item, author=author, text=text, created=now)
    logger.info(f"User {user_id} commented on item {item_id}")
    return comment
