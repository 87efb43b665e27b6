"""
Item request services for ShareIt.

Requests are listed newest first, each with the items offered in answer.
"""

import logging

from django.db import transaction

from shareit.exceptions import RequestNotFound
from shareit.models import ItemRequest
from shareit.services.users import get_user

logger = logging.getLogger(__name__)


def _with_items(requests):
    return requests.prefetch_related("items")


def get_item_request(request_id):
    try:
        return ItemRequest.objects.get(pk=request_id)
    except ItemRequest.DoesNotExist:
        raise RequestNotFound(request_id)


@transaction.atomic
def create_request(user_id, description):
    requester = get_user(user_id)
    item_request = ItemRequest.objects.create(requester=requester, description=description)
    logger.info(f"User {user_id} added request {item_request.id}")
    return item_request


def list_own_requests(user_id):
    get_user(user_id)
    return list(_with_items(ItemRequest.objects.filter(requester_id=user_id)))


def list_other_requests(user_id, page):
    """Requests made by everyone except the user, bounded by page."""
    get_user(user_id)
    requests = _with_items(ItemRequest.objects.exclude(requester_id=user_id))
    return list(page.slice(requests))


def get_request(user_id, request_id):
    """Any existing user may view any request."""
    get_user(user_id)
    try:
        return _with_items(ItemRequest.objects.all()).get(pk=request_id)
    except ItemRequest.DoesNotExist:
        raise RequestNotFound(request_id)
