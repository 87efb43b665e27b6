"""
API exceptions for ShareIt.

Every error carries a field-keyed detail dict, e.g. {"item_id": "Item 7 not found"}.
Errors without a specific field use the "error" key, like the rest of the API.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class ShareItError(APIException):
    """Base class for ShareIt errors."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"
    default_field = "error"

    def __init__(self, message=None, field=None):
        self.field = field or self.default_field
        self.message = message or self.default_detail
        super().__init__(detail={self.field: self.message})


class NotFound(ShareItError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class UserNotFound(NotFound):
    default_field = "user_id"

    def __init__(self, user_id, field=None):
        super().__init__(f"User {user_id} not found", field=field)


class ItemNotFound(NotFound):
    default_field = "item_id"

    def __init__(self, item_id, field=None):
        super().__init__(f"Item {item_id} not found", field=field)


class BookingNotFound(NotFound):
    default_field = "booking_id"

    def __init__(self, booking_id, field=None):
        super().__init__(f"Booking {booking_id} not found", field=field)


class RequestNotFound(NotFound):
    default_field = "request_id"

    def __init__(self, request_id, field=None):
        super().__init__(f"Request {request_id} not found", field=field)


class NotAuthorized(ShareItError):
    """
    Role or ownership violation.

    Reported as 404 so that callers cannot discover the existence of
    bookings and items they have no access to.
    """

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not authorized"


class InvalidState(ShareItError):
    default_detail = "Booking has already been processed"
    default_field = "status"


class ItemUnavailable(ShareItError):
    default_detail = "Item is not available"
    default_field = "item_id"


class InvalidRange(ShareItError):
    default_detail = "Invalid booking period"
    default_field = "end"


class MissingField(ShareItError):
    def __init__(self, field):
        super().__init__(f"{field} is required", field=field)


class UnknownState(ShareItError):
    def __init__(self, state):
        self.state = state
        super().__init__(f"Unknown state: {state}")


class InvalidArgument(ShareItError):
    default_detail = "Invalid argument"


class EmailAlreadyExists(ShareItError):
    status_code = status.HTTP_409_CONFLICT
    default_field = "email"

    def __init__(self, email):
        super().__init__(f"User with email {email} already exists")


def exception_handler(exc, context):
    """
    DRF exception handler that logs handled errors and hides unclassified ones
    behind an opaque 500 response.
    """
    response = drf_exception_handler(exc, context)
    view_name = context["view"].__class__.__name__ if context.get("view") else "unknown view"

    if response is None:
        logger.exception(f"Unhandled error in {view_name}: {exc}")
        return Response(
            {"error": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.warning(f"{view_name} returned {response.status_code}: {response.data}")
    return response
