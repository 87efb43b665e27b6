"""
Custom validators and fields for ShareIt.

Provides:
- Booking period validation (start/end in the future, end after start)
- Free text fields that reject HTML (item names, descriptions, comments)
"""

import bleach
from django.utils import timezone
from rest_framework import serializers

from shareit.exceptions import InvalidRange, MissingField


def validate_booking_range(start, end, now=None):
    """
    Validate a proposed booking period.

    Both timestamps are required. The period is valid when start is strictly
    in the future, end is strictly after start and end is not the current
    instant.
    """
    if start is None:
        raise MissingField("start")
    if end is None:
        raise MissingField("end")

    if now is None:
        now = timezone.now()

    if start <= now:
        raise InvalidRange("Booking must start in the future", field="start")
    if end <= start:
        raise InvalidRange("Booking must end after it starts", field="end")
    if end == now:
        raise InvalidRange("Booking cannot end at the current moment", field="end")


def validate_no_html(value):
    """
    Validate that a text value does not contain HTML tags.

    Rejects any input that contains HTML to prevent XSS attacks.
    """
    if value:
        sanitized = bleach.clean(value, tags=[], strip=True)
        if sanitized != value:
            raise serializers.ValidationError("HTML tags are not allowed.")
    return value


class SafeTextField(serializers.CharField):
    """
    A CharField that rejects HTML content to prevent XSS.

    Uses bleach to detect and reject any HTML tags in the input.
    """

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return validate_no_html(value)
