"""
Booking serializers for ShareIt.
"""

from rest_framework import serializers

from shareit.models import Booking, Item, User


class BookingCreateSerializer(serializers.Serializer):
    """
    Serializer for a booking request.

    start and end may be omitted here; the booking service reports which
    one is missing before checking the period itself.
    """

    item_id = serializers.IntegerField()
    start = serializers.DateTimeField(required=False, allow_null=True)
    end = serializers.DateTimeField(required=False, allow_null=True)


class BookingItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = Item
        fields = ["id", "name"]


class BookingUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "name"]


class BookingSerializer(serializers.ModelSerializer):
    """Full booking serializer (booker and owner views)."""

    item = BookingItemSerializer(read_only=True)
    booker = BookingUserSerializer(read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "start",
            "end",
            "status",
            "item",
            "booker",
        ]
        read_only_fields = fields


class ShortBookingSerializer(serializers.ModelSerializer):
    """Last/next booking shown on item details (owner only)."""

    booker_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "booker_id",
            "start",
            "end",
            "status",
        ]
