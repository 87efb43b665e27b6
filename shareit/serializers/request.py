"""
Item request serializers for ShareIt.
"""

from rest_framework import serializers

from shareit.models import ItemRequest
from shareit.serializers.item import ItemSerializer
from shareit.validators import SafeTextField


class ItemRequestCreateSerializer(serializers.Serializer):
    description = SafeTextField(max_length=1000, allow_blank=False)


class ItemRequestSerializer(serializers.ModelSerializer):
    """Request with the items offered in answer to it."""

    requester_id = serializers.IntegerField(read_only=True)
    items = ItemSerializer(many=True, read_only=True)

    class Meta:
        model = ItemRequest
        fields = [
            "id",
            "requester_id",
            "description",
            "created",
            "items",
        ]
        read_only_fields = fields
