"""
Item and comment serializers for ShareIt.
"""

from rest_framework import serializers

from shareit.models import Comment, Item
from shareit.serializers.booking import ShortBookingSerializer
from shareit.validators import SafeTextField


class ItemSerializer(serializers.ModelSerializer):
    """Plain item serializer (create/update responses, search results)."""

    owner_id = serializers.IntegerField(read_only=True)
    request_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = Item
        fields = [
            "id",
            "owner_id",
            "name",
            "description",
            "available",
            "request_id",
        ]


class ItemCreateSerializer(serializers.Serializer):
    name = SafeTextField(max_length=255, allow_blank=False)
    description = SafeTextField(max_length=1000, allow_blank=False)
    available = serializers.BooleanField()
    request_id = serializers.IntegerField(required=False, allow_null=True)


class ItemUpdateSerializer(serializers.Serializer):
    name = SafeTextField(max_length=255, required=False, allow_blank=False)
    description = SafeTextField(max_length=1000, required=False, allow_blank=False)
    available = serializers.BooleanField(required=False)


class CommentSerializer(serializers.ModelSerializer):
    author_name = serializers.CharField(source="author.name", read_only=True)

    class Meta:
        model = Comment
        fields = [
            "id",
            "text",
            "author_name",
            "created",
        ]


class CommentCreateSerializer(serializers.Serializer):
    text = SafeTextField(max_length=1000, allow_blank=False)


class ItemDetailSerializer(serializers.ModelSerializer):
    """
    Item with booking hints and comments.

    last_booking and next_booking are set by the item service and are
    always null unless the viewer owns the item.
    """

    owner_id = serializers.IntegerField(read_only=True)
    request_id = serializers.IntegerField(read_only=True, allow_null=True)
    last_booking = ShortBookingSerializer(read_only=True, allow_null=True)
    next_booking = ShortBookingSerializer(read_only=True, allow_null=True)
    comments = CommentSerializer(source="comment_list", many=True, read_only=True)

    class Meta:
        model = Item
        fields = [
            "id",
            "owner_id",
            "name",
            "description",
            "available",
            "request_id",
            "last_booking",
            "next_booking",
            "comments",
        ]
