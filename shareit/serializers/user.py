"""
User serializers for ShareIt.
"""

from rest_framework import serializers

from shareit.models import User
from shareit.validators import SafeTextField


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "email",
        ]
        read_only_fields = fields


class UserCreateSerializer(serializers.Serializer):
    """Email uniqueness is checked by the user service (409, not 400)."""

    name = SafeTextField(max_length=255)
    email = serializers.EmailField(max_length=512)


class UserUpdateSerializer(serializers.Serializer):
    name = SafeTextField(max_length=255, required=False)
    email = serializers.EmailField(max_length=512, required=False)
