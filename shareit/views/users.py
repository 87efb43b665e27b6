"""
User views for ShareIt.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from shareit.serializers import UserCreateSerializer, UserSerializer, UserUpdateSerializer
from shareit.services import users as user_service


class UserListView(APIView):
    """
    GET /api/v1/users/
    List all users.

    POST /api/v1/users/
    Create a user.
    """

    def get(self, request):
        return Response(UserSerializer(user_service.list_users(), many=True).data)

    def post(self, request):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = user_service.create_user(**serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class UserDetailView(APIView):
    """
    GET /api/v1/users/{user_id}/
    PATCH /api/v1/users/{user_id}/
    DELETE /api/v1/users/{user_id}/
    """

    def get(self, request, user_id):
        user = user_service.get_user(user_id)
        return Response(UserSerializer(user).data)

    def patch(self, request, user_id):
        serializer = UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = user_service.update_user(user_id, **serializer.validated_data)
        return Response(UserSerializer(user).data)

    def delete(self, request, user_id):
        user_service.delete_user(user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
