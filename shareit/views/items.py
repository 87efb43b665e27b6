"""
Item views for ShareIt.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from shareit.pagination import OffsetPage
from shareit.serializers import (
    CommentCreateSerializer,
    CommentSerializer,
    ItemCreateSerializer,
    ItemDetailSerializer,
    ItemSerializer,
    ItemUpdateSerializer,
)
from shareit.services import items as item_service
from shareit.utils import get_sharer_user_id


class ItemListView(APIView):
    """
    GET /api/v1/items/?from=0&size=10
    List the current user's items with their last and next bookings.

    POST /api/v1/items/
    Create a new item.
    """

    def get(self, request):
        user_id = get_sharer_user_id(request)
        page = OffsetPage.from_query(request.query_params)
        items = item_service.list_owner_items(user_id, page)
        return Response(ItemDetailSerializer(items, many=True).data)

    def post(self, request):
        user_id = get_sharer_user_id(request)
        serializer = ItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = item_service.create_item(user_id, **serializer.validated_data)
        return Response(ItemSerializer(item).data, status=status.HTTP_201_CREATED)


class ItemDetailView(APIView):
    """
    GET /api/v1/items/{item_id}/
    View an item. The owner also sees its last and next bookings.

    PATCH /api/v1/items/{item_id}/
    Update an item (owner only).
    """

    def get(self, request, item_id):
        user_id = get_sharer_user_id(request)
        item = item_service.get_item_details(user_id, item_id)
        return Response(ItemDetailSerializer(item).data)

    def patch(self, request, item_id):
        user_id = get_sharer_user_id(request)
        serializer = ItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = item_service.update_item(user_id, item_id, **serializer.validated_data)
        return Response(ItemSerializer(item).data)


class ItemSearchView(APIView):
    """
    GET /api/v1/items/search/?text=drill&from=0&size=10
    Search available items by name or description.
    """

    def get(self, request):
        get_sharer_user_id(request)
        page = OffsetPage.from_query(request.query_params)
        items = item_service.search_items(request.query_params.get("text", ""), page)
        return Response(ItemSerializer(items, many=True).data)


class ItemCommentView(APIView):
    """
    POST /api/v1/items/{item_id}/comment/
    Comment on an item the current user has rented.
    """

    def post(self, request, item_id):
        user_id = get_sharer_user_id(request)
        serializer = CommentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        comment = item_service.add_comment(user_id, item_id, serializer.validated_data["text"])
        return Response(CommentSerializer(comment).data, status=status.HTTP_201_CREATED)
