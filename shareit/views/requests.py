"""
Item request views for ShareIt.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from shareit.pagination import OffsetPage
from shareit.serializers import ItemRequestCreateSerializer, ItemRequestSerializer
from shareit.services import requests as request_service
from shareit.utils import get_sharer_user_id


class ItemRequestListView(APIView):
    """
    GET /api/v1/requests/
    List the current user's requests, newest first.

    POST /api/v1/requests/
    Ask for an item.
    """

    def get(self, request):
        user_id = get_sharer_user_id(request)
        item_requests = request_service.list_own_requests(user_id)
        return Response(ItemRequestSerializer(item_requests, many=True).data)

    def post(self, request):
        user_id = get_sharer_user_id(request)
        serializer = ItemRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item_request = request_service.create_request(
            user_id, serializer.validated_data["description"]
        )
        return Response(ItemRequestSerializer(item_request).data, status=status.HTTP_201_CREATED)


class ItemRequestAllView(APIView):
    """
    GET /api/v1/requests/all/?from=0&size=10
    List other users' requests, newest first.
    """

    def get(self, request):
        user_id = get_sharer_user_id(request)
        page = OffsetPage.from_query(request.query_params)
        item_requests = request_service.list_other_requests(user_id, page)
        return Response(ItemRequestSerializer(item_requests, many=True).data)


class ItemRequestDetailView(APIView):
    """
    GET /api/v1/requests/{request_id}/
    """

    def get(self, request, request_id):
        user_id = get_sharer_user_id(request)
        item_request = request_service.get_request(user_id, request_id)
        return Response(ItemRequestSerializer(item_request).data)
