"""
Booking views for ShareIt.
"""

from django.conf import settings
from django.utils.decorators import method_decorator
from django_ratelimit.decorators import ratelimit
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from shareit.filters import BOOKER, OWNER, parse_state
from shareit.pagination import OffsetPage
from shareit.serializers import BookingCreateSerializer, BookingSerializer
from shareit.services import bookings as booking_service
from shareit.utils import get_sharer_user_id, parse_bool_param, sharer_ratelimit_key

BOOKING_RATE = getattr(settings, "SHAREIT_BOOKING_RATE", "30/m")


class BookingListView(APIView):
    """
    GET /api/v1/bookings/?state=ALL&from=0&size=10
    List bookings made by the current user.

    POST /api/v1/bookings/
    Request a booking of an item.
    """

    role = BOOKER

    def get(self, request):
        user_id = get_sharer_user_id(request)
        state = parse_state(request.query_params.get("state"))
        page = OffsetPage.from_query(request.query_params)

        bookings = booking_service.list_bookings(user_id, self.role, state, page)
        return Response(BookingSerializer(bookings, many=True).data)

    @method_decorator(
        ratelimit(key=sharer_ratelimit_key, rate=BOOKING_RATE, method="POST", block=True)
    )
    def post(self, request):
        user_id = get_sharer_user_id(request)
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = booking_service.create_booking(
            user_id,
            serializer.validated_data["item_id"],
            serializer.validated_data.get("start"),
            serializer.validated_data.get("end"),
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class OwnerBookingListView(BookingListView):
    """
    GET /api/v1/bookings/owner/?state=ALL&from=0&size=10
    List bookings of items owned by the current user.
    """

    role = OWNER
    http_method_names = ["get", "head", "options"]


class BookingDetailView(APIView):
    """
    GET /api/v1/bookings/{booking_id}/
    View a booking (booker or item owner).

    PATCH /api/v1/bookings/{booking_id}/?approved=true|false
    Approve or reject a booking (item owner only).
    """

    def get(self, request, booking_id):
        user_id = get_sharer_user_id(request)
        booking = booking_service.get_booking(user_id, booking_id)
        return Response(BookingSerializer(booking).data)

    def patch(self, request, booking_id):
        user_id = get_sharer_user_id(request)
        approved = parse_bool_param(request.query_params, "approved")
        booking = booking_service.acknowledge_booking(user_id, booking_id, approved)
        return Response(BookingSerializer(booking).data)
