"""
URL configuration for shareit app.

The acting user is identified by the X-Sharer-User-Id header on every
item, request and booking endpoint.
"""

from django.urls import path

from .views.bookings import BookingDetailView, BookingListView, OwnerBookingListView
from .views.items import ItemCommentView, ItemDetailView, ItemListView, ItemSearchView
from .views.requests import ItemRequestAllView, ItemRequestDetailView, ItemRequestListView
from .views.users import UserDetailView, UserListView

urlpatterns = [
    # Users
    path("users/", UserListView.as_view(), name="user-list"),
    path("users/<int:user_id>/", UserDetailView.as_view(), name="user-detail"),
    # Items
    path("items/", ItemListView.as_view(), name="item-list"),
    path("items/search/", ItemSearchView.as_view(), name="item-search"),
    path("items/<int:item_id>/", ItemDetailView.as_view(), name="item-detail"),
    path("items/<int:item_id>/comment/", ItemCommentView.as_view(), name="item-comment"),
    # Item requests
    path("requests/", ItemRequestListView.as_view(), name="request-list"),
    path("requests/all/", ItemRequestAllView.as_view(), name="request-all"),
    path(
        "requests/<int:request_id>/",
        ItemRequestDetailView.as_view(),
        name="request-detail",
    ),
    # Bookings
    path("bookings/", BookingListView.as_view(), name="booking-list"),
    path("bookings/owner/", OwnerBookingListView.as_view(), name="owner-booking-list"),
    path(
        "bookings/<int:booking_id>/",
        BookingDetailView.as_view(),
        name="booking-detail",
    ),
]
