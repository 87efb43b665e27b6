from .bookings import BookingDetailView, BookingListView, OwnerBookingListView
from .items import ItemCommentView, ItemDetailView, ItemListView, ItemSearchView
from .requests import ItemRequestAllView, ItemRequestDetailView, ItemRequestListView
from .users import UserDetailView, UserListView

__all__ = [
    "UserListView",
    "UserDetailView",
    "ItemListView",
    "ItemDetailView",
    "ItemSearchView",
    "ItemCommentView",
    "ItemRequestListView",
    "ItemRequestAllView",
    "ItemRequestDetailView",
    "BookingListView",
    "OwnerBookingListView",
    "BookingDetailView",
]
