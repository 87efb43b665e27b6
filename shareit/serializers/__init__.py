from .booking import (
    BookingCreateSerializer,
    BookingSerializer,
    ShortBookingSerializer,
)
from .item import (
    CommentCreateSerializer,
    CommentSerializer,
    ItemCreateSerializer,
    ItemDetailSerializer,
    ItemSerializer,
    ItemUpdateSerializer,
)
from .request import ItemRequestCreateSerializer, ItemRequestSerializer
from .user import UserCreateSerializer, UserSerializer, UserUpdateSerializer

__all__ = [
    "UserSerializer",
    "UserCreateSerializer",
    "UserUpdateSerializer",
    "ItemSerializer",
    "ItemCreateSerializer",
    "ItemUpdateSerializer",
    "ItemDetailSerializer",
    "CommentSerializer",
    "CommentCreateSerializer",
    "ItemRequestSerializer",
    "ItemRequestCreateSerializer",
    "BookingCreateSerializer",
    "BookingSerializer",
    "ShortBookingSerializer",
]
