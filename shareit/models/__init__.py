from .booking import Booking
from .comment import Comment
from .item import Item
from .item_request import ItemRequest
from .user import User

__all__ = [
    "User",
    "Item",
    "ItemRequest",
    "Booking",
    "Comment",
]
