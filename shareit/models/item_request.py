"""
Item request model for ShareIt.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class ItemRequest(models.Model):
    """
    A description of something a user would like to borrow.

    Other users answer a request by listing an item with its request_id.
    """

    requester = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="item_requests",
    )
    description = models.CharField(max_length=1000)
    created = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = "shareit"
        db_table = "item_requests"
        ordering = ["-created", "-id"]

    def __str__(self):
        return f"Request {self.id} by user {self.requester_id}"
