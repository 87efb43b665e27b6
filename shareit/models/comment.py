"""
Comment model for ShareIt.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class Comment(models.Model):
    """A review left on an item by someone who has rented it."""

    item = models.ForeignKey(
        "shareit.Item",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="comments",
    )
    text = models.CharField(max_length=1000)
    created = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = "shareit"
        db_table = "comments"
        ordering = ["created", "id"]

    def __str__(self):
        return f"Comment {self.id} on item {self.item_id}"
