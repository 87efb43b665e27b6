"""
Item model for ShareIt.
"""

from django.conf import settings
from django.db import models


class Item(models.Model):
    """
    A thing its owner is willing to lend.

    Availability (available):
    - True: can be booked by other users
    - False: visible, but booking requests are refused
    """

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="items",
    )
    name = models.CharField(max_length=255)
    description = models.CharField(max_length=1000)
    available = models.BooleanField(default=True)
    request = models.ForeignKey(
        "shareit.ItemRequest",
        on_delete=models.SET_NULL,
        related_name="items",
        null=True,
        blank=True,
    )

    class Meta:
        app_label = "shareit"
        db_table = "items"
        ordering = ["id"]

    def __str__(self):
        return f"{self.id}: {self.name}"

    def is_owner(self, user_id):
        """Check if the given user is the owner."""
        return self.owner_id == user_id
