"""
Booking model - a reservation of an item by a user for a time window.

Lifecycle:
- WAITING: created by the booker, awaiting the owner's decision
- APPROVED: accepted by the owner (terminal)
- REJECTED: declined by the owner (terminal)
"""

from django.conf import settings
from django.db import models

WAITING = "WAITING"
APPROVED = "APPROVED"
REJECTED = "REJECTED"

STATUS_CHOICES = [
    (WAITING, "Waiting"),
    (APPROVED, "Approved"),
    (REJECTED, "Rejected"),
]

TERMINAL_STATUSES = [APPROVED, REJECTED]


class BookingQuerySet(models.QuerySet):
    """Query shapes used by the booking and item services."""

    def with_related(self):
        return self.select_related("item", "item__owner", "booker")

    def for_booker(self, user_id):
        return self.filter(booker_id=user_id)

    def for_owner(self, user_id):
        return self.filter(item__owner_id=user_id)

    def for_item(self, item_id):
        return self.filter(item_id=item_id)

    def for_items(self, item_ids):
        return self.filter(item_id__in=item_ids)

    def for_item_and_booker(self, item_id, booker_id):
        return self.filter(item_id=item_id, booker_id=booker_id)

    def approved(self):
        return self.filter(status=APPROVED)

    def matching(self, booking_filter):
        """Apply a BookingFilter (see shareit.filters)."""
        return self.filter(booking_filter.as_q())

    def newest_first(self):
        return self.order_by("-start", "-id")


class Booking(models.Model):
    """
    A booking request for an item.

    Only the status ever changes after creation, and only once:
    WAITING -> APPROVED or WAITING -> REJECTED.
    """

    item = models.ForeignKey(
        "shareit.Item",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    booker = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    start = models.DateTimeField()
    end = models.DateTimeField()
    status = models.CharField(max_length=8, choices=STATUS_CHOICES, default=WAITING)

    objects = BookingQuerySet.as_manager()

    class Meta:
        app_label = "shareit"
        db_table = "bookings"
        indexes = [
            models.Index(fields=["start"], name="bookings_start_idx"),
        ]

    def __str__(self):
        return f"Booking {self.id} for item {self.item_id} ({self.start} - {self.end}) {self.status}"

    def is_waiting(self):
        return self.status == WAITING

    def is_owned_by(self, user_id):
        """Check if the given user owns the booked item."""
        return self.item.owner_id == user_id

    def is_visible_to(self, user_id):
        """Only the booker and the item owner may see a booking."""
        return self.booker_id == user_id or self.is_owned_by(user_id)

    def acknowledge(self, approved):
        """
        Move a WAITING booking to APPROVED or REJECTED.

        The update is conditional on the stored status still being WAITING.
        Returns False if another request has already processed the booking.
        """
        new_status = APPROVED if approved else REJECTED
        updated = Booking.objects.filter(pk=self.pk, status=WAITING).update(status=new_status)
        if updated:
            self.status = new_status
        return bool(updated)
