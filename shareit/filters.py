"""
Booking list filters.

A listing is scoped by a role (whose bookings) and a state filter (which
bookings). Both are resolved into a single Q object that the booking
queryset applies once.
"""

from django.db.models import Q
from django.utils import timezone

from shareit.exceptions import UnknownState
from shareit.models.booking import REJECTED, WAITING

ALL = "ALL"
CURRENT = "CURRENT"
PAST = "PAST"
FUTURE = "FUTURE"

BOOKING_STATES = [ALL, CURRENT, PAST, FUTURE, WAITING, REJECTED]

BOOKER = "BOOKER"
OWNER = "OWNER"

BOOKING_ROLES = [BOOKER, OWNER]


def parse_state(token):
    """Parse a `state` query parameter; missing means ALL."""
    if token is None or token == "":
        return ALL
    state = token.strip().upper()
    if state not in BOOKING_STATES:
        raise UnknownState(token)
    return state


class BookingFilter:
    """
    Filter descriptor: a state kind plus the instant it is evaluated at.

    Time-based kinds (CURRENT, PAST, FUTURE) compare against `now`, which is
    captured once so every predicate of one request sees the same instant.
    """

    def __init__(self, kind, now=None):
        if kind not in BOOKING_STATES:
            raise UnknownState(kind)
        self.kind = kind
        self.now = now or timezone.now()

    def as_q(self):
        if self.kind == CURRENT:
            return Q(start__lte=self.now, end__gte=self.now)
        if self.kind == PAST:
            return Q(end__lt=self.now)
        if self.kind == FUTURE:
            return Q(start__gt=self.now)
        if self.kind == WAITING:
            return Q(status=WAITING)
        if self.kind == REJECTED:
            return Q(status=REJECTED)
        return Q()

    def __repr__(self):
        return f"BookingFilter(kind={self.kind!r}, now={self.now!r})"

