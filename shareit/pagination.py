"""
Offset pagination for ShareIt API.
"""

from django.conf import settings

from shareit.exceptions import InvalidArgument

# Largest LIMIT/OFFSET the database accepts (signed 64-bit)
MAX_SQL_OFFSET = 2**63 - 1


class OffsetPage:
    """
    Pagination request addressed by raw record offset instead of page number.

    - offset: index of the first record to return (>= 0)
    - size: max number of records to return (> 0)

    page_number, first() and with_page() adapt the offset to storage layers
    that only understand page-number pagination.
    """

    def __init__(self, offset, size):
        if offset is None or isinstance(offset, bool) or offset < 0:
            raise InvalidArgument("Offset must be positive or zero", field="from")
        if size is None or isinstance(size, bool) or size <= 0:
            raise InvalidArgument("Page size must be positive", field="size")
        self.offset = offset
        self.size = size

    @classmethod
    def of(cls, offset, size):
        return cls(offset, size)

    @classmethod
    def from_query(cls, query_params, default_size=None):
        """Build a page from the `from` and `size` query parameters."""
        if default_size is None:
            default_size = getattr(settings, "SHAREIT_DEFAULT_PAGE_SIZE", 10)
        offset = _parse_int(query_params.get("from"), 0, "from")
        size = _parse_int(query_params.get("size"), default_size, "size")
        return cls(offset, size)

    @property
    def page_number(self):
        return self.offset // self.size

    @property
    def has_previous(self):
        return self.offset - self.size >= 0

    def next(self):
        return OffsetPage(self.offset + self.size, self.size)

    def previous_or_first(self):
        if self.has_previous:
            return OffsetPage(self.offset - self.size, self.size)
        return self.first()

    def first(self):
        return OffsetPage(self.offset - self.page_number * self.size, self.size)

    def with_page(self, page_number):
        return OffsetPage(self.offset + page_number * self.size, self.size)

    def slice(self, queryset):
        """
        Apply this page to an ordered queryset (or any sliceable sequence).

        Offsets beyond what the database can address select nothing.
        """
        if self.offset > MAX_SQL_OFFSET:
            return queryset[:0]
        stop = min(self.offset + self.size, MAX_SQL_OFFSET)
        return queryset[self.offset : stop]

    def __eq__(self, other):
        if not isinstance(other, OffsetPage):
            return NotImplemented
        return self.offset == other.offset and self.size == other.size

    def __hash__(self):
        return hash((self.offset, self.size))

    def __repr__(self):
        return f"OffsetPage(offset={self.offset}, size={self.size})"


def _parse_int(raw, default, field):
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{field} must be an integer", field=field)
