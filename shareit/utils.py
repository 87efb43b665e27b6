"""
Request helpers for ShareIt views.
"""

from django.conf import settings

from shareit.exceptions import InvalidArgument, MissingField

TRUE_VALUES = {"true", "1", "yes"}
FALSE_VALUES = {"false", "0", "no"}


def user_header_name():
    return getattr(settings, "SHAREIT_USER_HEADER", "X-Sharer-User-Id")


def get_sharer_user_id(request):
    """Return the acting user id from the sharer header."""
    header = user_header_name()
    raw = request.headers.get(header)
    if raw is None or raw.strip() == "":
        raise MissingField(header)
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgument(f"{header} must be an integer", field=header)


def parse_bool_param(query_params, name):
    """Parse a required true/false query parameter."""
    raw = query_params.get(name)
    if raw is None or raw == "":
        raise MissingField(name)
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise InvalidArgument(f"{name} must be true or false", field=name)


def sharer_ratelimit_key(group, request):
    """Rate limit key: the raw acting-user header, whichever header is configured."""
    return request.headers.get(user_header_name(), "")
