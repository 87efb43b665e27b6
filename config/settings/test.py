"""
Test settings for ShareIt project.
Uses in-memory SQLite; rate limiting disabled.
"""

import os

os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret-key-not-for-production")

from .base import *  # noqa: E402, F401, F403

DEBUG = False

RATELIMIT_ENABLE = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "loggers": {
        "shareit": {
            "handlers": ["null"],
            "level": "DEBUG",
            "propagate": True,
        },
    },
}
