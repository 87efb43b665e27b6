"""
User services for ShareIt.
"""

import logging

from django.db import IntegrityError, transaction

from shareit.exceptions import EmailAlreadyExists, UserNotFound
from shareit.models import User

logger = logging.getLogger(__name__)


def get_user(user_id):
    try:
        return User.objects.get(pk=user_id)
    except User.DoesNotExist:
        raise UserNotFound(user_id)


def list_users():
    return list(User.objects.all())


def create_user(name, email):
    if User.objects.filter(email=email).exists():
        raise EmailAlreadyExists(email)
    try:
        with transaction.atomic():
            user = User.objects.create(name=name, email=email)
    except IntegrityError:
        raise EmailAlreadyExists(email)
    logger.info(f"Added user {user.id}")
    return user


def update_user(user_id, **changes):
    """Partial update: only name and email, only when given."""
    user = get_user(user_id)
    email = changes.get("email")
    if email is not None and email != user.email:
        if User.objects.filter(email=email).exclude(pk=user.pk).exists():
            raise EmailAlreadyExists(email)
        user.email = email
    if changes.get("name") is not None:
        user.name = changes["name"]
    user.save(update_fields=["name", "email"])
    logger.info(f"Updated user {user_id}")
    return user


def delete_user(user_id):
    deleted, _ = User.objects.filter(pk=user_id).delete()
    if not deleted:
        raise UserNotFound(user_id)
    logger.info(f"Deleted user {user_id}")
