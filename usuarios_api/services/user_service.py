"""User service operations."""

import logging
from typing import Any

from usuarios_api.core.exceptions import UserNotFoundError, UserValidationError
from usuarios_api.db.store import UserStore
from usuarios_api.models.user import User
from usuarios_api.services.validation import ValidationFailure, validate_user
from usuarios_api.utils.parsing import parse_int_prefix

logger = logging.getLogger(__name__)


def list_users(store: UserStore) -> list[User]:
    return store.all()


def find_user(store: UserStore, raw_id: str) -> User | None:
    """Linear lookup by the permissive integer parse of a path id."""
    return store.find(parse_int_prefix(raw_id))


def get_user(store: UserStore, raw_id: str) -> User:
    user = find_user(store, raw_id)
    if user is None:
        raise UserNotFoundError()
    return user


def _validated_nombre(payload: dict[str, Any]) -> str:
    result = validate_user(payload)
    if isinstance(result, ValidationFailure):
        raise UserValidationError(result.message)
    return result.value.nombre


def create_user(store: UserStore, payload: dict[str, Any]) -> User:
    nombre = _validated_nombre(payload)
    user = store.add(nombre)
    logger.info("Created user id=%s", user.id)
    return user


def update_user(store: UserStore, raw_id: str, payload: dict[str, Any]) -> User:
    """Replace the name of an existing user; a missing user wins over a bad payload."""
    user = get_user(store, raw_id)
    user.nombre = _validated_nombre(payload)
    logger.info("Updated user id=%s", user.id)
    return user


def delete_user(store: UserStore, raw_id: str) -> User:
    user = get_user(store, raw_id)
    store.remove(user)
    logger.info("Deleted user id=%s", user.id)
    return user
