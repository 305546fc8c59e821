"""Seed data helpers."""

import logging

from usuarios_api.db.store import UserStore
from usuarios_api.models.user import User

logger = logging.getLogger(__name__)

SEED_USERS: tuple[tuple[int, str], ...] = (
    (1, "Juan"),
    (2, "Ana"),
    (3, "Karen"),
    (4, "Luis"),
)


def build_seeded_store() -> UserStore:
    """Return a fresh store holding the four seeded users."""
    store = UserStore(User(id=user_id, nombre=nombre) for user_id, nombre in SEED_USERS)
    logger.debug("Seeded store with %s users", len(store))
    return store
