"""In-memory user store owned by the application instance."""

import logging
from collections.abc import Iterable, Iterator

from usuarios_api.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Ordered collection of users kept in process memory.

    Insertion order is preserved. New ids follow the current count
    (``len + 1``) but never fall back to an id that was already issued,
    so deleting a record does not free its id. Mutation is not
    synchronized.
    """

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: list[User] = list(users)
        self._last_id: int = max((user.id for user in self._users), default=0)

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def all(self) -> list[User]:
        return list(self._users)

    def find(self, user_id: int | None) -> User | None:
        """Return the first user whose id equals ``user_id``."""
        if user_id is None:
            return None
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def next_id(self) -> int:
        return max(len(self._users) + 1, self._last_id + 1)

    def add(self, nombre: str) -> User:
        user = User(id=self.next_id(), nombre=nombre)
        self._users.append(user)
        self._last_id = user.id
        logger.debug("Added user id=%s", user.id)
        return user

    def remove(self, user: User) -> User:
        self._users.remove(user)
        logger.debug("Removed user id=%s", user.id)
        return user
