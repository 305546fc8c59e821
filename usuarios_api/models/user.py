"""User record model."""

from dataclasses import dataclass


@dataclass
class User:
    """A single user record held by the store."""

    id: int
    nombre: str
