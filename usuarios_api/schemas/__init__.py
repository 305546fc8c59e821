"""Schema exports."""

from usuarios_api.schemas.user import UserPayload, UserRead

__all__ = [
    "UserPayload",
    "UserRead",
]
