"""Application models package."""

from usuarios_api.models.user import User

__all__ = ["User"]
