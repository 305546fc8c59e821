"""User endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from usuarios_api.api.dependencies import get_settings, get_store, read_body
from usuarios_api.core.config import Settings
from usuarios_api.core.exceptions import UserNotFoundError
from usuarios_api.db.store import UserStore
from usuarios_api.schemas.user import UserRead
from usuarios_api.services.user_service import (
    create_user,
    delete_user,
    find_user,
    list_users,
    update_user,
)

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {404: {"description": "User not found"}}
INVALID_RESPONSE: dict[int | str, dict[str, Any]] = {400: {"description": "Validation failed"}}


@router.get("", response_model=list[UserRead], summary="List users")
def list_usuarios(store: UserStore = Depends(get_store)) -> list[UserRead]:
    """Return every user in insertion order."""
    return [UserRead.model_validate(user) for user in list_users(store)]


@router.get("/{user_id}", response_model=UserRead, responses=NOT_FOUND_RESPONSE, summary="Get user")
def get_usuario(
    user_id: str,
    store: UserStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> UserRead:
    user = find_user(store, user_id)
    if user is None:
        if settings.preserve_get_fallthrough:
            # The 404 goes out; the follow-up send of the missing record is what fails.
            logger.error(
                "Cannot set headers after they are sent to the client (GET /api/usuarios/%s)",
                user_id,
            )
        raise UserNotFoundError()
    return UserRead.model_validate(user)


@router.post("", response_model=UserRead, responses=INVALID_RESPONSE, summary="Create user")
def create_usuario(
    payload: dict[str, Any] = Depends(read_body),
    store: UserStore = Depends(get_store),
) -> UserRead:
    return UserRead.model_validate(create_user(store, payload))


@router.put(
    "/{user_id}",
    response_model=UserRead,
    responses={**NOT_FOUND_RESPONSE, **INVALID_RESPONSE},
    summary="Update user",
)
def update_usuario(
    user_id: str,
    payload: dict[str, Any] = Depends(read_body),
    store: UserStore = Depends(get_store),
) -> UserRead:
    return UserRead.model_validate(update_user(store, user_id, payload))


@router.delete("/{user_id}", response_model=UserRead, responses=NOT_FOUND_RESPONSE, summary="Delete user")
def delete_usuario(user_id: str, store: UserStore = Depends(get_store)) -> UserRead:
    return UserRead.model_validate(delete_user(store, user_id))
